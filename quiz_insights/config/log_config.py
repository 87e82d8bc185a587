"""
Logging configuration for quiz insights.
Centralizes all logging setup so modules only ask for a named logger.
"""
import os
import time
import logging
from logging.handlers import RotatingFileHandler

from quiz_insights.config.settings import LoggingConfig

ROOT_LOGGER_NAME = "quiz_insights"
LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'

# Filter to prevent duplicate log messages
class DuplicateFilter(logging.Filter):
    def __init__(self, name=''):
        super().__init__(name)
        self.last_log = None
        self.last_time = 0

    def filter(self, record):
        current_log = (record.msg, record.args)
        current_time = time.time()

        # Same message and arguments within 0.1 seconds is dropped
        if current_log == self.last_log and current_time - self.last_time < 0.1:
            return False

        self.last_log = current_log
        self.last_time = current_time
        return True

def setup_logging(log_dir=None, level=None, to_file=True):
    """
    Set up handlers on the package root logger.

    Args:
        log_dir: Directory for the rotating log file, defaults to QUIZ_LOG_DIR
        level: Log level name, defaults to QUIZ_LOG_LEVEL
        to_file: Attach the rotating file handler as well as the console one

    Returns:
        The configured package root logger
    """
    logger = logging.getLogger(ROOT_LOGGER_NAME)

    # Only configure if handlers haven't been added yet
    if logger.handlers:
        return logger

    logger.setLevel(level or LoggingConfig.LEVEL)
    logger.addFilter(DuplicateFilter())
    formatter = logging.Formatter(LOG_FORMAT)

    console_handler = logging.StreamHandler()
    console_handler.setFormatter(formatter)
    logger.addHandler(console_handler)

    if to_file:
        log_dir = log_dir or LoggingConfig.LOG_DIR
        try:
            os.makedirs(log_dir, exist_ok=True)
            # delay=True keeps the file closed until the first record
            file_handler = RotatingFileHandler(
                os.path.join(log_dir, LoggingConfig.LOG_FILE_NAME),
                maxBytes=LoggingConfig.MAX_LOG_SIZE,
                backupCount=LoggingConfig.BACKUP_COUNT,
                delay=True
            )
            file_handler.setFormatter(formatter)
            logger.addHandler(file_handler)
        except OSError as e:
            logger.warning("Could not set up file logging: %s", e)

    return logger

def get_logger(module_name=None):
    """
    Get a logger below the package root.

    Args:
        module_name: Optional dotted suffix, e.g. "services.report"

    Returns:
        Logger instance
    """
    name = f"{ROOT_LOGGER_NAME}.{module_name}" if module_name else ROOT_LOGGER_NAME
    return logging.getLogger(name)
