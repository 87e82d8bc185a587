"""Configuration settings - Configuration Layer (Environment Separated)"""
import os
import logging
from typing import Dict, Set
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError
from dotenv import load_dotenv

load_dotenv()

logger = logging.getLogger(__name__)

def safe_int_env(key: str, default: str) -> int:
    """Safely convert environment variable to int"""
    try:
        return int(os.getenv(key, default))
    except ValueError:
        return int(default)

def safe_float_env(key: str, default: str) -> float:
    """Safely convert environment variable to float"""
    try:
        return float(os.getenv(key, default))
    except ValueError:
        return float(default)

def safe_timezone_env(key: str, default: str = "UTC") -> str:
    """Read an IANA timezone name, falling back to default if it does not resolve"""
    name = os.getenv(key, default).strip() or default
    if name.upper() == "UTC":
        return name
    try:
        ZoneInfo(name)
    except (ZoneInfoNotFoundError, ValueError, OSError):
        logger.warning("Unknown timezone %r in %s, using %s", name, key, default)
        return default
    return name

# Question Types (Business Configuration)
SHORT_ANSWER = "short_answer"
MULTIPLE_CHOICE = "multiple_choice"
CHECKBOX = "checkbox"
QUESTION_TYPES: Set[str] = {SHORT_ANSWER, MULTIPLE_CHOICE, CHECKBOX}

# Number words understood by the short answer normalizer
NUMBER_WORDS: Dict[str, int] = {
    "zero": 0, "one": 1, "two": 2, "three": 3, "four": 4, "five": 5,
    "six": 6, "seven": 7, "eight": 8, "nine": 9, "ten": 10,
    "eleven": 11, "twelve": 12, "thirteen": 13, "fourteen": 14, "fifteen": 15,
    "sixteen": 16, "seventeen": 17, "eighteen": 18, "nineteen": 19,
    "twenty": 20, "thirty": 30, "forty": 40, "fifty": 50,
    "sixty": 60, "seventy": 70, "eighty": 80, "ninety": 90,
    "hundred": 100, "thousand": 1000
}
NUMBER_WORD_FILLERS: Set[str] = {"and"}

# Scoring Configuration
class ScoringConfig:
    PASS_THRESHOLD = safe_float_env("QUIZ_PASS_THRESHOLD", "0.5")
    TOP_ANSWERS_LIMIT = safe_int_env("QUIZ_TOP_ANSWERS_LIMIT", "5")

# Score bands used for per-response colouring (percentages)
class ScoreBandConfig:
    HIGH = safe_int_env("QUIZ_SCORE_BAND_HIGH", "80")
    MEDIUM = safe_int_env("QUIZ_SCORE_BAND_MEDIUM", "50")

# Report Configuration
class ReportConfig:
    TIMEZONE = safe_timezone_env("QUIZ_REPORT_TIMEZONE", "UTC")
    NO_ANSWER_TEXT = "No answer"

# Parallel scoring for large cohorts
class ProcessingConfig:
    PARALLEL_SCORING_THRESHOLD = safe_int_env("QUIZ_PARALLEL_SCORING_THRESHOLD", "500")
    MAX_WORKERS = safe_int_env("QUIZ_MAX_WORKERS", "4")

# Logging Configuration
class LoggingConfig:
    LEVEL = os.getenv("QUIZ_LOG_LEVEL", "INFO").upper()
    LOG_DIR = os.getenv("QUIZ_LOG_DIR", os.path.join(os.getcwd(), "logs"))
    LOG_FILE_NAME = "quiz_insights.log"
    MAX_LOG_SIZE = 10 * 1024 * 1024  # 10 MB
    BACKUP_COUNT = 5
