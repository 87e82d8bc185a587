"""Centralized error handling and responses - DRY principle"""
import logging
from typing import Tuple
from quiz_insights.exceptions.exceptions import ValidationError, FormMismatchError

logger = logging.getLogger(__name__)


def handle_service_error(e: Exception) -> Tuple[dict, int]:
    """Centralized error handling for report services"""

    if isinstance(e, ValidationError):
        return {"success": False, "message": str(e)}, 400

    elif isinstance(e, FormMismatchError):
        return {"success": False, "message": str(e)}, 409

    elif isinstance(e, ValueError):
        return {"success": False, "message": str(e)}, 400

    else:
        sanitized_error = str(e).replace('\n', ' ').replace('\r', ' ')[:500]
        logger.error(f"Unexpected error: {sanitized_error}")
        return {"success": False, "message": "Server error"}, 500
