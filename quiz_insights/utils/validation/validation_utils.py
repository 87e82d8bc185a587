"""Consolidated Validation Utilities - Single Source of Truth"""
import re
from datetime import date
from typing import Any, Dict, Optional
from quiz_insights.exceptions.exceptions import ValidationError
from quiz_insights.utils.time.timeutils import parse_date_safe

LEADING_INT_PATTERN = re.compile(r"^\s*([+-]?\d+)", re.ASCII)

class ValidationUtils:
    """Unified validation utilities"""

    @staticmethod
    def validate_required_fields(data: Dict, *fields: str) -> None:
        """Validate required fields exist and are not empty"""
        missing = [f for f in fields if data.get(f) in (None, "")]
        if missing:
            raise ValidationError(f"Missing required fields: {', '.join(missing)}")

    @staticmethod
    def parse_leading_int(value: Any) -> Optional[int]:
        """Integer prefix of a string ("12abc" -> 12), None when there is none"""
        if isinstance(value, bool):
            return None
        if isinstance(value, int):
            return value
        match = LEADING_INT_PATTERN.match(str(value))
        return int(match.group(1)) if match else None

    @staticmethod
    def parse_date(value: Any) -> Optional[date]:
        """Calendar date from a date, datetime or ISO string, None if unparseable"""
        if isinstance(value, date):
            return value if type(value) is date else value.date()
        try:
            return parse_date_safe(str(value).strip())
        except ValueError:
            return None
