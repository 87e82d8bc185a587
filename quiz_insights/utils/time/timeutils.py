"""Time utilities - DRY principle"""
from datetime import date, datetime, time, timezone, tzinfo
import logging
from typing import Optional, Union
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError
from quiz_insights.config.settings import ReportConfig

logger = logging.getLogger(__name__)

END_OF_DAY = time(23, 59, 59, 999000)

def report_timezone(name: Optional[str] = None) -> tzinfo:
    """Timezone used to localize date-only filter bounds"""
    name = name or ReportConfig.TIMEZONE
    if name.upper() == "UTC":
        return timezone.utc
    try:
        return ZoneInfo(name)
    except (ZoneInfoNotFoundError, ValueError, OSError):
        logger.warning("Unknown report timezone %r, using UTC", name)
        return timezone.utc

def parse_date_safe(date_str: str) -> date:
    """Parse YYYY-MM-DD, or a full ISO timestamp, to a calendar date"""
    try:
        return datetime.fromisoformat(date_str).date()
    except ValueError:
        return datetime.strptime(date_str, "%Y-%m-%d").date()

def start_of_day(day: date, tz: Optional[tzinfo] = None) -> datetime:
    return datetime.combine(day, time.min, tzinfo=tz)

def end_of_day(day: date, tz: Optional[tzinfo] = None) -> datetime:
    # 23:59:59.999 covers the whole end day
    return datetime.combine(day, END_OF_DAY, tzinfo=tz)

def day_bounds_for(timestamp: datetime, day_from: Optional[date], day_to: Optional[date]):
    """Build (start, end) bounds comparable with the given timestamp"""
    tz = report_timezone() if timestamp.tzinfo is not None else None
    start = start_of_day(day_from, tz) if day_from is not None else None
    end = end_of_day(day_to, tz) if day_to is not None else None
    return start, end

def to_iso_string(value: Union[datetime, date, None]) -> Optional[str]:
    return value.isoformat() if value is not None else None
