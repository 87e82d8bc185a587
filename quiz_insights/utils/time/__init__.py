"""Time utilities - date bounds and timezone handling"""
from .timeutils import report_timezone, parse_date_safe, start_of_day, end_of_day, day_bounds_for, to_iso_string
