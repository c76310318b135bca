from .iso8601 import parse_date, parse_date_and_or_time, parse_time, parse_utc_offset

__all__ = [
    "parse_date",
    "parse_date_and_or_time",
    "parse_time",
    "parse_utc_offset",
]
