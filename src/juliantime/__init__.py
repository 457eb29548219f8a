"""
juliantime — conversions between the storage encoding of DATE/TIMESTAMP
values and calendar fields or text.

Internally DATE and TIMESTAMP are stored the way PostgreSQL stores them:
- DATE, 4 bytes, Julian days
- TIMESTAMP, 8 bytes, Julian microseconds

All functions are pure and stateless; they are safe to call concurrently.
"""

from juliantime.codec import (
    MAX_SUPPORTED_YEAR,
    MAX_TIMESTAMP_JULIAN_DAY,
    MICROSECONDS_PER_DAY,
    MIN_JULIAN_DAY,
    date_from_calendar,
    date_from_timestamp,
    decode_date,
    decode_timestamp,
    encode_date,
    encode_timestamp_from_fields,
    raw_microseconds,
    time_of_day_microseconds,
    timestamp_from_calendar,
    timestamp_from_date,
)
from juliantime.domain import (
    CalendarDate,
    CalendarDateTime,
    Date,
    FormatMismatchError,
    ParseFailure,
    Parsed,
    ParseResult,
    Timestamp,
)
from juliantime.interop import (
    from_python_date,
    from_python_datetime,
    to_python_date,
    to_python_datetime,
)
from juliantime.text import (
    format_date,
    format_timestamp,
    parse_date,
    parse_timestamp,
)

__all__ = [
    # Types
    "Date",
    "Timestamp",
    "CalendarDate",
    "CalendarDateTime",
    "Parsed",
    "ParseFailure",
    "ParseResult",
    "FormatMismatchError",
    # Range
    "MIN_JULIAN_DAY",
    "MAX_SUPPORTED_YEAR",
    "MAX_TIMESTAMP_JULIAN_DAY",
    "MICROSECONDS_PER_DAY",
    # Date codec
    "encode_date",
    "decode_date",
    "date_from_calendar",
    # Timestamp codec
    "timestamp_from_date",
    "encode_timestamp_from_fields",
    "timestamp_from_calendar",
    "date_from_timestamp",
    "time_of_day_microseconds",
    "raw_microseconds",
    "decode_timestamp",
    # Text
    "parse_date",
    "parse_timestamp",
    "format_date",
    "format_timestamp",
    # datetime interop
    "to_python_date",
    "from_python_date",
    "to_python_datetime",
    "from_python_datetime",
]
