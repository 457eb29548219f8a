"""
Codec modules для juliantime

Целочисленные кодеки DATE (юлианские дни) и TIMESTAMP (юлианские микросекунды).
"""

# Constants
from juliantime.codec.constants import (
    DATE_WIDTH_BYTES,
    DAYS_IN_GREGORIAN_CYCLE,
    DAYS_IN_JULIAN_QUADRENNIUM,
    JULIAN_YEAR_SHIFT,
    MAX_FRACTION_DIGITS,
    MAX_SUPPORTED_YEAR,
    MAX_TIMESTAMP_JULIAN_DAY,
    MICROSECONDS_PER_DAY,
    MICROSECONDS_PER_HOUR,
    MICROSECONDS_PER_MINUTE,
    MICROSECONDS_PER_SECOND,
    MIN_JULIAN_DAY,
    MIN_SUPPORTED_DATE,
    TIMESTAMP_WIDTH_BYTES,
    UINT32_MASK,
    UINT64_MASK,
)

# Date codec
from juliantime.codec.julian import (
    date_from_calendar,
    decode_date,
    encode_date,
    julian_day_from_ymd,
    ymd_from_julian_day,
)

# Timestamp codec
from juliantime.codec.timestamps import (
    date_from_timestamp,
    decode_timestamp,
    encode_timestamp_from_fields,
    raw_microseconds,
    time_of_day_microseconds,
    timestamp_from_calendar,
    timestamp_from_date,
)

__all__ = [
    # Constants — Units
    "MICROSECONDS_PER_SECOND",
    "MICROSECONDS_PER_MINUTE",
    "MICROSECONDS_PER_HOUR",
    "MICROSECONDS_PER_DAY",
    "MAX_FRACTION_DIGITS",
    # Constants — Storage widths
    "DATE_WIDTH_BYTES",
    "TIMESTAMP_WIDTH_BYTES",
    "UINT32_MASK",
    "UINT64_MASK",
    # Constants — Julian cycles
    "DAYS_IN_GREGORIAN_CYCLE",
    "DAYS_IN_JULIAN_QUADRENNIUM",
    "JULIAN_YEAR_SHIFT",
    # Constants — Supported range
    "MIN_JULIAN_DAY",
    "MIN_SUPPORTED_DATE",
    "MAX_SUPPORTED_YEAR",
    "MAX_TIMESTAMP_JULIAN_DAY",
    # Date codec
    "julian_day_from_ymd",
    "ymd_from_julian_day",
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
]
