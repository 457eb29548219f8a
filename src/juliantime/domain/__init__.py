"""
Domain value types: internal Date/Timestamp integers, calendar models,
and parse results.
"""

from juliantime.domain.calendar import (
    CalendarDate,
    CalendarDateTime,
    Date,
    Timestamp,
)
from juliantime.domain.results import (
    FormatMismatchError,
    ParseFailure,
    Parsed,
    ParseResult,
)

__all__ = [
    # Internal representation
    "Date",
    "Timestamp",
    # Calendar models
    "CalendarDate",
    "CalendarDateTime",
    # Parse results
    "Parsed",
    "ParseFailure",
    "ParseResult",
    "FormatMismatchError",
]
