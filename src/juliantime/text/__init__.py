"""
Text modules для juliantime

Разбор и форматирование текстовых дат и временных меток.
"""

from juliantime.text.formatting import format_date, format_timestamp
from juliantime.text.parsing import (
    DATE_FORMATS,
    TIMESTAMP_FORMATS,
    TextFormat,
    parse_date,
    parse_timestamp,
)

__all__ = [
    # Parsing
    "DATE_FORMATS",
    "TIMESTAMP_FORMATS",
    "TextFormat",
    "parse_date",
    "parse_timestamp",
    # Formatting
    "format_date",
    "format_timestamp",
]
