"""
Formatting — Каноническое текстовое представление

- DATE: YYYY-MM-DD
- TIMESTAMP: YYYY-MM-DD HH:MM:SS[.ffffff]

Дробная часть секунды выводится только если она ненулевая, хвостовые нули
отбрасываются: 11:11:11.123000 → "11:11:11.123", 11:11:11.000000 → "11:11:11".
Отрицательный год выводится со знаком и 4 цифрами: -0044.
"""

from juliantime.codec.constants import MAX_FRACTION_DIGITS
from juliantime.codec.julian import ymd_from_julian_day
from juliantime.codec.timestamps import decode_timestamp
from juliantime.domain.calendar import Date, Timestamp


def _format_ymd(year: int, month: int, day: int) -> str:
    if year < 0:
        return f"-{-year:04d}-{month:02d}-{day:02d}"
    return f"{year:04d}-{month:02d}-{day:02d}"


def format_date(date: Date) -> str:
    """
    Examples:
        >>> format_date(2451545)
        '2000-01-01'
    """
    return _format_ymd(*ymd_from_julian_day(date))


def format_timestamp(timestamp: Timestamp) -> str:
    """
    Examples:
        >>> format_timestamp(212444680271123000)
        '2020-01-01 11:11:11.123'
    """
    fields = decode_timestamp(timestamp)
    text = (
        f"{_format_ymd(fields.year, fields.month, fields.day)} "
        f"{fields.hour:02d}:{fields.minute:02d}:{fields.second:02d}"
    )
    if fields.microsecond:
        text += "." + f"{fields.microsecond:0{MAX_FRACTION_DIGITS}d}".rstrip("0")
    return text
