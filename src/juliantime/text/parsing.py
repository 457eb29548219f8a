"""
Parsing — Разбор текстовых дат и временных меток

Форматы перебираются в фиксированном порядке, принимается первый, который
совпадает с текстом ЦЕЛИКОМ. Порядок важен: форматы со смещением идут
раньше более свободных, иначе свободный формат мог бы принять префикс строки
и потерять смещение.

Смещение (+hh, +hhmm, +hh:mm, Z) нормализуется к нулевому: результат
никогда не содержит информации о часовом поясе.

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Несовпадение формата → ParseFailure, без исключения
2. Значение не зависит от варианта записи ("T" или пробел, Z или +0000)
3. Дата должна существовать в пролептическом григорианском календаре:
   проверяется обратным декодированием, без отдельного правила високосности
4. Дата и метка должны лежать в поддерживаемом диапазоне: значения вне
   его отвергаются, а не переполняются
"""

import re
from dataclasses import dataclass
from typing import Final, Optional

from juliantime.codec.constants import (
    MAX_FRACTION_DIGITS,
    MAX_SUPPORTED_YEAR,
    MAX_TIMESTAMP_JULIAN_DAY,
    MICROSECONDS_PER_DAY,
    MICROSECONDS_PER_HOUR,
    MICROSECONDS_PER_MINUTE,
    MICROSECONDS_PER_SECOND,
    MIN_SUPPORTED_DATE,
    UINT32_MASK,
    UINT64_MASK,
)
from juliantime.codec.julian import julian_day_from_ymd, ymd_from_julian_day
from juliantime.domain.calendar import Date, Timestamp
from juliantime.domain.results import ParseFailure, Parsed, ParseResult


# =============================================================================
# ФОРМАТЫ
# =============================================================================

_DATE = r"(?P<year>-?\d{4})-(?P<month>\d{1,2})-(?P<day>\d{1,2})"
_TIME = (
    r"(?P<hour>\d{1,2}):(?P<minute>\d{1,2}):(?P<second>\d{1,2})"
    rf"(?:\.(?P<fraction>\d{{1,{MAX_FRACTION_DIGITS}}}))?"
)
_OFFSET = r"(?P<sign>[+-])(?P<offset_hour>\d{2})(?::?(?P<offset_minute>\d{2}))?"


@dataclass(frozen=True)
class TextFormat:
    """Именованный формат текста (имя в нотации strftime)."""

    name: str
    pattern: re.Pattern

    @classmethod
    def compile(cls, name: str, regex: str) -> "TextFormat":
        return cls(name=name, pattern=re.compile(regex, re.ASCII))

    def match(self, text: str) -> Optional[re.Match]:
        return self.pattern.fullmatch(text)


# От самого строгого к самому свободному
TIMESTAMP_FORMATS: Final[tuple[TextFormat, ...]] = (
    TextFormat.compile("%F %T%z", _DATE + " " + _TIME + _OFFSET),  # 2020-01-01 11:11:11.123-0500
    TextFormat.compile("%F %TZ", _DATE + " " + _TIME + "Z"),  # 2020-01-01 11:11:11.123Z
    TextFormat.compile("%F %T", _DATE + " " + _TIME),  # 2020-01-01 11:11:11.123
    TextFormat.compile("%FT%T%z", _DATE + "T" + _TIME + _OFFSET),  # 2020-01-01T11:11:11.123-0500
    TextFormat.compile("%FT%TZ", _DATE + "T" + _TIME + "Z"),  # 2020-01-01T11:11:11.123Z
    TextFormat.compile("%FT%T", _DATE + "T" + _TIME),  # 2020-01-01T11:11:11.123
    TextFormat.compile("%F", _DATE),  # 2020-01-01
)

DATE_FORMATS: Final[tuple[TextFormat, ...]] = (
    TextFormat.compile("%F", _DATE),  # 2020-01-01
)


# =============================================================================
# РАЗБОР ПОЛЕЙ
# =============================================================================


def _first_match(
    formats: tuple[TextFormat, ...], text: str
) -> Optional[tuple[TextFormat, re.Match]]:
    for fmt in formats:
        match = fmt.match(text)
        if match is not None:
            return fmt, match
    return None


def _julian_day(match: re.Match, max_julian_day: int = UINT32_MASK) -> Optional[int]:
    """
    Номер юлианского дня или None, если такой даты нет в календаре
    или она вне [MIN_SUPPORTED_DATE, max_julian_day].
    """
    ymd = (int(match["year"]), int(match["month"]), int(match["day"]))
    if ymd < MIN_SUPPORTED_DATE or ymd[0] > MAX_SUPPORTED_YEAR:
        return None
    julian_day = julian_day_from_ymd(*ymd)
    if ymd_from_julian_day(julian_day) != ymd:
        return None
    if julian_day > max_julian_day:
        return None
    return julian_day


def _time_of_day(match: re.Match) -> Optional[int]:
    """Микросекунды от полуночи; 0 для форматов без времени."""
    if match.groupdict().get("hour") is None:
        return 0

    hour, minute, second = int(match["hour"]), int(match["minute"]), int(match["second"])
    if hour > 23 or minute > 59 or second > 59:
        return None

    fraction = match["fraction"] or ""
    microsecond = int(fraction.ljust(MAX_FRACTION_DIGITS, "0"))

    return (
        hour * MICROSECONDS_PER_HOUR
        + minute * MICROSECONDS_PER_MINUTE
        + second * MICROSECONDS_PER_SECOND
        + microsecond
    )


def _offset(match: re.Match) -> Optional[int]:
    """Смещение от нулевого пояса в микросекундах; 0 для Z и форматов без смещения."""
    if match.groupdict().get("sign") is None:
        return 0

    hours = int(match["offset_hour"])
    minutes = int(match["offset_minute"] or 0)
    if hours > 23 or minutes > 59:
        return None

    offset_us = hours * MICROSECONDS_PER_HOUR + minutes * MICROSECONDS_PER_MINUTE
    return -offset_us if match["sign"] == "-" else offset_us


# =============================================================================
# PUBLIC API
# =============================================================================


def parse_date(text: str) -> ParseResult[Date]:
    """
    Разбор даты вида YYYY-MM-DD.

    Args:
        text: Произвольный текст

    Returns:
        Parsed[Date] при успехе, ParseFailure иначе

    Examples:
        >>> parse_date("2020-01-01").value
        2458850
        >>> parse_date("01/01/2020").ok
        False
    """
    found = _first_match(DATE_FORMATS, text)
    if found is not None:
        fmt, match = found
        julian_day = _julian_day(match)
        if julian_day is not None:
            return Parsed(value=Date(julian_day), pattern=fmt.name)

    return ParseFailure(text=text)


def parse_timestamp(text: str) -> ParseResult[Timestamp]:
    """
    Разбор временной метки.

    Форматы (в порядке перебора):
        1. YYYY-MM-DD HH:MM:SS[.ffffff]<offset>
        2. YYYY-MM-DD HH:MM:SS[.ffffff]Z
        3. YYYY-MM-DD HH:MM:SS[.ffffff]
        4. YYYY-MM-DDTHH:MM:SS[.ffffff]<offset>
        5. YYYY-MM-DDTHH:MM:SS[.ffffff]Z
        6. YYYY-MM-DDTHH:MM:SS[.ffffff]
        7. YYYY-MM-DD

    Метка со смещением приводится к нулевому смещению:
    "2020-01-01T00:00:00-0500" == "2020-01-01T05:00:00Z".

    Args:
        text: Произвольный текст

    Returns:
        Parsed[Timestamp] при успехе, ParseFailure иначе
    """
    found = _first_match(TIMESTAMP_FORMATS, text)
    if found is not None:
        fmt, match = found
        julian_day = _julian_day(match, MAX_TIMESTAMP_JULIAN_DAY)
        time_of_day = _time_of_day(match)
        offset = _offset(match)
        if julian_day is not None and time_of_day is not None and offset is not None:
            ts_val = julian_day * MICROSECONDS_PER_DAY + time_of_day - offset
            # Смещение не должно выводить метку за пределы uint64
            if 0 <= ts_val <= UINT64_MASK:
                return Parsed(value=Timestamp(ts_val), pattern=fmt.name)

    return ParseFailure(text=text)
