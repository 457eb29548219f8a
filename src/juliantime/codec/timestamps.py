"""
Timestamps — Кодек временных меток

TIMESTAMP = DATE * MICROSECONDS_PER_DAY + микросекунды от полуночи.

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Вся арифметика беззнаковая 64-битная (маска UINT64_MASK)
2. date_from_timestamp(t) == t // MICROSECONDS_PER_DAY
3. Поля времени НЕ нормализуются и НЕ проверяются: hour=25 даёт метку
   на следующий день в 01:00, а не ошибку
"""

from juliantime.codec.constants import (
    MICROSECONDS_PER_DAY,
    MICROSECONDS_PER_HOUR,
    MICROSECONDS_PER_MINUTE,
    MICROSECONDS_PER_SECOND,
    UINT32_MASK,
    UINT64_MASK,
)
from juliantime.codec.julian import encode_date, ymd_from_julian_day
from juliantime.domain.calendar import CalendarDateTime, Date, Timestamp


def timestamp_from_date(date: Date) -> Timestamp:
    """
    Метка полуночи, с которой начинается дата.

    Args:
        date: Внутреннее представление даты

    Returns:
        Timestamp (uint64)
    """
    return Timestamp((date * MICROSECONDS_PER_DAY) & UINT64_MASK)


def encode_timestamp_from_fields(
    year: int,
    month: int,
    day: int,
    hour: int,
    minute: int,
    second: int,
    microsecond: int,
) -> Timestamp:
    """
    Кодирование даты и времени суток во внутреннее представление TIMESTAMP.

    Поля времени складываются как есть, без нормализации:

        ts = date * 86_400_000_000
           + hour * 3_600_000_000
           + minute * 60_000_000
           + second * 1_000_000
           + microsecond

    Args:
        year, month, day: Календарная дата (не проверяется)
        hour, minute, second: Время суток (не проверяется)
        microsecond: Микросекунды внутри секунды (не проверяются)

    Returns:
        Timestamp (uint64)

    Examples:
        >>> encode_timestamp_from_fields(2020, 1, 1, 0, 0, 0, 0)
        212444640000000000
    """
    ts_val = timestamp_from_date(encode_date(year, month, day))
    ts_val += hour * MICROSECONDS_PER_HOUR
    ts_val += minute * MICROSECONDS_PER_MINUTE
    ts_val += second * MICROSECONDS_PER_SECOND
    ts_val += microsecond
    return Timestamp(ts_val & UINT64_MASK)


def timestamp_from_calendar(calendar_datetime: CalendarDateTime) -> Timestamp:
    """Кодирование CalendarDateTime во внутреннее представление TIMESTAMP."""
    return encode_timestamp_from_fields(*calendar_datetime.as_tuple())


def date_from_timestamp(timestamp: Timestamp) -> Date:
    """
    Дата, которой принадлежит метка (floor-деление на длину суток).
    """
    return Date((timestamp // MICROSECONDS_PER_DAY) & UINT32_MASK)


def time_of_day_microseconds(timestamp: Timestamp) -> int:
    """Микросекунды от полуночи даты метки, 0 <= result < MICROSECONDS_PER_DAY."""
    return timestamp % MICROSECONDS_PER_DAY


def raw_microseconds(timestamp: Timestamp) -> int:
    """
    Исходное 64-битное значение метки (юлианские микросекунды).

    Используется вызывающим кодом для сериализации.
    """
    return int(timestamp)


def decode_timestamp(timestamp: Timestamp) -> CalendarDateTime:
    """
    Разложение TIMESTAMP на календарные поля и время суток.

    Args:
        timestamp: Внутреннее представление (любое uint64)

    Returns:
        CalendarDateTime
    """
    year, month, day = ymd_from_julian_day(date_from_timestamp(timestamp))

    remaining_us = time_of_day_microseconds(timestamp)
    hour, remaining_us = divmod(remaining_us, MICROSECONDS_PER_HOUR)
    minute, remaining_us = divmod(remaining_us, MICROSECONDS_PER_MINUTE)
    second, microsecond = divmod(remaining_us, MICROSECONDS_PER_SECOND)

    return CalendarDateTime(
        year=year,
        month=month,
        day=day,
        hour=hour,
        minute=minute,
        second=second,
        microsecond=microsecond,
    )
