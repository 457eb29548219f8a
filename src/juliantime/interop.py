"""
Interop — Мост к типам стандартного модуля datetime

datetime поддерживает только годы 1-9999; за пределами этого диапазона
ValueError/OverflowError из datetime пробрасывается вызывающему коду.
"""

import datetime as dt

from juliantime.codec.julian import decode_date, encode_date
from juliantime.codec.timestamps import decode_timestamp, encode_timestamp_from_fields
from juliantime.domain.calendar import Date, Timestamp


def to_python_date(date: Date) -> dt.date:
    """DATE → datetime.date"""
    calendar_date = decode_date(date)
    return dt.date(calendar_date.year, calendar_date.month, calendar_date.day)


def from_python_date(value: dt.date) -> Date:
    """
    datetime.date → DATE

    datetime.datetime тоже является date: время суток отбрасывается.
    """
    return encode_date(value.year, value.month, value.day)


def to_python_datetime(timestamp: Timestamp) -> dt.datetime:
    """
    TIMESTAMP → naive datetime.datetime (нулевое смещение).
    """
    fields = decode_timestamp(timestamp)
    return dt.datetime(*fields.as_tuple())


def from_python_datetime(value: dt.datetime) -> Timestamp:
    """
    datetime.datetime → TIMESTAMP

    Aware datetime сначала приводится к UTC, как смещение при разборе текста.
    Naive datetime считается уже заданным с нулевым смещением.
    """
    if value.tzinfo is not None and value.utcoffset() is not None:
        value = value.astimezone(dt.timezone.utc)

    return encode_timestamp_from_fields(
        value.year,
        value.month,
        value.day,
        value.hour,
        value.minute,
        value.second,
        value.microsecond,
    )
