"""
Тесты для моста к datetime
"""

import datetime as dt

import pytest

from juliantime import (
    encode_date,
    encode_timestamp_from_fields,
    from_python_date,
    from_python_datetime,
    parse_timestamp,
    to_python_date,
    to_python_datetime,
)


class TestPythonDate:
    """DATE <-> datetime.date"""

    def test_to_python_date(self) -> None:
        """2458850 → 2020-01-01"""
        assert to_python_date(encode_date(2020, 1, 1)) == dt.date(2020, 1, 1)

    def test_from_python_date(self) -> None:
        """1970-01-01 → 2440588"""
        assert from_python_date(dt.date(1970, 1, 1)) == 2440588

    def test_datetime_drops_time(self) -> None:
        """datetime.datetime кодируется как его дата"""
        assert from_python_date(dt.datetime(2020, 1, 1, 23, 59)) == encode_date(2020, 1, 1)

    def test_round_trip_extremes(self) -> None:
        """Границы datetime.date"""
        for value in (dt.date.min, dt.date.max):
            assert to_python_date(from_python_date(value)) == value

    def test_unrepresentable_year_propagates(self) -> None:
        """Юлианский день 0 (-4713 год) не помещается в datetime.date"""
        with pytest.raises(ValueError):
            to_python_date(0)


class TestPythonDatetime:
    """TIMESTAMP <-> datetime.datetime"""

    def test_naive(self) -> None:
        """Naive datetime считается заданным с нулевым смещением"""
        value = dt.datetime(2020, 1, 1, 11, 11, 11, 123000)
        assert from_python_datetime(value) == encode_timestamp_from_fields(
            2020, 1, 1, 11, 11, 11, 123000
        )

    def test_aware_normalized_like_parser(self) -> None:
        """Aware datetime нормализуется так же, как текст со смещением"""
        tz = dt.timezone(-dt.timedelta(hours=5))
        value = dt.datetime(2020, 1, 1, 0, 0, 0, tzinfo=tz)
        assert from_python_datetime(value) == parse_timestamp("2020-01-01T00:00:00-0500").value

    def test_to_python_datetime_is_naive(self) -> None:
        """Результат без tzinfo"""
        result = to_python_datetime(encode_timestamp_from_fields(2020, 1, 1, 5, 0, 0, 7))
        assert result == dt.datetime(2020, 1, 1, 5, 0, 0, 7)
        assert result.tzinfo is None

    def test_round_trip(self) -> None:
        """to(from(x)) == x"""
        value = dt.datetime(1999, 12, 31, 23, 59, 59, 999999)
        assert to_python_datetime(from_python_datetime(value)) == value
