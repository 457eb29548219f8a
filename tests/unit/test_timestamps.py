"""
Тесты для Timestamp Codec (юлианские микросекунды)

Проверяет:
1. Формулу date * MICROSECONDS_PER_DAY + время суток
2. Отсутствие нормализации полей времени (hour=25 и т.п.)
3. Восстановление даты делением на длину суток
4. 64-битную разрядность и границу MAX_TIMESTAMP_JULIAN_DAY
"""

import pytest

from juliantime.codec import (
    MAX_TIMESTAMP_JULIAN_DAY,
    MICROSECONDS_PER_DAY,
    MICROSECONDS_PER_HOUR,
    MICROSECONDS_PER_MINUTE,
    MICROSECONDS_PER_SECOND,
    UINT64_MASK,
    date_from_timestamp,
    decode_timestamp,
    encode_date,
    encode_timestamp_from_fields,
    raw_microseconds,
    time_of_day_microseconds,
    timestamp_from_calendar,
    timestamp_from_date,
)
from juliantime.domain import CalendarDateTime

MIDNIGHT_2020_01_01 = 212_444_640_000_000_000


# =============================================================================
# КОНСТАНТЫ
# =============================================================================


class TestUnits:
    """Множители единиц"""

    def test_values(self) -> None:
        """Длины секунды, минуты, часа, суток в микросекундах"""
        assert MICROSECONDS_PER_SECOND == 1_000_000
        assert MICROSECONDS_PER_MINUTE == 60_000_000
        assert MICROSECONDS_PER_HOUR == 3_600_000_000
        assert MICROSECONDS_PER_DAY == 86_400_000_000


# =============================================================================
# КОДИРОВАНИЕ
# =============================================================================


class TestEncodeTimestamp:
    """encode_timestamp_from_fields / timestamp_from_date"""

    def test_midnight(self) -> None:
        """Полночь == дата * длина суток"""
        assert timestamp_from_date(encode_date(2020, 1, 1)) == MIDNIGHT_2020_01_01
        assert encode_timestamp_from_fields(2020, 1, 1, 0, 0, 0, 0) == MIDNIGHT_2020_01_01

    def test_time_of_day_fields(self) -> None:
        """Поля времени складываются в микросекунды"""
        ts = encode_timestamp_from_fields(2020, 1, 1, 11, 11, 11, 123000)
        assert ts == MIDNIGHT_2020_01_01 + 40_271_123_000

    def test_hour_25_overflows_into_next_day(self) -> None:
        """hour=25 не нормализуется и не отвергается: следующий день, 01:00"""
        ts = encode_timestamp_from_fields(2020, 1, 1, 25, 0, 0, 0)
        assert ts == timestamp_from_date(encode_date(2020, 1, 2)) + MICROSECONDS_PER_HOUR
        assert date_from_timestamp(ts) == encode_date(2020, 1, 2)

    def test_large_microsecond_not_normalized(self) -> None:
        """microsecond >= 10**6 просто прибавляется"""
        assert encode_timestamp_from_fields(
            2020, 1, 1, 0, 0, 0, 2_500_000
        ) == encode_timestamp_from_fields(2020, 1, 1, 0, 0, 2, 500_000)

    def test_from_calendar(self) -> None:
        """CalendarDateTime кодируется так же, как отдельные поля"""
        fields = CalendarDateTime(
            year=2020, month=1, day=1, hour=11, minute=11, second=11, microsecond=123000
        )
        assert timestamp_from_calendar(fields) == encode_timestamp_from_fields(
            2020, 1, 1, 11, 11, 11, 123000
        )


# =============================================================================
# ДЕКОДИРОВАНИЕ
# =============================================================================


class TestDecodeTimestamp:
    """date_from_timestamp / time_of_day_microseconds / decode_timestamp"""

    def test_last_microsecond_of_day(self) -> None:
        """23:59:59.999999 всё ещё принадлежит той же дате"""
        ts = encode_timestamp_from_fields(2020, 1, 1, 23, 59, 59, 999999)
        assert date_from_timestamp(ts) == encode_date(2020, 1, 1)
        assert date_from_timestamp(ts + 1) == encode_date(2020, 1, 2)

    def test_time_of_day(self) -> None:
        """Остаток от деления на длину суток"""
        ts = encode_timestamp_from_fields(2020, 1, 1, 11, 11, 11, 123000)
        assert time_of_day_microseconds(ts) == 40_271_123_000

    def test_decode_fields(self) -> None:
        """Разложение на все семь полей"""
        ts = encode_timestamp_from_fields(1999, 12, 31, 23, 59, 58, 1)
        assert decode_timestamp(ts).as_tuple() == (1999, 12, 31, 23, 59, 58, 1)

    def test_decode_julian_zero(self) -> None:
        """Метка 0 — полночь юлианского дня 0"""
        assert decode_timestamp(0).as_tuple() == (-4713, 11, 24, 0, 0, 0, 0)

    @pytest.mark.parametrize("value", [0, 1, MIDNIGHT_2020_01_01, UINT64_MASK])
    def test_raw_microseconds_identity(self, value: int) -> None:
        """raw_microseconds возвращает исходное значение"""
        assert raw_microseconds(value) == value
        assert type(raw_microseconds(value)) is int


# =============================================================================
# РАЗРЯДНОСТЬ
# =============================================================================


class TestRange:
    """Беззнаковая 64-битная арифметика"""

    def test_max_timestamp_julian_day(self) -> None:
        """Последний день, целиком помещающийся в 64 бита"""
        assert MAX_TIMESTAMP_JULIAN_DAY == 213_503_981
        last = timestamp_from_date(MAX_TIMESTAMP_JULIAN_DAY) + MICROSECONDS_PER_DAY - 1
        assert last <= UINT64_MASK
        assert (MAX_TIMESTAMP_JULIAN_DAY + 2) * MICROSECONDS_PER_DAY - 1 > UINT64_MASK

    def test_round_trip_at_max(self) -> None:
        """Последняя микросекунда диапазона декодируется в тот же день"""
        last = timestamp_from_date(MAX_TIMESTAMP_JULIAN_DAY) + MICROSECONDS_PER_DAY - 1
        assert date_from_timestamp(last) == MAX_TIMESTAMP_JULIAN_DAY
        assert decode_timestamp(last).as_tuple()[3:] == (23, 59, 59, 999999)

    def test_wraps_past_64_bits(self) -> None:
        """За пределами диапазона значение берётся по модулю 2**64"""
        day = MAX_TIMESTAMP_JULIAN_DAY + 2
        ts = timestamp_from_date(day)
        assert ts == (day * MICROSECONDS_PER_DAY) & UINT64_MASK
        assert ts < timestamp_from_date(MAX_TIMESTAMP_JULIAN_DAY)
