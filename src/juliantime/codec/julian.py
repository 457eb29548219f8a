"""
Julian — Кодек даты в номер юлианского дня

Алгоритм date2j()/j2date() из PostgreSQL (backend/utils/adt/datetime.c).
Portions Copyright (c) 1996-2020, PostgreSQL Global Development Group
Portions Copyright (c) 1994, Regents of the University of California

Год перебазируется так, что арифметический год начинается с марта:
январь и февраль становятся месяцами 13 и 14 предыдущего псевдо-года.
Високосный день оказывается последним днём псевдо-года, поэтому правило
"делится на 4, кроме делящихся на 100, кроме делящихся на 400" следует из
слагаемых year/4 - century + century/4 без отдельной проверки.

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Вся арифметика беззнаковая 32-битная (маска UINT32_MASK), деление с floor
2. decode_date(encode_date(y, m, d)) == (y, m, d) для всех реальных дат
   в поддерживаемом диапазоне
3. Результат бит-в-бит совпадает с ранее сохранёнными значениями
4. Поля НЕ валидируются: для несуществующих дат результат не определён
"""

from juliantime.codec.constants import (
    DAYS_IN_GREGORIAN_CYCLE,
    DAYS_IN_JULIAN_QUADRENNIUM,
    JULIAN_YEAR_SHIFT,
    UINT32_MASK,
)
from juliantime.domain.calendar import CalendarDate, Date


def _u32(value: int) -> int:
    return value & UINT32_MASK


def _i32(value: int) -> int:
    value &= UINT32_MASK
    return value - (1 << 32) if value & 0x80000000 else value


# =============================================================================
# ЦЕЛОЧИСЛЕННЫЕ ПРИМИТИВЫ
# =============================================================================


def julian_day_from_ymd(year: int, month: int, day: int) -> int:
    """
    Номер юлианского дня для (year, month, day).

    Формула:
        month > 2:  m = month + 1,  y = year + 4800
        month <= 2: m = month + 13, y = year + 4799
        c = y / 100
        jd = 365*y - 32167 + y/4 - c + c/4 + 7834*m/256 + day

    7834/256 ≈ 30.6 — fixed-point накопление длин месяцев начиная с марта.

    Args:
        year: Год (астрономический, знаковый)
        month: Месяц 1-12 (не проверяется)
        day: День 1-31 (не проверяется)

    Returns:
        Номер юлианского дня, uint32

    Examples:
        >>> julian_day_from_ymd(2000, 1, 1)
        2451545
        >>> julian_day_from_ymd(1970, 1, 1)
        2440588
    """
    if month > 2:
        month += 1
        year += JULIAN_YEAR_SHIFT
    else:
        month += 13
        year += JULIAN_YEAR_SHIFT - 1

    y = _u32(year)
    m = _u32(month)

    century = y // 100
    julian = _u32(y * 365 - 32167)
    julian = _u32(julian + y // 4 - century + century // 4)
    julian = _u32(julian + 7834 * m // 256 + _u32(day))
    return julian


def ymd_from_julian_day(julian_day: int) -> tuple[int, int, int]:
    """
    Обратное преобразование: номер юлианского дня → (year, month, day).

    Последовательно выделяет число 400-летних циклов, затем 4-летних,
    затем день псевдо-года (от 1 марта), из которого восстанавливаются
    месяц и день.

    Args:
        julian_day: Номер юлианского дня (uint32)

    Returns:
        (year, month, day)

    Examples:
        >>> ymd_from_julian_day(2451545)
        (2000, 1, 1)
        >>> ymd_from_julian_day(0)
        (-4713, 11, 24)
    """
    julian = _u32(_u32(julian_day) + 32044)

    quad = julian // DAYS_IN_GREGORIAN_CYCLE
    extra = _u32((julian - quad * DAYS_IN_GREGORIAN_CYCLE) * 4 + 3)

    julian = _u32(julian + 60 + quad * 3 + extra // DAYS_IN_GREGORIAN_CYCLE)
    quad = julian // DAYS_IN_JULIAN_QUADRENNIUM
    julian -= quad * DAYS_IN_JULIAN_QUADRENNIUM

    y = julian * 4 // DAYS_IN_JULIAN_QUADRENNIUM
    # Первый год четырёхлетки високосный (366 дней), остальные по 365
    if y != 0:
        julian = (julian + 305) % 365 + 123
    else:
        julian = (julian + 306) % 366 + 123
    y = _i32(y + quad * 4)
    quad = julian * 2141 // 65536

    year = y - JULIAN_YEAR_SHIFT
    month = (quad + 10) % 12 + 1
    day = julian - 7834 * quad // 256
    return (year, month, day)


# =============================================================================
# DATE CODEC
# =============================================================================


def encode_date(year: int, month: int, day: int) -> Date:
    """
    Кодирование календарной даты во внутреннее представление DATE.

    Args:
        year: Год (знаковый)
        month: Месяц 1-12
        day: День 1-31 (существование даты не проверяется)

    Returns:
        Date (uint32, юлианские дни)
    """
    return Date(julian_day_from_ymd(year, month, day))


def date_from_calendar(calendar_date: CalendarDate) -> Date:
    """Кодирование CalendarDate во внутреннее представление DATE."""
    return encode_date(calendar_date.year, calendar_date.month, calendar_date.day)


def decode_date(date: Date) -> CalendarDate:
    """
    Декодирование DATE в календарную дату.

    Args:
        date: Внутреннее представление (любое uint32)

    Returns:
        CalendarDate
    """
    year, month, day = ymd_from_julian_day(date)
    return CalendarDate(year=year, month=month, day=day)
