"""
Constants — Единицы, разрядности и границы диапазонов

Все параметры кодеков собраны здесь. Значения определяют формат хранения
и НЕ могут меняться без миграции ранее сохранённых данных.
"""

from typing import Final


# =============================================================================
# ЕДИНИЦЫ ВРЕМЕНИ
# =============================================================================

MICROSECONDS_PER_SECOND: Final[int] = 1000 * 1000
MICROSECONDS_PER_MINUTE: Final[int] = 60 * MICROSECONDS_PER_SECOND
MICROSECONDS_PER_HOUR: Final[int] = 60 * MICROSECONDS_PER_MINUTE
MICROSECONDS_PER_DAY: Final[int] = 24 * MICROSECONDS_PER_HOUR  # 86_400_000_000

# Максимальная точность дробной части секунды в тексте (микросекунды)
MAX_FRACTION_DIGITS: Final[int] = 6


# =============================================================================
# РАЗРЯДНОСТЬ ХРАНЕНИЯ
# =============================================================================

# DATE: 4 байта, юлианские дни
DATE_WIDTH_BYTES: Final[int] = 4

# TIMESTAMP: 8 байт, юлианские микросекунды
TIMESTAMP_WIDTH_BYTES: Final[int] = 8

UINT32_MASK: Final[int] = (1 << (8 * DATE_WIDTH_BYTES)) - 1
UINT64_MASK: Final[int] = (1 << (8 * TIMESTAMP_WIDTH_BYTES)) - 1


# =============================================================================
# ЮЛИАНСКИЕ ЦИКЛЫ
# =============================================================================

# Дней в 400-летнем григорианском цикле
DAYS_IN_GREGORIAN_CYCLE: Final[int] = 146097

# Дней в 4-летнем цикле (3 * 365 + 366)
DAYS_IN_JULIAN_QUADRENNIUM: Final[int] = 1461

# Сдвиг года, после которого все промежуточные значения неотрицательны.
# Январь и февраль относятся к предыдущему псевдо-году (месяцы 13 и 14).
JULIAN_YEAR_SHIFT: Final[int] = 4800


# =============================================================================
# ПОДДЕРЖИВАЕМЫЙ ДИАПАЗОН
# =============================================================================

# Юлианский день 0 == -4713-11-24 (пролептический григорианский календарь)
MIN_JULIAN_DAY: Final[int] = 0
MIN_SUPPORTED_DATE: Final[tuple[int, int, int]] = (-4713, 11, 24)

# До 31 декабря этого года все промежуточные значения кодеков < 2**32
MAX_SUPPORTED_YEAR: Final[int] = 11_700_000

# Последний день, каждая микросекунда которого помещается в 64 бита
MAX_TIMESTAMP_JULIAN_DAY: Final[int] = (UINT64_MASK + 1) // MICROSECONDS_PER_DAY - 1
