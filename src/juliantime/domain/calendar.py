"""
Calendar — Значения дат и временных меток

Внутреннее представление (совместимо с ранее сохранёнными значениями):
- Date: 4 байта, беззнаковое целое, номер юлианского дня
- Timestamp: 8 байт, беззнаковое целое, микросекунды от начала юлианского дня 0

Внешнее представление:
- CalendarDate: (year, month, day)
- CalendarDateTime: CalendarDate + (hour, minute, second, microsecond)

Immutable Pydantic модели. Диапазоны полей НЕ проверяются: валидация
календарных компонент не является задачей этого слоя.
"""

from typing import NewType

from pydantic import BaseModel, Field


# =============================================================================
# ВНУТРЕННЕЕ ПРЕДСТАВЛЕНИЕ
# =============================================================================

# Номер юлианского дня (uint32)
Date = NewType("Date", int)

# Микросекунды от полуночи юлианского дня 0 (uint64)
Timestamp = NewType("Timestamp", int)


# =============================================================================
# ВНЕШНЕЕ ПРЕДСТАВЛЕНИЕ
# =============================================================================


class CalendarDate(BaseModel):
    """
    Дата пролептического григорианского календаря.

    Год астрономический: 1 BCE == 0, 2 BCE == -1.
    """

    year: int = Field(..., description="Год (может быть нулевым или отрицательным)")
    month: int = Field(..., description="Месяц, 1-12")
    day: int = Field(..., description="День месяца, 1-31")

    model_config = {"frozen": True}  # Immutable

    def as_tuple(self) -> tuple[int, int, int]:
        """(year, month, day)"""
        return (self.year, self.month, self.day)


class CalendarDateTime(BaseModel):
    """
    Дата и время суток без смещения часового пояса.
    """

    year: int = Field(..., description="Год (может быть нулевым или отрицательным)")
    month: int = Field(..., description="Месяц, 1-12")
    day: int = Field(..., description="День месяца, 1-31")
    hour: int = Field(0, description="Час, 0-23")
    minute: int = Field(0, description="Минута, 0-59")
    second: int = Field(0, description="Секунда, 0-59")
    microsecond: int = Field(0, description="Микросекунда внутри секунды, 0-999999")

    model_config = {"frozen": True}  # Immutable

    @property
    def date(self) -> CalendarDate:
        """Календарная часть без времени суток."""
        return CalendarDate(year=self.year, month=self.month, day=self.day)

    def as_tuple(self) -> tuple[int, int, int, int, int, int, int]:
        """(year, month, day, hour, minute, second, microsecond)"""
        return (
            self.year,
            self.month,
            self.day,
            self.hour,
            self.minute,
            self.second,
            self.microsecond,
        )
