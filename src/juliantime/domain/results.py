"""
Результаты разбора текста.

Разбор никогда не бросает исключение при несовпадении формата: результатом
является либо Parsed (значение + имя совпавшего шаблона), либо ParseFailure
(исходный текст). У ParseFailure нет атрибута value, поэтому невалидное
значение нельзя прочитать по ошибке.
"""

from dataclasses import dataclass
from typing import ClassVar, Generic, TypeVar, Union

T = TypeVar("T")


class FormatMismatchError(ValueError):
    """Текст не соответствует ни одному из поддерживаемых форматов."""

    pass


@dataclass(frozen=True)
class Parsed(Generic[T]):
    """Успешный разбор."""

    value: T
    pattern: str

    ok: ClassVar[bool] = True

    def __bool__(self) -> bool:
        return True

    def unwrap(self) -> T:
        return self.value


@dataclass(frozen=True)
class ParseFailure:
    """Ни один формат не совпал с текстом целиком."""

    text: str

    ok: ClassVar[bool] = False

    def __bool__(self) -> bool:
        return False

    def unwrap(self):
        """
        Raises:
            FormatMismatchError: всегда
        """
        raise FormatMismatchError(f"No supported date/time format matches {self.text!r}")


ParseResult = Union[Parsed[T], ParseFailure]
