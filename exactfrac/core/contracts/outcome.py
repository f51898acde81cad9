"""
Outcome — Result-style значение для recoverable-канала

Каждая fallible операция (try_* / checked_*) возвращает Outcome:
ровно одно из полей value / error заполнено.

Non-fallible формы реализуются как тонкая обёртка: `try_x(...).unwrap()`.
Логика вычисления не дублируется.
"""

import logging
from dataclasses import dataclass
from typing import Callable, Generic, TypeVar

from exactfrac.core.contracts.errors import FractionAbort, FractionError

LOG = logging.getLogger(__name__)

T = TypeVar("T")


@dataclass(frozen=True)
class Outcome(Generic[T]):
    """
    Результат fallible операции.

    Attributes:
        value: Результат (если операция успешна)
        error: Ошибка (если операция не удалась)
    """

    value: T | None = None
    error: FractionError | None = None

    def __post_init__(self) -> None:
        if (self.value is None) == (self.error is None):
            raise ValueError("Outcome requires exactly one of value / error")

    @classmethod
    def success(cls, value: T) -> "Outcome[T]":
        return cls(value=value)

    @classmethod
    def failure(cls, error: FractionError) -> "Outcome[T]":
        return cls(error=error)

    @classmethod
    def capture(cls, operation: Callable[..., T], *args: object) -> "Outcome[T]":
        """
        Выполнение операции с переводом FractionError в Outcome.failure.

        Прочие исключения (TypeError на невалидный тип аргумента и т.п.)
        пробрасываются как есть: это ошибки вызывающего кода, а не
        recoverable-сигналы.
        """
        try:
            return cls.success(operation(*args))
        except FractionError as error:
            return cls.failure(error)

    @property
    def ok(self) -> bool:
        return self.error is None

    def unwrap(self) -> T:
        """
        Извлечение значения или fatal abort.

        Raises:
            FractionAbort: Если Outcome содержит ошибку
        """
        if self.error is not None:
            LOG.debug("Converting %s to fatal abort: %s", self.error.kind.value, self.error)
            raise FractionAbort(self.error) from self.error
        return self.value  # type: ignore[return-value]

    def unwrap_or(self, default: T) -> T:
        if self.error is not None:
            return default
        return self.value  # type: ignore[return-value]
