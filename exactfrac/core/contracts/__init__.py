"""
Contracts: сигналы ошибок и result-style Outcome.
"""

from exactfrac.core.contracts.errors import (
    FractionAbort,
    FractionError,
    FractionErrorKind,
    FractionOverflowError,
    GcdError,
    ZeroDenominatorError,
)
from exactfrac.core.contracts.outcome import Outcome

__all__ = [
    "FractionAbort",
    "FractionError",
    "FractionErrorKind",
    "FractionOverflowError",
    "GcdError",
    "ZeroDenominatorError",
    "Outcome",
]
