"""
Domain models and value objects.

Contains the Fraction value type and its Sign.
"""

from exactfrac.core.domain.fraction import ONE, ZERO, Fraction, Sign

__all__ = [
    "Fraction",
    "Sign",
    "ZERO",
    "ONE",
]
