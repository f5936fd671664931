from __future__ import annotations

import math
from dataclasses import dataclass

from taxcalc.errors import InvalidBracketError, InvalidRateError


@dataclass(frozen=True)
class Bracket:
    """A numeric range, e.g. ``Bracket(47_630, 95_259)``."""

    lower: float
    upper: float

    def validate(self) -> None:
        if math.isinf(self.lower):
            raise InvalidBracketError(f"lower-bound must be finite, got {self.lower}")
        if self.upper == -math.inf:
            raise InvalidBracketError("upper-bound must not be negative infinity")
        if self.lower < 0:
            raise InvalidBracketError(f"lower-bound must not be negative, got {self.lower:.2f}")
        if self.upper < 0:
            raise InvalidBracketError(f"upper-bound must not be negative, got {self.upper:.2f}")
        if self.lower == 0 and self.upper == 0:
            raise InvalidBracketError("lower-bound and upper-bound are both zero")
        if self.lower > self.upper:
            raise InvalidBracketError(
                f"lower-bound is greater than upper-bound [{self.lower:.2f} > {self.upper:.2f}]"
            )

    def amount(self) -> float:
        return self.upper - self.lower


class WeightedBrackets(dict[float, Bracket]):
    """Maps rates to brackets.

    Applying the weighted brackets slices an amount across every bracket and
    sums ``rate * sliced amount``. Brackets may overlap or leave gaps, and
    negative rates express credits baked into the formula (e.g. the basic
    personal amount).
    """

    def apply(self, amount: float) -> float:
        result = 0.0
        for rate, bracket in self.items():
            if amount <= bracket.lower:
                continue
            if amount >= bracket.upper:
                result += rate * bracket.amount()
                continue
            result += rate * (amount - bracket.lower)
        return result

    def validate(self) -> None:
        for rate, bracket in self.items():
            if not math.isfinite(rate):
                raise InvalidRateError(f"invalid rate {rate}")
            try:
                bracket.validate()
            except InvalidBracketError as exc:
                raise InvalidBracketError(f"invalid bracket for rate {rate}: {exc}") from exc

    def clone(self) -> "WeightedBrackets":
        return WeightedBrackets(self)


__all__ = ["Bracket", "WeightedBrackets"]
