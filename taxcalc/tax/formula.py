from __future__ import annotations

from taxcalc.core.brackets import WeightedBrackets
from taxcalc.core.region import Region


class Formula:
    """Progressive tax formula for one jurisdiction and tax year."""

    def __init__(self, brackets: WeightedBrackets | dict, year: int, region: Region) -> None:
        self.brackets = WeightedBrackets(brackets)
        self._year = year
        self._region = region

    @property
    def year(self) -> int:
        return self._year

    @property
    def region(self) -> Region:
        return self._region

    def apply(self, net_income: float) -> float:
        return self.brackets.apply(net_income)

    def validate(self) -> None:
        self.brackets.validate()

    def clone(self) -> "Formula":
        return Formula(self.brackets.clone(), self._year, self._region)

    def __repr__(self) -> str:
        return f"Formula(year={self._year}, region={self._region.code}, brackets={dict(self.brackets)!r})"


__all__ = ["Formula"]
