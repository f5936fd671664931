from __future__ import annotations

from dataclasses import dataclass, field
from typing import Protocol, runtime_checkable

from taxcalc.core.finance import Financer, FinancialSource
from taxcalc.errors import NoRecipeError


@runtime_checkable
class IncomeCalculator(Protocol):
    def net_income(self) -> float: ...

    def set_finances(self, finances: Financer | None) -> None: ...


@dataclass(frozen=True)
class WeightedAdjuster:
    weight: float

    def adjusted(self, amount: float) -> float:
        return amount * self.weight

    def clone(self) -> "WeightedAdjuster":
        return WeightedAdjuster(self.weight)


@dataclass
class Recipe:
    """Adjustments applied to sources before they count toward net income."""

    income_adjusters: dict[FinancialSource, WeightedAdjuster] = field(default_factory=dict)
    deduction_adjusters: dict[FinancialSource, WeightedAdjuster] = field(default_factory=dict)

    def clone(self) -> "Recipe":
        return Recipe(
            income_adjusters={src: adj.clone() for src, adj in self.income_adjusters.items()},
            deduction_adjusters={src: adj.clone() for src, adj in self.deduction_adjusters.items()},
        )


class Calculator:
    """Computes net income as adjusted income minus adjusted deductions."""

    def __init__(self, recipe: Recipe | None) -> None:
        if recipe is None:
            raise NoRecipeError("no income recipe given")
        recipe = recipe.clone()
        self._income_adjusters = recipe.income_adjusters
        self._deduction_adjusters = recipe.deduction_adjusters
        self._finances: Financer | None = None

    def set_finances(self, finances: Financer | None) -> None:
        self._finances = finances

    def total_income(self) -> float:
        if self._finances is None:
            return 0.0
        total = 0.0
        for source in self._finances.income_sources():
            amount = self._finances.total_amount(source)
            adjuster = self._income_adjusters.get(source)
            total += adjuster.adjusted(amount) if adjuster else amount
        return total

    def total_deductions(self) -> float:
        if self._finances is None:
            return 0.0
        total = 0.0
        for source in self._finances.deduction_sources():
            amount = self._finances.total_amount(source)
            adjuster = self._deduction_adjusters.get(source)
            total += adjuster.adjusted(amount) if adjuster else amount
        return total

    def net_income(self) -> float:
        if self._finances is None:
            return 0.0
        return self.total_income() - self.total_deductions()


__all__ = ["IncomeCalculator", "WeightedAdjuster", "Recipe", "Calculator"]
