from __future__ import annotations

from taxcalc.core.finance import FinancialSource
from taxcalc.core.income import Recipe, WeightedAdjuster

INCOME_RECIPE_NET = Recipe(
    income_adjusters={
        FinancialSource.INC_TFSA: WeightedAdjuster(0.0),
        FinancialSource.INC_CAPITAL_GAIN_CA: WeightedAdjuster(0.5),
    },
)


__all__ = ["INCOME_RECIPE_NET"]
