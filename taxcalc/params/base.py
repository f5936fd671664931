from __future__ import annotations

from dataclasses import dataclass

from taxcalc.core.income import Recipe
from taxcalc.core.region import Region
from taxcalc.tax.contra_formula import ContraFormula
from taxcalc.tax.formula import Formula


@dataclass(frozen=True)
class TaxParams:
    """Everything needed to build a tax calculator for one region and year."""

    formula: Formula
    contra_formula: ContraFormula
    income_recipe: Recipe

    @property
    def year(self) -> int:
        return self.formula.year

    @property
    def region(self) -> Region:
        return self.formula.region

    def clone(self) -> "TaxParams":
        return TaxParams(
            formula=self.formula.clone(),
            contra_formula=self.contra_formula.clone(),
            income_recipe=self.income_recipe.clone(),
        )


__all__ = ["TaxParams"]
