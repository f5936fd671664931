from __future__ import annotations

from taxcalc.core.brackets import Bracket, WeightedBrackets
from taxcalc.core.finance import Financer, FinancialSource, IndividualFinances, NullFinances
from taxcalc.core.human import Person
from taxcalc.core.region import Region, resolve_region

__all__ = [
    "Bracket",
    "WeightedBrackets",
    "Financer",
    "FinancialSource",
    "IndividualFinances",
    "NullFinances",
    "Person",
    "Region",
    "resolve_region",
]
