from __future__ import annotations

import math

from taxcalc.core.brackets import Bracket, WeightedBrackets
from taxcalc.core.finance import FinancialSource
from taxcalc.core.region import Region
from taxcalc.params.base import TaxParams
from taxcalc.params.recipes import INCOME_RECIPE_NET
from taxcalc.tax.contra_formula import ContraFormula
from taxcalc.tax.credit import CreditRule, CreditRuleType
from taxcalc.tax.creditor import CanadianSpouseCreditor, WeightedCreditor
from taxcalc.tax.formula import Formula

ON_CREDIT_RATE = 0.0505
ON_BPA_2019 = 10_582.0

ON_BRACKETS_2019 = WeightedBrackets(
    {
        -ON_CREDIT_RATE: Bracket(0, ON_BPA_2019),
        0.0505: Bracket(0, 43_906),
        0.0915: Bracket(43_906, 87_813),
        0.1116: Bracket(87_813, 150_000),
        0.1216: Bracket(150_000, 220_000),
        0.1316: Bracket(220_000, math.inf),
    }
)


def params_2019() -> TaxParams:
    creditors = [
        CanadianSpouseCreditor(
            base_amount=ON_BPA_2019,
            weight=ON_CREDIT_RATE,
            rule=CreditRule("spouse-amount", CreditRuleType.NOT_CARRY_FORWARD),
            description="ON spouse or common-law partner amount (line 5812)",
        ),
        WeightedCreditor(
            weight=ON_CREDIT_RATE,
            target_source=FinancialSource.MISC_MEDICAL,
            rule=CreditRule("medical-expenses", CreditRuleType.NOT_CARRY_FORWARD),
            description="ON medical expenses (line 5868)",
        ),
        WeightedCreditor(
            weight=ON_CREDIT_RATE,
            target_source=FinancialSource.MISC_DONATIONS,
            rule=CreditRule("donations", CreditRuleType.CAN_CARRY_FORWARD),
            description="ON charitable donations (line 5896)",
        ),
    ]
    return TaxParams(
        formula=Formula(ON_BRACKETS_2019.clone(), 2019, Region.ON),
        contra_formula=ContraFormula(creditors, 2019, Region.ON),
        income_recipe=INCOME_RECIPE_NET.clone(),
    )


__all__ = ["ON_CREDIT_RATE", "ON_BPA_2019", "ON_BRACKETS_2019", "params_2019"]
