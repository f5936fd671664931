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

INF = math.inf

CA_CREDIT_RATE = 0.15

# ------------------------------ 2018 ---------------------------------
CA_BPA_2018 = 11_809.0

CA_BRACKETS_2018 = WeightedBrackets(
    {
        -CA_CREDIT_RATE: Bracket(0, CA_BPA_2018),
        0.150: Bracket(0, 46_605),
        0.205: Bracket(46_605, 93_208),
        0.260: Bracket(93_208, 144_489),
        0.290: Bracket(144_489, 205_842),
        0.330: Bracket(205_842, INF),
    }
)

# ------------------------------ 2019 ---------------------------------
CA_BPA_2019 = 12_069.0

CA_BRACKETS_2019 = WeightedBrackets(
    {
        -CA_CREDIT_RATE: Bracket(0, CA_BPA_2019),
        0.150: Bracket(0, 47_630),
        0.205: Bracket(47_630, 95_259),
        0.260: Bracket(95_259, 147_667),
        0.290: Bracket(147_667, 210_371),
        0.330: Bracket(210_371, INF),
    }
)


def _creditors(spouse_base: float) -> list:
    return [
        CanadianSpouseCreditor(
            base_amount=spouse_base,
            weight=CA_CREDIT_RATE,
            rule=CreditRule("spouse-amount", CreditRuleType.NOT_CARRY_FORWARD),
            description="spouse or common-law partner amount (line 303)",
        ),
        WeightedCreditor(
            weight=CA_CREDIT_RATE,
            target_source=FinancialSource.MISC_MEDICAL,
            rule=CreditRule("medical-expenses", CreditRuleType.NOT_CARRY_FORWARD),
            description="medical expenses (line 330)",
        ),
        WeightedCreditor(
            weight=CA_CREDIT_RATE,
            target_source=FinancialSource.MISC_DONATIONS,
            rule=CreditRule("donations", CreditRuleType.CAN_CARRY_FORWARD),
            description="charitable donations (line 349)",
        ),
        WeightedCreditor(
            weight=CA_CREDIT_RATE,
            target_source=FinancialSource.MISC_TUITION,
            rule=CreditRule("tuition", CreditRuleType.CAN_CARRY_FORWARD),
            description="tuition amount (line 323)",
        ),
    ]


def params_2018() -> TaxParams:
    return TaxParams(
        formula=Formula(CA_BRACKETS_2018.clone(), 2018, Region.CA),
        contra_formula=ContraFormula(_creditors(CA_BPA_2018), 2018, Region.CA),
        income_recipe=INCOME_RECIPE_NET.clone(),
    )


def params_2019() -> TaxParams:
    return TaxParams(
        formula=Formula(CA_BRACKETS_2019.clone(), 2019, Region.CA),
        contra_formula=ContraFormula(_creditors(CA_BPA_2019), 2019, Region.CA),
        income_recipe=INCOME_RECIPE_NET.clone(),
    )


__all__ = [
    "CA_CREDIT_RATE",
    "CA_BPA_2018",
    "CA_BPA_2019",
    "CA_BRACKETS_2018",
    "CA_BRACKETS_2019",
    "params_2018",
    "params_2019",
]
