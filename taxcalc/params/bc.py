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

BC_CREDIT_RATE = 0.0506

# ------------------------------ 2018 ---------------------------------
BC_BPA_2018 = 10_412.0

BC_BRACKETS_2018 = WeightedBrackets(
    {
        -BC_CREDIT_RATE: Bracket(0, BC_BPA_2018),
        0.0506: Bracket(0, 39_676),
        0.0770: Bracket(39_676, 79_353),
        0.1050: Bracket(79_353, 91_107),
        0.1229: Bracket(91_107, 110_630),
        0.1470: Bracket(110_630, 150_000),
        0.1680: Bracket(150_000, INF),
    }
)

# ------------------------------ 2019 ---------------------------------
BC_BPA_2019 = 10_682.0

BC_BRACKETS_2019 = WeightedBrackets(
    {
        -BC_CREDIT_RATE: Bracket(0, BC_BPA_2019),
        0.0506: Bracket(0, 40_707),
        0.0770: Bracket(40_707, 81_416),
        0.1050: Bracket(81_416, 93_476),
        0.1229: Bracket(93_476, 113_506),
        0.1470: Bracket(113_506, 153_900),
        0.1680: Bracket(153_900, INF),
    }
)


def _spouse(base: float) -> CanadianSpouseCreditor:
    return CanadianSpouseCreditor(
        base_amount=base,
        weight=BC_CREDIT_RATE,
        rule=CreditRule("spouse-amount", CreditRuleType.NOT_CARRY_FORWARD),
        description="BC spouse or common-law partner amount (line 5812)",
    )


def _medical() -> WeightedCreditor:
    return WeightedCreditor(
        weight=BC_CREDIT_RATE,
        target_source=FinancialSource.MISC_MEDICAL,
        rule=CreditRule("medical-expenses", CreditRuleType.NOT_CARRY_FORWARD),
        description="BC medical expenses (line 5868)",
    )


def params_2018() -> TaxParams:
    creditors = [
        _spouse(BC_BPA_2018),
        _medical(),
        WeightedCreditor(
            weight=BC_CREDIT_RATE,
            target_source=FinancialSource.MISC_TUITION,
            rule=CreditRule("tuition", CreditRuleType.CAN_CARRY_FORWARD),
            description="BC tuition amount (line 5856)",
        ),
    ]
    return TaxParams(
        formula=Formula(BC_BRACKETS_2018.clone(), 2018, Region.BC),
        contra_formula=ContraFormula(creditors, 2018, Region.BC),
        income_recipe=INCOME_RECIPE_NET.clone(),
    )


def params_2019() -> TaxParams:
    # BC eliminated the provincial tuition credit for 2019
    creditors = [_spouse(BC_BPA_2019), _medical()]
    return TaxParams(
        formula=Formula(BC_BRACKETS_2019.clone(), 2019, Region.BC),
        contra_formula=ContraFormula(creditors, 2019, Region.BC),
        income_recipe=INCOME_RECIPE_NET.clone(),
    )


__all__ = [
    "BC_CREDIT_RATE",
    "BC_BPA_2018",
    "BC_BPA_2019",
    "BC_BRACKETS_2018",
    "BC_BRACKETS_2019",
    "params_2018",
    "params_2019",
]
