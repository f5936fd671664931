from __future__ import annotations

from taxcalc.tax.aggregator import Aggregator, TaxCalculator
from taxcalc.tax.calculator import CalcConfig, Calculator, TaxPayer, consume_credits, new_calculator
from taxcalc.tax.contra_formula import ContraFormula
from taxcalc.tax.credit import CreditRule, CreditRuleType, TaxCredit
from taxcalc.tax.creditor import CanadianSpouseCreditor, ConstCreditor, Creditor, WeightedCreditor
from taxcalc.tax.formula import Formula

__all__ = [
    "Aggregator",
    "TaxCalculator",
    "CalcConfig",
    "Calculator",
    "TaxPayer",
    "consume_credits",
    "new_calculator",
    "ContraFormula",
    "CreditRule",
    "CreditRuleType",
    "TaxCredit",
    "CanadianSpouseCreditor",
    "ConstCreditor",
    "Creditor",
    "WeightedCreditor",
    "Formula",
]
