import math
from dataclasses import dataclass, field, replace

from taxcalc.core.brackets import Bracket, WeightedBrackets
from taxcalc.core.finance import Financer, FinancialSource, IndividualFinances
from taxcalc.core.region import Region
from taxcalc.tax.calculator import CalcConfig, Calculator
from taxcalc.tax.contra_formula import ContraFormula
from taxcalc.tax.credit import CreditRule, CreditRuleType
from taxcalc.tax.creditor import ConstCreditor
from taxcalc.tax.formula import Formula

TEST_YEAR = 2019


@dataclass
class StubIncomeCalculator:
    """Income calculator returning a fixed net income per finances object."""

    on_net_income: float = 0.0
    by_finances: dict = field(default_factory=dict)
    finances: Financer | None = None
    calls: list = field(default_factory=list)

    def set_finances(self, finances):
        self.finances = finances
        self.calls.append(finances)

    def net_income(self) -> float:
        for key, value in self.by_finances.items():
            if key is self.finances:
                return value
        return self.on_net_income


@dataclass
class DependentCreditor:
    """Credits ``per_dependent`` for every dependent of the tax payer."""

    per_dependent: float
    rule: CreditRule
    description: str = ""

    @property
    def financial_source(self) -> FinancialSource:
        return FinancialSource.NONE

    def tax_credit(self, tax_payer) -> float:
        if tax_payer is None:
            return 0.0
        return len(tax_payer.dependents) * self.per_dependent

    def clone(self) -> "DependentCreditor":
        return replace(self)


def make_brackets() -> WeightedBrackets:
    return WeightedBrackets(
        {
            0.15: Bracket(0, 50_000),
            0.26: Bracket(50_000, math.inf),
        }
    )


def make_formula(year: int = TEST_YEAR, region: Region = Region.CA) -> Formula:
    return Formula(make_brackets(), year, region)


def const_creditor(amount: float, source: str, rule_type: CreditRuleType) -> ConstCreditor:
    return ConstCreditor(amount=amount, rule=CreditRule(source, rule_type), description=source)


def make_contra_formula(*creditors, year: int = TEST_YEAR, region: Region = Region.CA) -> ContraFormula:
    return ContraFormula(list(creditors), year, region)


def make_calculator(
    *creditors,
    net_income: float = 0.0,
    year: int = TEST_YEAR,
    region: Region = Region.CA,
    income_calc=None,
) -> Calculator:
    cfg = CalcConfig(
        income_calc=income_calc or StubIncomeCalculator(on_net_income=net_income),
        tax_formula=make_formula(year, region),
        contra_tax_formula=make_contra_formula(*creditors, year=year, region=region),
    )
    return Calculator(cfg)


def make_finances(**amounts: float) -> IndividualFinances:
    return IndividualFinances({FinancialSource[name.upper()]: value for name, value in amounts.items()})
