from __future__ import annotations

import logging
import uuid
from dataclasses import dataclass
from typing import Iterable, Sequence

from taxcalc.core.finance import Financer, NullFinances
from taxcalc.core.human import Person
from taxcalc.core.income import IncomeCalculator
from taxcalc.core.region import Region
from taxcalc.errors import (
    DuplicateCreditSourceError,
    InvalidBracketError,
    InvalidContraFormulaError,
    InvalidFormulaError,
    InvalidRateError,
    NoContraFormulaError,
    NoCreditorError,
    NoFormulaError,
    NoIncomeCalculatorError,
    TaxInfoMismatchError,
)
from taxcalc.tax.contra_formula import ContraFormula
from taxcalc.tax.credit import CreditRuleType, TaxCredit
from taxcalc.tax.formula import Formula

logger = logging.getLogger("taxcalc.tax")


@dataclass(frozen=True)
class TaxPayer:
    """Snapshot of an individual's tax situation handed to creditors."""

    finances: Financer | None
    net_income: float = 0.0
    spouse_finances: Financer | None = None
    spouse_net_income: float = 0.0
    dependents: tuple[Person, ...] = ()


@dataclass
class CalcConfig:
    income_calc: IncomeCalculator | None = None
    tax_formula: Formula | None = None
    contra_tax_formula: ContraFormula | None = None

    def validate(self) -> None:
        if self.tax_formula is None:
            raise NoFormulaError("no formula given")
        try:
            self.tax_formula.validate()
        except (InvalidRateError, InvalidBracketError) as exc:
            raise InvalidFormulaError(f"invalid formula: {exc}") from exc

        if self.contra_tax_formula is None:
            raise NoContraFormulaError("no contra-formula given")
        try:
            self.contra_tax_formula.validate()
        except (NoCreditorError, DuplicateCreditSourceError) as exc:
            raise InvalidContraFormulaError(f"invalid contra-formula: {exc}") from exc

        formula_info = (self.tax_formula.year, self.tax_formula.region)
        contra_info = (self.contra_tax_formula.year, self.contra_tax_formula.region)
        if formula_info != contra_info:
            raise TaxInfoMismatchError(f"formula {formula_info} != contra-formula {contra_info}")

        if self.income_calc is None:
            raise NoIncomeCalculatorError("no income calculator given")


def consume_credits(tax_amount: float, credits: Iterable[TaxCredit]) -> float:
    """Apply ``credits`` in order against ``tax_amount``.

    Credit amounts are updated in place. Returns the remaining tax, which is
    negative when cashable credits exceed the liability.
    """
    for cr in credits:
        rule_type = cr.rule.type

        if tax_amount <= 0.0 and rule_type is CreditRuleType.CAN_CARRY_FORWARD:
            continue

        if tax_amount <= 0.0 and rule_type is CreditRuleType.NOT_CARRY_FORWARD:
            logger.debug("Forfeiting %.2f of credit %r", cr.amount, cr.rule.source)
            cr.amount = 0.0
            continue

        if tax_amount >= cr.amount or rule_type is CreditRuleType.CASHABLE:
            tax_amount -= cr.amount
            cr.used_amount += cr.amount
            cr.amount = 0.0
            continue

        # reached at most once: 0 < tax_amount < cr.amount
        cr.used_amount += tax_amount
        if rule_type is CreditRuleType.NOT_CARRY_FORWARD:
            cr.amount = 0.0
        else:
            cr.amount -= tax_amount
        tax_amount = 0.0

    return tax_amount


class Calculator:
    """Calculates payable tax for one jurisdiction and tax year."""

    def __init__(self, config: CalcConfig) -> None:
        config.validate()
        self.id = uuid.uuid4().hex
        self._formula = config.tax_formula.clone()
        self._contra_formula = config.contra_tax_formula.clone()
        self._income_calc = config.income_calc
        self._finances: Financer = NullFinances()
        self._spouse_finances: Financer | None = None
        self._credits: list[TaxCredit] = []
        self._dependents: tuple[Person, ...] = ()
        self._income_calc.set_finances(self._finances)

    @property
    def year(self) -> int:
        return self._formula.year

    @property
    def region(self) -> Region:
        return self._formula.region

    def regions(self) -> list[Region]:
        return [self._formula.region]

    def set_finances(self, finances: Financer | None, spouse_finances: Financer | None = None) -> None:
        """Use ``finances`` for subsequent calculations.

        Later changes to the given finances affect later calculations. ``None``
        installs finances with no data.
        """
        self._finances = finances if finances is not None else NullFinances()
        self._spouse_finances = spouse_finances
        self._income_calc.set_finances(self._finances)

    def set_credits(self, credits: Iterable[TaxCredit | None] | None) -> None:
        """Keep copies of the given credits that this calculator produced.

        Spent and forfeited credits (nothing left to use) are dropped.
        """
        owned: list[TaxCredit] = []
        for cr in credits or ():
            if not isinstance(cr, TaxCredit):
                continue
            if cr.owner_id != self.id or cr.amount == 0:
                continue
            owned.append(cr.copy())
        self._credits = owned

    def set_dependents(self, *dependents: Person | None) -> None:
        self._dependents = tuple(d for d in dependents if d is not None)

    def credits(self) -> list[TaxCredit]:
        return [cr.copy() for cr in self._credits]

    def tax_payable(self) -> tuple[float, list[TaxCredit]]:
        net_income, spouse_net_income = self._net_income()
        total_tax = self._formula.apply(net_income)

        tax_payer = TaxPayer(
            finances=self._finances,
            net_income=net_income,
            spouse_finances=self._spouse_finances,
            spouse_net_income=spouse_net_income,
            dependents=self._dependents,
        )
        new_credits = self._contra_formula.apply(tax_payer)
        for cr in new_credits:
            cr.owner_id = self.id

        pool = [cr.copy() for cr in self._credits] + new_credits
        pool = self._contra_formula.filter_and_sort(pool)
        net_tax = consume_credits(total_tax, pool)

        logger.debug(
            "%s %s: net_income=%.2f total_tax=%.2f credits=%d net_tax=%.2f",
            self.region.code,
            self.year,
            net_income,
            total_tax,
            len(pool),
            net_tax,
        )
        return net_tax, pool

    def _net_income(self) -> tuple[float, float]:
        spouse_net_income = 0.0
        if self._spouse_finances is not None:
            self._income_calc.set_finances(self._spouse_finances)
            spouse_net_income = self._income_calc.net_income()
        self._income_calc.set_finances(self._finances)
        return self._income_calc.net_income(), spouse_net_income


def new_calculator(
    income_calc: IncomeCalculator | None,
    tax_formula: Formula | None,
    contra_tax_formula: ContraFormula | None,
) -> Calculator:
    return Calculator(CalcConfig(income_calc, tax_formula, contra_tax_formula))


__all__ = ["TaxPayer", "CalcConfig", "Calculator", "consume_credits", "new_calculator"]
