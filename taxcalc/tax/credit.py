from __future__ import annotations

from dataclasses import dataclass, replace
from enum import Enum
from typing import Any

from taxcalc.core.finance import FinancialSource
from taxcalc.core.region import Region


class CreditRuleType(str, Enum):
    CASHABLE = "cashable"
    CAN_CARRY_FORWARD = "can_carry_forward"
    NOT_CARRY_FORWARD = "not_carry_forward"


@dataclass(frozen=True)
class CreditRule:
    source: str
    type: CreditRuleType


@dataclass(eq=False)
class TaxCredit:
    """An amount owed to the tax payer.

    ``amount`` is what is still usable; ``used_amount`` is what was applied
    against payable tax. Only the calculator whose id matches ``owner_id``
    may spend the credit.
    """

    amount: float
    rule: CreditRule
    initial_amount: float | None = None
    used_amount: float = 0.0
    owner_id: str | None = None
    reference: Any = None
    financial_source: FinancialSource = FinancialSource.NONE
    tax_year: int = 0
    tax_region: Region | None = None
    description: str = ""

    def __post_init__(self) -> None:
        if self.initial_amount is None:
            self.initial_amount = self.amount

    @property
    def source(self) -> str:
        return self.rule.source

    def copy(self) -> "TaxCredit":
        return replace(self)


__all__ = ["CreditRuleType", "CreditRule", "TaxCredit"]
