from __future__ import annotations

from dataclasses import dataclass, replace
from typing import TYPE_CHECKING, Protocol, runtime_checkable

from taxcalc.core.finance import FinancialSource
from taxcalc.tax.credit import CreditRule

if TYPE_CHECKING:  # pragma: no cover - typing helper
    from taxcalc.tax.calculator import TaxPayer


@runtime_checkable
class Creditor(Protocol):
    """Calculates a single tax credit amount for a tax payer."""

    rule: CreditRule
    description: str

    @property
    def financial_source(self) -> FinancialSource: ...

    def tax_credit(self, tax_payer: "TaxPayer | None") -> float: ...

    def clone(self) -> "Creditor": ...


@dataclass
class ConstCreditor:
    amount: float
    rule: CreditRule
    description: str = ""

    @property
    def financial_source(self) -> FinancialSource:
        return FinancialSource.NONE

    def tax_credit(self, tax_payer: "TaxPayer | None") -> float:
        return self.amount

    def clone(self) -> "ConstCreditor":
        return replace(self)


@dataclass
class WeightedCreditor:
    """Credits a weighted share of one of the tax payer's financial sources."""

    weight: float
    target_source: FinancialSource
    rule: CreditRule
    description: str = ""

    @property
    def financial_source(self) -> FinancialSource:
        return self.target_source

    def tax_credit(self, tax_payer: "TaxPayer | None") -> float:
        if tax_payer is None or tax_payer.finances is None:
            return 0.0
        return self.weight * tax_payer.finances.total_amount(self.target_source)

    def clone(self) -> "WeightedCreditor":
        return replace(self)


@dataclass
class CanadianSpouseCreditor:
    """Spouse or common-law partner amount.

    Only the higher earner claims it; on equal net income the tax payer being
    assessed claims it. The credit shrinks as the spouse's net income grows
    toward ``base_amount``.
    """

    base_amount: float
    weight: float
    rule: CreditRule
    description: str = ""

    @property
    def financial_source(self) -> FinancialSource:
        return FinancialSource.NONE

    def tax_credit(self, tax_payer: "TaxPayer | None") -> float:
        if tax_payer is None or tax_payer.spouse_finances is None:
            return 0.0
        if tax_payer.net_income < tax_payer.spouse_net_income:
            return 0.0  # spouse claims it
        amount = self.base_amount - tax_payer.spouse_net_income
        if amount <= 0.0:
            return 0.0
        return self.weight * amount

    def clone(self) -> "CanadianSpouseCreditor":
        return replace(self)


__all__ = ["Creditor", "ConstCreditor", "WeightedCreditor", "CanadianSpouseCreditor"]
