from __future__ import annotations

from pydantic import BaseModel, Field, field_validator

from taxcalc.core.finance import FinancialSource, IndividualFinances
from taxcalc.core.human import Person
from taxcalc.tax.credit import TaxCredit

_CENT = 2


def _parse_source(name: str) -> FinancialSource:
    key = name.strip().upper().replace("-", "_")
    try:
        source = FinancialSource[key]
    except KeyError as exc:
        raise ValueError(f"Unknown financial source '{name}'") from exc
    if source.is_unknown_source():
        raise ValueError(f"'{name}' is a range marker, not a financial source")
    return source


def _normalize_amounts(value: dict[str, float] | None) -> dict[str, float] | None:
    if value is None:
        return None
    return {_parse_source(name).name: amount for name, amount in value.items()}


def to_finances(amounts: dict[str, float] | None) -> IndividualFinances | None:
    if amounts is None:
        return None
    return IndividualFinances({FinancialSource[name]: amount for name, amount in amounts.items()})


class DependentIn(BaseModel):
    name: str = ""
    age_months: int = Field(default=0, ge=0)

    def to_person(self) -> Person:
        return Person(name=self.name, age_months=self.age_months)


class PayableRequest(BaseModel):
    tax_year: int | None = None
    regions: list[str] = Field(default_factory=list)
    finances: dict[str, float] = Field(default_factory=dict)
    spouse_finances: dict[str, float] | None = None
    dependents: list[DependentIn] = Field(default_factory=list)

    _normalize_finances = field_validator("finances", "spouse_finances", mode="after")(_normalize_amounts)

    @field_validator("regions", mode="after")
    @classmethod
    def _upper_regions(cls, value: list[str]) -> list[str]:
        return [code.strip().upper() for code in value if code.strip()]


class CreditOut(BaseModel):
    source: str
    rule_type: str
    region: str | None
    tax_year: int
    amount: float
    initial_amount: float
    used_amount: float
    description: str = ""

    @classmethod
    def from_credit(cls, credit: TaxCredit) -> "CreditOut":
        return cls(
            source=credit.rule.source,
            rule_type=credit.rule.type.value,
            region=credit.tax_region.code if credit.tax_region is not None else None,
            tax_year=credit.tax_year,
            amount=round(credit.amount, _CENT),
            initial_amount=round(credit.initial_amount or 0.0, _CENT),
            used_amount=round(credit.used_amount, _CENT),
            description=credit.description,
        )


class RegionTax(BaseModel):
    region: str
    tax_payable: float


class PayableResponse(BaseModel):
    tax_year: int
    regions: list[str]
    tax_payable: float
    is_refund: bool
    breakdown: list[RegionTax]
    credits: list[CreditOut]


__all__ = [
    "DependentIn",
    "PayableRequest",
    "CreditOut",
    "RegionTax",
    "PayableResponse",
    "to_finances",
]
