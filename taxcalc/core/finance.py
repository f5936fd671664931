from __future__ import annotations

from enum import IntEnum
from typing import Protocol, runtime_checkable


class FinancialSource(IntEnum):
    """Identifies a financial amount; range markers group related sources."""

    NONE = 0

    INCOME_SOURCES_BEGIN = 100
    INC_EARNED = 101  # employment and labour income
    INC_INTEREST = 102
    INC_CAPITAL_GAIN_CA = 103
    INC_ELIGIBLE_DIVIDENDS_CA = 104
    INC_NON_ELIGIBLE_DIVIDENDS_CA = 105
    INC_FOREIGN_DIVIDENDS = 106
    INC_RRSP = 107  # withdrawal from RRSP
    INC_UCCB = 108
    INC_RDSP = 109
    INC_TFSA = 110
    INCOME_SOURCES_END = 199

    DEDUCTION_SOURCES_BEGIN = 200
    DEDUC_CHILD_CARE_EXPENSE = 201
    DEDUC_RRSP = 202  # contribution to RRSP
    DEDUC_OTHERS = 203
    DEDUCTION_SOURCES_END = 299

    MISC_SOURCES_BEGIN = 300
    MISC_MEDICAL = 301
    MISC_TUITION = 302
    MISC_DONATIONS = 303
    MISC_OTHERS = 304
    MISC_SOURCES_END = 399

    def is_income_source(self) -> bool:
        return FinancialSource.INCOME_SOURCES_BEGIN < self < FinancialSource.INCOME_SOURCES_END

    def is_deduction_source(self) -> bool:
        return FinancialSource.DEDUCTION_SOURCES_BEGIN < self < FinancialSource.DEDUCTION_SOURCES_END

    def is_misc_source(self) -> bool:
        return FinancialSource.MISC_SOURCES_BEGIN < self < FinancialSource.MISC_SOURCES_END

    def is_unknown_source(self) -> bool:
        return not (self.is_income_source() or self.is_deduction_source() or self.is_misc_source())


@runtime_checkable
class Financer(Protocol):
    def total_amount(self, *sources: FinancialSource) -> float: ...

    def income_sources(self) -> list[FinancialSource]: ...

    def deduction_sources(self) -> list[FinancialSource]: ...

    def misc_sources(self) -> list[FinancialSource]: ...

    def all_sources(self) -> list[FinancialSource]: ...

    @property
    def version(self) -> int: ...


class IndividualFinances:
    """Financial data of one individual.

    Amounts are filed as income, deduction or misc according to the range the
    source falls in; unknown sources are filed as misc. Every write bumps
    ``version`` so callers can tell the ledger changed.
    """

    def __init__(self, amounts: dict[FinancialSource, float] | None = None) -> None:
        self._income: dict[FinancialSource, float] = {}
        self._deductions: dict[FinancialSource, float] = {}
        self._misc: dict[FinancialSource, float] = {}
        self._version = 1
        for source, amount in (amounts or {}).items():
            self.set_amount(source, amount)

    def _bucket(self, source: FinancialSource) -> dict[FinancialSource, float]:
        if source.is_income_source():
            return self._income
        if source.is_deduction_source():
            return self._deductions
        return self._misc

    def total_amount(self, *sources: FinancialSource) -> float:
        total = 0.0
        for source in sources:
            total += self._bucket(source).get(source, 0.0)
        return total

    def add_amount(self, source: FinancialSource, amount: float) -> None:
        bucket = self._bucket(source)
        bucket[source] = bucket.get(source, 0.0) + amount
        self._version += 1

    def set_amount(self, source: FinancialSource, amount: float) -> None:
        self._bucket(source)[source] = amount
        self._version += 1

    def remove_amounts(self, *sources: FinancialSource) -> None:
        for source in sources:
            self._bucket(source).pop(source, None)
        self._version += 1

    def income_sources(self) -> list[FinancialSource]:
        return list(self._income)

    def deduction_sources(self) -> list[FinancialSource]:
        return list(self._deductions)

    def misc_sources(self) -> list[FinancialSource]:
        return list(self._misc)

    def all_sources(self) -> list[FinancialSource]:
        return self.income_sources() + self.deduction_sources() + self.misc_sources()

    @property
    def version(self) -> int:
        return self._version

    def clone(self) -> "IndividualFinances":
        clone = IndividualFinances()
        clone._income = dict(self._income)
        clone._deductions = dict(self._deductions)
        clone._misc = dict(self._misc)
        clone._version = self._version
        return clone

    def __repr__(self) -> str:
        return (
            f"IndividualFinances(income={self._income!r}, deductions={self._deductions!r}, "
            f"misc={self._misc!r}, version={self._version})"
        )


class NullFinances:
    """Finances with no data; every query returns zero or nothing."""

    def total_amount(self, *sources: FinancialSource) -> float:
        return 0.0

    def income_sources(self) -> list[FinancialSource]:
        return []

    def deduction_sources(self) -> list[FinancialSource]:
        return []

    def misc_sources(self) -> list[FinancialSource]:
        return []

    def all_sources(self) -> list[FinancialSource]:
        return []

    @property
    def version(self) -> int:
        return 0


__all__ = ["FinancialSource", "Financer", "IndividualFinances", "NullFinances"]
