from __future__ import annotations

from collections import Counter
from typing import TYPE_CHECKING, Iterable, Sequence

from taxcalc.core.region import Region
from taxcalc.errors import DuplicateCreditSourceError, NoCreditorError
from taxcalc.tax.credit import TaxCredit
from taxcalc.tax.creditor import Creditor

if TYPE_CHECKING:  # pragma: no cover - typing helper
    from taxcalc.tax.calculator import TaxPayer


class ContraFormula:
    """Generates tax credits for a tax payer and orders them for use.

    The position of a creditor in ``creditors`` is the priority of its
    credits: credits from earlier creditors are applied against payable tax
    first.
    """

    def __init__(self, creditors: Sequence[Creditor | None], year: int, region: Region) -> None:
        self.creditors: list[Creditor | None] = list(creditors)
        self._year = year
        self._region = region

    @property
    def year(self) -> int:
        return self._year

    @property
    def region(self) -> Region:
        return self._region

    def priority(self) -> dict[str, int]:
        index: dict[str, int] = {}
        for position, creditor in enumerate(self.creditors):
            if creditor is None:
                continue
            index.setdefault(creditor.rule.source, position)
        return index

    def validate(self) -> None:
        for position, creditor in enumerate(self.creditors):
            if creditor is None:
                raise NoCreditorError(f"index {position}: no creditor given")
        counts = Counter(creditor.rule.source for creditor in self.creditors)
        dups = sorted(source for source, count in counts.items() if count > 1)
        if dups:
            raise DuplicateCreditSourceError(f"duplicate credit sources are not allowed: {dups}")

    def apply(self, tax_payer: "TaxPayer | None") -> list[TaxCredit]:
        if tax_payer is None or tax_payer.finances is None:
            return []

        credits: list[TaxCredit] = []
        for creditor in self.creditors:
            if creditor is None:
                continue
            amount = creditor.tax_credit(tax_payer)
            if amount == 0:
                continue
            credits.append(
                TaxCredit(
                    amount=amount,
                    rule=creditor.rule,
                    reference=tax_payer.finances,
                    financial_source=creditor.financial_source,
                    tax_year=self._year,
                    tax_region=self._region,
                    description=creditor.description,
                )
            )
        return credits

    def filter_and_sort(self, credits: Iterable[TaxCredit | None]) -> list[TaxCredit]:
        priority = self.priority()
        filtered = [cr for cr in credits if cr is not None and cr.rule.source in priority]
        # sorted() is stable, duplicates keep their input order
        return sorted(filtered, key=lambda cr: priority[cr.rule.source])

    def clone(self) -> "ContraFormula":
        creditors = [c.clone() if c is not None else None for c in self.creditors]
        return ContraFormula(creditors, self._year, self._region)

    def __repr__(self) -> str:
        sources = [c.rule.source if c is not None else None for c in self.creditors]
        return f"ContraFormula(year={self._year}, region={self._region.code}, sources={sources!r})"


__all__ = ["ContraFormula"]
