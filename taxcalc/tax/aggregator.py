from __future__ import annotations

import logging
from typing import Iterable, Protocol

from taxcalc.core.finance import Financer
from taxcalc.core.human import Person
from taxcalc.core.region import Region
from taxcalc.errors import NoCalculatorError, TooManyYearsError
from taxcalc.tax.credit import TaxCredit

logger = logging.getLogger("taxcalc.tax")


class TaxCalculator(Protocol):
    @property
    def year(self) -> int: ...

    def regions(self) -> list[Region]: ...

    def tax_payable(self) -> tuple[float, list[TaxCredit]]: ...

    def set_finances(self, finances: Financer | None, spouse_finances: Financer | None = None) -> None: ...

    def set_credits(self, credits: Iterable[TaxCredit | None] | None) -> None: ...

    def set_dependents(self, *dependents: Person | None) -> None: ...


class Aggregator:
    """Sums payable tax across calculators of the same tax year."""

    def __init__(self, c0: TaxCalculator | None, c1: TaxCalculator | None, *extras: TaxCalculator | None) -> None:
        calculators: list[TaxCalculator] = []
        for index, calc in enumerate((c0, c1, *extras)):
            if calc is None:
                raise NoCalculatorError(f"index {index}: no calculator given")
            calculators.append(calc)

        years = {calc.year for calc in calculators}
        if len(years) > 1:
            raise TooManyYearsError(f"calculators must share one tax year, got {sorted(years)}")

        self._calculators = calculators

    @property
    def year(self) -> int:
        return self._calculators[0].year

    def regions(self) -> list[Region]:
        regions: list[Region] = []
        for calc in self._calculators:
            regions.extend(calc.regions())
        return regions

    def set_finances(self, finances: Financer | None, spouse_finances: Financer | None = None) -> None:
        for calc in self._calculators:
            calc.set_finances(finances, spouse_finances)

    def set_credits(self, credits: Iterable[TaxCredit | None] | None) -> None:
        credits = list(credits or ())
        for calc in self._calculators:
            calc.set_credits(credits)

    def set_dependents(self, *dependents: Person | None) -> None:
        for calc in self._calculators:
            calc.set_dependents(*dependents)

    def tax_payable(self) -> tuple[float, list[TaxCredit]]:
        total = 0.0
        combined: list[TaxCredit] = []
        for calc in self._calculators:
            tax, credits = calc.tax_payable()
            logger.debug("aggregate member %s: tax=%.2f credits=%d", calc.regions(), tax, len(credits))
            total += tax
            combined.extend(credits)
        return total, combined


__all__ = ["TaxCalculator", "Aggregator"]
