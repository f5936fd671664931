from __future__ import annotations

from dataclasses import dataclass

MONTHS_IN_YEAR = 12


@dataclass(frozen=True)
class Person:
    name: str = ""
    age_months: int = 0

    @property
    def age_years(self) -> int:
        return self.age_months // MONTHS_IN_YEAR


__all__ = ["MONTHS_IN_YEAR", "Person"]
