from __future__ import annotations

from enum import Enum


class Region(str, Enum):
    """Canadian tax jurisdictions."""

    CA = "Canada"
    AB = "Alberta"
    BC = "British Columbia"
    MB = "Manitoba"
    NB = "New Brunswick"
    NL = "Newfoundland and Labrador"
    NS = "Nova Scotia"
    NT = "Northwest Territories"
    NU = "Nunavut"
    ON = "Ontario"
    PE = "Prince Edward Island"
    QC = "Quebec"
    SK = "Saskatchewan"
    YT = "Yukon"

    @property
    def code(self) -> str:
        return self.name


def resolve_region(value: "Region | str") -> Region:
    if isinstance(value, Region):
        return value
    key = value.strip()
    try:
        return Region[key.upper()]
    except KeyError:
        pass
    try:
        return Region(key)
    except ValueError as exc:
        raise ValueError(f"Unknown tax region '{value}'") from exc


__all__ = ["Region", "resolve_region"]
