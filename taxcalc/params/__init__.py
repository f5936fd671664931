from __future__ import annotations

import logging
from typing import Dict, Iterable, List, Tuple

from taxcalc.core.region import Region, resolve_region
from taxcalc.errors import UnknownTaxParamsError
from taxcalc.params import bc, federal, on
from taxcalc.params.base import TaxParams

logger = logging.getLogger("taxcalc.params")

_REGISTRY: Dict[Tuple[int, Region], TaxParams] = {}


def register_tax_params(params_list: Iterable[TaxParams]) -> None:
    for params in params_list:
        key = (params.year, params.region)
        _REGISTRY[key] = params
        logger.debug("Registered tax params for %s %s", params.region.code, params.year)


register_tax_params(
    (
        federal.params_2018(),
        federal.params_2019(),
        bc.params_2018(),
        bc.params_2019(),
        on.params_2019(),
    )
)


def get_tax_params(year: int, region: Region | str) -> TaxParams:
    """Return a copy of the parameters registered for ``region`` in ``year``."""
    resolved = resolve_region(region)
    try:
        return _REGISTRY[(year, resolved)].clone()
    except KeyError as exc:
        raise UnknownTaxParamsError(f"No tax params registered for {resolved.code} in {year}") from exc


def list_tax_params(year: int | None = None) -> List[TaxParams]:
    return [
        params.clone()
        for (registered_year, _), params in sorted(_REGISTRY.items(), key=lambda item: (item[0][0], item[0][1].code))
        if year is None or registered_year == year
    ]


def supported_years() -> list[int]:
    return sorted({year for year, _ in _REGISTRY})


def supported_regions(year: int) -> list[str]:
    return sorted(region.code for registered_year, region in _REGISTRY if registered_year == year)


__all__ = [
    "TaxParams",
    "register_tax_params",
    "get_tax_params",
    "list_tax_params",
    "supported_years",
    "supported_regions",
]
