from __future__ import annotations

import logging

from taxcalc.core import income
from taxcalc.core.region import Region
from taxcalc.params import get_tax_params
from taxcalc.tax.aggregator import Aggregator
from taxcalc.tax.calculator import CalcConfig, Calculator

logger = logging.getLogger("taxcalc")


def _calculator_for(year: int, region: Region | str) -> Calculator:
    params = get_tax_params(year, region)
    config = CalcConfig(
        income_calc=income.Calculator(params.income_recipe),
        tax_formula=params.formula,
        contra_tax_formula=params.contra_formula,
    )
    return Calculator(config)


def new_tax_calculator(year: int, *regions: Region | str) -> Calculator | Aggregator:
    """Build a calculator for ``regions`` from the registered tax params.

    A single region yields a plain calculator; two or more are combined into an
    aggregator summing tax across all of them.
    """
    if not regions:
        raise ValueError("at least one tax region is required")

    calculators = [_calculator_for(year, region) for region in regions]
    logger.info(
        "Built tax calculator: year=%s regions=%s",
        year,
        ",".join(calc.region.code for calc in calculators),
    )
    if len(calculators) == 1:
        return calculators[0]
    return Aggregator(*calculators)


__all__ = ["new_tax_calculator"]
