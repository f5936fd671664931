from __future__ import annotations


class TaxCalcError(Exception):
    """Base class for every error raised by taxcalc."""


class ConfigurationError(TaxCalcError):
    """Raised at construction time when a calculator cannot be configured."""


class NoFormulaError(ConfigurationError):
    pass


class NoContraFormulaError(ConfigurationError):
    pass


class NoCreditorError(ConfigurationError):
    pass


class DuplicateCreditSourceError(ConfigurationError):
    pass


class NoIncomeCalculatorError(ConfigurationError):
    pass


class NoRecipeError(ConfigurationError):
    pass


class InvalidFormulaError(ConfigurationError):
    pass


class InvalidContraFormulaError(ConfigurationError):
    pass


class TaxInfoMismatchError(ConfigurationError):
    """Formula and contra-formula were built for different years or regions."""


class InvalidRateError(ConfigurationError):
    pass


class InvalidBracketError(ConfigurationError):
    pass


class AggregationError(TaxCalcError):
    """Raised when calculators cannot be combined into one aggregate."""


class NoCalculatorError(AggregationError):
    pass


class TooManyYearsError(AggregationError):
    pass


class UnknownTaxParamsError(TaxCalcError, KeyError):
    pass


__all__ = [
    "TaxCalcError",
    "ConfigurationError",
    "NoFormulaError",
    "NoContraFormulaError",
    "NoCreditorError",
    "DuplicateCreditSourceError",
    "NoIncomeCalculatorError",
    "NoRecipeError",
    "InvalidFormulaError",
    "InvalidContraFormulaError",
    "TaxInfoMismatchError",
    "InvalidRateError",
    "InvalidBracketError",
    "AggregationError",
    "NoCalculatorError",
    "TooManyYearsError",
    "UnknownTaxParamsError",
]
