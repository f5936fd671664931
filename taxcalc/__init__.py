"""Canadian personal income tax and credit calculators."""

__version__ = "0.1.0"
