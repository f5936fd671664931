import math

import pytest

from taxcalc.core.brackets import Bracket
from taxcalc.core.region import Region
from taxcalc.errors import InvalidRateError
from taxcalc.tax.formula import Formula
from tests.fixtures.builders import make_formula


def test_apply_delegates_to_brackets() -> None:
    formula = make_formula()
    assert formula.apply(70_000) == pytest.approx(0.15 * 50_000 + 0.26 * 20_000)
    assert formula.apply(10_000) == pytest.approx(1_500)


def test_year_and_region_tags() -> None:
    formula = make_formula(2018, Region.BC)
    assert formula.year == 2018
    assert formula.region is Region.BC


def test_clone_does_not_share_brackets() -> None:
    formula = make_formula()
    clone = formula.clone()
    formula.brackets[0.99] = Bracket(0, math.inf)

    assert clone.apply(70_000) == pytest.approx(12_700)
    assert clone.year == formula.year
    assert clone.region == formula.region


def test_validate_propagates_bracket_errors() -> None:
    formula = Formula({math.inf: Bracket(0, 10)}, 2019, Region.CA)
    with pytest.raises(InvalidRateError):
        formula.validate()
