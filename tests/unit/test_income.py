import pytest

from taxcalc.core.finance import FinancialSource, NullFinances
from taxcalc.core.human import Person
from taxcalc.core.income import Calculator, IncomeCalculator, Recipe, WeightedAdjuster
from taxcalc.errors import NoRecipeError
from taxcalc.params.recipes import INCOME_RECIPE_NET
from tests.fixtures.builders import make_finances

FS = FinancialSource


def test_recipe_is_required() -> None:
    with pytest.raises(NoRecipeError):
        Calculator(None)


def test_no_finances_means_no_income() -> None:
    calc = Calculator(Recipe())
    assert isinstance(calc, IncomeCalculator)
    assert calc.net_income() == 0.0
    calc.set_finances(NullFinances())
    assert calc.net_income() == 0.0


def test_net_income_applies_adjusters() -> None:
    calc = Calculator(INCOME_RECIPE_NET)
    calc.set_finances(
        make_finances(
            inc_earned=50_000.0,
            inc_capital_gain_ca=10_000.0,
            inc_tfsa=4_000.0,
            deduc_rrsp=6_000.0,
            misc_medical=900.0,
        )
    )

    assert calc.total_income() == pytest.approx(50_000.0 + 5_000.0)
    assert calc.total_deductions() == pytest.approx(6_000.0)
    assert calc.net_income() == pytest.approx(49_000.0)


def test_deduction_adjusters() -> None:
    calc = Calculator(Recipe(deduction_adjusters={FS.DEDUC_OTHERS: WeightedAdjuster(0.5)}))
    calc.set_finances(make_finances(inc_earned=10_000.0, deduc_others=2_000.0))
    assert calc.net_income() == pytest.approx(9_000.0)


def test_recipe_is_copied_on_construction() -> None:
    recipe = Recipe(income_adjusters={FS.INC_INTEREST: WeightedAdjuster(0.0)})
    calc = Calculator(recipe)
    recipe.income_adjusters[FS.INC_INTEREST] = WeightedAdjuster(1.0)

    calc.set_finances(make_finances(inc_interest=500.0))
    assert calc.net_income() == 0.0


def test_finances_changes_are_seen() -> None:
    finances = make_finances(inc_earned=1_000.0)
    calc = Calculator(Recipe())
    calc.set_finances(finances)
    finances.add_amount(FS.INC_EARNED, 500.0)
    assert calc.net_income() == pytest.approx(1_500.0)


@pytest.mark.parametrize("months, years", [(0, 0), (11, 0), (12, 1), (30, 2)])
def test_person_age_years(months: int, years: int) -> None:
    assert Person("dependent", months).age_years == years
