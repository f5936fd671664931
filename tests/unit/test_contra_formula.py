import pytest

from taxcalc.core.finance import FinancialSource, NullFinances
from taxcalc.core.region import Region
from taxcalc.errors import ConfigurationError, DuplicateCreditSourceError, NoCreditorError
from taxcalc.tax.calculator import TaxPayer
from taxcalc.tax.credit import CreditRule, CreditRuleType, TaxCredit
from taxcalc.tax.creditor import WeightedCreditor
from tests.fixtures.builders import TEST_YEAR, const_creditor, make_contra_formula, make_finances

CASH = CreditRuleType.CASHABLE
CARRY = CreditRuleType.CAN_CARRY_FORWARD
NO_CARRY = CreditRuleType.NOT_CARRY_FORWARD


def _credit(source: str, amount: float = 100.0) -> TaxCredit:
    return TaxCredit(amount=amount, rule=CreditRule(source, CARRY))


def test_validate_rejects_duplicate_sources() -> None:
    cf = make_contra_formula(
        const_creditor(1_000, "basic-amount", NO_CARRY),
        const_creditor(2_000, "basic-amount", CASH),
    )
    with pytest.raises(DuplicateCreditSourceError, match="basic-amount"):
        cf.validate()


def test_validate_rejects_missing_creditor() -> None:
    cf = make_contra_formula(const_creditor(1_000, "a", NO_CARRY), None)
    with pytest.raises(NoCreditorError):
        cf.validate()


def test_validate_errors_are_configuration_errors() -> None:
    with pytest.raises(ConfigurationError):
        make_contra_formula(None).validate()


def test_validate_accepts_unique_sources() -> None:
    make_contra_formula(const_creditor(1, "a", CASH), const_creditor(2, "b", CARRY)).validate()
    make_contra_formula().validate()


def test_apply_without_tax_payer_or_finances() -> None:
    cf = make_contra_formula(const_creditor(1_000, "a", CASH))
    assert cf.apply(None) == []
    assert cf.apply(TaxPayer(finances=None)) == []


def test_apply_tags_credits_and_drops_zero_amounts() -> None:
    finances = make_finances(misc_tuition=2_000.0)
    cf = make_contra_formula(
        const_creditor(0.0, "zero", CASH),
        WeightedCreditor(
            weight=0.15,
            target_source=FinancialSource.MISC_TUITION,
            rule=CreditRule("tuition", CARRY),
            description="tuition",
        ),
        const_creditor(-50.0, "negative", NO_CARRY),
    )

    credits = cf.apply(TaxPayer(finances=finances, net_income=40_000.0))

    assert [cr.source for cr in credits] == ["tuition", "negative"]
    tuition = credits[0]
    assert tuition.amount == pytest.approx(300.0)
    assert tuition.initial_amount == pytest.approx(300.0)
    assert tuition.used_amount == 0.0
    assert tuition.rule == CreditRule("tuition", CARRY)
    assert tuition.reference is finances
    assert tuition.financial_source is FinancialSource.MISC_TUITION
    assert tuition.tax_year == TEST_YEAR
    assert tuition.tax_region is Region.CA
    assert tuition.owner_id is None
    assert tuition.description == "tuition"


def test_apply_preserves_creditor_order() -> None:
    cf = make_contra_formula(
        const_creditor(3, "c", CASH),
        const_creditor(1, "a", CASH),
        const_creditor(2, "b", CASH),
    )
    credits = cf.apply(TaxPayer(finances=NullFinances()))
    assert [cr.source for cr in credits] == ["c", "a", "b"]


def test_filter_and_sort_orders_by_creditor_position() -> None:
    cf = make_contra_formula(
        const_creditor(1, "first", CASH),
        const_creditor(1, "second", CARRY),
        const_creditor(1, "third", NO_CARRY),
    )
    given = [_credit("third"), None, _credit("unknown"), _credit("first"), _credit("second")]

    result = cf.filter_and_sort(given)

    assert [cr.source for cr in result] == ["first", "second", "third"]


def test_filter_and_sort_is_stable_for_shared_sources() -> None:
    cf = make_contra_formula(const_creditor(1, "a", CASH), const_creditor(1, "b", CASH))
    b1, a1, b2, a2 = _credit("b", 1), _credit("a", 2), _credit("b", 3), _credit("a", 4)

    result = cf.filter_and_sort([b1, a1, b2, a2])

    assert result == [a1, a2, b1, b2]
    assert [cr.amount for cr in result] == [2, 4, 1, 3]


def test_filter_and_sort_returns_new_list() -> None:
    cf = make_contra_formula(const_creditor(1, "a", CASH))
    given = [_credit("a")]
    assert cf.filter_and_sort(given) is not given
    assert cf.filter_and_sort([]) == []


def test_clone_is_independent() -> None:
    creditor = const_creditor(100, "a", CASH)
    cf = make_contra_formula(creditor, year=2018, region=Region.BC)
    clone = cf.clone()

    creditor.amount = 999
    cf.creditors.append(const_creditor(1, "b", CASH))

    credits = clone.apply(TaxPayer(finances=NullFinances()))
    assert [cr.amount for cr in credits] == [100]
    assert clone.year == 2018
    assert clone.region is Region.BC
    assert clone.priority() == {"a": 0}
