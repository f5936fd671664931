import pytest

from taxcalc.core.finance import FinancialSource, NullFinances
from taxcalc.tax.calculator import TaxPayer
from taxcalc.tax.credit import CreditRule, CreditRuleType
from taxcalc.tax.creditor import CanadianSpouseCreditor, ConstCreditor, WeightedCreditor
from tests.fixtures.builders import make_finances

RULE = CreditRule("test-source", CreditRuleType.NOT_CARRY_FORWARD)


def test_const_creditor_ignores_tax_payer() -> None:
    creditor = ConstCreditor(amount=500.0, rule=RULE)
    assert creditor.tax_credit(None) == 500.0
    assert creditor.tax_credit(TaxPayer(finances=NullFinances(), net_income=1e6)) == 500.0
    assert creditor.financial_source is FinancialSource.NONE


def test_weighted_creditor_applies_weight_to_target_source() -> None:
    finances = make_finances(misc_tuition=4_000.0, misc_medical=1_000.0)
    creditor = WeightedCreditor(weight=0.15, target_source=FinancialSource.MISC_TUITION, rule=RULE)

    assert creditor.tax_credit(TaxPayer(finances=finances)) == pytest.approx(600.0)
    assert creditor.tax_credit(None) == 0.0
    assert creditor.financial_source is FinancialSource.MISC_TUITION


def test_weighted_creditor_missing_source_is_zero() -> None:
    creditor = WeightedCreditor(weight=0.15, target_source=FinancialSource.MISC_DONATIONS, rule=RULE)
    assert creditor.tax_credit(TaxPayer(finances=make_finances(inc_earned=50_000.0))) == 0.0


@pytest.mark.parametrize(
    "net_income, spouse_net_income, expected",
    [
        (60_000.0, 2_000.0, 0.15 * (12_000.0 - 2_000.0)),
        (60_000.0, 0.0, 0.15 * 12_000.0),
        (60_000.0, 12_000.0, 0.0),
        (60_000.0, 15_000.0, 0.0),
        (5_000.0, 5_000.0, 0.15 * (12_000.0 - 5_000.0)),
        (4_999.0, 5_000.0, 0.0),
    ],
)
def test_spouse_creditor(net_income: float, spouse_net_income: float, expected: float) -> None:
    creditor = CanadianSpouseCreditor(base_amount=12_000.0, weight=0.15, rule=RULE)
    tax_payer = TaxPayer(
        finances=NullFinances(),
        net_income=net_income,
        spouse_finances=NullFinances(),
        spouse_net_income=spouse_net_income,
    )
    assert creditor.tax_credit(tax_payer) == pytest.approx(expected)


def test_spouse_creditor_without_spouse() -> None:
    creditor = CanadianSpouseCreditor(base_amount=12_000.0, weight=0.15, rule=RULE)
    assert creditor.tax_credit(None) == 0.0
    assert creditor.tax_credit(TaxPayer(finances=NullFinances(), net_income=60_000.0)) == 0.0


@pytest.mark.parametrize(
    "creditor",
    [
        ConstCreditor(amount=1.0, rule=RULE),
        WeightedCreditor(weight=0.5, target_source=FinancialSource.MISC_MEDICAL, rule=RULE),
        CanadianSpouseCreditor(base_amount=10.0, weight=0.5, rule=RULE),
    ],
)
def test_clone_is_value_independent(creditor) -> None:
    clone = creditor.clone()
    assert clone == creditor
    assert clone is not creditor

    clone.description = "changed"
    assert creditor.description == ""
