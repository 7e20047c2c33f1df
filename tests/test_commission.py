"""Unit tests for commission arithmetic."""

from decimal import Decimal

import pytest

from services.commission import calculate_commission, split_payment, to_money
from services.errors import AgreementValidationError


class TestCalculateCommission:
    def test_ten_percent_of_thousand(self):
        assert calculate_commission(1000, 10) == Decimal("100")

    def test_zero_amount(self):
        assert calculate_commission(0, 10) == Decimal("0")

    @pytest.mark.parametrize("amount", ["0", "1", "999.99", "1500000.00"])
    def test_zero_rate(self, amount):
        assert calculate_commission(Decimal(amount), 0) == Decimal("0")

    def test_result_is_quantized_to_cents(self):
        assert calculate_commission(Decimal("1234.56"), Decimal("7.5")) == Decimal("92.59")
        assert calculate_commission(Decimal("1234.56"), Decimal("7.5")).as_tuple().exponent == -2

    def test_rounds_half_to_even(self):
        # 0.125 -> 0.12, 0.375 -> 0.38
        assert calculate_commission(Decimal("1.25"), 10) == Decimal("0.12")
        assert calculate_commission(Decimal("3.75"), 10) == Decimal("0.38")

    def test_accepts_string_amounts(self):
        assert calculate_commission("250.00", "12.5") == Decimal("31.25")

    def test_negative_amount_rejected(self):
        with pytest.raises(AgreementValidationError):
            calculate_commission(-1, 10)

    @pytest.mark.parametrize("rate", [-1, "100.01", 150])
    def test_rate_out_of_range_rejected(self, rate):
        with pytest.raises(AgreementValidationError):
            calculate_commission(100, rate)

    def test_validation_error_is_value_error(self):
        with pytest.raises(ValueError):
            calculate_commission(100, 101)

    def test_amount_beyond_decimal_precision_rejected(self):
        with pytest.raises(AgreementValidationError, match="Amount out of range"):
            calculate_commission(Decimal("1e30"), 10)

    def test_to_money_rejects_out_of_range(self):
        with pytest.raises(AgreementValidationError):
            to_money(Decimal("1e40"))


class TestSplitPayment:
    def test_split_with_agent(self):
        agent, landlord = split_payment(Decimal("1000"), Decimal("10"), has_agent=True)
        assert agent == Decimal("100.00")
        assert landlord == Decimal("900.00")

    def test_split_without_agent_gives_landlord_everything(self):
        agent, landlord = split_payment(Decimal("1000"), Decimal("10"), has_agent=False)
        assert agent == Decimal("0")
        assert landlord == Decimal("1000.00")

    def test_parts_always_sum_to_amount(self):
        amount = Decimal("333.33")
        agent, landlord = split_payment(amount, Decimal("7.77"), has_agent=True)
        assert agent + landlord == amount


def test_to_money():
    assert to_money("10") == Decimal("10.00")
    assert to_money(Decimal("2.675")) == Decimal("2.68")
