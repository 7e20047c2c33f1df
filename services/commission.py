# services/commission.py
"""
Agent commission arithmetic.

Money is Decimal throughout. Results are rounded to cents with
ROUND_HALF_EVEN (banker's rounding).
"""
from decimal import Decimal, InvalidOperation, ROUND_HALF_EVEN
from typing import Tuple, Union

from services.errors import AgreementValidationError

CENT = Decimal("0.01")
HUNDRED = Decimal("100")

Number = Union[Decimal, int, str]


def to_money(value: Number) -> Decimal:
     """Convert to a Decimal quantized to cents."""
     try:
          return Decimal(value).quantize(CENT, rounding=ROUND_HALF_EVEN)
     except InvalidOperation as exc:
          raise AgreementValidationError("Amount out of range") from exc


def calculate_commission(amount: Number, rate_percent: Number) -> Decimal:
     """
     Commission on amount at rate_percent: amount * rate / 100, rounded half-even to cents.

     Raises:
          AgreementValidationError: negative amount, or rate outside 0..100
     """
     amount = Decimal(amount)
     rate = Decimal(rate_percent)
     if amount < 0:
          raise AgreementValidationError("Amount must not be negative")
     if rate < 0 or rate > HUNDRED:
          raise AgreementValidationError("Commission rate must be between 0 and 100")
     return to_money(amount * rate / HUNDRED)


def split_payment(amount: Number, rate_percent: Number, has_agent: bool) -> Tuple[Decimal, Decimal]:
     """
     Split a payment into (agent_amount, landlord_amount).
     Without an agent the landlord receives everything.
     """
     amount = to_money(amount)
     agent_amount = calculate_commission(amount, rate_percent) if has_agent else to_money(0)
     return agent_amount, amount - agent_amount
