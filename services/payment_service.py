# services/payment_service.py
"""
Payment Recorder - appends payments to an agreement and keeps its ledger totals.

When a payment is recorded:
1. Lock the agreement row and refuse terminated agreements
2. Store an immutable Payment (status completed) with the landlord/agent split
3. Increment total_amount_paid, escrow_balance and total_payments_made in SQL
   (column = column + :amount), set last_payment_date
4. Activate draft / pending_deposit agreements

This is the only code path that writes ledger fields.
"""
import logging
from datetime import datetime
from decimal import Decimal
from typing import List, Optional

from sqlalchemy import select
from sqlalchemy.orm import Session

from models import RentAgreement, Payment, PaymentStatus
from services import lifecycle
from services.agreement_service import AgreementService
from services.commission import split_payment, to_money
from services.errors import AgreementValidationError

logger = logging.getLogger(__name__)


def record_payment(
     db: Session,
     agreement_id: str,
     amount: Decimal,
     payment_date: datetime,
     payment_method: str,
     reference_number: Optional[str] = None,
     notes: Optional[str] = None,
) -> Payment:
     """
     Record a completed payment against an agreement.

     Raises:
          AgreementNotFoundError: unknown agreement
          AgreementConflictError: agreement is terminated
          AgreementValidationError: amount is not positive
     """
     amount = to_money(amount)
     if amount <= 0:
          raise AgreementValidationError("Payment amount must be greater than zero")

     agreement = AgreementService.get(db, agreement_id, for_update=True)
     lifecycle.ensure_mutable(agreement, "record payment for")

     agent_amount, landlord_amount = split_payment(
          amount, agreement.agent_commission_rate, has_agent=bool(agreement.agent_id)
     )
     payment = Payment(
          agreement_id=agreement.id,
          amount=amount,
          payment_date=payment_date,
          payment_method=payment_method,
          reference_number=reference_number,
          notes=notes,
          status=PaymentStatus.COMPLETED,
          agent_amount=agent_amount,
          landlord_amount=landlord_amount,
     )
     db.add(payment)

     # SQL-side increments; the attributes are refreshed from the row after flush
     agreement.total_amount_paid = RentAgreement.total_amount_paid + amount
     agreement.escrow_balance = RentAgreement.escrow_balance + amount
     agreement.total_payments_made = RentAgreement.total_payments_made + 1
     agreement.last_payment_date = payment_date

     if lifecycle.needs_activation(agreement):
          lifecycle.activate(agreement)

     db.flush()
     db.expire(agreement, ["payments"])

     logger.info(
          "Recorded payment %s of %s %s on agreement %s (agent=%s landlord=%s)",
          payment.id, amount, agreement.currency, agreement.agreement_number,
          agent_amount, landlord_amount,
     )
     return payment


def get_payments(db: Session, agreement_id: str) -> List[Payment]:
     """
     All payments of an agreement, most recent payment_date first.

     Raises:
          AgreementNotFoundError: unknown agreement
     """
     AgreementService.get(db, agreement_id)
     return list(
          db.execute(
               select(Payment)
               .where(Payment.agreement_id == agreement_id)
               .order_by(Payment.payment_date.desc(), Payment.created_at.desc())
          ).scalars()
     )
