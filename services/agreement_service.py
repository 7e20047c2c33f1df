# services/agreement_service.py
"""
Agreement Service - business logic for the rent agreement lifecycle.

Creation, patching, termination, lookup and listing of agreements.
Payments and ledger totals live in services/payment_service.py.
Methods flush but never commit; the caller owns the transaction.
"""
import logging
import math
from datetime import datetime
from typing import Optional

from sqlalchemy import asc, desc, func, select
from sqlalchemy.orm import Session, selectinload

from config import AGREEMENT_LIST_DEFAULT_LIMIT, AGREEMENT_LIST_MAX_LIMIT
from models import RentAgreement, AgreementStatus, TerminationReason
from schemas.agreement import (
     AgreementCreate,
     AgreementUpdate,
     AgreementSortField,
     SortOrder,
)
from services import lifecycle
from services.agreement_number import next_agreement_number
from services.commission import calculate_commission, to_money
from services.errors import AgreementNotFoundError, AgreementValidationError

logger = logging.getLogger(__name__)

# Fields an explicit null may clear; every other patch field must carry a value
NULLABLE_PATCH_FIELDS = frozenset({"agent_id", "renewal_notice_days", "terms_and_conditions"})
COMMISSION_INPUTS = frozenset({"agent_id", "monthly_rent", "agent_commission_rate"})


def validate_period(start_date: datetime, end_date: datetime) -> None:
     if end_date <= start_date:
          raise AgreementValidationError("End date must be after start date")


def agreement_commission(agreement: RentAgreement):
     """Commission on one rent period; nothing when no agent is attached."""
     if not agreement.agent_id:
          return to_money(0)
     return calculate_commission(agreement.monthly_rent, agreement.agent_commission_rate)


class AgreementService:
     """Service class for rent agreement business logic."""

     @staticmethod
     def create(db: Session, data: AgreementCreate) -> RentAgreement:
          """
          Create a draft agreement.

          Raises:
               AgreementValidationError: end_date is not after start_date
          """
          validate_period(data.start_date, data.end_date)

          agreement = RentAgreement(
               agreement_number=next_agreement_number(db),
               property_id=data.property_id,
               landlord_id=data.landlord_id,
               tenant_id=data.tenant_id,
               agent_id=data.agent_id,
               monthly_rent=to_money(data.monthly_rent),
               currency=data.currency,
               security_deposit=to_money(data.security_deposit),
               agent_commission_rate=data.agent_commission_rate,
               payment_frequency=data.payment_frequency,
               start_date=data.start_date,
               end_date=data.end_date,
               renewal_option=data.renewal_option,
               renewal_notice_days=data.renewal_notice_days,
               terms_and_conditions=data.terms_and_conditions,
               status=AgreementStatus.DRAFT,
               total_amount_paid=to_money(0),
               escrow_balance=to_money(0),
               total_payments_made=0,
          )
          agreement.agent_commission_amount = agreement_commission(agreement)

          db.add(agreement)
          db.flush()

          logger.info(
               "Created agreement %s (%s) landlord=%s tenant=%s",
               agreement.agreement_number, agreement.id, agreement.landlord_id, agreement.tenant_id,
          )
          return agreement

     @staticmethod
     def get(db: Session, agreement_id: str, for_update: bool = False) -> RentAgreement:
          """Load an agreement row, optionally locking it for the rest of the transaction."""
          stmt = select(RentAgreement).where(RentAgreement.id == agreement_id)
          if for_update:
               stmt = stmt.with_for_update()
          agreement = db.execute(stmt).scalar_one_or_none()
          if agreement is None:
               raise AgreementNotFoundError(agreement_id)
          return agreement

     @staticmethod
     def find_one(db: Session, agreement_id: str) -> RentAgreement:
          """Agreement with its payments (most recent payment first)."""
          agreement = db.execute(
               select(RentAgreement)
               .options(selectinload(RentAgreement.payments))
               .where(RentAgreement.id == agreement_id)
          ).scalar_one_or_none()
          if agreement is None:
               raise AgreementNotFoundError(agreement_id)
          return agreement

     @staticmethod
     def update(db: Session, agreement_id: str, patch: AgreementUpdate) -> RentAgreement:
          """
          Apply a patch field by field.

          The resulting start/end period is re-validated whichever side changed.

          Raises:
               AgreementNotFoundError: unknown id
               AgreementValidationError: end_date not after start_date, or null for a required field
          """
          agreement = AgreementService.get(db, agreement_id)
          changes = patch.model_dump(exclude_unset=True)

          for field, value in changes.items():
               if value is None and field not in NULLABLE_PATCH_FIELDS:
                    raise AgreementValidationError(f"{field} cannot be null")

          validate_period(
               changes.get("start_date", agreement.start_date),
               changes.get("end_date", agreement.end_date),
          )

          for field, value in changes.items():
               if field in ("monthly_rent", "security_deposit"):
                    value = to_money(value)
               setattr(agreement, field, value)

          if changes.keys() & COMMISSION_INPUTS:
               agreement.agent_commission_amount = agreement_commission(agreement)

          db.flush()
          logger.info("Updated agreement %s fields=%s", agreement.agreement_number, sorted(changes))
          return agreement

     @staticmethod
     def terminate(
          db: Session,
          agreement_id: str,
          reason: TerminationReason,
          notes: Optional[str] = None,
     ) -> RentAgreement:
          """
          Terminate an agreement. Terminated is final.

          Raises:
               AgreementNotFoundError: unknown id
               AgreementConflictError: already terminated
          """
          agreement = AgreementService.get(db, agreement_id, for_update=True)
          lifecycle.terminate(agreement, reason, notes)
          db.flush()

          logger.info(
               "Terminated agreement %s reason=%s", agreement.agreement_number, reason.value
          )
          return agreement

     @staticmethod
     def list_agreements(
          db: Session,
          status: Optional[AgreementStatus] = None,
          landlord_id: Optional[str] = None,
          tenant_id: Optional[str] = None,
          agent_id: Optional[str] = None,
          property_id: Optional[str] = None,
          page: int = 1,
          limit: int = AGREEMENT_LIST_DEFAULT_LIMIT,
          sort_by: AgreementSortField = AgreementSortField.CREATED_AT,
          sort_order: SortOrder = SortOrder.DESC,
     ) -> dict:
          """
          Filter (AND-combined), sort and paginate agreements.

          page is 1-based; limit is clamped to 1..AGREEMENT_LIST_MAX_LIMIT.

          Returns:
               Dictionary with data, total, page, limit and total_pages
          """
          page = max(page, 1)
          limit = min(max(limit, 1), AGREEMENT_LIST_MAX_LIMIT)

          filters = []
          if status is not None:
               filters.append(RentAgreement.status == status)
          if landlord_id:
               filters.append(RentAgreement.landlord_id == landlord_id)
          if tenant_id:
               filters.append(RentAgreement.tenant_id == tenant_id)
          if agent_id:
               filters.append(RentAgreement.agent_id == agent_id)
          if property_id:
               filters.append(RentAgreement.property_id == property_id)

          total = db.execute(
               select(func.count()).select_from(RentAgreement).where(*filters)
          ).scalar_one()

          column = getattr(RentAgreement, AgreementSortField(sort_by).value)
          direction = asc if SortOrder(sort_order) == SortOrder.ASC else desc

          agreements = db.execute(
               select(RentAgreement)
               .where(*filters)
               .order_by(
                    direction(column),
                    direction(RentAgreement.created_at),
                    direction(RentAgreement.id),
               )
               .offset((page - 1) * limit)
               .limit(limit)
          ).scalars().all()

          return {
               "data": agreements,
               "total": total,
               "page": page,
               "limit": limit,
               "total_pages": math.ceil(total / limit) if total else 0,
          }
