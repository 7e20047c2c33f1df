import enum

from sqlalchemy import (
     Boolean,
     Column,
     DateTime,
     Enum,
     Integer,
     Numeric,
     String,
     Text,
)
from sqlalchemy.orm import relationship

from .base import Base, generate_uuid, utcnow


class AgreementStatus(str, enum.Enum):
     """Lifecycle states of a rent agreement."""
     DRAFT = "draft"
     PENDING_DEPOSIT = "pending_deposit"
     ACTIVE = "active"
     EXPIRED = "expired"
     TERMINATED = "terminated"
     DISPUTED = "disputed"


class PaymentFrequency(str, enum.Enum):
     MONTHLY = "monthly"
     QUARTERLY = "quarterly"
     SEMI_ANNUAL = "semi_annual"
     ANNUAL = "annual"


class TerminationReason(str, enum.Enum):
     LEASE_END = "lease_end"
     EARLY_TERMINATION_TENANT = "early_termination_tenant"
     EARLY_TERMINATION_LANDLORD = "early_termination_landlord"
     EVICTION = "eviction"
     MUTUAL_AGREEMENT = "mutual_agreement"


class RentAgreement(Base):
     """
     RentAgreement model - lease contract between a landlord and a tenant,
     optionally brokered by an agent.

     Ledger fields (total_amount_paid, escrow_balance, last_payment_date,
     total_payments_made) are written only by the payment recorder.
     Parties and property are opaque ids owned by other services.
     """

     id = Column(String(36), primary_key=True, default=generate_uuid)
     agreement_number = Column(String(50), unique=True, nullable=False, index=True)

     # Parties
     property_id = Column(String(36), nullable=False, index=True)
     landlord_id = Column(String(36), nullable=False, index=True)
     tenant_id = Column(String(36), nullable=False, index=True)
     agent_id = Column(String(36), nullable=True, index=True)

     # Financial terms
     monthly_rent = Column(Numeric(15, 2), nullable=False)
     currency = Column(String(10), nullable=False)
     security_deposit = Column(Numeric(15, 2), nullable=False, default=0)
     agent_commission_rate = Column(Numeric(5, 2), nullable=False, default=0)  # Percentage
     agent_commission_amount = Column(Numeric(15, 2), nullable=False, default=0)
     payment_frequency = Column(
          Enum(PaymentFrequency, name="payment_frequency", values_callable=lambda e: [m.value for m in e]),
          nullable=False,
          default=PaymentFrequency.MONTHLY,
     )

     # Lease terms
     start_date = Column(DateTime, nullable=False)
     end_date = Column(DateTime, nullable=False)
     renewal_option = Column(Boolean, nullable=False, default=False)
     renewal_notice_days = Column(Integer, nullable=True)
     terms_and_conditions = Column(Text, nullable=True)

     # Payment tracking
     total_amount_paid = Column(Numeric(15, 2), nullable=False, default=0)
     escrow_balance = Column(Numeric(15, 2), nullable=False, default=0)
     last_payment_date = Column(DateTime, nullable=True)
     total_payments_made = Column(Integer, nullable=False, default=0)

     # Status
     status = Column(
          Enum(AgreementStatus, name="agreement_status", values_callable=lambda e: [m.value for m in e]),
          nullable=False,
          default=AgreementStatus.DRAFT,
          index=True,
     )

     # Termination
     terminated_at = Column(DateTime, nullable=True)
     termination_reason = Column(
          Enum(TerminationReason, name="termination_reason", values_callable=lambda e: [m.value for m in e]),
          nullable=True,
     )
     termination_notes = Column(Text, nullable=True)

     # Timestamps
     created_at = Column(DateTime, default=utcnow, nullable=False, index=True)
     updated_at = Column(DateTime, default=utcnow, onupdate=utcnow, nullable=False)

     # Relationships
     payments = relationship(
          "Payment",
          back_populates="agreement",
          cascade="all, delete-orphan",
          order_by="Payment.payment_date.desc()",
     )

     def __repr__(self):
          return f"<RentAgreement(id={self.id}, number='{self.agreement_number}', status='{self.status.value}')>"

     @property
     def is_terminated(self) -> bool:
          return self.status == AgreementStatus.TERMINATED
