import enum

from sqlalchemy import Column, String, Numeric, DateTime, Text, ForeignKey, Enum
from sqlalchemy.orm import relationship

from .base import Base, generate_uuid, utcnow


class PaymentStatus(str, enum.Enum):
     PENDING = "pending"
     COMPLETED = "completed"
     FAILED = "failed"
     REFUNDED = "refunded"


class Payment(Base):
     """
     Payment model - a single payment recorded against a rent agreement.

     Rows are append-only: created by the payment recorder and never updated.
     agent_amount + landlord_amount always equals amount.
     """

     id = Column(String(36), primary_key=True, default=generate_uuid)
     agreement_id = Column(
          String(36),
          ForeignKey("rent_agreements.id", ondelete="CASCADE"),
          nullable=False,
          index=True
     )

     amount = Column(Numeric(15, 2), nullable=False)
     payment_date = Column(DateTime, nullable=False, index=True)
     payment_method = Column(String(50), nullable=False)
     reference_number = Column(String(255), nullable=True)
     notes = Column(Text, nullable=True)
     status = Column(
          Enum(PaymentStatus, name="payment_status", values_callable=lambda e: [m.value for m in e]),
          default=PaymentStatus.COMPLETED,
          nullable=False
     )

     # Commission split
     agent_amount = Column(Numeric(15, 2), nullable=False, default=0)
     landlord_amount = Column(Numeric(15, 2), nullable=False)

     created_at = Column(DateTime, default=utcnow, nullable=False)

     agreement = relationship("RentAgreement", back_populates="payments")

     def __repr__(self):
          return f"<Payment(id={self.id}, agreement_id={self.agreement_id}, amount={self.amount})>"
