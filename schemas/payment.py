# schemas/payment.py
"""
Pydantic schemas for recording and reading agreement payments.
"""
from datetime import datetime, timezone
from decimal import Decimal
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from models import PaymentStatus


def to_naive_utc(value: Optional[datetime]) -> Optional[datetime]:
     """Date-times are stored as naive UTC; aware inputs are converted."""
     if value is not None and value.tzinfo is not None:
          return value.astimezone(timezone.utc).replace(tzinfo=None)
     return value


class PaymentCreate(BaseModel):
     """Request body for POST /api/agreements/{id}/payments."""

     amount: Decimal = Field(..., gt=0, max_digits=15, decimal_places=2, description="Amount paid")
     payment_date: datetime = Field(..., description="When the payment was made")
     payment_method: str = Field(..., min_length=1, max_length=50)
     reference_number: Optional[str] = Field(None, max_length=255)
     notes: Optional[str] = None

     @field_validator("payment_date")
     @classmethod
     def normalize_payment_date(cls, value: datetime) -> datetime:
          return to_naive_utc(value)

     model_config = ConfigDict(
          json_schema_extra={
               "example": {
                    "amount": 1500.00,
                    "payment_date": "2026-02-01T09:00:00Z",
                    "payment_method": "bank_transfer",
                    "reference_number": "TRX-20260201-0042",
                    "notes": "February rent"
               }
          }
     )


class PaymentResponse(BaseModel):
     """Recorded payment, including the landlord/agent split."""

     id: str
     agreement_id: str
     amount: Decimal
     payment_date: datetime
     payment_method: str
     reference_number: Optional[str] = None
     notes: Optional[str] = None
     status: PaymentStatus
     agent_amount: Decimal
     landlord_amount: Decimal
     created_at: datetime

     model_config = ConfigDict(from_attributes=True)


class CommissionResponse(BaseModel):
     amount: Decimal
     commission_rate: Decimal
     commission: Decimal
