# schemas/agreement.py
"""
Pydantic schemas for rent agreement request/response validation.
"""
from datetime import datetime
from decimal import Decimal
from enum import Enum
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from models import AgreementStatus, PaymentFrequency, TerminationReason
from schemas.payment import PaymentResponse, to_naive_utc


class SortOrder(str, Enum):
     ASC = "asc"
     DESC = "desc"


class AgreementSortField(str, Enum):
     CREATED_AT = "created_at"
     UPDATED_AT = "updated_at"
     START_DATE = "start_date"
     END_DATE = "end_date"
     MONTHLY_RENT = "monthly_rent"
     # Compared as text: ordered correctly while a year stays within 9999 agreements
     AGREEMENT_NUMBER = "agreement_number"
     STATUS = "status"
     TOTAL_AMOUNT_PAID = "total_amount_paid"


class AgreementCreate(BaseModel):
     """Schema for creating a rent agreement. Starts life as a draft."""
     property_id: str = Field(..., min_length=1, max_length=36)
     landlord_id: str = Field(..., min_length=1, max_length=36)
     tenant_id: str = Field(..., min_length=1, max_length=36)
     agent_id: Optional[str] = Field(None, min_length=1, max_length=36)

     monthly_rent: Decimal = Field(..., gt=0, max_digits=15, decimal_places=2)
     currency: str = Field(..., min_length=1, max_length=10)
     security_deposit: Decimal = Field(Decimal("0"), ge=0, max_digits=15, decimal_places=2)
     agent_commission_rate: Decimal = Field(
          Decimal("0"), ge=0, le=100, max_digits=5, decimal_places=2, description="Percentage"
     )
     payment_frequency: PaymentFrequency = PaymentFrequency.MONTHLY

     start_date: datetime
     end_date: datetime
     renewal_option: bool = False
     renewal_notice_days: Optional[int] = Field(None, ge=0)
     terms_and_conditions: Optional[str] = None

     @field_validator("start_date", "end_date")
     @classmethod
     def normalize_dates(cls, value):
          return to_naive_utc(value)

     model_config = ConfigDict(
          json_schema_extra={
               "example": {
                    "property_id": "7d1c5c1e-4f4e-4a57-9f52-0d3f9f7b8a10",
                    "landlord_id": "0f6a2b44-0b5a-4a33-9d3d-5f1e2c3b4a01",
                    "tenant_id": "a3c9d7e2-6b1f-4e8a-8c2d-1e0f9a8b7c02",
                    "agent_id": "5e4d3c2b-1a09-4f8e-9d7c-6b5a4e3d2c03",
                    "monthly_rent": 1500.00,
                    "currency": "USDC",
                    "security_deposit": 3000.00,
                    "agent_commission_rate": 10,
                    "payment_frequency": "monthly",
                    "start_date": "2026-01-01T00:00:00Z",
                    "end_date": "2027-01-01T00:00:00Z",
                    "terms_and_conditions": "Standard residential lease."
               }
          }
     )


class AgreementUpdate(BaseModel):
     """
     Patch for an existing agreement. Only the fields listed here can change;
     ledger fields, status and termination data are managed by the service.
     """
     property_id: Optional[str] = Field(None, min_length=1, max_length=36)
     agent_id: Optional[str] = Field(None, min_length=1, max_length=36)
     monthly_rent: Optional[Decimal] = Field(None, gt=0, max_digits=15, decimal_places=2)
     currency: Optional[str] = Field(None, min_length=1, max_length=10)
     security_deposit: Optional[Decimal] = Field(None, ge=0, max_digits=15, decimal_places=2)
     agent_commission_rate: Optional[Decimal] = Field(None, ge=0, le=100, max_digits=5, decimal_places=2)
     payment_frequency: Optional[PaymentFrequency] = None
     start_date: Optional[datetime] = None
     end_date: Optional[datetime] = None
     renewal_option: Optional[bool] = None
     renewal_notice_days: Optional[int] = Field(None, ge=0)
     terms_and_conditions: Optional[str] = None

     @field_validator("start_date", "end_date")
     @classmethod
     def normalize_dates(cls, value):
          return to_naive_utc(value)

     model_config = ConfigDict(
          extra="forbid",
          json_schema_extra={
               "example": {
                    "monthly_rent": 1600.00,
                    "end_date": "2027-06-30T00:00:00Z"
               }
          }
     )


class AgreementTerminate(BaseModel):
     """Schema for terminating an agreement."""
     termination_reason: TerminationReason
     termination_notes: Optional[str] = None

     model_config = ConfigDict(
          json_schema_extra={
               "example": {
                    "termination_reason": "lease_end",
                    "termination_notes": "Tenant moved out at end of term."
               }
          }
     )


class AgreementResponse(BaseModel):
     """Schema for agreement response."""
     id: str
     agreement_number: str
     property_id: str
     landlord_id: str
     tenant_id: str
     agent_id: Optional[str] = None

     monthly_rent: Decimal
     currency: str
     security_deposit: Decimal
     agent_commission_rate: Decimal
     agent_commission_amount: Decimal
     payment_frequency: PaymentFrequency

     start_date: datetime
     end_date: datetime
     renewal_option: bool
     renewal_notice_days: Optional[int] = None
     terms_and_conditions: Optional[str] = None

     total_amount_paid: Decimal
     escrow_balance: Decimal
     last_payment_date: Optional[datetime] = None
     total_payments_made: int

     status: AgreementStatus
     terminated_at: Optional[datetime] = None
     termination_reason: Optional[TerminationReason] = None
     termination_notes: Optional[str] = None

     created_at: datetime
     updated_at: datetime

     model_config = ConfigDict(from_attributes=True)


class AgreementDetailResponse(AgreementResponse):
     """Agreement with its payment history, most recent first."""
     payments: List[PaymentResponse] = []


class AgreementListResponse(BaseModel):
     """Schema for paginated agreement list response."""
     data: List[AgreementResponse]
     total: int
     page: int = 1
     limit: int = 10
     total_pages: int = 0

     model_config = ConfigDict(
          json_schema_extra={
               "example": {
                    "data": [],
                    "total": 0,
                    "page": 1,
                    "limit": 10,
                    "total_pages": 0
               }
          }
     )
