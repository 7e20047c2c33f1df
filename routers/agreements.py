# routers/agreements.py
"""
Rent agreement API routes.

Thin layer over services.AgreementService and services.payment_service.
Service failures (validation / not found / conflict) are turned into
400 / 404 / 409 by the handler registered in main.py.
"""
from decimal import Decimal
from typing import List, Optional

from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.orm import Session

from auth import verify_token
from config import AGREEMENT_LIST_DEFAULT_LIMIT, AGREEMENT_LIST_MAX_LIMIT
from database import get_session
from models import AgreementStatus
from schemas.agreement import (
     AgreementCreate,
     AgreementUpdate,
     AgreementTerminate,
     AgreementResponse,
     AgreementDetailResponse,
     AgreementListResponse,
     AgreementSortField,
     SortOrder,
)
from schemas.payment import PaymentCreate, PaymentResponse, CommissionResponse
from services import payment_service
from services.agreement_service import AgreementService
from services.commission import calculate_commission

router = APIRouter(
     prefix="/api/agreements",
     tags=["agreements"],
     dependencies=[Depends(verify_token)],
)


@router.post(
     "",
     response_model=AgreementResponse,
     status_code=status.HTTP_201_CREATED,
     summary="Create a rent agreement"
)
def create_agreement(
     agreement_data: AgreementCreate,
     db: Session = Depends(get_session),
):
     """
     Create a new agreement in **draft** status.

     - **end_date** must be after **start_date**
     - **agreement_number** is assigned as `CHIOMA-<year>-<NNNN>`
     """
     return AgreementService.create(db, agreement_data)


@router.get(
     "",
     response_model=AgreementListResponse,
     summary="List agreements with filters"
)
def list_agreements(
     status: Optional[AgreementStatus] = Query(None, description="Filter by status"),
     landlord_id: Optional[str] = Query(None, description="Filter by landlord ID"),
     tenant_id: Optional[str] = Query(None, description="Filter by tenant ID"),
     agent_id: Optional[str] = Query(None, description="Filter by agent ID"),
     property_id: Optional[str] = Query(None, description="Filter by property ID"),
     page: int = Query(1, ge=1, description="Page number"),
     limit: int = Query(AGREEMENT_LIST_DEFAULT_LIMIT, ge=1, le=AGREEMENT_LIST_MAX_LIMIT, description="Items per page"),
     sort_by: AgreementSortField = Query(AgreementSortField.CREATED_AT),
     sort_order: SortOrder = Query(SortOrder.DESC),
     db: Session = Depends(get_session),
):
     return AgreementService.list_agreements(
          db,
          status=status,
          landlord_id=landlord_id,
          tenant_id=tenant_id,
          agent_id=agent_id,
          property_id=property_id,
          page=page,
          limit=limit,
          sort_by=sort_by,
          sort_order=sort_order,
     )


@router.get(
     "/commission",
     response_model=CommissionResponse,
     summary="Calculate agent commission"
)
def get_commission(
     amount: Decimal = Query(..., ge=0, max_digits=15, decimal_places=2),
     rate: Decimal = Query(..., ge=0, le=100, max_digits=5, decimal_places=2, description="Commission rate in percent"),
):
     return CommissionResponse(
          amount=amount,
          commission_rate=rate,
          commission=calculate_commission(amount, rate),
     )


@router.get(
     "/{agreement_id}",
     response_model=AgreementDetailResponse,
     summary="Get agreement by ID"
)
def get_agreement(agreement_id: str, db: Session = Depends(get_session)):
     """Agreement with its payment history (most recent first)."""
     return AgreementService.find_one(db, agreement_id)


@router.patch(
     "/{agreement_id}",
     response_model=AgreementResponse,
     summary="Update agreement terms"
)
def update_agreement(
     agreement_id: str,
     agreement_data: AgreementUpdate,
     db: Session = Depends(get_session),
):
     return AgreementService.update(db, agreement_id, agreement_data)


@router.post(
     "/{agreement_id}/terminate",
     response_model=AgreementResponse,
     summary="Terminate agreement"
)
def terminate_agreement(
     agreement_id: str,
     body: AgreementTerminate,
     db: Session = Depends(get_session),
):
     """Terminate an agreement. A second call answers 409."""
     return AgreementService.terminate(
          db, agreement_id, body.termination_reason, body.termination_notes
     )


@router.post(
     "/{agreement_id}/payments",
     response_model=PaymentResponse,
     status_code=status.HTTP_201_CREATED,
     summary="Record a payment"
)
def record_payment(
     agreement_id: str,
     body: PaymentCreate,
     db: Session = Depends(get_session),
):
     """
     Record a completed payment.

     Updates total paid / escrow balance and activates draft or
     pending-deposit agreements. Terminated agreements answer 409.
     """
     return payment_service.record_payment(
          db,
          agreement_id,
          amount=body.amount,
          payment_date=body.payment_date,
          payment_method=body.payment_method,
          reference_number=body.reference_number,
          notes=body.notes,
     )


@router.get(
     "/{agreement_id}/payments",
     response_model=List[PaymentResponse],
     summary="List payments of an agreement"
)
def list_payments(agreement_id: str, db: Session = Depends(get_session)):
     return payment_service.get_payments(db, agreement_id)
