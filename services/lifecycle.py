# services/lifecycle.py
"""
Rent agreement status machine.

     draft ───────────┐
                      ├── activate ──▶ active
     pending_deposit ─┘
     draft / pending_deposit / active / expired / disputed ── terminate ──▶ terminated

terminated is final. expired and disputed are set by outside processes and
have no way back to active.
"""
from datetime import datetime
from typing import Dict, FrozenSet, Optional

from models import RentAgreement, AgreementStatus, TerminationReason
from models.base import utcnow
from services.errors import AgreementConflictError

ACTIVATE = "activate"
TERMINATE = "terminate"

TRANSITIONS: Dict[str, FrozenSet[AgreementStatus]] = {
     ACTIVATE: frozenset({AgreementStatus.DRAFT, AgreementStatus.PENDING_DEPOSIT}),
     TERMINATE: frozenset({
          AgreementStatus.DRAFT,
          AgreementStatus.PENDING_DEPOSIT,
          AgreementStatus.ACTIVE,
          AgreementStatus.EXPIRED,
          AgreementStatus.DISPUTED,
     }),
}

TARGETS: Dict[str, AgreementStatus] = {
     ACTIVATE: AgreementStatus.ACTIVE,
     TERMINATE: AgreementStatus.TERMINATED,
}


def can_transition(status: AgreementStatus, transition: str) -> bool:
     return status in TRANSITIONS[transition]


def ensure_mutable(agreement: RentAgreement, action: str) -> None:
     """Reject any ledger or status change on a terminated agreement."""
     if agreement.is_terminated:
          raise AgreementConflictError(f"Cannot {action} a terminated agreement")


def _apply(agreement: RentAgreement, transition: str) -> None:
     if not can_transition(agreement.status, transition):
          raise AgreementConflictError(
               f"Cannot {transition} agreement {agreement.agreement_number} in status '{agreement.status.value}'"
          )
     agreement.status = TARGETS[transition]


def needs_activation(agreement: RentAgreement) -> bool:
     return can_transition(agreement.status, ACTIVATE)


def activate(agreement: RentAgreement) -> None:
     """draft / pending_deposit -> active."""
     _apply(agreement, ACTIVATE)


def terminate(
     agreement: RentAgreement,
     reason: TerminationReason,
     notes: Optional[str] = None,
     when: Optional[datetime] = None,
) -> None:
     """Move to terminated and stamp the termination metadata (once)."""
     if agreement.status == AgreementStatus.TERMINATED:
          raise AgreementConflictError("Agreement is already terminated")
     _apply(agreement, TERMINATE)
     agreement.terminated_at = when or utcnow()
     agreement.termination_reason = reason
     agreement.termination_notes = notes
