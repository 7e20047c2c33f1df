from .errors import (
     AgreementError,
     AgreementValidationError,
     AgreementNotFoundError,
     AgreementConflictError,
)
from .commission import calculate_commission, split_payment
from .agreement_service import AgreementService
from .payment_service import record_payment, get_payments

__all__ = [
     "AgreementError",
     "AgreementValidationError",
     "AgreementNotFoundError",
     "AgreementConflictError",
     "calculate_commission",
     "split_payment",
     "AgreementService",
     "record_payment",
     "get_payments",
]
