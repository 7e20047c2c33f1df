from .base import Base
from .rent_agreement import RentAgreement, AgreementStatus, PaymentFrequency, TerminationReason
from .payment import Payment, PaymentStatus
from .agreement_sequence import AgreementSequence

__all__ = [
     "Base",
     "RentAgreement",
     "AgreementStatus",
     "PaymentFrequency",
     "TerminationReason",
     "Payment",
     "PaymentStatus",
     "AgreementSequence",
]
