from .payment import (
     PaymentCreate,
     PaymentResponse,
     CommissionResponse,
)
from .agreement import (
     AgreementCreate,
     AgreementUpdate,
     AgreementTerminate,
     AgreementResponse,
     AgreementDetailResponse,
     AgreementListResponse,
     AgreementSortField,
     SortOrder,
)

__all__ = [
     "PaymentCreate",
     "PaymentResponse",
     "CommissionResponse",
     "AgreementCreate",
     "AgreementUpdate",
     "AgreementTerminate",
     "AgreementResponse",
     "AgreementDetailResponse",
     "AgreementListResponse",
     "AgreementSortField",
     "SortOrder",
]
