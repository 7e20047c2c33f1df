# services/errors.py
"""
Failures raised by the agreement and payment services.

The API layer maps them onto HTTP status codes:
validation -> 400, not found -> 404, conflict -> 409.
"""


class AgreementError(Exception):
     """Base class for caller-visible agreement failures."""

     def __init__(self, message: str):
          super().__init__(message)
          self.message = message


class AgreementValidationError(AgreementError, ValueError):
     """Input is well-formed but violates a business rule (e.g. end date not after start date)."""


class AgreementNotFoundError(AgreementError, LookupError):
     """The agreement id does not resolve to a stored agreement."""

     def __init__(self, agreement_id: str):
          super().__init__(f"Agreement with ID {agreement_id} not found")
          self.agreement_id = agreement_id


class AgreementConflictError(AgreementError):
     """The operation is not allowed in the agreement's current state."""
