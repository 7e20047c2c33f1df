import re
import uuid
from datetime import datetime, timezone

from sqlalchemy.orm import DeclarativeBase, declared_attr


def generate_uuid() -> str:
     return str(uuid.uuid4())


def utcnow() -> datetime:
     """Naive UTC timestamp, matching how date-times are stored."""
     return datetime.now(timezone.utc).replace(tzinfo=None)


class Base(DeclarativeBase):
     """
     Base class for all SQLAlchemy models.
     Provides common configuration and mixins.
     """

     @declared_attr.directive
     def __tablename__(cls) -> str:
          """
          Automatically generate table name from class name.
          Example: RentAgreement -> rent_agreements, AgreementSequence -> agreement_sequences
          """
          name = re.sub(r'(?<!^)(?=[A-Z])', '_', cls.__name__).lower()
          if name.endswith('y'):
               return name[:-1] + 'ies'
          elif name.endswith('s'):
               return name + 'es'
          return name + 's'
