# services/agreement_number.py
"""
Agreement number generation: <prefix>-<year>-<NNNN>.

The sequence lives in the agreement_sequences table, one row per year,
advanced with UPDATE ... SET last_value = last_value + 1 so concurrent
creates never read the same value.
"""
import logging
from typing import Optional

from sqlalchemy import select, update
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from config import AGREEMENT_NUMBER_PREFIX, AGREEMENT_NUMBER_WIDTH
from models import AgreementSequence
from services.lifecycle import utcnow

logger = logging.getLogger(__name__)


def format_agreement_number(year: int, value: int, prefix: str = AGREEMENT_NUMBER_PREFIX) -> str:
     return f"{prefix}-{year:04d}-{value:0{AGREEMENT_NUMBER_WIDTH}d}"


def _increment(db: Session, year: int) -> int:
     result = db.execute(
          update(AgreementSequence)
          .where(AgreementSequence.year == year)
          .values(last_value=AgreementSequence.last_value + 1)
          .execution_options(synchronize_session=False)
     )
     return result.rowcount


def next_sequence_value(db: Session, year: int) -> int:
     """Advance the counter for year and return the new value."""
     if not _increment(db, year):
          try:
               with db.begin_nested():
                    db.add(AgreementSequence(year=year, last_value=1))
               return 1
          except IntegrityError:
               # Another transaction created the row first
               logger.info("Agreement sequence row for %s created concurrently, retrying increment", year)
               _increment(db, year)

     return db.execute(
          select(AgreementSequence.last_value).where(AgreementSequence.year == year)
     ).scalar_one()


def next_agreement_number(db: Session, year: Optional[int] = None) -> str:
     """Reserve and format the next agreement number (current UTC year by default)."""
     if year is None:
          year = utcnow().year
     return format_agreement_number(year, next_sequence_value(db, year))
