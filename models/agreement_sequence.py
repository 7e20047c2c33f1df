from sqlalchemy import Column, Integer

from .base import Base


class AgreementSequence(Base):
     """
     Per-year counter backing agreement numbers.
     last_value is only ever changed through an atomic increment.
     """

     year = Column(Integer, primary_key=True, autoincrement=False)
     last_value = Column(Integer, nullable=False, default=0)

     def __repr__(self):
          return f"<AgreementSequence(year={self.year}, last_value={self.last_value})>"
