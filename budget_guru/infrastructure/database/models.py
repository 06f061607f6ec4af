"""SQLAlchemy ORM models for stored incomes and goals"""

from sqlalchemy import Column, Date, DateTime, Integer, Numeric, Text
from sqlalchemy.orm import declarative_base
from sqlalchemy.sql import func

Base = declarative_base()


class IncomeEntry(Base):
    """Stored income payment; `position` is its index in the ledger"""

    __tablename__ = "income_entry"

    id = Column(Integer, primary_key=True, autoincrement=True)
    position = Column(Integer, nullable=False, index=True)
    amount = Column(Numeric(14, 2, asdecimal=True), nullable=False)
    received_on = Column(Date, nullable=False)
    created_at = Column(DateTime(timezone=True), nullable=False, server_default=func.now())


class GoalEntry(Base):
    """Stored savings goal; `position` is its index in the registry"""

    __tablename__ = "goal_entry"

    id = Column(Integer, primary_key=True, autoincrement=True)
    position = Column(Integer, nullable=False, index=True)
    name = Column(Text, nullable=False)
    amount = Column(Numeric(14, 2, asdecimal=True), nullable=False)
    created_at = Column(DateTime(timezone=True), nullable=False, server_default=func.now())
