"""SQLAlchemy ORM models for the transaction store"""

from sqlalchemy import Column, DateTime, Integer, Numeric, Text
from sqlalchemy.orm import declarative_base

Base = declarative_base()


class TransactionRecord(Base):
    """Customer purchase transaction"""

    __tablename__ = "transactions"

    # Insertion order; customers are listed in the order they first appear
    seq = Column(Integer, primary_key=True, autoincrement=True)
    transaction_id = Column(Text, nullable=False, unique=True)
    customer_id = Column(Text, nullable=False, index=True)
    amount = Column(Numeric(12, 2, asdecimal=False), nullable=False)
    timestamp = Column(DateTime, nullable=False)
