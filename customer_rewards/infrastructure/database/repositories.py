"""Data access layer for customer transactions"""

from typing import Iterable, List
from sqlalchemy import delete, func, select
from sqlalchemy.orm import Session
from customer_rewards.infrastructure.database.models import TransactionRecord
from customer_rewards.domain.models import Transaction


class TransactionRepository:
    """Repository for customer transactions"""

    def __init__(self, db: Session):
        self.db = db

    def find_by_customer_id(self, customer_id: str) -> List[Transaction]:
        """Fetch every transaction of a customer (empty list if unknown)"""
        records = self.db.scalars(
            select(TransactionRecord)
            .where(TransactionRecord.customer_id == customer_id)
            .order_by(TransactionRecord.seq)
        ).all()
        return [_to_domain(record) for record in records]

    def find_all_distinct_customer_ids(self) -> List[Transaction]:
        """One row per customer carrying only the customer id, in first-seen order"""
        rows = self.db.execute(
            select(TransactionRecord.customer_id)
            .group_by(TransactionRecord.customer_id)
            .order_by(func.min(TransactionRecord.seq))
        ).all()
        return [Transaction(customer_id=row.customer_id) for row in rows]

    def save_all(self, transactions: Iterable[Transaction]) -> int:
        """
        Insert or update transactions by transaction id; the caller commits.

        A repeated id overwrites the earlier record (last one wins) and keeps
        its original position in the store.
        """
        count = 0
        for txn in transactions:
            record = self.db.scalars(
                select(TransactionRecord).where(TransactionRecord.transaction_id == txn.transaction_id)
            ).first()
            if record is None:
                record = TransactionRecord(transaction_id=txn.transaction_id)
                self.db.add(record)

            record.customer_id = txn.customer_id
            record.amount = txn.amount
            record.timestamp = txn.timestamp

            # Flush per row so seq follows input order and later duplicates find this row
            self.db.flush()
            count += 1
        return count

    def delete_all(self) -> None:
        """Remove every stored transaction"""
        self.db.execute(delete(TransactionRecord))


def _to_domain(record: TransactionRecord) -> Transaction:
    return Transaction(
        transaction_id=record.transaction_id,
        customer_id=record.customer_id,
        amount=record.amount,
        timestamp=record.timestamp,
    )
