"""Reward queries composed over a transaction store"""

import logging
from datetime import datetime
from typing import List, Optional, Protocol

from customer_rewards.domain.models import RewardSummary, Transaction
from customer_rewards.domain.rewards import summarize


class TransactionStore(Protocol):
    """Read operations the reward service needs from persistence"""

    def find_by_customer_id(self, customer_id: str) -> List[Transaction]:
        ...

    def find_all_distinct_customer_ids(self) -> List[Transaction]:
        ...


class RewardService:
    """Computes reward summaries for stored customers"""

    def __init__(self, store: TransactionStore):
        self.store = store

    def get_rewards(self, customer_id: str, now: Optional[datetime] = None) -> RewardSummary:
        """
        Reward summary for one customer.

        Raises:
            CustomerNotFoundError: if the store holds no transactions for the id
        """
        transactions = self.store.find_by_customer_id(customer_id)
        return summarize(customer_id, transactions, now=now)

    def get_all_rewards(self, now: Optional[datetime] = None) -> List[RewardSummary]:
        """
        Reward summaries for every customer, in the order the store first lists them.

        A customer that disappears between the id scan and its own lookup
        aborts the whole batch with CustomerNotFoundError.
        """
        rows = self.store.find_all_distinct_customer_ids()
        customer_ids = list(dict.fromkeys(row.customer_id for row in rows))

        logging.info("Getting customers", extra={"customer_ids": customer_ids})

        if now is None:
            now = datetime.now()

        return [self.get_rewards(customer_id, now=now) for customer_id in customer_ids]
