"""Domain models - pure Python dataclasses representing business entities"""

from dataclasses import dataclass, field
from datetime import datetime
from enum import IntEnum
from typing import Dict, Optional


class Month(IntEnum):
    """Calendar month, valued 1..12 to match datetime.month"""

    JANUARY = 1
    FEBRUARY = 2
    MARCH = 3
    APRIL = 4
    MAY = 5
    JUNE = 6
    JULY = 7
    AUGUST = 8
    SEPTEMBER = 9
    OCTOBER = 10
    NOVEMBER = 11
    DECEMBER = 12

    @classmethod
    def of(cls, moment: datetime) -> "Month":
        return cls(moment.month)


@dataclass(frozen=True)
class Transaction:
    """Single purchase made by a customer.

    Rows returned by the distinct-customer query only carry ``customer_id``;
    the remaining fields are None there.
    """

    customer_id: str
    transaction_id: Optional[str] = None
    amount: Optional[float] = None
    timestamp: Optional[datetime] = None


@dataclass
class RewardSummary:
    """Points earned by one customer, per calendar month and in total"""

    customer_id: str
    monthly_points: Dict[Month, int] = field(default_factory=dict)
    total_points: int = 0
