"""Reward points engine - core business logic for loyalty rewards"""

from datetime import datetime
from typing import Dict, Iterable, Optional

from customer_rewards.domain.models import Month, RewardSummary, Transaction
from customer_rewards.domain.exceptions import CustomerNotFoundError
from customer_rewards.utils.date_utils import start_of_month

# Tier boundaries in dollars
LOWER_THRESHOLD = 50.0
UPPER_THRESHOLD = 100.0

# Points per dollar spent inside each tier
MID_TIER_RATE = 1
HIGH_TIER_RATE = 2

# Whole calendar months counted back before the current one
ELIGIBILITY_MONTHS = 3


def points_for(amount: float) -> int:
    """
    Points earned by a single purchase.

    Tiers (applied marginally):
    - up to $50:    0 points
    - $50 - $100:   1 point per dollar
    - above $100:   2 points per dollar

    Each tier's contribution is truncated toward zero on its own, so a
    fractional high-tier part never borrows from the mid tier.

    Example:
        $120 -> (120 - 100) * 2 + (100 - 50) * 1 = 90
    """
    if amount < 0:
        return 0

    points = 0
    if amount > UPPER_THRESHOLD:
        points += int((amount - UPPER_THRESHOLD) * HIGH_TIER_RATE)
        points += int((UPPER_THRESHOLD - LOWER_THRESHOLD) * MID_TIER_RATE)
    elif amount > LOWER_THRESHOLD:
        points += int((amount - LOWER_THRESHOLD) * MID_TIER_RATE)

    return points


def eligibility_start(now: datetime) -> datetime:
    """Earliest timestamp still counted: the 1st of the month three months back, at now's time of day"""
    return start_of_month(now, ELIGIBILITY_MONTHS, keep_time=True)


def is_eligible(transaction: Transaction, now: datetime) -> bool:
    """Transaction falls inside [eligibility_start(now), now]"""
    return eligibility_start(now) <= transaction.timestamp <= now


def summarize(
    customer_id: str,
    transactions: Iterable[Transaction],
    now: Optional[datetime] = None,
) -> RewardSummary:
    """
    Main entry point: aggregate a customer's transactions into a RewardSummary.

    Future-dated and pre-window transactions are skipped. Months in which the
    customer earned nothing are left out of ``monthly_points``. Months are
    ordered oldest first within the window, so a window spanning a year end
    lists NOVEMBER before JANUARY.

    Raises:
        CustomerNotFoundError: if the customer has no transactions at all
    """
    transactions = list(transactions)
    if not transactions:
        raise CustomerNotFoundError(customer_id)

    if now is None:
        now = datetime.now()

    monthly_points: Dict[Month, int] = {}
    total_points = 0

    for txn in transactions:
        if not is_eligible(txn, now):
            continue

        points = points_for(txn.amount)
        if points > 0:
            month = Month.of(txn.timestamp)
            monthly_points[month] = monthly_points.get(month, 0) + points
            total_points += points

    # Window spans fewer than 12 months, so offsets from its first month are unique
    first_month = eligibility_start(now).month
    ordered = sorted(monthly_points.items(), key=lambda item: (item[0] - first_month) % 12)

    return RewardSummary(
        customer_id=customer_id,
        monthly_points=dict(ordered),
        total_points=total_points,
    )
