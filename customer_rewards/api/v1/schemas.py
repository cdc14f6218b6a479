"""Pydantic schemas for API response validation"""

from pydantic import BaseModel, Field
from typing import Dict

from customer_rewards.domain.models import RewardSummary


class RewardSummaryResponse(BaseModel):
    """Response for GET /v1/rewards/{customer_id}"""

    customer_id: str
    monthly_points: Dict[str, int] = Field(
        default_factory=dict,
        description="Points per calendar month, keyed by upper-case month name, oldest first",
    )
    total_points: int

    @classmethod
    def from_summary(cls, summary: RewardSummary) -> "RewardSummaryResponse":
        return cls(
            customer_id=summary.customer_id,
            monthly_points={
                month.name: points
                for month, points in summary.monthly_points.items()
            },
            total_points=summary.total_points,
        )


class ErrorResponse(BaseModel):
    """Error body returned by reward endpoints"""

    detail: str
