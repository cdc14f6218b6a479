"""GET /v1/rewards - customer reward point summaries"""

import time
import logging
from typing import List
from fastapi import APIRouter, Depends, HTTPException, Path, Request

from customer_rewards.api.v1.schemas import ErrorResponse, RewardSummaryResponse
from customer_rewards.api.dependencies import get_request_id, get_reward_service
from customer_rewards.domain.service import RewardService
from customer_rewards.domain.exceptions import CustomerNotFoundError
from customer_rewards.infrastructure.observability.metrics import record_points, record_query
from customer_rewards.infrastructure.observability.logging import log_rewards_query

router = APIRouter()


@router.get(
    "/rewards",
    response_model=List[RewardSummaryResponse],
    responses={404: {"model": ErrorResponse}},
)
def get_all_rewards(
    request: Request,
    service: RewardService = Depends(get_reward_service),
):
    """
    Retrieve monthly and total reward points for all customers.

    Customers appear in the order they were first recorded. A customer
    vanishing mid-batch fails the whole request with 404.
    """
    start_time = time.time()
    request_id = get_request_id(request)
    logging.info("Fetching rewards for all customers", extra={"request_id": request_id})

    try:
        summaries = service.get_all_rewards()

    except CustomerNotFoundError as e:
        record_query("all", "not_found")
        logging.warning(f"Customer not found: {e}", extra={"request_id": request_id})
        raise HTTPException(status_code=404, detail=str(e))

    except Exception as e:
        record_query("all", "error")
        logging.error(f"Unexpected error: {e}", extra={"request_id": request_id})
        raise HTTPException(status_code=500, detail="Internal server error")

    record_query("all", "success")
    duration_ms = (time.time() - start_time) * 1000
    for summary in summaries:
        record_points(summary.total_points)
        log_rewards_query(request_id, summary.customer_id, summary.total_points, duration_ms)

    return [RewardSummaryResponse.from_summary(summary) for summary in summaries]


@router.get(
    "/rewards/{customer_id}",
    response_model=RewardSummaryResponse,
    responses={404: {"model": ErrorResponse}},
)
def get_rewards(
    request: Request,
    customer_id: str = Path(..., min_length=1, description="Customer identifier"),
    service: RewardService = Depends(get_reward_service),
):
    """
    Retrieve monthly and total reward points for a customer.

    Only purchases from the first day of the month three months ago up to
    now are counted.
    """
    start_time = time.time()
    request_id = get_request_id(request)
    logging.info("Fetching rewards", extra={"request_id": request_id, "customer_id": customer_id})

    try:
        summary = service.get_rewards(customer_id)

    except CustomerNotFoundError as e:
        record_query("single", "not_found")
        logging.warning(f"Customer not found: {e}", extra={"request_id": request_id})
        raise HTTPException(status_code=404, detail=str(e))

    except Exception as e:
        record_query("single", "error")
        logging.error(f"Unexpected error: {e}", extra={"request_id": request_id})
        raise HTTPException(status_code=500, detail="Internal server error")

    record_query("single", "success")
    record_points(summary.total_points)
    duration_ms = (time.time() - start_time) * 1000
    log_rewards_query(request_id, customer_id, summary.total_points, duration_ms)

    return RewardSummaryResponse.from_summary(summary)
