"""Dependency injection for FastAPI endpoints"""

from fastapi import Depends, Request
from sqlalchemy.orm import Session
from customer_rewards.domain.service import RewardService
from customer_rewards.infrastructure.database.repositories import TransactionRepository
from customer_rewards.infrastructure.database.session import get_db


def get_request_id(request: Request) -> str:
    """Extract request ID from request state"""
    return getattr(request.state, "request_id", "unknown")


def get_transaction_repository(db: Session = Depends(get_db)) -> TransactionRepository:
    """Provide transaction store bound to the request's session"""
    return TransactionRepository(db)


def get_reward_service(
    repository: TransactionRepository = Depends(get_transaction_repository),
) -> RewardService:
    """Provide reward service over the transaction store"""
    return RewardService(repository)
