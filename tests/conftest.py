"""Pytest fixtures for testing"""

import pytest
from datetime import datetime, timedelta
from typing import Generator, List
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker, Session
from customer_rewards.api.main import create_app
from customer_rewards.infrastructure.database.models import Base
from customer_rewards.infrastructure.database.session import get_db
from customer_rewards.domain.models import Transaction


# Test database
TEST_DATABASE_URL = "sqlite:///./test.db"
engine = create_engine(TEST_DATABASE_URL, connect_args={"check_same_thread": False})
TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)


class InMemoryTransactionStore:
    """Transaction store backed by a list, kept in insertion order"""

    def __init__(self, transactions: List[Transaction] | None = None):
        self.transactions = list(transactions or [])
        self.lookups: List[str] = []

    def find_by_customer_id(self, customer_id: str) -> List[Transaction]:
        self.lookups.append(customer_id)
        return [t for t in self.transactions if t.customer_id == customer_id]

    def find_all_distinct_customer_ids(self) -> List[Transaction]:
        return [Transaction(customer_id=t.customer_id) for t in self.transactions]


@pytest.fixture
def db() -> Generator[Session, None, None]:
    """Create test database and session"""
    Base.metadata.create_all(bind=engine)
    db = TestingSessionLocal()
    try:
        yield db
    finally:
        db.close()
        Base.metadata.drop_all(bind=engine)


@pytest.fixture
def client(db: Session) -> TestClient:
    """Create FastAPI test client with test database"""
    app = create_app()

    def override_get_db():
        try:
            yield db
        finally:
            pass

    app.dependency_overrides[get_db] = override_get_db
    return TestClient(app)


@pytest.fixture
def now() -> datetime:
    """Fixed reference instant for window calculations"""
    return datetime(2024, 6, 15, 12, 0, 0)


@pytest.fixture
def sample_transactions(now: datetime) -> list[Transaction]:
    """Two customers with purchases spread over the eligibility window"""
    return [
        Transaction("cust1", "t1", 120.0, datetime(2024, 4, 10, 9, 30)),
        Transaction("cust2", "t2", 200.0, datetime(2024, 5, 2, 18, 0)),
        Transaction("cust1", "t3", 80.0, datetime(2024, 5, 10, 14, 0)),
        Transaction("cust1", "t4", 45.0, datetime(2024, 6, 10, 11, 15)),
        Transaction("cust2", "t5", 75.0, now - timedelta(days=1)),
    ]


@pytest.fixture
def store(sample_transactions: list[Transaction]) -> InMemoryTransactionStore:
    return InMemoryTransactionStore(sample_transactions)


@pytest.fixture
def make_store():
    """Factory for in-memory stores over arbitrary transactions"""
    return InMemoryTransactionStore

