"""Unit tests for seeding the transaction store from JSON"""

import json
import pytest
from datetime import datetime
from sqlalchemy.orm import Session
from customer_rewards.domain.exceptions import InvalidTransactionDataError
from customer_rewards.domain.models import Transaction
from customer_rewards.infrastructure.database.loader import (
    load_transactions_file,
    parse_transaction,
    seed_transactions,
)
from customer_rewards.infrastructure.database.repositories import TransactionRepository


@pytest.fixture
def transactions_file(tmp_path):
    path = tmp_path / "transactions.json"
    path.write_text(
        json.dumps(
            [
                {"id": "T1", "customerId": "CUST1", "amount": 120.0, "date": "2024-04-10T09:30:00"},
                {"id": "T2", "customerId": "CUST2", "amount": -15.5, "date": "2024-05-01T00:00:00"},
                {"id": "T3", "customerId": "CUST1", "amount": 80, "date": "2024-05-10T14:00:00"},
            ]
        )
    )
    return path


def test_parse_transaction_camel_case():
    """Test original JSON field names"""
    txn = parse_transaction({"id": "T1", "customerId": "C1", "amount": 75, "date": "2024-04-10T09:30:00"})

    assert txn == Transaction("C1", "T1", 75.0, datetime(2024, 4, 10, 9, 30))


def test_parse_transaction_snake_case():
    """Test snake_case field names are accepted"""
    txn = parse_transaction(
        {"transaction_id": "T1", "customer_id": "C1", "amount": "75.25", "timestamp": "2024-04-10T09:30:00"}
    )

    assert txn == Transaction("C1", "T1", 75.25, datetime(2024, 4, 10, 9, 30))


def test_load_transactions_file(transactions_file):
    """Test file parsing keeps order"""
    transactions = load_transactions_file(transactions_file)

    assert [t.transaction_id for t in transactions] == ["T1", "T2", "T3"]
    assert transactions[1].amount == -15.5


@pytest.mark.parametrize(
    "content",
    [
        "not json",
        '{"id": "T1"}',
        '[{"id": "T1", "customerId": "C1", "amount": 10.0}]',
        '[{"id": "T1", "customerId": "C1", "amount": "lots", "date": "2024-04-10T09:30:00"}]',
    ],
)
def test_load_transactions_file_invalid(tmp_path, content):
    """Test malformed files raise InvalidTransactionDataError"""
    path = tmp_path / "bad.json"
    path.write_text(content)

    with pytest.raises(InvalidTransactionDataError):
        load_transactions_file(path)


def test_seed_transactions_replaces_store(db: Session, transactions_file):
    """Test seeding clears previous data and loads the file"""
    repo = TransactionRepository(db)
    repo.save_all([Transaction("OLD", "T0", 500.0, datetime(2024, 1, 1))])
    db.commit()

    count = seed_transactions(db, transactions_file)

    assert count == 3
    assert repo.find_by_customer_id("OLD") == []
    assert [r.customer_id for r in repo.find_all_distinct_customer_ids()] == ["CUST1", "CUST2"]


def test_seed_transactions_twice_is_idempotent(db: Session, transactions_file):
    """Test reseeding with the same ids does not collide"""
    seed_transactions(db, transactions_file)
    assert seed_transactions(db, transactions_file) == 3

    assert len(TransactionRepository(db).find_by_customer_id("CUST1")) == 2


def test_seed_transactions_duplicate_ids_last_wins(db: Session, tmp_path):
    """Test a repeated transaction id keeps the last record instead of failing"""
    path = tmp_path / "transactions.json"
    path.write_text(
        json.dumps(
            [
                {"id": "T1", "customerId": "CUST1", "amount": 60.0, "date": "2024-04-10T09:30:00"},
                {"id": "T2", "customerId": "CUST2", "amount": 70.0, "date": "2024-04-11T09:30:00"},
                {"id": "T1", "customerId": "CUST1", "amount": 150.0, "date": "2024-05-01T10:00:00"},
            ]
        )
    )

    assert seed_transactions(db, path) == 3

    repo = TransactionRepository(db)
    assert repo.find_by_customer_id("CUST1") == [Transaction("CUST1", "T1", 150.0, datetime(2024, 5, 1, 10, 0))]
    assert [r.customer_id for r in repo.find_all_distinct_customer_ids()] == ["CUST1", "CUST2"]


def test_seed_transactions_missing_file(db: Session, tmp_path):
    """Test missing seed file is skipped"""
    assert seed_transactions(db, tmp_path / "absent.json") == 0


def test_seed_transactions_invalid_file(db: Session, tmp_path):
    """Test malformed seed file aborts loading"""
    path = tmp_path / "bad.json"
    path.write_text("[{}]")

    with pytest.raises(InvalidTransactionDataError):
        seed_transactions(db, path)
