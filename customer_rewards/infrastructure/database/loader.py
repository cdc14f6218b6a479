"""Startup seeding of the transaction store from a JSON file"""

import json
import logging
from datetime import datetime
from pathlib import Path
from typing import Any, Dict, List

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from customer_rewards.domain.exceptions import InvalidTransactionDataError
from customer_rewards.domain.models import Transaction
from customer_rewards.infrastructure.database.repositories import TransactionRepository


def _field(raw: Dict[str, Any], *names: str) -> Any:
    for name in names:
        if name in raw:
            return raw[name]
    raise KeyError(names[0])


def parse_transaction(raw: Dict[str, Any]) -> Transaction:
    """Build a Transaction from a camelCase or snake_case JSON object"""
    return Transaction(
        transaction_id=str(_field(raw, "id", "transaction_id")),
        customer_id=str(_field(raw, "customerId", "customer_id")),
        amount=float(_field(raw, "amount")),
        timestamp=datetime.fromisoformat(_field(raw, "date", "timestamp")),
    )


def load_transactions_file(path: Path) -> List[Transaction]:
    """
    Parse a JSON array of transactions.

    Raises:
        InvalidTransactionDataError: On unreadable JSON or missing/invalid fields
    """
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
        if not isinstance(data, list):
            raise ValueError("expected a JSON array of transactions")
        return [parse_transaction(raw) for raw in data]
    except (KeyError, ValueError, TypeError) as e:
        raise InvalidTransactionDataError(f"Invalid transaction data in {path}: {e}") from e


def seed_transactions(db: Session, path: str | Path) -> int:
    """
    Replace stored transactions with the contents of ``path``.

    Records sharing an id collapse into the last one. Returns the number of
    records read from the file (0 if the file is missing).
    """
    path = Path(path)
    if not path.exists():
        logging.warning(f"{path} not found. Skipping data load.")
        return 0

    try:
        transactions = load_transactions_file(path)
        repo = TransactionRepository(db)
        repo.delete_all()
        count = repo.save_all(transactions)
        db.commit()
    except IntegrityError as e:
        db.rollback()
        logging.error(f"Failed to load transactions data: {e}")
        raise InvalidTransactionDataError(f"Seed data in {path} violates store constraints: {e}") from e
    except Exception as e:
        db.rollback()
        logging.error(f"Failed to load transactions data: {e}")
        raise

    logging.info(f"Loaded {count} transactions into the store", extra={"path": str(path)})
    return count
