"""Domain-specific exceptions"""


class DomainException(Exception):
    """Base exception for domain layer"""

    pass


class CustomerNotFoundError(DomainException):
    """No transactions exist for the requested customer"""

    def __init__(self, customer_id: str):
        self.customer_id = customer_id
        super().__init__(f"No transactions found for customer: {customer_id}")


class InvalidTransactionDataError(DomainException):
    """Transaction data is malformed or invalid"""

    pass
