"""
Data models for the banking demo.

This module contains the small value types shared by the account hierarchy.
"""

from dataclasses import dataclass
from datetime import datetime
from decimal import Decimal
from enum import Enum
from typing import Optional


class AccountType(Enum):
    """Types of bank accounts."""
    SAVINGS = "savings"
    CHECKING = "checking"
    PREMIUM = "premium"
    COMBINED = "combined"


class TransactionType(Enum):
    """Types of transactions."""
    DEPOSIT = "deposit"
    WITHDRAWAL = "withdrawal"


def to_decimal(value) -> Decimal:
    """Convert an int, float or string amount to Decimal."""
    if isinstance(value, Decimal):
        return value
    return Decimal(str(value))


def format_currency(amount: Decimal, symbol: str = "$") -> str:
    """Format currency for display."""
    amount = to_decimal(amount)
    if amount < 0:
        return f"-{symbol}{-amount:,.2f}"
    return f"{symbol}{amount:,.2f}"


@dataclass(frozen=True)
class Transaction:
    """Represents one money movement on an account."""

    transaction_type: TransactionType
    amount: Decimal
    balance_after: Decimal
    description: str = ""
    timestamp: Optional[datetime] = None

    def __post_init__(self):
        """Normalize amounts and stamp the transaction."""
        if self.timestamp is None:
            object.__setattr__(self, "timestamp", datetime.now())

        # Ensure amounts are Decimals
        object.__setattr__(self, "amount", to_decimal(self.amount))
        object.__setattr__(self, "balance_after", to_decimal(self.balance_after))
