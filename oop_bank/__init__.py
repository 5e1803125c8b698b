"""
Object-Oriented Bank

A small account hierarchy showing encapsulation, inheritance, polymorphism
and object lifecycles on a toy banking domain.
"""

__version__ = "0.1.0"

from .models import AccountType, Transaction, TransactionType, format_currency
from .exceptions import (
    AccountClosed,
    AccountNotRegistered,
    BankError,
    BelowMinimumBalance,
    InsufficientFunds,
    InvalidAmount,
    InvalidRate,
    OverdraftExceeded,
)
from .accounts import (
    Account,
    CheckingAccount,
    CombinedAccount,
    PremiumAccount,
    SavingsAccount,
    SavingsTerms,
)
from .bank import Bank
from .config import BankConfig
from .registry import AccountRegistry
from .cli import main


__all__ = [
    "Account",
    "SavingsAccount",
    "CheckingAccount",
    "PremiumAccount",
    "CombinedAccount",
    "SavingsTerms",
    "AccountType",
    "Transaction",
    "TransactionType",
    "format_currency",
    "BankError",
    "InvalidAmount",
    "InsufficientFunds",
    "BelowMinimumBalance",
    "OverdraftExceeded",
    "InvalidRate",
    "AccountNotRegistered",
    "AccountClosed",
    "Bank",
    "BankConfig",
    "AccountRegistry",
    "main"
]
