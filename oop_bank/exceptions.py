"""
Exceptions for the banking demo.

Every rejected money operation raises one of these. They subclass
ValueError so callers that only care about "bad input" can keep catching
ValueError.
"""


class BankError(ValueError):
    """Base exception for all banking errors."""


class InvalidAmount(BankError):
    """Raised when a deposit or withdrawal amount is not positive."""


class InsufficientFunds(BankError):
    """Raised when the balance cannot cover a withdrawal."""


class BelowMinimumBalance(InsufficientFunds):
    """Raised when a withdrawal would leave a savings balance under its floor."""


class OverdraftExceeded(InsufficientFunds):
    """Raised when a withdrawal would go past the checking overdraft limit."""


class InvalidRate(BankError):
    """Raised when an interest or bonus rate is negative."""


class AccountNotRegistered(BankError):
    """Raised when a registry is asked to release an account it does not own."""


class AccountClosed(BankError):
    """Raised when a closed account is used or handed to a registry."""
