"""
Account hierarchy for the banking demo.

``Account`` is the abstract capability every variant implements: deposit,
withdraw, calculate_interest and display. Savings and premium accounts share
their rate and minimum balance through a ``SavingsTerms`` value instead of
inheriting from one another.
"""

import dataclasses
import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from decimal import Decimal
from typing import List, Optional, Tuple

from .exceptions import (
    AccountClosed,
    BelowMinimumBalance,
    BankError,
    InsufficientFunds,
    InvalidAmount,
    InvalidRate,
    OverdraftExceeded,
)
from .models import AccountType, Transaction, TransactionType, format_currency, to_decimal

logger = logging.getLogger(__name__)

SAVINGS_MINIMUM_BALANCE = Decimal('1000.00')
CHECKING_INTEREST_RATE = Decimal('0.5')


def _validate_rate(rate, name: str = "Interest rate") -> Decimal:
    rate = to_decimal(rate)
    if not rate.is_finite():
        raise InvalidRate(f"{name} must be a finite number: {rate}")
    if rate < 0:
        raise InvalidRate(f"{name} cannot be negative: {rate}")
    return rate


class Account(ABC):
    """Abstract bank account with a number, a holder and a guarded balance."""

    account_type: Optional[AccountType] = None

    def __init__(self, account_number: int = 0, holder_name: str = "Unknown",
                 balance: Decimal = Decimal('0.00')):
        self._account_number = account_number
        self._holder_name = holder_name
        self._balance = to_decimal(balance)
        self._history: List[Transaction] = []
        self._closed = False
        logger.info("Account %s opened for %s with balance %s",
                    account_number, holder_name, format_currency(self._balance))

    @property
    def account_number(self) -> int:
        return self._account_number

    @property
    def holder_name(self) -> str:
        return self._holder_name

    @holder_name.setter
    def holder_name(self, name: str):
        self._holder_name = name

    @property
    def balance(self) -> Decimal:
        return self._balance

    @property
    def history(self) -> Tuple[Transaction, ...]:
        """Transactions applied to this account, oldest first."""
        return tuple(self._history)

    @property
    def closed(self) -> bool:
        return self._closed

    def deposit(self, amount: Decimal, description: Optional[str] = None) -> bool:
        """
        Deposit money to the account.

        Args:
            amount: Positive amount to add to the balance
            description: Optional note kept with the transaction

        Returns:
            True once the balance has been credited

        Raises:
            InvalidAmount: If the amount is zero, negative or not finite
            AccountClosed: If the account has been closed
        """
        amount = self._require_positive(amount, "deposit")
        self._balance += amount
        self._record(TransactionType.DEPOSIT, amount, description or "")

        if description:
            logger.info("Deposited %s (%s) to account %s",
                        format_currency(amount), description, self._account_number)
        else:
            logger.info("Deposited %s to account %s", format_currency(amount), self._account_number)
        return True

    def withdraw(self, amount: Decimal) -> bool:
        """Withdraw money if the balance covers it."""
        amount = self._require_positive(amount, "withdrawal")
        if self._balance < amount:
            self._reject(InsufficientFunds(
                f"Insufficient funds. Available: {format_currency(self._balance)}"))
        return self._debit(amount)

    @abstractmethod
    def calculate_interest(self) -> Decimal:
        """Return the interest earned on the current balance."""

    def display(self, symbol: str = "$") -> str:
        """Render the account summary. Subclasses append their own lines."""
        logger.debug("Rendering account %s", self._account_number)
        return "\n".join([
            "--- Account Details ---",
            f"Account Number: {self._account_number}",
            f"Account Holder: {self._holder_name}",
            f"Balance: {format_currency(self._balance, symbol)}",
        ])

    def close(self):
        """Release the account. Closing twice is a no-op."""
        if self._closed:
            return
        self._closed = True
        self._release()

    def _release(self):
        """Cleanup hook; overrides log their own event before calling up."""
        logger.info("Account %s for %s released", self._account_number, self._holder_name)

    def _require_open(self, operation: str):
        if self._closed:
            self._reject(AccountClosed(f"Cannot make a {operation} on closed account {self._account_number}"))

    def _require_positive(self, amount, operation: str) -> Decimal:
        self._require_open(operation)
        amount = to_decimal(amount)
        if not amount.is_finite():
            self._reject(InvalidAmount(f"{operation.capitalize()} amount must be a finite number"))
        if amount <= 0:
            self._reject(InvalidAmount(f"{operation.capitalize()} amount must be positive"))
        return amount

    def _reject(self, error: BankError):
        logger.warning("Account %s: %s", self._account_number, error)
        raise error

    def _debit(self, amount: Decimal) -> bool:
        self._balance -= amount
        self._record(TransactionType.WITHDRAWAL, amount)
        logger.info("Withdrawn %s from account %s", format_currency(amount), self._account_number)
        return True

    def _record(self, transaction_type: TransactionType, amount: Decimal, description: str = ""):
        self._history.append(Transaction(
            transaction_type=transaction_type,
            amount=amount,
            balance_after=self._balance,
            description=description
        ))

    def __add__(self, other):
        if not isinstance(other, Account):
            return NotImplemented
        return CombinedAccount(
            holder_name=f"{self._holder_name} & {other.holder_name}",
            balance=self._balance + other.balance
        )

    def __copy__(self):
        cls = self.__class__
        clone = cls.__new__(cls)
        clone.__dict__.update(self.__dict__)
        clone._history = []
        clone._closed = False
        logger.info("Account %s copied for %s", self._account_number, self._holder_name)
        return clone

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.close()
        return False

    def __repr__(self):
        return (f"{self.__class__.__name__}(account_number={self._account_number!r}, "
                f"holder_name={self._holder_name!r}, balance={self._balance!r})")


@dataclass(frozen=True)
class SavingsTerms:
    """Interest rate and minimum balance of a savings-style account."""

    interest_rate: Decimal
    minimum_balance: Decimal = field(default=SAVINGS_MINIMUM_BALANCE, init=False)

    def __post_init__(self):
        object.__setattr__(self, "interest_rate", _validate_rate(self.interest_rate))
        object.__setattr__(self, "minimum_balance", to_decimal(self.minimum_balance))

    def interest_on(self, balance: Decimal) -> Decimal:
        return balance * self.interest_rate / 100

    def allows_withdrawal(self, balance: Decimal, amount: Decimal) -> bool:
        return balance - amount >= self.minimum_balance

    def describe(self, symbol: str = "$") -> List[str]:
        return [
            f"Interest Rate: {self.interest_rate}%",
            f"Minimum Balance: {format_currency(self.minimum_balance, symbol)}",
        ]


class SavingsTermsMixin:
    """Withdrawal floor and rate accessors for accounts holding ``SavingsTerms``."""

    terms: SavingsTerms

    @property
    def interest_rate(self) -> Decimal:
        return self.terms.interest_rate

    @interest_rate.setter
    def interest_rate(self, rate: Decimal):
        try:
            self.terms = dataclasses.replace(self.terms, interest_rate=rate)
        except InvalidRate as e:
            self._reject(e)

    @property
    def minimum_balance(self) -> Decimal:
        return self.terms.minimum_balance

    def withdraw(self, amount: Decimal) -> bool:
        """Withdraw money unless it would take the balance under the minimum."""
        amount = self._require_positive(amount, "withdrawal")
        if not self.terms.allows_withdrawal(self._balance, amount):
            self._reject(BelowMinimumBalance(
                f"Cannot withdraw! Minimum balance requirement: "
                f"{format_currency(self.terms.minimum_balance)}"))
        return self._debit(amount)


class SavingsAccount(SavingsTermsMixin, Account):
    """Interest-bearing account that must keep a minimum balance."""

    account_type = AccountType.SAVINGS

    def __init__(self, account_number: int, holder_name: str, balance: Decimal,
                 interest_rate: Decimal):
        super().__init__(account_number, holder_name, balance)
        self.terms = SavingsTerms(interest_rate)
        logger.info("Savings account %s configured at %s%%", account_number, self.terms.interest_rate)

    def calculate_interest(self) -> Decimal:
        interest = self.terms.interest_on(self._balance)
        logger.info("Interest calculated (Savings): %s", format_currency(interest))
        return interest

    def display(self, symbol: str = "$") -> str:
        lines = [super().display(symbol), "Account Type: Savings"]
        lines.extend(self.terms.describe(symbol))
        return "\n".join(lines)

    def _release(self):
        logger.info("Savings account %s released", self._account_number)
        super()._release()


class CheckingAccount(Account):
    """Low-interest account that may overdraw down to a fixed limit."""

    account_type = AccountType.CHECKING

    def __init__(self, account_number: int, holder_name: str, balance: Decimal,
                 overdraft_limit: Decimal):
        super().__init__(account_number, holder_name, balance)
        self._overdraft_limit = to_decimal(overdraft_limit)
        self._transaction_count = 0
        logger.info("Checking account %s configured with overdraft limit %s",
                    account_number, format_currency(self._overdraft_limit))

    @property
    def overdraft_limit(self) -> Decimal:
        return self._overdraft_limit

    @property
    def transaction_count(self) -> int:
        return self._transaction_count

    def deposit(self, amount: Decimal, description: Optional[str] = None) -> bool:
        """Deposit money; plain customer deposits count as transactions."""
        super().deposit(amount, description)
        # Described deposits such as interest credits are bookkeeping entries.
        if description is None:
            self._transaction_count += 1
        return True

    def withdraw(self, amount: Decimal) -> bool:
        """Withdraw money, allowing the balance to go negative down to the overdraft limit."""
        amount = self._require_positive(amount, "withdrawal")
        if self._balance + self._overdraft_limit < amount:
            self._reject(OverdraftExceeded(
                f"Insufficient funds even with overdraft! "
                f"Available: {format_currency(self._balance + self._overdraft_limit)}"))
        self._debit(amount)
        self._transaction_count += 1
        return True

    def calculate_interest(self) -> Decimal:
        interest = self._balance * CHECKING_INTEREST_RATE / 100
        logger.info("Interest calculated (Checking): %s", format_currency(interest))
        return interest

    def display(self, symbol: str = "$") -> str:
        return "\n".join([
            super().display(symbol),
            "Account Type: Checking",
            f"Overdraft Limit: {format_currency(self._overdraft_limit, symbol)}",
            f"Transactions: {self._transaction_count}",
        ])

    def _release(self):
        logger.info("Checking account %s released", self._account_number)
        super()._release()


class PremiumAccount(SavingsTermsMixin, Account):
    """
    Savings-style account with a bonus rate and concierge service.

    Withdrawals and deposits follow the savings rules; interest adds the
    bonus rate on top of the savings rate, both off the current balance.
    """

    account_type = AccountType.PREMIUM

    def __init__(self, account_number: int, holder_name: str, balance: Decimal,
                 interest_rate: Decimal, bonus_rate: Decimal):
        super().__init__(account_number, holder_name, balance)
        self.terms = SavingsTerms(interest_rate)
        self._bonus_rate = _validate_rate(bonus_rate, "Bonus rate")
        self._has_concierge_service = True
        logger.info("Premium account %s configured at %s%% plus %s%% bonus",
                    account_number, self.terms.interest_rate, self._bonus_rate)

    @property
    def bonus_rate(self) -> Decimal:
        return self._bonus_rate

    @property
    def has_concierge_service(self) -> bool:
        return self._has_concierge_service

    def activate_concierge(self):
        self._has_concierge_service = True
        logger.info("Concierge service activated for account %s", self._account_number)

    def calculate_interest(self) -> Decimal:
        base_interest = self.terms.interest_on(self._balance)
        bonus_interest = self._balance * self._bonus_rate / 100
        total_interest = base_interest + bonus_interest
        logger.info("Interest calculated (Premium): %s (Base: %s + Bonus: %s)",
                    format_currency(total_interest), format_currency(base_interest),
                    format_currency(bonus_interest))
        return total_interest

    def display(self, symbol: str = "$") -> str:
        lines = [super().display(symbol), "Account Type: Premium"]
        lines.extend(self.terms.describe(symbol))
        lines.append(f"Bonus Rate: {self._bonus_rate}%")
        lines.append(f"Concierge Service: {'Yes' if self._has_concierge_service else 'No'}")
        return "\n".join(lines)

    def _release(self):
        logger.info("Premium account %s released", self._account_number)
        logger.info("Savings terms of account %s released", self._account_number)
        super()._release()


class CombinedAccount(Account):
    """
    Result of adding two accounts together.

    Holds the summed balance under a joint holder name. It earns no interest
    and uses the base withdrawal policy.
    """

    account_type = AccountType.COMBINED

    def calculate_interest(self) -> Decimal:
        logger.info("Interest calculated (Combined): %s", format_currency(Decimal('0.00')))
        return Decimal('0.00')

    def display(self, symbol: str = "$") -> str:
        return "\n".join([super().display(symbol), "Account Type: Combined"])
