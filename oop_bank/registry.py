"""
Account registry for the banking demo.

The registry owns the accounts a driver creates and keeps the count of live
instances: every construction path (open, copy, combine, register) adds one
and every close removes one.
"""

import copy
import logging
from decimal import Decimal
from typing import Iterator, List

from .accounts import Account, CheckingAccount, PremiumAccount, SavingsAccount
from .exceptions import AccountClosed, AccountNotRegistered


class AccountRegistry:
    """Owns account lifetimes and counts live accounts."""

    def __init__(self):
        """Initialize an empty registry."""
        self._accounts: List[Account] = []
        self.logger = logging.getLogger(__name__)

    @property
    def live_count(self) -> int:
        """Number of accounts created through the registry and not yet closed."""
        return len(self._accounts)

    def register(self, account: Account) -> Account:
        """
        Take ownership of an account built elsewhere.

        Raises:
            AccountClosed: If the account has already been closed
        """
        if account.closed:
            raise AccountClosed(f"Account {account.account_number} is closed and cannot be registered")
        if account not in self:
            self._accounts.append(account)
            self.logger.debug("Registered account %s, %d live", account.account_number, self.live_count)
        return account

    def open_savings(self, account_number: int, holder_name: str, balance: Decimal,
                     interest_rate: Decimal) -> SavingsAccount:
        """Create and register a savings account."""
        return self.register(SavingsAccount(account_number, holder_name, balance, interest_rate))

    def open_checking(self, account_number: int, holder_name: str, balance: Decimal,
                      overdraft_limit: Decimal) -> CheckingAccount:
        """Create and register a checking account."""
        return self.register(CheckingAccount(account_number, holder_name, balance, overdraft_limit))

    def open_premium(self, account_number: int, holder_name: str, balance: Decimal,
                     interest_rate: Decimal, bonus_rate: Decimal) -> PremiumAccount:
        """Create and register a premium account."""
        return self.register(
            PremiumAccount(account_number, holder_name, balance, interest_rate, bonus_rate))

    def copy(self, account: Account) -> Account:
        """Register a copy of an account."""
        return self.register(copy.copy(account))

    def combine(self, first: Account, second: Account) -> Account:
        """Register the combination of two accounts."""
        return self.register(first + second)

    def close(self, account: Account):
        """
        Close an account and stop tracking it.

        Raises:
            AccountNotRegistered: If the account was not created through this registry
        """
        for index, tracked in enumerate(self._accounts):
            if tracked is account:
                del self._accounts[index]
                account.close()
                self.logger.debug("Closed account %s, %d live", account.account_number, self.live_count)
                return
        raise AccountNotRegistered(f"Account {account.account_number} is not registered")

    def close_all(self):
        """Close every tracked account, newest first."""
        while self._accounts:
            self.close(self._accounts[-1])

    def __len__(self) -> int:
        return self.live_count

    def __contains__(self, account) -> bool:
        return any(tracked is account for tracked in self._accounts)

    def __iter__(self) -> Iterator[Account]:
        return iter(list(self._accounts))

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.close_all()
        return False
