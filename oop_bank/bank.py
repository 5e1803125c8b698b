"""
Bank façade for the banking demo.

The bank borrows any account for the length of one call and dispatches to
its variant's interest and display behavior. It never stores the account.
"""

import logging
from decimal import Decimal

from .accounts import Account
from .models import format_currency

INTEREST_DESCRIPTION = "Interest Credit"


class Bank:
    """Applies interest and renders summaries for any kind of account."""

    def __init__(self, name: str):
        """Initialize the bank."""
        self.name = name
        self.logger = logging.getLogger(__name__)
        self.logger.info("*** %s - Banking System Initialized ***", self.name)

    def process_interest(self, account: Account) -> Decimal:
        """
        Calculate interest for an account and credit it.

        Args:
            account: Account of any variant

        Returns:
            The amount credited, zero when the account earned nothing
        """
        self.logger.info("Processing interest for account %s", account.account_number)
        interest = account.calculate_interest()
        if interest <= 0:
            self.logger.info("No interest to credit for account %s (%s)",
                             account.account_number, format_currency(interest))
            return Decimal('0.00')

        account.deposit(interest, INTEREST_DESCRIPTION)
        return interest

    def display_account_info(self, account: Account, symbol: str = "$") -> str:
        """Render the account's summary."""
        return account.display(symbol)

    def close(self):
        self.logger.info("*** %s - System Shutdown ***", self.name)

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.close()
        return False
