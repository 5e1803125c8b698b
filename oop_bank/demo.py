"""
Walkthrough of the account hierarchy.

Runs the classic sequence: open three kinds of account, move money, show
polymorphic interest and display, combine and copy accounts, then close
everything in reverse order.
"""

import logging
from decimal import Decimal
from typing import Callable, Optional

import click

from .accounts import Account, SavingsAccount
from .bank import Bank
from .config import BankConfig
from .exceptions import BankError
from .models import format_currency
from .registry import AccountRegistry

logger = logging.getLogger(__name__)


def _section(echo: Callable[[str], None], title: str):
    echo(f"\n=== {title} ===")


def _try_withdraw(echo: Callable[[str], None], account: Account, amount: Decimal):
    try:
        account.withdraw(amount)
    except BankError as e:
        echo(f"❌ Error: {e}")


def run_demo(config: Optional[BankConfig] = None,
             echo: Callable[[str], None] = click.echo) -> int:
    """
    Run the full demonstration.

    Args:
        config: Bank name and currency symbol to use
        echo: Sink for the rendered text

    Returns:
        Number of accounts still live at the end (always 0)
    """
    config = config or BankConfig()
    symbol = config.currency_symbol

    with Bank(config.bank_name) as bank, AccountRegistry() as registry:
        _section(echo, "Creating Accounts")
        savings = registry.open_savings(1001, "Alice Johnson", Decimal('5000.00'), Decimal('4.5'))
        checking = registry.open_checking(2001, "Bob Smith", Decimal('3000.00'), Decimal('500.00'))
        premium = registry.open_premium(3001, "Charlie Brown", Decimal('10000.00'),
                                        Decimal('5.0'), Decimal('2.0'))

        _section(echo, "Encapsulation: Accessors")
        echo(f"Savings Account Holder: {savings.holder_name}")
        echo(f"Savings Balance: {format_currency(savings.balance, symbol)}")

        _section(echo, "Deposit Overloads")
        savings.deposit(Decimal('1000.00'))
        savings.deposit(Decimal('500.00'), "Salary")

        _section(echo, "Displaying Account Details")
        for account in (savings, checking, premium):
            echo(bank.display_account_info(account, symbol))

        _section(echo, "Withdrawal Operations")
        _try_withdraw(echo, savings, Decimal('500.00'))
        _try_withdraw(echo, checking, Decimal('3200.00'))

        _section(echo, "Polymorphic Interest Processing")
        for position, account in enumerate((savings, checking, premium), start=1):
            echo(f"\nAccount {position}:")
            bank.process_interest(account)

        _section(echo, "Combining Accounts")
        combined = registry.combine(savings, checking)
        echo(f"Combined holder: {combined.holder_name}")
        echo(f"Combined balance: {format_currency(combined.balance, symbol)}")

        _section(echo, "Copying Accounts")
        savings_copy = registry.copy(savings)
        echo(bank.display_account_info(savings_copy, symbol))

        _section(echo, "Live Accounts")
        echo(f"Total accounts open: {registry.live_count}")

        _section(echo, "Premium Features")
        premium.activate_concierge()

        _section(echo, "Abstraction Demo")
        account = registry.register(
            SavingsAccount(4001, "David Lee", Decimal('7000.00'), Decimal('3.5')))
        echo(bank.display_account_info(account, symbol))
        bank.process_interest(account)
        registry.close(account)

        _section(echo, "Closing Remaining Accounts")

    logger.debug("Demo finished with %d live accounts", registry.live_count)
    return registry.live_count
