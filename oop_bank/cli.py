"""
CLI interface for the banking demo.

This module provides a command-line interface for running the walkthrough
and for trying individual account variants.
"""

import click
from decimal import Decimal, InvalidOperation
from typing import Optional

from .accounts import Account
from .bank import Bank
from .config import BankConfig
from .demo import run_demo
from .logging_config import FORMATS, setup_logging
from .models import format_currency
from .registry import AccountRegistry


class BankCLI:
    """CLI wrapper holding the configuration for a run."""

    def __init__(self, config: Optional[BankConfig] = None):
        """Initialize CLI with configuration."""
        self.config = config or BankConfig()

    def format_currency(self, amount: Decimal) -> str:
        """Format currency for display."""
        return format_currency(amount, self.config.currency_symbol)

    def parse_currency(self, amount_str: str) -> Decimal:
        """Parse currency input."""
        try:
            # Remove the currency symbol and thousands separators
            clean_str = amount_str.replace(self.config.currency_symbol, '').replace(',', '').strip()
            amount = Decimal(clean_str)
        except (InvalidOperation, ValueError):
            raise ValueError(f"Invalid amount: {amount_str}")
        if not amount.is_finite():
            raise ValueError(f"Invalid amount: {amount_str}")
        return amount

    def open_account(self, registry: AccountRegistry, account_type: str, number: int, holder: str,
                     balance: Decimal, rate: Decimal, bonus: Decimal, overdraft: Decimal) -> Account:
        """Open an account of the requested type."""
        if account_type == 'savings':
            return registry.open_savings(number, holder, balance, rate)
        if account_type == 'checking':
            return registry.open_checking(number, holder, balance, overdraft)
        if account_type == 'premium':
            return registry.open_premium(number, holder, balance, rate, bonus)
        raise ValueError(f"Unknown account type: {account_type}")


@click.group()
@click.option('--bank-name', default=BankConfig.bank_name, envvar='OOP_BANK_NAME',
              help='Name of the bank')
@click.option('--currency', default=BankConfig.currency_symbol, envvar='OOP_BANK_CURRENCY',
              help='Currency symbol used in output')
@click.option('--log-level', default=BankConfig.log_level, envvar='OOP_BANK_LOG_LEVEL',
              type=click.Choice(['DEBUG', 'INFO', 'WARNING', 'ERROR'], case_sensitive=False),
              help='Log level for account events')
@click.option('--log-format', default=BankConfig.log_format, envvar='OOP_BANK_LOG_FORMAT',
              type=click.Choice(FORMATS), help='Log line format')
@click.pass_context
def cli(ctx, bank_name, currency, log_level, log_format):
    """Object-oriented banking demo CLI"""
    ctx.ensure_object(dict)
    config = BankConfig(
        bank_name=bank_name,
        currency_symbol=currency,
        log_level=log_level,
        log_format=log_format
    )
    setup_logging(config.log_level, config.log_format)
    ctx.obj['cli'] = BankCLI(config)


@cli.command()
@click.pass_context
def demo(ctx):
    """Run the full account hierarchy walkthrough."""
    bank_cli = ctx.obj['cli']
    remaining = run_demo(bank_cli.config)
    click.echo(f"\nAccounts still open: {remaining}")


@cli.command()
@click.option('--type', 'account_type', type=click.Choice(['savings', 'checking', 'premium']),
              default='savings', help='Type of account')
@click.option('--number', type=int, default=1, help='Account number')
@click.option('--holder', default='Unknown', help='Account holder name')
@click.option('--balance', default='0.00', help='Opening balance')
@click.option('--rate', default='0', help='Interest rate in percent (savings, premium)')
@click.option('--bonus', default='0', help='Bonus rate in percent (premium)')
@click.option('--overdraft', default='0.00', help='Overdraft limit (checking)')
@click.option('--deposit', 'deposits', multiple=True, help='Amount to deposit; repeatable')
@click.option('--withdraw', 'withdrawals', multiple=True, help='Amount to withdraw; repeatable')
@click.option('--apply-interest', is_flag=True, help='Credit interest after the transactions')
@click.pass_context
def simulate(ctx, account_type, number, holder, balance, rate, bonus, overdraft,
             deposits, withdrawals, apply_interest):
    """Open one account, apply transactions and show the result."""
    bank_cli = ctx.obj['cli']

    try:
        opening_balance = bank_cli.parse_currency(balance)
        overdraft_limit = bank_cli.parse_currency(overdraft)
        interest_rate = Decimal(rate)
        bonus_rate = Decimal(bonus)
    except (InvalidOperation, ValueError) as e:
        click.echo(f"❌ Error: {e}", err=True)
        return

    with Bank(bank_cli.config.bank_name) as bank, AccountRegistry() as registry:
        try:
            account = bank_cli.open_account(registry, account_type, number, holder, opening_balance,
                                            interest_rate, bonus_rate, overdraft_limit)
        except ValueError as e:
            click.echo(f"❌ Error: {e}", err=True)
            return

        for amount in deposits:
            try:
                deposit_amount = bank_cli.parse_currency(amount)
                account.deposit(deposit_amount)
                click.echo(f"✅ Deposited {bank_cli.format_currency(deposit_amount)}")
            except ValueError as e:
                click.echo(f"❌ Error: {e}", err=True)

        for amount in withdrawals:
            try:
                withdraw_amount = bank_cli.parse_currency(amount)
                account.withdraw(withdraw_amount)
                click.echo(f"✅ Withdrew {bank_cli.format_currency(withdraw_amount)}")
            except ValueError as e:
                click.echo(f"❌ Error: {e}", err=True)

        if apply_interest:
            credited = bank.process_interest(account)
            click.echo(f"💎 Interest credited: {bank_cli.format_currency(credited)}")

        click.echo(bank.display_account_info(account, bank_cli.config.currency_symbol))


def main():
    """Main entry point for CLI."""
    cli()


if __name__ == '__main__':
    main()
