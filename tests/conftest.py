"""Pytest configuration and fixtures."""

import logging
from decimal import Decimal

import pytest

from oop_bank.accounts import CheckingAccount, PremiumAccount, SavingsAccount
from oop_bank.registry import AccountRegistry


@pytest.fixture(autouse=True)
def reset_package_logger():
    """Drop handlers installed by CLI runs so they don't outlive the runner's streams."""
    yield
    logger = logging.getLogger("oop_bank")
    for handler in logger.handlers[:]:
        logger.removeHandler(handler)
    logger.setLevel(logging.NOTSET)


@pytest.fixture
def savings():
    """Savings account from the walkthrough."""
    return SavingsAccount(1001, "Alice Johnson", Decimal('5000.00'), Decimal('4.5'))


@pytest.fixture
def checking():
    """Checking account from the walkthrough."""
    return CheckingAccount(2001, "Bob Smith", Decimal('3000.00'), Decimal('500.00'))


@pytest.fixture
def premium():
    """Premium account from the walkthrough."""
    return PremiumAccount(3001, "Charlie Brown", Decimal('10000.00'), Decimal('5.0'), Decimal('2.0'))


@pytest.fixture
def registry():
    """Empty account registry."""
    return AccountRegistry()
