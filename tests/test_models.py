"""
Tests for the models module.

This module contains tests for the enums, the Transaction record and the
currency helpers.
"""

from datetime import datetime
from decimal import Decimal

import pytest

from oop_bank.models import AccountType, Transaction, TransactionType, format_currency, to_decimal


class TestEnums:
    """Test enum values."""

    def test_account_types(self):
        """Test all account type values."""
        assert AccountType.SAVINGS.value == "savings"
        assert AccountType.CHECKING.value == "checking"
        assert AccountType.PREMIUM.value == "premium"
        assert AccountType.COMBINED.value == "combined"

    def test_transaction_types(self):
        """Test all transaction type values."""
        assert TransactionType.DEPOSIT.value == "deposit"
        assert TransactionType.WITHDRAWAL.value == "withdrawal"


class TestCurrencyHelpers:
    """Test to_decimal and format_currency."""

    def test_to_decimal_conversions(self):
        """Test conversion from str, int and float."""
        assert to_decimal("1500.50") == Decimal('1500.50')
        assert to_decimal(3000) == Decimal('3000')
        assert to_decimal(2500.75) == Decimal('2500.75')

    def test_to_decimal_keeps_decimal(self):
        """Test Decimal input is returned as is."""
        value = Decimal('1.10')
        assert to_decimal(value) is value

    @pytest.mark.parametrize("amount,expected", [
        (Decimal('1234.56'), "$1,234.56"),
        (Decimal('0'), "$0.00"),
        (Decimal('-200'), "-$200.00"),
        (Decimal('1000000.999'), "$1,000,001.00"),
    ])
    def test_format_currency(self, amount, expected):
        """Test currency formatting."""
        assert format_currency(amount) == expected

    def test_format_currency_custom_symbol(self):
        """Test currency formatting with another symbol."""
        assert format_currency(Decimal('5'), "€") == "€5.00"


class TestTransaction:
    """Test Transaction record."""

    def test_transaction_defaults(self):
        """Test timestamp and Decimal normalization."""
        txn = Transaction(TransactionType.DEPOSIT, 100, "600.50")

        assert txn.amount == Decimal('100')
        assert isinstance(txn.amount, Decimal)
        assert txn.balance_after == Decimal('600.50')
        assert txn.description == ""
        assert isinstance(txn.timestamp, datetime)

    def test_transaction_is_immutable(self):
        """Test transactions cannot be edited after the fact."""
        txn = Transaction(TransactionType.WITHDRAWAL, Decimal('5'), Decimal('10'))
        with pytest.raises(AttributeError):
            txn.amount = Decimal('1')
