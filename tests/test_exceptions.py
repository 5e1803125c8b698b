"""Tests for the exception taxonomy."""

from oop_bank.exceptions import (
    AccountClosed,
    AccountNotRegistered,
    BankError,
    BelowMinimumBalance,
    InsufficientFunds,
    InvalidAmount,
    InvalidRate,
    OverdraftExceeded,
)


class TestExceptionHierarchy:
    """Test exception inheritance chain."""

    def test_bank_error_is_value_error(self):
        assert isinstance(BankError("test"), ValueError)

    def test_simple_errors_are_bank_errors(self):
        for error_cls in (InvalidAmount, InsufficientFunds, InvalidRate, AccountNotRegistered,
                          AccountClosed):
            assert isinstance(error_cls("test"), BankError)

    def test_floor_and_overdraft_are_insufficient_funds(self):
        assert isinstance(BelowMinimumBalance("test"), InsufficientFunds)
        assert isinstance(OverdraftExceeded("test"), InsufficientFunds)

    def test_exception_message(self):
        err = OverdraftExceeded("Insufficient funds even with overdraft!")
        assert str(err) == "Insufficient funds even with overdraft!"
