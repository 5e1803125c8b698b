"""Configuration for the banking demo."""

from dataclasses import dataclass


@dataclass
class BankConfig:
    """Runtime settings for the demo driver and CLI."""

    bank_name: str = "Global Bank"
    currency_symbol: str = "$"
    log_level: str = "INFO"
    log_format: str = "plain"
