"""
Data models and contracts module.

Immutable value types for currencies, rates and command outcomes.
Follows functional programming principles with frozen dataclasses.
"""

from .currency import Currency, CurrencyPair, ExchangeRate, to_decimal
from .results import (
    CurrencyNotFound,
    ExchangeResult,
    GeneralError,
    InvalidFormat,
    Success,
)

__all__ = [
    "Currency",
    "CurrencyPair",
    "ExchangeRate",
    "to_decimal",
    "Success",
    "InvalidFormat",
    "CurrencyNotFound",
    "GeneralError",
    "ExchangeResult",
]
