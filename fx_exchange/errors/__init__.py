"""
Error classification system for the exchange pipeline.

Input errors describe malformed command text, conversion errors describe
commands that parse but cannot be fulfilled, and configuration errors stop
the application before it starts reading commands.
"""

from .input_errors import (
    ExchangeError,
    InputError,
    CommandFormatError,
    CurrencyPairFormatError,
)
from .conversion_errors import (
    InvalidArgumentError,
    EmptyInputError,
    CurrencyNotFoundError,
    ConfigurationError,
)

__all__ = [
    "ExchangeError",
    # Input Errors
    "InputError",
    "CommandFormatError",
    "CurrencyPairFormatError",
    # Conversion Errors
    "InvalidArgumentError",
    "EmptyInputError",
    "CurrencyNotFoundError",
    # Startup
    "ConfigurationError",
]
