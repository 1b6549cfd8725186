"""
Conversion and startup error classifications.

Precondition violations and unknown currencies are raised as distinct types
so the command processor can branch on them instead of treating every
failure as a generic error.
"""

from typing import Optional, Any

from .input_errors import ExchangeError


class InvalidArgumentError(ExchangeError, ValueError):
    """A precondition on an argument was violated."""

    def __init__(self, message: str, argument: Optional[str] = None,
                 value: Any = None, **kwargs):
        super().__init__(message, **kwargs)
        self.argument = argument
        self.value = value


class EmptyInputError(InvalidArgumentError):
    """Required text input is empty or whitespace only."""


class CurrencyNotFoundError(ExchangeError, LookupError):
    """No exchange rate is known for the referenced currency."""

    def __init__(self, currency_code: str, **kwargs):
        super().__init__(f"Currency not found: {currency_code}", **kwargs)
        self.currency_code = currency_code


class ConfigurationError(ExchangeError):
    """Configuration failed validation at startup."""

    def __init__(self, message: str, errors: Optional[list] = None, **kwargs):
        super().__init__(message, **kwargs)
        self.errors = errors or []
