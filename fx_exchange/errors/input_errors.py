"""
Input error classifications for user supplied exchange commands.

These exceptions describe text that could not be turned into a structured
exchange command. The command processor reports all of them to the user as
format problems.
"""

from typing import Optional, Dict, Any


class ExchangeError(Exception):
    """Base class for all errors raised by the exchange pipeline."""

    def __init__(self, message: str, context: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.message = message
        self.context = context or {}


class InputError(ExchangeError, ValueError):
    """User input that does not follow the command grammar."""

    def __init__(self, message: str, raw_input: Optional[str] = None, **kwargs):
        super().__init__(message, **kwargs)
        self.raw_input = raw_input


class CommandFormatError(InputError):
    """Command line has the wrong shape, keyword or amount."""


class CurrencyPairFormatError(InputError):
    """Currency pair text is not of the form XXX/YYY."""

    def __init__(self, message: str, pair_text: Optional[str] = None, **kwargs):
        super().__init__(message, raw_input=pair_text, **kwargs)
        self.pair_text = pair_text
