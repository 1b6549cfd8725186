"""
Outcome of processing a single exchange command.

Exactly one of four variants is produced per command. Each variant carries
only the data relevant to it, so a consumer dispatches on the type instead
of checking flags.
"""

from dataclasses import dataclass
from decimal import Decimal
from typing import Union


@dataclass(frozen=True)
class Success:
    """Command converted successfully."""
    original_amount: Decimal
    main_currency_code: str
    converted_amount: Decimal
    money_currency_code: str

    @property
    def is_success(self) -> bool:
        return True


@dataclass(frozen=True)
class InvalidFormat:
    """Command text could not be parsed."""
    message: str

    @property
    def is_success(self) -> bool:
        return False


@dataclass(frozen=True)
class CurrencyNotFound:
    """A currency in the command has no known rate."""
    currency_code: str

    @property
    def is_success(self) -> bool:
        return False


@dataclass(frozen=True)
class GeneralError:
    """Any other failure while converting."""
    message: str

    @property
    def is_success(self) -> bool:
        return False


ExchangeResult = Union[Success, InvalidFormat, CurrencyNotFound, GeneralError]
