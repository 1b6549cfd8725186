"""
Currency value types used throughout the conversion pipeline.

All types are frozen dataclasses. Codes are normalized to upper case on
construction so identity comparisons never depend on how a user typed them.
"""

from dataclasses import dataclass, field
from decimal import Decimal, InvalidOperation
from typing import Any

from ..errors import CurrencyPairFormatError, EmptyInputError, InvalidArgumentError

PAIR_SEPARATOR = "/"


@dataclass(frozen=True)
class Currency:
    """A currency identified by its ISO code."""

    iso_code: str
    display_name: str = field(compare=False)

    def __post_init__(self):
        if not isinstance(self.iso_code, str) or not self.iso_code.strip():
            raise InvalidArgumentError(
                "ISO code cannot be null or empty",
                argument="iso_code",
                value=self.iso_code,
            )
        if not isinstance(self.display_name, str) or not self.display_name.strip():
            raise InvalidArgumentError(
                "Name cannot be null or empty",
                argument="display_name",
                value=self.display_name,
            )

        object.__setattr__(self, "iso_code", self.iso_code.strip().upper())
        object.__setattr__(self, "display_name", self.display_name.strip())

    def __str__(self) -> str:
        return self.iso_code


@dataclass(frozen=True)
class CurrencyPair:
    """Convert an amount of ``main`` into ``money``."""

    main: Currency
    money: Currency

    def __post_init__(self):
        if self.main is None:
            raise InvalidArgumentError("Main currency is required", argument="main")
        if self.money is None:
            raise InvalidArgumentError("Money currency is required", argument="money")

    @property
    def is_same_currency(self) -> bool:
        """True when both sides refer to the same ISO code."""
        return self.main.iso_code == self.money.iso_code

    @classmethod
    def parse(cls, text: str) -> "CurrencyPair":
        """
        Parse ``XXX/YYY`` into a pair.

        Whitespace around each code is ignored and codes are upper-cased.
        The display name of each side is the code itself; real names are only
        known to the rate table.

        Raises:
            EmptyInputError: If the text is empty or whitespace only
            CurrencyPairFormatError: If the text is not two non-empty codes
                separated by a single slash
        """
        if text is None or not text.strip():
            raise EmptyInputError(
                "Currency pair cannot be null or empty", argument="pair", value=text
            )

        parts = text.split(PAIR_SEPARATOR)
        if len(parts) != 2:
            raise CurrencyPairFormatError(
                f"Invalid currency pair format: {text}. Expected format: XXX/YYY",
                pair_text=text,
            )

        main_code = parts[0].strip().upper()
        money_code = parts[1].strip().upper()

        if not main_code or not money_code:
            raise CurrencyPairFormatError(
                f"Invalid currency pair format: {text}", pair_text=text
            )

        return cls(
            main=Currency(main_code, main_code),
            money=Currency(money_code, money_code),
        )

    def __str__(self) -> str:
        return f"{self.main.iso_code}{PAIR_SEPARATOR}{self.money.iso_code}"


def to_decimal(value: Any, argument: str = "value") -> Decimal:
    """
    Coerce a numeric value to ``Decimal`` without binary float error.

    Floats are converted through their shortest ``str`` form, so ``743.94``
    becomes ``Decimal("743.94")`` rather than its exact binary expansion.
    """
    if isinstance(value, Decimal):
        result = value
    elif isinstance(value, bool):
        raise InvalidArgumentError(f"{argument} must be a number", argument=argument, value=value)
    else:
        try:
            result = Decimal(str(value).strip())
        except InvalidOperation as e:
            raise InvalidArgumentError(
                f"{argument} must be a number, got '{value}'", argument=argument, value=value
            ) from e

    if not result.is_finite():
        raise InvalidArgumentError(f"{argument} must be finite", argument=argument, value=value)
    return result


@dataclass(frozen=True)
class ExchangeRate:
    """
    Rate of a currency against the reference currency.

    ``rate_to_reference`` is the number of reference currency units needed to
    buy 100 units of ``currency``.
    """

    currency: Currency
    rate_to_reference: Decimal

    def __post_init__(self):
        if self.currency is None:
            raise InvalidArgumentError("Currency is required", argument="currency")

        rate = to_decimal(self.rate_to_reference, argument="rate_to_reference")
        if rate <= 0:
            raise InvalidArgumentError(
                "Exchange rate must be positive",
                argument="rate_to_reference",
                value=self.rate_to_reference,
            )
        object.__setattr__(self, "rate_to_reference", rate)

    @property
    def iso_code(self) -> str:
        return self.currency.iso_code
