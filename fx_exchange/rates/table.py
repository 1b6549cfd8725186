"""
Static rate table keyed by ISO code.

The table is populated once at startup and never mutated afterwards, so a
single instance can be shared by any number of concurrent callers.
"""

from collections.abc import Iterable, Mapping
from decimal import Decimal
from types import MappingProxyType
from typing import Any, Optional

import structlog

from ..config.defaults import DEFAULT_RATES, DEFAULT_REFERENCE_CURRENCY
from ..errors import InvalidArgumentError
from ..models import Currency, ExchangeRate
from .base import BaseExchangeRateProvider

REFERENCE_RATE = Decimal("100")

logger = structlog.get_logger(__name__)


class RateTable(BaseExchangeRateProvider):
    """
    Case-insensitive lookup from ISO code to its rate against the reference currency.

    The reference currency must be present with a rate of exactly 100 so that
    conversions into or out of it are exact.
    """

    def __init__(self, rates: Iterable[ExchangeRate], reference_currency: str = DEFAULT_REFERENCE_CURRENCY):
        entries: dict[str, ExchangeRate] = {}
        for rate in rates:
            if rate.iso_code in entries:
                raise InvalidArgumentError(
                    f"Duplicate rate for currency {rate.iso_code}",
                    argument="rates",
                    value=rate.iso_code,
                )
            entries[rate.iso_code] = rate

        reference_code = (reference_currency or "").strip().upper()
        reference_rate = entries.get(reference_code)
        if reference_rate is None:
            raise InvalidArgumentError(
                f"Reference currency '{reference_code}' must be present in the rate table",
                argument="reference_currency",
                value=reference_currency,
            )
        if reference_rate.rate_to_reference != REFERENCE_RATE:
            raise InvalidArgumentError(
                f"Reference currency '{reference_code}' must have rate {REFERENCE_RATE}",
                argument="reference_currency",
                value=reference_rate.rate_to_reference,
            )

        self._rates: Mapping[str, ExchangeRate] = MappingProxyType(entries)
        self._reference = reference_rate.currency

        logger.debug(
            "Rate table built",
            reference_currency=reference_code,
            currencies=list(self._rates),
        )

    @classmethod
    def from_entries(
        cls,
        entries: Iterable[tuple[str, str, Any]],
        reference_currency: str = DEFAULT_REFERENCE_CURRENCY,
    ) -> "RateTable":
        """Build a table from ``(code, display_name, rate)`` tuples."""
        return cls(
            (ExchangeRate(Currency(code, name), rate) for code, name, rate in entries),
            reference_currency=reference_currency,
        )

    @classmethod
    def from_config(cls, rate_config: dict[str, Any]) -> "RateTable":
        """Build a table from the validated ``rates`` configuration section."""
        entries = [
            (code, entry["name"], entry["rate"])
            for code, entry in rate_config["currencies"].items()
        ]
        return cls.from_entries(entries, reference_currency=rate_config["reference_currency"])

    @classmethod
    def default(cls) -> "RateTable":
        """Table with the built-in rates quoted against DKK."""
        return cls.from_entries(DEFAULT_RATES, reference_currency=DEFAULT_REFERENCE_CURRENCY)

    @property
    def reference_currency(self) -> Currency:
        return self._reference

    def lookup(self, iso_code: str) -> Optional[ExchangeRate]:
        """Rate entry for ``iso_code``, or None when the currency is unknown."""
        if not isinstance(iso_code, str):
            return None
        return self._rates.get(iso_code.strip().upper())

    def get_exchange_rate(self, iso_code: str) -> Optional[ExchangeRate]:
        return self.lookup(iso_code)

    def supported_currencies(self) -> list[Currency]:
        return [rate.currency for rate in self._rates.values()]

    def __contains__(self, iso_code: object) -> bool:
        return isinstance(iso_code, str) and self.lookup(iso_code) is not None

    def __len__(self) -> int:
        return len(self._rates)
