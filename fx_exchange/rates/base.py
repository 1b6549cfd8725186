"""Base interface for exchange rate sources."""

from abc import ABC, abstractmethod
from typing import Optional

from ..models import Currency, ExchangeRate


class BaseExchangeRateProvider(ABC):
    """Source of rates against a single reference currency."""

    @abstractmethod
    def get_exchange_rate(self, iso_code: str) -> Optional[ExchangeRate]:
        """
        Look up the rate for a currency.

        Args:
            iso_code: Currency code, matched case-insensitively

        Returns:
            The rate entry, or None if the currency is unknown
        """
        pass

    @abstractmethod
    def supported_currencies(self) -> list[Currency]:
        """Currencies this provider can quote, in a stable order."""
        pass
