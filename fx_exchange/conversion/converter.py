"""
Cross-rate currency conversion via the reference currency.

Both currencies are resolved against the same reference currency and the
amount is converted through it. All arithmetic is done in ``Decimal`` and no
rounding is applied; formatting for display belongs to the output layer.
"""

from decimal import Decimal

import structlog

from ..errors import CurrencyNotFoundError, InvalidArgumentError
from ..models import CurrencyPair, ExchangeRate
from ..rates.base import BaseExchangeRateProvider

HUNDRED = Decimal("100")

logger = structlog.get_logger(__name__)


class CurrencyConverter:
    """Converts amounts between currencies using a rate provider."""

    def __init__(self, rate_provider: BaseExchangeRateProvider):
        if rate_provider is None:
            raise InvalidArgumentError("Rate provider is required", argument="rate_provider")
        self.rate_provider = rate_provider

    def convert(self, pair: CurrencyPair, amount: Decimal) -> Decimal:
        """
        Convert ``amount`` of ``pair.main`` into ``pair.money``.

        Converting a currency into itself returns the amount unchanged without
        consulting the rate provider.

        Args:
            pair: Currency pair to convert between
            amount: Non-negative amount of the main currency

        Returns:
            Converted amount, unrounded

        Raises:
            InvalidArgumentError: If the pair is missing or the amount is negative
            CurrencyNotFoundError: If either currency has no rate; the main
                currency is checked first
        """
        if pair is None:
            raise InvalidArgumentError("Currency pair is required", argument="pair")

        if amount < 0:
            raise InvalidArgumentError(
                "Amount cannot be negative", argument="amount", value=amount
            )

        if pair.is_same_currency:
            logger.debug("Same currency conversion", pair=str(pair), amount=str(amount))
            return amount

        main_rate = self._resolve(pair.main.iso_code)
        money_rate = self._resolve(pair.money.iso_code)

        reference_amount = (amount / HUNDRED) * main_rate.rate_to_reference
        result = reference_amount / (money_rate.rate_to_reference / HUNDRED)

        logger.debug(
            "Converted amount",
            pair=str(pair),
            amount=str(amount),
            main_rate=str(main_rate.rate_to_reference),
            money_rate=str(money_rate.rate_to_reference),
            result=str(result),
        )
        return result

    def _resolve(self, iso_code: str) -> ExchangeRate:
        rate = self.rate_provider.get_exchange_rate(iso_code)
        if rate is None:
            raise CurrencyNotFoundError(iso_code)
        return rate
