"""
Exchange rate sources.

Rates are quoted as reference currency units per 100 units of a currency.
"""
from .base import BaseExchangeRateProvider
from .table import RateTable

__all__ = ["BaseExchangeRateProvider", "RateTable"]
