"""
Structured form of a parsed exchange command.
"""

from dataclasses import dataclass
from decimal import Decimal

from ..models import CurrencyPair


@dataclass(frozen=True)
class ExchangeCommand:
    """``Exchange <pair> <amount>`` after parsing."""
    pair: CurrencyPair
    amount: Decimal
    raw_amount: str     # Amount token as typed
