"""
Currency conversion module.
"""
from .converter import CurrencyConverter

__all__ = ["CurrencyConverter"]
