"""Pytest configuration and shared fixtures."""

import pytest
from decimal import Decimal
from typing import List

from fx_exchange.conversion.converter import CurrencyConverter
from fx_exchange.delivery.console_output import ConsoleOutputService
from fx_exchange.processor import ExchangeCommandProcessor
from fx_exchange.rates.table import RateTable


@pytest.fixture
def reference_rates() -> dict:
    """Reference rates per 100 units, quoted in DKK."""
    return {
        "EUR": Decimal("743.94"),
        "USD": Decimal("663.11"),
        "GBP": Decimal("852.85"),
        "SEK": Decimal("76.10"),
        "NOK": Decimal("78.40"),
        "CHF": Decimal("683.58"),
        "JPY": Decimal("5.9740"),
        "DKK": Decimal("100.00"),
    }


@pytest.fixture
def rate_table() -> RateTable:
    """Rate table with the built-in rates."""
    return RateTable.default()


@pytest.fixture
def converter(rate_table: RateTable) -> CurrencyConverter:
    """Converter backed by the built-in rate table."""
    return CurrencyConverter(rate_table)


@pytest.fixture
def processor(converter: CurrencyConverter) -> ExchangeCommandProcessor:
    """Command processor backed by the real converter."""
    return ExchangeCommandProcessor(converter)


@pytest.fixture
def output_lines() -> List[str]:
    """Collects lines written by an output service."""
    return []


@pytest.fixture
def console_output(output_lines: List[str], rate_table: RateTable) -> ConsoleOutputService:
    """Console output service writing into ``output_lines``."""
    return ConsoleOutputService(output_lines.append, rate_table)
