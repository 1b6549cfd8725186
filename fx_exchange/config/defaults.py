"""Default configuration parameters for the exchange application."""

from dataclasses import dataclass, field
from typing import Any

# Reference currency units needed to buy 100 units of each currency.
DEFAULT_REFERENCE_CURRENCY = "DKK"
DEFAULT_RATES: tuple[tuple[str, str, str], ...] = (
    ("EUR", "Euro", "743.94"),
    ("USD", "Amerikanske dollar", "663.11"),
    ("GBP", "Britiske pund", "852.85"),
    ("SEK", "Svenske kroner", "76.10"),
    ("NOK", "Norske kroner", "78.40"),
    ("CHF", "Schweiziske franc", "683.58"),
    ("JPY", "Japanske yen", "5.9740"),
    ("DKK", "Danske kroner", "100.00"),
)


def _default_rate_mapping() -> dict[str, dict[str, Any]]:
    return {code: {"name": name, "rate": rate} for code, name, rate in DEFAULT_RATES}


@dataclass(frozen=True)
class RateParams:
    """Rate table contents."""
    reference_currency: str = DEFAULT_REFERENCE_CURRENCY
    currencies: dict[str, dict[str, Any]] = field(default_factory=_default_rate_mapping)


@dataclass(frozen=True)
class DisplayParams:
    """Number formatting for rendered results."""
    amount_places: int = 2             # Digits after the point for the input amount
    converted_places: int = 4          # Digits after the point for the converted amount


@dataclass(frozen=True)
class ConsoleParams:
    """Interactive console parameters."""
    prompt: str = "> "


@dataclass(frozen=True)
class LoggingParams:
    """Logging parameters."""
    level: str = "WARNING"
    format_json: bool = False


@dataclass(frozen=True)
class DefaultConfig:
    """Complete default configuration."""
    rates: RateParams
    display: DisplayParams
    console: ConsoleParams
    logging: LoggingParams


def get_default_config() -> DefaultConfig:
    """Get the default configuration instance."""
    return DefaultConfig(
        rates=RateParams(),
        display=DisplayParams(),
        console=ConsoleParams(),
        logging=LoggingParams(),
    )
