"""
Application assembly.

Builds the object graph leaf to root: configuration, rate table, converter,
processor, output service and finally the driver loop.
"""

import sys
from collections.abc import Callable
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Optional

from .application import ExchangeApplication
from .config.defaults import ConsoleParams, DisplayParams
from .config.loader import ConfigLoader
from .config.validation import ConfigValidator
from .conversion.converter import CurrencyConverter
from .delivery.console_output import ConsoleOutputService
from .errors import ConfigurationError
from .logging.config import configure_logging, get_logger
from .processor import ExchangeCommandProcessor
from .rates.table import RateTable

logger = get_logger(__name__)


def read_stdin_line() -> Optional[str]:
    """Next line from stdin without its newline, None at end of input."""
    line = sys.stdin.readline()
    if line == "":
        return None
    return line.rstrip("\r\n")


def write_stdout(text: str) -> None:
    sys.stdout.write(text)
    sys.stdout.flush()


def print_line(text: str) -> None:
    print(text, flush=True)


@dataclass(frozen=True)
class Components:
    """Fully wired application components."""
    config: dict[str, Any]
    rate_table: RateTable
    converter: CurrencyConverter
    processor: ExchangeCommandProcessor
    output: ConsoleOutputService
    application: ExchangeApplication


def load_config(
    config_dir: Optional[Path] = None,
    overrides: Optional[dict[str, Any]] = None,
) -> dict[str, Any]:
    """
    Load and validate configuration.

    Raises:
        ConfigurationError: If the merged configuration is invalid
    """
    config = ConfigLoader.create(config_dir).merge_config(overrides)

    errors = ConfigValidator.validate_config(config)
    if errors:
        error_msgs = [f"{err.field}: {err.message} (got: {err.value})" for err in errors]
        raise ConfigurationError(
            "Invalid configuration: " + "; ".join(error_msgs),
            errors=errors,
        )
    return config


def build_application(
    config_dir: Optional[Path] = None,
    overrides: Optional[dict[str, Any]] = None,
    read_line: Callable[[], Optional[str]] = read_stdin_line,
    write_line: Callable[[str], None] = print_line,
    write: Callable[[str], None] = write_stdout,
    setup_logging: bool = True,
) -> Components:
    """
    Wire every component from configuration.

    Logging goes to stderr unless ``setup_logging`` is False, in which case
    the caller owns the structlog configuration.
    """
    if setup_logging:
        # Filter records emitted while the configuration itself is loading
        configure_logging()

    config = load_config(config_dir, overrides)

    if setup_logging:
        configure_logging(
            level=config["logging"]["level"],
            format_json=config["logging"]["format_json"],
        )

    rate_table = RateTable.from_config(config["rates"])
    converter = CurrencyConverter(rate_table)
    processor = ExchangeCommandProcessor(converter)
    output = ConsoleOutputService(
        write_line,
        rate_table,
        display=DisplayParams(**config["display"]),
    )
    application = ExchangeApplication(
        processor,
        output,
        read_line,
        write,
        console=ConsoleParams(**config["console"]),
    )

    logger.debug(
        "Application assembled",
        reference_currency=rate_table.reference_currency.iso_code,
        currencies=len(rate_table),
    )

    return Components(
        config=config,
        rate_table=rate_table,
        converter=converter,
        processor=processor,
        output=output,
        application=application,
    )
