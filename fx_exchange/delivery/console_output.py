"""Line-oriented console rendering of command results."""

from collections.abc import Callable
from decimal import ROUND_HALF_UP, Decimal, localcontext
from typing import Optional

from ..config.defaults import DisplayParams
from ..errors import InvalidArgumentError
from ..models import (
    CurrencyNotFound,
    ExchangeResult,
    GeneralError,
    InvalidFormat,
    Success,
    to_decimal,
)
from ..rates.base import BaseExchangeRateProvider
from .base import USAGE_MESSAGE, BaseOutputService


def format_decimal(value: Decimal, places: int) -> str:
    """
    Format with exactly ``places`` digits after the point.

    Ties round away from zero. Zero never renders with a minus sign.
    """
    value = to_decimal(value)
    exponent = Decimal(1).scaleb(-places)

    with localcontext() as ctx:
        ctx.prec = max(ctx.prec, value.adjusted() + places + 2)
        rounded = value.quantize(exponent, rounding=ROUND_HALF_UP)

    if rounded.is_zero():
        rounded = rounded.copy_abs()
    return f"{rounded:f}"


class ConsoleOutputService(BaseOutputService):
    """Writes results as plain text lines through ``write_line``."""

    def __init__(
        self,
        write_line: Callable[[str], None],
        rate_provider: BaseExchangeRateProvider,
        display: Optional[DisplayParams] = None,
    ):
        if write_line is None:
            raise InvalidArgumentError("write_line is required", argument="write_line")
        if rate_provider is None:
            raise InvalidArgumentError("Rate provider is required", argument="rate_provider")

        self._write_line = write_line
        self.rate_provider = rate_provider
        self.display = display or DisplayParams()

    def show_usage(self) -> None:
        self._write_line(USAGE_MESSAGE)

    def show_result(self, result: ExchangeResult) -> None:
        for line in self.render(result):
            self._write_line(line)

    def render(self, result: ExchangeResult) -> list[str]:
        """
        Lines to print for ``result``.

        Single-line results are followed by a blank line. The unsupported
        currency block ends with the last currency line instead.
        """
        if isinstance(result, Success):
            return [self._format_success(result), ""]
        if isinstance(result, CurrencyNotFound):
            lines = [f"Error: Currency '{result.currency_code}' is not supported.", ""]
            lines.extend(self._supported_currency_lines())
            return lines
        if isinstance(result, (InvalidFormat, GeneralError)):
            return [f"Error: {result.message}", ""]

        raise TypeError(f"Unknown result type: {type(result).__name__}")

    def _format_success(self, result: Success) -> str:
        amount = format_decimal(result.original_amount, self.display.amount_places)
        converted = format_decimal(result.converted_amount, self.display.converted_places)
        return (
            f"{amount} {result.main_currency_code} = "
            f"{converted} {result.money_currency_code}"
        )

    def _supported_currency_lines(self) -> list[str]:
        lines = ["Supported currencies:"]
        for currency in self.rate_provider.supported_currencies():
            lines.append(f"  {currency.iso_code} - {currency.display_name}")
        return lines
