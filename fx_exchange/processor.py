"""
Exchange command processor.

Coordinates the conversion pipeline for a single line of input:
Raw Text → Command Parsing → Conversion → Result

Every failure is contained here and mapped to a result variant, so no
command can crash the caller.
"""

from typing import Any, Optional

from .conversion.converter import CurrencyConverter
from .data.models import ExchangeCommand
from .data.parsers import parse_exchange_command
from .errors import (
    CurrencyNotFoundError,
    EmptyInputError,
    InputError,
    InvalidArgumentError,
)
from .logging.config import get_command_logger, log_command_outcome
from .models import (
    CurrencyNotFound,
    ExchangeResult,
    GeneralError,
    InvalidFormat,
    Success,
)


class ExchangeCommandProcessor:
    """
    Turns ``Exchange <pair> <amount>`` commands into results.

    Holds no state between calls; a single instance can be shared.
    """

    def __init__(self, converter: CurrencyConverter) -> None:
        if converter is None:
            raise InvalidArgumentError("Converter is required", argument="converter")
        self.converter = converter
        self.logger = get_command_logger(__name__)

    def process(self, text: str) -> ExchangeResult:
        """
        Process one command line.

        Args:
            text: Raw input as typed by the user

        Returns:
            Success, InvalidFormat, CurrencyNotFound or GeneralError; never raises
        """
        try:
            result = self._process(text)
        except Exception as e:
            self.logger.error(
                "Unexpected failure while processing command",
                command=text,
                error=str(e),
                exc_info=True,
            )
            result = GeneralError(str(e))

        log_command_outcome(self.logger, text, type(result).__name__, self._outcome_context(result))
        return result

    def _process(self, text: str) -> ExchangeResult:
        try:
            command = parse_exchange_command(text)
        except (InputError, EmptyInputError) as e:
            return InvalidFormat(e.message)

        return self._convert(command)

    def _convert(self, command: ExchangeCommand) -> ExchangeResult:
        try:
            converted = self.converter.convert(command.pair, command.amount)
        except CurrencyNotFoundError as e:
            return CurrencyNotFound(e.currency_code)
        except InvalidArgumentError as e:
            return GeneralError(e.message)

        return Success(
            original_amount=command.amount,
            main_currency_code=command.pair.main.iso_code,
            converted_amount=converted,
            money_currency_code=command.pair.money.iso_code,
        )

    @staticmethod
    def _outcome_context(result: ExchangeResult) -> Optional[dict[str, Any]]:
        if isinstance(result, Success):
            return {"converted_amount": str(result.converted_amount)}
        if isinstance(result, CurrencyNotFound):
            return {"currency_code": result.currency_code}
        if isinstance(result, (InvalidFormat, GeneralError)):
            return {"reason": result.message}
        return None
