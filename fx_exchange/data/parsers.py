"""
Parsers for converting raw command text to structured commands.

Rules are checked in a fixed order and the first failing rule decides the
error message shown to the user.
"""

import re
from decimal import Decimal, InvalidOperation

from ..errors import CommandFormatError
from ..models import CurrencyPair
from .models import ExchangeCommand

COMMAND_KEYWORD = "Exchange"
COMMAND_TOKEN_COUNT = 3

EMPTY_INPUT_MESSAGE = "Input cannot be empty"
INVALID_FORMAT_MESSAGE = "Invalid command format. Use: Exchange <currency_pair> <amount>"
INVALID_KEYWORD_MESSAGE = "Command must start with 'Exchange'"

# Plain decimal notation only: no exponent, underscores, NaN or infinity.
# Group separators such as "1,000" are rejected: "," and "." swap roles between locales.
_AMOUNT_PATTERN = re.compile(r"[+-]?(?:[0-9]+(?:\.[0-9]*)?|\.[0-9]+)")


def parse_amount(token: str) -> Decimal:
    """
    Parse an amount token as a finite decimal number.

    Only ``.`` is accepted, as the decimal point; ``1,000`` is not an amount.

    Raises:
        CommandFormatError: If the token is not a plain decimal number
    """
    if not _AMOUNT_PATTERN.fullmatch(token):
        raise CommandFormatError(
            f"Invalid amount '{token}'. Please provide a valid decimal number.",
            raw_input=token,
        )
    try:
        return Decimal(token)
    except InvalidOperation as e:
        raise CommandFormatError(
            f"Invalid amount '{token}'. Please provide a valid decimal number.",
            raw_input=token,
        ) from e


def parse_exchange_command(text: str) -> ExchangeCommand:
    """
    Parse ``Exchange <currency_pair> <amount>``.

    Tokens are separated by any run of whitespace; leading and trailing
    whitespace is ignored. The keyword is matched case-insensitively.

    Args:
        text: Raw command line

    Returns:
        Parsed command with an upper-cased currency pair

    Raises:
        CommandFormatError: If the input is empty, has the wrong number of
            tokens, the wrong keyword or an invalid amount
        CurrencyPairFormatError: If the pair token is not XXX/YYY
    """
    if text is None or not text.strip():
        raise CommandFormatError(EMPTY_INPUT_MESSAGE, raw_input=text)

    tokens = text.split()
    if len(tokens) != COMMAND_TOKEN_COUNT:
        raise CommandFormatError(INVALID_FORMAT_MESSAGE, raw_input=text)

    keyword, pair_token, amount_token = tokens

    if keyword.casefold() != COMMAND_KEYWORD.casefold():
        raise CommandFormatError(INVALID_KEYWORD_MESSAGE, raw_input=text)

    pair = CurrencyPair.parse(pair_token)
    amount = parse_amount(amount_token)

    return ExchangeCommand(pair=pair, amount=amount, raw_amount=amount_token)
