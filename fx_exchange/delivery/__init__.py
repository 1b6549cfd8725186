"""
Result presentation module.
"""
from .base import USAGE_MESSAGE, BaseOutputService
from .console_output import ConsoleOutputService, format_decimal

__all__ = ["BaseOutputService", "ConsoleOutputService", "USAGE_MESSAGE", "format_decimal"]
