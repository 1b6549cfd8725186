"""Base classes for result presentation."""

from abc import ABC, abstractmethod

from ..models import ExchangeResult

USAGE_MESSAGE = "Usage: Exchange <currency_pair> <amount>"


class BaseOutputService(ABC):
    """Renders command results for the user."""

    @abstractmethod
    def show_usage(self) -> None:
        """Show how to use the exchange command."""
        pass

    @abstractmethod
    def show_result(self, result: ExchangeResult) -> None:
        """
        Render the outcome of one processed command.

        Args:
            result: Outcome produced by the command processor
        """
        pass
