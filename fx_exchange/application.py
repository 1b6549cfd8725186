"""
Interactive read-process-print loop.

Reads one line at a time, forwards non-blank lines to the command processor
and hands each result to the output service until input is exhausted.
"""

from collections.abc import Callable
from typing import Optional

import structlog

from .config.defaults import ConsoleParams
from .delivery.base import BaseOutputService
from .errors import InvalidArgumentError
from .processor import ExchangeCommandProcessor

logger = structlog.get_logger(__name__)


class ExchangeApplication:
    """Driver loop around the command processor."""

    def __init__(
        self,
        processor: ExchangeCommandProcessor,
        output: BaseOutputService,
        read_line: Callable[[], Optional[str]],
        write: Callable[[str], None],
        console: Optional[ConsoleParams] = None,
    ) -> None:
        if processor is None:
            raise InvalidArgumentError("Processor is required", argument="processor")
        if output is None:
            raise InvalidArgumentError("Output service is required", argument="output")
        if read_line is None:
            raise InvalidArgumentError("read_line is required", argument="read_line")
        if write is None:
            raise InvalidArgumentError("write is required", argument="write")

        self.processor = processor
        self.output = output
        self._read_line = read_line
        self._write = write
        self.console = console or ConsoleParams()

    def run(self) -> int:
        """
        Run until end of input.

        ``read_line`` returns None at end of input. An interrupt also ends
        the loop cleanly.

        Returns:
            Process exit code
        """
        logger.info("Exchange application started")
        self.output.show_usage()

        processed = 0
        try:
            while True:
                self._write(self.console.prompt)
                line = self._read_line()

                if line is None:
                    break

                if not line.strip():
                    continue

                result = self.processor.process(line)
                self.output.show_result(result)
                processed += 1
        except KeyboardInterrupt:
            self._write("\n")
            logger.info("Interrupted by user")

        logger.info("Exchange application stopped", commands_processed=processed)
        return 0
