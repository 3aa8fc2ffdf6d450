"""
==============================================================================
Input Reader Module
==============================================================================

Prompted, line-oriented reads from the operator's terminal.

Each read writes the prompt on its own line, reads exactly one line and
returns it with surrounding whitespace (including the line terminator)
removed. A failed read is fatal and surfaces as an AppException.

==============================================================================
"""

from __future__ import annotations

import logging
import sys
from typing import Callable, Optional, TextIO

from product_lookup.core.exceptions import AppException, input_read_failed
from product_lookup.utils.numbers import parse_single


# Module logger
logger = logging.getLogger(__name__)


class InputReader:
    """
    Prompting line reader over a pair of text streams.

    Attributes:
        _input: Stream lines are read from (default: sys.stdin)
        _output: Stream prompts are written to (default: sys.stdout)

    Example:
        >>> reader = InputReader()
        >>> name = reader.read_input("Please enter the name of the product:")
    """

    def __init__(
        self,
        input_stream: Optional[TextIO] = None,
        output_stream: Optional[TextIO] = None
    ) -> None:
        self._input = input_stream if input_stream is not None else sys.stdin
        self._output = output_stream if output_stream is not None else sys.stdout

    def read_input(self, prompt: str) -> str:
        """
        Prompt and read one trimmed line.

        Args:
            prompt: Text written on its own line before reading

        Returns:
            The line with leading and trailing whitespace removed

        Raises:
            AppException: INPUT_READ_FAILED if the stream is closed, errors,
                or is at end-of-file
        """
        print(prompt, file=self._output, flush=True)

        try:
            line = self._input.readline()
        except (OSError, ValueError) as exc:
            # ValueError covers closed streams and UnicodeDecodeError
            logger.debug(f"Input stream error: {exc!r}")
            raise input_read_failed() from exc

        if not line:
            logger.debug("Input stream reached end-of-file")
            raise input_read_failed()

        return line.strip()

    def read_number(
        self,
        prompt: str,
        error: Callable[[str], AppException],
        minimum: Optional[float] = None
    ) -> float:
        """
        Prompt and read one line as a finite single-precision number.

        Args:
            prompt: Text written before reading
            error: Factory building the exception raised for bad input
            minimum: Smallest accepted value (optional)

        Returns:
            The parsed value, rounded to float32

        Raises:
            AppException: INPUT_READ_FAILED on a failed read, or whatever
                ``error`` builds from the raw text when it is not a finite
                number or is below ``minimum``
        """
        raw = self.read_input(prompt)
        value = parse_single(raw)
        if value is None or (minimum is not None and value < minimum):
            logger.debug(f"Rejected numeric input: {raw!r}")
            raise error(raw)
        return value
