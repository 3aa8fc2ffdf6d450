"""
==============================================================================
Product Lookup - Application Entry Point
==============================================================================

Command-line entry point: runs one interactive session, then exits.

Usage:
------
    product-lookup
    python -m product_lookup

Exit Codes:
----------
    0    Session completed
    1    Input could not be read, or the weight was malformed
    130  Interrupted by the operator

==============================================================================
"""

from __future__ import annotations

import logging
import sys
from typing import Optional, TextIO

from product_lookup.config import Settings, get_settings
from product_lookup.console import InputReader
from product_lookup.core.exceptions import AppException
from product_lookup.services import ProductSession


logger = logging.getLogger(__name__)


EXIT_SUCCESS = 0
EXIT_INTERRUPTED = 130


# ============================================================================
# LOGGING SETUP
# ============================================================================

def configure_logging(settings: Settings) -> None:
    """Send log records to stderr at the configured level."""
    logging.basicConfig(
        level=settings.effective_log_level,
        format=settings.log_format,
        stream=sys.stderr,
    )


def use_strict_decoding(stream: Optional[TextIO]) -> None:
    """
    Make undecodable bytes on a text stream raise on read.

    Under a C/POSIX locale sys.stdin decodes with "surrogateescape", which
    would let invalid UTF-8 through as lone surrogates.
    """
    reconfigure = getattr(stream, "reconfigure", None)
    if reconfigure is not None:
        reconfigure(errors="strict")


# ============================================================================
# APPLICATION
# ============================================================================

class Application:
    """
    Wires the reader, session and error reporting together.

    Streams are injectable so the whole program can be driven in-process.
    """

    def __init__(
        self,
        stdin: Optional[TextIO] = None,
        stdout: Optional[TextIO] = None,
        stderr: Optional[TextIO] = None,
        settings: Optional[Settings] = None
    ) -> None:
        self._settings = settings or get_settings()
        self._stdout = stdout if stdout is not None else sys.stdout
        self._stderr = stderr if stderr is not None else sys.stderr
        self._reader = InputReader(stdin, self._stdout)

    def run(self) -> int:
        """Run one session and return the process exit status."""
        logger.debug(f"Starting {self._settings.app_name}")
        session = ProductSession(self._reader, output=self._stdout)

        try:
            session.run()
        except AppException as exc:
            logger.debug(f"Fatal error: {exc.to_dict()}")
            print(exc.message, file=self._stderr, flush=True)
            return exc.exit_code
        except KeyboardInterrupt:
            logger.warning("Interrupted by operator")
            return EXIT_INTERRUPTED

        return EXIT_SUCCESS


def main() -> int:
    """Configure logging and run the application."""
    settings = get_settings()
    configure_logging(settings)
    use_strict_decoding(sys.stdin)
    return Application(settings=settings).run()


def run() -> None:
    """Console script entry point."""
    sys.exit(main())


if __name__ == "__main__":
    run()
