"""Leveled output for stripping runs.

The stripper never prints directly. It reports through a Reporter with four
levels (success, verbose, warning, error); ConsoleReporter routes them to
the shared Rich consoles.
"""

import logging
from abc import ABC, abstractmethod

from rich.markup import escape

from zonestrip.utils.formatting import print_error, print_success, print_verbose, print_warning

logger = logging.getLogger(__name__)


class Reporter(ABC):
    """Receives user-facing messages from the stripper.

    Attributes:
        suppress_success: If True, success messages are dropped. Warnings
            and errors are never suppressed.
    """

    def __init__(self, suppress_success: bool = False) -> None:
        self.suppress_success = suppress_success

    def success(self, message: str) -> None:
        """Report a successful change, unless success output is suppressed."""
        if not self.suppress_success:
            self._emit_success(message)

    @abstractmethod
    def _emit_success(self, message: str) -> None: ...

    @abstractmethod
    def verbose(self, message: str) -> None:
        """Report a diagnostic step."""

    @abstractmethod
    def warning(self, message: str) -> None:
        """Report a non-fatal problem."""

    @abstractmethod
    def error(self, message: str) -> None:
        """Report a failure."""


class ConsoleReporter(Reporter):
    """Reporter that prints to the themed Rich consoles.

    Verbose messages are printed when ``show_verbose`` is set and sent to
    the logger at DEBUG level otherwise.
    """

    def __init__(self, suppress_success: bool = False, show_verbose: bool = False) -> None:
        super().__init__(suppress_success=suppress_success)
        self.show_verbose = show_verbose

    def _emit_success(self, message: str) -> None:
        print_success(escape(message))

    def verbose(self, message: str) -> None:
        if self.show_verbose:
            print_verbose(escape(message))
        else:
            logger.debug(message)

    def warning(self, message: str) -> None:
        print_warning(escape(message))

    def error(self, message: str) -> None:
        print_error(escape(message))
