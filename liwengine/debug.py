"""Debug printing through a text output device, and tasks that do it."""

from __future__ import annotations

from dataclasses import dataclass

from .output import TextOutputDevice

__all__ = ["Debug", "DebugPrintTask", "ErrorPrintTask"]

_DEBUG_PREFIX = "[DEBUG INFO]"
_ERROR_PREFIX = "[ERROR INFO]"


class Debug:
    """Prints plain, debug and error lines to a text output device."""

    def __init__(self, text_output: TextOutputDevice) -> None:
        self.text_output = text_output

    def print(self, text: str) -> None:
        """Write ``text`` as it is."""
        self.text_output.print(text)

    def print_line(self, text: str) -> None:
        """Write ``text`` as one line."""
        self.text_output.print_line(text)

    def debug_print(self, text: str) -> None:
        """Write ``text`` as a debug line."""
        self.print_line(_DEBUG_PREFIX + text)

    def error_print(self, text: str) -> None:
        """Write ``text`` as an error line."""
        self.print_line(_ERROR_PREFIX + text)


@dataclass
class DebugPrintTask:
    """A unit of work that prints one debug line."""

    debug: Debug
    line: str

    def execute(self) -> None:
        self.debug.debug_print(self.line)


@dataclass
class ErrorPrintTask:
    """A unit of work that prints one error line."""

    debug: Debug
    line: str

    def execute(self) -> None:
        self.debug.error_print(self.line)