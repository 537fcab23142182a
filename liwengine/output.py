"""Output devices that present text to the user."""

from __future__ import annotations

import sys
from abc import ABC, abstractmethod
from typing import TextIO

from .keyboard import Device

__all__ = ["OutputDevice", "TextOutputDevice", "TextConsole"]


class OutputDevice(Device):
    """A device the engine sends output to."""


class TextOutputDevice(OutputDevice, ABC):
    """An output device that shows lines of text."""

    @abstractmethod
    def print(self, text: str) -> None:
        """Write ``text`` as it is."""

    @abstractmethod
    def print_line(self, text: str) -> None:
        """Write ``text`` followed by a line break."""


class TextConsole(TextOutputDevice):
    """Writes text to a stream, standard output by default."""

    def __init__(self, stream: TextIO | None = None) -> None:
        super().__init__()
        self._stream = stream

    @property
    def stream(self) -> TextIO:
        """The stream written to; standard output when none was given."""
        return self._stream if self._stream is not None else sys.stdout

    def print(self, text: str) -> None:
        self.stream.write(text)

    def print_line(self, text: str) -> None:
        stream = self.stream
        stream.write(text + "\n")
        stream.flush()