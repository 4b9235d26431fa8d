"""Display surfaces - Imperative Shell.

A display surface receives the three strings produced by the formatter
and renders them. Nothing else crosses this boundary.
"""

import logging
import sys
from typing import Protocol, TextIO

from soonami.core.formatter import DisplayText


logger = logging.getLogger(__name__)


class Display(Protocol):
    """Anything that can show an earthquake's display strings."""

    def show(self, text: DisplayText) -> None:
        ...


class ConsoleDisplay:
    """Writes the display strings to a text stream, one per line."""

    def __init__(self, stream: TextIO | None = None) -> None:
        self.stream = stream or sys.stdout

    def show(self, text: DisplayText) -> None:
        self.stream.write(f"{text.title}\n{text.date}\n{text.alert}\n")
        self.stream.flush()


class MemoryDisplay:
    """Keeps the last shown strings; used by the HTTP entry point."""

    def __init__(self) -> None:
        self.text: DisplayText | None = None

    def show(self, text: DisplayText) -> None:
        logger.debug("Display updated: %s", text.title)
        self.text = text
