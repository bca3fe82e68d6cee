# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Console reporting for the ``arasource`` command and loader debug logging."""

from __future__ import annotations

import logging
import sys
from dataclasses import dataclass
from functools import lru_cache
from typing import Final

from rich.console import Console, RenderableType
from rich.rule import Rule
from rich.text import Text

PACKAGE_LOGGER_NAME: Final[str] = "arasource"

_INFO_GLYPH: Final[str] = "ℹ️ "
_OK_GLYPH: Final[str] = "✅ "
_WARN_GLYPH: Final[str] = "⚠️ "
_FAIL_GLYPH: Final[str] = "❌ "


@lru_cache(maxsize=2)
def get_console(*, color: bool) -> Console:
    """Return the shared stdout console for the requested colour mode.

    Consoles resolve ``sys.stdout`` on every write, so a cached instance keeps
    working when the stream is swapped (for example under a test runner).

    Args:
        color: ``True`` to allow ANSI styling when stdout is a terminal.

    Returns:
        Console: Console with highlighting disabled and soft wrapping on.
    """

    return Console(no_color=not color, highlight=False, soft_wrap=True, emoji=False)


@dataclass(frozen=True, slots=True)
class ConsoleReporter:
    """Render status lines and tables for one CLI invocation.

    Attributes:
        console: Console receiving every message.
        use_color: Whether messages are styled.
        use_emoji: Whether messages carry a status glyph prefix.
    """

    console: Console
    use_color: bool
    use_emoji: bool

    def info(self, message: str) -> None:
        """Report neutral progress, such as what is about to be loaded.

        Args:
            message: Text shown to the user.
        """

        self._line(_INFO_GLYPH, message, style="cyan")

    def ok(self, message: str) -> None:
        """Report a completed load.

        Args:
            message: Text shown to the user.
        """

        self._line(_OK_GLYPH, message, style="green")

    def warn(self, message: str) -> None:
        """Report a load that succeeded but found nothing useful.

        Args:
            message: Text shown to the user.
        """

        self._line(_WARN_GLYPH, message, style="yellow")

    def fail(self, message: str) -> None:
        """Report a :class:`~arasource.errors.SourceError` before exiting.

        Args:
            message: Error text, usually ``str(exc)``.
        """

        self._line(_FAIL_GLYPH, message, style="red")

    def section(self, title: str) -> None:
        """Print a heading above a block of output.

        Args:
            title: Heading text.
        """

        if self.use_color:
            self.console.print(Rule(title))
        else:
            self.console.print(f"--- {title} ---")

    def render(self, renderable: RenderableType) -> None:
        """Print a rich renderable such as a :class:`rich.table.Table`.

        Args:
            renderable: Object understood by :meth:`Console.print`.
        """

        self.console.print(renderable)

    def _line(self, glyph: str, message: str, *, style: str) -> None:
        text = Text(f"{glyph if self.use_emoji else ''}{message}")
        if self.use_color:
            text.stylize(style)
        self.console.print(text)


def build_reporter(*, color: bool, emoji: bool) -> ConsoleReporter:
    """Return a :class:`ConsoleReporter` honouring the CLI's output flags.

    Args:
        color: Value of ``--color/--no-color``.
        emoji: Value of ``--emoji/--no-emoji``.

    Returns:
        ConsoleReporter: Reporter writing to the shared stdout console.
    """

    return ConsoleReporter(console=get_console(color=color), use_color=color, use_emoji=emoji)


def enable_debug_logging() -> logging.Logger:
    """Stream debug records from the package logger to stderr.

    Repeated calls reuse the handler installed by the first call.

    Returns:
        logging.Logger: The configured package logger.
    """

    logger = logging.getLogger(PACKAGE_LOGGER_NAME)
    if getattr(logger, "_arasource_verbose_configured", False):
        return logger
    handler = logging.StreamHandler(stream=sys.stderr)
    handler.setFormatter(logging.Formatter("%(name)s: %(message)s"))
    logger.addHandler(handler)
    logger.setLevel(logging.DEBUG)
    logger.propagate = False
    setattr(logger, "_arasource_verbose_configured", True)
    return logger


__all__ = ["PACKAGE_LOGGER_NAME", "ConsoleReporter", "build_reporter", "enable_debug_logging", "get_console"]
