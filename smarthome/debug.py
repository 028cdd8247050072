"""
Console output utilities for smarthome.

Provides the default output sink used by devices, plus a small rich-based
printer for the demo program.

Usage:
    from smarthome.debug import demo

    demo.section("Factory")
    demo.line("LivingRoom Light ON")
"""

from typing import Callable, Optional

from rich.console import Console
from rich.text import Text

from .config import settings

# Global console instance
console = Console(no_color=not settings.color, highlight=False)

Sink = Callable[[str], None]


def emit(message: str) -> None:
    """Default device sink: write one line to the console verbatim."""
    console.print(message, markup=False, highlight=False, soft_wrap=True, crop=False)


def resolve_sink(sink: Optional[Sink]) -> Sink:
    """Return ``sink`` or the console sink when none was given."""
    return sink if sink is not None else emit


class DemoConsole:
    """Rich console printer for the pattern walkthrough."""

    def __init__(self, enabled: bool = True, target: Optional[Console] = None):
        self.enabled = enabled
        self._console = target or console

    def section(self, title: str) -> None:
        """Print a section header."""
        if not self.enabled:
            return

        text = Text()
        text.append("== ", style="dim")
        text.append(title, style="bold cyan")
        text.append(" ==", style="dim")
        self._console.print(text)

    def line(self, message: str) -> None:
        """Print a single output line without markup interpretation."""
        if not self.enabled:
            return
        self._console.print(Text(message), soft_wrap=True, crop=False)

    def error(self, message: str, exc: Optional[BaseException] = None) -> None:
        """Print an error line."""
        text = Text()
        text.append("✗ ", style="red")
        text.append(message, style="bold red")
        if exc is not None:
            text.append(f" ({type(exc).__name__}: {exc})", style="dim")
        self._console.print(text)


# Global demo printer
demo = DemoConsole()
