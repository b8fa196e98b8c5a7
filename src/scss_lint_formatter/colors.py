"""Terminal colors for report fields."""
import os
from typing import Any, Literal, TextIO

import click

ColorMode = Literal["auto", "always", "never"]


class Colorizer:
    """Wraps report fields in ANSI styling when enabled.

    Each method takes any value and returns its ``str()`` form, styled only
    when ``enabled`` is true.
    """

    def __init__(self, enabled: bool = True) -> None:
        self.enabled = enabled

    def _paint(self, value: Any, fg: str) -> str:
        text = str(value)
        if not self.enabled:
            return text
        return click.style(text, fg=fg)

    def cyan(self, value: Any) -> str:
        return self._paint(value, "cyan")

    def magenta(self, value: Any) -> str:
        return self._paint(value, "magenta")

    def red(self, value: Any) -> str:
        return self._paint(value, "red")

    def yellow(self, value: Any) -> str:
        return self._paint(value, "yellow")

    def green(self, value: Any) -> str:
        return self._paint(value, "green")


def resolve_color(mode: ColorMode, stream: TextIO | None = None) -> bool:
    """Decide whether to emit colors.

    Args:
        mode: "always", "never" or "auto"
        stream: Stream the report is written to, checked for a TTY in auto mode

    Returns:
        True if colors should be emitted
    """
    if mode == "always":
        return True
    if mode == "never":
        return False

    if os.environ.get("NO_COLOR"):
        return False
    force = os.environ.get("FORCE_COLOR")
    if force is not None and force != "0":
        return True

    if stream is None:
        return False
    isatty = getattr(stream, "isatty", None)
    return bool(isatty and isatty())
