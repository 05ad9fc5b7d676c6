"""CLI console helpers with optional Rich support.

Rich is imported lazily so that usage and help output keep working
even when it is not installed.
"""

from __future__ import annotations

import re
import sys
from typing import Any

from slim_predict.exceptions import EnvironmentError

_STYLE_TAG = re.compile(r"\[/?(?:bold|dim|red|green|yellow|cyan| )+\]")


def _load_rich_console_class() -> type[Any]:
    """Return ``rich.console.Console`` class or raise ``EnvironmentError``."""
    try:
        from rich.console import Console
    except ModuleNotFoundError as exc:
        raise EnvironmentError(
            "rich is not installed. Install with: pip install rich",
        ) from exc
    return Console


def get_rich_console() -> Any:
    """Create a Rich console instance targeting stderr."""
    console_class = _load_rich_console_class()
    return console_class(stderr=True, highlight=False)


def rich_available() -> bool:
    """Return ``True`` when Rich can be imported."""
    try:
        _load_rich_console_class()
    except EnvironmentError:
        return False
    return True


class _Literal(str):
    """User text that plain output must print without stripping tags."""


def escape(text: str) -> str:
    """Escape *text* so it prints literally, with or without Rich.

    Pass the result as its own argument to :meth:`_ConsoleProxy.print`;
    formatting it into a larger string loses the plain-mode marker.
    """
    try:
        from rich.markup import escape as rich_escape
    except ModuleNotFoundError:
        return _Literal(text)
    return rich_escape(text)


class _ConsoleProxy:
    """Minimal ``print``-compatible proxy with a plain-stderr fallback."""

    def print(self, *objects: object) -> None:
        """Render with Rich when available, else plain stderr print."""
        try:
            rich_console = get_rich_console()
        except EnvironmentError:
            plain = [
                obj if isinstance(obj, _Literal) or not isinstance(obj, str)
                else _STYLE_TAG.sub("", obj)
                for obj in objects
            ]
            print(*plain, file=sys.stderr)
            return
        rich_console.print(*objects)


console = _ConsoleProxy()
