"""
Terminal output formatting utilities with ANSI color support.

Provides colored output functions optimized for dark terminal backgrounds
and a compact one-line rendering of drop sources for the lookup script.
"""

import sys
from enum import Enum

from osrs_drops.models import DropSource
from osrs_drops.sorter import format_rate


class Color(Enum):
    RESET = "\033[0m"
    BOLD = "\033[1m"
    DIM = "\033[2m"

    BRIGHT_BLACK = "\033[90m"
    BRIGHT_RED = "\033[91m"
    BRIGHT_GREEN = "\033[92m"
    BRIGHT_YELLOW = "\033[93m"
    BRIGHT_BLUE = "\033[94m"
    BRIGHT_MAGENTA = "\033[95m"
    BRIGHT_CYAN = "\033[96m"
    BRIGHT_WHITE = "\033[97m"


# Lower bound of each rate band, most common first
_RATE_COLORS: list[tuple[float, Color]] = [
    (1 / 16, Color.BRIGHT_GREEN),
    (1 / 128, Color.BRIGHT_YELLOW),
    (1 / 1024, Color.BRIGHT_MAGENTA),
    (0.0, Color.BRIGHT_RED),
]


def _supports_color() -> bool:
    return hasattr(sys.stdout, "isatty") and sys.stdout.isatty()


def colorize(text: str, *colors: Color) -> str:
    if not _supports_color():
        return text
    prefix = "".join(c.value for c in colors)
    return f"{prefix}{text}{Color.RESET.value}"


def info(message: str) -> None:
    print(message)


def success(message: str) -> None:
    print(colorize(message, Color.BRIGHT_GREEN))


def warning(message: str) -> None:
    print(colorize(f"⚠ {message}", Color.BRIGHT_YELLOW))


def error(message: str) -> None:
    print(colorize(f"✗ {message}", Color.BRIGHT_RED), file=sys.stderr)


def section_header(title: str) -> None:
    separator = "=" * 60
    print(f"\n{colorize(separator, Color.BRIGHT_BLUE)}")
    print(colorize(title, Color.BOLD, Color.BRIGHT_CYAN))
    print(colorize(separator, Color.BRIGHT_BLUE))


def key_value(key: str, value: str, indent: int = 0) -> None:
    spaces = " " * indent
    colored_key = colorize(f"{key}:", Color.BRIGHT_WHITE)
    print(f"{spaces}{colored_key} {value}")


def bullet(message: str, indent: int = 2, symbol: str = "•") -> None:
    spaces = " " * indent
    print(f"{spaces}{colorize(symbol, Color.BRIGHT_BLUE)} {message}")


def link(url: str, label: str | None = None) -> str:
    display = label or url
    if _supports_color():
        colored_text = colorize(display, Color.BRIGHT_CYAN, Color.BOLD)
        return f"\033]8;;{url}\033\\{colored_text}\033]8;;\033\\"
    return f"{display} ({url})"


def rate_color(rate: float | None) -> Color:
    if rate is None:
        return Color.BRIGHT_BLACK
    for lower_bound, color in _RATE_COLORS:
        if rate >= lower_bound:
            return color
    return Color.BRIGHT_RED


def describe_source(source: DropSource) -> str:
    parts = [colorize(source.source_name, Color.BOLD)]
    parts.append(colorize(f"({source.type})", Color.BRIGHT_BLACK))
    rate = format_rate(source)
    if rate:
        parts.append(colorize(rate, rate_color(source.drop_rate_numeric)))
    if source.quantity:
        parts.append(f"· qty: {source.quantity}")
    if source.requirements:
        parts.append(f"· reqs: {source.requirements}")
    if source.notes:
        parts.append(colorize(f"· {source.notes}", Color.DIM))
    return " ".join(parts)


def drop_source(source: DropSource, indent: int = 2) -> None:
    line = describe_source(source)
    if source.wiki_url:
        line = f"{line} {link(source.wiki_url, 'wiki')}"
    bullet(line, indent=indent)
