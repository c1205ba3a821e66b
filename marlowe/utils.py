"""Output helpers for Marlowe."""

import re
import sys
from typing import Callable, List, Sequence, Tuple
from urllib.parse import urlsplit, urlunsplit

# ANSI color codes
RESET = "\033[0m"
BOLD = "\033[1m"
RED = "\033[31m"
YELLOW = "\033[33m"
GREEN = "\033[32m"
BLUE = "\033[34m"
CYAN = "\033[36m"


def print_banner() -> None:
    """Print the Marlowe banner."""
    print("Marlowe - deployment network configuration")
    print("⚠️  Output may reference signing keys. Secrets are masked unless explicitly revealed.")


def section_header(title: str) -> None:
    """Print a section header."""
    print()
    print(f"--- {title} ---")


def error(message: str) -> None:
    """Print an error message in red."""
    print(f"{RED}[error]{RESET} {message}", file=sys.stderr)


def warn(message: str) -> None:
    """Print a warning message in yellow."""
    print(f"{YELLOW}[warn]{RESET} {message}")


def info(message: str) -> None:
    """Print an info message in blue."""
    print(f"{BLUE}[info]{RESET} {message}")


def success(message: str) -> None:
    """Print a success message in green."""
    print(f"{GREEN}[success]{RESET} {message}")


def bold(message: str) -> str:
    """Return a bold formatted message."""
    return f"{BOLD}{message}{RESET}"


def bold_cyan(message: str) -> str:
    """Return a bold cyan formatted message."""
    return f"{BOLD}{CYAN}{message}{RESET}"


def mask_secret(secret: str | None, visible: int = 4) -> str:
    """Hide all but the last few characters of a secret.

    Short secrets are masked completely so nothing of them leaks.
    """
    if not secret:
        return "<unset>"
    if len(secret) <= visible * 2:
        return "*" * len(secret)
    return "*" * (len(secret) - visible) + secret[-visible:]


_TOKEN_RE = re.compile(r"[A-Za-z0-9_-]{16,}")


def mask_url(url: str) -> str:
    """Mask API tokens embedded in an endpoint URL path, e.g. /v3/<project-id>."""
    if not url:
        return url
    parts = urlsplit(url)
    segments = [
        mask_secret(segment) if _TOKEN_RE.fullmatch(segment) else segment
        for segment in parts.path.split("/")
    ]
    return urlunsplit(parts._replace(path="/".join(segments)))


def print_rows(
    title: str,
    rows: Sequence[Tuple[str, ...]],
    key_formatter: Callable[[str], str] | None = None,
) -> None:
    """Print rows as an aligned table.

    Args:
        title: Table title
        rows: Tuples of cells; the first cell is the row key
        key_formatter: Optional function to format the key cell (default: bold)
    """
    print()
    print(f"=== {title} ===")

    if key_formatter is None:
        key_formatter = bold

    if not rows:
        print("(none)")
        print()
        return

    widths: List[int] = [max(len(row[i]) for row in rows) for i in range(len(rows[0]))]
    for row in rows:
        key = key_formatter(row[0].ljust(widths[0]))
        rest = "  ".join(cell.ljust(width) for cell, width in zip(row[1:], widths[1:]))
        print(f"{key}  {rest}".rstrip())

    print()
