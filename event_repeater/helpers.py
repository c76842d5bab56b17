# helpers.py
"""Helper functions for command parsing and host list manipulation."""

import re
from typing import Any, Iterable, List, MutableSequence, Optional


# ---------------------------------------------------------------------------
# Command Parsing
# ---------------------------------------------------------------------------

def parse_args(cmd: str) -> List[str]:
    """Parse space-separated arguments from command string."""
    return [p for p in (cmd or "").split() if p]


def split_command_line(line: str) -> tuple:
    """Return (name, args) for a console line. Empty line gives ('', [])."""
    parts = parse_args(line)
    if not parts:
        return "", []
    return parts[0], parts[1:]


def first_token(instruction: str) -> str:
    """First whitespace-delimited token of an event script instruction."""
    parts = (instruction or "").split(None, 1)
    return parts[0] if parts else ""


_INT_RE = re.compile(r"^\s*[+-]?[0-9]+\s*$")


def parse_int(raw: str) -> int:
    """Strict decimal parse: optional sign and ASCII digits, surrounding spaces allowed.

    Rejects what int() would otherwise take, like '1_000' or non-ASCII digits.
    """
    if not isinstance(raw, str) or not _INT_RE.match(raw):
        raise ValueError(f"invalid integer: {raw!r}")
    return int(raw)


def try_parse_int(raw: str) -> Optional[int]:
    """parse_int(raw) or None."""
    try:
        return parse_int(raw)
    except ValueError:
        return None


# ---------------------------------------------------------------------------
# Host List Manipulation
# ---------------------------------------------------------------------------

def remove_value(items: MutableSequence[Any], value: Any) -> int:
    """Delete every occurrence of value in place, walking from the end.

    Returns how many entries were removed; 0 when the value was absent.
    """
    removed = 0
    for i in range(len(items) - 1, -1, -1):
        if items[i] == value:
            del items[i]
            removed += 1
    return removed


def join_ids(items: Iterable[Any]) -> str:
    return ", ".join(str(x) for x in items)
