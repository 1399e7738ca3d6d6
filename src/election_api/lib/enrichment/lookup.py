"""Generic label lookup that falls back to the original value."""

from collections.abc import Callable, Mapping
from typing import TypeVar

T = TypeVar("T")


def lookup_with_fallback(
    table: Mapping[str, str],
    value: T,
    key: Callable[[str], str] | None = None,
) -> str | T:
    """Return the label for ``value``, or ``value`` itself when unmapped.

    Args:
        table: Label table keyed by dataset values.
        value: The base value.  ``None`` and non-strings always fall through.
        key: Optional transform applied to ``value`` before the lookup
            (e.g. ``str.upper`` for tables keyed by upper-cased names).
    """
    if not isinstance(value, str):
        return value
    return table.get(key(value) if key else value, value)
