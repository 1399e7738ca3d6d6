"""Name normalizer — boundary feature name + identifier to a canonical join key.

Normalization is total and deterministic: any input yields a string, and
names with no alias entry come back cleaned but otherwise unchanged, which
the index then reports as "no data".
"""

import re
from collections.abc import Mapping

from election_api.lib.reconciler.aliases import NAME_ALIASES, SPLIT_CONSTITUENCIES

# "(sc)" / "(st)" anywhere, plus truncated annotations left at the end of
# fixed-width boundary names: "(sc", "(st", "(s", "(".
_RESERVATION_RE = re.compile(r"\s*\((?:sc|st)\)|\s*\((?:sc|st|s)?$")


def strip_reservation(name: str) -> str:
    """Remove reservation-category annotations from a lower-cased name."""
    return _RESERVATION_RE.sub("", name)


def split_constituency_key(
    name: str,
    identifier: int | None,
    splits: Mapping[str, Mapping[int, str]] = SPLIT_CONSTITUENCIES,
) -> str | None:
    """Return the canonical key for a split constituency, or None when ``name`` is not one."""
    if identifier is None:
        return None
    folded = name.casefold()
    for base, halves in splits.items():
        if base in folded and identifier in halves:
            return halves[identifier]
    return None


def normalize_feature_name(
    raw_name: str | None,
    identifier: int | None = None,
    aliases: Mapping[str, str] = NAME_ALIASES,
) -> str:
    """Map a boundary feature's name and identifier to a canonical key.

    Args:
        raw_name: Free-text feature name from the boundary dataset.
        identifier: The feature's numeric identifier, used to tell split
            constituencies apart.
        aliases: Spelling corrections, cleaned boundary name -> result name.

    Returns:
        The canonical key ("" for a missing name).
    """
    if not raw_name:
        return ""

    split_key = split_constituency_key(raw_name, identifier)
    if split_key is not None:
        return split_key

    cleaned = strip_reservation(raw_name.casefold()).strip()
    return aliases.get(cleaned, cleaned)


def normalize_result_name(constituency_name: str) -> str:
    """Key for the results side: strip "(SC)"/"(ST)", trim, case-fold.

    Result names only differ from keys by formatting, so no aliasing applies.
    """
    return strip_reservation(constituency_name.casefold()).strip()
