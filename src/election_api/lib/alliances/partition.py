"""Party -> alliance partition used by the alliance facet and seat reports.

One table serves both consumers.  ``Others`` is the complement of the two
named coalitions.  Party names are compared after trimming whitespace.
"""

from collections.abc import Mapping
from types import MappingProxyType

from election_api.models.filter_state import Alliance

ALLIANCE_MEMBERS: Mapping[Alliance, frozenset[str]] = MappingProxyType(
    {
        Alliance.DMK_ALLIANCE: frozenset(
            {"DMK", "INC", "VCK", "CPI", "CPM", "CPI(M)", "IUML", "KMDK", "MDMK", "MMK"}
        ),
        Alliance.ADMK_ALLIANCE: frozenset(
            {"ADMK", "AIADMK", "BJP", "PMK", "TMC", "TMC(M)", "AMMK"}
        ),
    }
)

_PARTY_TO_ALLIANCE: Mapping[str, Alliance] = MappingProxyType(
    {party: alliance for alliance, members in ALLIANCE_MEMBERS.items() for party in members}
)


def alliance_of(party: str | None) -> Alliance:
    """Return the alliance a party belongs to (``Others`` when unaffiliated)."""
    if not party:
        return Alliance.OTHERS
    return _PARTY_TO_ALLIANCE.get(party.strip(), Alliance.OTHERS)


def is_member(party: str | None, alliance: Alliance) -> bool:
    return alliance_of(party) == alliance
