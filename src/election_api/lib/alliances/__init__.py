"""Alliance library — fixed party-to-coalition partition.

Public API:
    - alliance_of: Party name to Alliance
    - is_member: Membership test used by the alliance facet
    - ALLIANCE_MEMBERS: The partition table
"""

from election_api.lib.alliances.partition import ALLIANCE_MEMBERS, alliance_of, is_member

__all__ = [
    "ALLIANCE_MEMBERS",
    "alliance_of",
    "is_member",
]
