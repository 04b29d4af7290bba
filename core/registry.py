# =============================================================================
# core/registry.py  —  Catalogue of every capability
# =============================================================================
#
# The order here is the order tools are advertised to the agent.  The MCP
# server registers one tool per entry; tests check that the two agree.
# =============================================================================

from core.affairs import GET_AFFAIR, LIST_AFFAIRS
from core.capability import Capability
from core.elections import GET_ELECTION, LIST_ELECTIONS
from core.legislation import GET_LEGISLATION, LIST_LEGISLATION
from core.politicians import GET_POLITICIAN, SEARCH_POLITICIANS
from core.votes import GET_POLITICIAN_VOTES, GET_VOTE_STATS, LIST_VOTES

CAPABILITIES: tuple[Capability, ...] = (
    SEARCH_POLITICIANS,
    GET_POLITICIAN,
    LIST_AFFAIRS,
    GET_AFFAIR,
    LIST_VOTES,
    GET_POLITICIAN_VOTES,
    GET_VOTE_STATS,
    LIST_LEGISLATION,
    GET_LEGISLATION,
    LIST_ELECTIONS,
    GET_ELECTION,
)

_BY_NAME: dict[str, Capability] = {cap.name: cap for cap in CAPABILITIES}


def get_capability(name: str) -> Capability:
    """Look up a capability by tool name (KeyError if unknown)."""
    return _BY_NAME[name]


def capability_names() -> list[str]:
    return [cap.name for cap in CAPABILITIES]
