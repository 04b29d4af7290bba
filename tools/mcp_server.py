# =============================================================================
# tools/mcp_server.py  —  FastMCP Tool Server (ALL tools in one place)
# =============================================================================
#
# WHAT THIS FILE DOES:
#   Exposes every capability from core/registry.py as an MCP tool.  Each tool
#   is a thin wrapper: it declares the typed signature the agent sees, then
#   hands the arguments to Capability.invoke(), which validates, calls the
#   API once and renders the Markdown report.
#
# HOW IT WORKS (the flow):
#   1. The agent calls a tool by name (e.g., "get_election")
#   2. FastMCP checks the arguments against the signature below
#   3. The wrapper calls the capability with the shared TransparenceClient
#   4. The capability validates again (core/schemas.py), fetches, renders
#   5. The agent receives ONE text block: the report
#
# TOOL NAMING CONVENTIONS:
#   - list_* / search_*  → paginated list endpoints
#   - get_*              → one record, or aggregated statistics
#   Every tool is read-only and idempotent.
#
# ERRORS:
#   Nothing is caught here.  ArgumentError, RemoteCallError and httpx
#   transport errors propagate and FastMCP returns them to the agent as an
#   MCP tool error.  Errors are not logged.
#
# RUNNING THIS SERVER:
#   a) Standalone:       python -m tools.mcp_server   (or: transparence-mcp)
#   b) From the agent:   agent/politics_agent.py spawns it over stdio
# =============================================================================

import logging
import sys
from typing import Annotated, Optional

from dotenv import load_dotenv
from fastmcp import FastMCP
from pydantic import Field

# --- Import core logic ---
# The tools layer depends on core/ and nothing else.
from core.affairs import GET_AFFAIR, LIST_AFFAIRS
from core.api import TransparenceClient
from core.capability import Capability
from core.config import ApiConfig
from core.elections import GET_ELECTION, LIST_ELECTIONS
from core.legislation import GET_LEGISLATION, LIST_LEGISLATION
from core.politicians import GET_POLITICIAN, SEARCH_POLITICIANS
from core.schemas import (
    DEFAULT_LIMIT,
    DEFAULT_PAGE,
    AffairCategory,
    AffairStatus,
    Chamber,
    ElectionStatus,
    ElectionType,
    LegislationCategory,
    LegislationStatus,
    Limit,
    MandateType,
    Page,
    VoteResult,
)
from core.votes import GET_POLITICIAN_VOTES, GET_VOTE_STATS, LIST_VOTES

load_dotenv()
config = ApiConfig.from_env()

# =============================================================================
# Logging Setup
# =============================================================================
# We log to STDERR because stdout carries the MCP JSON-RPC stream.  Anything
# printed to stdout would corrupt the protocol.
#
# ANSI COLOR CODES:
#     - CYAN for incoming requests (tool name + parameters)
#     - GREEN for responses (report size and first line)
#     - YELLOW for intermediate status messages
# =============================================================================

_CYAN = "\033[36m"     # Requests (tool calls with params)
_GREEN = "\033[32m"    # Responses
_YELLOW = "\033[33m"   # Status/progress messages
_RESET = "\033[0m"     # Reset to default terminal color

logging.basicConfig(
    level=config.log_level,
    format="%(asctime)s [MCP] %(message)s",
    datefmt="%H:%M:%S",
    stream=sys.stderr,
)

READY_MESSAGE = "Transparence Politique MCP server running on stdio"


def _log_request(tool_name: str, **params) -> None:
    """Log an incoming tool call with its parameters in CYAN."""
    param_str = ", ".join(f"{k}={v!r}" for k, v in params.items() if v is not None)
    logging.info(f"{_CYAN}{tool_name} called with: {param_str}{_RESET}")


def _log_status(message: str) -> None:
    """Log an intermediate status message in YELLOW."""
    logging.info(f"{_YELLOW}  → {message}{_RESET}")


def _log_response(tool_name: str, report: str) -> str:
    """Log the size and first line of the report in GREEN, then return it."""
    first_line = report.split("\n", 1)[0]
    logging.info(
        f"{_GREEN}  ← {tool_name} response: {len(report)} chars, "
        f"{report.count(chr(10)) + 1} lines | {first_line}{_RESET}"
    )
    return report


# =============================================================================
# Create the FastMCP server instance and the API client
# =============================================================================
# "transparence-politique" is the server identity the agent sees.  The client
# is built ONCE from the immutable config; every tool call shares it.
mcp = FastMCP(
    "transparence-politique",
    instructions=(
        "Données publiques sur la vie politique française : responsables "
        "politiques, affaires judiciaires, scrutins parlementaires, dossiers "
        "législatifs et élections. Tous les outils sont en lecture seule."
    ),
)

api = TransparenceClient(config)


async def _run(capability: Capability, **arguments) -> str:
    """Shared body of every tool: log, invoke, log."""
    _log_request(capability.name, **arguments)
    _log_status(f"GET {api.config.base_url}")
    report = await capability.invoke(api, **arguments)
    return _log_response(capability.name, report)


# -----------------------------------------------------------------------------
# Shared argument descriptions
# -----------------------------------------------------------------------------
SearchArg = Annotated[Optional[str], Field(description="Recherche plein texte")]


# =============================================================================
# POLITICIANS
# =============================================================================
@mcp.tool(name=SEARCH_POLITICIANS.name, description=SEARCH_POLITICIANS.description)
async def search_politicians(
    search: SearchArg = None,
    party: Annotated[
        Optional[str], Field(description="Sigle du parti (ex: 'LFI', 'RN', 'LR')")
    ] = None,
    mandate_type: Annotated[
        Optional[MandateType], Field(description="Type de mandat en cours")
    ] = None,
    has_affairs: Annotated[
        Optional[bool], Field(description="Uniquement les personnalités citées dans une affaire")
    ] = None,
    page: Page = DEFAULT_PAGE,
    limit: Limit = DEFAULT_LIMIT,
) -> str:
    return await _run(
        SEARCH_POLITICIANS,
        search=search, party=party, mandate_type=mandate_type,
        has_affairs=has_affairs, page=page, limit=limit,
    )


@mcp.tool(name=GET_POLITICIAN.name, description=GET_POLITICIAN.description)
async def get_politician(
    slug: Annotated[str, Field(description="Identifiant du politicien (ex: 'jean-luc-melenchon')")],
) -> str:
    return await _run(GET_POLITICIAN, slug=slug)


# =============================================================================
# AFFAIRS
# =============================================================================
@mcp.tool(name=LIST_AFFAIRS.name, description=LIST_AFFAIRS.description)
async def list_affairs(
    search: SearchArg = None,
    status: Annotated[
        Optional[AffairStatus], Field(description="Filtrer par statut de la procédure")
    ] = None,
    category: Annotated[
        Optional[AffairCategory], Field(description="Filtrer par catégorie d'infraction")
    ] = None,
    politician: Annotated[
        Optional[str], Field(description="Slug du politicien concerné")
    ] = None,
    page: Page = DEFAULT_PAGE,
    limit: Limit = DEFAULT_LIMIT,
) -> str:
    return await _run(
        LIST_AFFAIRS,
        search=search, status=status, category=category,
        politician=politician, page=page, limit=limit,
    )


@mcp.tool(name=GET_AFFAIR.name, description=GET_AFFAIR.description)
async def get_affair(
    slug: Annotated[str, Field(description="Identifiant de l'affaire")],
) -> str:
    return await _run(GET_AFFAIR, slug=slug)


# =============================================================================
# VOTES
# =============================================================================
@mcp.tool(name=LIST_VOTES.name, description=LIST_VOTES.description)
async def list_votes(
    search: Annotated[
        Optional[str], Field(description="Recherche dans le titre du scrutin")
    ] = None,
    result: Annotated[
        Optional[VoteResult], Field(description="Filtrer par résultat : ADOPTED ou REJECTED")
    ] = None,
    legislature: Annotated[
        Optional[int], Field(description="Filtrer par législature (ex: 16, 17)")
    ] = None,
    chamber: Annotated[
        Optional[Chamber], Field(description="Filtrer par chambre : AN (Assemblée) ou SENAT")
    ] = None,
    page: Page = DEFAULT_PAGE,
    limit: Limit = DEFAULT_LIMIT,
) -> str:
    return await _run(
        LIST_VOTES,
        search=search, result=result, legislature=legislature,
        chamber=chamber, page=page, limit=limit,
    )


@mcp.tool(name=GET_POLITICIAN_VOTES.name, description=GET_POLITICIAN_VOTES.description)
async def get_politician_votes(
    slug: Annotated[str, Field(description="Identifiant du politicien (ex: 'jean-luc-melenchon')")],
    page: Page = DEFAULT_PAGE,
    limit: Limit = DEFAULT_LIMIT,
) -> str:
    return await _run(GET_POLITICIAN_VOTES, slug=slug, page=page, limit=limit)


@mcp.tool(name=GET_VOTE_STATS.name, description=GET_VOTE_STATS.description)
async def get_vote_stats(
    chamber: Annotated[
        Optional[Chamber], Field(description="Filtrer par chambre : AN (Assemblée) ou SENAT")
    ] = None,
) -> str:
    return await _run(GET_VOTE_STATS, chamber=chamber)


# =============================================================================
# LEGISLATION
# =============================================================================
@mcp.tool(name=LIST_LEGISLATION.name, description=LIST_LEGISLATION.description)
async def list_legislation(
    search: SearchArg = None,
    status: Annotated[
        Optional[LegislationStatus], Field(description="Filtrer par étape de la procédure")
    ] = None,
    category: Annotated[
        Optional[LegislationCategory], Field(description="Filtrer par thème")
    ] = None,
    page: Page = DEFAULT_PAGE,
    limit: Limit = DEFAULT_LIMIT,
) -> str:
    return await _run(
        LIST_LEGISLATION,
        search=search, status=status, category=category, page=page, limit=limit,
    )


@mcp.tool(name=GET_LEGISLATION.name, description=GET_LEGISLATION.description)
async def get_legislation(
    slug: Annotated[str, Field(description="Identifiant du dossier législatif")],
) -> str:
    return await _run(GET_LEGISLATION, slug=slug)


# =============================================================================
# ELECTIONS
# =============================================================================
@mcp.tool(name=LIST_ELECTIONS.name, description=LIST_ELECTIONS.description)
async def list_elections(
    type: Annotated[
        Optional[ElectionType], Field(description="Filtrer par type d'élection")
    ] = None,
    status: Annotated[
        Optional[ElectionStatus], Field(description="Filtrer par statut")
    ] = None,
    year: Annotated[
        Optional[int], Field(description="Filtrer par année (ex: 2027)")
    ] = None,
    page: Page = DEFAULT_PAGE,
    limit: Limit = DEFAULT_LIMIT,
) -> str:
    return await _run(
        LIST_ELECTIONS,
        type=type, status=status, year=year, page=page, limit=limit,
    )


@mcp.tool(name=GET_ELECTION.name, description=GET_ELECTION.description)
async def get_election(
    slug: Annotated[
        str,
        Field(description="Identifiant de l'élection (ex: 'municipales-2026', 'presidentielle-2027')"),
    ],
) -> str:
    return await _run(GET_ELECTION, slug=slug)


# =============================================================================
# Server entry point
# =============================================================================
# When run directly (python -m tools.mcp_server), start the MCP server on
# stdio.  The agent connects to this server as a subprocess.
# =============================================================================
def main() -> None:
    # Printed, not logged: TRANSPARENCE_LOG_LEVEL must not hide it.
    print(READY_MESSAGE, file=sys.stderr)
    mcp.run(show_banner=False)


if __name__ == "__main__":
    main()
