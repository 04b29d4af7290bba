# =============================================================================
# core/schemas.py  —  Argument schemas for every tool
# =============================================================================
#
# WHAT THIS MODULE DOES:
#   Declares, with pydantic, the arguments each tool accepts: types, enums,
#   bounds and defaults.  Capability.invoke() validates against these models
#   BEFORE any network call; a failure becomes an ArgumentError naming the
#   field.
#
# SHARED ALIASES:
#   Page, Limit, Slug and the enum Literals are reused by the FastMCP tool
#   signatures in tools/mcp_server.py, so the JSON schema advertised to the
#   agent and the validation done here cannot disagree.
#
# STRICT MODE:
#   strict=True: "2" is not an int, True is not an int.  extra="forbid":
#   an unknown argument is an error, not silently dropped.
# =============================================================================

from typing import Annotated, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field

from core.labels import (
    AFFAIR_CATEGORIES,
    AFFAIR_STATUSES,
    CHAMBERS,
    ELECTION_STATUSES,
    ELECTION_TYPES,
    LEGISLATION_CATEGORIES,
    LEGISLATION_STATUSES,
    MANDATE_TYPES,
    VOTE_RESULTS,
)

DEFAULT_PAGE = 1
DEFAULT_LIMIT = 20
MAX_LIMIT = 100

# -----------------------------------------------------------------------------
# Shared field types
# -----------------------------------------------------------------------------
Page = Annotated[int, Field(ge=1, description="Numéro de page")]
Limit = Annotated[
    int,
    Field(ge=1, le=MAX_LIMIT, description=f"Résultats par page (max {MAX_LIMIT})"),
]
Slug = Annotated[str, Field(min_length=1, description="Identifiant (slug) de la fiche")]
Search = Annotated[str, Field(description="Recherche plein texte")]

# Enumerations, generated from the label tables so both stay in sync.
ElectionType = Literal[tuple(ELECTION_TYPES)]
ElectionStatus = Literal[tuple(ELECTION_STATUSES)]
VoteResult = Literal[tuple(VOTE_RESULTS)]
Chamber = Literal[tuple(CHAMBERS)]
MandateType = Literal[tuple(MANDATE_TYPES)]
AffairStatus = Literal[tuple(AFFAIR_STATUSES)]
AffairCategory = Literal[tuple(AFFAIR_CATEGORIES)]
LegislationStatus = Literal[tuple(LEGISLATION_STATUSES)]
LegislationCategory = Literal[tuple(LEGISLATION_CATEGORIES)]


class ToolArgs(BaseModel):
    """Base for every argument model."""

    model_config = ConfigDict(strict=True, extra="forbid", frozen=True)


class PagedArgs(ToolArgs):
    page: Page = DEFAULT_PAGE
    limit: Limit = DEFAULT_LIMIT


class SlugArgs(ToolArgs):
    slug: Slug


# -----------------------------------------------------------------------------
# Elections
# -----------------------------------------------------------------------------
class ListElectionsArgs(PagedArgs):
    type: Optional[ElectionType] = None
    status: Optional[ElectionStatus] = None
    year: Optional[int] = None


class GetElectionArgs(SlugArgs):
    pass


# -----------------------------------------------------------------------------
# Votes
# -----------------------------------------------------------------------------
class ListVotesArgs(PagedArgs):
    search: Optional[Search] = None
    result: Optional[VoteResult] = None
    legislature: Optional[int] = None
    chamber: Optional[Chamber] = None


class PoliticianVotesArgs(PagedArgs):
    slug: Slug


class VoteStatsArgs(ToolArgs):
    chamber: Optional[Chamber] = None


# -----------------------------------------------------------------------------
# Politicians
# -----------------------------------------------------------------------------
class SearchPoliticiansArgs(PagedArgs):
    search: Optional[Search] = None
    party: Optional[str] = None
    mandate_type: Optional[MandateType] = None
    has_affairs: Optional[bool] = None


class GetPoliticianArgs(SlugArgs):
    pass


# -----------------------------------------------------------------------------
# Affairs
# -----------------------------------------------------------------------------
class ListAffairsArgs(PagedArgs):
    search: Optional[Search] = None
    status: Optional[AffairStatus] = None
    category: Optional[AffairCategory] = None
    politician: Optional[str] = None


class GetAffairArgs(SlugArgs):
    pass


# -----------------------------------------------------------------------------
# Legislation
# -----------------------------------------------------------------------------
class ListLegislationArgs(PagedArgs):
    search: Optional[Search] = None
    status: Optional[LegislationStatus] = None
    category: Optional[LegislationCategory] = None


class GetLegislationArgs(SlugArgs):
    pass
