# =============================================================================
# core/models.py  —  Shapes of the documents returned by the API
# =============================================================================
#
# These TypedDicts describe the JSON the API sends back.  They are NOT
# validated at runtime: TransparenceClient.fetch() returns the decoded JSON
# and the renderers trust the declared shape.  They exist so that reading a
# renderer tells you exactly which keys it relies on.
#
# TWO ENVELOPES:
#   - list envelope:    {"data": [...], "pagination": {...}}
#   - detail envelope:  a single record, possibly with nested collections
#
# Nullable keys are typed Optional[...]; the renderers skip them when they
# are null, empty or zero.
# =============================================================================

from typing import Generic, Optional, TypedDict, TypeVar

T = TypeVar("T")


class Pagination(TypedDict):
    page: int
    limit: int
    total: int
    totalPages: int


class ListEnvelope(TypedDict, Generic[T]):
    data: list[T]
    pagination: Pagination


# -----------------------------------------------------------------------------
# Shared references
# -----------------------------------------------------------------------------
class PartyRef(TypedDict, total=False):
    id: str
    slug: str
    name: str
    shortName: str
    color: str


class PoliticianRef(TypedDict, total=False):
    id: str
    slug: str
    fullName: str
    photoUrl: Optional[str]
    party: Optional[PartyRef]


# -----------------------------------------------------------------------------
# Elections
# -----------------------------------------------------------------------------
class ElectionListItem(TypedDict):
    id: str
    slug: str
    type: str
    title: str
    shortTitle: Optional[str]
    status: str
    scope: Optional[str]
    suffrage: Optional[str]
    round1Date: Optional[str]
    round2Date: Optional[str]
    dateConfirmed: bool
    totalSeats: Optional[int]
    candidacyCount: int


class Candidacy(TypedDict):
    id: str
    candidateName: str
    partyLabel: Optional[str]
    constituencyName: Optional[str]
    isElected: Optional[bool]
    round1Votes: Optional[int]
    round1Pct: Optional[float]
    round2Votes: Optional[int]
    round2Pct: Optional[float]
    politician: Optional[PoliticianRef]
    party: Optional[PartyRef]


class Round(TypedDict):
    round: int
    date: Optional[str]
    registeredVoters: Optional[int]
    actualVoters: Optional[int]
    participationRate: Optional[float]
    blankVotes: Optional[int]
    nullVotes: Optional[int]


class ElectionDetail(ElectionListItem, total=False):
    candidacies: list[Candidacy]
    rounds: list[Round]


# -----------------------------------------------------------------------------
# Votes
# -----------------------------------------------------------------------------
class Scrutin(TypedDict, total=False):
    id: str
    externalId: str
    title: str
    votingDate: str
    legislature: int
    chamber: str
    votesFor: int
    votesAgainst: int
    votesAbstain: int
    result: str
    sourceUrl: str
    totalVotes: int


class PartyStats(TypedDict):
    partyId: str
    partyName: str
    shortName: str
    color: str
    memberCount: int
    cohesion: float
    unanimousVotes: int
    totalVotes: int


class DivisiveScrutin(Scrutin, total=False):
    divisivityScore: float


class GlobalVoteStats(TypedDict):
    totalVotes: int
    totalVotesFor: int
    totalVotesAgainst: int
    totalVotesAbstain: int
    averageCohesion: float


# "global" is a Python keyword, hence the functional syntax.
VoteStats = TypedDict("VoteStats", {
    "parties": list[PartyStats],
    "divisiveScrutins": list[DivisiveScrutin],
    "global": GlobalVoteStats,
})


class PoliticianVoteStats(TypedDict):
    total: int
    pour: int
    contre: int
    abstention: int
    nonVotant: int
    absent: int
    participationRate: float


class PoliticianVote(TypedDict):
    id: str
    position: str
    scrutin: Scrutin


class PoliticianVotes(TypedDict):
    politician: PoliticianRef
    stats: PoliticianVoteStats
    votes: list[PoliticianVote]
    pagination: Pagination


# -----------------------------------------------------------------------------
# Politicians
# -----------------------------------------------------------------------------
class Mandate(TypedDict, total=False):
    id: str
    type: str
    title: str
    constituency: Optional[str]
    startDate: Optional[str]
    endDate: Optional[str]
    isCurrent: bool


class AffairRef(TypedDict, total=False):
    slug: str
    title: str
    status: str
    category: str


class PoliticianListItem(TypedDict, total=False):
    id: str
    slug: str
    fullName: str
    currentParty: Optional[PartyRef]
    currentMandate: Optional[Mandate]
    affairsCount: int


class PoliticianDetail(PoliticianListItem, total=False):
    civility: Optional[str]
    birthDate: Optional[str]
    birthPlace: Optional[str]
    deathDate: Optional[str]
    profession: Optional[str]
    mandates: list[Mandate]
    affairs: list[AffairRef]


# -----------------------------------------------------------------------------
# Affairs
# -----------------------------------------------------------------------------
class AffairEvent(TypedDict, total=False):
    date: Optional[str]
    type: str
    description: Optional[str]


class Source(TypedDict, total=False):
    title: str
    url: str
    publisher: Optional[str]
    publishedAt: Optional[str]


class AffairListItem(TypedDict, total=False):
    id: str
    slug: str
    title: str
    status: str
    category: str
    factsDate: Optional[str]
    verdictDate: Optional[str]
    politician: Optional[PoliticianRef]
    partyAtTime: Optional[PartyRef]


class AffairDetail(AffairListItem, total=False):
    description: Optional[str]
    sentence: Optional[str]
    court: Optional[str]
    events: list[AffairEvent]
    sources: list[Source]


# -----------------------------------------------------------------------------
# Legislation
# -----------------------------------------------------------------------------
class LegislationListItem(TypedDict, total=False):
    id: str
    slug: str
    title: str
    shortTitle: Optional[str]
    number: Optional[str]
    status: str
    category: Optional[str]
    filingDate: Optional[str]
    adoptionDate: Optional[str]
    amendmentCount: int


class LegislationDetail(LegislationListItem, total=False):
    summary: Optional[str]
    sourceUrl: Optional[str]
    promulgationDate: Optional[str]
    author: Optional[PoliticianRef]
    scrutins: list[Scrutin]
