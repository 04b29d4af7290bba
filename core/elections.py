# =============================================================================
# core/elections.py  —  Elections: list and detail
# =============================================================================
#
# TOOLS:
#   list_elections   GET /api/elections            (filters + pagination)
#   get_election     GET /api/elections/{slug}     (rounds + candidacies)
#
# DETAIL REPORT LAYOUT:
#   # <title>
#   **Type** / **Statut** / **1er tour** / **2nd tour** / **Sièges** / ...
#   ## Tours de scrutin        one ### block per round, turnout figures
#   ## Candidatures (N)
#   ### Élu(e)s                elected candidates
#   ### Autres candidat(e)s    everybody else
#   🔗 public page
#
#   The two candidacy groups partition the list (isElected truthy vs not)
#   and each is capped at MAX_CANDIDATES with a "... et N autres" line.
# =============================================================================

from core.api import encode_slug
from core.capability import Capability, Request
from core.config import SITE_URL
from core.formatting import (
    Report,
    add_truncated,
    format_date,
    format_decimal,
    format_number,
    joined,
    render_list,
)
from core.labels import (
    ELECTION_SCOPES,
    ELECTION_STATUSES,
    ELECTION_TYPES,
    SUFFRAGE_TYPES,
    label,
)
from core.models import Candidacy, ElectionDetail, ElectionListItem, ListEnvelope, Round
from core.schemas import GetElectionArgs, ListElectionsArgs

MAX_CANDIDATES = 20

UNCONFIRMED_DATE = "Date non confirmée"


# -----------------------------------------------------------------------------
# list_elections
# -----------------------------------------------------------------------------
def list_request(args: ListElectionsArgs) -> Request:
    return "/api/elections", {
        "type": args.type,
        "status": args.status,
        "year": args.year,
        "page": args.page,
        "limit": args.limit,
    }


def _election_block(election: ElectionListItem) -> list[str]:
    date = format_date(election.get("round1Date")) or UNCONFIRMED_DATE
    seats = election.get("totalSeats")
    candidacies = election.get("candidacyCount") or 0
    secondary = joined(
        label(ELECTION_STATUSES, election["status"]),
        date,
        f"{format_number(seats)} sièges" if seats else None,
        f"{candidacies} candidat(s)" if candidacies > 0 else None,
    )
    return [
        f"- **{election['title']}** ({label(ELECTION_TYPES, election['type'])})",
        f"  {secondary}",
        f"  /elections/{election['slug']}",
    ]


def render_election_list(
    document: ListEnvelope[ElectionListItem], args: ListElectionsArgs
) -> str:
    return render_list(Report(), document, "élection(s)", _election_block).text()


# -----------------------------------------------------------------------------
# get_election
# -----------------------------------------------------------------------------
def detail_request(args: GetElectionArgs) -> Request:
    return f"/api/elections/{encode_slug(args.slug)}", None


def split_candidacies(
    candidacies: list[Candidacy],
) -> tuple[list[Candidacy], list[Candidacy]]:
    """Partition candidacies into (elected, others), keeping their order."""
    elected = [c for c in candidacies if c.get("isElected")]
    others = [c for c in candidacies if not c.get("isElected")]
    return elected, others


def _candidacy_suffix(candidacy: Candidacy) -> str:
    party = candidacy.get("party")
    if party:
        party_text = f" ({party['shortName']})"
    elif candidacy.get("partyLabel"):
        party_text = f" ({candidacy['partyLabel']})"
    else:
        party_text = ""

    r1 = candidacy.get("round1Pct")
    r2 = candidacy.get("round2Pct")
    round1 = f" — T1: {format_decimal(r1)}%" if r1 else ""
    round2 = f", T2: {format_decimal(r2)}%" if r2 else ""
    return f"{party_text}{round1}{round2}"


def _elected_block(candidacy: Candidacy) -> list[str]:
    return [f"- **{candidacy['candidateName']}**{_candidacy_suffix(candidacy)} ✅"]


def _candidate_block(candidacy: Candidacy) -> list[str]:
    return [f"- {candidacy['candidateName']}{_candidacy_suffix(candidacy)}"]


def _add_round(report: Report, rnd: Round) -> None:
    date = f" — {format_date(rnd['date'])}" if rnd.get("date") else ""
    report.add(f"### Tour {rnd['round']}{date}")

    # Zero counts are skipped like missing ones (see DESIGN.md).
    registered = rnd.get("registeredVoters")
    voters = rnd.get("actualVoters")
    rate = rnd.get("participationRate")
    blank = rnd.get("blankVotes")
    null = rnd.get("nullVotes")
    report.bullet("Inscrits", registered and format_number(registered))
    report.bullet("Votants", voters and format_number(voters))
    report.bullet("Participation", rate and f"{format_decimal(rate)}%")
    report.bullet("Bulletins blancs", blank and format_number(blank))
    report.bullet("Bulletins nuls", null and format_number(null))


def render_election(document: ElectionDetail, args: GetElectionArgs) -> str:
    report = Report()
    report.add(f"# {document['title']}")
    report.field("Type", label(ELECTION_TYPES, document["type"]))
    report.field("Statut", label(ELECTION_STATUSES, document["status"]))

    if document.get("round1Date"):
        unconfirmed = "" if document.get("dateConfirmed") else " (non confirmé)"
        report.field("1er tour", f"{format_date(document['round1Date'])}{unconfirmed}")
    if document.get("round2Date"):
        report.field("2nd tour", format_date(document["round2Date"]))
    seats = document.get("totalSeats")
    report.field("Sièges", seats and format_number(seats))
    report.field("Portée", label(ELECTION_SCOPES, document.get("scope")))
    report.field("Suffrage", label(SUFFRAGE_TYPES, document.get("suffrage")))

    rounds = document.get("rounds") or []
    if rounds:
        report.blank()
        report.add("## Tours de scrutin")
        for rnd in rounds:
            _add_round(report, rnd)

    candidacies = document.get("candidacies") or []
    if candidacies:
        report.blank()
        report.add(f"## Candidatures ({len(candidacies)})")
        elected, others = split_candidacies(candidacies)
        if elected:
            report.add("### Élu(e)s")
            add_truncated(report, elected, _elected_block, MAX_CANDIDATES, "autres élu(e)s")
        if others:
            report.add("### Autres candidat(e)s")
            add_truncated(report, others, _candidate_block, MAX_CANDIDATES, "autres candidat(s)")

    report.blank()
    report.add(f"🔗 {SITE_URL}/elections/{document['slug']}")
    return report.text()


# -----------------------------------------------------------------------------
# Capabilities
# -----------------------------------------------------------------------------
LIST_ELECTIONS = Capability(
    name="list_elections",
    description=(
        "Lister les élections françaises (présidentielle, législatives, "
        "municipales, etc.) avec filtres."
    ),
    schema=ListElectionsArgs,
    request=list_request,
    render=render_election_list,
)

GET_ELECTION = Capability(
    name="get_election",
    description=(
        "Obtenir le détail d'une élection : candidatures, résultats par tour, "
        "participation."
    ),
    schema=GetElectionArgs,
    request=detail_request,
    render=render_election,
)
