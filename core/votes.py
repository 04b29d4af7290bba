# =============================================================================
# core/votes.py  —  Parliamentary votes ("scrutins")
# =============================================================================
#
# TOOLS:
#   list_votes             GET /api/votes
#   get_politician_votes   GET /api/politiques/{slug}/votes
#   get_vote_stats         GET /api/votes/stats
#
# STATS REPORT:
#   - global block: raw counts + average cohesion (one decimal)
#   - parties ranked by cohesion, highest first; equal scores keep the
#     order the API sent them in
#   - at most MAX_DIVISIVE "most divisive" scrutins, then "... et N autres"
#
# PERCENTAGES:
#   Shares of a politician's votes use percent() (whole numbers, half-up).
#   Cohesion and divisiveness are already 0..1 ratios and use score().
# =============================================================================

from core.api import encode_slug
from core.capability import Capability, Request
from core.formatting import (
    Report,
    add_next_page_hint,
    add_truncated,
    format_date,
    format_decimal,
    format_number,
    joined,
    percent,
    render_list,
    score,
)
from core.labels import ALL_CHAMBERS, CHAMBERS, VOTE_POSITIONS, VOTE_RESULTS, label
from core.models import (
    DivisiveScrutin,
    ListEnvelope,
    PartyStats,
    PoliticianVote,
    PoliticianVotes,
    Scrutin,
    VoteStats,
)
from core.schemas import ListVotesArgs, PoliticianVotesArgs, VoteStatsArgs

MAX_DIVISIVE = 10


def _scrutin_title(scrutin: Scrutin) -> str:
    date = format_date(scrutin.get("votingDate"))
    return f"- **{scrutin['title']}**" + (f" ({date})" if date else "")


# -----------------------------------------------------------------------------
# list_votes
# -----------------------------------------------------------------------------
def list_request(args: ListVotesArgs) -> Request:
    return "/api/votes", {
        "search": args.search,
        "result": args.result,
        "legislature": args.legislature,
        "chamber": args.chamber,
        "page": args.page,
        "limit": args.limit,
    }


def scrutin_block(scrutin: Scrutin) -> list[str]:
    counts = (
        f"Pour: {scrutin['votesFor']}, "
        f"Contre: {scrutin['votesAgainst']}, "
        f"Abstention: {scrutin['votesAbstain']}"
    )
    lines = [
        _scrutin_title(scrutin),
        f"  {joined(label(VOTE_RESULTS, scrutin['result']), counts)}",
    ]
    if scrutin.get("sourceUrl"):
        lines.append(f"  {scrutin['sourceUrl']}")
    return lines


def render_vote_list(document: ListEnvelope[Scrutin], args: ListVotesArgs) -> str:
    return render_list(Report(), document, "scrutins", scrutin_block).text()


# -----------------------------------------------------------------------------
# get_politician_votes
# -----------------------------------------------------------------------------
def politician_votes_request(args: PoliticianVotesArgs) -> Request:
    return f"/api/politiques/{encode_slug(args.slug)}/votes", {
        "page": args.page,
        "limit": args.limit,
    }


def _politician_vote_block(vote: PoliticianVote) -> list[str]:
    scrutin = vote["scrutin"]
    return [
        _scrutin_title(scrutin),
        f"  Vote : {label(VOTE_POSITIONS, vote['position'])} — "
        f"Résultat : {label(VOTE_RESULTS, scrutin['result'])}",
    ]


def render_politician_votes(document: PoliticianVotes, args: PoliticianVotesArgs) -> str:
    politician = document["politician"]
    party = politician.get("party")
    party_text = f" ({party['name']})" if party else ""

    report = Report()
    report.add(f"# Votes — {politician['fullName']}{party_text}")
    report.blank()

    stats = document["stats"]
    total = stats["total"]
    report.add("## Statistiques")
    report.add(f"- **Total** : {format_number(total)} votes")
    report.add(f"- **Pour** : {format_number(stats['pour'])} ({percent(stats['pour'], total)}%)")
    report.add(f"- **Contre** : {format_number(stats['contre'])} ({percent(stats['contre'], total)}%)")
    report.add(f"- **Abstention** : {format_number(stats['abstention'])}")
    report.add(f"- **Absent** : {format_number(stats['absent'])}")
    report.add(f"- **Taux de participation** : {format_decimal(stats['participationRate'])}%")
    report.blank()

    pagination = document["pagination"]
    report.add(f"## Derniers votes (page {pagination['page']}/{pagination['totalPages']})")
    for vote in document.get("votes") or []:
        for line in _politician_vote_block(vote):
            report.add(line)
    add_next_page_hint(report, pagination)
    return report.text()


# -----------------------------------------------------------------------------
# get_vote_stats
# -----------------------------------------------------------------------------
def stats_request(args: VoteStatsArgs) -> Request:
    return "/api/votes/stats", {"chamber": args.chamber}


def rank_parties(parties: list[PartyStats]) -> list[PartyStats]:
    """Highest cohesion first.  sorted() is stable, so ties keep API order."""
    return sorted(parties, key=lambda party: party["cohesion"], reverse=True)


def _party_line(party: PartyStats) -> str:
    return (
        f"- **{party['shortName']}** : {score(party['cohesion'])}% de cohésion "
        f"({format_number(party['memberCount'])} membres, "
        f"{format_number(party['totalVotes'])} votes)"
    )


def _divisive_block(scrutin: DivisiveScrutin) -> list[str]:
    return [
        _scrutin_title(scrutin),
        f"  {label(VOTE_RESULTS, scrutin['result'])} — "
        f"Score de divisivité : {score(scrutin['divisivityScore'])}%",
    ]


def render_vote_stats(document: VoteStats, args: VoteStatsArgs) -> str:
    chamber = label(CHAMBERS, args.chamber) or ALL_CHAMBERS
    totals = document["global"]

    report = Report()
    report.add(f"# Statistiques de vote — {chamber}")
    report.blank()

    report.add("## Vue globale")
    report.add(f"- **Total des votes** : {format_number(totals['totalVotes'])}")
    report.add(f"- Pour : {format_number(totals['totalVotesFor'])}")
    report.add(f"- Contre : {format_number(totals['totalVotesAgainst'])}")
    report.add(f"- Abstention : {format_number(totals['totalVotesAbstain'])}")
    report.add(f"- **Cohésion moyenne** : {score(totals['averageCohesion'])}%")
    report.blank()

    report.add("## Cohésion par parti")
    for party in rank_parties(document.get("parties") or []):
        report.add(_party_line(party))

    divisive = document.get("divisiveScrutins") or []
    if divisive:
        report.blank()
        report.add("## Scrutins les plus divisifs")
        add_truncated(report, divisive, _divisive_block, MAX_DIVISIVE, "autres scrutins")
    return report.text()


# -----------------------------------------------------------------------------
# Capabilities
# -----------------------------------------------------------------------------
LIST_VOTES = Capability(
    name="list_votes",
    description=(
        "Lister les scrutins parlementaires (Assemblée nationale et Sénat) "
        "avec filtres."
    ),
    schema=ListVotesArgs,
    request=list_request,
    render=render_vote_list,
)

GET_POLITICIAN_VOTES = Capability(
    name="get_politician_votes",
    description=(
        "Obtenir les votes d'un politicien spécifique avec ses statistiques "
        "de participation."
    ),
    schema=PoliticianVotesArgs,
    request=politician_votes_request,
    render=render_politician_votes,
)

GET_VOTE_STATS = Capability(
    name="get_vote_stats",
    description=(
        "Obtenir les statistiques de vote par parti : cohésion, scrutins "
        "divisifs, distribution globale."
    ),
    schema=VoteStatsArgs,
    request=stats_request,
    render=render_vote_stats,
)
