"""list_votes / get_politician_votes / get_vote_stats."""

import pytest

from core.formatting import THOUSANDS_SEPARATOR as SEP
from core.schemas import VoteStatsArgs
from core.votes import (
    GET_POLITICIAN_VOTES,
    GET_VOTE_STATS,
    LIST_VOTES,
    MAX_DIVISIVE,
    rank_parties,
    render_vote_stats,
)
from tests.conftest import FakeApi, envelope


def _scrutin(title="Projet de loi de finances pour 2025", result="ADOPTED", **overrides):
    scrutin = {
        "id": title,
        "externalId": "VTANR5L17V1",
        "slug": title.lower().replace(" ", "-"),
        "title": title,
        "votingDate": "2024-12-04",
        "legislature": 17,
        "chamber": "AN",
        "votesFor": 331,
        "votesAgainst": 211,
        "votesAbstain": 12,
        "result": result,
        "sourceUrl": None,
    }
    scrutin.update(overrides)
    return scrutin


def _party(short_name, cohesion, members=10, votes=100):
    return {
        "id": short_name,
        "name": short_name,
        "shortName": short_name,
        "color": None,
        "memberCount": members,
        "totalVotes": votes,
        "cohesion": cohesion,
    }


def _stats(parties=(), divisive=()):
    return {
        "global": {
            "totalScrutins": 4200,
            "totalVotes": 1250000,
            "totalVotesFor": 600000,
            "totalVotesAgainst": 500000,
            "totalVotesAbstain": 150000,
            "averageCohesion": 0.8764,
        },
        "parties": list(parties),
        "divisiveScrutins": list(divisive),
    }


# -----------------------------------------------------------------------------
# list_votes
# -----------------------------------------------------------------------------
@pytest.mark.asyncio
async def test_list_votes_renders_counts_and_source():
    record = _scrutin(sourceUrl="https://www.assemblee-nationale.fr/dyn/17/scrutins/1")
    api = FakeApi(envelope([record]))

    text = await LIST_VOTES.invoke(
        api.client(), search="finances", result="ADOPTED", legislature=17, chamber="AN"
    )

    assert text.split("\n") == [
        "**1 scrutins** (page 1/1)",
        "",
        "- **Projet de loi de finances pour 2025** (4 décembre 2024)",
        "  Adopté — Pour: 331, Contre: 211, Abstention: 12",
        "  https://www.assemblee-nationale.fr/dyn/17/scrutins/1",
    ]
    assert api.last.url.params.multi_items() == [
        ("search", "finances"),
        ("result", "ADOPTED"),
        ("legislature", "17"),
        ("chamber", "AN"),
        ("page", "1"),
        ("limit", "20"),
    ]


@pytest.mark.asyncio
async def test_list_votes_two_line_block_without_source():
    api = FakeApi(envelope([_scrutin(result="REJECTED")], total=45, total_pages=3))

    text = await LIST_VOTES.invoke(api.client())

    lines = text.split("\n")
    assert lines[3] == "  Rejeté — Pour: 331, Contre: 211, Abstention: 12"
    assert lines[4] == ""
    assert lines[5] == "_Page suivante : page=2_"


# -----------------------------------------------------------------------------
# get_politician_votes
# -----------------------------------------------------------------------------
@pytest.mark.asyncio
async def test_politician_votes_statistics_and_rounding():
    document = {
        "politician": {
            "id": "p1",
            "slug": "marie-curie",
            "fullName": "Marie Curie",
            "party": {"name": "Parti des Sciences", "shortName": "PS"},
        },
        "stats": {
            "total": 3,
            "pour": 1,
            "contre": 2,
            "abstention": 0,
            "absent": 0,
            "participationRate": 100.0,
        },
        "votes": [
            {"position": "POUR", "scrutin": _scrutin()},
            {"position": "NON_VOTANT", "scrutin": _scrutin("Motion de censure", result="REJECTED")},
        ],
        "pagination": {"page": 1, "limit": 2, "total": 3, "totalPages": 2},
    }
    api = FakeApi(document)

    text = await GET_POLITICIAN_VOTES.invoke(api.client(), slug="marie-curie", limit=2)

    assert api.last.url.path == "/api/politiques/marie-curie/votes"
    assert api.last.url.params.multi_items() == [("page", "1"), ("limit", "2")]
    lines = text.split("\n")
    assert lines[0] == "# Votes — Marie Curie (Parti des Sciences)"
    assert "- **Pour** : 1 (33%)" in lines
    assert "- **Contre** : 2 (67%)" in lines
    assert "- **Taux de participation** : 100%" in lines
    assert "## Derniers votes (page 1/2)" in lines
    assert "  Vote : Pour — Résultat : Adopté" in lines
    assert "  Vote : Non votant — Résultat : Rejeté" in lines
    assert lines[-1] == "_Page suivante : page=2_"


@pytest.mark.asyncio
async def test_politician_votes_with_no_votes_has_zero_percentages():
    document = {
        "politician": {"id": "p2", "slug": "x", "fullName": "Jean Dupont", "party": None},
        "stats": {
            "total": 0,
            "pour": 0,
            "contre": 0,
            "abstention": 0,
            "absent": 0,
            "participationRate": 0,
        },
        "votes": [],
        "pagination": {"page": 1, "limit": 20, "total": 0, "totalPages": 0},
    }

    text = await GET_POLITICIAN_VOTES.invoke(FakeApi(document).client(), slug="x")

    assert text.split("\n")[0] == "# Votes — Jean Dupont"
    assert "- **Pour** : 0 (0%)" in text
    assert "Page suivante" not in text


# -----------------------------------------------------------------------------
# get_vote_stats
# -----------------------------------------------------------------------------
@pytest.mark.asyncio
async def test_stats_ranks_parties_by_cohesion():
    api = FakeApi(_stats(parties=[_party("A", 0.812), _party("B", 0.900)]))

    text = await GET_VOTE_STATS.invoke(api.client())

    lines = text.split("\n")
    line_a = lines.index("- **A** : 81.2% de cohésion (10 membres, 100 votes)")
    line_b = lines.index("- **B** : 90.0% de cohésion (10 membres, 100 votes)")
    assert line_b < line_a
    assert not api.last.url.query


def test_stats_cohesion_ties_round_up():
    text = render_vote_stats(_stats(parties=[_party("A", 0.8125)]), VoteStatsArgs())
    assert "- **A** : 81.3% de cohésion (10 membres, 100 votes)" in text.split("\n")


@pytest.mark.asyncio
async def test_stats_global_block_and_chamber_heading():
    api = FakeApi(_stats())

    text = await GET_VOTE_STATS.invoke(api.client(), chamber="SENAT")

    lines = text.split("\n")
    assert lines[0] == "# Statistiques de vote — Sénat"
    assert f"- **Total des votes** : 1{SEP}250{SEP}000" in lines
    assert "- **Cohésion moyenne** : 87.6%" in lines
    assert api.last.url.params.multi_items() == [("chamber", "SENAT")]
    assert "Scrutins les plus divisifs" not in text


def test_stats_heading_without_chamber():
    text = render_vote_stats(_stats(), VoteStatsArgs())
    assert text.startswith("# Statistiques de vote — Toutes chambres\n")


def test_rank_parties_keeps_api_order_on_ties():
    parties = [_party("X", 0.5), _party("Y", 0.7), _party("Z", 0.5), _party("W", 0.7)]
    assert [p["shortName"] for p in rank_parties(parties)] == ["Y", "W", "X", "Z"]


def _divisive(count):
    return [
        {
            "id": str(i),
            "slug": f"s{i}",
            "title": f"Scrutin {i}",
            "votingDate": "2024-01-15",
            "result": "ADOPTED",
            "divisivityScore": 0.95,
        }
        for i in range(count)
    ]


def test_divisive_list_truncated_to_ten():
    text = render_vote_stats(_stats(divisive=_divisive(MAX_DIVISIVE + 3)), VoteStatsArgs())
    lines = text.split("\n")

    assert "## Scrutins les plus divisifs" in lines
    titles = [line for line in lines if line.startswith("- **Scrutin ")]
    assert len(titles) == MAX_DIVISIVE
    assert titles[0] == "- **Scrutin 0** (15 janvier 2024)"
    assert "  Adopté — Score de divisivité : 95.0%" in lines
    assert lines[-1] == "_... et 3 autres scrutins_"


def test_divisive_list_at_limit_has_no_summary():
    text = render_vote_stats(_stats(divisive=_divisive(MAX_DIVISIVE)), VoteStatsArgs())
    assert "autres scrutins" not in text


def test_render_vote_stats_is_deterministic():
    document = _stats(parties=[_party("A", 0.5), _party("B", 0.5)], divisive=_divisive(12))
    assert render_vote_stats(document, VoteStatsArgs()) == render_vote_stats(document, VoteStatsArgs())
