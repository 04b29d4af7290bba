"""list_legislation / get_legislation."""

import pytest

from core.config import SITE_URL
from core.formatting import THOUSANDS_SEPARATOR as SEP
from core.legislation import GET_LEGISLATION, LIST_LEGISLATION, MAX_SCRUTINS, render_legislation
from core.schemas import GetLegislationArgs
from tests.conftest import FakeApi, envelope


def _dossier(**overrides):
    document = {
        "id": "d1",
        "slug": "reforme-retraites-2023",
        "title": "Projet de loi de financement rectificative de la sécurité sociale pour 2023",
        "shortTitle": "Réforme des retraites",
        "number": "760",
        "status": "PROMULGUE",
        "category": "SOCIAL",
        "filingDate": "2023-01-23",
        "adoptionDate": "2023-03-20",
        "promulgationDate": "2023-04-14",
        "amendmentCount": 0,
        "summary": "Recul de l'âge légal de départ à 64 ans.",
        "sourceUrl": "https://www.assemblee-nationale.fr/dyn/16/dossiers/retraites",
        "author": {"id": "p9", "slug": "olivier-dussopt", "fullName": "Olivier Dussopt"},
        "scrutins": [],
    }
    document.update(overrides)
    return document


def _scrutin(i):
    return {
        "id": str(i),
        "title": f"Motion {i}",
        "votingDate": "2023-03-20",
        "votesFor": 278,
        "votesAgainst": 0,
        "votesAbstain": 0,
        "result": "REJECTED",
        "sourceUrl": None,
    }


@pytest.mark.asyncio
async def test_list_legislation_blocks():
    api = FakeApi(envelope([_dossier(amendmentCount=12)]))

    text = await LIST_LEGISLATION.invoke(api.client(), category="SOCIAL", search="retraites")

    assert api.last.url.path == "/api/dossiers"
    assert api.last.url.params.multi_items() == [
        ("search", "retraites"),
        ("category", "SOCIAL"),
        ("page", "1"),
        ("limit", "20"),
    ]
    assert text.split("\n") == [
        "**1 dossier(s) législatif(s)** (page 1/1)",
        "",
        "- **Réforme des retraites (n° 760)**",
        "  Promulgué — Social — déposé le 23 janvier 2023 — 12 amendement(s)",
        "  /dossiers/reforme-retraites-2023",
    ]


def test_render_legislation_detail():
    text = render_legislation(_dossier(), GetLegislationArgs(slug="reforme-retraites-2023"))
    lines = text.split("\n")

    assert lines[0] == "# Projet de loi de financement rectificative de la sécurité sociale pour 2023"
    assert "**Auteur** : Olivier Dussopt" in lines
    assert "**Promulgation** : 14 avril 2023" in lines
    assert not any(line.startswith("**Amendements**") for line in lines)
    assert "## Résumé" in lines
    assert lines[-2] == "📄 https://www.assemblee-nationale.fr/dyn/16/dossiers/retraites"
    assert lines[-1] == f"🔗 {SITE_URL}/dossiers/reforme-retraites-2023"


def test_render_legislation_amendments_and_multiline_summary():
    dossier = _dossier(amendmentCount=1500, summary="Article 7 : âge légal.\nArticle 10 : régimes spéciaux.")
    lines = render_legislation(dossier, GetLegislationArgs(slug="x")).split("\n")

    assert f"**Amendements** : 1{SEP}500" in lines
    summary = lines.index("## Résumé")
    assert lines[summary + 1 : summary + 3] == [
        "Article 7 : âge légal.",
        "Article 10 : régimes spéciaux.",
    ]


@pytest.mark.asyncio
async def test_list_legislation_groups_amendment_thousands():
    api = FakeApi(envelope([_dossier(amendmentCount=1500)]))

    text = await LIST_LEGISLATION.invoke(api.client())

    assert f" — 1{SEP}500 amendement(s)" in text


def test_render_legislation_scrutins_truncated():
    scrutins = [_scrutin(i) for i in range(MAX_SCRUTINS + 4)]
    text = render_legislation(_dossier(scrutins=scrutins), GetLegislationArgs(slug="x"))

    assert f"## Scrutins ({MAX_SCRUTINS + 4})" in text
    assert text.count("\n- **Motion ") == MAX_SCRUTINS
    assert "  Rejeté — Pour: 278, Contre: 0, Abstention: 0" in text
    assert "_... et 4 autres scrutins_" in text


@pytest.mark.asyncio
async def test_get_legislation_endpoint():
    api = FakeApi(_dossier(sourceUrl=None, summary=None))

    text = await GET_LEGISLATION.invoke(api.client(), slug="reforme-retraites-2023")

    assert api.last.url.path == "/api/dossiers/reforme-retraites-2023"
    assert "📄" not in text
    assert "## Résumé" not in text
