# =============================================================================
# core/politicians.py  —  Politicians: search and profile
# =============================================================================
#
# TOOLS:
#   search_politicians   GET /api/politiques          (filters + pagination)
#   get_politician       GET /api/politiques/{slug}   (mandates + affairs)
#
# PROFILE LAYOUT:
#   # <full name>
#   **Parti** / **Mandat actuel** / **Naissance** / **Profession** / ...
#   ## Mandats
#   ### En cours          isCurrent truthy
#   ### Précédents        everything else
#   ## Affaires judiciaires (N)
#   🔗 public page
#
#   Each mandate group is capped at MAX_MANDATES, affairs at MAX_AFFAIRS.
# =============================================================================

from core.api import encode_slug
from core.capability import Capability, Request
from core.config import SITE_URL
from core.formatting import Report, add_truncated, format_date, joined, render_list
from core.labels import AFFAIR_CATEGORIES, AFFAIR_STATUSES, MANDATE_TYPES, label
from core.models import (
    AffairRef,
    ListEnvelope,
    Mandate,
    PartyRef,
    PoliticianDetail,
    PoliticianListItem,
)
from core.schemas import GetPoliticianArgs, SearchPoliticiansArgs

MAX_MANDATES = 20
MAX_AFFAIRS = 20


def _party_name(party: PartyRef) -> str:
    if not party:
        return ""
    short = party.get("shortName")
    name = party.get("name")
    if short and name and short != name:
        return f"{name} ({short})"
    return name or short or ""


def _mandate_label(mandate: Mandate) -> str:
    """Prefer the API's own title ("Député de la 3e circonscription…")."""
    if not mandate:
        return ""
    return mandate.get("title") or label(MANDATE_TYPES, mandate.get("type"))


def _period(mandate: Mandate) -> str:
    start = format_date(mandate.get("startDate"))
    end = format_date(mandate.get("endDate"))
    if start and end:
        return f"{start} → {end}"
    if start:
        return f"depuis le {start}"
    return ""


# -----------------------------------------------------------------------------
# search_politicians
# -----------------------------------------------------------------------------
def search_request(args: SearchPoliticiansArgs) -> Request:
    return "/api/politiques", {
        "search": args.search,
        "party": args.party,
        "mandateType": args.mandate_type,
        "hasAffairs": args.has_affairs,
        "page": args.page,
        "limit": args.limit,
    }


def _politician_block(politician: PoliticianListItem) -> list[str]:
    party = politician.get("currentParty")
    title = f"- **{politician['fullName']}**"
    if party and party.get("shortName"):
        title += f" ({party['shortName']})"

    affairs = politician.get("affairsCount") or 0
    secondary = joined(
        _mandate_label(politician.get("currentMandate")),
        f"{affairs} affaire(s)" if affairs > 0 else None,
    )
    lines = [title]
    if secondary:
        lines.append(f"  {secondary}")
    lines.append(f"  /politiques/{politician['slug']}")
    return lines


def render_politician_list(
    document: ListEnvelope[PoliticianListItem], args: SearchPoliticiansArgs
) -> str:
    return render_list(Report(), document, "politicien(s)", _politician_block).text()


# -----------------------------------------------------------------------------
# get_politician
# -----------------------------------------------------------------------------
def detail_request(args: GetPoliticianArgs) -> Request:
    return f"/api/politiques/{encode_slug(args.slug)}", None


def split_mandates(mandates: list[Mandate]) -> tuple[list[Mandate], list[Mandate]]:
    """Partition mandates into (current, past), keeping their order."""
    current = [m for m in mandates if m.get("isCurrent")]
    past = [m for m in mandates if not m.get("isCurrent")]
    return current, past


def _mandate_block(mandate: Mandate) -> list[str]:
    line = f"- {_mandate_label(mandate)}"
    details = joined(mandate.get("constituency"), _period(mandate))
    if details:
        line += f" — {details}"
    return [line]


def _affair_block(affair: AffairRef) -> list[str]:
    qualifiers = joined(
        label(AFFAIR_STATUSES, affair.get("status")),
        label(AFFAIR_CATEGORIES, affair.get("category")),
        sep=", ",
    )
    line = f"- **{affair['title']}**"
    if qualifiers:
        line += f" ({qualifiers})"
    return [line, f"  /affaires/{affair['slug']}"]


def render_politician(document: PoliticianDetail, args: GetPoliticianArgs) -> str:
    report = Report()
    report.add(f"# {document['fullName']}")
    report.field("Parti", _party_name(document.get("currentParty")))
    report.field("Mandat actuel", _mandate_label(document.get("currentMandate")))

    birth = format_date(document.get("birthDate"))
    if birth and document.get("birthPlace"):
        birth = f"{birth} ({document['birthPlace']})"
    report.field("Naissance", birth)
    report.field("Décès", format_date(document.get("deathDate")))
    report.field("Profession", document.get("profession"))

    mandates = document.get("mandates") or []
    if mandates:
        report.blank()
        report.add(f"## Mandats ({len(mandates)})")
        current, past = split_mandates(mandates)
        if current:
            report.add("### En cours")
            add_truncated(report, current, _mandate_block, MAX_MANDATES, "autres mandats")
        if past:
            report.add("### Précédents")
            add_truncated(report, past, _mandate_block, MAX_MANDATES, "autres mandats")

    affairs = document.get("affairs") or []
    if affairs:
        report.blank()
        report.add(f"## Affaires judiciaires ({len(affairs)})")
        add_truncated(report, affairs, _affair_block, MAX_AFFAIRS, "autres affaires")

    report.blank()
    report.add(f"🔗 {SITE_URL}/politiques/{document['slug']}")
    return report.text()


# -----------------------------------------------------------------------------
# Capabilities
# -----------------------------------------------------------------------------
SEARCH_POLITICIANS = Capability(
    name="search_politicians",
    description=(
        "Rechercher des responsables politiques français par nom, parti ou "
        "type de mandat."
    ),
    schema=SearchPoliticiansArgs,
    request=search_request,
    render=render_politician_list,
)

GET_POLITICIAN = Capability(
    name="get_politician",
    description=(
        "Obtenir la fiche d'un responsable politique : parti, mandats en cours "
        "et passés, affaires judiciaires."
    ),
    schema=GetPoliticianArgs,
    request=detail_request,
    render=render_politician,
)
