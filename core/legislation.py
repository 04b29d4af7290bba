# =============================================================================
# core/legislation.py  —  Legislative files ("dossiers législatifs")
# =============================================================================
#
# TOOLS:
#   list_legislation   GET /api/dossiers          (filters + pagination)
#   get_legislation    GET /api/dossiers/{slug}   (summary + related votes)
# =============================================================================

from core.api import encode_slug
from core.capability import Capability, Request
from core.config import SITE_URL
from core.formatting import (
    Report,
    add_truncated,
    format_date,
    format_number,
    joined,
    render_list,
)
from core.labels import LEGISLATION_CATEGORIES, LEGISLATION_STATUSES, label
from core.models import LegislationDetail, LegislationListItem, ListEnvelope
from core.schemas import GetLegislationArgs, ListLegislationArgs
from core.votes import scrutin_block

MAX_SCRUTINS = 20


def _display_title(record: LegislationListItem) -> str:
    title = record.get("shortTitle") or record["title"]
    if record.get("number"):
        title = f"{title} (n° {record['number']})"
    return title


# -----------------------------------------------------------------------------
# list_legislation
# -----------------------------------------------------------------------------
def list_request(args: ListLegislationArgs) -> Request:
    return "/api/dossiers", {
        "search": args.search,
        "status": args.status,
        "category": args.category,
        "page": args.page,
        "limit": args.limit,
    }


def _legislation_block(record: LegislationListItem) -> list[str]:
    filed = format_date(record.get("filingDate"))
    amendments = record.get("amendmentCount") or 0
    secondary = joined(
        label(LEGISLATION_STATUSES, record.get("status")),
        label(LEGISLATION_CATEGORIES, record.get("category")),
        f"déposé le {filed}" if filed else None,
        f"{format_number(amendments)} amendement(s)" if amendments > 0 else None,
    )
    return [
        f"- **{_display_title(record)}**",
        f"  {secondary}",
        f"  /dossiers/{record['slug']}",
    ]


def render_legislation_list(
    document: ListEnvelope[LegislationListItem], args: ListLegislationArgs
) -> str:
    return render_list(Report(), document, "dossier(s) législatif(s)", _legislation_block).text()


# -----------------------------------------------------------------------------
# get_legislation
# -----------------------------------------------------------------------------
def detail_request(args: GetLegislationArgs) -> Request:
    return f"/api/dossiers/{encode_slug(args.slug)}", None


def render_legislation(document: LegislationDetail, args: GetLegislationArgs) -> str:
    report = Report()
    report.add(f"# {document['title']}")
    report.field("Numéro", document.get("number"))
    report.field("Statut", label(LEGISLATION_STATUSES, document.get("status")))
    report.field("Thème", label(LEGISLATION_CATEGORIES, document.get("category")))
    author = document.get("author")
    if author:
        report.field("Auteur", author.get("fullName"))
    report.field("Dépôt", format_date(document.get("filingDate")))
    report.field("Adoption", format_date(document.get("adoptionDate")))
    report.field("Promulgation", format_date(document.get("promulgationDate")))
    amendments = document.get("amendmentCount")
    report.field("Amendements", amendments and format_number(amendments))

    if document.get("summary"):
        report.blank()
        report.add("## Résumé")
        report.paragraph(document["summary"])

    scrutins = document.get("scrutins") or []
    if scrutins:
        report.blank()
        report.add(f"## Scrutins ({len(scrutins)})")
        add_truncated(report, scrutins, scrutin_block, MAX_SCRUTINS, "autres scrutins")

    report.blank()
    if document.get("sourceUrl"):
        report.add(f"📄 {document['sourceUrl']}")
    report.add(f"🔗 {SITE_URL}/dossiers/{document['slug']}")
    return report.text()


# -----------------------------------------------------------------------------
# Capabilities
# -----------------------------------------------------------------------------
LIST_LEGISLATION = Capability(
    name="list_legislation",
    description=(
        "Lister les dossiers législatifs (projets et propositions de loi) avec "
        "filtres par statut et thème."
    ),
    schema=ListLegislationArgs,
    request=list_request,
    render=render_legislation_list,
)

GET_LEGISLATION = Capability(
    name="get_legislation",
    description=(
        "Obtenir le détail d'un dossier législatif : résumé, étapes, scrutins "
        "associés."
    ),
    schema=GetLegislationArgs,
    request=detail_request,
    render=render_legislation,
)
