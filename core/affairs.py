# =============================================================================
# core/affairs.py  —  Judicial affairs involving politicians
# =============================================================================
#
# TOOLS:
#   list_affairs   GET /api/affaires          (filters + pagination)
#   get_affair     GET /api/affaires/{slug}   (timeline + press sources)
#
# The procedural status is printed exactly as the API labels it; only
# CONDAMNATION_DEFINITIVE is a final conviction.  Sources are always listed.
# =============================================================================

from core.api import encode_slug
from core.capability import Capability, Request
from core.config import SITE_URL
from core.formatting import Report, add_truncated, format_date, joined, render_list
from core.labels import AFFAIR_CATEGORIES, AFFAIR_EVENT_TYPES, AFFAIR_STATUSES, label
from core.models import AffairDetail, AffairEvent, AffairListItem, ListEnvelope, Source
from core.schemas import GetAffairArgs, ListAffairsArgs

MAX_EVENTS = 20
MAX_SOURCES = 10


# -----------------------------------------------------------------------------
# list_affairs
# -----------------------------------------------------------------------------
def list_request(args: ListAffairsArgs) -> Request:
    return "/api/affaires", {
        "search": args.search,
        "status": args.status,
        "category": args.category,
        "politician": args.politician,
        "page": args.page,
        "limit": args.limit,
    }


def _affair_block(affair: AffairListItem) -> list[str]:
    politician = affair.get("politician")
    title = f"- **{affair['title']}**"
    if politician and politician.get("fullName"):
        title += f" ({politician['fullName']})"

    facts = format_date(affair.get("factsDate"))
    secondary = joined(
        label(AFFAIR_STATUSES, affair.get("status")),
        label(AFFAIR_CATEGORIES, affair.get("category")),
        f"faits : {facts}" if facts else None,
    )
    return [title, f"  {secondary}", f"  /affaires/{affair['slug']}"]


def render_affair_list(
    document: ListEnvelope[AffairListItem], args: ListAffairsArgs
) -> str:
    return render_list(Report(), document, "affaire(s)", _affair_block).text()


# -----------------------------------------------------------------------------
# get_affair
# -----------------------------------------------------------------------------
def detail_request(args: GetAffairArgs) -> Request:
    return f"/api/affaires/{encode_slug(args.slug)}", None


def _event_block(event: AffairEvent) -> list[str]:
    date = format_date(event.get("date"))
    head = label(AFFAIR_EVENT_TYPES, event.get("type"))
    line = f"- **{date}** : {head}" if date else f"- {head}"
    if event.get("description"):
        line += f" — {event['description']}"
    return [line]


def _source_block(source: Source) -> list[str]:
    meta = joined(source.get("publisher"), format_date(source.get("publishedAt")), sep=", ")
    title = f"- {source['title']}" + (f" ({meta})" if meta else "")
    return [title, f"  {source['url']}"]


def render_affair(document: AffairDetail, args: GetAffairArgs) -> str:
    report = Report()
    report.add(f"# {document['title']}")

    politician = document.get("politician")
    if politician:
        report.field("Personnalité", politician.get("fullName"))
    party = document.get("partyAtTime")
    if party:
        report.field("Parti au moment des faits", party.get("shortName") or party.get("name"))
    report.field("Statut", label(AFFAIR_STATUSES, document.get("status")))
    report.field("Catégorie", label(AFFAIR_CATEGORIES, document.get("category")))
    report.field("Date des faits", format_date(document.get("factsDate")))
    report.field("Juridiction", document.get("court"))
    report.field("Date du jugement", format_date(document.get("verdictDate")))
    report.field("Peine", document.get("sentence"))

    if document.get("description"):
        report.blank()
        report.paragraph(document["description"])

    events = document.get("events") or []
    if events:
        report.blank()
        report.add("## Chronologie")
        add_truncated(report, events, _event_block, MAX_EVENTS, "autres événements")

    sources = document.get("sources") or []
    if sources:
        report.blank()
        report.add(f"## Sources ({len(sources)})")
        add_truncated(report, sources, _source_block, MAX_SOURCES, "autres sources")

    report.blank()
    report.add(f"🔗 {SITE_URL}/affaires/{document['slug']}")
    return report.text()


# -----------------------------------------------------------------------------
# Capabilities
# -----------------------------------------------------------------------------
LIST_AFFAIRS = Capability(
    name="list_affairs",
    description=(
        "Lister les affaires judiciaires impliquant des responsables "
        "politiques, filtrables par statut de procédure et catégorie."
    ),
    schema=ListAffairsArgs,
    request=list_request,
    render=render_affair_list,
)

GET_AFFAIR = Capability(
    name="get_affair",
    description=(
        "Obtenir le détail d'une affaire judiciaire : statut, chronologie de "
        "la procédure, sources."
    ),
    schema=GetAffairArgs,
    request=detail_request,
    render=render_affair,
)
