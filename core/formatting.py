# =============================================================================
# core/formatting.py  —  Shared rendering helpers
# =============================================================================
#
# WHAT THIS MODULE DOES:
#   Every renderer builds its output through the same small toolbox so that
#   all tools print pagination, numbers, dates and truncated groups
#   identically:
#
#     Report               ordered line builder; strips control characters
#     pagination_header    "**12 scrutins** (page 1/3)"
#     next_page_hint       "_Page suivante : page=2_"  (only if page < total)
#     add_truncated        list capped at N entries + "_... et K autres …_"
#     percent              JS Math.round(part / total * 100), 0 if total == 0
#     score                0.812 → "81.2"
#     format_number        48747876 → "48 747 876" (fr-FR, U+202F)
#     format_date          "2027-04-11" → "11 avril 2027"
#     format_decimal       27.0 → "27", 27.85 → "27.85"
#
# RULE — "present and truthy":
#   Optional fields are printed only when their value is truthy.  None, ""
#   and 0 are all skipped.  Helpers below never invent a placeholder.
# =============================================================================

import math
import unicodedata
from datetime import date
from decimal import ROUND_HALF_UP, Decimal
from typing import Any, Callable, Iterable, Optional, Sequence

# fr-FR digit grouping character, as produced by Number.toLocaleString("fr-FR")
THOUSANDS_SEPARATOR = "\u202f"

_MONTHS_FR = (
    "janvier", "février", "mars", "avril", "mai", "juin",
    "juillet", "août", "septembre", "octobre", "novembre", "décembre",
)


def _clean(text: str) -> str:
    """Replace every control character (line breaks included) by a space."""
    return "".join(
        " " if unicodedata.category(ch) == "Cc" else ch
        for ch in text
    )


class Report:
    """Ordered lines of a rendered report.

    A line added here can never introduce a line break of its own: remote
    titles containing "\\n" or "\\t" are flattened.
    """

    def __init__(self) -> None:
        self._lines: list[str] = []

    def add(self, line: str = "") -> "Report":
        self._lines.append(_clean(line))
        return self

    def blank(self) -> "Report":
        return self.add("")

    def field(self, label: str, value: Any) -> "Report":
        """`**Label** : value`, skipped when value is falsy."""
        if value:
            self.add(f"**{label}** : {value}")
        return self

    def paragraph(self, text: str) -> "Report":
        """Add remote free text, one report line per source line."""
        for line in text.splitlines():
            self.add(line)
        return self

    def bullet(self, label: str, value: Any) -> "Report":
        """`- Label : value`, skipped when value is falsy."""
        if value:
            self.add(f"- {label} : {value}")
        return self

    @property
    def lines(self) -> list[str]:
        return list(self._lines)

    def text(self) -> str:
        lines = list(self._lines)
        while lines and not lines[-1]:
            lines.pop()
        return "\n".join(lines)


# -----------------------------------------------------------------------------
# Pagination
# -----------------------------------------------------------------------------
def pagination_header(pagination: dict, noun: str) -> str:
    return (
        f"**{pagination['total']} {noun}** "
        f"(page {pagination['page']}/{pagination['totalPages']})"
    )


def next_page_hint(pagination: dict) -> Optional[str]:
    if pagination["page"] < pagination["totalPages"]:
        return f"_Page suivante : page={pagination['page'] + 1}_"
    return None


def add_next_page_hint(report: Report, pagination: dict) -> None:
    hint = next_page_hint(pagination)
    if hint:
        report.blank()
        report.add(hint)


def render_list(
    report: Report,
    document: dict,
    noun: str,
    block: Callable[[dict], Iterable[str]],
) -> Report:
    """Standard list envelope: header, one block per record, next-page hint."""
    pagination = document["pagination"]
    report.add(pagination_header(pagination, noun))
    records = document.get("data") or []
    if records:
        report.blank()
    for record in records:
        for line in block(record):
            report.add(line)
    add_next_page_hint(report, pagination)
    return report


def add_truncated(
    report: Report,
    items: Sequence[Any],
    block: Callable[[Any], Iterable[str]],
    limit: int,
    more_noun: str,
) -> None:
    """Render at most `limit` items, then one "+N more" line if needed."""
    for item in items[:limit]:
        for line in block(item):
            report.add(line)
    if len(items) > limit:
        report.add(f"_... et {len(items) - limit} {more_noun}_")


# -----------------------------------------------------------------------------
# Numbers
# -----------------------------------------------------------------------------
def percent(part: float, total: float) -> int:
    """Whole percentage rounded half-up; 0 when total is 0."""
    if not total:
        return 0
    return math.floor(part / total * 100 + 0.5)


def score(value: float) -> str:
    """A 0..1 ratio as a percentage with one decimal (no % sign).

    Ties round up, on the exact value of the float: 0.8125 gives "81.3".
    """
    return str(Decimal(value * 100).quantize(Decimal("0.1"), rounding=ROUND_HALF_UP))


def format_number(value: Any) -> str:
    """Group thousands the fr-FR way.  Non-integers go through format_decimal."""
    if isinstance(value, bool):
        return str(value)
    if isinstance(value, int) or (isinstance(value, float) and value.is_integer()):
        return f"{int(value):,}".replace(",", THOUSANDS_SEPARATOR)
    return format_decimal(value)


def format_decimal(value: Any) -> str:
    """Print a remote number the way JavaScript would (no trailing .0)."""
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


# -----------------------------------------------------------------------------
# Dates
# -----------------------------------------------------------------------------
def format_date(value: Optional[str]) -> str:
    """ISO date or datetime → "11 avril 2027".  Unparseable input is returned as-is."""
    if not value:
        return ""
    try:
        day = date.fromisoformat(value[:10])
    except ValueError:
        return value
    return f"{day.day} {_MONTHS_FR[day.month - 1]} {day.year}"


def joined(*parts: Optional[str], sep: str = " — ") -> str:
    """Join the truthy parts with an em dash separator."""
    return sep.join(part for part in parts if part)
