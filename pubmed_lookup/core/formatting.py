"""String assembly shared by the upstream normalizers and the copy payload."""

from __future__ import annotations

from typing import TYPE_CHECKING, Iterable, Optional

if TYPE_CHECKING:
    from .models import PaperRecord

NOT_AVAILABLE = "N/A"
AUTHOR_SEPARATOR = "; "


def _clean(value: object) -> str:
    if value is None:
        return ""
    return " ".join(str(value).split())


def join_authors(names: Iterable[Optional[str]]) -> str:
    """Join display names with ``"; "`` in source order, or return ``"N/A"``."""

    cleaned = [_clean(name) for name in names]
    joined = AUTHOR_SEPARATOR.join(name for name in cleaned if name)
    return joined or NOT_AVAILABLE


def format_crossref_author(
    family: Optional[str], given: Optional[str], name: Optional[str] = None
) -> str:
    """Compose a ``"Family, Given"`` display name from Crossref name parts."""

    family = _clean(family)
    given = _clean(given)
    if family and given:
        return f"{family}, {given}"
    return family or given or _clean(name)


def format_journal(
    name: Optional[str],
    date: object,
    volume: Optional[str],
    issue: Optional[str],
    pages: Optional[str],
) -> str:
    """Build ``"<name>. <date>;<volume>(<issue>):<pages>"``.

    A missing or blank component yields ``"N/A"`` instead of a partial entry.
    """

    parts = [_clean(part) for part in (name, date, volume, issue, pages)]
    if not all(parts):
        return NOT_AVAILABLE
    name_text, date_text, volume_text, issue_text, pages_text = parts
    return f"{name_text.rstrip('.')}. {date_text};{volume_text}({issue_text}):{pages_text}"


def format_copy_payload(record: "PaperRecord") -> str:
    """Render the one-line clipboard entry for ``record``.

    Fields are not escaped, so a ``|`` inside a field makes the line ambiguous.
    """

    return (
        f"{record.short_authors}|{record.title}|{record.journal}"
        f"|doi:{record.doi}|PMID:{record.pmid}"
    )
