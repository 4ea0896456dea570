"""Core data models, identifiers, formatting, and configuration for lookups."""

from .formatting import (
    NOT_AVAILABLE,
    format_copy_payload,
    format_crossref_author,
    format_journal,
    join_authors,
)
from .identifiers import (
    Identifier,
    IdentifierKind,
    classify_identifier,
    extract_doi,
    normalize_doi,
)
from .models import PaperRecord, shorten_author_list
from .session import LookupSession, LookupState, render_text
from .settings import KNOWN_SOURCES, LookupSettings

__all__ = [
    "Identifier",
    "IdentifierKind",
    "KNOWN_SOURCES",
    "LookupSession",
    "LookupSettings",
    "LookupState",
    "NOT_AVAILABLE",
    "PaperRecord",
    "classify_identifier",
    "extract_doi",
    "format_copy_payload",
    "format_crossref_author",
    "format_journal",
    "join_authors",
    "normalize_doi",
    "render_text",
    "shorten_author_list",
]
