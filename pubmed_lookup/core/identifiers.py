from __future__ import annotations

import re
from dataclasses import dataclass
from enum import Enum

_DOI_PREFIX_PATTERN = re.compile(r"^(https?://)?(dx\.)?doi\.org/", re.IGNORECASE)
_PMID_PREFIX_PATTERN = re.compile(r"^(pmid|pm|pubmed):", re.IGNORECASE)
_ELOCATION_DOI_PATTERN = re.compile(r"doi:\s*(\S+)", re.IGNORECASE)


class IdentifierKind(str, Enum):
    DOI = "doi"
    PMID = "pmid"
    INVALID = "invalid"


@dataclass(frozen=True)
class Identifier:
    """A classified user input with any type prefix removed from ``value``."""

    kind: IdentifierKind
    value: str
    raw: str

    @property
    def is_valid(self) -> bool:
        return self.kind is not IdentifierKind.INVALID


def classify_identifier(text: str | None) -> Identifier:
    """Classify free-form input as a DOI, a PMID or invalid.

    DOIs are recognised by a case-insensitive ``doi:`` prefix (which is
    stripped) or by a leading ``10.``. PMIDs are either all digits or digits
    behind a ``pmid:``, ``pm:`` or ``pubmed:`` prefix. The DOI check always
    runs first.
    """

    raw = (text or "").strip()

    if raw.lower().startswith("doi:"):
        value = raw[4:].strip()
        kind = IdentifierKind.DOI if value else IdentifierKind.INVALID
        return Identifier(kind=kind, value=value, raw=raw)
    if raw.startswith("10."):
        return Identifier(kind=IdentifierKind.DOI, value=raw, raw=raw)

    candidate = _PMID_PREFIX_PATTERN.sub("", raw, count=1).strip()
    if candidate.isascii() and candidate.isdigit():
        return Identifier(kind=IdentifierKind.PMID, value=candidate, raw=raw)

    return Identifier(kind=IdentifierKind.INVALID, value=raw, raw=raw)


def normalize_doi(doi: str | None) -> str | None:
    """Normalize a DOI string into a canonical lowercase form.

    The normalization removes leading DOI prefixes (e.g., ``https://doi.org/`` or
    ``doi:``), trims whitespace, and lowercases the remaining identifier. Empty
    or missing values return ``None``.
    """

    if not doi:
        return None

    cleaned = doi.strip()
    cleaned = _DOI_PREFIX_PATTERN.sub("", cleaned)
    if cleaned.lower().startswith("doi:"):
        cleaned = cleaned.split(":", 1)[1]
    cleaned = cleaned.strip().lower()

    return cleaned or None


def extract_doi(elocation_id: str | None) -> str | None:
    """Return the DOI embedded in a PubMed elocation id such as ``doi: 10.1/x``."""

    if not elocation_id:
        return None

    match = _ELOCATION_DOI_PATTERN.search(elocation_id)
    if not match:
        return None
    return match.group(1).rstrip(".;,") or None
