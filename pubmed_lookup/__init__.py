"""Look up papers by DOI or PMID and format them as one-line citations."""

from __future__ import annotations

from typing import Optional

from .api import PaperLookupClient
from .core.formatting import format_copy_payload
from .core.identifiers import IdentifierKind, classify_identifier
from .core.models import PaperRecord
from .core.settings import LookupSettings
from .exceptions import (
    ConfigError,
    InvalidInputError,
    PaperLookupError,
    PaperNotFoundError,
    UpstreamFailureError,
)

_default_client: Optional[PaperLookupClient] = None


def get_default_client() -> PaperLookupClient:
    """Return the default ``PaperLookupClient`` instance, creating it lazily."""

    global _default_client
    if _default_client is None:
        _default_client = PaperLookupClient()
    return _default_client


def lookup_paper(text: str) -> PaperRecord:
    """Resolve a DOI or PMID using the default client."""

    return get_default_client().lookup(text)


__all__ = [
    "ConfigError",
    "IdentifierKind",
    "InvalidInputError",
    "LookupSettings",
    "PaperLookupClient",
    "PaperLookupError",
    "PaperNotFoundError",
    "PaperRecord",
    "UpstreamFailureError",
    "classify_identifier",
    "format_copy_payload",
    "get_default_client",
    "lookup_paper",
]
