"""Service layer for the lookup package."""

from .crossref_service import CrossrefService
from .lookup_service import PaperLookupService
from .pubmed_service import PubMedService

__all__ = [
    "CrossrefService",
    "PaperLookupService",
    "PubMedService",
]
