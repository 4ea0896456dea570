"""Identifier resolution across PubMed and Crossref.

Example
-------
```python
from pubmed_lookup.services.lookup_service import PaperLookupService

service = PaperLookupService()
record = service.lookup("doi:10.1016/j.neuron.2019.05.013")
print(record.short_authors, record.journal)
```
"""

from __future__ import annotations

import logging
from typing import Callable, Dict, Optional, Protocol, Sequence

from pubmed_lookup.core.identifiers import Identifier, IdentifierKind, classify_identifier
from pubmed_lookup.core.models import PaperRecord
from pubmed_lookup.core.settings import KNOWN_SOURCES
from pubmed_lookup.exceptions import (
    ConfigError,
    InvalidInputError,
    PaperNotFoundError,
    UpstreamFailureError,
)
from pubmed_lookup.providers.clients.base import ClientError

from .crossref_service import CrossrefService
from .pubmed_service import PubMedService

logger = logging.getLogger(__name__)


class DoiSource(Protocol):
    def get_by_doi(self, doi: str) -> Optional[PaperRecord]:
        ...


class PaperLookupService:
    """Resolve a DOI or PMID to a single :class:`PaperRecord`.

    PMIDs go to PubMed only. DOIs are tried against each source in
    ``doi_source_order`` (PubMed, then Crossref by default) and the first
    match wins. Calls are made one after another, never in parallel.
    """

    def __init__(
        self,
        *,
        pubmed: Optional[PubMedService] = None,
        crossref: Optional[CrossrefService] = None,
        doi_source_order: Sequence[str] = KNOWN_SOURCES,
    ) -> None:
        self.pubmed = pubmed or PubMedService()
        self.crossref = crossref or CrossrefService()
        self._doi_sources: Dict[str, DoiSource] = {
            "pubmed": self.pubmed,
            "crossref": self.crossref,
        }
        unknown = [source for source in doi_source_order if source not in self._doi_sources]
        if unknown or not doi_source_order:
            raise ConfigError(f"Invalid DOI source order: {list(doi_source_order)}")
        self.doi_source_order = tuple(doi_source_order)

    def lookup(self, text: str) -> PaperRecord:
        identifier = classify_identifier(text)
        if identifier.kind is IdentifierKind.INVALID:
            raise InvalidInputError()
        return self.resolve(identifier)

    def resolve(self, identifier: Identifier) -> PaperRecord:
        if identifier.kind is IdentifierKind.PMID:
            record = self._query("pubmed", self.pubmed.get_by_pmid, identifier.value)
        elif identifier.kind is IdentifierKind.DOI:
            record = self._resolve_doi(identifier.value)
        else:
            raise InvalidInputError()

        if record is None:
            logger.info(
                "No upstream match",
                extra={"identifier": identifier.value, "kind": identifier.kind.value},
            )
            raise PaperNotFoundError()
        return record

    def _resolve_doi(self, doi: str) -> Optional[PaperRecord]:
        for position, source in enumerate(self.doi_source_order):
            if position:
                logger.info("Falling back to next DOI source", extra={"doi": doi, "source": source})
            record = self._query(source, self._doi_sources[source].get_by_doi, doi)
            if record is not None:
                logger.info("Resolved DOI", extra={"doi": doi, "source": source})
                return record
        return None

    def _query(
        self, source: str, fetch: Callable[[str], Optional[PaperRecord]], value: str
    ) -> Optional[PaperRecord]:
        try:
            return fetch(value)
        except ClientError as exc:
            logger.warning("%s lookup failed: %s", source, exc)
            raise UpstreamFailureError(
                f"Lookup failed while contacting {source}: {exc}", source=source
            ) from exc
