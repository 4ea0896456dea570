from __future__ import annotations

import logging
from typing import Optional

from pubmed_lookup.core.formatting import NOT_AVAILABLE, format_journal, join_authors
from pubmed_lookup.core.identifiers import extract_doi, normalize_doi
from pubmed_lookup.core.models import PaperRecord
from pubmed_lookup.providers.clients.pubmed import PubMedClient, PubMedSummary

logger = logging.getLogger(__name__)


class PubMedService:
    """Service wrapper around :class:`PubMedClient` with PaperRecord normalization."""

    source = "pubmed"

    def __init__(self, client: Optional[PubMedClient] = None) -> None:
        self.client = client or PubMedClient()

    def get_by_pmid(self, pmid: str) -> Optional[PaperRecord]:
        return self._lookup(pmid)

    def search_by_doi(self, doi: str) -> Optional[PaperRecord]:
        if not doi:
            return None

        record = self._lookup(f"{doi}[doi]")
        # A [doi] search can fall back to fuzzy term matching.
        if (
            record is not None
            and record.doi != NOT_AVAILABLE
            and normalize_doi(record.doi) != normalize_doi(doi)
        ):
            logger.info(
                "Ignoring PubMed hit for a different DOI",
                extra={"doi": doi, "pmid": record.pmid, "found_doi": record.doi},
            )
            return None
        return record

    def get_by_doi(self, doi: str) -> Optional[PaperRecord]:
        return self.search_by_doi(doi)

    def _lookup(self, term: str) -> Optional[PaperRecord]:
        pmid = self.client.search(term)
        if not pmid:
            return None

        summary = self.client.summary(pmid)
        if summary is None:
            return None
        return self._to_record(summary)

    def _to_record(self, summary: PubMedSummary) -> PaperRecord:
        return PaperRecord(
            authors=join_authors(summary.authors),
            title=summary.title,
            journal=format_journal(
                summary.journal,
                summary.pubdate,
                summary.volume,
                summary.issue,
                summary.pages,
            ),
            doi=extract_doi(summary.elocation_id) or summary.article_doi,
            pmid=summary.uid,
            source=self.source,
        )
