from __future__ import annotations

from typing import Optional

from pubmed_lookup.core.formatting import NOT_AVAILABLE, format_crossref_author, format_journal, join_authors
from pubmed_lookup.core.models import PaperRecord
from pubmed_lookup.providers.clients.crossref import CrossrefClient, CrossrefWork


class CrossrefService:
    """Service wrapper around :class:`CrossrefClient` with PaperRecord normalization.

    Crossref has no notion of a PubMed id, so ``pmid`` is always ``"N/A"``.
    """

    source = "crossref"

    def __init__(self, client: Optional[CrossrefClient] = None) -> None:
        self.client = client or CrossrefClient()

    def get_by_doi(self, doi: str) -> Optional[PaperRecord]:
        work = self.client.works_by_doi(doi)
        if work is None:
            return None
        return self._to_record(work)

    def _to_record(self, work: CrossrefWork) -> PaperRecord:
        authors = [
            format_crossref_author(author.get("family"), author.get("given"), author.get("name"))
            for author in work.authors
        ]
        return PaperRecord(
            authors=join_authors(authors),
            title=work.title,
            journal=format_journal(
                work.container_title,
                work.year,
                work.volume,
                work.issue,
                work.page,
            ),
            doi=work.doi,
            pmid=NOT_AVAILABLE,
            source=self.source,
        )
