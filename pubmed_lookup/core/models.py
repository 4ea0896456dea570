from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, List, Optional

from .formatting import AUTHOR_SEPARATOR, NOT_AVAILABLE

DOI_RESOLVER_URL = "https://doi.org/"
PUBMED_RECORD_URL = "https://pubmed.ncbi.nlm.nih.gov/"


def _or_sentinel(value: Optional[str]) -> str:
    if value is None:
        return NOT_AVAILABLE
    text = " ".join(str(value).split())
    return text or NOT_AVAILABLE


def shorten_author_list(authors: str) -> str:
    """Keep the first two authors and append ``" et al."`` when there are more."""

    author_list = authors.split(AUTHOR_SEPARATOR)
    if len(author_list) <= 2:
        return authors
    return f"{AUTHOR_SEPARATOR.join(author_list[:2])} et al."


@dataclass(frozen=True)
class PaperRecord:
    """Citation fields normalized from either PubMed or Crossref.

    Every field is a string; anything the upstream could not provide holds the
    ``"N/A"`` sentinel. ``source`` records which upstream produced the record.
    """

    authors: str = NOT_AVAILABLE
    title: str = NOT_AVAILABLE
    journal: str = NOT_AVAILABLE
    doi: str = NOT_AVAILABLE
    pmid: str = NOT_AVAILABLE
    source: str = NOT_AVAILABLE

    def __post_init__(self) -> None:
        for name in ("authors", "title", "journal", "doi", "pmid", "source"):
            object.__setattr__(self, name, _or_sentinel(getattr(self, name)))

    @property
    def short_authors(self) -> str:
        return shorten_author_list(self.authors)

    @property
    def author_list(self) -> List[str]:
        if self.authors == NOT_AVAILABLE:
            return []
        return self.authors.split(AUTHOR_SEPARATOR)

    @property
    def doi_url(self) -> Optional[str]:
        if self.doi == NOT_AVAILABLE:
            return None
        return f"{DOI_RESOLVER_URL}{self.doi}"

    @property
    def pubmed_url(self) -> Optional[str]:
        if self.pmid == NOT_AVAILABLE:
            return None
        return f"{PUBMED_RECORD_URL}{self.pmid}/"

    def to_dict(self) -> Dict[str, Any]:
        return {
            "authors": self.authors,
            "short_authors": self.short_authors,
            "title": self.title,
            "journal": self.journal,
            "doi": self.doi,
            "pmid": self.pmid,
            "source": self.source,
            "doi_url": self.doi_url,
            "pubmed_url": self.pubmed_url,
        }


__all__ = ["PaperRecord", "shorten_author_list", "NOT_AVAILABLE"]
