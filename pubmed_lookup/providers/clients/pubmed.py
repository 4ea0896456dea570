"""PubMed client backed by the NCBI E-utilities esearch/esummary endpoints."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from .base import BaseHttpClient


@dataclass
class PubMedSummary:
    uid: str
    title: Optional[str]
    journal: Optional[str]
    pubdate: Optional[str]
    volume: Optional[str]
    issue: Optional[str]
    pages: Optional[str]
    elocation_id: Optional[str]
    article_doi: Optional[str]
    authors: List[str] = field(default_factory=list)


class PubMedClient(BaseHttpClient):
    """Two-step wrapper: search a term for a PMID, then fetch its summary."""

    BASE_URL = "https://eutils.ncbi.nlm.nih.gov/entrez/eutils"

    def __init__(
        self,
        *,
        tool: Optional[str] = None,
        email: Optional[str] = None,
        api_key: Optional[str] = None,
        **kwargs: Any,
    ) -> None:
        super().__init__(**kwargs)
        self.tool = tool
        self.email = email
        self.api_key = api_key

    def _params(self, **params: Any) -> Dict[str, Any]:
        params = {"db": "pubmed", "retmode": "json", **params}
        if self.tool:
            params["tool"] = self.tool
        if self.email:
            params["email"] = self.email
        if self.api_key:
            params["api_key"] = self.api_key
        return params

    def search(self, term: str) -> Optional[str]:
        """Return the first PMID matching ``term``, if any."""

        if not term:
            return None

        payload = self._get_json("/esearch.fcgi", params=self._params(term=term))
        result = payload.get("esearchresult") or {}
        id_list = result.get("idlist") if isinstance(result, dict) else None
        if not isinstance(id_list, list) or not id_list:
            return None
        return str(id_list[0])

    def summary(self, pmid: str) -> Optional[PubMedSummary]:
        if not pmid:
            return None

        payload = self._get_json("/esummary.fcgi", params=self._params(id=pmid))
        result = payload.get("result") or {}
        if not isinstance(result, dict):
            return None
        article = result.get(str(pmid))
        if not isinstance(article, dict) or article.get("error"):
            return None
        return self._normalize_summary(str(pmid), article)

    def _normalize_summary(self, pmid: str, data: Dict[str, Any]) -> PubMedSummary:
        return PubMedSummary(
            uid=str(data.get("uid") or pmid),
            title=data.get("title"),
            journal=data.get("fulljournalname"),
            pubdate=data.get("pubdate"),
            volume=data.get("volume"),
            issue=data.get("issue"),
            pages=data.get("pages"),
            elocation_id=data.get("elocationid"),
            article_doi=self._extract_article_doi(data.get("articleids") or []),
            authors=self._extract_authors(data.get("authors") or []),
        )

    def _extract_authors(self, authors: List[Any]) -> List[str]:
        extracted: List[str] = []
        for author in authors:
            if not isinstance(author, dict):
                continue
            name = author.get("name")
            if name:
                extracted.append(str(name))
        return extracted

    def _extract_article_doi(self, article_ids: List[Any]) -> Optional[str]:
        for entry in article_ids:
            if isinstance(entry, dict) and entry.get("idtype") == "doi" and entry.get("value"):
                return str(entry["value"])
        return None
