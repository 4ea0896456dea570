"""Crossref client for DOI metadata lookups."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional
from urllib.parse import quote

from .base import BaseHttpClient, NotFoundError


@dataclass
class CrossrefWork:
    doi: Optional[str]
    title: Optional[str]
    container_title: Optional[str]
    year: Optional[int]
    volume: Optional[str]
    issue: Optional[str]
    page: Optional[str]
    authors: List[Dict[str, Optional[str]]] = field(default_factory=list)


class CrossrefClient(BaseHttpClient):
    """Lightweight wrapper around the Crossref works API."""

    BASE_URL = "https://api.crossref.org"

    def works_by_doi(self, doi: str) -> Optional[CrossrefWork]:
        doi = (doi or "").strip()
        if not doi:
            return None

        try:
            payload = self._get_json(f"/works/{quote(doi, safe='')}")
        except NotFoundError:
            return None

        return self._normalize_work(payload.get("message"))

    def _normalize_work(self, data: Any) -> Optional[CrossrefWork]:
        if not isinstance(data, dict):
            return None

        return CrossrefWork(
            doi=data.get("DOI"),
            title=self._first(data.get("title")),
            container_title=self._first(data.get("container-title")),
            year=self._extract_year(data),
            volume=data.get("volume"),
            issue=data.get("issue"),
            page=data.get("page"),
            authors=self._extract_authors(data.get("author") or []),
        )

    def _first(self, values: Any) -> Optional[str]:
        if isinstance(values, list) and values:
            return values[0]
        return None

    def _extract_year(self, data: Dict[str, Any]) -> Optional[int]:
        component = data.get("issued", {})
        if not isinstance(component, dict):
            return None
        parts = component.get("date-parts")
        if isinstance(parts, list) and parts and isinstance(parts[0], list) and parts[0]:
            year = parts[0][0]
            if isinstance(year, int):
                return year
        return None

    def _extract_authors(self, authors: List[Any]) -> List[Dict[str, Optional[str]]]:
        extracted: List[Dict[str, Optional[str]]] = []
        for author in authors:
            if not isinstance(author, dict):
                continue
            extracted.append(
                {
                    "family": author.get("family"),
                    "given": author.get("given"),
                    "name": author.get("name"),
                }
            )
        return extracted
