"""High-level lookup API constrained to DOI and PMID inputs.

Example: lookup by PMID
-----------------------
```python
from pubmed_lookup.api import PaperLookupClient

client = PaperLookupClient()
record = client.lookup("31174959")
print(client.copy_payload(record))
```
"""

from __future__ import annotations

from typing import Optional

import requests

from .core.formatting import format_copy_payload
from .core.models import PaperRecord
from .core.session import LookupSession
from .core.settings import LookupSettings
from .exceptions import PaperLookupError
from .providers.clients.crossref import CrossrefClient
from .providers.clients.pubmed import PubMedClient
from .services.crossref_service import CrossrefService
from .services.lookup_service import PaperLookupService
from .services.pubmed_service import PubMedService


class PaperLookupClient:
    """Facade wiring settings, HTTP session, clients and services together."""

    def __init__(
        self,
        settings: Optional[LookupSettings] = None,
        *,
        session: Optional[requests.Session] = None,
        lookup_service: Optional[PaperLookupService] = None,
    ) -> None:
        self.settings = settings or LookupSettings()
        self.session = self.settings.build_session(session)

        pubmed_client = PubMedClient(
            session=self.session,
            base_url=self.settings.pubmed_base_url,
            timeout=self.settings.timeout,
            max_attempts=self.settings.max_attempts,
            tool=self.settings.ncbi_tool,
            email=self.settings.contact_email,
            api_key=self.settings.ncbi_api_key,
        )
        crossref_client = CrossrefClient(
            session=self.session,
            base_url=self.settings.crossref_base_url,
            timeout=self.settings.timeout,
            max_attempts=self.settings.max_attempts,
        )

        self._lookup_service = lookup_service or PaperLookupService(
            pubmed=PubMedService(pubmed_client),
            crossref=CrossrefService(crossref_client),
            doi_source_order=self.settings.doi_source_order,
        )

    def lookup(self, text: str) -> PaperRecord:
        """Resolve ``text`` (DOI or PMID) into a record or raise a lookup error."""

        return self._lookup_service.lookup(text)

    def run(self, text: str, session: Optional[LookupSession] = None) -> LookupSession:
        """Drive a :class:`LookupSession` through one lookup and return it."""

        session = session if session is not None else LookupSession()
        token = session.begin(text)
        try:
            record = self.lookup(text)
        except PaperLookupError as exc:
            session.fail(token, str(exc))
        else:
            session.complete(token, record)
        return session

    @staticmethod
    def copy_payload(record: PaperRecord) -> str:
        return format_copy_payload(record)
