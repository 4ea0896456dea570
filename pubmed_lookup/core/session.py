from __future__ import annotations

import logging
from dataclasses import dataclass, field, replace
from typing import List, Optional

from .formatting import format_copy_payload
from .models import PaperRecord

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class LookupState:
    """Everything a front end needs to draw the lookup screen."""

    input_text: str = ""
    record: Optional[PaperRecord] = None
    error: Optional[str] = None
    is_loading: bool = False


@dataclass
class LookupSession:
    """Current lookup state plus a generation counter for in-flight lookups.

    ``begin`` hands out a token; only the completion carrying the newest token
    is applied, so results from superseded lookups are dropped.
    """

    state: LookupState = field(default_factory=LookupState)
    _generation: int = field(default=0, repr=False)

    def begin(self, input_text: str) -> int:
        self._generation += 1
        self.state = LookupState(input_text=input_text, is_loading=True)
        return self._generation

    def is_current(self, token: int) -> bool:
        return token == self._generation

    def complete(self, token: int, record: PaperRecord) -> bool:
        if not self.is_current(token):
            logger.debug(
                "Discarding stale lookup result",
                extra={"token": token, "current": self._generation},
            )
            return False
        self.state = replace(self.state, record=record, error=None, is_loading=False)
        return True

    def fail(self, token: int, message: str) -> bool:
        if not self.is_current(token):
            logger.debug(
                "Discarding stale lookup error",
                extra={"token": token, "current": self._generation},
            )
            return False
        self.state = replace(self.state, record=None, error=message, is_loading=False)
        return True


def render_text(state: LookupState) -> str:
    """Render ``state`` as plain text; the output depends on ``state`` alone."""

    if state.is_loading:
        return "Loading..."
    if state.error:
        return f"Error: {state.error}"
    record = state.record
    if record is None:
        return ""

    lines: List[str] = [
        f"Authors: {record.authors}",
        f"Auth.: {record.short_authors}",
        f"Title: {record.title}",
        f"Journal entry: {record.journal}",
        f"DOI: {record.doi}" + (f" <{record.doi_url}>" if record.doi_url else ""),
        f"PMID: {record.pmid}" + (f" <{record.pubmed_url}>" if record.pubmed_url else ""),
        "",
        format_copy_payload(record),
    ]
    return "\n".join(lines)
