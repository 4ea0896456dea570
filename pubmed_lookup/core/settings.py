from __future__ import annotations

from email.utils import parseaddr
from typing import Annotated, Optional, Tuple

import requests
from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, NoDecode, SettingsConfigDict

KNOWN_SOURCES = ("pubmed", "crossref")


class LookupSettings(BaseSettings):  # type: ignore[misc]
    """Configuration for HTTP clients and the DOI resolution policy."""

    timeout: float = Field(10.0, gt=0, description="Timeout (in seconds) for each upstream request")
    max_attempts: int = Field(
        1, ge=1, description="Attempts per upstream request; 1 disables transport retries"
    )
    user_agent: str = "pubmed-lookup/1.0"
    contact_email: Optional[str] = Field(
        None, description="Contact address sent to NCBI and the Crossref polite pool"
    )
    ncbi_tool: str = "pubmed-lookup"
    ncbi_api_key: Optional[str] = None
    pubmed_base_url: Optional[str] = None
    crossref_base_url: Optional[str] = None
    doi_source_order: Annotated[Tuple[str, ...], NoDecode] = Field(
        KNOWN_SOURCES, description="Sources queried, in order, for DOI inputs"
    )

    model_config = SettingsConfigDict(env_prefix="PUBMED_LOOKUP_", env_file=".env", extra="ignore")

    @field_validator("contact_email")
    @classmethod
    def validate_contact_email(cls, value: Optional[str]) -> Optional[str]:
        if value is None or not value.strip():
            return None
        _, addr = parseaddr(value)
        if "@" not in addr:
            raise ValueError("contact_email must contain a valid email address")
        return addr

    @field_validator("doi_source_order", mode="before")
    @classmethod
    def split_source_order(cls, value: object) -> object:
        if isinstance(value, str):
            return tuple(part.strip().lower() for part in value.split(",") if part.strip())
        return value

    @field_validator("doi_source_order")
    @classmethod
    def validate_source_order(cls, value: Tuple[str, ...]) -> Tuple[str, ...]:
        if not value:
            raise ValueError("doi_source_order must name at least one source")
        unknown = [source for source in value if source not in KNOWN_SOURCES]
        if unknown:
            raise ValueError(f"Unknown DOI sources: {', '.join(unknown)}")
        if len(set(value)) != len(value):
            raise ValueError("doi_source_order must not repeat a source")
        return value

    @property
    def full_user_agent(self) -> str:
        if self.contact_email:
            return f"{self.user_agent} (mailto:{self.contact_email})"
        return self.user_agent

    def build_session(self, session: Optional[requests.Session] = None) -> requests.Session:
        """Return a configured :class:`requests.Session` using the settings."""

        session = session if session is not None else requests.Session()
        session.headers["User-Agent"] = self.full_user_agent
        return session
