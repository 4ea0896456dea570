"""HTTP clients used by the lookup service layer."""

from .base import (
    BaseHttpClient,
    ClientError,
    NotFoundError,
    RateLimitedError,
    RequestRejectedError,
    UpstreamError,
)
from .crossref import CrossrefClient, CrossrefWork
from .pubmed import PubMedClient, PubMedSummary

__all__ = [
    "BaseHttpClient",
    "ClientError",
    "CrossrefClient",
    "CrossrefWork",
    "NotFoundError",
    "PubMedClient",
    "PubMedSummary",
    "RateLimitedError",
    "RequestRejectedError",
    "UpstreamError",
]
