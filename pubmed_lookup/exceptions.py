"""Custom exception hierarchy for paper lookups."""


class PaperLookupError(Exception):
    """Base exception for lookup errors surfaced to the user."""


class ConfigError(PaperLookupError):
    """Raised when configuration is invalid or incomplete."""


class InvalidInputError(PaperLookupError):
    """Raised when the input is neither a DOI nor a PMID."""

    def __init__(self, message: str = "Invalid input. Please enter a valid DOI or PMID.") -> None:
        super().__init__(message)


class PaperNotFoundError(PaperLookupError):
    """Raised when no upstream source knows the identifier."""

    def __init__(self, message: str = "No information found for the given input.") -> None:
        super().__init__(message)


class UpstreamFailureError(PaperLookupError):
    """Raised when an upstream service fails or returns an unusable payload."""

    def __init__(self, message: str, source: str | None = None) -> None:
        super().__init__(message)
        self.source = source
