import pytest

from pubmed_lookup.core.models import PaperRecord
from pubmed_lookup.exceptions import (
    ConfigError,
    InvalidInputError,
    PaperNotFoundError,
    UpstreamFailureError,
)
from pubmed_lookup.providers.clients.base import UpstreamError
from pubmed_lookup.services.lookup_service import PaperLookupService

PUBMED_RECORD = PaperRecord(
    authors="Smith J; Doe A", title="From PubMed", doi="10.1/x", pmid="123", source="pubmed"
)
CROSSREF_RECORD = PaperRecord(
    authors="Smith, Jane", title="From Crossref", doi="10.1/x", pmid="N/A", source="crossref"
)


class StubPubMedService:
    def __init__(self, by_pmid=None, by_doi=None, error=None):
        self.by_pmid = by_pmid or {}
        self.by_doi = by_doi or {}
        self.error = error
        self.calls = []

    def get_by_pmid(self, pmid):
        self.calls.append(("pmid", pmid))
        if self.error:
            raise self.error
        return self.by_pmid.get(pmid)

    def get_by_doi(self, doi):
        self.calls.append(("doi", doi))
        if self.error:
            raise self.error
        return self.by_doi.get(doi)


class StubCrossrefService:
    def __init__(self, by_doi=None, error=None):
        self.by_doi = by_doi or {}
        self.error = error
        self.calls = []

    def get_by_doi(self, doi):
        self.calls.append(doi)
        if self.error:
            raise self.error
        return self.by_doi.get(doi)


def _service(pubmed, crossref, **kwargs):
    return PaperLookupService(pubmed=pubmed, crossref=crossref, **kwargs)


def test_pmid_input_queries_pubmed_only():
    pubmed = StubPubMedService(by_pmid={"123": PUBMED_RECORD})
    crossref = StubCrossrefService()

    record = _service(pubmed, crossref).lookup("pmid:123")

    assert record is PUBMED_RECORD
    assert pubmed.calls == [("pmid", "123")]
    assert crossref.calls == []


def test_unknown_pmid_never_reaches_crossref():
    pubmed = StubPubMedService()
    crossref = StubCrossrefService(by_doi={"123": CROSSREF_RECORD})

    with pytest.raises(PaperNotFoundError):
        _service(pubmed, crossref).lookup("123")

    assert crossref.calls == []


def test_doi_prefers_pubmed_match():
    pubmed = StubPubMedService(by_doi={"10.1/x": PUBMED_RECORD})
    crossref = StubCrossrefService(by_doi={"10.1/x": CROSSREF_RECORD})

    record = _service(pubmed, crossref).lookup("doi:10.1/x")

    assert record is PUBMED_RECORD
    assert crossref.calls == []


def test_doi_falls_back_to_crossref():
    pubmed = StubPubMedService()
    crossref = StubCrossrefService(by_doi={"10.1/x": CROSSREF_RECORD})

    record = _service(pubmed, crossref).lookup("10.1/x")

    assert record is CROSSREF_RECORD
    assert record.pmid == "N/A"
    assert pubmed.calls == [("doi", "10.1/x")]
    assert crossref.calls == ["10.1/x"]


def test_doi_missing_everywhere_is_not_found():
    pubmed = StubPubMedService()
    crossref = StubCrossrefService()

    with pytest.raises(PaperNotFoundError) as excinfo:
        _service(pubmed, crossref).lookup("doi:10.1/missing")

    assert str(excinfo.value) == "No information found for the given input."
    assert len(pubmed.calls) == 1
    assert len(crossref.calls) == 1


@pytest.mark.parametrize("text", ["", "abc", "doi"])
def test_invalid_input_makes_no_calls(text):
    pubmed = StubPubMedService()
    crossref = StubCrossrefService()

    with pytest.raises(InvalidInputError) as excinfo:
        _service(pubmed, crossref).lookup(text)

    assert str(excinfo.value) == "Invalid input. Please enter a valid DOI or PMID."
    assert pubmed.calls == []
    assert crossref.calls == []


def test_custom_source_order_queries_crossref_first():
    pubmed = StubPubMedService(by_doi={"10.1/x": PUBMED_RECORD})
    crossref = StubCrossrefService(by_doi={"10.1/x": CROSSREF_RECORD})

    record = _service(pubmed, crossref, doi_source_order=("crossref", "pubmed")).lookup("10.1/x")

    assert record is CROSSREF_RECORD
    assert pubmed.calls == []


def test_upstream_failure_is_wrapped_without_fallback():
    pubmed = StubPubMedService(error=UpstreamError("Upstream service error (502)"))
    crossref = StubCrossrefService(by_doi={"10.1/x": CROSSREF_RECORD})

    with pytest.raises(UpstreamFailureError) as excinfo:
        _service(pubmed, crossref).lookup("10.1/x")

    assert excinfo.value.source == "pubmed"
    assert isinstance(excinfo.value.__cause__, UpstreamError)
    assert crossref.calls == []


def test_unknown_source_in_order_is_rejected():
    with pytest.raises(ConfigError):
        _service(StubPubMedService(), StubCrossrefService(), doi_source_order=("openalex",))
