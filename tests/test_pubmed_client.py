import re

import pytest
import requests
import responses
from responses import matchers

from fixtures_payloads import DOI, ESEARCH_EMPTY, ESEARCH_HIT, ESUMMARY, PMID
from pubmed_lookup.providers.clients.base import UpstreamError
from pubmed_lookup.providers.clients.pubmed import PubMedClient

ESEARCH_URL = "https://eutils.ncbi.nlm.nih.gov/entrez/eutils/esearch.fcgi"
ESUMMARY_URL = "https://eutils.ncbi.nlm.nih.gov/entrez/eutils/esummary.fcgi"


def _client(**kwargs):
    return PubMedClient(session=requests.Session(), **kwargs)


@responses.activate
def test_search_returns_first_identifier():
    responses.add(
        responses.GET,
        ESEARCH_URL,
        json={"esearchresult": {"idlist": ["111", "222"]}},
        match=[
            matchers.query_param_matcher(
                {"db": "pubmed", "retmode": "json", "term": f"{DOI}[doi]"}
            )
        ],
    )

    assert _client().search(f"{DOI}[doi]") == "111"


@responses.activate
def test_search_without_hits_returns_none():
    responses.add(responses.GET, ESEARCH_URL, json=ESEARCH_EMPTY)

    assert _client().search(PMID) is None


def test_search_with_empty_term_skips_request(monkeypatch):
    def fail_request(self, *args, **kwargs):  # type: ignore[override]
        raise AssertionError("no request expected")

    monkeypatch.setattr(PubMedClient, "_request", fail_request)

    assert _client().search("") is None


@responses.activate
def test_search_sends_etiquette_parameters():
    responses.add(responses.GET, ESEARCH_URL, json=ESEARCH_HIT)

    _client(tool="pubmed-lookup", email="me@example.org", api_key="secret").search(PMID)

    params = responses.calls[0].request.params
    assert params["tool"] == "pubmed-lookup"
    assert params["email"] == "me@example.org"
    assert params["api_key"] == "secret"


@responses.activate
def test_summary_parses_article_fields():
    responses.add(responses.GET, ESUMMARY_URL, json=ESUMMARY)

    summary = _client().summary(PMID)

    assert summary is not None
    assert summary.uid == PMID
    assert summary.authors == ["Smith J", "Doe A", "Roe B"]
    assert summary.journal == "Neuron"
    assert summary.pubdate == "2019 Aug 7"
    assert summary.elocation_id == f"doi: {DOI}"
    assert summary.article_doi == DOI


@responses.activate
def test_summary_with_error_entry_returns_none():
    responses.add(
        responses.GET,
        ESUMMARY_URL,
        json={"result": {"uids": ["999"], "999": {"uid": "999", "error": "cannot get document summary"}}},
    )

    assert _client().summary("999") is None


@responses.activate
def test_server_error_surfaces_as_upstream_error():
    responses.add(responses.GET, re.compile(r".*/esearch\.fcgi.*"), status=502, body="bad gateway")

    with pytest.raises(UpstreamError):
        _client().search(PMID)
