import pytest

import pubmed_lookup
from pubmed_lookup.core.models import PaperRecord


class DummyClient:
    def __init__(self, created_counter):
        created_counter.append(True)

    def lookup(self, text):
        return PaperRecord(title=f"looked up {text}")


@pytest.fixture(autouse=True)
def reset_default_client():
    pubmed_lookup._default_client = None
    yield
    pubmed_lookup._default_client = None


def test_default_client_is_created_lazily_once(monkeypatch):
    created: list[bool] = []
    monkeypatch.setattr(pubmed_lookup, "PaperLookupClient", lambda: DummyClient(created))

    assert created == []

    first = pubmed_lookup.lookup_paper("31174959")
    pubmed_lookup.lookup_paper("10.1/x")

    assert first.title == "looked up 31174959"
    assert created == [True]
    assert pubmed_lookup.get_default_client() is pubmed_lookup.get_default_client()
