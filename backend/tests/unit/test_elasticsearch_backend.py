"""Unit tests for ElasticsearchSearchBackend against a recording fake client."""

from __future__ import annotations

import pytest
from elasticsearch import ConnectionError as ESConnectionError
from elasticsearch import ConnectionTimeout, TransportError

from villagers.domain.browsing.filters import parse_applied_filters
from villagers.domain.browsing.models import AggregationBucket, SearchRequest
from villagers.domain.browsing.query_compiler import compile_query
from villagers.domain.common.errors import BackendError, BackendUnavailableError
from villagers.domain.common.query import MatchAll
from villagers.infra.search.elasticsearch_backend import ElasticsearchSearchBackend


class _Response:
    """Stands in for elastic-transport's ObjectApiResponse."""

    def __init__(self, body: dict) -> None:
        self.body = body


class FakeEsClient:
    def __init__(self, *, count=None, search=None, error: Exception | None = None) -> None:
        self._count = count or {"count": 0}
        self._search = search or {"hits": {"hits": []}}
        self._error = error
        self.calls: list[tuple[str, dict]] = []

    def count(self, **kwargs):
        self.calls.append(("count", kwargs))
        if self._error is not None:
            raise self._error
        return _Response(self._count)

    def search(self, **kwargs):
        self.calls.append(("search", kwargs))
        if self._error is not None:
            raise self._error
        return _Response(self._search)


class TestCount:
    def test_sends_count_only_query(self):
        client = FakeEsClient(count={"count": 42})
        backend = ElasticsearchSearchBackend(client, index="villager")

        assert backend.count(MatchAll()) == 42
        assert client.calls == [
            ("count", {"index": "villager", "query": {"match_all": {}}}),
        ]


class TestSearch:
    def test_sends_page_window_aggregations_and_sort(self):
        client = FakeEsClient(search={
            "hits": {"hits": [{"_id": "bob", "_score": 1.2}]},
            "aggregations": {"gender": {"buckets": [{"key": "male", "doc_count": 1}]}},
        })
        backend = ElasticsearchSearchBackend(client, index="villager")
        compiled = compile_query(parse_applied_filters({"gender": "male"}))

        page = backend.search(SearchRequest(
            query=compiled.query,
            aggregations=compiled.aggregations,
            sort=compiled.sort,
            offset=25,
            size=25,
        ))

        _, kwargs = client.calls[0]
        assert kwargs["index"] == "villager"
        assert kwargs["from_"] == 25
        assert kwargs["size"] == 25
        assert kwargs["sort"] == [{"keyword": {"order": "asc"}}]
        assert set(kwargs["aggregations"]) == {"gender", "game", "personality", "species"}
        assert [h.id for h in page.hits] == ["bob"]
        assert page.buckets_for("gender") == (AggregationBucket("male", 1),)


class TestSuggest:
    def test_flattens_completion_options(self):
        client = FakeEsClient(search={
            "suggest": {"villager": [{"options": [{"text": "Bob"}, {"text": "Bones"}]}]}
        })
        backend = ElasticsearchSearchBackend(client)

        assert backend.suggest("Bo", "suggest", 5) == ["Bob", "Bones"]
        _, kwargs = client.calls[0]
        assert kwargs["suggest"]["villager"]["completion"] == {"field": "suggest", "size": 5}


class TestErrorTranslation:
    @pytest.mark.parametrize("error", [
        ESConnectionError("connection refused"),
        ConnectionTimeout("timed out"),
    ])
    def test_connection_failures_are_unavailable(self, error):
        backend = ElasticsearchSearchBackend(FakeEsClient(error=error))

        with pytest.raises(BackendUnavailableError) as excinfo:
            backend.count(MatchAll())

        assert excinfo.value.__cause__ is error
        assert excinfo.value.backend == "elasticsearch"

    def test_other_transport_failures_are_backend_errors(self):
        backend = ElasticsearchSearchBackend(FakeEsClient(error=TransportError("bad gateway")))

        with pytest.raises(BackendError) as excinfo:
            backend.suggest("Bo", "suggest", 5)

        assert not isinstance(excinfo.value, BackendUnavailableError)
