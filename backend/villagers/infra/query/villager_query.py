"""Elasticsearch DSL builder for villager queries.

Translates the domain QueryNode tree, SortSpec and AggregationRequest
types into request-body fragments, and parses aggregation/hit payloads
back into domain value objects.
"""

from __future__ import annotations

from typing import Any, Iterable

from villagers.domain.browsing.models import AggregationBucket, SearchHit, SearchPage
from villagers.domain.common.query import (
    AggregationRequest,
    AllOf,
    AnyOf,
    Match,
    MatchAll,
    QueryNode,
    SortSpec,
)


# ── Request translation ─────────────────────────────────────────────────


def to_es_query(node: QueryNode) -> dict[str, Any]:
    """Translate a QueryNode tree into an Elasticsearch query clause."""
    if isinstance(node, MatchAll):
        return {"match_all": {}}
    if isinstance(node, Match):
        body: dict[str, Any] = {"query": node.value}
        if node.fuzziness is not None:
            body["fuzziness"] = node.fuzziness
        return {"match": {node.field: body}}
    if isinstance(node, AllOf):
        return {"bool": {"must": [to_es_query(c) for c in node.clauses]}}
    if isinstance(node, AnyOf):
        return {"bool": {"should": [to_es_query(c) for c in node.clauses]}}
    raise TypeError(f"Unsupported query node: {type(node).__name__}")


def to_es_aggregations(requests: Iterable[AggregationRequest]) -> dict[str, Any]:
    """One ``terms`` aggregation per request, named after its field."""
    return {
        r.field: {"terms": {"field": r.field, "size": r.size}}
        for r in requests
    }


def to_es_sort(sort: Iterable[SortSpec]) -> list[dict[str, Any]]:
    return [{s.field: {"order": s.order.value}} for s in sort]


def to_es_suggest(prefix: str, field: str, limit: int) -> dict[str, Any]:
    """Completion-suggester body; the suggestion is named ``villager``."""
    return {
        "villager": {
            "prefix": prefix,
            "completion": {"field": field, "size": limit},
        }
    }


# ── Response parsing ────────────────────────────────────────────────────


def parse_search_response(response: Any) -> SearchPage:
    """Build a SearchPage from an Elasticsearch search response body."""
    hits = tuple(
        SearchHit(id=str(hit["_id"]), score=hit.get("_score"))
        for hit in response.get("hits", {}).get("hits", [])
    )
    aggregations = {
        name: tuple(
            AggregationBucket(key=str(b["key"]), count=int(b["doc_count"]))
            for b in agg.get("buckets", [])
        )
        for name, agg in (response.get("aggregations") or {}).items()
    }
    return SearchPage(hits=hits, aggregations=aggregations)


def parse_suggest_response(response: Any) -> list[str]:
    """Flatten every option text of the ``villager`` suggestion."""
    suggestions: list[str] = []
    for entry in (response.get("suggest") or {}).get("villager", []):
        for option in entry.get("options", []):
            suggestions.append(option["text"])
    return suggestions
