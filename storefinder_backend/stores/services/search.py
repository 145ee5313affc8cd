# stores/services/search.py

"""
STORE TEXT SEARCH

A store matches when ANY query term appears in its name or description.
Results are ranked by relevance, best first (ties by name).

- PostgreSQL: full-text search over to_tsvector(name || description),
  backed by the store_search_idx GIN index (migration 0002), ranked by ts_rank.
- Other databases: case-insensitive substring match per term, ranked by how
  many times the terms occur in name + description.
"""

from __future__ import annotations

import operator
from functools import reduce

from django.db import connections
from django.db.models import ExpressionWrapper, IntegerField, Q, Value
from django.db.models.functions import Length, Lower, Replace

SEARCH_FIELDS = ("name", "description")
SEARCH_CONFIG = "english"


def search_terms(query: str) -> list[str]:
    terms = []
    for term in (query or "").lower().split():
        if term not in terms:
            terms.append(term)
    return terms


def _occurrences(field: str, term: str):
    lowered = Lower(field)
    return (Length(lowered) - Length(Replace(lowered, Value(term), Value("")))) / Value(len(term))


def keyword_search(queryset, terms: list[str]):
    match = Q()
    for term in terms:
        match |= Q(name__icontains=term) | Q(description__icontains=term)

    rank = reduce(operator.add, [_occurrences(f, t) for t in terms for f in SEARCH_FIELDS])
    return (
        queryset.filter(match)
        .annotate(rank=ExpressionWrapper(rank, output_field=IntegerField()))
        .order_by("-rank", "name")
    )


def full_text_search(queryset, terms: list[str]):
    # Requires psycopg, so only imported on PostgreSQL connections
    from django.contrib.postgres.search import SearchQuery, SearchRank, SearchVector

    vector = SearchVector(*SEARCH_FIELDS, config=SEARCH_CONFIG)
    query = reduce(operator.or_, [SearchQuery(t, config=SEARCH_CONFIG) for t in terms])
    return (
        queryset.annotate(document=vector)
        .filter(document=query)
        .annotate(rank=SearchRank(vector, query))
        .order_by("-rank", "name")
    )


def search_stores(queryset, query: str):
    terms = search_terms(query)
    if not terms:
        return queryset.none()

    if connections[queryset.db].vendor == "postgresql":
        return full_text_search(queryset, terms)
    return keyword_search(queryset, terms)
