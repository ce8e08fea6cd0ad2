"""Fuzzy matching and ranking shared by every option kind."""

from __future__ import annotations

from typing import Callable, Iterable, TypeVar

T = TypeVar("T")


def matches(text: str, query: str) -> bool:
    """Simple fuzzy match - all query chars appear in order"""
    query = query.lower()
    text = text.lower()
    qi = 0
    for c in text:
        if qi < len(query) and c == query[qi]:
            qi += 1
    return qi == len(query)


def score(text: str, query: str) -> int:
    """Relevance of text for query: prefix > substring > subsequence > none."""
    if not query:
        return 0
    text_lower = text.lower()
    query_lower = query.lower()
    if text_lower.startswith(query_lower):
        return 3
    if query_lower in text_lower:
        return 2
    if matches(text, query):
        return 1
    return 0


def rank(items: Iterable[T], query: str, key: Callable[[T], str]) -> list[T]:
    """Order items by relevance to query, highest first.

    The sort is stable and nothing is dropped; items that do not match keep
    their relative order at the end.
    """
    return sorted(items, key=lambda item: score(key(item), query), reverse=True)
