# Copyright 2026, Aiven, https://aiven.io/
#
# This file is under the Apache License, Version 2.0.
# See the file `LICENSE` for details.
"""Closest-title spelling suggestions based on Levenshtein distance"""
from __future__ import annotations

from typing import Any, Mapping, Sequence


def levenshtein(a: str, b: str) -> int:
    """Minimum number of single character insertions, deletions or substitutions turning `a` into `b`."""
    previous = list(range(len(b) + 1))
    for i in range(1, len(a) + 1):
        current = [i] + [0] * len(b)
        for j in range(1, len(b) + 1):
            if a[i - 1] == b[j - 1]:
                current[j] = previous[j - 1]
            else:
                current[j] = 1 + min(previous[j], current[j - 1], previous[j - 1])
        previous = current
    return previous[len(b)]


def suggest(query: str, documents: Sequence[Mapping[str, Any]] | None) -> str:
    """Return the lower-cased title closest to `query`, or `query` itself when there is nothing to compare.

    Every document is scored; on equal distance the earliest document wins.
    """
    if not documents:
        return query

    lowered_query = query.lower()
    best_match = query
    min_distance: int | None = None
    for document in documents:
        title = document["title"].lower()
        distance = levenshtein(lowered_query, title)
        if min_distance is None or distance < min_distance:
            min_distance = distance
            best_match = title

    return best_match
