# Copyright 2026, Aiven, https://aiven.io/
#
# This file is under the Apache License, Version 2.0.
# See the file `LICENSE` for details.
from __future__ import annotations

from bookfinder.speller import levenshtein, suggest
from typing import Any, Mapping, Sequence

import itertools
import pytest

WORDS = ["", "a", "ab", "ba", "abc", "kitten", "sitting", "hobbit", "habit", "Hobbit"]


@pytest.mark.parametrize(
    ["a", "b", "distance"],
    [
        ("", "", 0),
        ("", "abc", 3),
        ("abc", "", 3),
        ("kitten", "sitting", 3),
        ("flaw", "lawn", 2),
        ("intention", "execution", 5),
        ("hary poter", "harry potter", 2),
        ("Dune", "dune", 1),
    ],
)
def test_levenshtein(a: str, b: str, distance: int) -> None:
    assert levenshtein(a, b) == distance


def test_levenshtein_symmetry_and_identity() -> None:
    for a, b in itertools.product(WORDS, repeat=2):
        assert levenshtein(a, b) == levenshtein(b, a)
    for a in WORDS:
        assert levenshtein(a, a) == 0


def test_levenshtein_triangle_inequality() -> None:
    for a, b, c in itertools.product(WORDS, repeat=3):
        assert levenshtein(a, c) <= levenshtein(a, b) + levenshtein(b, c)


@pytest.mark.parametrize(
    ["query", "documents", "suggestion"],
    [
        ("Dune", [], "Dune"),
        ("Dune", None, "Dune"),
        ("", [], ""),
        ("", [{"title": ""}], ""),
        ("hary poter", [{"title": "Harry Potter"}, {"title": "The Hobbit"}], "harry potter"),
        ("HARRY", [{"title": "harry"}], "harry"),
        ("the hobbit", [{"title": "The Hobbit"}], "the hobbit"),
        # equal distance, the first candidate wins
        ("cat", [{"title": "bat"}, {"title": "car"}], "bat"),
        ("cat", [{"title": "car"}, {"title": "bat"}], "car"),
        # no distance ceiling
        ("xyz", [{"title": "War and Peace"}], "war and peace"),
        (
            "the lord of the rngs",
            [
                {"title": "The Fellowship of the Ring", "author_name": ["J. R. R. Tolkien"]},
                {"title": "The Lord of the Rings", "cover_i": 14625765},
                {"title": "Lord of the Flies"},
            ],
            "the lord of the rings",
        ),
    ],
)
def test_suggest(query: str, documents: Sequence[Mapping[str, Any]] | None, suggestion: str) -> None:
    assert suggest(query, documents) == suggestion


def test_suggest_scores_every_candidate() -> None:
    documents = [{"title": "Harry Potter and the Goblet of Fire"}] * 10 + [{"title": "Harry Potter"}]
    assert suggest("harry potter", documents) == "harry potter"


def test_suggest_requires_title() -> None:
    with pytest.raises(KeyError):
        suggest("dune", [{"author_name": ["Frank Herbert"]}])
