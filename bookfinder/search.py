# Copyright 2026, Aiven, https://aiven.io/
#
# This file is under the Apache License, Version 2.0.
# See the file `LICENSE` for details.
from __future__ import annotations

from .client import BookFinderClient, Document
from .speller import suggest
from typing import Any, Final, Mapping, NamedTuple

import enum
import logging

MAX_DISPLAYED_BOOKS: Final = 15
NO_COVER_URL: Final = "https://via.placeholder.com/150x200?text=No+Cover"
COVER_SIZES: Final = ("S", "M", "L")


class SearchState(enum.Enum):
    IDLE = "idle"
    LOADING = "loading"
    DISPLAYING = "displaying"
    EMPTY = "empty"
    ERROR = "error"


class SearchResult(NamedTuple):
    query: str
    books: list[Document]
    suggestion: str
    message: str
    total: int


def cover_url(cover_id: int | str | None, covers_url: str, size: str = "M") -> str:
    if not cover_id:
        return NO_COVER_URL
    return "{}/b/id/{}-{}.jpg".format(covers_url.rstrip("/"), cover_id, size)


def book_card(doc: Mapping[str, Any], covers_url: str) -> dict[str, Any]:
    """Presentation fields of a single book"""
    authors = doc.get("author_name")
    return {
        "title": doc["title"],
        "authors": ", ".join(authors) if authors else "Unknown Author",
        "first_published": doc.get("first_publish_year") or "N/A",
        "cover_url": cover_url(doc.get("cover_i"), covers_url),
    }


class BookSearch:
    """Runs one search at a time and keeps the state shown to the user.

    The suggestion is computed over every returned document while only the
    first `max_results` of them are kept for display.
    """

    def __init__(self, client: BookFinderClient, max_results: int = MAX_DISPLAYED_BOOKS) -> None:
        self.log = logging.getLogger("BookSearch")
        self.client = client
        self.max_results = max_results
        self.state = SearchState.IDLE
        self.query = ""
        self.books: list[Document] = []
        self.suggestion = ""
        self.message = ""

    def search(self, query: str) -> SearchResult | None:
        query = query.strip()
        if not query:
            return None

        self.state = SearchState.LOADING
        self.query = query
        self.message = ""
        self.log.debug("searching for %r", query)
        try:
            docs = self.client.search_books(query)
        except Exception as ex:
            self.state = SearchState.ERROR
            self.books = []
            self.suggestion = query
            self.message = "Search for {!r} failed: {}".format(query, ex)
            raise

        if not docs:
            self.state = SearchState.EMPTY
            self.books = []
            self.suggestion = query
            self.message = 'No books found for "{}". Try another search.'.format(query)
            return self.result(total=0)

        self.suggestion = suggest(query, docs)
        if self.suggestion.lower() != query.lower():
            self.message = 'Did you mean: "{}" ? Showing results...'.format(self.suggestion)

        self.books = docs[: self.max_results]
        self.state = SearchState.DISPLAYING
        return self.result(total=len(docs))

    def result(self, total: int) -> SearchResult:
        return SearchResult(
            query=self.query,
            books=list(self.books),
            suggestion=self.suggestion,
            message=self.message,
            total=total,
        )
