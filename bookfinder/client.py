# Copyright 2026, Aiven, https://aiven.io/
#
# This file is under the Apache License, Version 2.0.
# See the file `LICENSE` for details.
from __future__ import annotations

from .base_client import BookFinderClientBase, Error, ResponseError, RetrySpec  # noqa: F401
from typing import Any, Collection, Mapping, TypedDict


class Document(TypedDict, total=False):
    """A single entry of the Open Library search `docs` list"""

    title: str
    key: str
    cover_i: int
    author_name: list[str]
    first_publish_year: int


class BookFinderClient(BookFinderClientBase):
    def search_books(
        self,
        query: str,
        limit: int | None = None,
        fields: Collection[str] | None = None,
    ) -> list[Document]:
        params: dict[str, Any] = {"q": query}
        if limit is not None:
            params["limit"] = limit
        if fields:
            params["fields"] = ",".join(fields)

        docs = self.verify(self.get, self.build_path("search.json"), params=params, result_key="docs")
        if not isinstance(docs, list):
            return []
        return [doc for doc in docs if isinstance(doc, Mapping)]
