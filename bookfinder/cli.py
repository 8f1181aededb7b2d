# Copyright 2026, Aiven, https://aiven.io/
#
# This file is under the Apache License, Version 2.0.
# See the file `LICENSE` for details.
from __future__ import annotations

from . import argx
from .cliarg import arg
from .client import BookFinderClient
from .search import book_card, BookSearch, cover_url, MAX_DISPLAYED_BOOKS
from .speller import suggest
from argparse import ArgumentParser
from bookfinder import envdefault
from typing import Callable, Protocol

BOOK_COLUMNS = ["title", "authors"]
BOOK_DETAILS = ["first_published", "cover_url"]


class ClientFactory(Protocol):
    def __call__(self, base_url: str, show_http: bool, request_timeout: int | None) -> BookFinderClient:
        ...


class BookFinderCLI(argx.CommandLineTool):
    client: BookFinderClient

    def __init__(self, client_factory: ClientFactory = BookFinderClient):
        argx.CommandLineTool.__init__(self, "bookfinder")
        self.client_factory = client_factory

    def add_args(self, parser: ArgumentParser) -> None:
        parser.add_argument(
            "--url",
            help="Open Library base url [BOOKFINDER_URL], default %(default)r",
            default=envdefault.BOOKFINDER_URL,
        )
        parser.add_argument(
            "--covers-url",
            help="Open Library covers base url [BOOKFINDER_COVERS_URL], default %(default)r",
            default=envdefault.BOOKFINDER_COVERS_URL,
        )
        parser.add_argument("--show-http", help="Show HTTP requests and responses", action="store_true")
        parser.add_argument(
            "--request-timeout",
            type=int,
            default=None,
            help="Wait for up to N seconds for a response to a request (default: infinite)",
        )

    def pre_run(self, func: Callable[[], int | None]) -> None:
        self.client = self.client_factory(
            base_url=self.args.url,
            show_http=self.args.show_http,
            request_timeout=self.args.request_timeout,
        )

    def get_max_results(self) -> int:
        """Return --limit if given, else max_results from the config file, else the default"""
        limit = getattr(self.args, "limit", None)
        if limit is None:
            limit = self.config.get("max_results", MAX_DISPLAYED_BOOKS)
        if not isinstance(limit, int) or isinstance(limit, bool) or limit < 1:
            raise argx.UserError("Result limit must be a positive integer, got {!r}".format(limit))
        return limit

    @arg.query
    @arg.limit
    @arg.verbose
    @arg.json
    @arg.format
    def search(self) -> int | None:
        """Search books by title or author"""
        query = " ".join(self.args.query).strip()
        if not query:
            raise argx.UserError("Search query must not be empty")

        book_search = BookSearch(self.client, max_results=self.get_max_results())
        result = book_search.search(query)
        assert result is not None
        if result.message:
            self.log.info("%s", result.message)
        if not result.books:
            return 1

        cards = [book_card(book, self.args.covers_url) for book in result.books]
        layout = [BOOK_COLUMNS, *BOOK_DETAILS] if self.args.verbose else BOOK_COLUMNS
        self.print_response(cards, json=self.args.json, format=self.args.format, table_layout=layout)
        return None

    @arg("query", help="Query to find the closest title for")
    @arg.title
    def suggest(self) -> None:
        """Suggest the closest of the given titles for a query"""
        print(suggest(self.args.query, [{"title": title} for title in self.args.titles]))

    @arg.cover_id
    @arg.cover_size
    def cover(self) -> None:
        """Show the cover image url of a book"""
        print(cover_url(self.args.cover_id, self.args.covers_url, size=self.args.size))


if __name__ == "__main__":
    BookFinderCLI().main()
