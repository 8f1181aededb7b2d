# Copyright 2026, Aiven, https://aiven.io/
#
# This file is under the Apache License, Version 2.0.
# See the file `LICENSE` for details.

from .argx import arg
from .search import COVER_SIZES

arg.cover_id = arg("cover_id", help="Open Library cover identifier (the 'cover_i' field of a search result)")
arg.cover_size = arg("--size", choices=COVER_SIZES, default="M", help="Cover image size")
arg.format = arg("--format", help="Format string for output, e.g. '{title} ({first_published})'")
arg.json = arg("--json", help="Raw json output", action="store_true", default=False)
arg.limit = arg("--limit", type=int, help="Maximum number of books to show (default: 15)")
arg.query = arg("query", nargs="+", help="Book title or author to search for")
arg.title = arg(
    "--title",
    dest="titles",
    metavar="TITLE",
    action="append",
    default=[],
    help="Candidate title to compare the query against, may be repeated",
)
arg.verbose = arg("-v", "--verbose", help="Show authors, publish year and cover for each book", action="store_true")
