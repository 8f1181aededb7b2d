# Copyright 2026, Aiven, https://aiven.io/
#
# This file is under the Apache License, Version 2.0.
# See the file `LICENSE` for details.
"""Pretty-print book cards as tables"""
from __future__ import annotations

from typing import Any, cast, Collection, Iterator, List, Mapping, TextIO, Tuple, Union

import json
import sys

ResultType = Collection[Mapping[str, Any]]
TableLayout = Collection[Union[List[str], Tuple[str], str]]


def format_item(value: Any) -> str:
    if isinstance(value, list):
        return ", ".join(format_item(entry) for entry in value)
    if isinstance(value, dict):
        return json.dumps(value, sort_keys=True)
    if value is None:
        return ""
    return "{}".format(value)


def flatten_list(complex_list: TableLayout | None) -> Collection[str]:
    """Flatten a multi-dimensional list to 1D list"""
    if complex_list is None:
        return []
    flattened_list: list[str] = []
    for level1 in complex_list:
        if isinstance(level1, (list, tuple)):
            flattened_list.extend(flatten_list(level1))
        else:
            flattened_list.append(level1)
    return flattened_list


def yield_table(
    result: ResultType,
    table_layout: TableLayout | None = None,
) -> Iterator[str]:
    """
    format a list of dicts in a table yielding string rows

    :param list result: List of dicts to be printed.
    :param list table_layout: Fields to be printed, could be 1D or 2D list. Examples:
        ["title", "authors"] or
        [["title", "authors"]] or
        [["title", "authors"], "first_published", "cover_url"]
        The first row is printed horizontally, the rest as indented `key = value` lines.
    """
    widths: dict[str, int] = {}
    formatted_values: list[dict[str, str]] = []
    flattened_table_layout = flatten_list(table_layout)
    for item in result:
        formatted_row: dict[str, str] = {}
        formatted_values.append(formatted_row)
        for key, value in item.items():
            if table_layout is not None and key not in flattened_table_layout:
                continue
            formatted_row[key] = format_item(value)
            widths[key] = max(len(key), len(formatted_row[key]), widths.get(key, 1))

    # default table layout is one row per item with sorted field names
    if table_layout is None:
        table_layout = sorted(widths)
    if not isinstance(next(iter(table_layout), []), (list, tuple)):
        table_layout = [cast(List[str], table_layout)]

    horizontal_fields: Collection[str] = next(iter(table_layout), [])
    for field in horizontal_fields:
        widths.setdefault(field, len(field))
    yield "  ".join(f.upper().ljust(widths[f]) for f in horizontal_fields).rstrip()
    yield "  ".join("=" * widths[f] for f in horizontal_fields)
    vertical_fields = list(table_layout)[1:]
    for row_num, formatted_row in enumerate(formatted_values):
        if vertical_fields and row_num > 0:
            yield ""
        yield "  ".join(formatted_row.get(f, "").ljust(widths[f]) for f in horizontal_fields).rstrip()
        fields_to_print = [
            (field, formatted_row[field]) for field in cast(List[str], vertical_fields) if field in formatted_row
        ]
        if fields_to_print:
            max_key_width = max(len(key) for key, _ in fields_to_print)
            for key, value in fields_to_print:
                yield "    {:{}} = {}".format(key, max_key_width, value)


def print_table(
    result: ResultType | None,
    table_layout: TableLayout | None = None,
    file: TextIO | None = None,
) -> None:
    """print a list of dicts in a table"""
    if not result:
        return
    for row in yield_table(result, table_layout=table_layout):
        print(row, file=file or sys.stdout)
