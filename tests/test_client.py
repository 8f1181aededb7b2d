# Copyright 2026, Aiven, https://aiven.io/
#
# This file is under the Apache License, Version 2.0.
# See the file `LICENSE` for details.
from __future__ import annotations

from bookfinder import BookFinderClient
from bookfinder.client import Error, ResponseError, RetrySpec
from http import HTTPStatus
from typing import Any
from unittest import mock

import datetime
import json
import pytest
import requests


class MockResponse:
    def __init__(
        self,
        status_code: int | HTTPStatus,
        json_data: Any = None,
        headers: dict[str, str] | None = None,
        content: bytes | None = None,
    ):
        self.status_code = status_code.value if isinstance(status_code, HTTPStatus) else status_code
        self.json_data = json_data
        if content is not None:
            self.content = content
        elif json_data is not None:
            self.content = json.dumps(json_data).encode("utf-8")
        else:
            self.content = b""
        self.headers = {} if headers is None else headers
        self.text = self.content.decode("utf-8")
        self.reason = ""

    def json(self) -> Any:
        return self.json_data


def json_response(data: Any, status_code: int | HTTPStatus = HTTPStatus.OK) -> MockResponse:
    return MockResponse(status_code=status_code, headers={"content-type": "application/json"}, json_data=data)


def test_search_books_sends_query() -> None:
    client = BookFinderClient("https://openlibrary.org/")
    response = json_response({"numFound": 1, "docs": [{"title": "Dune"}]})
    with mock.patch.object(client.session, "get", return_value=response) as get:
        assert client.search_books("dune", limit=5, fields=["title", "author_name"]) == [{"title": "Dune"}]
    get.assert_called_once_with(
        "https://openlibrary.org/search.json",
        params={"q": "dune", "limit": 5, "fields": "title,author_name"},
    )


@pytest.mark.parametrize(
    "payload,expected",
    [
        ({"docs": []}, []),
        ({"numFound": 0}, []),
        ({"docs": "not a list"}, []),
        ({"docs": [{"title": "Emma"}, "junk", None, {"title": "Persuasion"}]}, [{"title": "Emma"}, {"title": "Persuasion"}]),
    ],
)
def test_search_books_docs_handling(payload: dict[str, Any], expected: list[dict[str, Any]]) -> None:
    client = BookFinderClient("")
    with mock.patch("bookfinder.base_client.BookFinderClientBase._execute", return_value=json_response(payload)):
        assert client.search_books("emma") == expected


@pytest.mark.parametrize(
    "response",
    [
        MockResponse(status_code=HTTPStatus.NO_CONTENT),
        MockResponse(status_code=HTTPStatus.OK, content=b""),
    ],
)
def test_no_content_returned_from_api(response: MockResponse) -> None:
    client = BookFinderClient("")
    with mock.patch("bookfinder.base_client.BookFinderClientBase._execute", return_value=response):
        assert client.verify(client.get, "/search.json") == {}
        assert client.search_books("anything") == []


def test_response_processing_error_raise() -> None:
    response = json_response({"error": "query too short"})

    def operation() -> MockResponse:
        """test operation"""
        return response

    client = BookFinderClient("test_base_url")
    with pytest.raises(ResponseError, match="test operation test_base_url/search.json"):
        client._process_response(response=response, op=operation, path="/search.json")  # type: ignore


def test_non_success_status_raises_error() -> None:
    client = BookFinderClient("https://openlibrary.org")
    response = MockResponse(status_code=HTTPStatus.SERVICE_UNAVAILABLE, content=b"down for maintenance")
    with mock.patch.object(client.session, "get", return_value=response):
        with pytest.raises(Error) as excinfo:
            client.search_books("dune")
    assert excinfo.value.status == 503
    assert str(excinfo.value) == "down for maintenance, status(503)"


def test_connection_errors_are_retried() -> None:
    client = BookFinderClient("https://openlibrary.org")
    responses = [
        requests.exceptions.ConnectionError("reset"),
        requests.exceptions.ConnectionError("reset"),
        json_response({"docs": [{"title": "Dune"}]}),
    ]
    with mock.patch.object(client.session, "get", side_effect=responses) as get, mock.patch("time.sleep") as sleep:
        assert client.search_books("dune") == [{"title": "Dune"}]
    assert get.call_count == 3
    assert sleep.call_count == 2


def test_connection_errors_give_up_after_attempts() -> None:
    retry = RetrySpec(attempts=2, sleep=datetime.timedelta(0))
    client = BookFinderClient("https://openlibrary.org", default_retry_spec=retry)
    with mock.patch.object(client.session, "get", side_effect=requests.exceptions.ConnectionError("reset")) as get:
        with pytest.raises(requests.exceptions.ConnectionError):
            client.search_books("dune")
    assert get.call_count == 2


def test_show_http_logs_request_and_response(caplog: pytest.LogCaptureFixture) -> None:
    client = BookFinderClient("https://openlibrary.org", show_http=True)
    client.http_log.propagate = True
    response = json_response({"docs": []})
    with mock.patch.object(client.session, "get", return_value=response):
        client.search_books("dune")
    assert "GET https://openlibrary.org/search.json {'q': 'dune'}" in caplog.text
    assert "-----Response End-----" in caplog.text


class TextResponse(MockResponse):
    def json(self) -> Any:
        return json.loads(self.text)


def test_non_json_body_raises_response_error() -> None:
    client = BookFinderClient("https://openlibrary.org")
    response = TextResponse(
        status_code=HTTPStatus.OK,
        headers={"content-type": "text/html"},
        content=b"<html><body>Down for maintenance</body></html>",
    )
    with mock.patch.object(client.session, "get", return_value=response):
        with pytest.raises(ResponseError, match="server returned invalid JSON: HTTP GET https://openlibrary.org/search.json"):
            client.search_books("dune")


def test_non_mapping_body_yields_no_docs() -> None:
    client = BookFinderClient("")
    with mock.patch("bookfinder.base_client.BookFinderClientBase._execute", return_value=json_response(["Dune"])):
        assert client.search_books("dune") == []
