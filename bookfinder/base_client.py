# Copyright 2026, Aiven, https://aiven.io/
#
# This file is under the Apache License, Version 2.0.
# See the file `LICENSE` for details.
from __future__ import annotations

from .session import get_requests_session
from http import HTTPStatus
from requests import Response
from typing import Any, Callable, Final, Mapping, NamedTuple
from urllib.parse import quote

import datetime
import logging
import requests
import time


class RetrySpec(NamedTuple):
    attempts: int = 3
    sleep: datetime.timedelta = datetime.timedelta(milliseconds=200)


class BookFinderClientBase:
    """Open Library client with low-level HTTP operations"""

    DEFAULT_RETRY: Final = RetrySpec()

    def __init__(
        self,
        base_url: str,
        show_http: bool = False,
        request_timeout: int | None = None,
        default_retry_spec: RetrySpec = DEFAULT_RETRY,
    ) -> None:
        self.log = logging.getLogger("BookFinderClient")
        self.base_url = base_url.rstrip("/")
        self.log.debug("using %r", self.base_url)
        self.session = get_requests_session(timeout=request_timeout)
        self.http_log = logging.getLogger("bookfinder_http")
        self.init_http_logging(show_http)
        self.default_retry_spec: Final = default_retry_spec

    def init_http_logging(self, show_http: bool) -> None:
        if not self.http_log.handlers:
            http_handler = logging.StreamHandler()
            http_handler.setFormatter(logging.Formatter("%(message)s"))
            self.http_log.addHandler(http_handler)
        self.http_log.propagate = False
        self.http_log.setLevel(logging.INFO)
        if show_http:
            self.http_log.setLevel(logging.DEBUG)

    def _execute(self, func: Callable, method: str, path: str, params: Any = None) -> Response:
        url = self.base_url + path

        self.http_log.debug("-----Request Begin-----")
        self.http_log.debug("%s %s %s", method, url, params if params else "")
        for header, header_value in self.session.headers.items():
            self.http_log.debug("%s: %s", header, header_value)
        self.http_log.debug("-----Request End-----")

        response = func(url, params=params)

        self.http_log.debug("-----Response Begin-----")
        self.http_log.debug("%s %s", response.status_code, response.reason)
        for header, header_value in response.headers.items():
            self.http_log.debug("%s: %s", header, header_value)

        self.http_log.debug("")
        self.http_log.debug("%s", response.text)

        self.http_log.debug("-----Response End-----")

        if not str(response.status_code).startswith("2"):
            raise Error(response, status=response.status_code)

        return response

    def get(self, path: str = "", params: Any = None) -> Response:
        """HTTP GET"""
        return self._execute(self.session.get, "GET", path, params=params)

    def verify(
        self,
        op: Callable[..., Response],
        path: str,
        params: Any = None,
        result_key: str | None = None,
    ) -> Any:
        retry_spec = self.default_retry_spec
        attempts = retry_spec.attempts

        while attempts:
            attempts -= 1
            try:
                response = op(path=path, params=params)
                break
            except requests.exceptions.ConnectionError as ex:
                if attempts <= 0:
                    raise
                self.log.warning(
                    "%s %s failed: %s: %s; retrying in %s seconds, %s attempts left",
                    op.__name__.upper(),
                    path,
                    ex.__class__.__name__,
                    ex,
                    retry_spec.sleep.total_seconds(),
                    attempts,
                )
                time.sleep(retry_spec.sleep.total_seconds())

        return self._process_response(response=response, op=op, path=path, result_key=result_key)

    @staticmethod
    def build_path(*parts: str) -> str:
        return "/" + "/".join(quote(part, safe="") for part in parts)

    def _process_response(
        self,
        response: Response,
        op: Callable[..., Response],
        path: str,
        result_key: str | None = None,
    ) -> Any:
        if response.status_code == HTTPStatus.NO_CONTENT or len(response.content) == 0:
            return {}

        try:
            result = response.json()
        except ValueError as ex:
            raise ResponseError(
                "server returned invalid JSON: {op} {base_url}{path}: {text!r}".format(
                    op=op.__doc__, base_url=self.base_url, path=path, text=response.text[:200]
                )
            ) from ex

        if isinstance(result, Mapping) and result.get("error"):
            raise ResponseError(
                "server returned error: {op} {base_url}{path} {result}".format(
                    op=op.__doc__, base_url=self.base_url, path=path, result=result
                )
            )

        if result_key is not None:
            return result.get(result_key) if isinstance(result, Mapping) else None
        return result


class Error(Exception):
    """Request error"""

    def __init__(self, response: Response, status: int = 520) -> None:
        Exception.__init__(self, response.text, status)
        self.response = response
        self.status = status

    def __str__(self) -> str:
        response_text, status = self.args
        return f"{response_text}, status({status})"


class ResponseError(Exception):
    """Server returned error message"""
