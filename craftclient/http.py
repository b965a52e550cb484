"""A small HTTP client abstraction and a standard-library implementation."""

from __future__ import annotations

import abc
import http.client
import json
import re
import ssl
import urllib.error
import urllib.request
from dataclasses import dataclass, field
from typing import Any, Mapping

from .tokenizer import Tokenizer

_LEADING_INT = re.compile(r"\s*([+-]?\d+)")


@dataclass
class HTTPResponse:
    """Status, headers and body of an HTTP response; status 0 means no response."""

    status: int = 0
    headers: dict[str, str] = field(default_factory=dict)
    body: str = ""


def parse_status(header: str) -> int:
    """Read the status code from the status line of a raw header block."""
    first = header.find(" ")
    if first == -1:
        return 0
    second = header.find(" ", first + 1)
    if second == -1:
        return 0
    match = _LEADING_INT.match(header[first + 1 : second + 1])
    return int(match.group(1)) if match else 0


def parse_response_headers(header: str) -> dict[str, str]:
    """Parse ``Key: value\\r\\n`` lines that follow the status line.

    The value keeps everything after the colon except the final character of
    the line (the carriage return).
    """
    end_first = header.find("\n")
    if end_first != -1:
        header = header[end_first + 1 :]

    lines = Tokenizer(header)
    lines.tokenize("\n")

    headers: dict[str, str] = {}
    for line in lines:
        pair = Tokenizer(line)
        pair.tokenize(":", 2)
        if len(pair) != 2 or not pair[0] or not pair[1]:
            continue
        headers[pair[0]] = pair[1][:-1]
    return headers


class HTTPClient(abc.ABC):
    """Interface for the HTTP calls made by the authentication code."""

    @abc.abstractmethod
    def get(self, url: str, headers: Mapping[str, str] | None = None) -> HTTPResponse:
        """Perform a GET request."""

    @abc.abstractmethod
    def post(
        self, url: str, data: str, headers: Mapping[str, str] | None = None
    ) -> HTTPResponse:
        """Perform a POST request with ``data`` as the body."""

    @abc.abstractmethod
    def post_json(
        self, url: str, data: Any, headers: Mapping[str, str] | None = None
    ) -> HTTPResponse:
        """POST a JSON document, given as text or as a serialisable object."""


class _NoRedirect(urllib.request.HTTPRedirectHandler):
    """Hands redirect responses back to the caller instead of following them."""

    def redirect_request(self, req, fp, code, msg, headers, newurl):
        raise urllib.error.HTTPError(req.full_url, code, msg, headers, fp)


class UrllibHTTPClient(HTTPClient):
    """HTTP client built on urllib; redirects are not followed and
    certificates are not verified."""

    def __init__(self, timeout: float = 12.0) -> None:
        self.timeout = timeout
        context = ssl.create_default_context()
        context.check_hostname = False
        context.verify_mode = ssl.CERT_NONE
        self._opener = urllib.request.build_opener(
            urllib.request.HTTPSHandler(context=context), _NoRedirect()
        )

    def _request(
        self, url: str, data: str, headers: Mapping[str, str] | None
    ) -> HTTPResponse:
        body = data.encode("utf-8") if data else None
        request = urllib.request.Request(url, data=body, headers=dict(headers or {}))

        try:
            response = self._opener.open(request, timeout=self.timeout)
        except urllib.error.HTTPError as exc:
            response = exc
        except (urllib.error.URLError, http.client.HTTPException, OSError, ValueError):
            return HTTPResponse()

        with response:
            status = response.status
            reason = getattr(response, "reason", "") or ""
            raw_header = f"HTTP/1.1 {status} {reason}\r\n" + "".join(
                f"{key}: {value}\r\n" for key, value in response.headers.items()
            )
            try:
                content = response.read()
            except (http.client.HTTPException, OSError):
                return HTTPResponse(status=parse_status(raw_header))

        return HTTPResponse(
            status=parse_status(raw_header),
            headers=parse_response_headers(raw_header),
            body=content.decode("utf-8", errors="replace"),
        )

    def get(self, url: str, headers: Mapping[str, str] | None = None) -> HTTPResponse:
        return self._request(url, "", headers)

    def post(
        self, url: str, data: str, headers: Mapping[str, str] | None = None
    ) -> HTTPResponse:
        return self._request(url, data, headers)

    def post_json(
        self, url: str, data: Any, headers: Mapping[str, str] | None = None
    ) -> HTTPResponse:
        merged = dict(headers or {})
        merged["Content-Type"] = "application/json"
        text = data if isinstance(data, str) else json.dumps(data, separators=(",", ":"))
        return self._request(url, text, merged)