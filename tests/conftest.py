"""Pytest configuration and fixtures for har-sanitizer tests."""

from __future__ import annotations

import copy
import json
from pathlib import Path

import pytest

SET_COOKIE = "sid=s3cr3t-session; Domain=.example.com; Path=/; Expires=Wed, 21 Oct 2026 07:28:00 GMT; Secure; HttpOnly"

EXAMPLE_HAR = {
    "log": {
        "version": "1.2",
        "creator": {"name": "WebInspector", "version": "537.36"},
        "pages": [{"id": "page_1", "title": "https://example.com/", "startedDateTime": "2026-01-01T00:00:00.000Z"}],
        "entries": [
            {
                "startedDateTime": "2026-01-01T00:00:00.000Z",
                "time": 120.5,
                "serverIPAddress": "93.184.216.34",
                "timings": {"send": 1, "wait": 100, "receive": 19.5},
                "request": {
                    "method": "GET",
                    "url": "https://example.com/",
                    "httpVersion": "HTTP/1.1",
                    "headers": [
                        {"name": "Cookie", "value": "sid=abc123; theme=dark"},
                        {"name": "Accept", "value": "text/html"},
                    ],
                    "cookies": [{"name": "sid", "value": "abc123"}, {"name": "theme", "value": "dark"}],
                },
                "response": {
                    "status": 200,
                    "statusText": "OK",
                    "httpVersion": "HTTP/1.1",
                    "headers": [
                        {"name": "set-cookie", "value": SET_COOKIE},
                        {"name": "Content-Type", "value": "text/html"},
                    ],
                    "cookies": [{"name": "sid", "value": "s3cr3t-session", "path": "/", "secure": True}],
                    "content": {"size": 28, "mimeType": "text/html", "text": "<html>hello alice</html>"},
                },
            },
            {
                "startedDateTime": "2026-01-01T00:00:01.000Z",
                "time": 50,
                "request": {
                    "method": "GET",
                    "url": "https://api.example.com/me",
                    "httpVersion": "HTTP/1.1",
                    "headers": [{"name": "authorization", "value": "Bearer abc123"}],
                },
                "response": {
                    "status": 200,
                    "statusText": "OK",
                    "httpVersion": "HTTP/1.1",
                    "headers": [],
                    "content": {"size": 17, "mimeType": "application/json", "text": '{"name": "alice"}'},
                },
            },
            {
                "startedDateTime": "2026-01-01T00:00:02.000Z",
                "time": 80,
                "request": {
                    "method": "POST",
                    "url": "https://example.com/login",
                    "httpVersion": "HTTP/1.1",
                    "headers": [{"name": "Content-Type", "value": "application/json"}],
                    "postData": {
                        "mimeType": "application/json",
                        "text": '{"username": "alice", "password": "hunter2", "remember": true}',
                    },
                },
                "response": {
                    "status": 200,
                    "statusText": "OK",
                    "httpVersion": "HTTP/1.1",
                    "headers": [],
                    "content": {
                        "size": 60,
                        "mimeType": "application/json; charset=utf-8",
                        "text": '{"access_token": "tok-123", "expires_in": 3600}',
                    },
                },
            },
        ],
    }
}


@pytest.fixture
def example_har() -> dict:
    """A small HAR document with cookies, an Authorization header and a login POST."""
    return copy.deepcopy(EXAMPLE_HAR)


@pytest.fixture
def write_har(tmp_path: Path):
    """Write a HAR log with the given entries to ``tmp_path`` and return its path."""

    def _write(entries: list | None = None, *, name: str = "capture.har", **log_fields) -> Path:
        path = tmp_path / name
        path.write_text(json.dumps({"log": {"version": "1.2", **log_fields, "entries": entries or []}}))
        return path

    return _write


@pytest.fixture
def make_entry():
    """Build a minimal entry holding only the parts a test sets."""

    def _make(
        url: str = "https://example.com/",
        *,
        method: str = "GET",
        request_headers: list[dict] | None = None,
        response_headers: list[dict] | None = None,
        post_data: dict | None = None,
        body: str | None = None,
        mime_type: str = "text/html",
    ) -> dict:
        request = {"method": method, "url": url, "headers": request_headers or [], "cookies": []}
        if post_data is not None:
            request["postData"] = post_data

        content: dict = {"mimeType": mime_type}
        if body is not None:
            content["text"] = body
        response = {"status": 200, "headers": response_headers or [], "cookies": [], "content": content}

        return {"request": request, "response": response}

    return _make
