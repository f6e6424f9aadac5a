from __future__ import annotations

import json
from typing import Any, List

import pytest
import requests

from petgen import batch

_INVALID_JSON = object()


class FakeResponse:
    def __init__(
        self,
        status_code: int = 200,
        payload: Any = None,
        content: bytes = b"",
        text: str = "",
    ):
        self.status_code = status_code
        self._payload = payload
        self.content = content
        self.text = text or (json.dumps(payload) if payload is not _INVALID_JSON else "<html>")

    def json(self) -> Any:
        if self._payload is _INVALID_JSON:
            raise json.JSONDecodeError("Expecting value", self.text, 0)
        return self._payload


def make_response(status_code: int, body: bytes) -> requests.Response:
    """Build a real requests.Response carrying a raw body."""

    response = requests.Response()
    response.status_code = status_code
    response._content = body
    response.encoding = "utf-8"
    return response


@pytest.fixture()
def invalid_json():
    return _INVALID_JSON


@pytest.fixture()
def sleeps(monkeypatch) -> List[float]:
    """Record batch pauses instead of sleeping."""

    recorded: List[float] = []
    monkeypatch.setattr(batch.time, "sleep", lambda seconds: recorded.append(seconds))
    return recorded
