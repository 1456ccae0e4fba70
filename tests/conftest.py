"""Shared test doubles: canned HTTP responses and a routing session.

No test touches the network; pages are pinned snapshots under
`tests/fixtures/`.
"""

from pathlib import Path

import pytest
import requests
from requests.structures import CaseInsensitiveDict

FIXTURES = Path(__file__).parent / "fixtures"


class DummyResponse:
    def __init__(self, text="", status_code=200, headers=None, chunks=None, error=None):
        self.text = text
        self.status_code = status_code
        self.headers = CaseInsensitiveDict(headers or {})
        self._chunks = chunks or []
        self._error = error
        self.closed = False

    def raise_for_status(self):
        if self.status_code >= 400:
            raise requests.HTTPError(f"{self.status_code} Error")

    def iter_content(self, chunk_size=1):
        for chunk in self._chunks:
            yield chunk
        if self._error is not None:
            raise self._error

    def __enter__(self):
        return self

    def __exit__(self, *exc_info):
        self.closed = True

    def close(self):
        self.closed = True


class DummySession:
    """Stands in for requests.Session; answers from a url -> response map."""

    def __init__(self, routes=None):
        self.routes = routes or {}
        self.calls = []
        self.closed = False

    def get(self, url, headers=None, timeout=None, **kwargs):
        self.calls.append({"url": url, "headers": headers, "timeout": timeout, **kwargs})
        answer = self.routes.get(url)
        if answer is None:
            return DummyResponse(status_code=404)
        if isinstance(answer, Exception):
            raise answer
        return answer

    def close(self):
        self.closed = True


@pytest.fixture
def dummy_response():
    return DummyResponse


@pytest.fixture
def session():
    return DummySession()


@pytest.fixture
def fixture_html():
    def _read(name: str) -> str:
        return (FIXTURES / name).read_text(encoding="utf-8")

    return _read
