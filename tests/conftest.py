"""Shared fixtures: a fake Transparence Politique API on httpx.MockTransport."""

import httpx
import pytest

from core.api import TransparenceClient
from core.config import ApiConfig


class FakeApi:
    """MockTransport handler serving one canned response and recording requests."""

    def __init__(self, document=None, status_code=200, text=None):
        self.document = document
        self.status_code = status_code
        self.text = text
        self.requests: list[httpx.Request] = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if self.text is not None:
            return httpx.Response(self.status_code, text=self.text)
        return httpx.Response(self.status_code, json=self.document)

    def client(self, config: ApiConfig = None) -> TransparenceClient:
        return TransparenceClient(config or ApiConfig(), transport=httpx.MockTransport(self))

    @property
    def last(self) -> httpx.Request:
        return self.requests[-1]


class UnreachableApi(FakeApi):
    """Fails the test if any request reaches the network."""

    def __call__(self, request: httpx.Request) -> httpx.Response:
        raise AssertionError(f"unexpected request to {request.url}")


@pytest.fixture
def unreachable_client() -> TransparenceClient:
    return UnreachableApi().client()


def envelope(records, page=1, limit=20, total=None, total_pages=None):
    """Build a list envelope around `records`."""
    total = len(records) if total is None else total
    if total_pages is None:
        total_pages = 1 if total else 0
    return {
        "data": records,
        "pagination": {
            "page": page,
            "limit": limit,
            "total": total,
            "totalPages": total_pages,
        },
    }
