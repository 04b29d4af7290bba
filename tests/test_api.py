"""Transport client: query building, headers, error mapping, configuration."""

import pytest

from core.api import UNKNOWN_ERROR, TransparenceClient, build_query, encode_slug
from core.config import DEFAULT_API_URL, DEFAULT_USER_AGENT, ApiConfig
from core.errors import RemoteCallError
from tests.conftest import FakeApi


def test_build_query_skips_absent_and_empty_values():
    query = build_query({"search": "", "type": None, "page": 2, "limit": 20})
    assert query == {"page": "2", "limit": "20"}


def test_build_query_keeps_order_and_stringifies_booleans():
    query = build_query({"hasAffairs": True, "search": "dupont", "archived": False})
    assert list(query.items()) == [
        ("hasAffairs", "true"),
        ("search", "dupont"),
        ("archived", "false"),
    ]


def test_build_query_accepts_none():
    assert build_query(None) == {}


def test_encode_slug_escapes_reserved_characters():
    assert encode_slug("presidentielle-2027") == "presidentielle-2027"
    assert encode_slug("a b/c?d") == "a%20b%2Fc%3Fd"
    assert encode_slug("élection") == "%C3%A9lection"


def test_url_for_tolerates_trailing_slash():
    client = TransparenceClient(ApiConfig(base_url="https://example.org/"))
    assert client.url_for("/api/votes") == "https://example.org/api/votes"


@pytest.mark.asyncio
async def test_fetch_sends_headers_and_query():
    api = FakeApi({"ok": True})

    document = await api.client().fetch("/api/elections", {"type": "MUNICIPALES", "year": None, "page": 1})

    assert document == {"ok": True}
    assert len(api.requests) == 1
    request = api.last
    assert request.method == "GET"
    assert str(request.url) == f"{DEFAULT_API_URL}/api/elections?type=MUNICIPALES&page=1"
    assert request.headers["accept"] == "application/json"
    assert request.headers["user-agent"] == DEFAULT_USER_AGENT


@pytest.mark.asyncio
async def test_fetch_uses_configured_origin_and_user_agent():
    api = FakeApi([])
    config = ApiConfig(base_url="http://localhost:3000", user_agent="tests/0.1")

    await api.client(config).fetch("/api/votes/stats")

    assert str(api.last.url) == "http://localhost:3000/api/votes/stats"
    assert api.last.headers["user-agent"] == "tests/0.1"


@pytest.mark.asyncio
async def test_fetch_raises_remote_call_error_on_404():
    api = FakeApi(status_code=404, text="Not found")

    with pytest.raises(RemoteCallError) as excinfo:
        await api.client().fetch("/api/elections/does-not-exist")

    assert excinfo.value.status == 404
    assert "404" in str(excinfo.value)
    assert "Not found" in str(excinfo.value)
    assert str(excinfo.value) == "API 404: Not found"


@pytest.mark.asyncio
async def test_fetch_raises_on_server_error():
    api = FakeApi(status_code=503, text="")

    with pytest.raises(RemoteCallError) as excinfo:
        await api.client().fetch("/api/votes")

    assert excinfo.value.status == 503
    assert str(excinfo.value) == "API 503: "


def test_unknown_error_placeholder():
    assert UNKNOWN_ERROR == "Unknown error"


def test_config_from_env(monkeypatch):
    monkeypatch.setenv("TRANSPARENCE_API_URL", "http://staging.local")
    monkeypatch.setenv("TRANSPARENCE_USER_AGENT", "")
    monkeypatch.setenv("TRANSPARENCE_LOG_LEVEL", "debug")

    config = ApiConfig.from_env()

    assert config.base_url == "http://staging.local"
    assert config.user_agent == DEFAULT_USER_AGENT
    assert config.log_level == "DEBUG"


def test_config_defaults(monkeypatch):
    for name in ("TRANSPARENCE_API_URL", "TRANSPARENCE_USER_AGENT", "TRANSPARENCE_LOG_LEVEL"):
        monkeypatch.delenv(name, raising=False)

    config = ApiConfig.from_env()

    assert config == ApiConfig()
    assert config.headers == {
        "Accept": "application/json",
        "User-Agent": "transparence-politique-mcp/1.0",
    }
