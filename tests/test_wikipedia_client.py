"""Tests for WikipediaClient."""

import json
from unittest.mock import MagicMock

import httpx
import pytest

from wikiexplorer.data import Article, Geo
from wikiexplorer.errors import (
    DECODING_ERROR,
    INVALID_RESPONSE,
    NETWORK_UNAVAILABLE,
    NO_RESULTS,
    REQUEST_TIMEOUT,
    ErrorKind,
    WikipediaError,
)
from wikiexplorer.search import WikipediaClient


def _mock_response(data: object, status_code: int = 200) -> MagicMock:
    response = MagicMock()
    response.status_code = status_code
    response.json.return_value = data
    return response


class TestWikipediaClient:
    """Tests for WikipediaClient."""

    @pytest.fixture
    def mock_response_data(self) -> dict:
        """Sample formatversion=2 query response."""
        return {
            "batchcomplete": True,
            "query": {
                "pages": [
                    {
                        "pageid": 2,
                        "title": "alcatraz Island",
                        "fullurl": "https://en.wikipedia.org/wiki/Alcatraz_Island",
                        "coordinates": [{"lat": 37.8267, "lon": -122.423, "primary": True}],
                    },
                    {
                        "pageid": 1,
                        "title": "Golden Gate Bridge",
                        "fullurl": "https://en.wikipedia.org/wiki/Golden_Gate_Bridge",
                        "thumbnail": {
                            "source": "https://upload.wikimedia.org/gg.jpg",
                            "width": 200,
                            "height": 150,
                        },
                        "coordinates": [{"lat": 37.8199, "lon": -122.4783}],
                    },
                    {"pageid": 3, "title": "Bay Area"},
                ]
            },
        }

    @pytest.fixture
    def client(self) -> WikipediaClient:
        return WikipediaClient(user_agent="test-agent/1.0")

    def test_init_requires_user_agent(self) -> None:
        with pytest.raises(ValueError, match="User-Agent"):
            WikipediaClient(user_agent="")

    def test_language_selects_edition(self) -> None:
        assert WikipediaClient(language="de").base_url == "https://de.wikipedia.org/w/api.php"

    async def test_search_returns_sorted_articles(
        self,
        client: WikipediaClient,
        mock_response_data: dict,
        monkeypatch: pytest.MonkeyPatch,
    ) -> None:
        async def mock_get(*args, **kwargs):
            return _mock_response(mock_response_data)

        monkeypatch.setattr(httpx.AsyncClient, "get", mock_get)

        articles = await client.search("san francisco", 20)

        assert [a.title for a in articles] == [
            "alcatraz Island",
            "Bay Area",
            "Golden Gate Bridge",
        ]
        assert all(isinstance(a, Article) for a in articles)
        golden_gate = articles[2]
        assert golden_gate.id == 1
        assert golden_gate.thumbnail_url == "https://upload.wikimedia.org/gg.jpg"
        assert golden_gate.geo == Geo(lat=37.8199, lon=-122.4783)
        assert articles[1].geo is None
        assert articles[1].full_url is None

    async def test_search_params(
        self,
        client: WikipediaClient,
        mock_response_data: dict,
        monkeypatch: pytest.MonkeyPatch,
    ) -> None:
        captured: dict = {}

        async def mock_get(self, url, params=None):
            captured["url"] = url
            captured.update(params or {})
            return _mock_response(mock_response_data)

        monkeypatch.setattr(httpx.AsyncClient, "get", mock_get)

        await client.search("Swift", 15)

        assert captured["url"] == "https://en.wikipedia.org/w/api.php"
        assert captured["action"] == "query"
        assert captured["formatversion"] == "2"
        assert captured["generator"] == "search"
        assert captured["gsrsearch"] == "Swift"
        assert captured["gsrlimit"] == 15
        assert captured["prop"] == "coordinates|pageimages|info"

    async def test_nearby_params(
        self,
        client: WikipediaClient,
        mock_response_data: dict,
        monkeypatch: pytest.MonkeyPatch,
    ) -> None:
        captured: dict = {}

        async def mock_get(self, url, params=None):
            captured.update(params or {})
            return _mock_response(mock_response_data)

        monkeypatch.setattr(httpx.AsyncClient, "get", mock_get)

        await client.nearby(37.7749, -122.4194, 10_000, 30)

        assert captured["generator"] == "geosearch"
        assert captured["ggscoord"] == "37.7749|-122.4194"
        assert captured["ggsradius"] == 10_000
        assert captured["ggslimit"] == 30

    async def test_sends_user_agent(self, mock_response_data: dict) -> None:
        seen: list[str] = []

        def handler(request: httpx.Request) -> httpx.Response:
            seen.append(request.headers["User-Agent"])
            return httpx.Response(200, json=mock_response_data)

        http_client = httpx.AsyncClient(
            transport=httpx.MockTransport(handler),
            headers={"User-Agent": "injected/1.0"},
        )
        async with WikipediaClient(client=http_client) as client:
            articles = await client.search("test", 5)
        await http_client.aclose()

        assert len(articles) == 3
        assert seen == ["injected/1.0"]

    async def test_empty_result_raises_no_results(
        self, client: WikipediaClient, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        async def mock_get(*args, **kwargs):
            return _mock_response({"batchcomplete": True})

        monkeypatch.setattr(httpx.AsyncClient, "get", mock_get)

        with pytest.raises(WikipediaError) as exc_info:
            await client.search("zzzxqv", 20)
        assert exc_info.value.kind == NO_RESULTS

    async def test_empty_result_passthrough_when_disabled(
        self, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        async def mock_get(*args, **kwargs):
            return _mock_response({"query": {"pages": []}})

        monkeypatch.setattr(httpx.AsyncClient, "get", mock_get)

        client = WikipediaClient(empty_results_as_error=False)
        assert await client.nearby(0.0, 0.0, 1000, 10) == []

    @pytest.mark.parametrize(
        ("status_code", "expected"),
        [
            (404, INVALID_RESPONSE),
            (301, INVALID_RESPONSE),
            (500, ErrorKind.server_error(500)),
            (503, ErrorKind.server_error(503)),
        ],
    )
    async def test_http_status_is_classified(
        self,
        client: WikipediaClient,
        monkeypatch: pytest.MonkeyPatch,
        status_code: int,
        expected: ErrorKind,
    ) -> None:
        async def mock_get(*args, **kwargs):
            return _mock_response({}, status_code=status_code)

        monkeypatch.setattr(httpx.AsyncClient, "get", mock_get)

        with pytest.raises(WikipediaError) as exc_info:
            await client.search("test", 20)
        assert exc_info.value.kind == expected

    @pytest.mark.parametrize(
        ("error", "expected"),
        [
            (httpx.ConnectError("offline"), NETWORK_UNAVAILABLE),
            (httpx.ReadTimeout("slow"), REQUEST_TIMEOUT),
            (httpx.RemoteProtocolError("garbled"), INVALID_RESPONSE),
        ],
    )
    async def test_transport_errors_are_classified(
        self,
        client: WikipediaClient,
        monkeypatch: pytest.MonkeyPatch,
        error: Exception,
        expected: ErrorKind,
    ) -> None:
        async def mock_get(*args, **kwargs):
            raise error

        monkeypatch.setattr(httpx.AsyncClient, "get", mock_get)

        with pytest.raises(WikipediaError) as exc_info:
            await client.search("test", 20)
        assert exc_info.value.kind == expected

    async def test_invalid_json_is_decoding_error(
        self, client: WikipediaClient, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        response = MagicMock()
        response.status_code = 200
        response.json.side_effect = json.JSONDecodeError("Expecting value", "<html>", 0)

        async def mock_get(*args, **kwargs):
            return response

        monkeypatch.setattr(httpx.AsyncClient, "get", mock_get)

        with pytest.raises(WikipediaError) as exc_info:
            await client.search("test", 20)
        assert exc_info.value.kind == DECODING_ERROR

    async def test_non_utf8_body_is_decoding_error(
        self, client: WikipediaClient, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        body = b'{"query": {"pages": [{"pageid": 1, "title": "caf\xe9"}]}}'

        async def mock_get(*args, **kwargs):
            return httpx.Response(
                200, content=body, request=httpx.Request("GET", "https://en.wikipedia.org")
            )

        monkeypatch.setattr(httpx.AsyncClient, "get", mock_get)

        with pytest.raises(WikipediaError) as exc_info:
            await client.search("test", 20)
        assert exc_info.value.kind == DECODING_ERROR

    async def test_unexpected_shape_is_decoding_error(
        self, client: WikipediaClient, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        async def mock_get(*args, **kwargs):
            return _mock_response({"query": {"pages": [{"title": "No id"}]}})

        monkeypatch.setattr(httpx.AsyncClient, "get", mock_get)

        with pytest.raises(WikipediaError) as exc_info:
            await client.search("test", 20)
        assert exc_info.value.kind == DECODING_ERROR
