"""Tests for the AniList GraphQL HTTP client.

Covers request shaping (operation name, variables, headers), response parsing
into typed models, and the mapping of HTTP and GraphQL failures onto
TransportError and RemoteError.
"""

import json
from pathlib import Path

import httpx
import pytest
import respx
from httpx import Response

from anilist_sdk.client.anilist import AniListClient
from anilist_sdk.errors import (
    RemoteError,
    ResponseShapeError,
    TransportError,
    UnknownOperationError,
)
from anilist_sdk.models import GetAnimeByIdQuery
from anilist_sdk.services.anime import AnimeService
from anilist_sdk.settings import DEFAULT_API_URL, Settings

API_URL = DEFAULT_API_URL


@pytest.fixture
def test_fixtures_dir() -> Path:
    """Return the path to the test fixtures directory."""
    return Path(__file__).parent / "test_fixtures" / "anilist"


@pytest.fixture
def anime_by_id_response(test_fixtures_dir: Path) -> dict:
    """Load the GetAnimeById response fixture."""
    with open(test_fixtures_dir / "get_anime_by_id_response.json", encoding="utf-8") as f:
        return json.load(f)


@pytest.fixture
def error_response(test_fixtures_dir: Path) -> dict:
    """Load the AniList 404 error response fixture."""
    with open(test_fixtures_dir / "error_response.json", encoding="utf-8") as f:
        return json.load(f)


@pytest.fixture
def rate_limit_response(test_fixtures_dir: Path) -> dict:
    """Load the AniList rate-limit (429) error response fixture."""
    with open(test_fixtures_dir / "rate_limit_response.json", encoding="utf-8") as f:
        return json.load(f)


@pytest.fixture
def settings(monkeypatch: pytest.MonkeyPatch) -> Settings:
    """Settings isolated from the caller's environment."""
    for key in ("ANILIST_API_URL", "ANILIST_TIMEOUT", "ANILIST_ACCESS_TOKEN"):
        monkeypatch.delenv(key, raising=False)
    return Settings(_env_file=None)


@pytest.mark.asyncio
async def test_execute_get_anime_by_id(
    anime_by_id_response: dict, settings: Settings
) -> None:
    """A successful response is parsed into the operation's model."""
    with respx.mock:
        route = respx.post(API_URL).mock(
            return_value=Response(200, json=anime_by_id_response)
        )

        client = AniListClient(settings=settings)
        result = await client.execute("GetAnimeById", {"id": 1535})

        assert isinstance(result, GetAnimeByIdQuery)
        media = result.media
        assert media is not None
        assert media.id == 1535
        assert media.title.best() == "Death Note"
        assert media.season_year == 2006
        assert media.cover_image.extra_large.endswith("bx1535.jpg")
        assert media.characters.page_info.has_next_page is True
        assert [edge.node.name.full for edge in media.characters.edges] == [
            "Light Yagami",
            "L",
        ]
        assert media.staff.edges[0].node.primary_occupations == ["Mangaka"]
        assert media.studios.edges[0].is_main is True
        assert media.studios.edges[0].node.name == "MADHOUSE"

        sent = json.loads(route.calls.last.request.content)
        assert sent["operationName"] == "GetAnimeById"
        assert sent["variables"] == {"id": 1535, "page": 1, "perPage": 25}
        assert "query GetAnimeById(" in sent["query"]
        assert "fragment CharacterFragment on Character" in sent["query"]


@pytest.mark.asyncio
async def test_request_headers_without_token(settings: Settings) -> None:
    with respx.mock:
        route = respx.post(API_URL).mock(
            return_value=Response(200, json={"data": {"Media": None}})
        )

        client = AniListClient(settings=settings)
        await client.execute("GetAnimeByTitle", {"title": "Nope"})

        headers = route.calls.last.request.headers
        assert headers["Accept"] == "application/json"
        assert "Authorization" not in headers


@pytest.mark.asyncio
async def test_access_token_sent_as_bearer(settings: Settings) -> None:
    with respx.mock:
        route = respx.post(API_URL).mock(
            return_value=Response(200, json={"data": {"Page": {"media": []}}})
        )

        client = AniListClient(access_token="secret-token", settings=settings)
        await client.execute("GetAnimeTrending")

        headers = route.calls.last.request.headers
        assert headers["Authorization"] == "Bearer secret-token"


@pytest.mark.asyncio
async def test_access_token_from_settings(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("ANILIST_ACCESS_TOKEN", "env-token")
    monkeypatch.setenv("ANILIST_API_URL", "https://example.test/graphql")
    with respx.mock:
        route = respx.post("https://example.test/graphql").mock(
            return_value=Response(200, json={"data": {}})
        )

        client = AniListClient(settings=Settings(_env_file=None))
        await client.execute("GetAnimeStaff", {"id": 1})

        assert route.calls.last.request.headers["Authorization"] == "Bearer env-token"


@pytest.mark.asyncio
async def test_graphql_error_with_404_raises_remote_error(
    error_response: dict, settings: Settings
) -> None:
    """AniList reports an unknown id as a 404 carrying GraphQL errors."""
    with respx.mock:
        respx.post(API_URL).mock(return_value=Response(404, json=error_response))

        client = AniListClient(settings=settings)
        with pytest.raises(RemoteError) as exc_info:
            await client.execute("GetAnimeById", {"id": 9999999})

        assert exc_info.value.status_code == 404
        assert exc_info.value.messages == ["Not Found."]
        assert exc_info.value.errors == error_response["errors"]


@pytest.mark.asyncio
async def test_rate_limit_is_not_retried(
    rate_limit_response: dict, settings: Settings
) -> None:
    with respx.mock:
        route = respx.post(API_URL).mock(
            return_value=Response(429, json=rate_limit_response)
        )

        client = AniListClient(settings=settings)
        with pytest.raises(RemoteError, match="Too Many Requests"):
            await client.execute("GetAnimePopular")

        assert route.call_count == 1


@pytest.mark.asyncio
async def test_graphql_error_with_200_raises_remote_error(settings: Settings) -> None:
    payload = {
        "errors": [{"message": 'Unknown argument "foo".'}],
        "data": None,
    }
    with respx.mock:
        respx.post(API_URL).mock(return_value=Response(200, json=payload))

        client = AniListClient(settings=settings)
        with pytest.raises(RemoteError) as exc_info:
            await client.execute("SearchAnime", {"query": "x"})

        assert exc_info.value.status_code == 200


@pytest.mark.asyncio
async def test_server_error_without_json_raises_transport_error(
    settings: Settings,
) -> None:
    with respx.mock:
        respx.post(API_URL).mock(
            return_value=Response(502, text="<html>Bad Gateway</html>")
        )

        client = AniListClient(settings=settings)
        with pytest.raises(TransportError) as exc_info:
            await client.execute("GetAnimeTrending")

        assert exc_info.value.status_code == 502


@pytest.mark.asyncio
async def test_http_error_with_json_body_raises_transport_error(
    settings: Settings,
) -> None:
    with respx.mock:
        respx.post(API_URL).mock(return_value=Response(500, json={"data": None}))

        client = AniListClient(settings=settings)
        with pytest.raises(TransportError) as exc_info:
            await client.execute("GetAnimeTrending")

        assert exc_info.value.status_code == 500


@pytest.mark.asyncio
@pytest.mark.parametrize("exc", [httpx.ConnectError, httpx.ReadTimeout])
async def test_network_failure_raises_transport_error(
    exc: type[Exception], settings: Settings
) -> None:
    with respx.mock:
        respx.post(API_URL).mock(side_effect=exc)

        client = AniListClient(settings=settings)
        with pytest.raises(TransportError) as exc_info:
            await client.execute("GetAnimeCharacters", {"id": 1})

        assert isinstance(exc_info.value.__cause__, exc)


@pytest.mark.asyncio
async def test_malformed_data_raises_response_shape_error(settings: Settings) -> None:
    with respx.mock:
        respx.post(API_URL).mock(
            return_value=Response(200, json={"data": {"Media": "not-an-object"}})
        )

        client = AniListClient(settings=settings)
        with pytest.raises(ResponseShapeError):
            await client.execute("GetAnimeById", {"id": 1})


@pytest.mark.asyncio
async def test_unknown_operation_makes_no_request(settings: Settings) -> None:
    with respx.mock(assert_all_called=False):
        route = respx.post(API_URL).mock(return_value=Response(200, json={}))

        client = AniListClient(settings=settings)
        with pytest.raises(UnknownOperationError):
            await client.execute("GetMangaById", {"id": 1})

        assert route.call_count == 0


@pytest.mark.asyncio
async def test_context_manager_owns_and_closes_http_client(settings: Settings) -> None:
    with respx.mock:
        respx.post(API_URL).mock(return_value=Response(200, json={"data": {}}))

        async with AniListClient(settings=settings) as client:
            http_client = client._http_client
            assert http_client is not None
            await client.execute("GetAnimeRelations", {"id": 1})
            await client.execute("GetAnimeRecommendations", {"id": 1})
            assert client._http_client is http_client

        assert http_client.is_closed
        assert client._http_client is None


@pytest.mark.asyncio
async def test_injected_http_client_is_not_closed(settings: Settings) -> None:
    with respx.mock:
        respx.post(API_URL).mock(return_value=Response(200, json={"data": {}}))

        async with httpx.AsyncClient() as http_client:
            async with AniListClient(http_client=http_client, settings=settings) as client:
                await client.execute("GetAnimeStaff", {"id": 1})

            assert not http_client.is_closed


@pytest.mark.asyncio
async def test_handled_remote_error_writes_nothing_to_stderr(
    error_response: dict, settings: Settings, capfd: pytest.CaptureFixture[str]
) -> None:
    """A caught RemoteError leaves no trace on the console."""
    with respx.mock:
        respx.post(API_URL).mock(return_value=Response(404, json=error_response))

        service = AnimeService(AniListClient(settings=settings))
        with pytest.raises(RemoteError):
            await service.get_anime_by_id(999999)

    out, err = capfd.readouterr()
    assert err == ""
    assert out == ""


@pytest.mark.asyncio
async def test_string_errors_payload_is_one_message(settings: Settings) -> None:
    with respx.mock:
        respx.post(API_URL).mock(
            return_value=Response(400, json={"errors": "Bad request"})
        )

        client = AniListClient(settings=settings)
        with pytest.raises(RemoteError) as exc_info:
            await client.execute("GetAnimeTrending")

        assert exc_info.value.messages == ["Bad request"]
        assert exc_info.value.errors == ["Bad request"]
        assert str(exc_info.value) == "Bad request"
