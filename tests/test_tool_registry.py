import json
import logging
from unittest.mock import AsyncMock, patch

import pytest
import responses
import tmdbsimple

from tmdb_search.models.media import MovieDetail, MovieSummary, TvShowSummary
from tmdb_search.services.tmdb import InvalidArgumentError, NotFoundError, RemoteError
from tmdb_search.tools import ToolRegistry, build_registry
from tmdb_search.tools.base import ToolDefinition

API_KEY = "test-api-key"

mock_movies = [
    MovieSummary(id=27205, title="Inception", vote_average=8.4),
    MovieSummary(id=603, title="The Matrix", vote_average=8.2),
]


def _text(result):
    assert len(result.content) == 1
    return result.content[0].text


def test_build_registry_registers_all_tools():
    registry = build_registry(API_KEY)

    assert sorted(registry.names()) == [
        "get_movie_details",
        "get_trending_movies",
        "get_trending_tv",
        "get_tv_show_details",
        "search_movies",
        "search_person",
        "search_tv_shows",
    ]
    assert all(isinstance(t, ToolDefinition) for t in registry.all())


def test_input_schemas_use_wire_names():
    registry = build_registry(API_KEY)

    details = registry.get("get_movie_details").input_schema()
    assert details["type"] == "object"
    assert "movieId" in details["properties"]
    assert details["required"] == ["movieId"]

    tv = registry.get("get_tv_show_details").input_schema()
    assert "tvShowId" in tv["properties"]

    trending = registry.get("get_trending_movies").input_schema()
    assert trending["properties"]["timeWindow"]["enum"] == ["day", "week"]
    assert "required" not in trending

    search = registry.get("search_movies").input_schema()
    assert search["required"] == ["query"]
    assert set(search["properties"]) == {"query", "language", "region"}


@pytest.mark.asyncio
async def test_search_movies_success_serializes_json():
    registry = build_registry(API_KEY)

    with patch(
        "tmdb_search.services.tmdb.search_movies",
        new_callable=AsyncMock,
        return_value=mock_movies,
    ) as mock_search:
        result = await registry.call("search_movies", {"query": "Inception"})

    mock_search.assert_awaited_once_with(API_KEY, "Inception", "en-US", None)
    assert not result.isError
    payload = json.loads(_text(result))
    assert payload[0]["id"] == 27205
    assert payload[0]["title"] == "Inception"
    # pretty-printed
    assert "\n  " in _text(result)


@pytest.mark.asyncio
async def test_trending_defaults():
    registry = build_registry(API_KEY)

    with patch(
        "tmdb_search.services.tmdb.get_trending_movies",
        new_callable=AsyncMock,
        return_value=mock_movies,
    ) as mock_trending:
        result = await registry.call("get_trending_movies", {})

    mock_trending.assert_awaited_once_with(API_KEY, "week", "en-US")
    assert not result.isError


@pytest.mark.asyncio
async def test_trending_tv_accepts_wire_arguments():
    registry = build_registry(API_KEY)

    with patch(
        "tmdb_search.services.tmdb.get_trending_tv_shows",
        new_callable=AsyncMock,
        return_value=[TvShowSummary(id=1396, name="Breaking Bad")],
    ) as mock_trending:
        result = await registry.call(
            "get_trending_tv", {"timeWindow": "day", "language": "ja-JP"}
        )

    mock_trending.assert_awaited_once_with(API_KEY, "day", "ja-JP")
    assert json.loads(_text(result))[0]["name"] == "Breaking Bad"


@pytest.mark.asyncio
async def test_movie_details_by_alias():
    registry = build_registry(API_KEY)

    with patch(
        "tmdb_search.services.tmdb.get_movie_details",
        new_callable=AsyncMock,
        return_value=MovieDetail(id=27205, title="Inception", runtime=148),
    ) as mock_details:
        result = await registry.call("get_movie_details", {"movieId": 27205})

    mock_details.assert_awaited_once_with(API_KEY, 27205, "en-US")
    payload = json.loads(_text(result))
    assert payload["title"] == "Inception"
    assert payload["runtime"] == 148


@pytest.mark.asyncio
async def test_search_person_dispatches_to_search_people():
    registry = build_registry(API_KEY)

    with patch(
        "tmdb_search.services.tmdb.search_people",
        new_callable=AsyncMock,
        return_value=[],
    ) as mock_people:
        result = await registry.call("search_person", {"query": "Nolan"})

    mock_people.assert_awaited_once_with(API_KEY, "Nolan", "en-US")
    assert _text(result) == "[]"


@pytest.mark.asyncio
async def test_empty_query_returns_error_payload():
    registry = build_registry(API_KEY)

    result = await registry.call("search_tv_shows", {"query": ""})

    assert result.isError
    assert _text(result) == "Query argument is required"


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "tool_name, target, arguments",
    [
        ("search_movies", "search_movies", {"query": "x"}),
        ("search_tv_shows", "search_tv_shows", {"query": "x"}),
        ("search_person", "search_people", {"query": "x"}),
        ("get_movie_details", "get_movie_details", {"movieId": 1}),
        ("get_tv_show_details", "get_tv_show_details", {"tvShowId": 1}),
        ("get_trending_movies", "get_trending_movies", {}),
        ("get_trending_tv", "get_trending_tv_shows", {}),
    ],
)
async def test_remote_error_becomes_error_payload(tool_name, target, arguments):
    registry = build_registry(API_KEY)

    with patch(
        f"tmdb_search.services.tmdb.{target}",
        new_callable=AsyncMock,
        side_effect=RemoteError("TMDB API Error: Network Error"),
    ):
        result = await registry.call(tool_name, arguments)

    assert result.isError
    assert _text(result).startswith("TMDB API Error: ")


@pytest.mark.asyncio
async def test_not_found_becomes_error_payload():
    registry = build_registry(API_KEY)

    with patch(
        "tmdb_search.services.tmdb.get_tv_show_details",
        new_callable=AsyncMock,
        side_effect=NotFoundError(
            "TMDB API Error: Request failed with status code 404"
        ),
    ):
        result = await registry.call("get_tv_show_details", {"tvShowId": 0})

    assert result.isError
    assert "404" in _text(result)


@pytest.mark.asyncio
async def test_unexpected_error_is_caught():
    registry = build_registry(API_KEY)

    with patch(
        "tmdb_search.services.tmdb.search_movies",
        new_callable=AsyncMock,
        side_effect=KeyError("results"),
    ):
        result = await registry.call("search_movies", {"query": "x"})

    assert result.isError
    assert "results" in _text(result)


@pytest.mark.asyncio
async def test_empty_message_falls_back_to_unknown_error():
    registry = build_registry(API_KEY)

    with patch(
        "tmdb_search.services.tmdb.search_movies",
        new_callable=AsyncMock,
        side_effect=RuntimeError(),
    ):
        result = await registry.call("search_movies", {"query": "x"})

    assert result.isError
    assert _text(result) == "Unknown error occurred"


@pytest.mark.asyncio
async def test_invalid_arguments_return_error_payload():
    registry = build_registry(API_KEY)

    with patch(
        "tmdb_search.services.tmdb.get_movie_details", new_callable=AsyncMock
    ) as mock_details:
        missing = await registry.call("get_movie_details", {})
        bad_window = await registry.call("get_trending_movies", {"timeWindow": "month"})

    mock_details.assert_not_awaited()
    assert missing.isError
    assert "movieId" in _text(missing)
    assert bad_window.isError


@pytest.mark.asyncio
async def test_unknown_tool():
    registry = ToolRegistry(API_KEY)

    result = await registry.call("get_person_details", {"personId": 1})

    assert result.isError
    assert _text(result) == "Unknown tool: get_person_details"


@pytest.mark.asyncio
async def test_invalid_argument_error_is_not_raised():
    registry = build_registry(API_KEY)

    with patch(
        "tmdb_search.services.tmdb.search_people",
        new_callable=AsyncMock,
        side_effect=InvalidArgumentError("Query argument is required"),
    ):
        result = await registry.call("search_person", {"query": "  "})

    assert result.isError
    assert _text(result) == "Query argument is required"


@pytest.mark.asyncio
async def test_tv_details_with_null_fields_succeeds(monkeypatch):
    monkeypatch.setattr(tmdbsimple, "API_KEY", API_KEY)
    registry = build_registry(API_KEY)

    with responses.RequestsMock() as rsps:
        rsps.get(
            "https://api.themoviedb.org/3/tv/1",
            json={"id": 1, "name": "X", "type": None, "overview": None},
        )
        result = await registry.call("get_tv_show_details", {"tvShowId": 1})

    assert not result.isError
    payload = json.loads(_text(result))
    assert payload["name"] == "X"
    assert payload["type"] is None
    assert payload["overview"] is None


@pytest.mark.asyncio
async def test_argument_errors_are_logged_without_traceback(caplog):
    registry = build_registry(API_KEY)

    with caplog.at_level(logging.ERROR, logger="tmdb_search.tools"):
        result = await registry.call("get_movie_details", {"movieId": "abc"})

    assert result.isError
    records = [r for r in caplog.records if r.name == "tmdb_search.tools"]
    assert len(records) == 1
    assert records[0].getMessage().startswith(
        "Invalid arguments for tool 'get_movie_details'"
    )
    assert records[0].exc_info is None


@pytest.mark.asyncio
async def test_response_shape_errors_are_logged_as_unexpected(caplog):
    registry = build_registry(API_KEY)

    async def bad_response(*args):
        return MovieDetail.model_validate({"id": "not-a-number"})

    with patch(
        "tmdb_search.services.tmdb.get_movie_details",
        new_callable=AsyncMock,
        side_effect=bad_response,
    ):
        with caplog.at_level(logging.ERROR, logger="tmdb_search.tools"):
            result = await registry.call("get_movie_details", {"movieId": 1})

    assert result.isError
    assert "MovieDetail" in _text(result)
    records = [r for r in caplog.records if r.name == "tmdb_search.tools"]
    assert len(records) == 1
    assert records[0].getMessage() == "Unexpected error in tool 'get_movie_details'"
    assert records[0].exc_info is not None
