"""TMDB service for searching and fetching movie, TV and person metadata."""

import asyncio
import logging
from typing import Any, Callable, List, Optional
from urllib.parse import quote, quote_plus

import requests
import tmdbsimple as tmdb

from tmdb_search.models.media import (
    DEFAULT_LANGUAGE,
    DEFAULT_TIME_WINDOW,
    MovieDetail,
    MovieSummary,
    PersonSummary,
    TimeWindow,
    TvShowDetail,
    TvShowSummary,
)

logger = logging.getLogger(__name__)

ERROR_TAG = "TMDB API Error"

SEARCH_LIMIT = 5
TRENDING_LIMIT = 10


class TMDBError(Exception):
    """Domain exception for TMDB failures."""

    def __init__(self, message: str, original_exception: Exception = None):
        super().__init__(message)
        self.original_exception = original_exception


class InvalidArgumentError(TMDBError):
    """A required argument was missing or empty."""


class RemoteError(TMDBError):
    """The request to TMDB failed at the transport or HTTP layer."""


class NotFoundError(RemoteError):
    """TMDB answered 404 for the requested resource."""


def configure(api_key: str) -> None:
    """Set the API key tmdbsimple sends with every request."""
    tmdb.API_KEY = api_key


def _redact(message: str, api_key: str) -> str:
    # requests puts the full URL, query string included, into its messages
    if not api_key:
        return message
    for form in {api_key, quote_plus(api_key), quote(api_key, safe="")}:
        message = message.replace(form, "***")
    return message


def _describe_http_error(exc: requests.exceptions.HTTPError) -> str:
    response = exc.response
    if response is None:
        return str(exc)

    message = f"Request failed with status code {response.status_code}"
    try:
        status_message = response.json().get("status_message")
    except (ValueError, AttributeError):
        status_message = None
    if status_message:
        message = f"{message} ({status_message})"
    return message


def _request_sync(
    endpoint: str, api_key: str, fetch: Callable[[], dict[str, Any]]
) -> dict[str, Any]:
    """Run one tmdbsimple call, mapping transport failures to RemoteError (synchronous)."""
    logger.debug("GET %s", endpoint)
    try:
        return fetch()
    except requests.exceptions.HTTPError as exc:
        message = f"{ERROR_TAG}: {_redact(_describe_http_error(exc), api_key)}"
        logger.error("GET %s failed: %s", endpoint, message)
        if exc.response is not None and exc.response.status_code == 404:
            raise NotFoundError(message, exc) from exc
        raise RemoteError(message, exc) from exc
    except requests.exceptions.RequestException as exc:
        message = f"{ERROR_TAG}: {_redact(str(exc), api_key)}"
        logger.error("GET %s failed: %s", endpoint, message)
        raise RemoteError(message, exc) from exc


async def _request(
    endpoint: str, api_key: str, fetch: Callable[[], dict[str, Any]]
) -> dict[str, Any]:
    """Run one tmdbsimple call in a worker thread (async)."""
    return await asyncio.to_thread(_request_sync, endpoint, api_key, fetch)


def _require_query(query: str) -> None:
    if not query:
        raise InvalidArgumentError("Query argument is required")


def _results(data: dict[str, Any], limit: int) -> List[dict[str, Any]]:
    return (data.get("results") or [])[:limit]


async def search_movies(
    api_key: str,
    query: str,
    language: str = DEFAULT_LANGUAGE,
    region: Optional[str] = None,
) -> List[MovieSummary]:
    """Search TMDB for movies, keeping the top 5 results."""
    _require_query(query)

    params: dict[str, Any] = {"api_key": api_key, "query": query, "language": language}
    if region:
        params["region"] = region
    params["page"] = 1

    data = await _request(
        "search/movie", api_key, lambda: tmdb.Search().movie(**params)
    )
    return [MovieSummary.model_validate(m) for m in _results(data, SEARCH_LIMIT)]


async def search_tv_shows(
    api_key: str, query: str, language: str = DEFAULT_LANGUAGE
) -> List[TvShowSummary]:
    """Search TMDB for TV shows, keeping the top 5 results."""
    _require_query(query)

    data = await _request(
        "search/tv",
        api_key,
        lambda: tmdb.Search().tv(
            api_key=api_key, query=query, language=language, page=1
        ),
    )
    return [TvShowSummary.model_validate(s) for s in _results(data, SEARCH_LIMIT)]


async def search_people(
    api_key: str, query: str, language: str = DEFAULT_LANGUAGE
) -> List[PersonSummary]:
    """Search TMDB for people (actors, directors, ...), keeping the top 5 results."""
    _require_query(query)

    data = await _request(
        "search/person",
        api_key,
        lambda: tmdb.Search().person(
            api_key=api_key, query=query, language=language, page=1
        ),
    )
    return [PersonSummary.model_validate(p) for p in _results(data, SEARCH_LIMIT)]


async def get_movie_details(
    api_key: str, movie_id: int, language: str = DEFAULT_LANGUAGE
) -> MovieDetail:
    """Fetch full movie details from TMDB."""
    info = await _request(
        f"movie/{movie_id}",
        api_key,
        lambda: tmdb.Movies(movie_id).info(api_key=api_key, language=language),
    )
    return MovieDetail.model_validate(info)


async def get_tv_show_details(
    api_key: str, tv_show_id: int, language: str = DEFAULT_LANGUAGE
) -> TvShowDetail:
    """Fetch full TV show details from TMDB."""
    info = await _request(
        f"tv/{tv_show_id}",
        api_key,
        lambda: tmdb.TV(tv_show_id).info(api_key=api_key, language=language),
    )
    return TvShowDetail.model_validate(info)


async def get_trending_movies(
    api_key: str,
    time_window: TimeWindow = DEFAULT_TIME_WINDOW,
    language: str = DEFAULT_LANGUAGE,
) -> List[MovieSummary]:
    """Fetch the top 10 trending movies for the day or the week."""
    data = await _request(
        f"trending/movie/{time_window}",
        api_key,
        lambda: tmdb.Trending(media_type="movie", time_window=time_window).info(
            api_key=api_key, language=language
        ),
    )
    return [MovieSummary.model_validate(m) for m in _results(data, TRENDING_LIMIT)]


async def get_trending_tv_shows(
    api_key: str,
    time_window: TimeWindow = DEFAULT_TIME_WINDOW,
    language: str = DEFAULT_LANGUAGE,
) -> List[TvShowSummary]:
    """Fetch the top 10 trending TV shows for the day or the week."""
    data = await _request(
        f"trending/tv/{time_window}",
        api_key,
        lambda: tmdb.Trending(media_type="tv", time_window=time_window).info(
            api_key=api_key, language=language
        ),
    )
    return [TvShowSummary.model_validate(s) for s in _results(data, TRENDING_LIMIT)]
