"""TMDB lookup tools."""

from typing import List

from tmdb_search.models.media import (
    MovieDetailsRequest,
    MovieSearchRequest,
    PersonSearchRequest,
    TrendingRequest,
    TvShowDetailsRequest,
    TvShowSearchRequest,
)
from tmdb_search.services import tmdb
from tmdb_search.tools.base import ToolDefinition


async def _search_movies(api_key: str, args: MovieSearchRequest):
    return await tmdb.search_movies(api_key, args.query, args.language, args.region)


async def _search_tv_shows(api_key: str, args: TvShowSearchRequest):
    return await tmdb.search_tv_shows(api_key, args.query, args.language)


async def _search_person(api_key: str, args: PersonSearchRequest):
    return await tmdb.search_people(api_key, args.query, args.language)


async def _get_movie_details(api_key: str, args: MovieDetailsRequest):
    return await tmdb.get_movie_details(api_key, args.movie_id, args.language)


async def _get_tv_show_details(api_key: str, args: TvShowDetailsRequest):
    return await tmdb.get_tv_show_details(api_key, args.tv_show_id, args.language)


async def _get_trending_movies(api_key: str, args: TrendingRequest):
    return await tmdb.get_trending_movies(api_key, args.time_window, args.language)


async def _get_trending_tv(api_key: str, args: TrendingRequest):
    return await tmdb.get_trending_tv_shows(api_key, args.time_window, args.language)


TMDB_TOOLS: List[ToolDefinition] = [
    ToolDefinition(
        name="search_movies",
        description=(
            "Search for movies on TMDB by title to get metadata like overview, "
            "release date, and rating"
        ),
        arguments=MovieSearchRequest,
        handler=_search_movies,
    ),
    ToolDefinition(
        name="search_tv_shows",
        description=(
            "Search for TV shows on TMDB by title to get metadata like overview, "
            "first air date, and rating"
        ),
        arguments=TvShowSearchRequest,
        handler=_search_tv_shows,
    ),
    ToolDefinition(
        name="get_movie_details",
        description="Get detailed information about a specific movie by its ID",
        arguments=MovieDetailsRequest,
        handler=_get_movie_details,
    ),
    ToolDefinition(
        name="get_tv_show_details",
        description="Get detailed information about a specific TV show by its ID",
        arguments=TvShowDetailsRequest,
        handler=_get_tv_show_details,
    ),
    ToolDefinition(
        name="get_trending_movies",
        description="Get a list of trending movies",
        arguments=TrendingRequest,
        handler=_get_trending_movies,
    ),
    ToolDefinition(
        name="get_trending_tv",
        description="Get a list of trending TV shows",
        arguments=TrendingRequest,
        handler=_get_trending_tv,
    ),
    ToolDefinition(
        name="search_person",
        description="Search for people (actors, directors, etc.) on TMDB",
        arguments=PersonSearchRequest,
        handler=_search_person,
    ),
]
