"""Media models for TMDB records and tool requests.

Records accept every extra field TMDB returns so that serializing a record
reproduces the full remote payload, not only the fields declared here.
Every declared field except the numeric id is nullable, since TMDB sends
null for any value it lacks.
"""

from typing import Any, List, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field

DEFAULT_LANGUAGE = "en-US"
DEFAULT_TIME_WINDOW = "week"

TimeWindow = Literal["day", "week"]

LANGUAGE_DESCRIPTION = "Language code (e.g. 'en-US', 'zh-CN')"


class TMDBRecord(BaseModel):
    """Base for records shaped by the remote API."""

    model_config = ConfigDict(extra="allow")


class Genre(TMDBRecord):
    id: int
    name: Optional[str] = None


class Company(TMDBRecord):
    """A production company."""

    id: int
    name: Optional[str] = None
    logo_path: Optional[str] = None
    origin_country: Optional[str] = None


class Network(Company):
    """A TV network."""


class Country(TMDBRecord):
    iso_3166_1: Optional[str] = None
    name: Optional[str] = None


class SpokenLanguage(TMDBRecord):
    iso_639_1: Optional[str] = None
    name: Optional[str] = None
    english_name: Optional[str] = None


class Creator(TMDBRecord):
    """A TV show creator."""

    id: int
    name: Optional[str] = None
    credit_id: Optional[str] = None
    gender: Optional[int] = None
    profile_path: Optional[str] = None


class MovieSummary(TMDBRecord):
    """A movie as returned by search and trending endpoints."""

    id: int
    title: Optional[str] = None
    original_title: Optional[str] = None
    overview: Optional[str] = None
    release_date: Optional[str] = None
    vote_average: Optional[float] = None
    vote_count: Optional[int] = None
    popularity: Optional[float] = None
    poster_path: Optional[str] = None
    backdrop_path: Optional[str] = None
    adult: Optional[bool] = None
    original_language: Optional[str] = None
    genre_ids: Optional[List[int]] = None
    video: Optional[bool] = None


class TvShowSummary(TMDBRecord):
    """A TV show as returned by search and trending endpoints."""

    id: int
    name: Optional[str] = None
    original_name: Optional[str] = None
    overview: Optional[str] = None
    first_air_date: Optional[str] = None
    vote_average: Optional[float] = None
    vote_count: Optional[int] = None
    popularity: Optional[float] = None
    poster_path: Optional[str] = None
    backdrop_path: Optional[str] = None
    original_language: Optional[str] = None
    genre_ids: Optional[List[int]] = None
    origin_country: Optional[List[str]] = None


class PersonSummary(TMDBRecord):
    """A person (actor, director, ...) as returned by person search."""

    id: int
    name: Optional[str] = None
    original_name: Optional[str] = None
    known_for_department: Optional[str] = None
    profile_path: Optional[str] = None
    popularity: Optional[float] = None
    gender: Optional[int] = None
    adult: Optional[bool] = None
    # Mixed movie and TV records, kept as TMDB sends them
    known_for: Optional[List[dict[str, Any]]] = None


class MovieDetail(MovieSummary):
    """A movie with full TMDB data."""

    belongs_to_collection: Optional[dict[str, Any]] = None
    budget: Optional[int] = None
    genres: Optional[List[Genre]] = None
    homepage: Optional[str] = None
    imdb_id: Optional[str] = None
    production_companies: Optional[List[Company]] = None
    production_countries: Optional[List[Country]] = None
    revenue: Optional[int] = None
    runtime: Optional[int] = None
    spoken_languages: Optional[List[SpokenLanguage]] = None
    status: Optional[str] = None
    tagline: Optional[str] = None


class TvShowDetail(TvShowSummary):
    """A TV show with full TMDB data."""

    created_by: Optional[List[Creator]] = None
    episode_run_time: Optional[List[int]] = None
    genres: Optional[List[Genre]] = None
    homepage: Optional[str] = None
    in_production: Optional[bool] = None
    languages: Optional[List[str]] = None
    last_air_date: Optional[str] = None
    last_episode_to_air: Optional[dict[str, Any]] = None
    next_episode_to_air: Optional[dict[str, Any]] = None
    networks: Optional[List[Network]] = None
    number_of_episodes: Optional[int] = None
    number_of_seasons: Optional[int] = None
    production_companies: Optional[List[Company]] = None
    status: Optional[str] = None
    tagline: Optional[str] = None
    type: Optional[str] = None


# --- Tool requests ---


class ToolRequest(BaseModel):
    """Arguments accepted by a tool, with their defaults."""

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    language: str = Field(DEFAULT_LANGUAGE, description=LANGUAGE_DESCRIPTION)


class MovieSearchRequest(ToolRequest):
    query: str = Field(description="The movie title to search for")
    region: Optional[str] = Field(
        None, description="Region code (e.g. 'US', 'FR')"
    )


class TvShowSearchRequest(ToolRequest):
    query: str = Field(description="The TV show title to search for")


class PersonSearchRequest(ToolRequest):
    query: str = Field(description="The name of the person to search for")


class MovieDetailsRequest(ToolRequest):
    movie_id: int = Field(alias="movieId", description="The ID of the movie")


class TvShowDetailsRequest(ToolRequest):
    tv_show_id: int = Field(alias="tvShowId", description="The ID of the TV show")


class TrendingRequest(ToolRequest):
    time_window: TimeWindow = Field(
        DEFAULT_TIME_WINDOW,
        alias="timeWindow",
        description="Time window for trending content (default: week)",
    )
