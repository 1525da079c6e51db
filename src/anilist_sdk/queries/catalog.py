"""Catalog of named AniList operations.

Binds each operation name to its GraphQL document, its variable defaults and
the pydantic model its ``data`` payload is parsed into. The defaults mirror the
defaults declared in the documents so callers see the same values in the
request body that the server would otherwise fill in.
"""

from dataclasses import dataclass, field
from typing import Any

from anilist_sdk.errors import UnknownOperationError
from anilist_sdk.models import (
    AniListModel,
    GetAnimeByIdQuery,
    GetAnimeByTitleQuery,
    GetAnimeCharactersQuery,
    GetAnimeListByGenreQuery,
    GetAnimePopularQuery,
    GetAnimeRecommendationsQuery,
    GetAnimeRelationsQuery,
    GetAnimeStaffQuery,
    GetAnimeTrendingQuery,
    SearchAnimeQuery,
)
from anilist_sdk.queries import anime


@dataclass(frozen=True)
class Operation:
    """A named request template."""

    name: str
    document: str
    response_model: type[AniListModel]
    defaults: dict[str, Any] = field(default_factory=dict)

    def build_variables(self, **given: Any) -> dict[str, Any]:
        """Overlay *given* on the defaults, dropping variables set to None."""
        variables = {**self.defaults, **given}
        return {key: value for key, value in variables.items() if value is not None}


CHARACTERS_PER_PAGE = 25
MEDIA_PER_PAGE = 10

GET_ANIME_BY_ID = Operation(
    name="GetAnimeById",
    document=anime.GET_ANIME_BY_ID,
    response_model=GetAnimeByIdQuery,
    defaults={"page": 1, "perPage": CHARACTERS_PER_PAGE},
)
GET_ANIME_CHARACTERS = Operation(
    name="GetAnimeCharacters",
    document=anime.GET_ANIME_CHARACTERS,
    response_model=GetAnimeCharactersQuery,
    defaults={"page": 1, "perPage": CHARACTERS_PER_PAGE},
)
GET_ANIME_BY_TITLE = Operation(
    name="GetAnimeByTitle",
    document=anime.GET_ANIME_BY_TITLE,
    response_model=GetAnimeByTitleQuery,
)
SEARCH_ANIME = Operation(
    name="SearchAnime",
    document=anime.SEARCH_ANIME,
    response_model=SearchAnimeQuery,
    defaults={"page": 1, "perPage": MEDIA_PER_PAGE},
)
GET_ANIME_TRENDING = Operation(
    name="GetAnimeTrending",
    document=anime.GET_ANIME_TRENDING,
    response_model=GetAnimeTrendingQuery,
    defaults={"page": 1, "perPage": MEDIA_PER_PAGE},
)
GET_ANIME_POPULAR = Operation(
    name="GetAnimePopular",
    document=anime.GET_ANIME_POPULAR,
    response_model=GetAnimePopularQuery,
    defaults={"page": 1, "perPage": MEDIA_PER_PAGE},
)
GET_ANIME_RECOMMENDATIONS = Operation(
    name="GetAnimeRecommendations",
    document=anime.GET_ANIME_RECOMMENDATIONS,
    response_model=GetAnimeRecommendationsQuery,
)
GET_ANIME_STAFF = Operation(
    name="GetAnimeStaff",
    document=anime.GET_ANIME_STAFF,
    response_model=GetAnimeStaffQuery,
)
GET_ANIME_RELATIONS = Operation(
    name="GetAnimeRelations",
    document=anime.GET_ANIME_RELATIONS,
    response_model=GetAnimeRelationsQuery,
)
GET_ANIME_LIST_BY_GENRE = Operation(
    name="GetAnimeListByGenre",
    document=anime.GET_ANIME_LIST_BY_GENRE,
    response_model=GetAnimeListByGenreQuery,
    defaults={"page": 1, "perPage": MEDIA_PER_PAGE},
)

CATALOG: dict[str, Operation] = {
    op.name: op
    for op in (
        GET_ANIME_BY_ID,
        GET_ANIME_CHARACTERS,
        GET_ANIME_BY_TITLE,
        SEARCH_ANIME,
        GET_ANIME_TRENDING,
        GET_ANIME_POPULAR,
        GET_ANIME_RECOMMENDATIONS,
        GET_ANIME_STAFF,
        GET_ANIME_RELATIONS,
        GET_ANIME_LIST_BY_GENRE,
    )
}


def get_operation(name: str) -> Operation:
    """Return the catalog entry for *name*.

    Raises:
        UnknownOperationError: If *name* is not a known operation.
    """
    try:
        return CATALOG[name]
    except KeyError:
        raise UnknownOperationError(name) from None
