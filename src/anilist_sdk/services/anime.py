"""Anime service facade over the AniList query catalog.

Each method maps one-to-one onto a catalog operation: it builds the variables,
delegates to GraphQLClient.execute() and returns the typed response untouched.
Errors from the client propagate unchanged; nothing here retries or caches.
"""

from typing import cast

from anilist_sdk.client.base import GraphQLClient
from anilist_sdk.errors import PaginationLimitExceeded
from anilist_sdk.models import (
    CharacterEdge,
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
from anilist_sdk.settings import Settings
from anilist_sdk.utils.debug import debug


class AnimeService:
    """High-level access to AniList anime data.

    Args:
        client: Any GraphQLClient, typically an AniListClient.
        max_pages: Optional upper bound on pages fetched by
            get_all_characters_from_anime(). None trusts the API to
            eventually report ``hasNextPage: false``. Must be at least 1.

    Raises:
        ValueError: If max_pages is less than 1.
    """

    def __init__(self, client: GraphQLClient, max_pages: int | None = None) -> None:
        """Initialize the service with a GraphQL client."""
        if max_pages is not None and max_pages < 1:
            raise ValueError(f"max_pages must be at least 1, got {max_pages}")
        self.client = client
        self.max_pages = max_pages

    @classmethod
    def from_settings(
        cls, client: GraphQLClient, settings: Settings | None = None
    ) -> "AnimeService":
        """Build a service whose pagination bound comes from Settings."""
        settings = settings or Settings()
        return cls(client, max_pages=settings.ANILIST_MAX_PAGES)

    async def get_anime_by_id(
        self, id: int, page: int = 1, per_page: int = 25
    ) -> GetAnimeByIdQuery:
        """Retrieve an anime with its first page of characters, staff and studios.

        Args:
            id: The AniList ID of the anime.
            page: Page of the characters connection to include.
            per_page: Characters per page.
        """
        result = await self.client.execute(
            "GetAnimeById", {"id": id, "page": page, "perPage": per_page}
        )
        return cast(GetAnimeByIdQuery, result)

    async def get_all_characters_from_anime(self, id: int) -> list[CharacterEdge]:
        """Fetch every character of an anime across all pages.

        Pages are requested one after another; edges keep the API's order and
        edges without a character node are dropped. A failure on any page
        aborts the whole call.

        Args:
            id: The AniList ID of the anime.

        Returns:
            A flat list of character edges.

        Raises:
            PaginationLimitExceeded: If max_pages is set and the API still
                reports more pages after that many fetches.
        """
        all_characters: list[CharacterEdge] = []
        current_page = 1
        has_next_page = True

        while has_next_page:
            if self.max_pages is not None and current_page > self.max_pages:
                raise PaginationLimitExceeded("GetAnimeCharacters", self.max_pages)

            result = await self.get_characters(id, page=current_page)
            character_page = result.media.characters if result.media else None

            if character_page is not None and character_page.edges:
                all_characters.extend(
                    edge
                    for edge in character_page.edges
                    if edge is not None and edge.node is not None
                )

            page_info = character_page.page_info if character_page else None
            has_next_page = bool(page_info and page_info.has_next_page)
            debug(
                f"GetAnimeCharacters id={id} page={current_page} "
                f"total={len(all_characters)} has_next_page={has_next_page}"
            )
            current_page += 1

        return all_characters

    async def get_anime_by_search(
        self, search: str, page: int = 1, per_page: int = 10
    ) -> SearchAnimeQuery:
        """Search anime by title or keyword."""
        result = await self.client.execute(
            "SearchAnime", {"query": search, "page": page, "perPage": per_page}
        )
        return cast(SearchAnimeQuery, result)

    async def get_trending_anime(
        self, page: int = 1, per_page: int = 10
    ) -> GetAnimeTrendingQuery:
        """Retrieve currently trending anime."""
        result = await self.client.execute(
            "GetAnimeTrending", {"page": page, "perPage": per_page}
        )
        return cast(GetAnimeTrendingQuery, result)

    async def get_popular_anime(
        self, page: int = 1, per_page: int = 10
    ) -> GetAnimePopularQuery:
        """Retrieve the most popular anime."""
        result = await self.client.execute(
            "GetAnimePopular", {"page": page, "perPage": per_page}
        )
        return cast(GetAnimePopularQuery, result)

    async def get_recommendations(self, media_id: int) -> GetAnimeRecommendationsQuery:
        """Retrieve recommendations based on an anime."""
        result = await self.client.execute("GetAnimeRecommendations", {"id": media_id})
        return cast(GetAnimeRecommendationsQuery, result)

    async def get_characters(
        self, media_id: int, page: int = 1, per_page: int = 25
    ) -> GetAnimeCharactersQuery:
        """Retrieve one page of an anime's characters."""
        result = await self.client.execute(
            "GetAnimeCharacters", {"id": media_id, "page": page, "perPage": per_page}
        )
        return cast(GetAnimeCharactersQuery, result)

    async def get_staff(self, media_id: int) -> GetAnimeStaffQuery:
        """Retrieve staff credited on an anime."""
        result = await self.client.execute("GetAnimeStaff", {"id": media_id})
        return cast(GetAnimeStaffQuery, result)

    async def get_relations(self, media_id: int) -> GetAnimeRelationsQuery:
        """Retrieve media related to an anime (sequels, prequels, ...)."""
        result = await self.client.execute("GetAnimeRelations", {"id": media_id})
        return cast(GetAnimeRelationsQuery, result)

    async def get_anime_by_title(self, title: str) -> GetAnimeByTitleQuery:
        """Retrieve the anime best matching a title."""
        result = await self.client.execute("GetAnimeByTitle", {"title": title})
        return cast(GetAnimeByTitleQuery, result)

    async def get_anime_list_by_genre(
        self, genre: str, page: int = 1, per_page: int = 10
    ) -> GetAnimeListByGenreQuery:
        """Retrieve anime tagged with a genre."""
        result = await self.client.execute(
            "GetAnimeListByGenre", {"genre": genre, "page": page, "perPage": per_page}
        )
        return cast(GetAnimeListByGenreQuery, result)
