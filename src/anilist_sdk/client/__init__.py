"""GraphQL client implementations for AniList."""

from anilist_sdk.client.base import GraphQLClient
from anilist_sdk.client.anilist import AniListClient

__all__ = ["AniListClient", "GraphQLClient"]
