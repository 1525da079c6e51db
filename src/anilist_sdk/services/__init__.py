"""Service facades built on the AniList query catalog."""

from anilist_sdk.services.anime import AnimeService

__all__ = ["AnimeService"]
