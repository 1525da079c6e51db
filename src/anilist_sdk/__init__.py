# SPDX-FileCopyrightText: 2025-present DouglasMacKrell <d.mackrell@gmail.com>
#
# SPDX-License-Identifier: MIT

"""anilist-sdk - Typed async client for the AniList GraphQL API."""

from anilist_sdk.__about__ import __version__
from anilist_sdk.client import AniListClient, GraphQLClient
from anilist_sdk.errors import (
    AniListError,
    PaginationLimitExceeded,
    RemoteError,
    ResponseShapeError,
    TransportError,
    UnknownOperationError,
)
from anilist_sdk.services import AnimeService

__all__ = [
    "AniListClient",
    "AniListError",
    "AnimeService",
    "GraphQLClient",
    "PaginationLimitExceeded",
    "RemoteError",
    "ResponseShapeError",
    "TransportError",
    "UnknownOperationError",
    "__version__",
]
