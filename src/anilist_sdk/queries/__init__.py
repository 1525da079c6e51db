"""Query documents and the named operation catalog."""

from anilist_sdk.queries.catalog import CATALOG, Operation, get_operation

__all__ = ["CATALOG", "Operation", "get_operation"]
