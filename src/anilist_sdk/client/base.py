"""Base abstraction for GraphQL transports.

The service layer talks to AniList only through GraphQLClient.execute(), which
maps an operation name and its variables to a typed response model. Concrete
clients implement request() for their transport of choice; tests substitute an
in-memory implementation.
"""

from abc import ABC, abstractmethod
from typing import Any

from pydantic import ValidationError

from anilist_sdk.errors import ResponseShapeError
from anilist_sdk.models import AniListModel
from anilist_sdk.queries.catalog import get_operation


class GraphQLClient(ABC):
    """Abstract base class for clients able to run catalog operations."""

    @abstractmethod
    async def request(
        self, document: str, variables: dict[str, Any], operation_name: str
    ) -> dict[str, Any]:
        """Send one GraphQL request and return its ``data`` object.

        Args:
            document: The full GraphQL document, fragments included.
            variables: Variables for the operation.
            operation_name: Name of the operation inside *document*.

        Returns:
            The ``data`` member of the GraphQL response.

        Raises:
            TransportError: If the API could not be reached.
            RemoteError: If the API answered with GraphQL errors.
        """
        raise NotImplementedError

    async def execute(
        self, operation_name: str, variables: dict[str, Any] | None = None
    ) -> AniListModel:
        """Run a named catalog operation and parse its response.

        Args:
            operation_name: Catalog key, e.g. ``"GetAnimeById"``.
            variables: Variables to send; the operation's defaults fill the gaps.

        Returns:
            An instance of the operation's response model.

        Raises:
            UnknownOperationError: If *operation_name* is not in the catalog.
            ResponseShapeError: If the ``data`` payload does not fit the model.
        """
        operation = get_operation(operation_name)
        data = await self.request(
            operation.document,
            operation.build_variables(**(variables or {})),
            operation.name,
        )
        try:
            return operation.response_model.model_validate(data or {})
        except ValidationError as exc:
            raise ResponseShapeError(
                f"Unexpected response shape for {operation.name}: {exc}"
            ) from exc
