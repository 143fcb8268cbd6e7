"""Generic service exposing the read operations of one IGDB resource."""

from __future__ import annotations

from collections.abc import Iterable
from typing import Generic, TypeVar

import structlog

from ..models.base import Entity
from .endpoints import Endpoint
from .errors import EmptyIDsError, ErrorContext, IGDBError, NegativeIDError
from .http_client import HttpClientService
from .options import Operator, Option, _is_int, set_fields, set_filter, set_search

log = structlog.stdlib.get_logger()

T = TypeVar("T", bound=Entity)


class EntityService(Generic[T]):
    """Reads entities of type ``T`` from a single endpoint.

    Every operation builds a fresh option set, so a service holds no state
    beyond its endpoint and transport and may be shared between threads.
    """

    def __init__(self, http: HttpClientService, endpoint: Endpoint, model: type[T]) -> None:
        self.http = http
        self.endpoint = endpoint
        self.model = model

    @property
    def name(self) -> str:
        return self.model.__name__

    def get(self, id: int, *opts: Option) -> T:
        """Return the entity with the given ID.

        Raises:
            NegativeIDError: If ``id`` is negative or not an integer; nothing is sent
            NoResultsError: If no entity has that ID
        """
        context = ErrorContext("get", f"{self.name} with ID {id}", {"id": id})
        if not _is_int(id) or id < 0:
            raise NegativeIDError(field="id", value=id).with_context(context)

        results = self._read(context, *opts, set_filter("id", Operator.EQUALS, str(id)))
        return results[0]

    def list(self, ids: Iterable[int], *opts: Option) -> list[T]:
        """Return the entities with the given IDs.

        IDs without a matching entity are silently skipped. ``NoResultsError``
        is raised only when none of them match.
        """
        ids = list(ids)
        context = ErrorContext("get", f"{self.name}s with IDs {ids}", {"ids": ids})
        if not ids:
            raise EmptyIDsError(field="ids", value=[]).with_context(context)
        for id in ids:
            if not _is_int(id) or id < 0:
                raise NegativeIDError(field="ids", value=id).with_context(context)

        id_filter = set_filter("id", Operator.CONTAINS_AT_LEAST, *(str(id) for id in ids))
        return self._read(context, *opts, id_filter)

    def index(self, *opts: Option) -> list[T]:
        """Return an index of entities, shaped by the options."""
        return self._read(ErrorContext("get", f"index of {self.name}s"), *opts)

    def count(self, *opts: Option) -> int:
        """Return the number of entities matching the options."""
        context = ErrorContext("count", f"{self.name}s")
        try:
            return self.http.get_count(self.endpoint, *opts)
        except IGDBError as e:
            raise e.with_context(context)

    def fields(self) -> list[str]:
        """Return the field names of the remote object."""
        context = ErrorContext("get", f"{self.name} fields")
        try:
            return self.http.get_fields(self.endpoint)
        except IGDBError as e:
            raise e.with_context(context)

    def _read(self, context: ErrorContext, *opts: Option) -> list[T]:
        # Caller fields, when given, overwrite the wildcard.
        try:
            return self.http.get(self.endpoint, self.model, set_fields("*"), *opts)
        except IGDBError as e:
            log.debug("Entity read failed", operation=context.describe(), error=e.message)
            raise e.with_context(context)


class SearchableService(EntityService[T]):
    """Entity service for resources that support full text search."""

    def search(self, query: str, *opts: Option) -> list[T]:
        """Return the entities matching ``query``.

        Raises:
            EmptyQueryError: If ``query`` is blank; nothing is sent
        """
        context = ErrorContext("search", f"{self.name}s for {query!r}", {"query": query})
        return self._read(context, *opts, set_search(query))
