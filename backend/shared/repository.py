"""
Repository contracts and the Supabase-backed document repository.

The lifecycle services never talk to Supabase directly. They depend on the
query/command protocols below, which treat each table as a collection of
documents: point lookups, equality search with a partial record, full
listing, creation and partial update.
"""

import asyncio
from typing import Any, Generic, Optional, Protocol, TypeVar, runtime_checkable

from pydantic import BaseModel
from pydantic_core import to_jsonable_python
from supabase import Client


T = TypeVar("T")
T_co = TypeVar("T_co", covariant=True)
ModelT = TypeVar("ModelT", bound=BaseModel)


@runtime_checkable
class IQueryRepository(Protocol[T_co]):
    """Read side of a document collection."""

    async def get_by_id(self, record_id: str) -> Optional[T_co]:
        """Return the record with this id, or None."""
        ...

    async def find(self, criteria: dict[str, Any]) -> list[T_co]:
        """Return every record whose fields equal all values in criteria."""
        ...

    async def list_all(self) -> list[T_co]:
        """Return all records in listing order."""
        ...


@runtime_checkable
class ICommandRepository(Protocol):
    """Write side of a document collection."""

    async def create(self, data: dict[str, Any]) -> Optional[str]:
        """Insert a record (without id) and return the new id, or None on failure."""
        ...

    async def update(self, record_id: str, data: dict[str, Any]) -> None:
        """Apply a partial update to the record with this id."""
        ...

    async def delete(self, record_id: str) -> None:
        """Remove the record with this id."""
        ...


class BaseRepository(Generic[T]):
    """
    Base class for all repositories.

    Provides common functionality for database operations:
    - Supabase client access via self._db
    - Generic type parameter for model type hints
    """

    def __init__(self, db: Client) -> None:
        """
        Initialize the repository with a Supabase client.

        Args:
            db: Supabase client instance for database operations.
        """
        self._db = db


class SupabaseRepository(BaseRepository[ModelT]):
    """
    Query and command repository over a single Supabase table.

    Subclasses bind ``table_name`` and ``model``. Rows are validated into the
    model on read; datetimes and enums are converted to JSON values on write.
The Supabase client is synchronous, so every request runs in a worker
thread and concurrent calls do not block the event loop.

    Example:
        class UserRepository(SupabaseRepository[UserRecord]):
            table_name = "users"
            model = UserRecord
    """

    table_name: str = ""
    model: type[ModelT]
    order_by: Optional[str] = "created_at"

    def __init__(self, db: Client, table_name: Optional[str] = None) -> None:
        super().__init__(db)
        if table_name:
            self.table_name = table_name

    async def get_by_id(self, record_id: str) -> Optional[ModelT]:
        result = await self._execute(self._table().select("*").eq("id", record_id))

        if not result.data:
            return None

        return self._map(result.data[0])

    async def find(self, criteria: dict[str, Any]) -> list[ModelT]:
        query = self._table().select("*")
        for column, value in self._to_row(criteria).items():
            if value is None:
                query = query.is_(column, "null")
            else:
                query = query.eq(column, value)

        if self.order_by:
            query = query.order(self.order_by)

        result = await self._execute(query)
        return [self._map(row) for row in result.data]

    async def list_all(self) -> list[ModelT]:
        query = self._table().select("*")
        if self.order_by:
            query = query.order(self.order_by)

        result = await self._execute(query)
        return [self._map(row) for row in result.data]

    async def create(self, data: dict[str, Any]) -> Optional[str]:
        result = await self._execute(self._table().insert(self._to_row(data)))

        if not result.data or result.data[0].get("id") is None:
            return None

        return str(result.data[0]["id"])

    async def update(self, record_id: str, data: dict[str, Any]) -> None:
        await self._execute(self._table().update(self._to_row(data)).eq("id", record_id))

    async def delete(self, record_id: str) -> None:
        await self._execute(self._table().delete().eq("id", record_id))

    @staticmethod
    async def _execute(query):
        return await asyncio.to_thread(query.execute)

    def _table(self):
        return self._db.table(self.table_name)

    def _map(self, row: dict[str, Any]) -> ModelT:
        """Map database row to the bound model."""
        return self.model.model_validate(row)

    @staticmethod
    def _to_row(data: dict[str, Any]) -> dict[str, Any]:
        return to_jsonable_python(data)
