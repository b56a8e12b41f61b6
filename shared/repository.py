"""
Base repository class for database access.

Provides a common abstraction layer for all repositories, encapsulating
Supabase client access and the shared pagination query.
"""

from typing import Any, TypeVar, Generic
from supabase import Client

from .models import Pagination


T = TypeVar("T")


class BaseRepository(Generic[T]):
    """
    Base class for all repositories.

    Repositories are synchronous and never classify errors; raw
    postgrest exceptions propagate to the service, which runs every call
    through shared.database.run_db.

    Subclasses implement domain-specific data access methods
    and handle dict-to-Pydantic model mapping internally.

    Example:
        class ProductRepository(BaseRepository[Product]):
            def get_by_id(self, product_id: str) -> Optional[Product]:
                result = self._db.table("products").select("*").eq("id", product_id).execute()
                if not result.data:
                    return None
                return self._map_to_product(result.data[0])
    """

    table: str = ""

    def __init__(self, db: Client) -> None:
        """
        Initialize the repository with a Supabase client.

        Args:
            db: Supabase client instance for database operations.
        """
        self._db = db

    def _list_page(
        self,
        pagination: Pagination,
        filters: dict[str, Any] | None = None,
    ) -> tuple[list[dict[str, Any]], int]:
        """
        Fetch one page of rows, newest first, plus the total row count.

        Args:
            pagination: Page and page size.
            filters: Column equality filters.

        Returns:
            Tuple of (rows, total).
        """
        query = self._db.table(self.table).select("*", count="exact")
        for column, value in (filters or {}).items():
            query = query.eq(column, value)

        result = (
            query.order("created_at", desc=True)
            .range(pagination.offset, pagination.offset + pagination.limit - 1)
            .execute()
        )
        return result.data or [], result.count or 0
