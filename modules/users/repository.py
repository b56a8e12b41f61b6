"""
User repository for database access.

Encapsulates all Supabase queries and data mapping for the users table.
"""

from typing import Any, Optional

from shared.repository import BaseRepository
from .models import User


class UserRepository(BaseRepository[User]):
    """
    Repository for user data access.

    Lookups by email are exact; emails are stored lowercased.
    """

    table = "users"

    def create_user(self, name: str, email: str, password_hash: str) -> User:
        """
        Insert a user.

        Raises:
            postgrest.exceptions.APIError: On unique email violation (23505)
        """
        data = {
            "name": name,
            "email": email.lower(),
            "password_hash": password_hash,
        }
        result = self._db.table(self.table).insert(data).execute()
        return self._map_to_user(result.data[0])

    def get_by_email(self, email: str) -> Optional[User]:
        result = self._db.table(self.table).select("*").eq("email", email.lower()).execute()
        if not result.data:
            return None
        return self._map_to_user(result.data[0])

    def get_by_id(self, user_id: str) -> Optional[User]:
        result = self._db.table(self.table).select("*").eq("id", user_id).execute()
        if not result.data:
            return None
        return self._map_to_user(result.data[0])

    def _map_to_user(self, data: dict[str, Any]) -> User:
        return User(
            id=str(data["id"]),
            name=data["name"],
            email=data["email"],
            password_hash=data.get("password_hash", ""),
            created_at=data["created_at"],
            updated_at=data["updated_at"],
        )
