"""
User repository - data access for the identity set.
"""
from typing import Optional

from taskmatch.core.store import MarketplaceStore
from taskmatch.models.user import User
from taskmatch.repositories.base import BaseRepository


class UserRepository(BaseRepository[User]):
    def __init__(self):
        super().__init__(User, "users")

    def get_by_email(self, store: MarketplaceStore, email: str) -> Optional[User]:
        """Case-insensitive email lookup."""
        wanted = email.strip().lower()
        for user in store.snapshot(self.collection):
            if user.email.lower() == wanted:
                return user
        return None
