"""
User model - marketplace identities.
"""
from typing import List, Literal, Optional

from taskmatch.models.base import Entity

ROLE_CUSTOMER = "customer"
ROLE_FREELANCER = "freelancer"

UserRole = Literal["customer", "freelancer"]


class User(Entity):
    """
    A customer who posts jobs or a freelancer who applies to them.

    Created at signup (or seeded), edited through profile updates, never deleted.
    """

    email: str
    name: str
    role: UserRole
    bio: str = ""
    skills: List[str] = []
    avatar: Optional[str] = None

    @property
    def is_customer(self) -> bool:
        return self.role == ROLE_CUSTOMER

    @property
    def is_freelancer(self) -> bool:
        return self.role == ROLE_FREELANCER
