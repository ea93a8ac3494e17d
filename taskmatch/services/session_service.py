"""
Session store - the identity behind one client session.

The identity is kept under a single key as a JSON-serialized User, so a
client that reconnects with the same session id gets its login back
(`restore`). Nothing else about the session is stored.

Credentials are not checked: login resolves an identity by email alone,
and signup always creates a fresh identity.
"""
from typing import Any, Dict, Optional

from taskmatch.core.config import settings
from taskmatch.core.exceptions import InvalidCredentialsException, UnauthorizedException
from taskmatch.core.logging import get_logger
from taskmatch.core.storage import KeyValueStore
from taskmatch.core.store import MarketplaceStore
from taskmatch.models.user import User, UserRole
from taskmatch.repositories.user_repository import UserRepository

logger = get_logger(__name__)

# Profile fields a user may change about themselves
EDITABLE_PROFILE_FIELDS = ("name", "bio", "skills", "avatar")


class SessionStore:
    """Login state of one session, persisted in a key-value store."""

    def __init__(
        self,
        store: MarketplaceStore,
        kv: KeyValueStore,
        session_id: str,
    ):
        self.store = store
        self.kv = kv
        self.session_id = session_id
        self.user_repo = UserRepository()
        self._user: Optional[User] = None

    @property
    def key(self) -> str:
        return f"{settings.session_key_prefix}:{self.session_id}:user"

    @property
    def current_user(self) -> Optional[User]:
        return self._user

    async def restore(self) -> Optional[User]:
        """Load the persisted identity, if any."""
        raw = await self.kv.get(self.key)
        self._user = User.model_validate_json(raw) if raw else None
        return self._user

    async def login(self, email: str, password: str) -> User:
        """
        Open the session for a known identity.

        Raises:
            InvalidCredentialsException: If no identity uses this email.
        """
        await self.store.simulate_latency()

        user = self.user_repo.get_by_email(self.store, email)
        if not user:
            logger.info("login_failed", email=email)
            raise InvalidCredentialsException()

        await self._persist(user)
        logger.info("login_succeeded", user_id=user.id, role=user.role)
        return user

    async def signup(self, email: str, password: str, name: str, role: UserRole) -> User:
        """Create a new identity and open the session for it."""
        await self.store.simulate_latency()

        user = self.user_repo.create(
            self.store,
            email=email,
            name=name,
            role=role,
            bio="",
            skills=[],
        )
        await self._persist(user)
        logger.info("signup_succeeded", user_id=user.id, role=role)
        return user

    async def logout(self) -> None:
        """Forget the identity of this session."""
        if self._user:
            logger.info("logout", user_id=self._user.id)
        self._user = None
        await self.kv.delete(self.key)

    async def update_profile(self, patch: Dict[str, Any]) -> User:
        """
        Merge a partial User into the current identity.

        The identity-set record is updated as well so other users see the
        change on the public profile.

        Raises:
            UnauthorizedException: If nobody is logged in.
        """
        if not self._user:
            raise UnauthorizedException("Authentication required")

        await self.store.simulate_latency()

        changes = {
            field: value
            for field, value in patch.items()
            if field in EDITABLE_PROFILE_FIELDS and value is not None
        }
        updated = self._user.model_copy(update=changes)

        record = self.user_repo.get_by_id(self.store, updated.id)
        if record:
            self.user_repo.update(self.store, record, **changes)

        await self._persist(updated)
        logger.info("profile_updated", user_id=updated.id, fields=sorted(changes))
        return updated

    async def _persist(self, user: User) -> None:
        self._user = user
        await self.kv.set(self.key, user.model_dump_json())
