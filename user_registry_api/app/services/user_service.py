"""
Business logic for users.

``UserService`` orchestrates the validator and the record store: it
validates a submission against the current records, assigns ids and
commits the normalised record.  The store is injected so the same
service runs against the in-memory cache or any other ``ObjectCache``.

The uniqueness check and the following write are not atomic.  Two
concurrent submissions with the same email can both pass validation.
"""

import logging
from datetime import date
from typing import Callable, List, Optional
from uuid import UUID

from ..core.cache import ObjectCache
from ..core.errors import RequiredFieldError, UserNotFoundError
from ..core.identifiers import uuid7
from ..schemas.user import User
from .user_validation import is_unset_id, validate_user

logger = logging.getLogger(__name__)


class UserService:
    """Service for working with user records."""

    def __init__(
        self,
        cache: ObjectCache,
        id_factory: Callable[[], UUID] = uuid7,
        today: Optional[Callable[[], date]] = None,
    ) -> None:
        self._cache = cache
        self._id_factory = id_factory
        self._today = today

    def _current_date(self) -> Optional[date]:
        return self._today() if self._today is not None else None

    async def create_user(self, user: Optional[User]) -> User:
        """Validate ``user``, assign a fresh id and store it."""
        existing = await self._cache.get_all()
        normalized = validate_user(user, existing, today=self._current_date())
        normalized = normalized.model_copy(update={"id": self._id_factory()})
        await self._cache.add(normalized.id, normalized)
        logger.info("Created user %s", normalized.id)
        return normalized

    async def update_user(self, user: Optional[User]) -> User:
        """Validate ``user`` and replace the stored record with the same id.

        Raises ``UserNotFoundError`` when the id is unknown; validation
        errors take precedence.
        """
        existing = await self._cache.get_all()
        normalized = validate_user(
            user, existing, require_id=True, today=self._current_date()
        )
        if await self._cache.get(normalized.id) is None:
            raise UserNotFoundError(normalized.id)
        await self._cache.update(normalized.id, normalized)
        logger.info("Updated user %s", normalized.id)
        return normalized

    async def get_user(self, user_id: UUID) -> User:
        if is_unset_id(user_id):
            raise RequiredFieldError("id")
        user = await self._cache.get(user_id)
        if user is None:
            raise UserNotFoundError(user_id)
        return user

    async def list_users(self) -> List[User]:
        return await self._cache.get_all()

    async def delete_user(self, user_id: UUID) -> None:
        """Remove a user.  Unknown ids are not an error."""
        if is_unset_id(user_id):
            raise RequiredFieldError("id")
        await self._cache.delete(user_id)
        logger.info("Deleted user %s", user_id)
