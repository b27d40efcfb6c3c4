"""
Domain service: User management rules.

Sits between the HTTP boundary and the storage port.
No framework imports. IO only through the UserRepository port.

Rules:
    - A user without an id is created, a user with an id is updated.
    - An update first verifies that the id exists, so that a missing
      record (UserNotFoundError) is never confused with a uniqueness
      collision (DuplicationError).
    - Uniqueness is enforced by storage, never pre-checked here.
"""

import logging

from userhub.domain.users.entities import User
from userhub.domain.users.errors import DuplicationError
from userhub.domain.users.ports import UserRepository

logger = logging.getLogger(__name__)


class UserService:
    """Domain service for user records.

    Stateless across calls; every operation delegates to the repository
    and lets its errors propagate unchanged.
    """

    def __init__(self, user_repo: UserRepository) -> None:
        self._user_repo = user_repo

    def clear(self) -> None:
        """Remove every user. Administrative and test use only."""
        logger.warning("Clearing all user data")
        self._user_repo.clear()

    def get_all_users(self) -> list[User]:
        """Return all persisted users."""
        logger.debug("Retrieving all users")
        return self._user_repo.get_all()

    def get_user_by_id(self, user_id: int) -> User:
        """Return the user with the given id.

        Raises:
            UserNotFoundError: If no user has that id.
        """
        logger.debug("Retrieving user by id=%s", user_id)
        return self._user_repo.get_by_id(user_id)

    def get_by_username(self, username: str) -> User:
        """Return the user with the given username.

        Raises:
            UserNotFoundError: If no user has that username.
        """
        logger.debug("Retrieving user by username=%s", username)
        return self._user_repo.get_by_username(username)

    def upsert(self, user: User) -> User:
        """Create the user if it has no id, otherwise update it.

        Args:
            user: The user to persist.

        Returns:
            The persisted user, including storage-assigned fields.

        Raises:
            UserNotFoundError: If the user has an id that does not exist.
            DuplicationError: If the username or e-mail address is taken
                by another user.
        """
        if user.id is None:
            logger.info("Creating new user username=%s", user.username)
        else:
            logger.info("Updating user id=%s", user.id)
            self.get_user_by_id(user.id)

        try:
            persisted = self._user_repo.upsert(user)
        except DuplicationError as exc:
            logger.error(
                "Failed to upsert user id=%s: %s '%s' already taken",
                user.id,
                exc.field,
                exc.value,
            )
            raise

        logger.info("Upserted user id=%s", persisted.id)
        return persisted

    def delete(self, user_id: int) -> None:
        """Permanently remove the user with the given id.

        Raises:
            UserNotFoundError: If no user has that id.
        """
        logger.info("Deleting user id=%s", user_id)
        self._user_repo.delete(user_id)
        logger.info("Deleted user id=%s", user_id)
