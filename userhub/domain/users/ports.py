"""
Port interfaces (ABCs) for the users bounded context.

Ports define the contracts that the domain requires from the outside world.
Infrastructure adapters implement these interfaces.
The domain layer never depends on concrete implementations.
"""

from abc import ABC, abstractmethod

from userhub.domain.users.entities import User


class UserRepository(ABC):
    """Port for durable storage of user records.

    Implementations own identifier assignment and timestamp stamping,
    and must enforce username/email uniqueness atomically with the write.
    """

    @abstractmethod
    def get_all(self) -> list[User]:
        """Return every persisted user."""
        raise NotImplementedError

    @abstractmethod
    def get_by_id(self, user_id: int) -> User:
        """Return the user with the given id.

        Raises:
            UserNotFoundError: If no user has that id.
        """
        raise NotImplementedError

    @abstractmethod
    def get_by_username(self, username: str) -> User:
        """Return the user with the given username.

        Raises:
            UserNotFoundError: If no user has that username.
        """
        raise NotImplementedError

    @abstractmethod
    def upsert(self, user: User) -> User:
        """Insert a new user (no id) or update an existing one (id set).

        Args:
            user: The user to write. Any timestamps it carries are ignored.

        Returns:
            The persisted user with id and timestamps populated.

        Raises:
            DuplicationError: If username or email_address collides
                with a different record.
            UserNotFoundError: If an id is given but no such row exists
                at write time.
        """
        raise NotImplementedError

    @abstractmethod
    def delete(self, user_id: int) -> None:
        """Remove the user with the given id.

        Raises:
            UserNotFoundError: If no user has that id.
        """
        raise NotImplementedError

    @abstractmethod
    def clear(self) -> None:
        """Remove all users."""
        raise NotImplementedError

    @abstractmethod
    def reset_identity_sequence(self) -> None:
        """Restart id generation at 1.

        Administrative operation for test harnesses only; call it after
        clear() to make generated ids deterministic.
        """
        raise NotImplementedError
