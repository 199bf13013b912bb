"""Abstract repository for User entity."""

from __future__ import annotations

from abc import ABC, abstractmethod

from ordersvc.domain.model.user import User


class UserRepository(ABC):

    @abstractmethod
    def get_by_id(self, user_id: str) -> User | None:
        """Return a user by ID, or None if not found."""

    @abstractmethod
    def get_many(self, user_ids: list[str]) -> dict[str, User]:
        """Return the users that exist among *user_ids*, keyed by ID."""

    @abstractmethod
    def save(self, user: User) -> None:
        """Persist a new or updated user, assigning an ID if needed."""
