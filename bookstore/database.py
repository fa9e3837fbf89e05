"""
In-memory user storage.

UserStore is the narrow port the services depend on; UserDatabase is the
dict-backed implementation used in production. Tests substitute a mock
built from UserDatabase at the same boundary.
"""

import logging
from typing import Dict, List, Optional, Protocol

from .domain import Book, User

logger = logging.getLogger(__name__)


class UserStore(Protocol):
    """Storage operations the services rely on."""

    def contains_key(self, username: str) -> bool: ...

    def get(self, username: str) -> Optional[User]: ...

    def put(self, username: str, user: User) -> None: ...

    def remove(self, username: str) -> Optional[User]: ...

    def get_purchased_books(self, user: User) -> List[Book]: ...

    def add_purchased_book(self, user: User, book: Book) -> None: ...


class UserDatabase:
    """
    Maps username -> User and User -> purchased books.

    Purchases are keyed by the User object, so they follow the user across
    a username change. No uniqueness checks happen here; callers test
    contains_key before put.
    """

    def __init__(self):
        self._users: Dict[str, User] = {}
        self._purchases: Dict[User, List[Book]] = {}

    def contains_key(self, username: str) -> bool:
        return username in self._users

    def get(self, username: str) -> Optional[User]:
        return self._users.get(username)

    def put(self, username: str, user: User) -> None:
        self._users[username] = user

    def remove(self, username: str) -> Optional[User]:
        return self._users.pop(username, None)

    def get_purchased_books(self, user: User) -> List[Book]:
        """Return a copy of the user's purchased books, oldest first."""
        return list(self._purchases.get(user, []))

    def add_purchased_book(self, user: User, book: Book) -> None:
        self._purchases.setdefault(user, []).append(book)
        logger.debug(f"Recorded purchase of '{book.title}' for {user.username}")

    def clear(self) -> None:
        self._users.clear()
        self._purchases.clear()

    def __len__(self) -> int:
        return len(self._users)
