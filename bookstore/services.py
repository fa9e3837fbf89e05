import logging
from typing import Any, Dict, List, Optional

from .compose import pipe
from .database import UserDatabase, UserStore
from .domain import Book, User
from .events import (
    EventBus, BOOK_ADDED, BOOK_REMOVED, BOOK_PURCHASED, REVIEW_ADDED,
    USER_REGISTERED, USER_UPDATED
)
from .filters import create_keyword_filter, create_search, create_advanced_search
from .ftypes import maybe
from .validators import (
    check_in_catalog, check_not_in_catalog, validate_review,
    check_username_available, validate_profile_update
)

logger = logging.getLogger(__name__)


class BookService:
    """
    Catalog service: search, add, remove, purchase and review books.

    Purchases are recorded in the injected user store, which is also what
    review permission is checked against. Expected failures return False.
    """

    def __init__(self, user_database: UserStore, event_bus: Optional[EventBus] = None):
        self.user_database = user_database
        self.event_bus = event_bus
        self.book_database: List[Book] = []

    def get_book_database(self) -> List[Book]:
        """The live catalog list"""
        return self.book_database

    def search_book(self, keyword: str) -> List[Book]:
        """Books whose title, author or genre contains keyword"""
        results = pipe(
            self.get_book_database(),
            create_search(create_keyword_filter(keyword))
        )
        logger.debug(f"Search '{keyword}' matched {len(results)} books")
        return results

    def advanced_search(self,
                        genres: Optional[List[str]] = None,
                        authors: Optional[List[str]] = None,
                        min_price: Optional[float] = None,
                        max_price: Optional[float] = None) -> List[Book]:
        search = create_advanced_search(genres, authors, min_price, max_price)
        return search(self.get_book_database())

    def add_book(self, book: Book) -> bool:
        catalog = self.get_book_database()
        result = check_not_in_catalog(catalog, book)
        if result.is_left():
            logger.info(f"Add rejected: {result.error}")
            return False

        catalog.append(book)
        logger.info(f"Added '{book.title}' by {book.author}")
        self._publish(BOOK_ADDED, {'title': book.title, 'author': book.author})
        return True

    def remove_book(self, book: Book) -> bool:
        catalog = self.get_book_database()
        result = check_in_catalog(catalog, book)
        if result.is_left():
            logger.info(f"Remove rejected: {result.error}")
            return False

        catalog.remove(book)
        logger.info(f"Removed '{book.title}' by {book.author}")
        self._publish(BOOK_REMOVED, {'title': book.title, 'author': book.author})
        return True

    def purchase_book(self, user: User, book: Book) -> bool:
        result = check_in_catalog(self.get_book_database(), book)
        if result.is_left():
            logger.info(f"Purchase rejected for {user.username}: {result.error}")
            return False

        self.user_database.add_purchased_book(user, book)
        logger.info(f"{user.username} purchased '{book.title}'")
        self._publish(BOOK_PURCHASED, {
            'username': user.username,
            'title': book.title,
            'price': book.price
        })
        return True

    def add_book_review(self, user: User, book: Book, text: str) -> bool:
        """Append a review if the book is listed and the user bought it"""
        result = validate_review(user, book, self.get_book_database(), self.user_database)
        if result.is_left():
            logger.info(f"Review rejected: {result.error}")
            return False

        result.value.reviews.append(text)
        logger.info(f"{user.username} reviewed '{book.title}'")
        self._publish(REVIEW_ADDED, {
            'username': user.username,
            'title': book.title,
            'review_text': text
        })
        return True

    def _publish(self, event_type: str, payload: Dict[str, Any]) -> None:
        if self.event_bus is not None:
            self.event_bus.publish(event_type, payload)


class UserService:
    """Registration, login and profile updates over a user store."""

    def __init__(self, user_database: Optional[UserStore] = None,
                 event_bus: Optional[EventBus] = None):
        self.user_database = user_database if user_database is not None else UserDatabase()
        self.event_bus = event_bus

    def set_user_database(self, user_database: UserStore) -> None:
        self.user_database = user_database

    def register_user(self, user: User) -> bool:
        result = check_username_available(self.user_database, user.username)
        if result.is_left():
            logger.info(f"Registration rejected: {result.error}")
            return False

        self.user_database.put(user.username, user)
        logger.info(f"Registered user {user.username}")
        self._publish(USER_REGISTERED, {'username': user.username, 'email': user.email})
        return True

    def login_user(self, username: str, password: str) -> Optional[User]:
        """The stored user if the password matches, otherwise None"""
        user = (
            maybe(self.user_database.get(username))
            .filter(lambda found: found.password == password)
            .get_or_else(None)
        )
        if user is None:
            logger.info(f"Login failed for {username}")
        return user

    def update_user_profile(self, user: User, new_username: str,
                            new_password: str, new_email: str) -> bool:
        result = validate_profile_update(self.user_database, user, new_username)
        if result.is_left():
            logger.info(f"Profile update rejected: {result.error}")
            return False

        old_username = user.username
        if new_username != old_username and self.user_database.get(old_username) is user:
            self.user_database.remove(old_username)

        user.username = new_username
        user.password = new_password
        user.email = new_email
        self.user_database.put(new_username, user)

        logger.info(f"Updated profile {old_username} -> {new_username}")
        self._publish(USER_UPDATED, {'old_username': old_username, 'username': new_username})
        return True

    def _publish(self, event_type: str, payload: Dict[str, Any]) -> None:
        if self.event_bus is not None:
            self.event_bus.publish(event_type, payload)
