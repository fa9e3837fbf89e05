from typing import List

from .database import UserStore
from .domain import Book, User
from .ftypes import Either, Right, Left


def check_in_catalog(catalog: List[Book], book: Book) -> Either[str, Book]:
    """Right(listed) with the catalog's own instance of an equal book"""
    if book in catalog:
        return Right(catalog[catalog.index(book)])
    return Left(f"Book is not in the catalog: {book.title}")


def check_not_in_catalog(catalog: List[Book], book: Book) -> Either[str, Book]:
    """Right(book) when no equal book is listed yet"""
    if book in catalog:
        return Left(f"Book already in the catalog: {book.title}")
    return Right(book)


def check_purchased(purchased: List[Book], user: User, book: Book) -> Either[str, Book]:
    if book in purchased:
        return Right(book)
    return Left(f"User {user.username} has not purchased: {book.title}")


def validate_review(user: User,
                    book: Book,
                    catalog: List[Book],
                    store: UserStore) -> Either[str, Book]:
    """A review needs the book listed in the catalog and bought by the user"""
    return check_in_catalog(catalog, book).bind(
        lambda listed: check_purchased(store.get_purchased_books(user), user, listed)
    )


def check_username_available(store: UserStore, username: str) -> Either[str, str]:
    if store.contains_key(username):
        return Left(f"Username already taken: {username}")
    return Right(username)


def validate_profile_update(store: UserStore, user: User, new_username: str) -> Either[str, str]:
    """A username is free if unused or already stored for this same user"""
    if store.get(new_username) is user:
        return Right(new_username)
    return check_username_available(store, new_username)
