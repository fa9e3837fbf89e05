# bookstore/filters.py
from functools import partial
from typing import Callable, Iterable, List, Optional

from bookstore.compose import compose
from bookstore.domain import Book


# closure filters

def create_keyword_filter(keyword: str) -> Callable[[Book], bool]:
    """Case-sensitive substring match on title, author or genre"""

    def keyword_filter(book: Book) -> bool:
        return keyword in book.title or keyword in book.author or keyword in book.genre

    return keyword_filter


def create_genre_filter(genres: Iterable[str]) -> Callable[[Book], bool]:
    """Create a closure matching any of the given genres exactly"""
    wanted = tuple(genres)

    def genre_filter(book: Book) -> bool:
        return book.genre in wanted

    return genre_filter


def create_author_filter(authors: Iterable[str]) -> Callable[[Book], bool]:
    """Create a closure matching books whose author contains any of the names"""
    names = tuple(authors)

    def author_filter(book: Book) -> bool:
        return any(name in book.author for name in names)

    return author_filter


def create_price_filter(min_price: Optional[float] = None,
                        max_price: Optional[float] = None) -> Callable[[Book], bool]:
    """Create a closure for an inclusive price range; None leaves a side open"""

    def price_filter(book: Book) -> bool:
        if min_price is not None and book.price < min_price:
            return False
        if max_price is not None and book.price > max_price:
            return False
        return True

    return price_filter


# Higher-order functions for combining filters
def combine_filters(*filters: Callable[[Book], bool]) -> Callable[[Book], bool]:
    """Closure that accepts a book only when every filter does"""

    def combined_filter(book: Book) -> bool:
        return all(filter_func(book) for filter_func in filters)

    return combined_filter


def create_search(*filters: Callable[[Book], bool]) -> Callable[[Iterable[Book]], List[Book]]:
    """Build a search function keeping catalog order"""
    return compose(list, partial(filter, combine_filters(*filters)))


# Configurable closure
def create_advanced_search(
        genres: Optional[List[str]] = None,
        authors: Optional[List[str]] = None,
        min_price: Optional[float] = None,
        max_price: Optional[float] = None
) -> Callable[[Iterable[Book]], List[Book]]:
    """Creating a closure for an advanced search function"""

    filters = []

    if genres:
        filters.append(create_genre_filter(genres))

    if authors:
        filters.append(create_author_filter(authors))

    if min_price is not None or max_price is not None:
        filters.append(create_price_filter(min_price, max_price))

    return create_search(*filters)
