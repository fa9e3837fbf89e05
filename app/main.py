"""
Console demo for the in-memory bookstore.

Wires a UserDatabase into both services, seeds a small catalog and walks
through register -> login -> purchase -> review, printing what happened.

    python -m app.main --log-level DEBUG --reviewer alice
"""

import argparse
import logging
from typing import List, Optional

from bookstore import Book, BookService, EventBus, User, UserDatabase, UserService

logger = logging.getLogger(__name__)

SEED_BOOKS = (
    ("Abai Zholy", "Mukhtar Auezov", "Classic", 12.99),
    ("Blood and Sweat", "Abdizhamil Nurpeisov", "Classic", 14.99),
    ("The Nomads", "Ilyas Esenberlin", "History", 11.50),
    ("Dune", "Frank Herbert", "Sci-Fi", 9.99),
)


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="In-memory bookstore demo")
    parser.add_argument(
        "--log-level",
        default="INFO",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging level (default: INFO)"
    )
    parser.add_argument(
        "--reviewer",
        default="reader",
        help="Username registered and used for the demo purchase (default: reader)"
    )
    return parser.parse_args(argv)


def configure_logging(level: str) -> None:
    logging.basicConfig(
        level=getattr(logging, level),
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    )


def seed_catalog(book_service: BookService) -> List[Book]:
    books = [Book(*row) for row in SEED_BOOKS]
    for book in books:
        book_service.add_book(book)
    return books


def run_demo(reviewer: str) -> EventBus:
    """Run the purchase and review workflow; returns the bus with its history"""
    event_bus = EventBus()
    database = UserDatabase()
    user_service = UserService(database, event_bus)
    book_service = BookService(database, event_bus)

    books = seed_catalog(book_service)
    print(f"Catalog: {len(book_service.get_book_database())} books")

    user_service.register_user(User(reviewer, "secret", f"{reviewer}@example.com"))
    user = user_service.login_user(reviewer, "secret")
    if user is None:
        logger.error(f"Demo login failed for {reviewer}")
        return event_bus

    classics = book_service.search_book("Classic")
    print(f"Search 'Classic': {[b.title for b in classics]}")

    chosen = books[0]
    print(f"Review before purchase accepted: "
          f"{book_service.add_book_review(user, chosen, 'Not read yet')}")
    book_service.purchase_book(user, chosen)
    book_service.add_book_review(user, chosen, "A cornerstone of the steppe novel.")
    print(f"Reviews of '{chosen.title}': {chosen.reviews}")

    for event in event_bus.get_event_history():
        print(f"  {event.name}: {event.payload}")
    return event_bus


def main(argv: Optional[List[str]] = None) -> int:
    args = parse_args(argv)
    configure_logging(args.log_level)
    run_demo(args.reviewer)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
