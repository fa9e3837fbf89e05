# In-memory bookstore: catalog and user services
from .domain import Book, User
from .database import UserDatabase, UserStore
from .services import BookService, UserService
from .events import Event, EventBus

__all__ = [
    'Book', 'User',
    'UserDatabase', 'UserStore',
    'BookService', 'UserService',
    'Event', 'EventBus',
]
