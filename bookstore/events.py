import logging
import time
from typing import NamedTuple, Callable, Dict, List, Any

logger = logging.getLogger(__name__)

BOOK_ADDED = "BOOK_ADDED"
BOOK_REMOVED = "BOOK_REMOVED"
BOOK_PURCHASED = "BOOK_PURCHASED"
REVIEW_ADDED = "REVIEW_ADDED"
USER_REGISTERED = "USER_REGISTERED"
USER_UPDATED = "USER_UPDATED"


class Event(NamedTuple):
    name: str
    payload: Dict[str, Any]
    timestamp: float


class EventBus:
    def __init__(self):
        self._subscribers: Dict[str, List[Callable[[Event], None]]] = {}
        self._event_history: List[Event] = []

    def subscribe(self, event_type: str, handler: Callable[[Event], None]) -> None:
        """Subscribe handler to event type"""
        self._subscribers.setdefault(event_type, []).append(handler)

    def unsubscribe(self, event_type: str, handler: Callable[[Event], None]) -> None:
        """Unsubscribe handler from event type"""
        if event_type in self._subscribers:
            self._subscribers[event_type] = [
                h for h in self._subscribers[event_type] if h != handler
            ]

    def publish(self, event_type: str, payload: Dict[str, Any]) -> Event:
        """Publish event to all subscribers"""
        event = Event(event_type, payload, time.time())
        self._event_history.append(event)

        for handler in self._subscribers.get(event_type, []):
            try:
                handler(event)
            except Exception as e:
                logger.error(f"Error in {event_type} handler: {e}")

        return event

    def get_event_history(self) -> List[Event]:
        """Get all published events"""
        return self._event_history.copy()

    def clear_history(self) -> None:
        self._event_history.clear()
