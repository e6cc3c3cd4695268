from collections import defaultdict
import logging
import threading
from typing import Callable, DefaultDict, List, Type


Handler = Callable[[object], None]


class EventBus:
    """Synchronous in-process publisher for domain events.

    Handlers run in (priority, registration) order on the publishing thread.
    A failing handler is logged and skipped so one broken listener cannot
    abort a health tick or a reward claim.
    """

    def __init__(self) -> None:
        self._subscribers: DefaultDict[Type[object], List[tuple[int, int, Handler]]] = defaultdict(list)
        self._next_order = 0
        self._last_publish_errors: List[Exception] = []
        self._lock = threading.RLock()
        self._logger = logging.getLogger(__name__)

    def subscribe(self, event_type: Type[object], handler: Handler, *, priority: int = 100) -> None:
        with self._lock:
            rows = self._subscribers[event_type]
            rows.append((int(priority), self._next_order, handler))
            self._next_order += 1
            rows.sort(key=lambda row: (row[0], row[1]))

    def unsubscribe(self, event_type: Type[object], handler: Handler) -> bool:
        with self._lock:
            rows = self._subscribers.get(event_type, [])
            kept = [row for row in rows if row[2] is not handler]
            if len(kept) == len(rows):
                return False
            self._subscribers[event_type] = kept
            return True

    def publish(self, event: object) -> int:
        event_type = type(event)
        with self._lock:
            handlers = list(self._subscribers.get(event_type, ()))
        errors: List[Exception] = []
        delivered = 0
        for priority, _, handler in handlers:
            try:
                handler(event)
                delivered += 1
            except Exception as exc:
                errors.append(exc)
                handler_name = getattr(handler, "__qualname__", getattr(handler, "__name__", repr(handler)))
                self._logger.exception(
                    "Event handler failed and was isolated",
                    extra={
                        "event_type": event_type.__name__,
                        "handler": handler_name,
                        "priority": priority,
                    },
                )
        self._last_publish_errors = errors
        return delivered

    def last_publish_errors(self) -> List[Exception]:
        return list(self._last_publish_errors)
