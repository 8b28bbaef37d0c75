"""
In-memory event registry.
Holds every fundraising event for the lifetime of the process.

The registry owns its id counter and its lock, so the app can share one
instance across request threads without ambient global state.
"""

import copy
import threading
from collections.abc import Mapping
from typing import Any, Dict, List, Optional

# --- CONSTANTS ---
EVENT_FIELDS = ("name", "nit", "email", "website", "goal_amount", "deadline")
STATUS_OPEN = "Open"


class EventNotFound(LookupError):
    """
    Raised when no event matches the requested id.
    """

    def __init__(self, event_id: Any):
        super().__init__(f"Event {event_id!r} not found")
        self.event_id = event_id


class EventRegistry:
    """
    Ordered, append-only store of event records.

    Usage:
        registry = EventRegistry()
        event = registry.create({"name": "Run4Good", "goal_amount": 1000})
        registry.get_by_id(event["id"])
    """

    def __init__(self) -> None:
        self._events: List[Dict[str, Any]] = []
        self._next_id = 0
        self._lock = threading.Lock()

    def create(self, fields: Optional[Mapping[str, Any]]) -> Dict[str, Any]:
        """
        Store a new event and return it.

        Only the known event fields are copied; a field that is absent from
        `fields` stays unset and is left out of the record.

        Args:
            fields (Mapping): Raw values for name, nit, email, website,
                goal_amount and deadline. Anything else is ignored.

        Returns:
            dict: The created record, including id, amount_raised and status.
        """
        if not isinstance(fields, Mapping):
            fields = {}

        with self._lock:
            event: Dict[str, Any] = {"id": self._next_id}
            for key in EVENT_FIELDS:
                if key in fields:
                    event[key] = copy.deepcopy(fields[key])
            event["amount_raised"] = 0
            event["status"] = STATUS_OPEN

            self._events.append(event)
            self._next_id += 1
            return copy.deepcopy(event)

    def list(self) -> List[Dict[str, Any]]:
        """
        Return all events in creation order.
        """
        with self._lock:
            return [copy.deepcopy(event) for event in self._events]

    def get_by_id(self, event_id: int) -> Dict[str, Any]:
        """
        Find an event by id.

        Scans by value instead of indexing by position, so it keeps working
        if events are ever removed or reordered.

        Raises:
            EventNotFound: If no stored event has this id.
        """
        with self._lock:
            for event in self._events:
                if event["id"] == event_id:
                    return copy.deepcopy(event)
        raise EventNotFound(event_id)

    def count(self) -> int:
        with self._lock:
            return len(self._events)

    def __len__(self) -> int:
        return self.count()
