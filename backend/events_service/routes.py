"""
Events service routes: create, list, and look up fundraising events.
Backed by the in-memory EventRegistry; the ledger client hooks mark where
the smart contract integration will plug in.
"""

import logging
import re
from typing import Any, Dict, Optional, Tuple

from flask import Blueprint, Response, abort, current_app, jsonify, request

from backend.events_service.registry import EventNotFound, EventRegistry
from backend.ledger_service.client import LedgerClient, NullLedgerClient

events_bp = Blueprint("events", __name__)

REGISTRY_KEY = "event_registry"
LEDGER_KEY = "ledger_client"
NOT_FOUND_MESSAGE = "Event not found"

# Leading whitespace, optional sign, then ASCII digits. Anything after is ignored.
_INT_PREFIX = re.compile(r"^\s*([+-]?[0-9]+)")


def parse_event_id(val: Optional[str]) -> Optional[int]:
    """
    Parse a path segment as a base-10 integer, reading only the leading
    digits ("12abc" -> 12).

    Args:
        val (str): The raw path segment.

    Returns:
        int: The parsed id, or None if the segment has no leading integer.
    """
    if not val:
        return None
    match = _INT_PREFIX.match(val)
    if not match:
        return None
    return int(match.group(1))


def get_registry() -> EventRegistry:
    return current_app.extensions[REGISTRY_KEY]


def get_ledger() -> LedgerClient:
    return current_app.extensions.get(LEDGER_KEY) or NullLedgerClient()


def not_found() -> Response:
    return Response(NOT_FOUND_MESSAGE, status=404, mimetype="text/plain")


# --- REQUEST LOGGING ---
@events_bp.before_request
def before_request() -> None:
    logging.info(f"[Events] Incoming {request.method} {request.path}")


@events_bp.after_request
def after_request(response: Response) -> Response:
    logging.info(f"[Events] Response {response.status}")
    return response


@events_bp.route("", methods=["POST"])
@events_bp.route("/", methods=["POST"])
def create_event() -> Tuple[Response, int]:
    """
    Create a fundraising event.

    Body (JSON): name, nit, email, website, goal_amount, deadline.
    None of them are validated; missing ones stay unset.

    Returns:
        201: The created event with id, amount_raised=0 and status="Open".
        400: Malformed JSON, or a JSON body that is not an object or array.
    """
    data: Any = {}
    if request.is_json and request.get_data():
        # Malformed JSON raises BadRequest (400) here
        data = request.get_json()
        if not isinstance(data, (dict, list)):
            abort(400)
    if isinstance(data, list):
        data = {}

    event = get_registry().create(data)
    logging.info(f"[Events] Created event {event['id']}")

    try:
        get_ledger().record_event(event)
    except Exception as e:
        logging.error(f"[Events] Ledger error recording event {event['id']}: {e}")

    return jsonify(event), 201


@events_bp.route("", methods=["GET"])
@events_bp.route("/", methods=["GET"])
def list_events() -> Tuple[Response, int]:
    """
    Return all events in creation order.

    Returns:
        200: List of event objects.
    """
    try:
        # Ledger data is fetched but not merged until a reconciliation policy exists
        get_ledger().fetch_events()
    except Exception as e:
        logging.error(f"[Events] Ledger error listing events: {e}")

    return jsonify(get_registry().list()), 200


@events_bp.route("/<event_id>", methods=["GET"])
def get_event(event_id: str) -> Tuple[Response, int]:
    """
    Get a single event by id.

    Returns:
        200: Event object.
        404: Plain text "Event not found".
    """
    parsed_id = parse_event_id(event_id)
    if parsed_id is None:
        return not_found(), 404

    try:
        get_ledger().fetch_event(parsed_id)
    except Exception as e:
        logging.error(f"[Events] Ledger error getting event {parsed_id}: {e}")

    try:
        event: Dict[str, Any] = get_registry().get_by_id(parsed_id)
    except EventNotFound:
        return not_found(), 404

    return jsonify(event), 200
