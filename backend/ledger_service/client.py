"""
Ledger (smart contract) client seam.

The donation contract is meant to become the source of truth for event
creation and balances. Until that integration exists, the events routes call
these hooks and the in-memory registry stays authoritative.
"""

import logging
import os
from typing import Any, Dict, List, Optional

from dotenv import load_dotenv

load_dotenv()


class LedgerClient:
    """
    Base client. Every hook is a no-op.
    """

    name = "base"

    def record_event(self, event: Dict[str, Any]) -> None:
        """
        Publish a newly created event to the ledger.
        """
        return None

    def fetch_events(self) -> List[Dict[str, Any]]:
        """
        Return the events the ledger knows about.
        """
        return []

    def fetch_event(self, event_id: int) -> Optional[Dict[str, Any]]:
        """
        Return one ledger event, or None if the ledger has no record of it.
        """
        return None


class NullLedgerClient(LedgerClient):
    """
    Used when no contract is configured.
    """

    name = "null"

    def record_event(self, event: Dict[str, Any]) -> None:
        logging.debug(f"[Ledger] Sync disabled, skipping event {event.get('id')}")


class PendingLedgerClient(LedgerClient):
    """
    A contract id is configured but contract calls are not wired up yet.
    Warns once, then behaves like the base client.
    """

    name = "pending"

    def __init__(self, contract_id: str):
        self.contract_id = contract_id
        self._warned = False

    def _warn_once(self) -> None:
        if not self._warned:
            logging.warning(
                f"[Ledger] Contract {self.contract_id} configured, "
                "but on-chain calls are not implemented. Using in-memory registry only."
            )
            self._warned = True

    def record_event(self, event: Dict[str, Any]) -> None:
        self._warn_once()

    def fetch_events(self) -> List[Dict[str, Any]]:
        self._warn_once()
        return []

    def fetch_event(self, event_id: int) -> Optional[Dict[str, Any]]:
        self._warn_once()
        return None


def get_ledger_client() -> LedgerClient:
    """
    Pick a ledger client from the environment.

    Returns:
        LedgerClient: PendingLedgerClient if LEDGER_CONTRACT_ID is set,
            otherwise NullLedgerClient.
    """
    contract_id = os.getenv("LEDGER_CONTRACT_ID")
    if contract_id:
        return PendingLedgerClient(contract_id)
    return NullLedgerClient()
