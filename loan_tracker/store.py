"""
Application store for the Loan Tracker frontend.
Owns the fetched collections and runs the refresh and create-then-refresh flows.
"""

import asyncio
import logging
import time
from dataclasses import dataclass, replace
from typing import Any, Callable, Dict, List, Optional, Tuple

from loan_tracker.api import ApiClient
from loan_tracker.config import SUCCESS_MESSAGE, SUCCESS_MESSAGE_TTL
from loan_tracker.exceptions import RequestFailed

logger = logging.getLogger(__name__)

Record = Dict[str, Any]
Listener = Callable[["AppState"], None]


@dataclass(frozen=True)
class AppState:
    """Read-only snapshot of everything the views render."""
    customers: Tuple[Record, ...] = ()
    partners: Tuple[Record, ...] = ()
    loans: Tuple[Record, ...] = ()
    loading: bool = False
    message: str = ""
    message_is_error: bool = False


class LoanTrackerStore:
    """Single owner of the customer, partner, and loan collections.

    Views read ``snapshot()`` and call ``refresh``/``create_entity``; listeners
    registered with ``subscribe`` receive each new snapshot.

    Overlapping calls are allowed. Loading stays on until every in-flight
    operation has finished, and a refresh that completes after a newer one
    was started drops its result.
    """

    def __init__(
        self,
        client: Optional[ApiClient] = None,
        clock: Callable[[], float] = time.monotonic,
        message_ttl: float = SUCCESS_MESSAGE_TTL,
    ):
        self.client = client or ApiClient()
        self._clock = clock
        self._message_ttl = message_ttl
        self._state = AppState()
        self._message_expires_at: Optional[float] = None
        self._listeners: List[Listener] = []
        self._in_flight = 0
        self._refresh_seq = 0
        self._started = False

    # ======================
    # Snapshots and observers
    # ======================

    def snapshot(self) -> AppState:
        """Return the current state, with an expired message blanked out."""
        state = self._state
        if self._message_expired():
            state = replace(state, message="", message_is_error=False)
        return state

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        """Register a listener called with every new snapshot.

        Returns:
            A callable that removes the listener
        """
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def _set(self, **changes) -> None:
        self._state = replace(self._state, **changes)
        snapshot = self.snapshot()
        for listener in list(self._listeners):
            listener(snapshot)

    def _set_message(self, message: str, *, error: bool = False, ttl: Optional[float] = None) -> None:
        self._message_expires_at = self._clock() + ttl if ttl is not None else None
        self._set(message=message, message_is_error=error)

    def _message_expired(self) -> bool:
        return self._message_expires_at is not None and self._clock() >= self._message_expires_at

    def _begin(self) -> None:
        self._in_flight += 1
        self._set(loading=True)

    def _end(self) -> None:
        self._in_flight = max(0, self._in_flight - 1)
        self._set(loading=self._in_flight > 0)

    # ======================
    # Actions
    # ======================

    async def start(self) -> None:
        """Load the collections the first time the store is used."""
        if self._started:
            return
        self._started = True
        await self.refresh()

    async def refresh(self) -> bool:
        """Re-fetch customers, partners, and loans concurrently.

        The three collections are replaced together once all fetches succeed.
        On any failure the previous collections stay in place and the error
        text becomes the message.

        Returns:
            True when the new collections were applied
        """
        self._refresh_seq += 1
        token = self._refresh_seq
        self._begin()
        try:
            customers, partners, loans = await asyncio.gather(
                self.client.list_customers(),
                self.client.list_partners(),
                self.client.list_loans(),
            )
        except RequestFailed as exc:
            logger.warning("Refresh failed: %s", exc.message)
            if token == self._refresh_seq:
                self._set_message(exc.message, error=True)
            return False
        finally:
            self._end()

        if token != self._refresh_seq:
            logger.debug("Discarding stale refresh #%d (latest is #%d)", token, self._refresh_seq)
            return False

        self._set(
            customers=tuple(customers or ()),
            partners=tuple(partners or ()),
            loans=tuple(loans or ()),
        )
        logger.info(
            "Refreshed %d customers, %d partners, %d loans",
            len(self._state.customers),
            len(self._state.partners),
            len(self._state.loans),
        )
        return True

    async def create_entity(self, path: str, data: Dict[str, Any]) -> bool:
        """Create one record, then refresh everything.

        Args:
            path: Collection path, e.g. /api/customers
            data: Draft fields to submit

        Returns:
            True when the backend accepted the record
        """
        self._begin()
        self._set_message("")
        try:
            try:
                await self.client.create(path, data)
            except RequestFailed as exc:
                logger.warning("Create on %s failed: %s", path, exc.message)
                self._set_message(f"Error: {exc.message}", error=True)
                return False

            logger.info("Created record on %s", path)
            if await self.refresh():
                self._set_message(SUCCESS_MESSAGE, ttl=self._message_ttl)
            elif self._state.message_is_error:
                self._set_message(
                    f"{SUCCESS_MESSAGE}, but refresh failed: {self._state.message}",
                    error=True,
                )
            else:
                self._set_message(SUCCESS_MESSAGE, ttl=self._message_ttl)
            return True
        finally:
            self._end()
