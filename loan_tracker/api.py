"""
REST client for the Loan Tracker backend.
Wraps JSON requests with httpx and normalizes failures into RequestFailed.
"""

import asyncio
import logging
from typing import Any, Dict, List, Optional

import httpx

from loan_tracker.config import (
    BACKEND_URL,
    CUSTOMERS_PATH,
    PARTNERS_PATH,
    LOANS_PATH,
    get_request_timeout,
)
from loan_tracker.exceptions import RequestFailed

logger = logging.getLogger(__name__)

JSON_HEADERS = {"Content-Type": "application/json"}


class ApiClient:
    """Single-attempt JSON client for the backend REST API.

    A fresh ``httpx.AsyncClient`` is opened per request so the client can be
    driven from whichever event loop the caller is running.

    Attributes:
        base_url: Backend root, e.g. http://localhost:8000
        timeout: Seconds per request, or None to wait indefinitely
    """

    def __init__(
        self,
        base_url: Optional[str] = None,
        timeout: Optional[float] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        """Initialize the API client.

        Args:
            base_url: Backend root; defaults to LOAN_TRACKER_BACKEND_URL
            timeout: Seconds per request; defaults to LOAN_TRACKER_REQUEST_TIMEOUT
            transport: Optional httpx transport (used by tests)
        """
        self.base_url = (base_url or BACKEND_URL).rstrip("/")
        self.timeout = timeout if timeout is not None else get_request_timeout()
        self._transport = transport

    async def request(self, path: str, method: str = "GET", payload: Any = None) -> Any:
        """Send one request and return the parsed JSON body.

        Args:
            path: API path beginning with '/'
            method: HTTP method
            payload: JSON-serializable request body, if any

        Returns:
            The decoded JSON response

        Raises:
            RequestFailed: on a non-2xx status (message is the raw body text),
                a transport error, a payload that cannot be JSON-encoded,
                or a body that is not JSON
        """
        try:
            async with httpx.AsyncClient(
                base_url=self.base_url,
                headers=JSON_HEADERS,
                timeout=self.timeout,
                transport=self._transport,
            ) as client:
                try:
                    request = client.build_request(method, path, json=payload)
                except (TypeError, ValueError) as exc:
                    raise RequestFailed(f"Could not encode request body: {exc}") from exc
                response = await client.send(request)
        except httpx.HTTPError as exc:
            logger.debug("%s %s failed: %s", method, path, exc)
            raise RequestFailed(str(exc) or exc.__class__.__name__) from exc

        if not response.is_success:
            raise RequestFailed(response.text, status_code=response.status_code)

        try:
            return response.json()
        except ValueError as exc:
            raise RequestFailed(f"Invalid JSON response from {path}") from exc

    async def list_customers(self) -> List[Dict[str, Any]]:
        return await self.request(CUSTOMERS_PATH)

    async def list_partners(self) -> List[Dict[str, Any]]:
        return await self.request(PARTNERS_PATH)

    async def list_loans(self) -> List[Dict[str, Any]]:
        return await self.request(LOANS_PATH)

    async def create(self, path: str, payload: Dict[str, Any]) -> Any:
        """POST one new record and return the created record."""
        return await self.request(path, method="POST", payload=payload)


def run_async(coro):
    """Helper to run an async coroutine in synchronous context (e.g., Streamlit).

    Args:
        coro: An awaitable coroutine

    Returns:
        The result of the coroutine
    """
    try:
        loop = asyncio.get_event_loop()
    except RuntimeError:
        loop = asyncio.new_event_loop()
        asyncio.set_event_loop(loop)
    return loop.run_until_complete(coro)
