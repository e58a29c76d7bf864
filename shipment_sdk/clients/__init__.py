"""
API clients.

- clients/real_http: the HTTP client used against the live API
- clients/mocks: canned-response client for development and tests

Both implement contracts.interfaces.ApiClient and accept the same Request
objects (clients/request.py).

Switching:
Resources use the process-wide default client unless one is passed explicitly.
The selection of mock vs real client should happen in ONE place, by calling
set_default_client() at startup.
"""

from __future__ import annotations

import logging
from typing import Optional

from .request import Request
from shipment_sdk.contracts.interfaces import ApiClient

logger = logging.getLogger(__name__)

_default_client: Optional[ApiClient] = None


def get_default_client() -> ApiClient:
    """Return the shared client, building a real HTTP client from settings on first use."""
    global _default_client
    if _default_client is None:
        from .real_http.client import Client

        logger.info("Creating default HTTP client from settings")
        _default_client = Client()
    return _default_client


def set_default_client(client: Optional[ApiClient]) -> None:
    """Install the shared client. Passing None resets to lazy construction."""
    global _default_client
    _default_client = client


__all__ = ["ApiClient", "Request", "get_default_client", "set_default_client"]
