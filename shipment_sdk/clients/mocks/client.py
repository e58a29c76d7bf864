"""
Mock API Client.

Purpose:
- Provides a fake API client used for development/testing
- Does NOT make any network calls
- Returns canned responses keyed by (method, path) and records every request

Usage:
    client = MockClient({("GET", "shipments/shp_1"): {"id": "shp_1"}})
    Shipment.retrieve("shp_1", client=client)

A canned response may be a dict, an exception instance (raised), or a callable
taking the Request and returning either.

Swap:
Replace this mock client with clients/real_http/client.py when API
credentials are available.
"""

from __future__ import annotations

import copy
import logging
from typing import Any, Callable, Dict, List, Optional, Tuple, Union

from shipment_sdk.clients.request import Request
from shipment_sdk.contracts.interfaces import ApiClient
from shipment_sdk.errors import ApiError

logger = logging.getLogger(__name__)

CannedResponse = Union[Dict[str, Any], Exception, Callable[[Request], Any]]


class MockClient(ApiClient):
    def __init__(self, responses: Optional[Dict[Tuple[str, str], CannedResponse]] = None) -> None:
        self.responses: Dict[Tuple[str, str], CannedResponse] = {}
        for (method, path), payload in (responses or {}).items():
            self.add_response(method, path, payload)
        self.requests: List[Request] = []

    def add_response(self, method: str, path: str, payload: CannedResponse) -> None:
        self.responses[(method.upper(), path.lstrip("/"))] = payload

    def execute(self, request: Request) -> Dict[str, Any]:
        logger.info(f"[MOCK] {request.method} {request.path}")
        self.requests.append(request)

        key = (request.method, request.path)
        if key not in self.responses:
            raise ApiError(
                f"No mock response for {request.method} {request.path}",
                status_code=404,
                code="NOT_FOUND",
            )

        payload = self.responses[key]
        if callable(payload):
            payload = payload(request)
        if isinstance(payload, Exception):
            raise payload
        return copy.deepcopy(payload)

    @property
    def last_request(self) -> Optional[Request]:
        return self.requests[-1] if self.requests else None
