"""
Real HTTP API client.

Purpose:
- Sends Request objects to the shipping API over HTTPS
- Authenticates with HTTP basic auth (API key as username, empty password)
- Decodes JSON bodies and turns API failures into ApiError / ApiConnectionError

Usage:
- Shared by all resources through clients.get_default_client()
- Or constructed explicitly and passed to Shipment.retrieve(..., client=...)

Important:
- Keep this client as the ONLY place where HTTP calls are made.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, Optional

import httpx

from shipment_sdk.clients.request import Request
from shipment_sdk.config import ClientSettings, load_settings
from shipment_sdk.contracts.interfaces import ApiClient
from shipment_sdk.errors import ApiConnectionError, ApiError, ConfigurationError

logger = logging.getLogger(__name__)


class Client(ApiClient):
    def __init__(
        self,
        api_key: Optional[str] = None,
        base_url: Optional[str] = None,
        timeout_seconds: Optional[float] = None,
        settings: Optional[ClientSettings] = None,
        transport: Optional[httpx.BaseTransport] = None,
    ) -> None:
        settings = settings or load_settings()
        self.api_key = api_key or settings.api_key or ""
        self.base_url = (base_url or settings.base_url).rstrip("/")
        self.timeout_seconds = timeout_seconds or settings.timeout_seconds
        self._http = httpx.Client(
            base_url=self.base_url,
            auth=(self.api_key, ""),
            timeout=self.timeout_seconds,
            headers={"User-Agent": settings.user_agent, "Accept": "application/json"},
            transport=transport,
        )

    def execute(self, request: Request) -> Dict[str, Any]:
        if not self.api_key:
            raise ConfigurationError("EASYPOST_API_KEY is not configured.")

        if request.method == "GET":
            params, data = request.parameters or None, None
        else:
            params, data = None, request.parameters

        logger.info(f"{request.method} {request.path}")
        logger.debug("Request parameters: %s", request.parameters)
        try:
            response = self._http.request(request.method, request.path, params=params, data=data)
            response.raise_for_status()
        except httpx.HTTPStatusError as e:
            logger.error(f"HTTP error from shipping API: {e.response.status_code} {e.response.text}")
            raise api_error_from_response(e.response) from e
        except httpx.RequestError as e:
            logger.error(f"Request error connecting to shipping API: {e}")
            raise ApiConnectionError(f"Could not reach {self.base_url}: {e}") from e

        logger.info(f"Received response: status={response.status_code}")
        if not response.content:
            return {}
        try:
            body = response.json()
        except ValueError as exc:
            raise ApiError(
                "Response body is not valid JSON",
                status_code=response.status_code,
                payload={"body": response.text},
            ) from exc
        if not isinstance(body, dict):
            raise ApiError(
                "Expected a JSON object in the response body",
                status_code=response.status_code,
                payload={"body": body},
            )
        return body

    def close(self) -> None:
        self._http.close()

    def __enter__(self) -> "Client":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()


def api_error_from_response(response: httpx.Response) -> ApiError:
    """Build an ApiError from a `{"error": {"code", "message"}}` body, falling back to the raw text."""
    try:
        body = response.json()
    except ValueError:
        body = {}

    error = body.get("error") if isinstance(body, dict) else None
    code: Optional[str] = None
    message: Optional[str] = None
    if isinstance(error, dict):
        code = error.get("code")
        message = error.get("message")
    elif isinstance(error, str):
        message = error

    return ApiError(
        message or response.text or response.reason_phrase or f"HTTP {response.status_code}",
        status_code=response.status_code,
        code=code,
        payload=body if isinstance(body, dict) else {"body": body},
    )
