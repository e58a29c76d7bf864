"""Tests for the real HTTP client, using httpx.MockTransport instead of the network."""

import base64
import json
from urllib.parse import parse_qs

import httpx
import pytest

from shipment_sdk.clients.real_http import Client
from shipment_sdk.clients.request import Request
from shipment_sdk.config import ClientSettings
from shipment_sdk.errors import ApiConnectionError, ApiError, ConfigurationError, ShipmentSDKError
from shipment_sdk.resources.shipment import Shipment


def make_client(handler, api_key="test_key"):
    settings = ClientSettings(api_key=api_key, base_url="https://api.example.test/v2", user_agent="shipment-sdk-tests")
    return Client(settings=settings, transport=httpx.MockTransport(handler))


def test_get_sends_auth_user_agent_and_query():
    seen = {}

    def handler(request):
        seen["request"] = request
        return httpx.Response(200, json={"id": "shp_1", "postage_label": {"label_pdf_url": "https://x/1.pdf"}})

    client = make_client(handler)
    request = Request("shipments/{id}/label").add_url_segment("id", "shp_1").add_parameter("file_format", "pdf")

    body = client.execute(request)

    sent = seen["request"]
    assert body["id"] == "shp_1"
    assert sent.method == "GET"
    assert str(sent.url) == "https://api.example.test/v2/shipments/shp_1/label?file_format=pdf"
    assert sent.headers["Authorization"] == "Basic " + base64.b64encode(b"test_key:").decode()
    assert sent.headers["User-Agent"] == "shipment-sdk-tests"


def test_post_sends_form_encoded_body():
    seen = {}

    def handler(request):
        seen["form"] = parse_qs(request.content.decode())
        seen["content_type"] = request.headers["Content-Type"]
        return httpx.Response(201, json={"id": "shp_2"})

    client = make_client(handler)
    shipment = Shipment.create({"to_address": {"zip": "94105"}, "parcel": {"weight": 10}}, client=client)

    assert shipment.id == "shp_2"
    assert seen["content_type"].startswith("application/x-www-form-urlencoded")
    assert seen["form"] == {"shipment[to_address][zip]": ["94105"], "shipment[parcel][weight]": ["10"]}


def test_error_body_becomes_api_error():
    def handler(request):
        return httpx.Response(
            422,
            json={"error": {"code": "SHIPMENT.INVALID_PARAMS", "message": "Unable to create shipment"}},
        )

    client = make_client(handler)
    with pytest.raises(ApiError) as exc_info:
        client.execute(Request("shipments", "POST"))

    err = exc_info.value
    assert err.status_code == 422
    assert err.code == "SHIPMENT.INVALID_PARAMS"
    assert err.message == "Unable to create shipment"
    assert err.payload["error"]["code"] == "SHIPMENT.INVALID_PARAMS"
    assert str(err) == "[422] Unable to create shipment"


def test_non_json_error_falls_back_to_text():
    client = make_client(lambda request: httpx.Response(502, text="Bad Gateway"))
    with pytest.raises(ApiError) as exc_info:
        client.execute(Request("shipments/shp_1").add_url_segment("id", "shp_1"))
    assert exc_info.value.status_code == 502
    assert exc_info.value.message == "Bad Gateway"


def test_connection_failure_becomes_api_connection_error():
    def handler(request):
        raise httpx.ConnectError("connection refused", request=request)

    client = make_client(handler)
    with pytest.raises(ApiConnectionError) as exc_info:
        client.execute(Request("shipments"))
    assert isinstance(exc_info.value, ConnectionError)
    assert isinstance(exc_info.value, ShipmentSDKError)


def test_invalid_json_success_body_raises_api_error():
    client = make_client(lambda request: httpx.Response(200, text="<html>not json</html>"))
    with pytest.raises(ApiError) as exc_info:
        client.execute(Request("shipments"))
    assert exc_info.value.status_code == 200


def test_empty_body_returns_empty_dict():
    client = make_client(lambda request: httpx.Response(204))
    assert client.execute(Request("shipments")) == {}


def test_missing_api_key_fails_before_sending():
    calls = []

    def handler(request):
        calls.append(request)
        return httpx.Response(200, json={})

    client = make_client(handler, api_key=None)
    with pytest.raises(ConfigurationError) as exc_info:
        client.execute(Request("shipments"))
    assert isinstance(exc_info.value, ShipmentSDKError)
    assert isinstance(exc_info.value, ValueError)
    assert calls == []


def test_client_is_a_context_manager():
    with make_client(lambda request: httpx.Response(200, content=json.dumps({"id": "shp_3"}))) as client:
        assert client.execute(Request("shipments"))["id"] == "shp_3"
