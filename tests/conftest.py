"""Pytest fixtures for shipment and rate selection tests."""

import pytest

from shipment_sdk import set_default_client
from shipment_sdk.clients.mocks import MockClient
from shipment_sdk.resources.shipment import Shipment


RATE_PAYLOADS = [
    {"id": "rate_ups_ground", "object": "Rate", "carrier": "UPS", "service": "Ground", "rate": "10.50", "currency": "USD", "shipment_id": "shp_123"},
    {"id": "rate_usps_priority", "object": "Rate", "carrier": "USPS", "service": "Priority", "rate": "8.20", "currency": "USD", "shipment_id": "shp_123"},
    {"id": "rate_fedex_ground", "object": "Rate", "carrier": "FedEx", "service": "FEDEX_GROUND", "rate": "9.75", "currency": "USD", "shipment_id": "shp_123"},
]

SHIPMENT_PAYLOAD = {
    "id": "shp_123",
    "object": "Shipment",
    "mode": "test",
    "created_at": "2024-03-01T12:00:00Z",
    "updated_at": "2024-03-01T12:00:05Z",
    "reference": "order-42",
    "status": "unknown",
    "is_return": False,
    "options": {"currency": "USD"},
    "messages": [],
    "to_address": {"id": "adr_to", "name": "Dr. Steve Brule", "street1": "179 N Harbor Dr", "city": "Redondo Beach", "state": "CA", "zip": "90277", "country": "US"},
    "from_address": {"id": "adr_from", "company": "EasyPost", "street1": "417 Montgomery Street", "city": "San Francisco", "state": "CA", "zip": "94104", "country": "US"},
    "parcel": {"id": "prcl_1", "length": 20.2, "width": 10.9, "height": 5, "weight": 65.9},
    "rates": RATE_PAYLOADS,
    "selected_rate": None,
    "postage_label": None,
    "tracking_code": None,
}


@pytest.fixture
def rate_payloads():
    return [dict(r) for r in RATE_PAYLOADS]


@pytest.fixture
def shipment_payload():
    return dict(SHIPMENT_PAYLOAD)


@pytest.fixture
def mock_client(shipment_payload):
    """Mock client that knows shp_123."""
    return MockClient({("GET", "shipments/shp_123"): shipment_payload})


@pytest.fixture
def shipment(mock_client):
    return Shipment.retrieve("shp_123", client=mock_client)


@pytest.fixture(autouse=True)
def reset_default_client():
    set_default_client(None)
    yield
    set_default_client(None)
