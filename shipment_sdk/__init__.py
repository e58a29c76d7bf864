"""
Shipment SDK.

Client for the shipment resource of a shipping-logistics API: create and
retrieve shipments, fetch and buy rates, insure, generate labels, stamps and
barcodes, request refunds, and pick the lowest rate locally.

Key rule:
- Resources never call HTTP directly; they go through an ApiClient
  (clients/real_http for the live API, clients/mocks for development).
"""

from .contracts import (
    Address,
    ApiClient,
    Carrier,
    CustomsInfo,
    CustomsItem,
    Parcel,
    PostageLabel,
    Rate,
    ScanForm,
    Service,
    Tracker,
    TrackingDetail,
    select_lowest_rate,
)
from .clients import Request, get_default_client, set_default_client
from .clients.mocks import MockClient
from .clients.real_http import Client
from .config import ClientSettings, load_settings
from .errors import (
    ApiConnectionError,
    ApiError,
    ConfigurationError,
    MalformedAmount,
    ShipmentSDKError,
    UnknownEnumValue,
)
from .resources import merge
from .resources.shipment import Shipment

__version__ = "0.1.0"

__all__ = [
    # resources
    "Shipment", "Address", "Parcel", "CustomsInfo", "CustomsItem", "Rate",
    "PostageLabel", "Tracker", "TrackingDetail", "ScanForm", "merge",
    # tag sets
    "Carrier", "Service",
    # rates
    "select_lowest_rate",
    # clients
    "ApiClient", "Client", "MockClient", "Request",
    "get_default_client", "set_default_client",
    # config
    "ClientSettings", "load_settings",
    # errors
    "ShipmentSDKError", "ApiError", "ApiConnectionError", "ConfigurationError",
    "UnknownEnumValue", "MalformedAmount",
]
