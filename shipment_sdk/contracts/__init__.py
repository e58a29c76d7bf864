"""
Contracts (data models).

This folder defines the shapes exchanged with the shipping API:
- closed tag sets for carriers and services
- supporting resources (addresses, parcels, rates, labels, trackers, ...)
- the ApiClient interface every client implements
- rate selection over fetched rates

Why this exists:
- Resources and clients rely on stable models, not on ad-hoc dicts
- Carrier/service names are validated in one place
"""

from .interfaces import (
    Address,
    ApiClient,
    Carrier,
    ClosedTagSet,
    CustomsInfo,
    CustomsItem,
    Parcel,
    PostageLabel,
    Rate,
    ScanForm,
    Service,
    Tracker,
    TrackingDetail,
)
from .rates import parse_amount, select_lowest_rate

__all__ = [
    "Address", "ApiClient", "Carrier", "ClosedTagSet", "CustomsInfo",
    "CustomsItem", "Parcel", "PostageLabel", "Rate", "ScanForm", "Service",
    "Tracker", "TrackingDetail",
    "parse_amount", "select_lowest_rate",
]
