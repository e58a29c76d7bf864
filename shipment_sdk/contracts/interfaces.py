from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from datetime import datetime
from enum import Enum
from typing import TYPE_CHECKING, Any, Dict, List, Optional

from shipment_sdk.errors import UnknownEnumValue
from shipment_sdk.resources.base import Resource

if TYPE_CHECKING:
    from shipment_sdk.clients.request import Request


# ---------------------------------------------------------------------------
# Enums
# ---------------------------------------------------------------------------

class ClosedTagSet(str, Enum):
    """A str enum whose values are the exact wire strings used by the API."""

    @classmethod
    def parse(cls, value: Any):
        if isinstance(value, cls):
            return value
        try:
            return cls(value)
        except ValueError as exc:
            raise UnknownEnumValue(cls.__name__, value) from exc


class Carrier(ClosedTagSet):
    USPS = "USPS"
    UPS = "UPS"
    FEDEX = "FedEx"
    DHL_EXPRESS = "DHLExpress"
    DHL_GLOBAL_MAIL = "DHLGlobalMail"
    CANADA_POST = "CanadaPost"
    CANPAR = "Canpar"
    PUROLATOR = "Purolator"
    LSO = "LSO"
    ONTRAC = "OnTrac"
    AUSTRALIA_POST = "AustraliaPost"
    ROYAL_MAIL = "RoyalMail"


class Service(ClosedTagSet):
    # USPS
    FIRST = "First"
    PRIORITY = "Priority"
    EXPRESS = "Express"
    PARCEL_SELECT = "ParcelSelect"
    LIBRARY_MAIL = "LibraryMail"
    MEDIA_MAIL = "MediaMail"
    CRITICAL_MAIL = "CriticalMail"
    FIRST_CLASS_MAIL_INTERNATIONAL = "FirstClassMailInternational"
    FIRST_CLASS_PACKAGE_INTERNATIONAL_SERVICE = "FirstClassPackageInternationalService"
    PRIORITY_MAIL_INTERNATIONAL = "PriorityMailInternational"
    EXPRESS_MAIL_INTERNATIONAL = "ExpressMailInternational"

    # UPS
    GROUND = "Ground"
    UPS_STANDARD = "UPSStandard"
    UPS_SAVER = "UPSSaver"
    EXPRESS_PLUS = "ExpressPlus"
    EXPEDITED = "Expedited"
    NEXT_DAY_AIR = "NextDayAir"
    NEXT_DAY_AIR_SAVER = "NextDayAirSaver"
    NEXT_DAY_AIR_EARLY_AM = "NextDayAirEarlyAM"
    SECOND_DAY_AIR = "2ndDayAir"
    SECOND_DAY_AIR_AM = "2ndDayAirAM"
    THREE_DAY_SELECT = "3DaySelect"

    # FedEx
    FEDEX_GROUND = "FEDEX_GROUND"
    FEDEX_2_DAY = "FEDEX_2_DAY"
    FEDEX_2_DAY_AM = "FEDEX_2_DAY_AM"
    FEDEX_EXPRESS_SAVER = "FEDEX_EXPRESS_SAVER"
    STANDARD_OVERNIGHT = "STANDARD_OVERNIGHT"
    FIRST_OVERNIGHT = "FIRST_OVERNIGHT"
    PRIORITY_OVERNIGHT = "PRIORITY_OVERNIGHT"
    INTERNATIONAL_ECONOMY = "INTERNATIONAL_ECONOMY"
    INTERNATIONAL_FIRST = "INTERNATIONAL_FIRST"
    INTERNATIONAL_PRIORITY = "INTERNATIONAL_PRIORITY"
    GROUND_HOME_DELIVERY = "GROUND_HOME_DELIVERY"
    SMART_POST = "SMART_POST"

    # Canada Post, DHL and regional carriers
    REGULAR_PARCEL = "RegularParcel"
    EXPEDITED_PARCEL = "ExpeditedParcel"
    XPRESSPOST = "Xpresspost"
    EXPRESS_WORLDWIDE = "ExpressWorldwide"
    OVERNIGHT = "Overnight"


# ---------------------------------------------------------------------------
# Supporting resources
# ---------------------------------------------------------------------------

@dataclass
class Address(Resource):
    id: Optional[str] = None
    name: Optional[str] = None
    company: Optional[str] = None
    street1: Optional[str] = None
    street2: Optional[str] = None
    city: Optional[str] = None
    state: Optional[str] = None
    zip: Optional[str] = None
    country: Optional[str] = None
    phone: Optional[str] = None
    email: Optional[str] = None
    residential: Optional[bool] = None
    mode: Optional[str] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None


@dataclass
class Parcel(Resource):
    id: Optional[str] = None
    length: Optional[float] = None
    width: Optional[float] = None
    height: Optional[float] = None
    weight: Optional[float] = None  # ounces
    predefined_package: Optional[str] = None
    mode: Optional[str] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None


@dataclass
class CustomsItem(Resource):
    id: Optional[str] = None
    description: Optional[str] = None
    quantity: Optional[int] = None
    value: Optional[str] = None
    weight: Optional[float] = None
    hs_tariff_number: Optional[str] = None
    origin_country: Optional[str] = None


@dataclass
class CustomsInfo(Resource):
    id: Optional[str] = None
    contents_type: Optional[str] = None
    contents_explanation: Optional[str] = None
    customs_certify: Optional[bool] = None
    customs_signer: Optional[str] = None
    eel_pfc: Optional[str] = None
    non_delivery_option: Optional[str] = None
    restriction_type: Optional[str] = None
    restriction_comments: Optional[str] = None
    customs_items: Optional[List[CustomsItem]] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None


@dataclass
class Rate(Resource):
    """A priced offer for one carrier service. `rate` is the amount as sent by the API."""

    id: Optional[str] = None
    carrier: Optional[str] = None
    service: Optional[str] = None
    rate: Optional[str] = None
    currency: Optional[str] = None
    shipment_id: Optional[str] = None
    carrier_account_id: Optional[str] = None
    delivery_days: Optional[int] = None
    delivery_date: Optional[str] = None
    delivery_date_guaranteed: Optional[bool] = None
    est_delivery_days: Optional[int] = None
    mode: Optional[str] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    @property
    def amount(self) -> Optional[str]:
        return self.rate


@dataclass
class PostageLabel(Resource):
    id: Optional[str] = None
    label_date: Optional[datetime] = None
    label_resolution: Optional[int] = None
    label_size: Optional[str] = None
    label_type: Optional[str] = None
    label_file_type: Optional[str] = None
    label_url: Optional[str] = None
    label_pdf_url: Optional[str] = None
    label_zpl_url: Optional[str] = None
    label_epl2_url: Optional[str] = None
    integrated_form: Optional[str] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None


@dataclass
class TrackingDetail(Resource):
    datetime: Optional[str] = None
    message: Optional[str] = None
    status: Optional[str] = None
    source: Optional[str] = None


@dataclass
class Tracker(Resource):
    id: Optional[str] = None
    tracking_code: Optional[str] = None
    status: Optional[str] = None
    carrier: Optional[str] = None
    shipment_id: Optional[str] = None
    weight: Optional[float] = None
    est_delivery_date: Optional[str] = None
    signed_by: Optional[str] = None
    tracking_details: Optional[List[TrackingDetail]] = None
    mode: Optional[str] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None


@dataclass
class ScanForm(Resource):
    id: Optional[str] = None
    status: Optional[str] = None
    message: Optional[str] = None
    address: Optional[Address] = None
    tracking_codes: Optional[List[str]] = None
    form_url: Optional[str] = None
    form_file_type: Optional[str] = None
    batch_id: Optional[str] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None


# ---------------------------------------------------------------------------
# Abstract client interface
# ---------------------------------------------------------------------------

class ApiClient(ABC):
    """Every client (real HTTP or mock) must implement this interface."""

    @abstractmethod
    def execute(self, request: "Request") -> Dict[str, Any]:
        """Dispatch the request and return the decoded JSON body."""
