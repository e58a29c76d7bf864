"""
Shipment resource.

A Shipment aggregates the from/to addresses, parcel and customs info of a
package, the rates quoted for it, and - once bought - its label, tracking code
and tracker. Remote methods call the API through the shared client and copy
the response onto this instance.

Rates are cached on the instance after the first fetch; call get_rates()
again to refresh them.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import datetime
from decimal import Decimal
from typing import Any, ClassVar, Dict, Iterable, List, Optional, Union

from shipment_sdk.clients import Request, get_default_client
from shipment_sdk.contracts.interfaces import (
    Address,
    ApiClient,
    Carrier,
    CustomsInfo,
    Parcel,
    PostageLabel,
    Rate,
    ScanForm,
    Service,
    Tracker,
)
from shipment_sdk.contracts.rates import select_lowest_rate
from .base import Resource, merge

logger = logging.getLogger(__name__)

LABEL_FORMATS = ("pdf", "zpl", "epl2", "png")


@dataclass
class Shipment(Resource):
    id: Optional[str] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None
    tracking_code: Optional[str] = None
    reference: Optional[str] = None
    status: Optional[str] = None
    is_return: Optional[bool] = None
    options: Optional[Dict[str, Any]] = None
    messages: Optional[List[Any]] = None
    customs_info: Optional[CustomsInfo] = None
    from_address: Optional[Address] = None
    to_address: Optional[Address] = None
    parcel: Optional[Parcel] = None
    postage_label: Optional[PostageLabel] = None
    rates: Optional[List[Rate]] = None
    scan_form: Optional[ScanForm] = None
    selected_rate: Optional[Rate] = None
    tracker: Optional[Tracker] = None
    buyer_address: Optional[Address] = None
    return_address: Optional[Address] = None
    refund_status: Optional[str] = None
    insurance: Optional[str] = None
    batch_status: Optional[str] = None
    batch_message: Optional[str] = None
    usps_zone: Optional[str] = None
    stamp_url: Optional[str] = None
    barcode_url: Optional[str] = None
    mode: Optional[str] = None

    # Shared by every instance unless overridden per instance or per call.
    client: ClassVar[Optional[ApiClient]] = None

    @classmethod
    def retrieve(cls, id: str, client: Optional[ApiClient] = None) -> "Shipment":
        """Retrieve a Shipment from its id (starts with "shp_")."""
        client = client or cls.client or get_default_client()
        request = Request("shipments/{id}")
        request.add_url_segment("id", id)

        shipment = cls.from_dict(client.execute(request))
        shipment.client = client
        return shipment

    @classmethod
    def create(cls, parameters: Optional[Dict[str, Any]] = None, client: Optional[ApiClient] = None) -> "Shipment":
        """
        Create a Shipment.

        Args:
            parameters: Optional mapping sent under the "shipment" key. Valid keys:
                from_address, to_address, buyer_address, return_address (see the
                Address fields), parcel, customs_info, options, is_return,
                currency (defaults to "USD" server side), reference.
                Unknown keys are ignored by the API.
            client: Client to use instead of the shared one.
        """
        client = client or cls.client or get_default_client()
        request = Request("shipments", "POST")
        request.add_body(parameters or {}, "shipment")

        shipment = cls.from_dict(client.execute(request))
        shipment.client = client
        logger.info(f"Created shipment {shipment.id}")
        return shipment

    def get_rates(self) -> List[Rate]:
        """Populate (or refresh) the rates of this shipment."""
        request = self._request("shipments/{id}/rates")
        result = self._execute(request)
        self.rates = result.rates or []
        logger.info(f"Fetched {len(self.rates)} rates for shipment {self.id}")
        return self.rates

    def buy(self, rate: Union[Rate, str]) -> "Shipment":
        """Purchase a label for this shipment with the given Rate or rate id."""
        rate_id = rate.id if isinstance(rate, Rate) else rate
        if not rate_id:
            raise ValueError("A rate id is required to buy a shipment")

        request = self._request("shipments/{id}/buy", "POST")
        request.add_body({"id": rate_id}, "rate")
        result = self._execute(request)

        self.insurance = result.insurance
        self.postage_label = result.postage_label
        self.tracking_code = result.tracking_code
        self.selected_rate = result.selected_rate
        logger.info(f"Bought rate {rate_id} for shipment {self.id}")
        return self

    def insure(self, amount: Union[float, int, Decimal, str]) -> "Shipment":
        """Insure this shipment for `amount`, in the currency the shipment was created with."""
        request = self._request("shipments/{id}/insure", "POST")
        request.add_body({"amount": str(amount)})
        merge(self, self._execute(request))
        return self

    def generate_label(self, file_format: str) -> "Shipment":
        """Generate a postage label in `file_format`: "pdf", "zpl", "epl2" or "png"."""
        file_format = (file_format or "").lower()
        if file_format not in LABEL_FORMATS:
            raise ValueError(f"Unsupported label format {file_format!r}; expected one of {', '.join(LABEL_FORMATS)}")

        request = self._request("shipments/{id}/label")
        request.add_parameter("file_format", file_format)
        merge(self, self._execute(request))
        return self

    def generate_stamp(self) -> Optional[str]:
        result = self._execute(self._request("shipments/{id}/stamp"))
        self.stamp_url = result.stamp_url
        return self.stamp_url

    def generate_barcode(self) -> Optional[str]:
        result = self._execute(self._request("shipments/{id}/barcode"))
        self.barcode_url = result.barcode_url
        return self.barcode_url

    def refund(self) -> "Shipment":
        """Send a refund request to the carrier the shipment was purchased from."""
        merge(self, self._execute(self._request("shipments/{id}/refund")))
        logger.info(f"Refund requested for shipment {self.id}: {self.refund_status}")
        return self

    def lowest_rate(
        self,
        include_carriers: Optional[Iterable[Union[Carrier, str]]] = None,
        include_services: Optional[Iterable[Union[Service, str]]] = None,
        exclude_carriers: Optional[Iterable[Union[Carrier, str]]] = None,
        exclude_services: Optional[Iterable[Union[Service, str]]] = None,
    ) -> Optional[Rate]:
        """
        Get the lowest rate for this shipment, optionally restricted by
        carrier/service allow-lists and deny-lists.

        Rates are fetched first only if they have never been fetched.

        Returns:
            The cheapest matching Rate, or None if no rate matches.

        Raises:
            UnknownEnumValue: a rate or filter names an unknown carrier/service
            MalformedAmount: a rate's amount is not a non-negative decimal
        """
        if self.rates is None:
            self.get_rates()

        return select_lowest_rate(
            self.rates,
            include_carriers=include_carriers,
            include_services=include_services,
            exclude_carriers=exclude_carriers,
            exclude_services=exclude_services,
        )

    def _request(self, resource: str, method: str = "GET") -> Request:
        if not self.id:
            raise ValueError("Shipment has no id; create or retrieve it first")
        request = Request(resource, method)
        request.add_url_segment("id", self.id)
        return request

    def _execute(self, request: Request) -> "Shipment":
        client = self.client or get_default_client()
        return Shipment.from_dict(client.execute(request))
