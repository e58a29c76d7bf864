"""
Rate selection helpers.

Pure functions over an in-memory list of Rate objects; nothing here talks to
the API. Shipment.lowest_rate() fetches the rates first when it has none.
"""

from __future__ import annotations

import logging
import re
from decimal import Decimal
from typing import Iterable, List, NamedTuple, Optional, Sequence, Union

from shipment_sdk.errors import MalformedAmount
from .interfaces import Carrier, ClosedTagSet, Rate, Service

logger = logging.getLogger(__name__)

AMOUNT_PATTERN = re.compile(r"[0-9]+(\.[0-9]+)?")

CarrierFilter = Optional[Iterable[Union[Carrier, str]]]
ServiceFilter = Optional[Iterable[Union[Service, str]]]


class _Candidate(NamedTuple):
    rate: Rate
    carrier: Carrier
    service: Service
    amount: Decimal


def parse_amount(rate: Rate) -> Decimal:
    """Parse a rate's amount string. Raises MalformedAmount unless it is a plain non-negative decimal like "8.20"."""
    raw = rate.amount
    text = str(raw).strip() if raw is not None else ""
    if not AMOUNT_PATTERN.fullmatch(text):
        raise MalformedAmount(raw, rate_id=rate.id)
    return Decimal(text)


def select_lowest_rate(
    rates: Sequence[Rate],
    include_carriers: CarrierFilter = None,
    include_services: ServiceFilter = None,
    exclude_carriers: CarrierFilter = None,
    exclude_services: ServiceFilter = None,
) -> Optional[Rate]:
    """
    Return the cheapest rate that passes every supplied filter, or None.

    Filters apply in order: include carriers, include services, exclude
    carriers, exclude services. An omitted filter does not restrict its axis;
    an empty list does (nothing is "in" it). Ties keep the earliest rate.

    Every rate is validated before filtering, so a single rate with an
    unrecognised carrier/service (UnknownEnumValue) or a bad amount
    (MalformedAmount) rejects the whole selection.
    """
    candidates = [_validate(rate) for rate in rates]

    carriers_in = _parse_all(Carrier, include_carriers)
    services_in = _parse_all(Service, include_services)
    carriers_out = _parse_all(Carrier, exclude_carriers)
    services_out = _parse_all(Service, exclude_services)

    if carriers_in is not None:
        candidates = [c for c in candidates if c.carrier in carriers_in]
    if services_in is not None:
        candidates = [c for c in candidates if c.service in services_in]
    if carriers_out is not None:
        candidates = [c for c in candidates if c.carrier not in carriers_out]
    if services_out is not None:
        candidates = [c for c in candidates if c.service not in services_out]

    logger.debug(f"{len(candidates)} of {len(rates)} rates left after filtering")
    if not candidates:
        return None
    return min(candidates, key=lambda c: c.amount).rate


def _validate(rate: Rate) -> _Candidate:
    return _Candidate(
        rate=rate,
        carrier=Carrier.parse(rate.carrier),
        service=Service.parse(rate.service),
        amount=parse_amount(rate),
    )


def _parse_all(tag_set: type, values: Optional[Iterable]) -> Optional[List[ClosedTagSet]]:
    if values is None:
        return None
    if isinstance(values, str):
        values = [values]
    return [tag_set.parse(v) for v in values]
