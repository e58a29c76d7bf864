#!/usr/bin/env python3
"""
Retrieve a shipment and print its lowest rate, optionally filtered by
carrier and service.

Usage (from repo root):
  python scripts/lowest_rate.py shp_123
  python scripts/lowest_rate.py shp_123 --exclude-carrier USPS --include-service Ground
  python scripts/lowest_rate.py shp_123 --buy
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from dataclasses import asdict
from pathlib import Path

sys.path.insert(0, str(Path(__file__).resolve().parent.parent))

from shipment_sdk import Client, Shipment, ShipmentSDKError, load_settings


def setup_logging(verbose: bool = False):
    """Log to terminal so every API call is visible."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%H:%M:%S",
        stream=sys.stdout,
    )


def main() -> int:
    parser = argparse.ArgumentParser(description="Print the lowest rate of a shipment.")
    parser.add_argument("shipment_id", type=str, help="Shipment id (shp_...)")
    parser.add_argument("--config", type=Path, default=None, help="Path to client_config.yml")
    parser.add_argument("--include-carrier", action="append", default=None, help="Only consider this carrier (repeatable)")
    parser.add_argument("--include-service", action="append", default=None, help="Only consider this service (repeatable)")
    parser.add_argument("--exclude-carrier", action="append", default=None, help="Ignore this carrier (repeatable)")
    parser.add_argument("--exclude-service", action="append", default=None, help="Ignore this service (repeatable)")
    parser.add_argument("--refresh", action="store_true", help="Re-fetch rates before selecting")
    parser.add_argument("--buy", action="store_true", help="Buy the selected rate")
    parser.add_argument("--verbose", "-v", action="store_true", help="Log request parameters")
    args = parser.parse_args()

    setup_logging(args.verbose)

    try:
        with Client(settings=load_settings(args.config)) as client:
            shipment = Shipment.retrieve(args.shipment_id, client=client)
            if args.refresh:
                shipment.get_rates()

            rate = shipment.lowest_rate(
                include_carriers=args.include_carrier,
                include_services=args.include_service,
                exclude_carriers=args.exclude_carrier,
                exclude_services=args.exclude_service,
            )
            if rate is None:
                print("No rate matches the given filters.")
                return 1

            print(json.dumps(asdict(rate), indent=2, default=str))

            if args.buy:
                shipment.buy(rate)
                print(f"Bought {rate.carrier} {rate.service}; tracking code {shipment.tracking_code}")
    except ShipmentSDKError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 2

    return 0


if __name__ == "__main__":
    raise SystemExit(main())
