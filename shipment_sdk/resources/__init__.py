"""
API resources.

resources/base.py holds the Resource base class and merge(); concrete
resources live next to it (resources/shipment.py). Import Shipment from the
package root or from resources.shipment.
"""

from .base import Resource, merge, parse_timestamp

__all__ = ["Resource", "merge", "parse_timestamp"]
