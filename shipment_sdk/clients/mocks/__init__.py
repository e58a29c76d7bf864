"""
Mock client.

Returns fake (but realistic) responses without calling any external API.
Used when we want to exercise resources end-to-end without credentials.
"""

from .client import MockClient

__all__ = ["MockClient"]
