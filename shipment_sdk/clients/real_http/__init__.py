"""
Real HTTP client.

Talks to the live shipping API with httpx. Must implement the same interface
as the mock client and return plain JSON dictionaries.
"""

from .client import Client, api_error_from_response

__all__ = ["Client", "api_error_from_response"]
