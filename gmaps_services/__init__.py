"""
Python clients for the Google Geocoding and Places web services.

This package provides:
- Forward and reverse geocoding
- Place search (find place, text, nearby), details and autocomplete
- Photo URL construction and autocomplete session tokens
- Exponential-backoff retries for transient failures

Main classes:
- GeocodingClient: Geocoding API client
- PlacesClient: Places API client
- RetryPolicy: Retry settings shared by both clients

Errors:
- InvalidRequestError: Request rejected before any network call
- GeocodingApiError / PlacesApiError: Non-success service status
- MapsTransportError: Network, HTTP or decoding failure
"""

from .geocoding import GeocodeRequest, GeocodingClient, LatLng, ReverseGeocodeRequest
from .places import PlacesClient, create_session_token
from .transport import (
    GeocodingApiError,
    HttpStatusError,
    InvalidRequestError,
    MapsApiError,
    MapsTransportError,
    PlacesApiError,
    RequestTimeoutError,
    RetryPolicy,
)

__all__ = [
    # Main classes
    "GeocodingClient",
    "PlacesClient",
    "RetryPolicy",
    "GeocodeRequest",
    "ReverseGeocodeRequest",
    "LatLng",
    "create_session_token",

    # Errors
    "InvalidRequestError",
    "MapsApiError",
    "GeocodingApiError",
    "PlacesApiError",
    "MapsTransportError",
    "HttpStatusError",
    "RequestTimeoutError",
]

__version__ = "1.0.0"
