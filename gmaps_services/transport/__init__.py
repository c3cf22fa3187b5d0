"""
Transport layer shared by the Geocoding and Places clients.

Main classes:
- MapsServiceClient: URL building, HTTP GET, status classification
- ClientOptions: Immutable client configuration
- RetryPolicy: Retry settings (count, delay, backoff, statuses)
- RetryStateMachine: Per-call retry loop with observable state

Errors:
- InvalidRequestError: Request rejected locally
- MapsApiError: Non-success service status
- MapsTransportError: Network, HTTP or decoding failure
"""

from .transport_client import ClientOptions, MapsServiceClient
from .transport_errors import (
    GeocodingApiError,
    HttpStatusError,
    InvalidRequestError,
    MapsApiError,
    MapsTransportError,
    PlacesApiError,
    RequestTimeoutError,
)
from .transport_retry import RetryPolicy, RetryState, RetryStateMachine

__all__ = [
    "ClientOptions",
    "MapsServiceClient",
    "RetryPolicy",
    "RetryState",
    "RetryStateMachine",

    # Errors
    "InvalidRequestError",
    "MapsApiError",
    "GeocodingApiError",
    "PlacesApiError",
    "MapsTransportError",
    "HttpStatusError",
    "RequestTimeoutError",
]
