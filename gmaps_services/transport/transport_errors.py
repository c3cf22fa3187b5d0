"""
Custom exceptions for the Google Maps web service clients.

Three failure kinds are distinguished:
- InvalidRequestError: the request was rejected locally, nothing was sent
- MapsApiError: the service answered with a non-success status
- MapsTransportError: the HTTP exchange itself failed

The API and transport errors extend the googlemaps SDK exceptions, so code
that already handles googlemaps.exceptions.ApiError / TransportError also
handles these.
"""

from typing import Any, Optional

from googlemaps import exceptions as gmaps_exceptions


class InvalidRequestError(ValueError):
    """Raised before any network call when a request is structurally insufficient."""
    pass


class MapsApiError(gmaps_exceptions.ApiError):
    """Raised when the service returns a status other than OK or ZERO_RESULTS."""

    service_name = "Google Maps"

    def __init__(self, status: str, message: Optional[str] = None, details: Any = None):
        super().__init__(
            status,
            message or f"{self.service_name} request failed with status {status}",
        )
        self.details = details


class GeocodingApiError(MapsApiError):
    """Non-success status from the Geocoding API."""

    service_name = "Geocoding"


class PlacesApiError(MapsApiError):
    """Non-success status from the Places API."""

    service_name = "Places API"


class MapsTransportError(gmaps_exceptions.TransportError):
    """Raised when the request could not be completed (network, HTTP or decoding failure)."""
    pass


class HttpStatusError(MapsTransportError):
    """Raised on a non-2xx HTTP response."""

    def __init__(self, status_code: int, reason: Optional[str] = None):
        super().__init__()
        self.status_code = status_code
        self.reason = reason

    def __str__(self):
        if self.reason:
            return f"HTTP Error: {self.status_code} {self.reason}"
        return f"HTTP Error: {self.status_code}"


class RequestTimeoutError(MapsTransportError):
    """Raised when the configured request timeout elapses."""
    pass
