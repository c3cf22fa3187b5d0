"""
Geocoding module: forward and reverse geocoding over the Geocoding API.

Main classes:
- GeocodingClient: REST client with validation and retry
- GeocodeRequest / ReverseGeocodeRequest: Request models
- GeocodingResponse: Response model
"""

from .geocoding_client import GeocodingClient
from .geocoding_models import (
    Bounds,
    GeocodeRequest,
    GeocodingResponse,
    GeocodingResult,
    GeocodingStatus,
    LatLng,
    ReverseGeocodeRequest,
)

__all__ = [
    "GeocodingClient",
    "GeocodeRequest",
    "ReverseGeocodeRequest",
    "GeocodingResponse",
    "GeocodingResult",
    "GeocodingStatus",
    "LatLng",
    "Bounds",
]
