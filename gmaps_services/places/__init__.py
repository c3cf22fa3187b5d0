"""
Places module: search, details and autocomplete over the Places web service.

Main classes:
- PlacesClient: REST client with validation, retry and pagination
- FindPlaceRequest, TextSearchRequest, NearbySearchRequest,
  PlaceDetailsRequest, AutocompleteRequest, QueryAutocompleteRequest
- IpBias, PointBias, CircleBias, RectangleBias: Location bias variants

Helpers:
- create_session_token: UUID v4 autocomplete session token
"""

from .places_client import PlacesClient, validate_nearby_search
from .places_models import (
    AutocompleteRequest,
    AutocompleteResponse,
    CircleBias,
    FindPlaceRequest,
    FindPlaceResponse,
    IpBias,
    NearbySearchRequest,
    Place,
    PlaceDetailsRequest,
    PlaceDetailsResponse,
    PlacesLatLng,
    PlacesSearchResponse,
    PlacesStatus,
    PointBias,
    QueryAutocompleteRequest,
    RectangleBias,
    TextSearchRequest,
)
from .places_session import create_session_token

__all__ = [
    "PlacesClient",
    "validate_nearby_search",
    "create_session_token",

    # Requests
    "FindPlaceRequest",
    "TextSearchRequest",
    "NearbySearchRequest",
    "PlaceDetailsRequest",
    "AutocompleteRequest",
    "QueryAutocompleteRequest",
    "PlacesLatLng",
    "IpBias",
    "PointBias",
    "CircleBias",
    "RectangleBias",

    # Responses
    "Place",
    "PlacesStatus",
    "FindPlaceResponse",
    "PlacesSearchResponse",
    "PlaceDetailsResponse",
    "AutocompleteResponse",
]
