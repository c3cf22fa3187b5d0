"""
Request and response models for the Geocoding API.

Requests are frozen pydantic models built fresh for every call; responses
keep any fields the service adds beyond the ones modelled here.
"""

from enum import Enum
from typing import Dict, List, Optional

from pydantic import BaseModel, ConfigDict


class GeocodingStatus(str, Enum):
    OK = "OK"
    ZERO_RESULTS = "ZERO_RESULTS"
    OVER_QUERY_LIMIT = "OVER_QUERY_LIMIT"
    REQUEST_DENIED = "REQUEST_DENIED"
    INVALID_REQUEST = "INVALID_REQUEST"
    UNKNOWN_ERROR = "UNKNOWN_ERROR"


class LatLng(BaseModel):
    """A latitude/longitude pair in degrees."""
    model_config = ConfigDict(frozen=True)

    lat: float
    lng: float


class Bounds(BaseModel):
    """A bounding box given by its south-west and north-east corners."""
    model_config = ConfigDict(frozen=True)

    southwest: LatLng
    northeast: LatLng


class GeocodeRequest(BaseModel):
    """Forward geocoding request; needs an address, place id, latlng or components."""
    model_config = ConfigDict(frozen=True)

    address: Optional[str] = None
    place_id: Optional[str] = None
    latlng: Optional[LatLng] = None
    bounds: Optional[Bounds] = None
    components: Optional[Dict[str, str]] = None
    region: Optional[str] = None
    language: Optional[str] = None
    result_type: Optional[List[str]] = None
    location_type: Optional[List[str]] = None

    def has_identifying_field(self) -> bool:
        return bool(
            self.address or self.place_id or self.latlng or self.components is not None
        )


class ReverseGeocodeRequest(BaseModel):
    """Reverse geocoding request for a single coordinate."""
    model_config = ConfigDict(frozen=True)

    latlng: LatLng
    result_type: Optional[List[str]] = None
    location_type: Optional[List[str]] = None
    language: Optional[str] = None

    def to_geocode_request(self) -> GeocodeRequest:
        return GeocodeRequest(
            latlng=self.latlng,
            result_type=self.result_type,
            location_type=self.location_type,
            language=self.language,
        )


class AddressComponent(BaseModel):
    model_config = ConfigDict(extra="allow")

    long_name: Optional[str] = None
    short_name: Optional[str] = None
    types: List[str] = []


class PlusCode(BaseModel):
    model_config = ConfigDict(extra="allow")

    global_code: Optional[str] = None
    compound_code: Optional[str] = None


class Geometry(BaseModel):
    model_config = ConfigDict(extra="allow")

    location: Optional[LatLng] = None
    location_type: Optional[str] = None
    viewport: Optional[Bounds] = None
    bounds: Optional[Bounds] = None


class GeocodingResult(BaseModel):
    model_config = ConfigDict(extra="allow")

    formatted_address: Optional[str] = None
    place_id: Optional[str] = None
    types: List[str] = []
    geometry: Optional[Geometry] = None
    address_components: List[AddressComponent] = []
    partial_match: Optional[bool] = None
    plus_code: Optional[PlusCode] = None


class GeocodingResponse(BaseModel):
    """Successful (OK or ZERO_RESULTS) Geocoding API response."""
    model_config = ConfigDict(extra="allow")

    status: GeocodingStatus
    results: List[GeocodingResult] = []
    error_message: Optional[str] = None
