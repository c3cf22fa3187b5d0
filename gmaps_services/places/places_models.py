"""
Request and response models for the Places API (legacy web service).

Location bias is a tagged union discriminated on ``type``; every variant
knows its own wire form.
"""

from enum import Enum
from typing import Annotated, List, Literal, Optional, Union

from pydantic import BaseModel, ConfigDict, Field

from ..transport.transport_serializers import format_number, serialize_bounds


class PlacesStatus(str, Enum):
    OK = "OK"
    ZERO_RESULTS = "ZERO_RESULTS"
    INVALID_REQUEST = "INVALID_REQUEST"
    OVER_QUERY_LIMIT = "OVER_QUERY_LIMIT"
    REQUEST_DENIED = "REQUEST_DENIED"
    NOT_FOUND = "NOT_FOUND"
    UNKNOWN_ERROR = "UNKNOWN_ERROR"


class PlacesLatLng(BaseModel):
    model_config = ConfigDict(frozen=True)

    lat: float
    lng: float


# ==================== LOCATION BIAS ====================

class IpBias(BaseModel):
    """Bias results towards the caller's IP location."""
    model_config = ConfigDict(frozen=True)

    type: Literal["ipbias"] = "ipbias"

    def to_param(self) -> str:
        return "ipbias"


class PointBias(BaseModel):
    model_config = ConfigDict(frozen=True)

    type: Literal["point"] = "point"
    lat: float
    lng: float

    def to_param(self) -> str:
        return f"point:{format_number(self.lat)},{format_number(self.lng)}"


class CircleBias(BaseModel):
    model_config = ConfigDict(frozen=True)

    type: Literal["circle"] = "circle"
    lat: float
    lng: float
    radius_meters: float

    def to_param(self) -> str:
        return (
            f"circle:{format_number(self.radius_meters)}"
            f"@{format_number(self.lat)},{format_number(self.lng)}"
        )


class RectangleBias(BaseModel):
    model_config = ConfigDict(frozen=True)

    type: Literal["rectangle"] = "rectangle"
    south_west: PlacesLatLng
    north_east: PlacesLatLng

    def to_param(self) -> str:
        return f"rectangle:{serialize_bounds(self.south_west, self.north_east)}"


LocationBias = Annotated[
    Union[IpBias, PointBias, CircleBias, RectangleBias],
    Field(discriminator="type"),
]


def serialize_location_bias(bias: Optional[LocationBias]) -> Optional[str]:
    if bias is None:
        return None
    if isinstance(bias, (IpBias, PointBias, CircleBias, RectangleBias)):
        return bias.to_param()
    raise TypeError(f"Unsupported location bias: {type(bias).__name__}")


# ==================== REQUESTS ====================

class _PlacesRequest(BaseModel):
    model_config = ConfigDict(frozen=True)


class FindPlaceRequest(_PlacesRequest):
    input: str
    input_type: Literal["textquery", "phonenumber"] = "textquery"
    fields: Optional[List[str]] = None
    language: Optional[str] = None
    region: Optional[str] = None
    session_token: Optional[str] = None
    location_bias: Optional[LocationBias] = None


class TextSearchRequest(_PlacesRequest):
    query: Optional[str] = None
    location: Optional[PlacesLatLng] = None
    radius: Optional[float] = None
    language: Optional[str] = None
    region: Optional[str] = None
    min_price: Optional[int] = None
    max_price: Optional[int] = None
    open_now: Optional[bool] = None
    type: Optional[str] = None
    page_token: Optional[str] = None


class NearbySearchRequest(_PlacesRequest):
    location: Optional[PlacesLatLng] = None
    radius: Optional[float] = None
    keyword: Optional[str] = None
    language: Optional[str] = None
    min_price: Optional[int] = None
    max_price: Optional[int] = None
    name: Optional[str] = None
    open_now: Optional[bool] = None
    rank_by: Optional[Literal["prominence", "distance"]] = None
    type: Optional[str] = None
    page_token: Optional[str] = None


class PlaceDetailsRequest(_PlacesRequest):
    place_id: str
    fields: Optional[List[str]] = None
    language: Optional[str] = None
    region: Optional[str] = None
    session_token: Optional[str] = None
    reviews_sort: Optional[Literal["most_relevant", "newest"]] = None
    reviews_no_translations: Optional[bool] = None


class AutocompleteRequest(_PlacesRequest):
    input: str
    session_token: Optional[str] = None
    language: Optional[str] = None
    region: Optional[str] = None
    components: Optional[List[str]] = None
    origin: Optional[PlacesLatLng] = None
    offset: Optional[int] = None
    location_bias: Optional[LocationBias] = None
    strict_bounds: Optional[bool] = None
    types: Optional[List[str]] = None


class QueryAutocompleteRequest(_PlacesRequest):
    input: str
    language: Optional[str] = None
    offset: Optional[int] = None
    location_bias: Optional[LocationBias] = None
    session_token: Optional[str] = None


# ==================== RESPONSES ====================

class _PlacesPayload(BaseModel):
    model_config = ConfigDict(extra="allow")


class PlacePhoto(_PlacesPayload):
    photo_reference: Optional[str] = None
    height: Optional[int] = None
    width: Optional[int] = None
    html_attributions: List[str] = []


class PlaceGeometry(_PlacesPayload):
    location: Optional[PlacesLatLng] = None
    viewport: Optional[dict] = None


class OpeningHours(_PlacesPayload):
    open_now: Optional[bool] = None
    periods: Optional[List[dict]] = None
    weekday_text: Optional[List[str]] = None


class PlaceReview(_PlacesPayload):
    author_name: Optional[str] = None
    rating: Optional[float] = None
    text: Optional[str] = None
    time: Optional[int] = None
    language: Optional[str] = None
    relative_time_description: Optional[str] = None


class Place(_PlacesPayload):
    """A place as returned by search, find and details calls."""

    place_id: Optional[str] = None
    name: Optional[str] = None
    formatted_address: Optional[str] = None
    vicinity: Optional[str] = None
    geometry: Optional[PlaceGeometry] = None
    types: List[str] = []
    rating: Optional[float] = None
    user_ratings_total: Optional[int] = None
    price_level: Optional[int] = None
    business_status: Optional[str] = None
    opening_hours: Optional[OpeningHours] = None
    photos: List[PlacePhoto] = []
    reviews: List[PlaceReview] = []
    website: Optional[str] = None
    url: Optional[str] = None
    formatted_phone_number: Optional[str] = None
    international_phone_number: Optional[str] = None


class StructuredFormatting(_PlacesPayload):
    main_text: Optional[str] = None
    secondary_text: Optional[str] = None


class Prediction(_PlacesPayload):
    description: Optional[str] = None
    place_id: Optional[str] = None
    types: List[str] = []
    structured_formatting: Optional[StructuredFormatting] = None
    distance_meters: Optional[int] = None


class _PlacesResponse(_PlacesPayload):
    status: PlacesStatus
    error_message: Optional[str] = None
    info_messages: List[str] = []


class FindPlaceResponse(_PlacesResponse):
    candidates: List[Place] = []


class PlacesSearchResponse(_PlacesResponse):
    """Text search and nearby search page."""

    results: List[Place] = []
    next_page_token: Optional[str] = None
    html_attributions: List[str] = []


class PlaceDetailsResponse(_PlacesResponse):
    result: Optional[Place] = None
    html_attributions: List[str] = []


class AutocompleteResponse(_PlacesResponse):
    """Autocomplete and query autocomplete predictions."""

    predictions: List[Prediction] = []
