"""
Google Geocoding API client.

Translates address <-> coordinate requests into signed GET calls against
the Geocoding web service, classifies the response status and retries
transient failures.
"""

from typing import Optional

from ..transport.transport_client import MapsServiceClient
from ..transport.transport_errors import GeocodingApiError, InvalidRequestError
from ..transport.transport_serializers import (
    serialize_bounds,
    serialize_components,
    serialize_latlng,
    serialize_list,
)
from .geocoding_models import GeocodeRequest, GeocodingResponse, ReverseGeocodeRequest


class GeocodingClient(MapsServiceClient):
    """
    Client for forward and reverse geocoding.

    Example:
        >>> client = GeocodingClient(api_key="...", max_retries=2)
        >>> response = client.geocode(address="1600 Amphitheatre Pkwy")
        >>> response.results[0].geometry.location
    """

    DEFAULT_BASE_URL = "https://maps.googleapis.com/maps/api/geocode"
    api_error_class = GeocodingApiError

    def geocode(self, request: Optional[GeocodeRequest] = None, **fields) -> GeocodingResponse:
        """
        Geocode an address, place id, coordinate or component filter.

        Args:
            request: Prepared request; alternatively pass its fields as keywords

        Returns:
            Response with status OK or ZERO_RESULTS

        Raises:
            InvalidRequestError: If no identifying field is set (no network call is made)
            GeocodingApiError: On any other service status
            MapsTransportError: On network, HTTP or decoding failure
        """
        if request is None:
            request = GeocodeRequest(**fields)

        if not request.has_identifying_field():
            raise InvalidRequestError(
                "Geocode request requires at least one of address, place_id, latlng, or components."
            )

        bounds = None
        if request.bounds is not None:
            bounds = serialize_bounds(request.bounds.southwest, request.bounds.northeast)

        payload = self._get("json", [
            ("address", request.address),
            ("place_id", request.place_id),
            ("latlng", serialize_latlng(request.latlng)),
            ("bounds", bounds),
            ("components", serialize_components(request.components)),
            ("region", request.region or self.options.region),
            ("language", request.language or self.options.language),
            ("result_type", serialize_list(request.result_type)),
            ("location_type", serialize_list(request.location_type)),
        ])
        return GeocodingResponse.model_validate(payload)

    def reverse_geocode(self,
                        request: Optional[ReverseGeocodeRequest] = None,
                        **fields) -> GeocodingResponse:
        """Look up addresses for a coordinate; a thin projection onto geocode()."""
        if request is None:
            request = ReverseGeocodeRequest(**fields)
        return self.geocode(request.to_geocode_request())
