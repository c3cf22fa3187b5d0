"""
Google Places API (legacy web service) client.

Covers find-place, text search, nearby search, details and both
autocomplete endpoints, plus photo URL construction and page-token
pagination. Every call goes through the shared retry pipeline.
"""

from typing import Iterator, Optional
from urllib.parse import urlencode

from ..config.logger_module import log_debug
from ..transport.transport_client import MapsServiceClient
from ..transport.transport_errors import InvalidRequestError, PlacesApiError
from ..transport.transport_serializers import (
    compact_params,
    serialize_bool,
    serialize_latlng,
    serialize_list,
)
from .places_models import (
    AutocompleteRequest,
    AutocompleteResponse,
    FindPlaceRequest,
    FindPlaceResponse,
    NearbySearchRequest,
    PlaceDetailsRequest,
    PlaceDetailsResponse,
    PlacesSearchResponse,
    QueryAutocompleteRequest,
    TextSearchRequest,
    serialize_location_bias,
)

# Google needs a short while before a freshly issued page token is valid
DEFAULT_NEXT_PAGE_DELAY = 2.0

# Text and nearby search return at most three pages of 20 results
DEFAULT_MAX_PAGES = 3


def validate_nearby_search(request: NearbySearchRequest) -> None:
    """
    Check the radius / rank_by combination of a nearby search.

    Raises:
        InvalidRequestError: If the combination is rejected by the service rules
    """
    if request.page_token:
        return

    if request.rank_by == "distance":
        if request.radius is not None:
            raise InvalidRequestError('Do not supply radius when rank_by is set to "distance".')
        if not (request.keyword or request.name or request.type):
            raise InvalidRequestError(
                'When rank_by is "distance" you must provide at least one of keyword, name, or type.'
            )
    elif request.radius is None:
        raise InvalidRequestError('radius is required when rank_by is not "distance".')


def _check_max_pages(max_pages: int) -> None:
    if max_pages < 1:
        raise ValueError(f"max_pages must be >= 1, got {max_pages}")


class PlacesClient(MapsServiceClient):
    """
    Client for the Places web service.

    Example:
        >>> client = PlacesClient(api_key="...", language="en")
        >>> page = client.text_search(query="coffee in Lisbon")
        >>> if page.next_page_token:
        ...     page = client.text_search_next_page(page.next_page_token)
    """

    DEFAULT_BASE_URL = "https://maps.googleapis.com/maps/api/place"
    api_error_class = PlacesApiError

    def _endpoint(self, endpoint: str, params) -> dict:
        return self._get(f"{endpoint}/json", params)

    def find_place_from_text(self,
                             request: Optional[FindPlaceRequest] = None,
                             **fields) -> FindPlaceResponse:
        """Find places matching a text query or phone number."""
        if request is None:
            request = FindPlaceRequest(**fields)

        payload = self._endpoint("findplacefromtext", [
            ("input", request.input),
            ("inputtype", request.input_type),
            ("fields", serialize_list(request.fields, ",")),
            ("language", request.language or self.options.language),
            ("region", request.region or self.options.region),
            ("sessiontoken", request.session_token),
            ("locationbias", serialize_location_bias(request.location_bias)),
        ])
        return FindPlaceResponse.model_validate(payload)

    def text_search(self,
                    request: Optional[TextSearchRequest] = None,
                    **fields) -> PlacesSearchResponse:
        """
        Search places by free text.

        Args:
            request: Prepared request; alternatively pass its fields as keywords

        Returns:
            One page of results; next_page_token is set when more exist

        Raises:
            PlacesApiError: On a status other than OK or ZERO_RESULTS
            MapsTransportError: On network, HTTP or decoding failure
        """
        if request is None:
            request = TextSearchRequest(**fields)

        payload = self._endpoint("textsearch", [
            ("query", request.query),
            ("location", serialize_latlng(request.location)),
            ("radius", request.radius),
            ("language", request.language or self.options.language),
            ("region", request.region or self.options.region),
            ("minprice", request.min_price),
            ("maxprice", request.max_price),
            ("opennow", serialize_bool(request.open_now)),
            ("type", request.type),
            ("pagetoken", request.page_token),
        ])
        return PlacesSearchResponse.model_validate(payload)

    def text_search_next_page(self,
                              page_token: str,
                              delay: float = DEFAULT_NEXT_PAGE_DELAY) -> PlacesSearchResponse:
        """Wait for the page token to activate, then fetch the next text search page."""
        return self._next_page("textsearch", page_token, delay)

    def nearby_search(self,
                      request: Optional[NearbySearchRequest] = None,
                      **fields) -> PlacesSearchResponse:
        """
        Search places around a location.

        Raises:
            InvalidRequestError: On an invalid radius / rank_by combination
                (no network call is made)
            PlacesApiError: On a status other than OK or ZERO_RESULTS
            MapsTransportError: On network, HTTP or decoding failure
        """
        if request is None:
            request = NearbySearchRequest(**fields)

        validate_nearby_search(request)

        payload = self._endpoint("nearbysearch", [
            ("location", serialize_latlng(request.location)),
            ("radius", request.radius),
            ("keyword", request.keyword),
            ("language", request.language or self.options.language),
            ("minprice", request.min_price),
            ("maxprice", request.max_price),
            ("name", request.name),
            ("opennow", serialize_bool(request.open_now)),
            ("rankby", request.rank_by),
            ("type", request.type),
            ("pagetoken", request.page_token),
        ])
        return PlacesSearchResponse.model_validate(payload)

    def nearby_search_next_page(self,
                                page_token: str,
                                delay: float = DEFAULT_NEXT_PAGE_DELAY) -> PlacesSearchResponse:
        """Wait for the page token to activate, then fetch the next nearby search page."""
        return self._next_page("nearbysearch", page_token, delay)

    def _next_page(self, endpoint: str, page_token: str, delay: float) -> PlacesSearchResponse:
        if delay > 0:
            log_debug(f"Waiting {delay:.2f}s before requesting next {endpoint} page")
            self.options.sleep(delay)

        payload = self._endpoint(endpoint, [("pagetoken", page_token)])
        return PlacesSearchResponse.model_validate(payload)

    def iter_text_search_pages(self,
                               request: Optional[TextSearchRequest] = None,
                               max_pages: int = DEFAULT_MAX_PAGES,
                               delay: float = DEFAULT_NEXT_PAGE_DELAY,
                               **fields) -> Iterator[PlacesSearchResponse]:
        """
        Yield text search pages, following next_page_token.

        Stops when a page has no token or max_pages pages were yielded.

        Raises:
            ValueError: If max_pages < 1 (raised here, before any request)
        """
        _check_max_pages(max_pages)
        return self._follow_pages(
            lambda: self.text_search(request, **fields),
            self.text_search_next_page,
            max_pages,
            delay,
        )

    def iter_nearby_search_pages(self,
                                 request: Optional[NearbySearchRequest] = None,
                                 max_pages: int = DEFAULT_MAX_PAGES,
                                 delay: float = DEFAULT_NEXT_PAGE_DELAY,
                                 **fields) -> Iterator[PlacesSearchResponse]:
        """Yield nearby search pages, following next_page_token."""
        _check_max_pages(max_pages)
        return self._follow_pages(
            lambda: self.nearby_search(request, **fields),
            self.nearby_search_next_page,
            max_pages,
            delay,
        )

    @staticmethod
    def _follow_pages(fetch_first, fetch_next, max_pages, delay):
        page = fetch_first()
        pages = 1
        yield page
        while page.next_page_token and pages < max_pages:
            page = fetch_next(page.next_page_token, delay)
            pages += 1
            yield page

    def place_details(self,
                      request: Optional[PlaceDetailsRequest] = None,
                      **fields) -> PlaceDetailsResponse:
        """Fetch details for a place id."""
        if request is None:
            request = PlaceDetailsRequest(**fields)

        payload = self._endpoint("details", [
            ("place_id", request.place_id),
            ("fields", serialize_list(request.fields, ",")),
            ("language", request.language or self.options.language),
            ("region", request.region or self.options.region),
            ("sessiontoken", request.session_token),
            ("reviews_sort", request.reviews_sort),
            ("reviews_no_translations", serialize_bool(request.reviews_no_translations)),
        ])
        return PlaceDetailsResponse.model_validate(payload)

    def autocomplete(self,
                     request: Optional[AutocompleteRequest] = None,
                     **fields) -> AutocompleteResponse:
        """Place predictions for a partial input (one keystroke of a session)."""
        if request is None:
            request = AutocompleteRequest(**fields)

        payload = self._endpoint("autocomplete", [
            ("input", request.input),
            ("sessiontoken", request.session_token),
            ("language", request.language or self.options.language),
            ("region", request.region or self.options.region),
            ("components", serialize_list(request.components)),
            ("origin", serialize_latlng(request.origin)),
            ("offset", request.offset),
            ("locationbias", serialize_location_bias(request.location_bias)),
            ("strictbounds", serialize_bool(request.strict_bounds)),
            ("types", serialize_list(request.types)),
        ])
        return AutocompleteResponse.model_validate(payload)

    def query_autocomplete(self,
                           request: Optional[QueryAutocompleteRequest] = None,
                           **fields) -> AutocompleteResponse:
        """Query predictions (places and search phrases) for a partial input."""
        if request is None:
            request = QueryAutocompleteRequest(**fields)

        payload = self._endpoint("queryautocomplete", [
            ("input", request.input),
            ("language", request.language or self.options.language),
            ("offset", request.offset),
            ("locationbias", serialize_location_bias(request.location_bias)),
            ("sessiontoken", request.session_token),
        ])
        return AutocompleteResponse.model_validate(payload)

    def build_photo_url(self,
                        photo_reference: str,
                        max_width: Optional[int] = None,
                        max_height: Optional[int] = None,
                        signature: Optional[str] = None) -> str:
        """
        Build a Place Photo URL (no network call).

        Args:
            photo_reference: Reference from a place's photos list
            max_width: Maximum width in pixels
            max_height: Maximum height in pixels
            signature: URL signature for signed requests

        Returns:
            Complete photo URL including the API key
        """
        query = compact_params([
            ("key", self.options.api_key),
            ("photoreference", photo_reference),
            ("maxwidth", max_width or None),
            ("maxheight", max_height or None),
            ("signature", signature),
        ])
        return f"{self.options.base_url}/photo?{urlencode(query)}"
