"""
Base HTTP client for the Google Maps web services.

Holds the immutable client options, builds signed request URLs, performs a
single GET through a requests session, classifies the response status and
runs the whole exchange under the retry state machine. The Geocoding and
Places clients subclass it and only add request-specific serialization.
"""

import time
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, Callable, Dict, Iterable, Mapping, Optional, Tuple, Type
from urllib.parse import urlencode

import requests

from ..config.config_module import API_KEY_ENV, get_config
from ..config.logger_module import log_debug, log_info
from .transport_errors import (
    HttpStatusError,
    MapsApiError,
    MapsTransportError,
    RequestTimeoutError,
)
from .transport_retry import RetryPolicy, RetryStateMachine
from .transport_serializers import compact_params

SUCCESS_STATUSES = frozenset({"OK", "ZERO_RESULTS"})

USER_AGENT = "gmaps-services/1.0"


@dataclass(frozen=True)
class ClientOptions:
    """
    Immutable configuration shared by every call a client makes.

    Attributes:
        api_key: Google Maps API key, sent with every request
        base_url: Service root, without a trailing slash
        session: requests.Session-compatible object used for GETs
        language: Default result language
        region: Default region bias
        channel: Usage-reporting channel sent with every request
        timeout: Per-request timeout in seconds (None waits indefinitely)
        headers: Extra HTTP headers
        retry: Retry policy
        sleep: Sleep function used for retry backoff and pagination delays
    """

    api_key: str
    base_url: str
    session: Any = None
    language: Optional[str] = None
    region: Optional[str] = None
    channel: Optional[str] = None
    timeout: Optional[float] = None
    headers: Mapping[str, str] = field(default_factory=dict)
    retry: RetryPolicy = field(default_factory=RetryPolicy)
    sleep: Callable[[float], None] = time.sleep

    def __post_init__(self):
        if not self.api_key:
            raise ValueError("api_key is required")
        if not self.base_url:
            raise ValueError("base_url is required")
        if self.timeout is not None and self.timeout <= 0:
            raise ValueError(f"timeout must be positive, got {self.timeout}")

        object.__setattr__(self, "base_url", self.base_url.rstrip("/"))
        object.__setattr__(self, "headers", MappingProxyType(dict(self.headers)))


class MapsServiceClient:
    """
    Shared request pipeline for the JSON web services.

    Subclasses set DEFAULT_BASE_URL and api_error_class.
    """

    DEFAULT_BASE_URL = "https://maps.googleapis.com/maps/api"
    api_error_class: Type[MapsApiError] = MapsApiError

    def __init__(self,
                 api_key: Optional[str] = None,
                 *,
                 base_url: Optional[str] = None,
                 session: Optional[requests.Session] = None,
                 language: Optional[str] = None,
                 region: Optional[str] = None,
                 channel: Optional[str] = None,
                 timeout: Optional[float] = None,
                 headers: Optional[Mapping[str, str]] = None,
                 retry: Optional[RetryPolicy] = None,
                 max_retries: Optional[int] = None,
                 sleep: Optional[Callable[[float], None]] = None):
        """
        Initialize the client.

        Args:
            api_key: API key (loaded from GOOGLE_MAPS_API_KEY if not provided)
            base_url: Override for the service root (proxies, tests)
            session: HTTP session; a new requests.Session is created if omitted
            language: Default language for requests that don't set one
            region: Default region for requests that don't set one
            channel: Channel parameter added to every request
            timeout: HTTP request timeout in seconds
            headers: Extra headers sent with every request
            retry: Full retry policy
            max_retries: Shortcut for RetryPolicy(max_retries=...) when retry is omitted
            sleep: Sleep function for backoff (default time.sleep)

        Raises:
            ValueError: If no API key is available or an option is invalid
        """
        api_key = api_key or get_config(API_KEY_ENV)
        if not api_key:
            raise ValueError(f"{API_KEY_ENV} not provided or found in config")

        if retry is None:
            retry = RetryPolicy(max_retries=max_retries or 0)

        self._owns_session = session is None
        if session is None:
            session = requests.Session()

        self.options = ClientOptions(
            api_key=api_key,
            base_url=base_url or self.DEFAULT_BASE_URL,
            session=session,
            language=language,
            region=region,
            channel=channel,
            timeout=timeout,
            headers=headers or {},
            retry=retry,
            sleep=sleep or time.sleep,
        )

        log_info(
            f"{type(self).__name__} initialized "
            f"(base_url={self.options.base_url}, max_retries={retry.max_retries})"
        )

    @property
    def api_key(self) -> str:
        return self.options.api_key

    @property
    def base_url(self) -> str:
        return self.options.base_url

    def close(self) -> None:
        """Close the HTTP session if this client created it."""
        if self._owns_session:
            self.options.session.close()

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc, tb):
        self.close()

    def _build_url(self, path: str, params: Iterable[Tuple[str, Any]]) -> str:
        """
        Build the full request URL.

        The key (and channel, when configured) always come first; absent
        parameters are dropped.
        """
        query = compact_params(
            [("key", self.options.api_key), ("channel", self.options.channel), *params]
        )
        return f"{self.options.base_url}/{path}?{urlencode(query)}"

    def _send(self, url: str) -> Dict[str, Any]:
        """
        Perform one HTTP GET and classify the result.

        Returns:
            The decoded payload when the status is OK or ZERO_RESULTS

        Raises:
            RequestTimeoutError: If the timeout elapsed
            HttpStatusError: On a non-2xx response
            MapsTransportError: On network or decoding failures
            MapsApiError: On any other service status
        """
        headers = {"User-Agent": USER_AGENT, **self.options.headers}

        try:
            response = self.options.session.get(
                url, headers=headers, timeout=self.options.timeout
            )
        except requests.exceptions.Timeout as e:
            raise RequestTimeoutError(e) from e
        except requests.exceptions.RequestException as e:
            raise MapsTransportError(e) from e

        if not response.ok:
            raise HttpStatusError(response.status_code, response.reason)

        try:
            payload = response.json()
        except ValueError as e:
            raise MapsTransportError(e) from e

        if not isinstance(payload, dict) or "status" not in payload:
            raise MapsTransportError(ValueError("Response payload carries no status"))

        status = payload["status"]
        if status not in SUCCESS_STATUSES:
            raise self.api_error_class(status, payload.get("error_message"), payload)

        return payload

    def _get(self, path: str, params: Iterable[Tuple[str, Any]]) -> Dict[str, Any]:
        """Issue a GET for path under the client's retry policy."""
        url = self._build_url(path, params)
        description = f"{type(self).__name__} GET {path}"
        log_debug(description)

        machine = RetryStateMachine(
            self.options.retry,
            sleep=self.options.sleep,
            description=description,
        )
        return machine.run(lambda: self._send(url))
