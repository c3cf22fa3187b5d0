#!/usr/bin/env python3
"""
Google Maps web services - command-line front end

Runs a single Geocoding or Places request and prints the response as JSON.

Usage:
    gmaps-services geocode "1600 Amphitheatre Pkwy"
    gmaps-services reverse 37.422 -122.084
    gmaps-services text-search "coffee in Lisbon" --pages 2
    gmaps-services nearby 38.72 -9.14 --radius 500 --type cafe
    gmaps-services details ChIJN1t_tDeuEmsRUsoyG83frY4 --fields name rating
    gmaps-services autocomplete "amphi" --session-token auto
    gmaps-services photo-url PHOTO_REF --max-width 400
    gmaps-services session-token

Options:
    --env-file PATH        .env file to load (default: .env)
    --log-level LEVEL      Logging level (default: WARNING)
    --log-file PATH        Also log to this file
    --max-retries N        Retries for transient failures
    --timeout SECONDS      HTTP request timeout
"""

import argparse
import json
import sys
from typing import Any, Dict, List, Optional

from pydantic import BaseModel

from .config.config_module import (
    API_KEY_ENV,
    ConfigError,
    client_settings_from_env,
    load_config,
    validate_config,
)
from .config.logger_module import initialize_logger, log_error
from .geocoding.geocoding_client import GeocodingClient
from .geocoding.geocoding_models import LatLng
from .places.places_client import PlacesClient
from .places.places_models import PlacesLatLng
from .places.places_session import create_session_token
from .transport.transport_errors import InvalidRequestError, MapsApiError, MapsTransportError
from .transport.transport_retry import RetryPolicy


def _dump(value: Any) -> str:
    if isinstance(value, BaseModel):
        return value.model_dump_json(indent=2, exclude_none=True)
    if isinstance(value, list):
        return json.dumps(
            [v.model_dump(mode="json", exclude_none=True) for v in value],
            indent=2,
        )
    return str(value)


class MapsCommandRunner:
    """
    Executes one parsed command against the Geocoding or Places client.

    Clients are created lazily so commands that need no network
    (session-token) don't require an API key.
    """

    def __init__(self, args: argparse.Namespace):
        self.args = args
        self._settings: Optional[Dict[str, Any]] = None

    def _client_settings(self) -> Dict[str, Any]:
        if self._settings is None:
            settings = client_settings_from_env()
            max_retries = settings.pop("max_retries", 0)
            if self.args.max_retries is not None:
                max_retries = self.args.max_retries
            if self.args.timeout is not None:
                settings["timeout"] = self.args.timeout
            settings["retry"] = RetryPolicy(max_retries=max_retries)
            self._settings = settings
        return self._settings

    def geocoding_client(self) -> GeocodingClient:
        validate_config([API_KEY_ENV])
        return GeocodingClient(**self._client_settings())

    def places_client(self) -> PlacesClient:
        validate_config([API_KEY_ENV])
        return PlacesClient(**self._client_settings())

    def run(self) -> str:
        handler = getattr(self, "cmd_" + self.args.command.replace("-", "_"))
        return _dump(handler())

    def cmd_geocode(self):
        components = dict(c.split(":", 1) for c in self.args.component or [])
        with self.geocoding_client() as client:
            return client.geocode(
                address=self.args.address,
                components=components or None,
                language=self.args.language,
                region=self.args.region,
            )

    def cmd_reverse(self):
        with self.geocoding_client() as client:
            return client.reverse_geocode(
                latlng=LatLng(lat=self.args.lat, lng=self.args.lng),
                result_type=self.args.result_type,
                language=self.args.language,
            )

    def cmd_text_search(self):
        with self.places_client() as client:
            return list(client.iter_text_search_pages(
                query=self.args.query,
                max_pages=self.args.pages,
                language=self.args.language,
            ))

    def cmd_nearby(self):
        with self.places_client() as client:
            return list(client.iter_nearby_search_pages(
                location=PlacesLatLng(lat=self.args.lat, lng=self.args.lng),
                radius=self.args.radius,
                keyword=self.args.keyword,
                type=self.args.type,
                rank_by=self.args.rank_by,
                max_pages=self.args.pages,
            ))

    def cmd_details(self):
        with self.places_client() as client:
            return client.place_details(
                place_id=self.args.place_id,
                fields=self.args.fields,
                language=self.args.language,
            )

    def cmd_autocomplete(self):
        token = self.args.session_token
        if token == "auto":
            token = create_session_token()
        with self.places_client() as client:
            return client.autocomplete(
                input=self.args.input,
                session_token=token,
                language=self.args.language,
            )

    def cmd_photo_url(self):
        with self.places_client() as client:
            return client.build_photo_url(
                self.args.photo_reference,
                max_width=self.args.max_width,
                max_height=self.args.max_height,
            )

    def cmd_session_token(self):
        return create_session_token()


def create_parser() -> argparse.ArgumentParser:
    """Create and configure the argument parser."""
    parser = argparse.ArgumentParser(
        prog="gmaps-services",
        description="Query the Google Geocoding and Places web services",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  %(prog)s geocode "Brandenburger Tor" --region de
  %(prog)s nearby 52.5163 13.3777 --rank-by distance --type museum
  %(prog)s details ChIJN1t_tDeuEmsRUsoyG83frY4 --fields name formatted_address
        """
    )

    parser.add_argument('--env-file', default='.env',
                        help='Path to .env file (default: .env)')
    parser.add_argument('--log-level',
                        choices=['DEBUG', 'INFO', 'WARNING', 'ERROR'],
                        default='WARNING',
                        help='Logging level (default: WARNING)')
    parser.add_argument('--log-file', default=None,
                        help='Also write logs to this file')
    parser.add_argument('--max-retries', type=int, default=None,
                        help='Retries for transient failures')
    parser.add_argument('--timeout', type=float, default=None,
                        help='HTTP request timeout in seconds')
    parser.add_argument('--language', default=None, help='Result language')

    commands = parser.add_subparsers(dest='command', required=True)

    geocode = commands.add_parser('geocode', help='Geocode an address')
    geocode.add_argument('address')
    geocode.add_argument('--component', action='append',
                         help='Component filter as key:value (repeatable)')
    geocode.add_argument('--region', default=None)

    reverse = commands.add_parser('reverse', help='Reverse geocode a coordinate')
    reverse.add_argument('lat', type=float)
    reverse.add_argument('lng', type=float)
    reverse.add_argument('--result-type', nargs='+', default=None)

    text_search = commands.add_parser('text-search', help='Places text search')
    text_search.add_argument('query')
    text_search.add_argument('--pages', type=int, default=1)

    nearby = commands.add_parser('nearby', help='Places nearby search')
    nearby.add_argument('lat', type=float)
    nearby.add_argument('lng', type=float)
    nearby.add_argument('--radius', type=float, default=None)
    nearby.add_argument('--keyword', default=None)
    nearby.add_argument('--type', default=None)
    nearby.add_argument('--rank-by', choices=['prominence', 'distance'], default=None)
    nearby.add_argument('--pages', type=int, default=1)

    details = commands.add_parser('details', help='Place details')
    details.add_argument('place_id')
    details.add_argument('--fields', nargs='+', default=None)

    autocomplete = commands.add_parser('autocomplete', help='Place autocomplete')
    autocomplete.add_argument('input')
    autocomplete.add_argument('--session-token', default=None,
                              help="Session token, or 'auto' to generate one")

    photo = commands.add_parser('photo-url', help='Build a place photo URL')
    photo.add_argument('photo_reference')
    photo.add_argument('--max-width', type=int, default=None)
    photo.add_argument('--max-height', type=int, default=None)

    commands.add_parser('session-token', help='Generate an autocomplete session token')

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point; returns the process exit code."""
    parser = create_parser()
    args = parser.parse_args(argv)

    initialize_logger(log_level=args.log_level, log_file=args.log_file)
    load_config(args.env_file)

    try:
        output = MapsCommandRunner(args).run()
    except (ConfigError, InvalidRequestError, MapsApiError, MapsTransportError, ValueError) as e:
        log_error(f"{args.command} failed: {e}")
        print(f"Error: {e}", file=sys.stderr)
        return 1

    print(output)
    return 0


if __name__ == "__main__":
    sys.exit(main())
