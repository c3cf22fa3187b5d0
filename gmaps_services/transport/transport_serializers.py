"""
Query-string serialization helpers shared by the Geocoding and Places clients.

Every helper returns None for an absent value so callers can hand the
result straight to the query builder, which drops None entries.
"""

from decimal import Decimal
from typing import Any, Dict, Iterable, Mapping, Optional, Sequence

from googlemaps import convert


def format_number(value: Any) -> str:
    """
    Render a number in plain positional form without rounding.

    Integral floats lose the trailing '.0'; small magnitudes are written
    out (5e-05 -> '0.00005') using the shortest repr digits.
    """
    if isinstance(value, bool):
        return str(value).lower()
    if isinstance(value, float):
        if value.is_integer():
            return str(int(value))
        return format(Decimal(repr(value)), "f")
    return str(value)


def serialize_latlng(latlng: Any) -> Optional[str]:
    """Serialize an object with lat/lng attributes as '<lat>,<lng>'."""
    if latlng is None:
        return None
    return f"{format_number(latlng.lat)},{format_number(latlng.lng)}"


def serialize_bounds(southwest: Any, northeast: Any) -> str:
    """Serialize a bounding box as '<sw.lat>,<sw.lng>|<ne.lat>,<ne.lng>'."""
    return f"{serialize_latlng(southwest)}|{serialize_latlng(northeast)}"


def serialize_components(components: Optional[Mapping[str, Optional[str]]]) -> Optional[str]:
    """Join 'key:value' pairs with '|' in insertion order, skipping empty values."""
    if not components:
        return None
    pairs = [
        f"{key}:{value}"
        for key, value in components.items()
        if value is not None and value != ""
    ]
    return "|".join(pairs) or None


def serialize_list(values: Optional[Sequence[str]], separator: str = "|") -> Optional[str]:
    """Join a list of strings; empty lists are omitted."""
    if not values:
        return None
    return convert.join_list(separator, list(values))


def serialize_bool(value: Optional[bool]) -> Optional[str]:
    if value is None:
        return None
    return "true" if value else "false"


def compact_params(params: Iterable) -> Dict[str, str]:
    """
    Drop absent entries and stringify the rest.

    Args:
        params: (name, value) pairs in wire order

    Returns:
        Ordered dictionary of query parameters; None and '' are omitted
    """
    compacted: Dict[str, str] = {}
    for name, value in params:
        if value is None or value == "":
            continue
        if isinstance(value, (int, float)):
            compacted[name] = format_number(value)
        else:
            compacted[name] = str(value)
    return compacted
