"""
Textual cell keys.

A key is the division count, latitude index and longitude index of a cell,
each written in lower-case hexadecimal and joined by single hyphens:

    168-b4-196   ->   (360, 180, 406)

Keys carry no band or width information of their own; everything else about
a cell is re-derived from the division count.
"""

import logging
import re
from typing import Tuple

from .errors import MalformedKeyError


LOGGER = logging.getLogger(__name__)

SEPARATOR = "-"

KEY_PATTERN = re.compile(r"([0-9a-f]+)-([0-9a-f]+)-([0-9a-f]+)", re.IGNORECASE)


def encode_key(divisions: int, lat_index: int, lon_index: int) -> str:
    """
    Encode a cell position as a key.

    Args:
        divisions: Number of latitude bands of the grid
        lat_index: Latitude band index
        lon_index: Longitude cell index within the band

    Returns:
        Key string, e.g. '168-b4-196'
    """
    if divisions < 0 or lat_index < 0 or lon_index < 0:
        raise ValueError(
            f"Key components must be non-negative: {divisions}, {lat_index}, {lon_index}"
        )
    return SEPARATOR.join(format(value, "x") for value in (divisions, lat_index, lon_index))


def decode_key(key: str) -> Tuple[int, int, int]:
    """
    Decode a key into (divisions, lat_index, lon_index).

    Hex digits are accepted in either case.

    Raises:
        MalformedKeyError: If key is not a string of exactly three
            hyphen-separated hexadecimal integers
    """
    if not isinstance(key, str):
        raise MalformedKeyError(f"Key must be a string, got {type(key).__name__}")

    match = KEY_PATTERN.fullmatch(key)
    if match is None:
        LOGGER.debug("Rejected malformed key %r", key)
        raise MalformedKeyError(f"Key is malformed: {key!r}")

    divisions, lat_index, lon_index = (int(group, 16) for group in match.groups())
    return divisions, lat_index, lon_index
