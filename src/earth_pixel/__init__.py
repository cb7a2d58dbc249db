"""
earth-pixel: quantize coordinates into reversible grid cell keys.

Latitude is split into bands of equal height; each band is split into
longitude cells widened by 1 / cos(latitude), so cells keep roughly the same
ground size away from the equator. A cell key encodes the grid's division
count and the cell's indices, and can be turned back into the cell without
the grid that produced it.
"""

import logging

__version__ = "0.1.0"

from .errors import (
    EarthPixelError,
    ConstructionError,
    InvalidWidth,
    InvalidUnit,
    WidthTooLarge,
    WidthTooSmall,
    ValidationError,
    NotAnObject,
    NotANumber,
    OutOfRange,
    MalformedKeyError,
    InternalPrecisionError,
)
from .fixedpoint import PRECISION
from .cell import Coordinate, Bounds, Widths, CellIndices, CellInfo
from .keys import encode_key, decode_key
from .resolution import Resolution, resolve_resolution
from .grid import Grid

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "Grid",
    "Resolution",
    "resolve_resolution",
    "Coordinate",
    "Bounds",
    "Widths",
    "CellIndices",
    "CellInfo",
    "encode_key",
    "decode_key",
    "PRECISION",
    "EarthPixelError",
    "ConstructionError",
    "InvalidWidth",
    "InvalidUnit",
    "WidthTooLarge",
    "WidthTooSmall",
    "ValidationError",
    "NotAnObject",
    "NotANumber",
    "OutOfRange",
    "MalformedKeyError",
    "InternalPrecisionError",
]
