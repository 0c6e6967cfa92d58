"""
wktcodec - Well-Known Text reader and writer.

Decodes POINT, MULTIPOINT, LINESTRING, MULTILINESTRING, POLYGON,
MULTIPOLYGON and GEOMETRYCOLLECTION text into a small geometry model and
encodes that model back into canonical WKT.
"""

from wktcodec.core.export.wkt_writer import WKTWriter, encode
from wktcodec.core.format import WKTFormat
from wktcodec.core.logging_config import setup_logging
from wktcodec.core.parsers.wkt_parser import WKTParser, decode
from wktcodec.core.parsers.wkt_validator import WKTValidationResult, validate_wkt_string
from wktcodec.core.shapely_adapter import from_shapely, to_shapely
from wktcodec.models.geometry import (
    Geometry,
    GeometryCollection,
    GeometryType,
    LinearRing,
    LineString,
    MultiLineString,
    MultiPoint,
    MultiPolygon,
    Point,
    Polygon,
)

__version__ = "0.1.0"

__all__ = [
    "decode",
    "encode",
    "WKTFormat",
    "WKTParser",
    "WKTWriter",
    "WKTValidationResult",
    "validate_wkt_string",
    "from_shapely",
    "to_shapely",
    "setup_logging",
    "Geometry",
    "GeometryCollection",
    "GeometryType",
    "LinearRing",
    "LineString",
    "MultiLineString",
    "MultiPoint",
    "MultiPolygon",
    "Point",
    "Polygon",
]
