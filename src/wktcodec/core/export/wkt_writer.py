"""
WKT encoding module.

Serializes geometries, or sequences of geometries, to canonical WKT:
uppercase keywords, a single space between x and y, a single comma between
components and no other whitespace.
"""

import logging
import math
from typing import Any, Callable, Dict, List, Optional, Sequence

from wktcodec.core.config import resolve_strict
from wktcodec.core.errors import UnknownGeometryTypeError, WKTSyntaxError
from wktcodec.core.parsers.scanner import MAX_NESTING_DEPTH
from wktcodec.models.geometry import (
    GeometryCollection,
    GeometryType,
    LineString,
    MultiLineString,
    MultiPoint,
    MultiPolygon,
    Point,
    Polygon,
)

logger = logging.getLogger(__name__)


def format_number(value: float) -> str:
    """
    Render a coordinate value as the shortest text that reads back equal.

    This is the shortest repr of the float with a trailing ``.0`` dropped, so
    ``1.0`` renders as ``1`` and ``1e22`` as ``1e+22``.

    Args:
        value: Coordinate value

    Returns:
        Text form of the value

    Examples:
        >>> format_number(1.0)
        '1'
        >>> format_number(-0.25)
        '-0.25'
        >>> format_number(float("nan"))
        'NaN'
    """
    value = float(value)
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "Infinity" if value > 0 else "-Infinity"
    text = repr(value)
    return text[:-2] if text.endswith(".0") else text


class WKTWriter:
    """
    Encode geometries as WKT.

    A list or tuple of geometries, or a GeometryCollection, is written as
    GEOMETRYCOLLECTION. Anything whose geometry type has no extractor gives
    None in lenient mode and raises UnknownGeometryTypeError in strict mode.
    """

    def __init__(self, strict: Optional[bool] = None) -> None:
        """
        Initialize WKT writer.

        Args:
            strict: Raise on unencodable input. Defaults to the configured
                ``WKTCODEC_STRICT`` value.
        """
        self.strict = resolve_strict(strict)
        self._extractors: Dict[GeometryType, Callable[[Any], str]] = {
            GeometryType.POINT: self.extract_point,
            GeometryType.MULTIPOINT: self.extract_multipoint,
            GeometryType.LINESTRING: self.extract_linestring,
            GeometryType.MULTILINESTRING: self.extract_multilinestring,
            GeometryType.POLYGON: self.extract_polygon,
            GeometryType.MULTIPOLYGON: self.extract_multipolygon,
        }

    def write(self, geometry: Any) -> Optional[str]:
        """
        Encode a geometry or a sequence of geometries.

        Args:
            geometry: A geometry, a GeometryCollection, or a list/tuple of
                geometries (nested lists become nested collections)

        Returns:
            WKT text, or None if any part could not be encoded

        Raises:
            UnknownGeometryTypeError: Strict mode, unsupported geometry
            WKTSyntaxError: Strict mode, collections nested more than
                ``MAX_NESTING_DEPTH`` levels deep
        """
        return self._write(geometry, 0)

    def _write(self, geometry: Any, depth: int) -> Optional[str]:
        if isinstance(geometry, (list, tuple)):
            return self._write_collection(geometry, depth)
        if isinstance(geometry, GeometryCollection):
            return self._write_collection(geometry.components, depth)

        geometry_type = getattr(geometry, "geometry_type", None)
        if not isinstance(geometry_type, GeometryType):
            return self._fail(geometry)

        extractor = self._extractors.get(geometry_type)
        if extractor is None:
            return self._fail(geometry)

        return f"{geometry_type.value}({extractor(geometry)})"

    def _write_collection(self, members: Sequence[Any], depth: int) -> Optional[str]:
        if depth >= MAX_NESTING_DEPTH:
            error = WKTSyntaxError(
                f"Geometry nesting exceeds {MAX_NESTING_DEPTH} levels"
            )
            if self.strict:
                raise error
            logger.debug(f"Cannot encode as WKT: {error}")
            return None

        pieces: List[str] = []
        for member in members:
            text = self._write(member, depth + 1)
            if text is None:
                return None
            pieces.append(text)
        return f"{GeometryType.GEOMETRYCOLLECTION.value}({','.join(pieces)})"

    def extract_point(self, point: Point) -> str:
        """Return ``x y`` for a point."""
        return f"{format_number(point.x)} {format_number(point.y)}"

    def extract_multipoint(self, multipoint: MultiPoint) -> str:
        """Return comma separated point coordinates."""
        return ",".join(self.extract_point(point) for point in multipoint.components)

    def extract_linestring(self, linestring: LineString) -> str:
        """Return comma separated point coordinates."""
        return ",".join(self.extract_point(point) for point in linestring.components)

    def extract_multilinestring(self, multilinestring: MultiLineString) -> str:
        """Return comma separated ``(linestring)`` groups."""
        return ",".join(
            f"({self.extract_linestring(line)})" for line in multilinestring.components
        )

    def extract_polygon(self, polygon: Polygon) -> str:
        """Return comma separated ``(ring)`` groups, shell first."""
        return ",".join(
            f"({self.extract_linestring(ring)})" for ring in polygon.components
        )

    def extract_multipolygon(self, multipolygon: MultiPolygon) -> str:
        """Return comma separated ``(polygon)`` groups."""
        return ",".join(
            f"({self.extract_polygon(polygon)})" for polygon in multipolygon.components
        )

    def _fail(self, geometry: Any) -> None:
        geometry_type = getattr(geometry, "geometry_type", None)
        if isinstance(geometry_type, GeometryType):
            name = geometry_type.value
        else:
            name = type(geometry).__name__
        if self.strict:
            raise UnknownGeometryTypeError(
                f"Cannot encode {name} as WKT", geometry_type=name
            )
        logger.debug(f"Cannot encode {name} as WKT")
        return None


def encode(geometry: Any, strict: Optional[bool] = None) -> Optional[str]:
    """
    Convenience function to encode a geometry as WKT.

    Args:
        geometry: A geometry, a GeometryCollection, or a list of geometries
        strict: Raise instead of returning None for unsupported input

    Returns:
        WKT text, or None

    Examples:
        >>> encode(Point(1, 2))
        'POINT(1 2)'

        >>> encode([])
        'GEOMETRYCOLLECTION()'
    """
    return WKTWriter(strict=strict).write(geometry)
