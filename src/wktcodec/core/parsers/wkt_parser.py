"""
WKT decoding module.

Parses Well-Known Text into the geometry model. The top-level ``TYPE(BODY)``
shape is matched with a regular expression, then the body is handed to a
per-type parser chosen from a dispatch table. Composite bodies are split
into sibling fragments with the depth-tracking scanner and parsed
recursively.
"""

import logging
import math
import re
from typing import Any, Callable, Dict, List, Optional, Union

from wktcodec.core.config import resolve_strict
from wktcodec.core.errors import (
    CoordinateError,
    UnknownGeometryTypeError,
    WKTSyntaxError,
)
from wktcodec.models.geometry import (
    Geometry,
    GeometryType,
    LinearRing,
    LineString,
    MultiLineString,
    MultiPoint,
    MultiPolygon,
    Point,
    Polygon,
)

from .scanner import MAX_NESTING_DEPTH, nesting_depth, split_top_level, strip_parens

logger = logging.getLogger(__name__)

# Matched against stripped text; body whitespace is trimmed by the body parsers.
TYPE_PATTERN = re.compile(r"(\w+)\s*\((.*)\)\Z", re.DOTALL)

# Numbers accepted in strict mode: ASCII decimal or exponent notation only.
NUMBER_PATTERN = re.compile(r"[+-]?(?:\d+(?:\.\d*)?|\.\d+)(?:[eE][+-]?\d+)?", re.ASCII)

DecodeResult = Union[Geometry, List[Any], None]


class WKTParser:
    """
    Decode WKT text into geometries.

    Supports POINT, MULTIPOINT, LINESTRING, MULTILINESTRING, POLYGON,
    MULTIPOLYGON and GEOMETRYCOLLECTION. In lenient mode (the default)
    malformed input degrades silently: unrecognized text gives None and bad
    numbers become NaN. In strict mode the same problems raise
    WKTSyntaxError, UnknownGeometryTypeError or CoordinateError.

    The parser holds no per-call state and may be shared between threads.
    """

    def __init__(self, strict: Optional[bool] = None) -> None:
        """
        Initialize WKT parser.

        Args:
            strict: Raise typed errors on malformed input. Defaults to the
                configured ``WKTCODEC_STRICT`` value.
        """
        self.strict = resolve_strict(strict)
        self._parsers: Dict[str, Callable[[str], DecodeResult]] = {
            "point": self.parse_point,
            "multipoint": self.parse_multipoint,
            "linestring": self.parse_linestring,
            "multilinestring": self.parse_multilinestring,
            "polygon": self.parse_polygon,
            "multipolygon": self.parse_multipolygon,
            "geometrycollection": self.parse_geometrycollection,
        }

    def parse(self, wkt: str) -> DecodeResult:
        """
        Decode a WKT string.

        Args:
            wkt: WKT text such as ``"POINT(1 2)"``

        Returns:
            A geometry, a list of geometries for GEOMETRYCOLLECTION, or None
            if nothing could be decoded

        Raises:
            WKTSyntaxError: Strict mode, text is not ``TYPE(...)`` or nests too deeply
            UnknownGeometryTypeError: Strict mode, unsupported keyword
            CoordinateError: Strict mode, bad coordinate token
        """
        if not isinstance(wkt, str):
            return self._fail(
                WKTSyntaxError(f"Expected WKT text, got {type(wkt).__name__}")
            )

        match = TYPE_PATTERN.match(wkt.strip())
        if not match:
            return self._fail(
                WKTSyntaxError("Text does not match TYPE(...)", text=wkt)
            )

        keyword, body = match.group(1), match.group(2)
        parser = self._parsers.get(keyword.lower())
        if parser is None:
            return self._fail(
                UnknownGeometryTypeError(
                    f"Unsupported geometry type: {keyword}", geometry_type=keyword
                )
            )

        return parser(body)

    def parse_point(self, body: str) -> Point:
        """Parse ``x y`` into a Point. Tokens past the second are ignored."""
        tokens = body.strip().split()
        return Point(self._to_number(tokens, 0, body), self._to_number(tokens, 1, body))

    def parse_multipoint(self, body: str) -> MultiPoint:
        """
        Parse a comma separated list of points.

        Both ``1 2,3 4`` and the parenthesized form ``(1 2),(3 4)`` are
        accepted.
        """
        return MultiPoint(
            [
                self.parse_point(strip_parens(fragment))
                for fragment in self._split(body)
            ]
        )

    def parse_linestring(self, body: str) -> LineString:
        """Parse a comma separated list of points."""
        return LineString([self.parse_point(fragment) for fragment in self._split(body)])

    def parse_multilinestring(self, body: str) -> MultiLineString:
        """Parse ``(x y,...),(x y,...)`` into a MultiLineString."""
        return MultiLineString(
            [
                self.parse_linestring(strip_parens(fragment))
                for fragment in self._split(body)
            ]
        )

    def parse_polygon(self, body: str) -> Polygon:
        """Parse ``(shell),(hole),...`` into a Polygon of LinearRings."""
        rings = []
        for fragment in self._split(body):
            linestring = self.parse_linestring(strip_parens(fragment))
            rings.append(LinearRing(linestring.components))
        return Polygon(rings)

    def parse_multipolygon(self, body: str) -> MultiPolygon:
        """Parse ``((...)),((...))`` into a MultiPolygon."""
        return MultiPolygon(
            [
                self.parse_polygon(strip_parens(fragment))
                for fragment in self._split(body)
            ]
        )

    def parse_geometrycollection(self, body: str) -> Optional[List[DecodeResult]]:
        """
        Parse the members of a GEOMETRYCOLLECTION.

        Each top-level fragment is a complete ``TYPE(...)`` geometry and is
        decoded through :meth:`parse`, so collections may nest up to
        ``MAX_NESTING_DEPTH`` parentheses deep. Deeper text fails as a whole.
        """
        if nesting_depth(body) > MAX_NESTING_DEPTH:
            return self._fail(
                WKTSyntaxError(
                    f"Geometry nesting exceeds {MAX_NESTING_DEPTH} levels",
                    text=body[:80],
                )
            )
        return [self.parse(fragment) for fragment in self._split(body)]

    def _split(self, body: str) -> List[str]:
        return split_top_level(body, strict=self.strict)

    def _to_number(self, tokens: List[str], index: int, body: str) -> float:
        if index >= len(tokens):
            if self.strict:
                raise CoordinateError(
                    f"Missing coordinate {index + 1} in {body.strip()!r}"
                )
            logger.debug(f"Missing coordinate {index + 1} in {body!r}, using NaN")
            return math.nan

        token = tokens[index]
        if self.strict:
            if not NUMBER_PATTERN.fullmatch(token):
                raise CoordinateError(
                    f"Invalid coordinate value: {token!r}", token=token
                )
            return float(token)

        try:
            return float(token)
        except ValueError:
            logger.debug(f"Invalid coordinate value {token!r}, using NaN")
            return math.nan

    def _fail(self, error: Exception) -> None:
        if self.strict:
            raise error
        logger.debug(f"WKT decode failed: {error}")
        return None


def decode(wkt: str, strict: Optional[bool] = None) -> DecodeResult:
    """
    Convenience function to decode WKT text.

    Args:
        wkt: WKT text
        strict: Raise typed errors instead of returning None/NaN

    Returns:
        A geometry, a list of geometries for GEOMETRYCOLLECTION, or None

    Examples:
        >>> decode("POINT(1 2)")
        Point(x=1.0, y=2.0)

        >>> decode("NOTAGEOM(1 2)") is None
        True
    """
    return WKTParser(strict=strict).parse(wkt)


def geometry_type_of(wkt: str) -> Optional[GeometryType]:
    """
    Read the geometry type keyword of WKT text without parsing the body.

    Args:
        wkt: WKT text

    Returns:
        GeometryType, or None if the text has no supported keyword
    """
    if not isinstance(wkt, str):
        return None
    match = TYPE_PATTERN.match(wkt.strip())
    if not match:
        return None
    return GeometryType.from_keyword(match.group(1))
