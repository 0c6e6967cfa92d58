"""
Geometry data model shared by the WKT decoder and encoder.

Each geometry kind is a small value dataclass carrying a class-level
``geometry_type`` tag. Composite kinds hold their parts in an ordered
``components`` list, in source text order.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import ClassVar, List, Optional, Tuple, Union


class GeometryType(str, Enum):
    """Geometry kinds understood by the codec."""

    POINT = "POINT"
    MULTIPOINT = "MULTIPOINT"
    LINESTRING = "LINESTRING"
    LINEARRING = "LINEARRING"
    MULTILINESTRING = "MULTILINESTRING"
    POLYGON = "POLYGON"
    MULTIPOLYGON = "MULTIPOLYGON"
    GEOMETRYCOLLECTION = "GEOMETRYCOLLECTION"

    @classmethod
    def from_keyword(cls, keyword: str) -> Optional["GeometryType"]:
        """
        Look up a geometry type from a WKT keyword, ignoring case.

        LINEARRING is not a WKT keyword and never matches.

        Args:
            keyword: Type keyword as it appears in WKT text

        Returns:
            Matching GeometryType, or None if the keyword is unknown
        """
        try:
            geometry_type = cls(keyword.upper())
        except ValueError:
            return None
        if geometry_type is cls.LINEARRING:
            return None
        return geometry_type


@dataclass
class Point:
    """
    A single coordinate pair.

    Attributes:
        x: First coordinate (longitude / easting)
        y: Second coordinate (latitude / northing)
    """

    geometry_type: ClassVar[GeometryType] = GeometryType.POINT

    x: float
    y: float

    @property
    def coords(self) -> Tuple[float, float]:
        """Get the coordinate pair as a tuple."""
        return (self.x, self.y)


@dataclass
class LineString:
    """Ordered sequence of points. No minimum length is enforced."""

    geometry_type: ClassVar[GeometryType] = GeometryType.LINESTRING

    components: List[Point] = field(default_factory=list)


@dataclass
class LinearRing(LineString):
    """LineString used as a polygon boundary. Closure is not enforced."""

    geometry_type: ClassVar[GeometryType] = GeometryType.LINEARRING

    @property
    def is_closed(self) -> bool:
        """Whether the first and last points coincide."""
        if not self.components:
            return False
        return self.components[0].coords == self.components[-1].coords


@dataclass
class MultiPoint:
    """Ordered sequence of points."""

    geometry_type: ClassVar[GeometryType] = GeometryType.MULTIPOINT

    components: List[Point] = field(default_factory=list)


@dataclass
class MultiLineString:
    """Ordered sequence of linestrings."""

    geometry_type: ClassVar[GeometryType] = GeometryType.MULTILINESTRING

    components: List[LineString] = field(default_factory=list)


@dataclass
class Polygon:
    """
    Ordered sequence of rings.

    By convention the first ring is the shell and the remaining rings are
    holes; this is not checked.
    """

    geometry_type: ClassVar[GeometryType] = GeometryType.POLYGON

    components: List[LinearRing] = field(default_factory=list)

    @property
    def shell(self) -> Optional[LinearRing]:
        """Get the outer ring, if any."""
        return self.components[0] if self.components else None

    @property
    def holes(self) -> List[LinearRing]:
        """Get the interior rings."""
        return self.components[1:]


@dataclass
class MultiPolygon:
    """Ordered sequence of polygons."""

    geometry_type: ClassVar[GeometryType] = GeometryType.MULTIPOLYGON

    components: List[Polygon] = field(default_factory=list)


@dataclass
class GeometryCollection:
    """Heterogeneous, possibly nested, sequence of geometries."""

    geometry_type: ClassVar[GeometryType] = GeometryType.GEOMETRYCOLLECTION

    components: List["Geometry"] = field(default_factory=list)


Geometry = Union[
    Point,
    LineString,
    LinearRing,
    MultiPoint,
    MultiLineString,
    Polygon,
    MultiPolygon,
    GeometryCollection,
]
