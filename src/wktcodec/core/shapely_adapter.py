"""
Conversion between codec geometries and Shapely geometries.

Lets applications that work with Shapely decode WKT with this codec and
continue with spatial operations, or encode Shapely output. Z values are
dropped on the way in.
"""

import logging
import math
from typing import Any, Iterable, List, Tuple, Union

from shapely.geometry import GeometryCollection as ShapelyGeometryCollection
from shapely.geometry import LinearRing as ShapelyLinearRing
from shapely.geometry import LineString as ShapelyLineString
from shapely.geometry import MultiLineString as ShapelyMultiLineString
from shapely.geometry import MultiPoint as ShapelyMultiPoint
from shapely.geometry import MultiPolygon as ShapelyMultiPolygon
from shapely.geometry import Point as ShapelyPoint
from shapely.geometry import Polygon as ShapelyPolygon
from shapely.geometry.base import BaseGeometry

from wktcodec.core.errors import UnknownGeometryTypeError
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

logger = logging.getLogger(__name__)


def _coords(points: Iterable[Point]) -> List[Tuple[float, float]]:
    return [point.coords for point in points]


def _points(coords: Iterable[Tuple[float, ...]]) -> List[Point]:
    return [Point(float(c[0]), float(c[1])) for c in coords]


def to_shapely(geometry: Union[Geometry, List[Any], Tuple[Any, ...]]) -> BaseGeometry:
    """
    Convert a codec geometry to the equivalent Shapely geometry.

    Lists, tuples and GeometryCollection become a Shapely
    GeometryCollection.

    Args:
        geometry: Codec geometry or sequence of geometries

    Returns:
        Shapely geometry object

    Raises:
        UnknownGeometryTypeError: If the input is not a codec geometry
    """
    if isinstance(geometry, (list, tuple)):
        return ShapelyGeometryCollection([to_shapely(member) for member in geometry])

    geometry_type = getattr(geometry, "geometry_type", None)

    if geometry_type is GeometryType.POINT:
        return ShapelyPoint(geometry.x, geometry.y)
    elif geometry_type is GeometryType.LINEARRING:
        return ShapelyLinearRing(_coords(geometry.components))
    elif geometry_type is GeometryType.LINESTRING:
        return ShapelyLineString(_coords(geometry.components))
    elif geometry_type is GeometryType.POLYGON:
        if not geometry.components:
            return ShapelyPolygon()
        shell = _coords(geometry.components[0].components)
        holes = [_coords(ring.components) for ring in geometry.components[1:]]
        return ShapelyPolygon(shell, holes if holes else None)
    elif geometry_type is GeometryType.MULTIPOINT:
        return ShapelyMultiPoint(_coords(geometry.components))
    elif geometry_type is GeometryType.MULTILINESTRING:
        return ShapelyMultiLineString(
            [_coords(line.components) for line in geometry.components]
        )
    elif geometry_type is GeometryType.MULTIPOLYGON:
        return ShapelyMultiPolygon(
            [to_shapely(polygon) for polygon in geometry.components]
        )
    elif geometry_type is GeometryType.GEOMETRYCOLLECTION:
        return to_shapely(geometry.components)

    raise UnknownGeometryTypeError(
        f"Cannot convert {type(geometry).__name__} to Shapely",
        geometry_type=type(geometry).__name__,
    )


def from_shapely(shape: BaseGeometry) -> Union[Geometry, List[Any]]:
    """
    Convert a Shapely geometry to a codec geometry.

    A Shapely GeometryCollection becomes a list, matching what the decoder
    returns for GEOMETRYCOLLECTION text.

    Args:
        shape: Shapely geometry

    Returns:
        Codec geometry, or list of geometries for a collection

    Raises:
        UnknownGeometryTypeError: If the Shapely type is not supported
    """
    if not isinstance(shape, BaseGeometry):
        raise UnknownGeometryTypeError(
            f"Expected a Shapely geometry, got {type(shape).__name__}",
            geometry_type=type(shape).__name__,
        )

    geom_type = shape.geom_type

    if geom_type == "Point":
        if shape.is_empty:
            return Point(math.nan, math.nan)
        return Point(float(shape.x), float(shape.y))
    elif geom_type == "LinearRing":
        return LinearRing(_points(shape.coords))
    elif geom_type == "LineString":
        return LineString(_points(shape.coords))
    elif geom_type == "Polygon":
        if shape.is_empty:
            return Polygon()
        rings = [LinearRing(_points(shape.exterior.coords))]
        rings.extend(LinearRing(_points(ring.coords)) for ring in shape.interiors)
        return Polygon(rings)
    elif geom_type == "MultiPoint":
        return MultiPoint([from_shapely(point) for point in shape.geoms])
    elif geom_type == "MultiLineString":
        return MultiLineString([from_shapely(line) for line in shape.geoms])
    elif geom_type == "MultiPolygon":
        return MultiPolygon([from_shapely(polygon) for polygon in shape.geoms])
    elif geom_type == "GeometryCollection":
        return [from_shapely(member) for member in shape.geoms]

    logger.debug(f"Unsupported Shapely geometry type: {geom_type}")
    raise UnknownGeometryTypeError(
        f"Unsupported Shapely geometry type: {geom_type}", geometry_type=geom_type
    )
