"""
Tests for conversion to and from Shapely geometries.
"""

import pytest
from shapely import wkt as shapely_wkt
from shapely.geometry import LineString as ShapelyLineString
from shapely.geometry import Point as ShapelyPoint
from shapely.geometry import Polygon as ShapelyPolygon

from wktcodec import decode, encode
from wktcodec.core.errors import UnknownGeometryTypeError
from wktcodec.core.shapely_adapter import from_shapely, to_shapely
from wktcodec.models import LinearRing, MultiPolygon, Point, Polygon

SAMPLES = [
    "POINT(1 2)",
    "MULTIPOINT(1 2,3 4)",
    "LINESTRING(0 0,1 1,2 2)",
    "MULTILINESTRING((0 0,1 1),(2 2,3 3))",
    "POLYGON((0 0,10 0,10 10,0 10,0 0),(2 2,2 4,4 4,4 2,2 2))",
    "MULTIPOLYGON(((0 0,1 0,1 1,0 0)),((2 2,3 2,3 3,2 2)))",
    "GEOMETRYCOLLECTION(POINT(1 1),LINESTRING(0 0,1 1))",
]


class TestToShapely:
    """Tests for to_shapely."""

    @pytest.mark.parametrize("wkt", SAMPLES)
    def test_matches_shapely_reader(self, wkt):
        """Test conversion equals Shapely's own reading of the text."""
        assert to_shapely(decode(wkt)).equals_exact(shapely_wkt.loads(wkt), tolerance=0)

    def test_point(self):
        """Test point conversion."""
        shape = to_shapely(Point(1.5, 2.5))
        assert isinstance(shape, ShapelyPoint)
        assert (shape.x, shape.y) == (1.5, 2.5)

    def test_polygon_holes(self):
        """Test rings after the first become interiors."""
        shape = to_shapely(decode(SAMPLES[4]))
        assert isinstance(shape, ShapelyPolygon)
        assert len(shape.interiors) == 1
        assert shape.area == pytest.approx(96.0)

    def test_empty_polygon(self):
        """Test a polygon without rings."""
        assert to_shapely(Polygon()).is_empty

    def test_unsupported(self):
        """Test non-geometries raise."""
        with pytest.raises(UnknownGeometryTypeError):
            to_shapely(object())


class TestFromShapely:
    """Tests for from_shapely."""

    @pytest.mark.parametrize("wkt", SAMPLES)
    def test_matches_decoder(self, wkt):
        """Test conversion equals decoding the same text."""
        assert from_shapely(shapely_wkt.loads(wkt)) == decode(wkt)

    def test_z_dropped(self):
        """Test Z values are discarded."""
        assert from_shapely(ShapelyPoint(1, 2, 3)) == Point(1, 2)
        line = from_shapely(ShapelyLineString([(0, 0, 5), (1, 1, 6)]))
        assert encode(line) == "LINESTRING(0 0,1 1)"

    def test_polygon_rings(self):
        """Test shell and holes become LinearRings."""
        polygon = from_shapely(shapely_wkt.loads(SAMPLES[4]))
        assert all(isinstance(r, LinearRing) for r in polygon.components)
        assert len(polygon.holes) == 1

    def test_multipolygon_encode(self):
        """Test a Shapely multipolygon encodes through the codec."""
        geometry = from_shapely(shapely_wkt.loads(SAMPLES[5]))
        assert isinstance(geometry, MultiPolygon)
        assert encode(geometry) == SAMPLES[5]

    def test_not_shapely(self):
        """Test non-Shapely input raises."""
        with pytest.raises(UnknownGeometryTypeError):
            from_shapely("POINT(1 2)")
