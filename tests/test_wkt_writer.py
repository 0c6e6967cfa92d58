"""
Tests for WKT encoding.
"""

import math

import pytest
from shapely import wkt as shapely_wkt

from wktcodec.core.errors import UnknownGeometryTypeError, WKTSyntaxError
from wktcodec.core.export import WKTWriter, encode, format_number
from wktcodec.core.parsers import MAX_NESTING_DEPTH, decode
from wktcodec.models import (
    GeometryCollection,
    LinearRing,
    LineString,
    MultiLineString,
    MultiPoint,
    MultiPolygon,
    Point,
    Polygon,
)


def ring(*coords):
    return LinearRing([Point(x, y) for x, y in coords])


SQUARE = ring((0, 0), (10, 0), (10, 10), (0, 10), (0, 0))
HOLE = ring((2, 2), (2, 4), (4, 4), (4, 2), (2, 2))


class TestFormatNumber:
    """Tests for coordinate text formatting."""

    @pytest.mark.parametrize(
        "value,expected",
        [
            (1, "1"),
            (1.0, "1"),
            (-3.0, "-3"),
            (0.5, "0.5"),
            (-122.084, "-122.084"),
            (0.1 + 0.2, "0.30000000000000004"),
            (1e-7, "1e-07"),
            (1e22, "1e+22"),
            (1e300, "1e+300"),
            (-2.5e16, "-2.5e+16"),
            (123456789012.0, "123456789012"),
            (-0.0, "-0"),
        ],
    )
    def test_values(self, value, expected):
        """Test numbers render as their shortest round-trip text."""
        assert format_number(value) == expected

    def test_non_finite(self):
        """Test NaN and infinities."""
        assert format_number(math.nan) == "NaN"
        assert format_number(math.inf) == "Infinity"
        assert format_number(-math.inf) == "-Infinity"

    def test_text_reads_back(self):
        """Test every rendered value parses back to the same float."""
        for value in (1.0, 0.1, 123456.789, -1e-300, 2.0**60, 1e300, 1e22):
            assert float(format_number(value)) == value


class TestEncode:
    """Tests for per-type encoding."""

    def test_point(self):
        """Test encoding a point."""
        assert encode(Point(1, 2)) == "POINT(1 2)"

    def test_point_with_decimals(self):
        """Test fractional coordinates keep their precision."""
        assert encode(Point(-122.0822035425683, 37.42228990140251)) == (
            "POINT(-122.0822035425683 37.42228990140251)"
        )

    def test_multipoint(self):
        """Test encoding a multipoint."""
        assert encode(MultiPoint([Point(1, 2), Point(3, 4)])) == "MULTIPOINT(1 2,3 4)"

    def test_linestring(self):
        """Test encoding a linestring."""
        line = LineString([Point(0, 0), Point(1, 1), Point(2, 2)])
        assert encode(line) == "LINESTRING(0 0,1 1,2 2)"

    def test_multilinestring(self):
        """Test encoding a multilinestring."""
        multiline = MultiLineString(
            [
                LineString([Point(0, 0), Point(1, 1)]),
                LineString([Point(2, 2), Point(3, 3)]),
            ]
        )
        assert encode(multiline) == "MULTILINESTRING((0 0,1 1),(2 2,3 3))"

    def test_polygon(self):
        """Test encoding a polygon with a hole."""
        assert encode(Polygon([SQUARE, HOLE])) == (
            "POLYGON((0 0,10 0,10 10,0 10,0 0),(2 2,2 4,4 4,4 2,2 2))"
        )

    def test_multipolygon(self):
        """Test encoding a multipolygon."""
        multipolygon = MultiPolygon(
            [
                Polygon([ring((0, 0), (1, 0), (1, 1), (0, 0))]),
                Polygon([ring((2, 2), (3, 2), (3, 3), (2, 2))]),
            ]
        )
        assert encode(multipolygon) == (
            "MULTIPOLYGON(((0 0,1 0,1 1,0 0)),((2 2,3 2,3 3,2 2)))"
        )

    def test_empty_composites(self):
        """Test composites without components."""
        assert encode(LineString()) == "LINESTRING()"
        assert encode(Polygon()) == "POLYGON()"
        assert encode(MultiPolygon()) == "MULTIPOLYGON()"

    def test_no_whitespace_inserted(self):
        """Test output only has the single space inside each coordinate."""
        text = encode(Polygon([SQUARE, HOLE]))
        assert text.count(" ") == len(SQUARE.components) + len(HOLE.components)
        assert text == text.strip()


class TestEncodeCollection:
    """Tests for GEOMETRYCOLLECTION encoding."""

    def test_empty_list(self):
        """Test an empty sequence."""
        assert encode([]) == "GEOMETRYCOLLECTION()"

    def test_list_of_geometries(self):
        """Test a heterogeneous sequence."""
        members = [Point(1, 1), LineString([Point(0, 0), Point(1, 1)])]
        assert encode(members) == "GEOMETRYCOLLECTION(POINT(1 1),LINESTRING(0 0,1 1))"

    def test_tuple_is_collection(self):
        """Test a tuple is treated like a list."""
        assert encode((Point(1, 1),)) == "GEOMETRYCOLLECTION(POINT(1 1))"

    def test_collection_object(self):
        """Test a GeometryCollection instance."""
        collection = GeometryCollection([Point(1, 1), Point(2, 2)])
        assert encode(collection) == "GEOMETRYCOLLECTION(POINT(1 1),POINT(2 2))"

    def test_nested_collections(self):
        """Test nested lists and collections."""
        members = [Point(0, 0), [Point(1, 1)], GeometryCollection([])]
        assert encode(members) == (
            "GEOMETRYCOLLECTION(POINT(0 0),GEOMETRYCOLLECTION(POINT(1 1)),GEOMETRYCOLLECTION())"
        )


class TestEncodeFailures:
    """Tests for unencodable input."""

    def test_unknown_object(self):
        """Test objects without a geometry type give None."""
        assert encode(object()) is None
        assert encode("POINT(1 2)") is None
        assert encode(None) is None

    def test_bare_linear_ring(self):
        """Test a LinearRing on its own has no WKT keyword."""
        assert encode(SQUARE) is None

    def test_bad_member_fails_collection(self):
        """Test one bad member makes the whole collection None."""
        assert encode([Point(1, 1), object()]) is None

    def test_strict_raises(self):
        """Test strict mode raises UnknownGeometryTypeError."""
        writer = WKTWriter(strict=True)

        with pytest.raises(UnknownGeometryTypeError) as exc_info:
            writer.write(SQUARE)

        assert exc_info.value.details["geometry_type"] == "LINEARRING"

    def test_strict_raises_for_plain_object(self):
        """Test strict mode names the Python type of non-geometries."""
        with pytest.raises(UnknownGeometryTypeError) as exc_info:
            encode({"type": "Point"}, strict=True)

        assert exc_info.value.details["geometry_type"] == "dict"

    def test_excessive_nesting_returns_none(self):
        """Test lists nested past the limit give None instead of overflowing."""
        members = Point(1, 2)
        for _ in range(1200):
            members = [members]
        assert encode(members) is None

    def test_self_referencing_list(self):
        """Test a list that contains itself gives None."""
        members = [Point(1, 2)]
        members.append(members)
        assert encode(members) is None

    def test_strict_excessive_nesting(self):
        """Test strict mode raises WKTSyntaxError for deep nesting."""
        members = Point(1, 2)
        for _ in range(MAX_NESTING_DEPTH + 1):
            members = [members]

        with pytest.raises(WKTSyntaxError):
            encode(members, strict=True)

    def test_nesting_limit_reads_back(self):
        """Test the deepest encodable collection decodes again."""
        members = Point(1, 2)
        for _ in range(MAX_NESTING_DEPTH):
            members = [members]

        text = encode(members)
        assert text.count("GEOMETRYCOLLECTION") == MAX_NESTING_DEPTH
        assert decode(text) == members


class TestShapelyAcceptsOutput:
    """Tests that encoded text is valid WKT for an independent reader."""

    @pytest.mark.parametrize(
        "geometry,geom_type",
        [
            (Point(1.5, -2), "Point"),
            (MultiPoint([Point(1, 2), Point(3, 4)]), "MultiPoint"),
            (LineString([Point(0, 0), Point(1, 1)]), "LineString"),
            (
                MultiLineString(
                    [LineString([Point(0, 0), Point(1, 1)]), LineString([Point(2, 2), Point(3, 3)])]
                ),
                "MultiLineString",
            ),
            (Polygon([SQUARE, HOLE]), "Polygon"),
            (
                MultiPolygon([Polygon([SQUARE]), Polygon([ring((20, 20), (30, 20), (30, 30), (20, 20))])]),
                "MultiPolygon",
            ),
            ([Point(0, 0), LineString([Point(0, 0), Point(1, 1)])], "GeometryCollection"),
        ],
    )
    def test_shapely_loads(self, geometry, geom_type):
        """Test Shapely parses the output into the same kind of geometry."""
        shape = shapely_wkt.loads(encode(geometry))
        assert shape.geom_type == geom_type

    def test_polygon_area(self):
        """Test Shapely sees the hole in an encoded polygon."""
        shape = shapely_wkt.loads(encode(Polygon([SQUARE, HOLE])))
        assert shape.area == pytest.approx(96.0)
