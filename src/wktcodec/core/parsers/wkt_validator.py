"""
WKT validation module.

Runs the strict decoder over WKT text and reports every problem as a
message instead of raising, plus warnings for shapes that decode but are
unlikely to be intended.
"""

import logging
from dataclasses import dataclass, field
from typing import Any, List, Optional

from wktcodec.core.errors import WKTCodecException
from wktcodec.models.geometry import (
    GeometryType,
    LinearRing,
    LineString,
    MultiLineString,
    Polygon,
    MultiPolygon,
)

from .wkt_parser import WKTParser, geometry_type_of

logger = logging.getLogger(__name__)


@dataclass
class WKTValidationResult:
    """
    Result of WKT validation.

    Attributes:
        is_valid: Whether the text decodes cleanly in strict mode
        errors: List of validation errors
        warnings: List of validation warnings
        error_code: Code of the first error, if any
        geometry_type: Top-level geometry type, if recognized
        component_count: Number of top-level components
    """

    is_valid: bool = False
    errors: List[str] = field(default_factory=list)
    warnings: List[str] = field(default_factory=list)
    error_code: Optional[str] = None
    geometry_type: Optional[GeometryType] = None
    component_count: int = 0

    def add_error(self, error: str) -> None:
        """Add validation error."""
        self.errors.append(error)
        self.is_valid = False

    def add_warning(self, warning: str) -> None:
        """Add validation warning."""
        self.warnings.append(warning)


class WKTValidator:
    """
    Validates WKT text.

    Checks:
    - ``TYPE(...)`` shape and balanced parentheses
    - Supported geometry keyword
    - Numeric coordinates, two per point
    - Linestrings with at least two points (warning)
    - Closed polygon rings (warning)
    """

    def __init__(self) -> None:
        """Initialize WKT validator."""
        self._parser = WKTParser(strict=True)

    def validate(self, wkt: str) -> WKTValidationResult:
        """
        Validate WKT text.

        Args:
            wkt: WKT text

        Returns:
            WKTValidationResult with validation status and details
        """
        result = WKTValidationResult()

        if not isinstance(wkt, str) or not wkt.strip():
            result.add_error("WKT content is empty")
            return result

        result.geometry_type = geometry_type_of(wkt)

        try:
            geometry = self._parser.parse(wkt)
        except WKTCodecException as e:
            logger.debug(f"WKT validation failed: {e}")
            result.add_error(e.message)
            result.error_code = e.error_code
            return result

        if isinstance(geometry, list):
            result.component_count = len(geometry)
        else:
            result.component_count = len(getattr(geometry, "components", [geometry]))

        self._check_shapes(geometry, result)

        result.is_valid = True
        return result

    def _check_shapes(self, geometry: Any, result: WKTValidationResult) -> None:
        if isinstance(geometry, list):
            for member in geometry:
                self._check_shapes(member, result)
        elif isinstance(geometry, LinearRing):
            if not geometry.is_closed:
                result.add_warning("Polygon ring is not closed")
        elif isinstance(geometry, LineString):
            if len(geometry.components) < 2:
                result.add_warning(
                    f"LineString has {len(geometry.components)} point(s), expected at least 2"
                )
        elif isinstance(geometry, (MultiLineString, Polygon, MultiPolygon)):
            if not geometry.components:
                result.add_warning(f"{geometry.geometry_type.value} has no components")
            for component in geometry.components:
                self._check_shapes(component, result)


def validate_wkt_string(wkt: str) -> WKTValidationResult:
    """
    Convenience function to validate WKT text.

    Args:
        wkt: WKT text

    Returns:
        WKTValidationResult
    """
    validator = WKTValidator()
    return validator.validate(wkt)
