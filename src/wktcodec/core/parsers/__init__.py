"""
WKT parsing module for wktcodec.

This module decodes Well-Known Text into the geometry model and validates
WKT text without raising.
"""

from .scanner import (
    MAX_NESTING_DEPTH,
    nesting_depth,
    split_top_level,
    strip_parens,
)
from .wkt_parser import WKTParser, decode, geometry_type_of
from .wkt_validator import WKTValidationResult, WKTValidator, validate_wkt_string

__all__ = [
    # Scanning
    "split_top_level",
    "strip_parens",
    "nesting_depth",
    "MAX_NESTING_DEPTH",
    # Decoding
    "WKTParser",
    "decode",
    "geometry_type_of",
    # Validation
    "WKTValidator",
    "WKTValidationResult",
    "validate_wkt_string",
]
