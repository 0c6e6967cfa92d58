"""
WKT export module for wktcodec.
"""

from .wkt_writer import WKTWriter, encode, format_number

__all__ = ["WKTWriter", "encode", "format_number"]
