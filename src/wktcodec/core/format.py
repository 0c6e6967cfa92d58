"""
Read/write facade over the WKT parser and writer.
"""

from typing import Any, Optional

from wktcodec.core.config import resolve_strict
from wktcodec.core.export.wkt_writer import WKTWriter
from wktcodec.core.parsers.wkt_parser import DecodeResult, WKTParser


class WKTFormat:
    """
    Read and write WKT with one set of options.

    Usage:
        fmt = WKTFormat(strict=True)
        geometry = fmt.read("POLYGON((0 0,1 0,1 1,0 0))")
        text = fmt.write(geometry)

    Instances keep no state between calls and can be shared.
    """

    def __init__(self, strict: Optional[bool] = None) -> None:
        """
        Initialize WKT format.

        Args:
            strict: Raise typed errors instead of returning None/NaN
        """
        self.strict = resolve_strict(strict)
        self._parser = WKTParser(strict=self.strict)
        self._writer = WKTWriter(strict=self.strict)

    def read(self, wkt: str) -> DecodeResult:
        """
        Deserialize WKT text.

        Args:
            wkt: WKT text

        Returns:
            A geometry, or a list of geometries for GEOMETRYCOLLECTION WKT,
            or None
        """
        return self._parser.parse(wkt)

    def write(self, geometry: Any) -> Optional[str]:
        """
        Serialize a geometry or a list of geometries.

        Args:
            geometry: A geometry or a list of geometries

        Returns:
            WKT text, or None
        """
        return self._writer.write(geometry)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(strict={self.strict})"
