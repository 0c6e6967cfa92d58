"""
Custom exception hierarchy for wktcodec.

The codec is lenient by default and reports failure only through an empty
result. These exceptions are raised in strict mode so callers can tell the
failure kinds apart.
"""

from typing import Any, Dict, List, Optional


class WKTCodecException(Exception):
    """
    Base exception for all wktcodec errors.

    Attributes:
        error_code: String identifier for the error type
        message: User-friendly error message
        details: Technical details for logging/debugging
        suggestions: Optional list of resolution suggestions
    """

    def __init__(
        self,
        message: str,
        error_code: str,
        details: Optional[Dict[str, Any]] = None,
        suggestions: Optional[List[str]] = None,
    ):
        """
        Initialize WKTCodecException.

        Args:
            message: User-friendly error message
            error_code: String identifier for the error type
            details: Technical details for logging
            suggestions: List of suggestions for resolution
        """
        super().__init__(message)
        self.message = message
        self.error_code = error_code
        self.details = details or {}
        self.suggestions = suggestions or []

    def to_dict(self) -> Dict[str, Any]:
        """
        Convert exception to dictionary.

        Returns:
            Dictionary representation of the error
        """
        return {
            "error_code": self.error_code,
            "message": self.message,
            "details": self.details,
            "suggestions": self.suggestions,
        }

    def __str__(self) -> str:
        """String representation of the exception."""
        return f"{self.error_code}: {self.message}"

    def __repr__(self) -> str:
        """Detailed string representation for debugging."""
        return (
            f"{self.__class__.__name__}("
            f"error_code='{self.error_code}', "
            f"message='{self.message}')"
        )


class WKTSyntaxError(WKTCodecException):
    """
    Raised when text does not have the ``TYPE(BODY)`` shape.

    Also covers unbalanced parentheses inside a body.
    """

    def __init__(
        self,
        message: str,
        text: Optional[str] = None,
        position: Optional[int] = None,
        details: Optional[Dict[str, Any]] = None,
        suggestions: Optional[List[str]] = None,
    ):
        """
        Initialize WKTSyntaxError.

        Args:
            message: User-friendly error message
            text: Offending WKT text or fragment
            position: Character offset where the problem was found
            details: Technical details about the failure
            suggestions: List of suggestions for fixing the text
        """
        error_details = details or {}
        if text is not None:
            error_details["text"] = text
        if position is not None:
            error_details["position"] = position

        default_suggestions = [
            "Check that the text has the form TYPE(...)",
            "Check that parentheses are balanced",
        ]

        super().__init__(
            message=message,
            error_code="WKT_SYNTAX_ERROR",
            details=error_details,
            suggestions=suggestions or default_suggestions,
        )


class UnknownGeometryTypeError(WKTCodecException):
    """Raised when a type keyword or geometry tag is not supported."""

    def __init__(
        self,
        message: str,
        geometry_type: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None,
        suggestions: Optional[List[str]] = None,
    ):
        """
        Initialize UnknownGeometryTypeError.

        Args:
            message: User-friendly error message
            geometry_type: The unrecognized keyword or tag
            details: Technical details
            suggestions: List of suggestions for resolution
        """
        error_details = details or {}
        if geometry_type is not None:
            error_details["geometry_type"] = geometry_type

        default_suggestions = [
            "Use one of POINT, MULTIPOINT, LINESTRING, MULTILINESTRING, "
            "POLYGON, MULTIPOLYGON or GEOMETRYCOLLECTION",
        ]

        super().__init__(
            message=message,
            error_code="UNKNOWN_GEOMETRY_TYPE",
            details=error_details,
            suggestions=suggestions or default_suggestions,
        )


class CoordinateError(WKTCodecException):
    """Raised when a coordinate token is missing or not a number."""

    def __init__(
        self,
        message: str,
        token: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None,
        suggestions: Optional[List[str]] = None,
    ):
        """
        Initialize CoordinateError.

        Args:
            message: User-friendly error message
            token: The token that failed to parse
            details: Technical details
            suggestions: List of suggestions for resolution
        """
        error_details = details or {}
        if token is not None:
            error_details["token"] = token

        super().__init__(
            message=message,
            error_code="COORDINATE_ERROR",
            details=error_details,
            suggestions=suggestions
            or ["Each coordinate must be two numbers separated by whitespace"],
        )


class ConfigurationError(WKTCodecException):
    """
    Raised when codec configuration is invalid.

    Used for invalid environment variables or settings values.
    """

    def __init__(
        self,
        message: str,
        config_key: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None,
        suggestions: Optional[List[str]] = None,
    ):
        """
        Initialize ConfigurationError.

        Args:
            message: User-friendly error message
            config_key: Configuration key that is invalid
            details: Technical details about the configuration error
            suggestions: List of suggestions for resolution
        """
        error_details = details or {}
        if config_key:
            error_details["config_key"] = config_key

        default_suggestions = [
            "Check WKTCODEC_* environment variables are set correctly",
            "Verify .env file syntax",
        ]

        super().__init__(
            message=message,
            error_code="CONFIGURATION_ERROR",
            details=error_details,
            suggestions=suggestions or default_suggestions,
        )
