"""Custom exceptions for xmltransforms."""


class TransformError(Exception):
    """Base exception for all xmltransforms errors."""

    pass


# Input errors
class ParseError(TransformError):
    """Raised when input text is not well-formed XML."""

    pass


class StructureError(TransformError):
    """
    Raised when a well-formed document lacks a required element or attribute.

    Also covers attribute values that cannot be read as the expected type
    (e.g. a channel ``id`` that is not an integer).
    """

    pass


class FormatError(TransformError):
    """Raised when a CSV line does not have the expected number of fields."""

    pass


# Configuration errors
class ConfigError(TransformError):
    """Raised when configuration is invalid or cannot be loaded."""

    pass


# The single "malformed input" category callers usually want to catch.
MalformedInputError = (ParseError, StructureError, FormatError)


__all__ = [
    "TransformError",
    "ParseError",
    "StructureError",
    "FormatError",
    "ConfigError",
    "MalformedInputError",
]
