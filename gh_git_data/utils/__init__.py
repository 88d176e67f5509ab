"""Utility modules."""

from .errors import (
    GitDataError,
    GitHubAPIError,
    TransportError,
    ApiError,
    ResponseDecodeError,
    ParseError,
    ValidationError,
)

__all__ = [
    "GitDataError",
    "GitHubAPIError",
    "TransportError",
    "ApiError",
    "ResponseDecodeError",
    "ParseError",
    "ValidationError",
]
