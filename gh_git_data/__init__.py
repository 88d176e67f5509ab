"""Typed async client for GitHub's git references and tags API."""

from .api import GitHubClient, Reference, ReferenceClient, Tag, Tagger, GitObject
from .utils.errors import (
    GitDataError,
    GitHubAPIError,
    ApiError,
    TransportError,
    ValidationError,
)

__version__ = "0.1.0"

__all__ = [
    "GitHubClient",
    "ReferenceClient",
    "Reference",
    "Tag",
    "Tagger",
    "GitObject",
    "GitDataError",
    "GitHubAPIError",
    "ApiError",
    "TransportError",
    "ValidationError",
]
