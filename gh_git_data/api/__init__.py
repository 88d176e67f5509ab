"""GitHub API client module."""

from .github_client import GitHubClient
from .json_codec import JsonCodec
from .models import GitObject, Reference, Tag, Tagger
from .rate_limiter import RateLimiter
from .reference_client import ReferenceClient

__all__ = [
    "GitHubClient",
    "JsonCodec",
    "GitObject",
    "Reference",
    "Tag",
    "Tagger",
    "RateLimiter",
    "ReferenceClient",
]
