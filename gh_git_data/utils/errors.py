"""Custom exceptions for gh-git-data."""

from typing import Optional


class GitDataError(Exception):
    """Base exception for gh-git-data."""

    pass


class GitHubAPIError(GitDataError):
    """GitHub API related errors."""

    pass


class TransportError(GitHubAPIError):
    """Connection, DNS or timeout failure before a response was received."""

    pass


class ApiError(GitHubAPIError):
    """GitHub answered with a non-2xx status."""

    def __init__(
        self,
        status_code: int,
        body: str,
        method: Optional[str] = None,
        path: Optional[str] = None,
    ):
        self.status_code = status_code
        self.body = body
        self.method = method
        self.path = path
        target = f"{method} {path}: " if method and path else ""
        super().__init__(f"{target}HTTP {status_code}: {body}")


class ResponseDecodeError(GitHubAPIError):
    """Response body is not valid JSON or does not have the expected shape."""

    pass


class ValidationError(GitDataError):
    """Input validation error."""

    pass


class ParseError(ValidationError):
    """Error parsing a git reference name."""

    pass
