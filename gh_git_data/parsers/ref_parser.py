"""Parse git reference names into a kind and a short name.

GitHub accepts reference names in several spellings: fully qualified
(``refs/heads/main``), relative to ``refs/`` (``heads/main``) or, for the
branch and tag helpers, bare (``main``). Parsing them into a structured
:class:`RefName` keeps prefix handling in one place.
"""

from dataclasses import dataclass
from enum import Enum

from ..config import REFS_PREFIX, HEADS_PREFIX, TAGS_PREFIX
from ..utils.errors import ParseError


class RefKind(Enum):
    """Namespace a reference lives in."""

    BRANCH = "heads"
    TAG = "tags"
    OTHER = "other"


_KIND_BY_NAMESPACE = {
    RefKind.BRANCH.value: RefKind.BRANCH,
    RefKind.TAG.value: RefKind.TAG,
}


@dataclass(frozen=True)
class RefName:
    """A reference split into its namespace and short name."""

    kind: RefKind
    name: str
    namespace: str = ""

    @property
    def path(self) -> str:
        """Reference relative to ``refs/``, as used in API paths."""
        if self.namespace:
            return f"{self.namespace}/{self.name}"
        return self.name

    @property
    def qualified(self) -> str:
        """Fully qualified reference, e.g. ``refs/heads/main``."""
        return f"{REFS_PREFIX}{self.path}"


def _require(value: str) -> None:
    if not value:
        raise ParseError("Reference name must not be empty")


def parse_ref(value: str) -> RefName:
    """
    Parse a reference given with or without the leading ``refs/``.

    Args:
        value: Reference such as ``refs/heads/main``, ``tags/v1`` or
            ``pull/12/head``

    Returns:
        Parsed reference name
    """
    _require(value)
    remainder = value[len(REFS_PREFIX):] if value.startswith(REFS_PREFIX) else value
    if not remainder:
        raise ParseError(f"Reference name has nothing after the prefix: {value!r}")

    namespace, sep, name = remainder.partition("/")
    if not sep or not name:
        return RefName(RefKind.OTHER, remainder)
    return RefName(_KIND_BY_NAMESPACE.get(namespace, RefKind.OTHER), name, namespace)


def parse_branch(value: str) -> RefName:
    """Parse a branch name, dropping a leading ``refs/heads/`` if present."""
    _require(value)
    name = value[len(HEADS_PREFIX):] if value.startswith(HEADS_PREFIX) else value
    if not name:
        raise ParseError(f"Branch name has nothing after the prefix: {value!r}")
    return RefName(RefKind.BRANCH, name, RefKind.BRANCH.value)


def parse_tag(value: str) -> RefName:
    """Parse a tag name, dropping a leading ``refs/tags/`` if present."""
    _require(value)
    name = value[len(TAGS_PREFIX):] if value.startswith(TAGS_PREFIX) else value
    if not name:
        raise ParseError(f"Tag name has nothing after the prefix: {value!r}")
    return RefName(RefKind.TAG, name, RefKind.TAG.value)
