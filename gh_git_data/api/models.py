"""Data models for git references and tags."""

from dataclasses import dataclass
from typing import Any, Dict, Optional

from ..parsers.ref_parser import RefKind, parse_ref
from ..utils.errors import ResponseDecodeError


def _require_mapping(data: Any, record: str) -> Dict[str, Any]:
    if not isinstance(data, dict):
        raise ResponseDecodeError(
            f"Expected a JSON object for {record}, got {type(data).__name__}"
        )
    return data


@dataclass(frozen=True)
class GitObject:
    """Object a reference or tag points at."""

    type: str
    sha: str
    url: Optional[str] = None

    @classmethod
    def from_api_response(cls, data: Dict[str, Any]) -> "GitObject":
        """Create from GitHub API response."""
        data = _require_mapping(data, "git object")
        try:
            return cls(type=data["type"], sha=data["sha"], url=data.get("url"))
        except KeyError as e:
            raise ResponseDecodeError(f"Git object is missing field {e}")


@dataclass(frozen=True)
class Reference:
    """A named pointer, such as a branch or tag ref, to a git object."""

    ref: str
    object: GitObject
    url: Optional[str] = None
    node_id: Optional[str] = None

    @property
    def sha(self) -> str:
        """SHA of the target object."""
        return self.object.sha

    @property
    def object_type(self) -> str:
        """Type of the target object (commit, tag, ...)."""
        return self.object.type

    @property
    def kind(self) -> RefKind:
        """Namespace of the reference."""
        return parse_ref(self.ref).kind

    @property
    def short_name(self) -> str:
        """Name without the ``refs/<namespace>/`` prefix."""
        return parse_ref(self.ref).name

    @classmethod
    def from_api_response(cls, data: Dict[str, Any]) -> "Reference":
        """Create from GitHub API response."""
        data = _require_mapping(data, "reference")
        try:
            ref = data["ref"]
            target = data["object"]
        except KeyError as e:
            raise ResponseDecodeError(f"Reference is missing field {e}")
        return cls(
            ref=ref,
            object=GitObject.from_api_response(target),
            url=data.get("url"),
            node_id=data.get("node_id"),
        )


@dataclass(frozen=True)
class Tagger:
    """Identity recorded on an annotated tag."""

    name: str
    email: str
    date: str

    @classmethod
    def from_api_response(cls, data: Dict[str, Any]) -> "Tagger":
        """Create from GitHub API response."""
        data = _require_mapping(data, "tagger")
        return cls(
            name=data.get("name", ""),
            email=data.get("email", ""),
            date=data.get("date", ""),
        )

    def to_dict(self) -> Dict[str, str]:
        """Convert to the request body shape."""
        return {"name": self.name, "email": self.email, "date": self.date}


@dataclass(frozen=True)
class Tag:
    """An annotated tag object."""

    tag: str
    sha: str
    message: str
    tagger: Tagger
    object: GitObject
    url: Optional[str] = None
    node_id: Optional[str] = None
    verified: Optional[bool] = None

    @classmethod
    def from_api_response(cls, data: Dict[str, Any]) -> "Tag":
        """Create from GitHub API response."""
        data = _require_mapping(data, "tag")
        try:
            tag = data["tag"]
            sha = data["sha"]
            target = data["object"]
        except KeyError as e:
            raise ResponseDecodeError(f"Tag is missing field {e}")

        verification = data.get("verification")
        return cls(
            tag=tag,
            sha=sha,
            message=data.get("message", ""),
            tagger=Tagger.from_api_response(data.get("tagger") or {}),
            object=GitObject.from_api_response(target),
            url=data.get("url"),
            node_id=data.get("node_id"),
            verified=verification.get("verified") if isinstance(verification, dict) else None,
        )

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary."""
        return {
            "tag": self.tag,
            "sha": self.sha,
            "message": self.message,
            "object": self.object.sha,
            "type": self.object.type,
            "tagger": self.tagger.to_dict(),
            "verified": self.verified,
        }
