"""Git references and tags API client."""

import logging
from datetime import datetime, timezone
from typing import List

from .github_client import GitHubClient
from .models import Reference, Tag
from ..parsers.ref_parser import parse_branch, parse_ref, parse_tag
from ..utils.errors import ValidationError
from ..config import HEADS_PREFIX, TAGS_PREFIX, TAG_OBJECT_TYPE

logger = logging.getLogger(__name__)

REFERENCE_URI = "/repos/{owner}/{repo}/git/refs/{ref}"
BRANCH_REFERENCE_URI = "/repos/{owner}/{repo}/git/refs/heads/{branch}"
TAG_REFERENCE_URI = "/repos/{owner}/{repo}/git/refs/tags/{tag}"
TAG_URI = "/repos/{owner}/{repo}/git/tags/{tag}"
CREATE_REFERENCE_URI = "/repos/{owner}/{repo}/git/refs"
CREATE_TAG_URI = "/repos/{owner}/{repo}/git/tags"
LIST_MATCHING_REFERENCES_URI = "/repos/{owner}/{repo}/git/matching-refs/{pattern}"

LIST_REFERENCES = List[Reference]


def _utc_now() -> datetime:
    return datetime.now(timezone.utc)


def _timestamp() -> str:
    """Current instant as ISO-8601 in UTC, e.g. 2026-10-19T12:00:00Z."""
    return _utc_now().strftime("%Y-%m-%dT%H:%M:%SZ")


def _require(**values: str) -> None:
    for name, value in values.items():
        if not value:
            raise ValidationError(f"{name} must not be empty")


class ReferenceClient:
    """Reference API client scoped to one repository."""

    def __init__(self, github: GitHubClient, owner: str, repo: str):
        """
        Initialize reference client. No requests are made.

        Args:
            github: Shared GitHub client
            owner: Repository owner
            repo: Repository name
        """
        _require(owner=owner, repo=repo)
        self._github = github
        self._owner = owner
        self._repo = repo

    @classmethod
    def create(cls, github: GitHubClient, owner: str, repo: str) -> "ReferenceClient":
        return cls(github, owner, repo)

    @property
    def owner(self) -> str:
        return self._owner

    @property
    def repo(self) -> str:
        return self._repo

    def _path(self, template: str, **params: str) -> str:
        return template.format(owner=self._owner, repo=self._repo, **params)

    async def delete_reference(self, ref: str) -> None:
        """
        Delete a git reference.

        Args:
            ref: Reference, with or without the leading ``refs/``
        """
        path = self._path(REFERENCE_URI, ref=parse_ref(ref).path)
        await self._github.delete(path)

    async def delete_branch(self, branch: str) -> None:
        """
        Delete a branch.

        Args:
            branch: Branch name, with or without ``refs/heads/``
        """
        await self.delete_reference(parse_branch(branch).path)

    async def delete_tag(self, tag: str) -> None:
        """
        Delete a tag reference.

        Args:
            tag: Tag name, with or without ``refs/tags/``
        """
        await self.delete_reference(parse_tag(tag).path)

    async def get_branch_reference(self, branch: str) -> Reference:
        """Get a branch reference."""
        _require(branch=branch)
        return await self._github.get(
            self._path(BRANCH_REFERENCE_URI, branch=branch), Reference
        )

    async def get_tag_reference(self, tag: str) -> Reference:
        """Get a tag reference."""
        _require(tag=tag)
        return await self._github.get(self._path(TAG_REFERENCE_URI, tag=tag), Reference)

    async def get_tag(self, tag: str) -> Tag:
        """Get an annotated tag object."""
        _require(tag=tag)
        return await self._github.get(self._path(TAG_URI, tag=tag), Tag)

    async def list_matching_references(self, pattern: str) -> List[Reference]:
        """
        List references whose name starts with ``pattern``.

        Args:
            pattern: Reference prefix relative to ``refs/``, e.g. ``heads/feature``

        Returns:
            References in the order GitHub returned them
        """
        _require(pattern=pattern)
        path = self._path(LIST_MATCHING_REFERENCES_URI, pattern=pattern)
        return await self._github.get(path, LIST_REFERENCES)

    async def create_reference(self, ref: str, sha: str) -> Reference:
        """
        Create a git reference.

        Args:
            ref: Fully qualified reference name, e.g. ``refs/heads/feature``
            sha: Object to point the reference at

        Returns:
            Created reference
        """
        _require(ref=ref, sha=sha)
        body = {"ref": ref, "sha": sha}
        return await self._github.post(
            self._path(CREATE_REFERENCE_URI),
            self._github.json().to_json(body),
            Reference,
        )

    async def create_branch_reference(self, branch: str, sha: str) -> Reference:
        """
        Create a branch reference. ``branch`` must not include ``refs/heads/``.

        Args:
            branch: Branch name
            sha: Commit to branch from
        """
        _require(branch=branch)
        if branch.startswith(HEADS_PREFIX):
            logger.warning("Branch %r already starts with %s", branch, HEADS_PREFIX)
        return await self.create_reference(f"{HEADS_PREFIX}{branch}", sha)

    async def create_tag_reference(self, tag: str, sha: str) -> Reference:
        """
        Create a lightweight tag reference. ``tag`` must not include ``refs/tags/``.

        Args:
            tag: Tag name
            sha: Commit to tag
        """
        _require(tag=tag)
        if tag.startswith(TAGS_PREFIX):
            logger.warning("Tag %r already starts with %s", tag, TAGS_PREFIX)
        return await self.create_reference(f"{TAGS_PREFIX}{tag}", sha)

    async def create_annotated_tag(
        self,
        tag: str,
        sha: str,
        message: str,
        tagger_name: str,
        tagger_email: str,
    ) -> Tag:
        """
        Create an annotated tag.

        The tag reference is created first; the tag object is only posted
        once that succeeds. The two calls are not atomic: if the second one
        fails, the reference is left in place and the second error is raised.

        Args:
            tag: Tag name
            sha: Commit to tag
            message: Tag message
            tagger_name: Name of the tagger
            tagger_email: Email of the tagger

        Returns:
            Created tag object
        """
        _require(
            tag=tag,
            sha=sha,
            message=message,
            tagger_name=tagger_name,
            tagger_email=tagger_email,
        )
        body = {
            "tag": tag,
            "message": message,
            "object": sha,
            "type": TAG_OBJECT_TYPE,
            "tagger": {
                "name": tagger_name,
                "email": tagger_email,
                "date": _timestamp(),
            },
        }
        await self.create_tag_reference(tag, sha)
        return await self._github.post(
            self._path(CREATE_TAG_URI), self._github.json().to_json(body), Tag
        )
