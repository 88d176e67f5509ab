"""Shared fixtures: a fake GitHub backed by httpx.MockTransport."""

import json
from typing import Any, Callable, Dict, List, Optional, Tuple

import httpx
import pytest

from gh_git_data.api.github_client import GitHubClient
from gh_git_data.api.rate_limiter import RateLimiter
from gh_git_data.api.reference_client import ReferenceClient

OWNER = "octocat"
REPO = "hello-world"
SHA = "aa218f56b14c9653891f9e74264a383fa43fefbd"


def reference_payload(ref: str, sha: str = SHA, object_type: str = "commit") -> Dict[str, Any]:
    return {
        "ref": ref,
        "node_id": "MDM6UmVmcmVmcy9oZWFkcy9mZWF0dXJlQQ==",
        "url": f"https://api.github.com/repos/{OWNER}/{REPO}/git/{ref}",
        "object": {
            "type": object_type,
            "sha": sha,
            "url": f"https://api.github.com/repos/{OWNER}/{REPO}/git/commits/{sha}",
        },
    }


def tag_payload(tag: str = "v0.0.1", sha: str = SHA) -> Dict[str, Any]:
    return {
        "node_id": "MDM6VGFnOTQwYmQzMzYyNDhlZmFlMGY5ZWU1YmM3YjJkNWM5ODU4ODdiMTZhYw==",
        "tag": tag,
        "sha": "940bd336248efae0f9ee5bc7b2d5c985887b16ac",
        "url": f"https://api.github.com/repos/{OWNER}/{REPO}/git/tags/940bd336248efae0f9ee5bc7b2d5c985887b16ac",
        "message": "initial version",
        "tagger": {
            "name": "Monalisa Octocat",
            "email": "octocat@github.com",
            "date": "2014-11-07T22:01:45Z",
        },
        "object": {
            "type": "commit",
            "sha": sha,
            "url": f"https://api.github.com/repos/{OWNER}/{REPO}/git/commits/{sha}",
        },
        "verification": {"verified": False, "reason": "unsigned"},
    }


class FakeGitHub:
    """Routes requests by (method, path) and records everything it receives."""

    def __init__(self):
        self.routes: Dict[Tuple[str, str], Callable[[httpx.Request], httpx.Response]] = {}
        self.requests: List[httpx.Request] = []

    def add(
        self,
        method: str,
        path: str,
        status_code: int = 200,
        payload: Optional[Any] = None,
        text: Optional[str] = None,
    ) -> None:
        def respond(request: httpx.Request) -> httpx.Response:
            if payload is not None:
                return httpx.Response(status_code, json=payload)
            return httpx.Response(status_code, text=text or "")

        self.routes[(method, path)] = respond

    def add_handler(
        self, method: str, path: str, handler: Callable[[httpx.Request], httpx.Response]
    ) -> None:
        self.routes[(method, path)] = handler

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        route = self.routes.get((request.method, request.url.path))
        if route is None:
            return httpx.Response(404, json={"message": "Not Found"})
        return route(request)

    def calls(self) -> List[Tuple[str, str]]:
        return [(r.method, r.url.path) for r in self.requests]

    def body(self, index: int) -> Any:
        return json.loads(self.requests[index].content)


@pytest.fixture
def fake_github() -> FakeGitHub:
    return FakeGitHub()


@pytest.fixture
def github(fake_github: FakeGitHub) -> GitHubClient:
    return GitHubClient(
        token="test-token",
        base_url="https://api.github.com",
        rate_limiter=RateLimiter(calls_per_second=10_000),
        transport=httpx.MockTransport(fake_github),
    )


@pytest.fixture
def client(github: GitHubClient) -> ReferenceClient:
    return ReferenceClient(github, OWNER, REPO)
