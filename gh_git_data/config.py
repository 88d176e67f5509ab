"""Configuration constants."""

import os
from typing import Optional

# API configuration
GITHUB_API_URL = "https://api.github.com"
GITHUB_API_VERSION = "2022-11-28"
GITHUB_MEDIA_TYPE = "application/vnd.github+json"
USER_AGENT = "gh-git-data/0.1.0"
DEFAULT_TIMEOUT_SECONDS = 30.0
DEFAULT_API_RATE_LIMIT = 10  # calls per second

# Environment
TOKEN_ENV_VARS = ["GH_GIT_DATA_TOKEN", "GITHUB_TOKEN"]
BASE_URL_ENV_VAR = "GH_GIT_DATA_API_URL"

# Reference prefixes
REFS_PREFIX = "refs/"
HEADS_PREFIX = "refs/heads/"
TAGS_PREFIX = "refs/tags/"

# Annotated tags always point at commits
TAG_OBJECT_TYPE = "commit"


def get_token() -> Optional[str]:
    """Return the first GitHub token found in the environment."""
    for name in TOKEN_ENV_VARS:
        token = os.environ.get(name)
        if token:
            return token
    return None


def get_base_url() -> str:
    """Return the API base URL, honouring the environment override."""
    return os.environ.get(BASE_URL_ENV_VAR) or GITHUB_API_URL
