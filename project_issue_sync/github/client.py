# This file is intended to hold the setup for the authenticated githubkit client.

"""Sets up the authenticated githubkit client."""

from typing import TypeAlias

from githubkit import GitHub
from githubkit.auth import TokenAuthStrategy

GitHubClient: TypeAlias = GitHub[TokenAuthStrategy]


async def get_github_client(github_auth_token: str, github_api_url: str) -> GitHubClient:
    """Returns an authenticated GitHub client using a token with project write access.

    Supports custom base URL for GitHub Enterprise Server (GHES).
    Raises RuntimeError if no token is given.
    """
    if not github_auth_token:
        raise RuntimeError("GitHub authentication requires github_auth_token in config.")
    # Disable HTTP caching so the state gist is always read fresh
    return GitHub(auth=TokenAuthStrategy(github_auth_token), base_url=github_api_url, http_cache=False)
