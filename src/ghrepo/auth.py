"""GitHub token lookup."""

import logging
import os
import subprocess

logger = logging.getLogger(__name__)

TOKEN_ENV_VARS = ("GH_TOKEN", "GITHUB_TOKEN")
GH_CLI_TIMEOUT = 5  # seconds


def token_from_env() -> str | None:
    """First non-empty token among GH_TOKEN / GITHUB_TOKEN."""
    for name in TOKEN_ENV_VARS:
        value = os.environ.get(name, "").strip()
        if value:
            logger.debug("GitHub token taken from %s", name)
            return value
    return None


def token_from_gh_cli() -> str | None:
    """Ask an authenticated `gh` for its token; None when gh is missing or logged out."""
    try:
        completed = subprocess.run(
            ["gh", "auth", "token"],
            capture_output=True,
            text=True,
            timeout=GH_CLI_TIMEOUT,
        )
    except (subprocess.TimeoutExpired, FileNotFoundError) as e:
        logger.debug("gh auth token unavailable: %s", e)
        return None
    token = completed.stdout.strip() if completed.returncode == 0 else ""
    if not token:
        logger.debug("gh is not logged in (exit %d)", completed.returncode)
        return None
    logger.debug("GitHub token taken from gh cli")
    return token


def get_token(token: str | None = None, use_gh_cli: bool = False) -> str | None:
    """
    Resolve a GitHub token for callers that do not hold one already.

    Sources in order: the explicit token, GH_TOKEN / GITHUB_TOKEN, then
    `gh auth token` when use_gh_cli is set. The first hit wins.

    Returns:
        GitHub token or None
    """
    if token:
        return token
    sources = [token_from_env]
    if use_gh_cli:
        sources.append(token_from_gh_cli)
    for source in sources:
        found = source()
        if found:
            return found
    return None
