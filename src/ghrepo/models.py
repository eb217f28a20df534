"""GitHub API data models."""

import re
from datetime import datetime
from typing import Annotated, Any

from pydantic import BaseModel, BeforeValidator, ConfigDict

_ISO_DATETIME = re.compile(r"\d{4}-\d{2}-\d{2}T\d{2}:\d{2}")


def _require_iso_datetime(value: Any) -> Any:
    # pydantic would otherwise accept unix timestamps, as numbers or digit strings
    if not isinstance(value, str) or not _ISO_DATETIME.match(value):
        raise ValueError("expected an ISO 8601 date-time string")
    return value


Timestamp = Annotated[datetime, BeforeValidator(_require_iso_datetime)]


class GitHubModel(BaseModel):
    """Immutable response shape; unknown wire fields are ignored."""

    model_config = ConfigDict(frozen=True, extra="ignore")


class GitObject(GitHubModel):
    """Any git object identified by its sha (commit, tree or blob)."""

    sha: str


class BranchRef(GitHubModel):
    """Branch head reference."""

    object: GitObject


class Commit(GitHubModel):
    """Git commit with its root tree."""

    sha: str
    tree: GitObject


class CreatedCommit(GitHubModel):
    """Newly created commit."""

    sha: str


class PullRequestSummary(GitHubModel):
    """Pull request as listed."""

    number: int
    title: str


class PullRequestHead(GitHubModel):
    ref: str
    sha: str


class PullRequestDetail(GitHubModel):
    """Single pull request, head branch only."""

    head: PullRequestHead


class FileContents(GitHubModel):
    """File as returned by the contents API, still encoded."""

    encoding: str
    content: str  # encoded per `encoding`, usually base64
    sha: str  # blob sha


class UpdatedFile(GitHubModel):
    """Result of a contents update; `content.sha` is the new blob sha."""

    content: GitObject


class CommentUser(GitHubModel):
    login: str
    avatar_url: str


class Comment(GitHubModel):
    """Issue or pull request conversation comment."""

    body: str
    user: CommentUser
    created_at: Timestamp
    updated_at: Timestamp
