"""Typed client for GitHub branches, commits, pull requests, contents and comments."""

from .auth import get_token
from .contents import get_file_contents, update_file_contents
from .errors import DecodeError, Err, GitHubError, Ok, Result, TransportError
from .executor import GITHUB_API_URL, ApiCall, AsyncRequestExecutor, RequestExecutor
from .git import create_branch, create_commit, get_branch, get_commit
from .issues import create_issue_comment, list_issue_comments
from .models import (
    BranchRef,
    Comment,
    CommentUser,
    Commit,
    CreatedCommit,
    FileContents,
    GitObject,
    PullRequestDetail,
    PullRequestHead,
    PullRequestSummary,
    UpdatedFile,
)
from .pulls import create_pull_request, get_pull_request, list_pull_requests

__all__ = [
    "GITHUB_API_URL",
    "ApiCall",
    "RequestExecutor",
    "AsyncRequestExecutor",
    "GitHubError",
    "TransportError",
    "DecodeError",
    "Ok",
    "Err",
    "Result",
    "BranchRef",
    "Comment",
    "CommentUser",
    "Commit",
    "CreatedCommit",
    "FileContents",
    "GitObject",
    "PullRequestDetail",
    "PullRequestHead",
    "PullRequestSummary",
    "UpdatedFile",
    "get_branch",
    "create_branch",
    "get_commit",
    "create_commit",
    "list_pull_requests",
    "get_pull_request",
    "create_pull_request",
    "get_file_contents",
    "update_file_contents",
    "list_issue_comments",
    "create_issue_comment",
    "get_token",
]
