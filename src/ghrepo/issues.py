"""Issue comment endpoints."""

from .executor import ApiCall, json_decoder, path_segment
from .models import Comment

_decode_comment = json_decoder(Comment)
_decode_comments = json_decoder(list[Comment])


def list_issue_comments(token: str, repo: str, number: int) -> ApiCall[list[Comment]]:
    """List comments on an issue or pull request (first page only)."""
    repo_path = path_segment(repo, keep_slashes=True)
    return ApiCall(
        method="GET",
        path=f"/repos/{repo_path}/issues/{int(number):d}/comments",
        token=token,
        decoder=_decode_comments,
    )


def create_issue_comment(token: str, repo: str, number: int, body: str) -> ApiCall[Comment]:
    """Comment on an issue or pull request."""
    repo_path = path_segment(repo, keep_slashes=True)
    return ApiCall(
        method="POST",
        path=f"/repos/{repo_path}/issues/{int(number):d}/comments",
        token=token,
        decoder=_decode_comment,
        body={"body": body},
    )
