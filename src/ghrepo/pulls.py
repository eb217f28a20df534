"""Pull request endpoints."""

from .executor import ApiCall, discard_body, json_decoder, path_segment
from .models import PullRequestDetail, PullRequestSummary

_decode_summaries = json_decoder(list[PullRequestSummary])
_decode_detail = json_decoder(PullRequestDetail)


def list_pull_requests(token: str, repo: str) -> ApiCall[list[PullRequestSummary]]:
    """List pull requests (first page only, GitHub's default filters)."""
    repo_path = path_segment(repo, keep_slashes=True)
    return ApiCall(
        method="GET",
        path=f"/repos/{repo_path}/pulls",
        token=token,
        decoder=_decode_summaries,
    )


def get_pull_request(token: str, repo: str, number: int) -> ApiCall[PullRequestDetail]:
    """Get the head branch of a pull request."""
    repo_path = path_segment(repo, keep_slashes=True)
    return ApiCall(
        method="GET",
        path=f"/repos/{repo_path}/pulls/{int(number):d}",
        token=token,
        decoder=_decode_detail,
    )


def create_pull_request(
    token: str,
    repo: str,
    title: str,
    branch: str,
    base_branch: str,
    description: str,
) -> ApiCall[None]:
    """
    Open a pull request.

    Args:
        token: GitHub token
        repo: Repository as owner/name
        title: Pull request title
        branch: Head branch with the changes
        base_branch: Branch to merge into
        description: Pull request body

    Returns:
        Call resolving to None on success
    """
    repo_path = path_segment(repo, keep_slashes=True)
    return ApiCall(
        method="POST",
        path=f"/repos/{repo_path}/pulls",
        token=token,
        decoder=discard_body,
        body={"title": title, "head": branch, "base": base_branch, "body": description},
    )
