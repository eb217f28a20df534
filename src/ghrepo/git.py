"""Git data endpoints: branch refs and commits."""

from .executor import ApiCall, discard_body, json_decoder, path_segment
from .models import BranchRef, Commit, CreatedCommit

_decode_branch = json_decoder(BranchRef)
_decode_commit = json_decoder(Commit)
_decode_created_commit = json_decoder(CreatedCommit)


def get_branch(token: str, repo: str, branch_name: str) -> ApiCall[BranchRef]:
    """
    Get the head ref of a branch.

    Args:
        token: GitHub token
        repo: Repository as owner/name
        branch_name: Branch name, without refs/heads/

    Returns:
        Call resolving to the branch ref
    """
    repo_path = path_segment(repo, keep_slashes=True)
    branch = path_segment(branch_name, keep_slashes=True)
    return ApiCall(
        method="GET",
        path=f"/repos/{repo_path}/git/refs/heads/{branch}",
        token=token,
        decoder=_decode_branch,
    )


def create_branch(token: str, repo: str, branch_name: str, sha: str) -> ApiCall[None]:
    """
    Create a branch pointing at a commit.

    Args:
        token: GitHub token
        repo: Repository as owner/name
        branch_name: New branch name, without refs/heads/
        sha: Commit the branch starts from

    Returns:
        Call resolving to None on success
    """
    repo_path = path_segment(repo, keep_slashes=True)
    return ApiCall(
        method="POST",
        path=f"/repos/{repo_path}/git/refs",
        token=token,
        decoder=discard_body,
        body={"ref": f"refs/heads/{branch_name}", "sha": sha},
    )


def get_commit(token: str, repo: str, sha: str) -> ApiCall[Commit]:
    """Get a git commit by sha."""
    repo_path = path_segment(repo, keep_slashes=True)
    return ApiCall(
        method="GET",
        path=f"/repos/{repo_path}/git/commits/{path_segment(sha)}",
        token=token,
        decoder=_decode_commit,
    )


def create_commit(
    token: str, repo: str, message: str, tree: str, parents: list[str]
) -> ApiCall[CreatedCommit]:
    """
    Create a commit object from an existing tree.

    The commit is not attached to any branch; move a ref to it separately.

    Args:
        token: GitHub token
        repo: Repository as owner/name
        message: Commit message
        tree: Sha of the tree the commit snapshots
        parents: Parent commit shas, empty for a root commit

    Returns:
        Call resolving to the created commit sha
    """
    repo_path = path_segment(repo, keep_slashes=True)
    return ApiCall(
        method="POST",
        path=f"/repos/{repo_path}/git/commits",
        token=token,
        decoder=_decode_created_commit,
        body={"message": message, "tree": tree, "parents": list(parents)},
    )
