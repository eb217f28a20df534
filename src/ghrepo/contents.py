"""Repository contents endpoints."""

import base64

from .executor import ApiCall, json_decoder, path_segment
from .models import FileContents, UpdatedFile

_decode_file = json_decoder(FileContents)
_decode_updated = json_decoder(UpdatedFile)


def get_file_contents(token: str, repo: str, path: str, ref: str) -> ApiCall[FileContents]:
    """
    Get a file at a given ref.

    The content is returned exactly as GitHub sends it; check `encoding`
    before decoding it.

    Args:
        token: GitHub token
        repo: Repository as owner/name
        path: File path in repository
        ref: Branch/tag/commit

    Returns:
        Call resolving to the encoded file contents
    """
    repo_path = path_segment(repo, keep_slashes=True)
    file_path = path_segment(path, keep_slashes=True)
    return ApiCall(
        method="GET",
        path=f"/repos/{repo_path}/contents/{file_path}",
        token=token,
        decoder=_decode_file,
        params={"ref": ref},
    )


def update_file_contents(
    token: str,
    repo: str,
    path: str,
    sha: str,
    message: str,
    content: str | bytes,
    branch: str,
) -> ApiCall[UpdatedFile]:
    """
    Replace a file on a branch with new content.

    Args:
        token: GitHub token
        repo: Repository as owner/name
        path: File path in repository
        sha: Blob sha of the version being replaced
        message: Commit message
        content: Raw new content (str is encoded as UTF-8)
        branch: Branch to commit to

    Returns:
        Call resolving to the new blob sha
    """
    raw = content.encode("utf-8") if isinstance(content, str) else content
    repo_path = path_segment(repo, keep_slashes=True)
    file_path = path_segment(path, keep_slashes=True)
    return ApiCall(
        method="PUT",
        path=f"/repos/{repo_path}/contents/{file_path}",
        token=token,
        decoder=_decode_updated,
        body={
            "message": message,
            "content": base64.b64encode(raw).decode("ascii"),
            "sha": sha,
            "branch": branch,
        },
    )
