"""Branch ref and commit operations."""

from ghrepo import (
    BranchRef,
    Commit,
    CreatedCommit,
    GitObject,
    Ok,
    create_branch,
    create_commit,
    get_branch,
    get_commit,
)


class TestGetBranch:
    def test_decodes_head_sha(self, github, executor):
        github.respond({"ref": "refs/heads/main", "object": {"sha": "abc123", "type": "commit"}})

        result = get_branch(token="t", repo="o/r", branch_name="main").run(executor)

        assert result == Ok(BranchRef(object=GitObject(sha="abc123")))
        assert github.last.method == "GET"
        assert str(github.last.url) == "https://api.github.com/repos/o/r/git/refs/heads/main"

    def test_nested_branch_name(self, github, executor):
        github.respond({"object": {"sha": "abc123"}})
        get_branch("t", "o/r", "feature/login form").run(executor)
        assert github.last.url.raw_path == b"/repos/o/r/git/refs/heads/feature/login%20form"


class TestCreateBranch:
    def test_posts_full_ref(self, github, executor):
        github.respond({"ref": "refs/heads/topic", "object": {"sha": "abc"}}, status_code=201)

        result = create_branch(token="t", repo="o/r", branch_name="topic", sha="abc").run(executor)

        assert result == Ok(None)
        assert github.last.method == "POST"
        assert str(github.last.url) == "https://api.github.com/repos/o/r/git/refs"
        assert github.last_json() == {"ref": "refs/heads/topic", "sha": "abc"}

    def test_existing_branch_fails(self, github, executor):
        github.respond({"message": "Reference already exists"}, status_code=422)
        result = create_branch("t", "o/r", "topic", "abc").run(executor)
        assert not result.is_ok()
        assert result.error.status_code == 422


class TestCommits:
    def test_get_commit(self, github, executor):
        github.respond({"sha": "c1", "tree": {"sha": "t1", "url": "..."}, "message": "m"})

        result = get_commit(token="t", repo="o/r", sha="c1").run(executor)

        assert result.unwrap() == Commit(sha="c1", tree=GitObject(sha="t1"))
        assert str(github.last.url) == "https://api.github.com/repos/o/r/git/commits/c1"

    def test_create_commit(self, github, executor):
        github.respond({"sha": "C1", "tree": {"sha": "T1"}}, status_code=201)

        call = create_commit(token="t", repo="o/r", message="m", tree="T1", parents=["P1"])
        result = call.run(executor)

        assert result == Ok(CreatedCommit(sha="C1"))
        assert github.last.method == "POST"
        assert str(github.last.url) == "https://api.github.com/repos/o/r/git/commits"
        assert github.last_json() == {"message": "m", "tree": "T1", "parents": ["P1"]}

    def test_root_commit_has_no_parents(self, github, executor):
        github.respond({"sha": "C0"})
        create_commit("t", "o/r", "initial", "T0", []).run(executor)
        assert github.last_json()["parents"] == []
