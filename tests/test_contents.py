"""File contents operations."""

import base64

from ghrepo import FileContents, Ok, get_file_contents, update_file_contents


class TestGetFileContents:
    def test_content_is_returned_still_encoded(self, github, executor):
        encoded = "aGVsbG8gd29ybGQK\n"
        github.respond({
            "type": "file",
            "encoding": "base64",
            "content": encoded,
            "sha": "blob1",
            "path": "README.md",
        })

        result = get_file_contents(token="t", repo="o/r", path="README.md", ref="main").run(executor)

        assert result == Ok(FileContents(encoding="base64", content=encoded, sha="blob1"))

    def test_ref_is_a_query_parameter(self, github, executor):
        github.respond({"encoding": "base64", "content": "", "sha": "blob1"})

        get_file_contents("t", "o/r", "docs/guide.md", "release/1.0").run(executor)

        assert github.last.url.path == "/repos/o/r/contents/docs/guide.md"
        assert github.last.url.params["ref"] == "release/1.0"

    def test_other_encodings_pass_through(self, github, executor):
        github.respond({"encoding": "none", "content": "", "sha": "big"})
        result = get_file_contents("t", "o/r", "huge.bin", "main").run(executor)
        assert result.unwrap().encoding == "none"

    def test_path_is_percent_encoded(self, github, executor):
        github.respond({"encoding": "base64", "content": "", "sha": "blob1"})
        get_file_contents("t", "o/r", "my notes/#1.md", "main").run(executor)
        assert github.last.url.raw_path == b"/repos/o/r/contents/my%20notes/%231.md?ref=main"


class TestUpdateFileContents:
    def test_content_is_base64_encoded(self, github, executor):
        github.respond({"content": {"sha": "blob2", "path": "README.md"}, "commit": {"sha": "c2"}})

        call = update_file_contents(
            token="t",
            repo="o/r",
            path="README.md",
            sha="blob1",
            message="Update readme",
            content="héllo\n",
            branch="topic",
        )
        result = call.run(executor)

        assert result.unwrap().content.sha == "blob2"
        assert github.last.method == "PUT"
        assert github.last.url.path == "/repos/o/r/contents/README.md"
        sent = github.last_json()
        assert sent == {
            "message": "Update readme",
            "content": base64.b64encode("héllo\n".encode("utf-8")).decode("ascii"),
            "sha": "blob1",
            "branch": "topic",
        }
        assert base64.b64decode(sent["content"]).decode("utf-8") == "héllo\n"

    def test_bytes_are_encoded_verbatim(self, github, executor):
        raw = bytes(range(256))
        github.respond({"content": {"sha": "blob2"}})

        update_file_contents("t", "o/r", "data.bin", "blob1", "m", raw, "main").run(executor)

        assert base64.b64decode(github.last_json()["content"]) == raw

    def test_stale_sha_conflict(self, github, executor):
        github.respond({"message": "does not match"}, status_code=409)
        result = update_file_contents("t", "o/r", "a.txt", "old", "m", "x", "main").run(executor)
        assert result.error.status_code == 409
