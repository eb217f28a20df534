"""CLI for the GitHub repository client."""

import logging
import sys
from pathlib import Path
from typing import Any, Callable

import click
from dotenv import find_dotenv, load_dotenv
from pydantic import TypeAdapter

from .auth import get_token
from .contents import get_file_contents, update_file_contents
from .executor import ApiCall, RequestExecutor
from .git import create_branch, create_commit, get_branch, get_commit
from .issues import create_issue_comment, list_issue_comments
from .pulls import create_pull_request, get_pull_request, list_pull_requests

logger = logging.getLogger(__name__)

_any = TypeAdapter(Any)


LOG_LEVELS = (logging.WARNING, logging.INFO, logging.DEBUG)


def configure_logging(verbose: int) -> None:
    """Log to stderr; -v for INFO, -vv for DEBUG including httpx request lines."""
    logging.basicConfig(
        level=LOG_LEVELS[min(verbose, len(LOG_LEVELS) - 1)],
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )
    if verbose < 2:
        logging.getLogger("httpx").setLevel(logging.WARNING)


def resolve_token(ctx: click.Context, param: click.Parameter, value: str | None) -> str | None:
    """Option callback: fall back to .env, the environment and gh cli."""
    load_dotenv(find_dotenv(usecwd=True))
    return get_token(value, use_gh_cli=ctx.params.get("use_gh_cli", False))


def require_token(ctx: click.Context) -> str:
    token = ctx.obj.get("token")
    if not token:
        raise click.UsageError("GitHub token required (--token, GH_TOKEN or GITHUB_TOKEN)")
    return token


def run_call(ctx: click.Context, operation: Callable[..., ApiCall], *args: Any) -> None:
    """Build the call with the resolved token, run it and print the result as JSON."""
    try:
        call = operation(require_token(ctx), *args)
    except ValueError as e:
        raise click.UsageError(str(e)) from e
    result = call.run(ctx.obj["executor"])
    if not result.is_ok():
        raise click.ClickException(str(result.error))
    if result.value is None:
        click.echo("ok")
        return
    click.echo(_any.dump_json(result.value, indent=2).decode("utf-8"))


# ============ CLI Group ============

@click.group()
@click.option("--use-gh-cli", is_flag=True, is_eager=True, help="Fall back to gh cli credentials")
@click.option("--token", envvar="GITHUB_TOKEN", callback=resolve_token, help="GitHub token")
@click.option("--base-url", default=None, help="GitHub API base URL")
@click.option("-v", "--verbose", count=True, help="Verbosity (-v, -vv)")
@click.pass_context
def cli(ctx: click.Context, use_gh_cli: bool, token: str | None, base_url: str | None, verbose: int) -> None:
    """Manage branches, commits, pull requests, files and comments on GitHub."""
    configure_logging(verbose)
    ctx.ensure_object(dict)
    ctx.obj["token"] = token
    if "executor" not in ctx.obj:
        ctx.obj["executor"] = RequestExecutor(base_url=base_url)


# ============ Branches & Commits ============

@cli.group()
def branch():
    """Branch refs."""


@branch.command("get")
@click.argument("repo")
@click.argument("name")
@click.pass_context
def branch_get(ctx, repo, name):
    """Show the head commit of a branch."""
    run_call(ctx, get_branch, repo, name)


@branch.command("create")
@click.argument("repo")
@click.argument("name")
@click.argument("sha")
@click.pass_context
def branch_create(ctx, repo, name, sha):
    """Create branch NAME at commit SHA."""
    run_call(ctx, create_branch, repo, name, sha)


@cli.group()
def commit():
    """Git commits."""


@commit.command("get")
@click.argument("repo")
@click.argument("sha")
@click.pass_context
def commit_get(ctx, repo, sha):
    """Show a commit and its tree."""
    run_call(ctx, get_commit, repo, sha)


@commit.command("create")
@click.argument("repo")
@click.option("-m", "--message", required=True)
@click.option("-t", "--tree", required=True, help="Tree sha")
@click.option("-p", "--parent", "parents", multiple=True, help="Parent commit sha (repeatable)")
@click.pass_context
def commit_create(ctx, repo, message, tree, parents):
    """Create a commit from an existing tree."""
    run_call(ctx, create_commit, repo, message, tree, list(parents))


# ============ Pull Requests ============

@cli.group()
def pr():
    """Pull requests."""


@pr.command("list")
@click.argument("repo")
@click.pass_context
def pr_list(ctx, repo):
    """List pull requests."""
    run_call(ctx, list_pull_requests, repo)


@pr.command("get")
@click.argument("repo")
@click.argument("number", type=int)
@click.pass_context
def pr_get(ctx, repo, number):
    """Show the head of a pull request."""
    run_call(ctx, get_pull_request, repo, number)


@pr.command("create")
@click.argument("repo")
@click.option("--title", required=True)
@click.option("--head", required=True, help="Branch with the changes")
@click.option("--base", required=True, help="Branch to merge into")
@click.option("--body", default="", help="Description")
@click.pass_context
def pr_create(ctx, repo, title, head, base, body):
    """Open a pull request."""
    run_call(ctx, create_pull_request, repo, title, head, base, body)


# ============ Contents ============

@cli.group()
def contents():
    """File contents."""


@contents.command("get")
@click.argument("repo")
@click.argument("path")
@click.option("--ref", default="main", show_default=True)
@click.pass_context
def contents_get(ctx, repo, path, ref):
    """Show a file as GitHub returns it (content stays encoded)."""
    run_call(ctx, get_file_contents, repo, path, ref)


@contents.command("put")
@click.argument("repo")
@click.argument("path")
@click.argument("source", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.option("--sha", required=True, help="Blob sha of the version being replaced")
@click.option("-m", "--message", required=True)
@click.option("--branch", "branch_name", required=True)
@click.pass_context
def contents_put(ctx, repo, path, source, sha, message, branch_name):
    """Replace PATH on a branch with the bytes of SOURCE."""
    run_call(ctx, update_file_contents, repo, path, sha, message, source.read_bytes(), branch_name)


# ============ Comments ============

@cli.group()
def comments():
    """Issue and pull request comments."""


@comments.command("list")
@click.argument("repo")
@click.argument("number", type=int)
@click.pass_context
def comments_list(ctx, repo, number):
    """List comments on an issue or pull request."""
    run_call(ctx, list_issue_comments, repo, number)


@comments.command("create")
@click.argument("repo")
@click.argument("number", type=int)
@click.argument("body")
@click.pass_context
def comments_create(ctx, repo, number, body):
    """Comment on an issue or pull request."""
    run_call(ctx, create_issue_comment, repo, number, body)


if __name__ == "__main__":
    cli()
