"""CLI interface for gh-git-data."""

import asyncio
import logging
from typing import Awaitable, Callable, TypeVar

import click
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape

from .api.github_client import GitHubClient
from .api.reference_client import ReferenceClient
from .formatters.table_formatter import TableFormatter
from .utils.errors import ApiError, GitHubAPIError, ValidationError
from .config import BASE_URL_ENV_VAR

T = TypeVar("T")


def _configure_logging(verbose: bool) -> None:
    logger = logging.getLogger("gh_git_data")
    logger.handlers = [RichHandler(show_path=False)]
    logger.setLevel(logging.DEBUG if verbose else logging.WARNING)


def _run(
    ctx: click.Context, operation: Callable[[ReferenceClient], Awaitable[T]]
) -> T:
    """Run one client operation against the repository selected on the group."""
    settings = ctx.obj
    console: Console = settings["console"]

    async def main() -> T:
        async with GitHubClient(token=settings["token"], base_url=settings["api_url"]) as github:
            client = ReferenceClient(github, settings["owner"], settings["repo"])
            return await operation(client)

    try:
        return asyncio.run(main())
    except ApiError as e:
        console.print(
            f"[red bold]GitHub API Error ({e.status_code}):[/red bold] {escape(e.body)}", style="red"
        )
        raise click.Abort()
    except GitHubAPIError as e:
        console.print(f"[red bold]GitHub API Error:[/red bold] {escape(str(e))}", style="red")
        raise click.Abort()
    except ValidationError as e:
        console.print(f"[red bold]Invalid input:[/red bold] {escape(str(e))}", style="red")
        raise click.Abort()


@click.group()
@click.version_option(version="0.1.0")
@click.option("--owner", "-o", required=True, help="Repository owner")
@click.option("--repo", "-r", required=True, help="Repository name")
@click.option("--token", envvar="GH_GIT_DATA_TOKEN", help="GitHub token (default: GITHUB_TOKEN)")
@click.option("--api-url", envvar=BASE_URL_ENV_VAR, help="GitHub API root URL")
@click.option("--verbose", "-v", is_flag=True, help="Log HTTP requests")
@click.pass_context
def cli(ctx: click.Context, owner: str, repo: str, token: str, api_url: str, verbose: bool):
    """Manage git references and tags of a GitHub repository."""
    _configure_logging(verbose)
    ctx.obj = {
        "owner": owner,
        "repo": repo,
        "token": token,
        "api_url": api_url,
        "console": Console(),
    }


@cli.command("get-branch")
@click.argument("branch")
@click.pass_context
def get_branch(ctx: click.Context, branch: str):
    """
    Show a branch reference.

    Example:
        gh-git-data -o octocat -r hello-world get-branch main
    """
    reference = _run(ctx, lambda client: client.get_branch_reference(branch))
    TableFormatter(ctx.obj["console"]).print_reference(reference)


@cli.command("get-tag-ref")
@click.argument("tag")
@click.pass_context
def get_tag_ref(ctx: click.Context, tag: str):
    """Show a tag reference."""
    reference = _run(ctx, lambda client: client.get_tag_reference(tag))
    TableFormatter(ctx.obj["console"]).print_reference(reference)


@cli.command("get-tag")
@click.argument("tag")
@click.pass_context
def get_tag(ctx: click.Context, tag: str):
    """Show an annotated tag object."""
    tag_object = _run(ctx, lambda client: client.get_tag(tag))
    TableFormatter(ctx.obj["console"]).print_tag(tag_object)


@cli.command("list-refs")
@click.argument("pattern")
@click.pass_context
def list_refs(ctx: click.Context, pattern: str):
    """
    List references matching a prefix.

    Example:
        gh-git-data -o octocat -r hello-world list-refs heads/feature
    """
    references = _run(ctx, lambda client: client.list_matching_references(pattern))
    TableFormatter(ctx.obj["console"]).print_references(
        references, title=f"References matching {escape(pattern)}"
    )


@cli.command("create-ref")
@click.argument("ref")
@click.argument("sha")
@click.pass_context
def create_ref(ctx: click.Context, ref: str, sha: str):
    """Create a fully qualified reference, e.g. refs/heads/feature."""
    reference = _run(ctx, lambda client: client.create_reference(ref, sha))
    TableFormatter(ctx.obj["console"]).print_reference(reference)


@cli.command("create-branch")
@click.argument("branch")
@click.argument("sha")
@click.pass_context
def create_branch(ctx: click.Context, branch: str, sha: str):
    """Create a branch pointing at SHA."""
    reference = _run(ctx, lambda client: client.create_branch_reference(branch, sha))
    TableFormatter(ctx.obj["console"]).print_reference(reference)


@cli.command("create-tag")
@click.argument("tag")
@click.argument("sha")
@click.pass_context
def create_tag(ctx: click.Context, tag: str, sha: str):
    """Create a lightweight tag pointing at SHA."""
    reference = _run(ctx, lambda client: client.create_tag_reference(tag, sha))
    TableFormatter(ctx.obj["console"]).print_reference(reference)


@cli.command("create-annotated-tag")
@click.argument("tag")
@click.argument("sha")
@click.option("--message", "-m", required=True, help="Tag message")
@click.option("--tagger-name", required=True, help="Name of the tagger")
@click.option("--tagger-email", required=True, help="Email of the tagger")
@click.pass_context
def create_annotated_tag(
    ctx: click.Context,
    tag: str,
    sha: str,
    message: str,
    tagger_name: str,
    tagger_email: str,
):
    """
    Create an annotated tag (tag reference plus tag object).

    Example:
        gh-git-data -o octocat -r hello-world create-annotated-tag v1.0 abc123 \\
            -m "Release 1.0" --tagger-name Octocat --tagger-email octocat@github.com
    """
    tag_object = _run(
        ctx,
        lambda client: client.create_annotated_tag(
            tag, sha, message, tagger_name, tagger_email
        ),
    )
    TableFormatter(ctx.obj["console"]).print_tag(tag_object)


@cli.command("delete-ref")
@click.argument("ref")
@click.pass_context
def delete_ref(ctx: click.Context, ref: str):
    """Delete a reference, e.g. heads/feature or refs/tags/v1."""
    _run(ctx, lambda client: client.delete_reference(ref))
    ctx.obj["console"].print(f"[green]Deleted {escape(ref)}[/green]")


@cli.command("delete-branch")
@click.argument("branch")
@click.pass_context
def delete_branch(ctx: click.Context, branch: str):
    """Delete a branch."""
    _run(ctx, lambda client: client.delete_branch(branch))
    ctx.obj["console"].print(f"[green]Deleted branch {escape(branch)}[/green]")


@cli.command("delete-tag")
@click.argument("tag")
@click.pass_context
def delete_tag(ctx: click.Context, tag: str):
    """Delete a tag reference."""
    _run(ctx, lambda client: client.delete_tag(tag))
    ctx.obj["console"].print(f"[green]Deleted tag {escape(tag)}[/green]")


if __name__ == "__main__":
    cli()
