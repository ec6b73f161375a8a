"""Command-line interface for pr-lens."""

import json
import logging
import sys
from collections.abc import Callable
from pathlib import Path
from typing import Any

import click
from rich.console import Console
from rich.logging import RichHandler
from rich.table import Table

from pr_lens import __version__
from pr_lens.config import OUTPUT_FORMATS, load_config, validate_config
from pr_lens.environment import ReviewEnvironment
from pr_lens.errors import PrLensError
from pr_lens.github.plugin import GitHubPlugin
from pr_lens.plugins import load_plugins
from pr_lens.sources.static import StaticRequestSource

console = Console()


def setup_logging(verbose: bool = False) -> None:
    """Configure logging with rich handler."""
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(
        level=level,
        format="%(message)s",
        handlers=[RichHandler(console=console, rich_tracebacks=True)],
    )


def pr_options(func: Callable[..., Any]) -> Callable[..., Any]:
    """Arguments and options shared by every command that reads a PR."""
    func = click.option(
        "--diff", "diff_file",
        type=click.Path(exists=True, dir_okay=False),
        help="Unified diff file, used with --pr-json",
    )(func)
    func = click.option(
        "--issue-json",
        type=click.Path(exists=True, dir_okay=False),
        help="Issue JSON file (labels), used with --pr-json",
    )(func)
    func = click.option(
        "--pr-json",
        type=click.Path(exists=True, dir_okay=False),
        help="Read the PR from a JSON file instead of the GitHub API",
    )(func)
    func = click.option(
        "--config", "config_path", type=click.Path(exists=True), help="Config file path"
    )(func)
    func = click.argument("pr_number", type=int)(func)
    func = click.argument("repo")(func)
    return func


def build_github_plugin(
    repo: str,
    pr_number: int,
    config_path: str | None,
    pr_json: str | None,
    issue_json: str | None,
    diff_file: str | None = None,
) -> GitHubPlugin:
    """Set up the review environment and return the github plugin for it."""
    if pr_json is None and (issue_json or diff_file):
        raise click.UsageError("--issue-json and --diff can only be used with --pr-json")

    config = load_config(Path(config_path) if config_path else None)
    errors = validate_config(config, require_token=pr_json is None)
    if errors:
        for error in errors:
            console.print(f"[red]Config error:[/red] {error}")
        sys.exit(1)

    if pr_json is not None:
        source = StaticRequestSource.from_files(
            Path(pr_json),
            Path(issue_json) if issue_json else None,
            Path(diff_file) if diff_file else None,
        )
        env = ReviewEnvironment(request_source=source, config=config)
    else:
        env = ReviewEnvironment.from_config(config, repo, pr_number)

    return load_plugins(env)["github"]


@click.group()
@click.version_option(version=__version__)
@click.option("-v", "--verbose", is_flag=True, help="Enable verbose output")
def cli(verbose: bool) -> None:
    """pr-lens - inspect the GitHub pull request under review."""
    setup_logging(verbose)


@cli.command("info")
@pr_options
@click.option("--output", type=click.Choice(list(OUTPUT_FORMATS)), default=None)
def info(
    repo: str,
    pr_number: int,
    config_path: str | None,
    pr_json: str | None,
    issue_json: str | None,
    diff_file: str | None,
    output: str | None,
) -> None:
    """Show metadata of a pull request."""
    github = build_github_plugin(repo, pr_number, config_path, pr_json, issue_json, diff_file)
    output = output or github.env.config.output.format

    try:
        data = {
            "title": github.title(),
            "author": github.author(),
            "base_branch": github.branch_for_base(),
            "head_branch": github.branch_for_head(),
            "base_commit": github.base_commit(),
            "head_commit": github.head_commit(),
            "labels": github.labels(),
        }
    except PrLensError as e:
        console.print(f"[red]Error:[/red] {e}")
        sys.exit(1)

    if output == "json":
        print(json.dumps(data, indent=2))
        return

    table = Table(title=f"{repo} #{pr_number}")
    table.add_column("Field", style="cyan")
    table.add_column("Value")
    table.add_row("Title", data["title"])
    table.add_row("Author", data["author"])
    table.add_row("Branch", f"{data['head_branch']} → {data['base_branch']}")
    table.add_row("Head", data["head_commit"])
    table.add_row("Base", data["base_commit"])
    table.add_row("Labels", ", ".join(data["labels"]) if data["labels"] else "None")
    console.print(table)


@cli.command("diff")
@pr_options
def diff(
    repo: str,
    pr_number: int,
    config_path: str | None,
    pr_json: str | None,
    issue_json: str | None,
    diff_file: str | None,
) -> None:
    """Print the unified diff of a pull request."""
    github = build_github_plugin(repo, pr_number, config_path, pr_json, issue_json, diff_file)
    try:
        print(github.pr_diff())
    except PrLensError as e:
        console.print(f"[red]Error:[/red] {e}")
        sys.exit(1)


@cli.command("link")
@pr_options
@click.argument("paths", nargs=-1, required=True)
def link(
    repo: str,
    pr_number: int,
    config_path: str | None,
    pr_json: str | None,
    issue_json: str | None,
    diff_file: str | None,
    paths: tuple[str, ...],
) -> None:
    """Print HTML links to files at the head commit of a pull request."""
    github = build_github_plugin(repo, pr_number, config_path, pr_json, issue_json, diff_file)
    try:
        print(github.html_link(list(paths)))
    except PrLensError as e:
        console.print(f"[red]Error:[/red] {e}")
        sys.exit(1)


def main() -> None:
    """Main entry point."""
    cli()


if __name__ == "__main__":
    main()
