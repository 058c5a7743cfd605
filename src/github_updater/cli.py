"""Command-line interface for github_updater."""

from __future__ import annotations

import logging
import sys

import click

from github_updater.exceptions import AuthenticationError
from github_updater.models import RunConfig, SyncAction
from github_updater.updater import run


class UpdaterCommand(click.Command):
    """Command that exits with status 1 on usage errors and shows the options."""

    def parse_args(self, ctx: click.Context, args: list[str]) -> list[str]:
        try:
            return super().parse_args(ctx, args)
        except click.UsageError as e:
            click.echo(e.format_message(), err=True)
            click.echo(ctx.get_help(), err=True)
            ctx.exit(1)


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(asctime)s - %(levelname)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )


@click.command(cls=UpdaterCommand)
@click.option("--root", "-r", required=True, help="The root of the file system to process from")
@click.option("--target", "-t", required=True, help="The target folder to upload new files from")
@click.option(
    "--repository", "--repo", "repository", required=True, help="The repository to operate on"
)
@click.option("--username", "-u", required=True, help="The username of the repository owner")
@click.option(
    "--strict-lookup",
    is_flag=True,
    help="Abort instead of uploading when an existence check fails for a reason other than not-found",
)
@click.option("--verbose", "-v", is_flag=True, help="Enable debug logging")
@click.version_option(package_name="github-updater")
def main(
    root: str,
    target: str,
    repository: str,
    username: str,
    strict_lookup: bool,
    verbose: bool,
) -> None:
    """Upload episode-<n>.csv files from ROOT/TARGET to a GitHub repository.

    Files already present in the repository are skipped. The repository is
    created if it cannot be found.

    Examples:

        github-updater -r ~/podcast -t data --repository episodes -u octocat
    """
    _configure_logging(verbose)
    config = RunConfig(
        root_path=root,
        target_path=target,
        repository_name=repository,
        owner_name=username,
    )

    click.echo(f"Root Path: {config.root_path}")
    click.echo(f"Target Path: {config.target_path}")

    try:
        outcomes = run(config, strict_lookup=strict_lookup)
    except AuthenticationError as e:
        click.echo(click.style(f"Authentication failed: {e}", fg="red"), err=True)
        sys.exit(1)
    except Exception as e:
        click.echo(click.style(f"Error: {e}", fg="red"), err=True)
        sys.exit(1)

    if outcomes is None:
        return

    added = sum(1 for o in outcomes if o.action is SyncAction.ADDED)
    skipped = len(outcomes) - added
    click.echo(click.style(f"\nAdded {added}, skipped {skipped}", fg="green"))


if __name__ == "__main__":
    main()
