"""Main CLI interface for Git Changelog."""

import logging
import sys
from typing import Sequence

import click
from pydantic import ValidationError
from rich.console import Console
from rich.logging import RichHandler

from git_changelog.core.config import ChangelogConfig
from git_changelog.core.errors import ChangelogError, InvalidArgument
from git_changelog.core.pipeline import generate

STAGE_FLAG = "--stage"
ERROR_BANNER = (
    "+--------------------------------------------+\n"
    "| There was an error creating your changelog |\n"
    "+--------------------------------------------+\n"
)

console = Console()
error_console = Console(stderr=True)


def validate_args(args: Sequence[str]) -> bool:
    """Check the raw arguments and return whether staging was requested."""
    has_stage_flag = len(args) == 1 and args[0] == STAGE_FLAG
    if args and not has_stage_flag:
        raise InvalidArgument("You're using an unsupported argument.")
    return has_stage_flag


def _setup_logging(level: str) -> None:
    logging.basicConfig(
        level=level,
        format="%(message)s",
        handlers=[RichHandler(console=error_console, show_path=False)],
        force=True,
    )


def _report_error(error: object) -> None:
    error_console.print(
        ERROR_BANNER, style="red", markup=False, highlight=False, soft_wrap=True
    )
    error_console.print(f"{error}\n", markup=False, highlight=False, soft_wrap=True)


@click.command(
    context_settings={"ignore_unknown_options": True, "allow_extra_args": True},
    add_help_option=False,
)
@click.argument("args", nargs=-1, type=click.UNPROCESSED)
def main(args: Sequence[str]):
    """Create CHANGELOG.md from the git history of the current repository.

    Pass --stage to also add the file to the git index.
    """
    try:
        stage = validate_args(args)
        config = ChangelogConfig.from_env()
        _setup_logging(config.log_level)
        path = generate(config, stage=stage)
    except ValidationError as e:
        _report_error(f"Invalid configuration: {e}")
        sys.exit(1)
    except ChangelogError as e:
        _report_error(e)
        sys.exit(1)

    console.print(f"[green]✅ Changelog written to {path}[/green]")
    if stage:
        console.print(f"[green]Staged {path.name}[/green]")


if __name__ == "__main__":
    main()
