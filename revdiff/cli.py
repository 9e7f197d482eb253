"""Command-line interface for revdiff."""

from __future__ import annotations

import logging
from typing import Optional

import click

from . import __version__
from .config.settings import get_settings
from .errors import RevDiffError, UnknownModeError
from .logging_config import setup_logging
from .services import MODES, ReportWriter, create_report_builder

logger = logging.getLogger(__name__)


def _non_empty(ctx: click.Context, param: click.Parameter, value: str) -> str:
    if not value.strip():
        raise click.BadParameter("must not be empty")
    return value


@click.command(context_settings={"help_option_names": ["-h", "--help"]})
@click.option(
    "-from",
    "from_revision",
    required=True,
    callback=_non_empty,
    help="Commit to compare with.",
)
@click.option(
    "-to", "to_revision", required=True, callback=_non_empty, help="Latest commit."
)
@click.option("-remark", "remark", default="", help="Text for the Remark column.")
@click.option(
    "--repo",
    "repo_path",
    type=click.Path(file_okay=False),
    default=None,
    help="Repository to inspect (default: REVDIFF_REPO_PATH or '.').",
)
@click.option(
    "--output-dir",
    type=click.Path(file_okay=False, writable=True),
    default=None,
    help="Directory for the CSV report (default: REVDIFF_OUTPUT_DIR or '.').",
)
@click.option(
    "--mode",
    type=click.Choice(MODES),
    default=None,
    help="'checkout' stats the working tree after checking out each revision; "
    "'tree' reads the object store and leaves the working tree alone.",
)
@click.option("--verbose", "-v", is_flag=True, help="Log git commands.")
@click.version_option(__version__, prog_name="revdiff")
def cli(
    from_revision: str,
    to_revision: str,
    remark: str,
    repo_path: Optional[str],
    output_dir: Optional[str],
    mode: Optional[str],
    verbose: bool,
) -> None:
    """Write a CSV report of the files changed between two revisions.

    In checkout mode the working tree is left on the -from revision.
    """
    settings = get_settings()
    setup_logging("DEBUG" if verbose else settings.LOG_LEVEL)

    repo_path = repo_path or settings.REPO_PATH
    output_dir = output_dir or settings.OUTPUT_DIR
    mode = mode or settings.MODE

    try:
        builder = create_report_builder(repo_path, mode)
        report = builder.build(from_revision, to_revision)
        path = ReportWriter(output_dir).write(report, remark)
    except UnknownModeError as e:
        raise click.UsageError(str(e))
    except RevDiffError as e:
        raise click.ClickException(str(e))

    if report.unreadable_count:
        logger.warning(
            "%d file entries could not be read and are shown as '-'",
            report.unreadable_count,
        )
    if report.final_revision is not None:
        logger.info("Working tree left at %s", report.final_revision)

    click.echo(f"Successfully written {len(report.records)} records to {path}")


def main() -> None:
    cli()


if __name__ == "__main__":
    main()
