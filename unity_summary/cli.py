"""Command-line interface for unity-summary."""

import logging
import os
import sys
from pathlib import Path
from typing import NoReturn, Optional

import click  # type: ignore
from dotenv import load_dotenv  # type: ignore

from .core.config import SummaryConfig
from .core.discovery import find_result_files
from .core.report import save_report
from .core.summarizer import UnitySummarizer

ROOT_ENVVAR = "UNITY_SUMMARY_ROOT"

USAGE = """
Usage: unity-summary result_file_directory/ root_path/
     result_file_directory - The location of your results files.
                             Defaults to current directory if not specified.
                             Should end in / if specified.
     root_path - Helpful for producing more verbose output if using relative paths."""


def usage(err_msg: Optional[str] = None) -> NoReturn:
    """Print the error and usage text to stdout and exit with status 1."""
    click.echo("\nERROR: ")
    if err_msg:
        click.echo(err_msg)
    click.echo(USAGE)
    sys.exit(1)


def resolve_config(
    results_dir: Optional[str],
    root: Optional[str],
    config: Optional[str],
    output: Optional[str],
    verbose: bool,
) -> SummaryConfig:
    """Merge the config file, environment and command line; the command line wins."""
    settings = SummaryConfig.from_file(config) if config else SummaryConfig()

    updates = {}
    if results_dir is not None:
        updates["results_dir"] = results_dir
    if root is not None:
        updates["root"] = root
    elif settings.root is None:
        updates["root"] = os.environ.get(ROOT_ENVVAR) or os.getcwd() + "/"
    if output is not None:
        updates["output"] = output
    if verbose:
        updates["verbose"] = True

    return settings.model_copy(update=updates)


@click.command()
@click.argument('results_dir', required=False)
@click.argument('root', required=False)
@click.option('--config',
              help='Path to configuration file (YAML or JSON)',
              type=click.Path(file_okay=True, dir_okay=False))
@click.option('--output', '-o',
              help='Also write the report to this file')
@click.option('--verbose',
              is_flag=True,
              help='Enable debug logging on stderr')
def main(results_dir: Optional[str],
         root: Optional[str],
         config: Optional[str],
         output: Optional[str],
         verbose: bool):
    """
    Summarize Unity test result files.

    Searches RESULTS_DIR (default: current directory) for *.test* files and
    prints passed, ignored and failed tests plus overall totals. Outcome lines
    are prefixed with ROOT (default: current working directory).

    Examples:

    \b
    # Summarize results under build/test/results
    unity-summary build/test/results/

    \b
    # Prefix outcome lines with a project path
    unity-summary build/test/results/ C:/projects/firmware/
    """
    load_dotenv(Path.cwd() / ".env")

    try:
        settings = resolve_config(results_dir, root, config, output, verbose)

        logging.basicConfig(
            level=logging.DEBUG if settings.verbose else logging.WARNING,
            format="%(levelname)s %(name)s: %(message)s",
        )

        targets = find_result_files(settings.results_dir, settings.pattern)
        summarizer = UnitySummarizer(targets, root=settings.root)
        report = summarizer.run()

        if settings.output:
            save_report(summarizer.aggregate, settings.output)

        click.echo(report, nl=False)
    except Exception as e:
        usage(str(e))


if __name__ == '__main__':
    main()
