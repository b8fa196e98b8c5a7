"""Command-line interface for scss-lint-formatter."""
import sys
from pathlib import Path
from typing import TextIO

import click

from scss_lint_formatter.__version__ import __version__
from scss_lint_formatter.colors import resolve_color
from scss_lint_formatter.config import DEFAULT_CONFIG_NAME, load_config
from scss_lint_formatter.file_utils import atomic_write_text
from scss_lint_formatter.formatter import ResultFormatter, get_exit_code, get_summary
from scss_lint_formatter.loader import parse_results
from scss_lint_formatter.logging_config import get_logger, setup_logging


@click.command()
@click.version_option(version=__version__, prog_name="scss-lint-format")
@click.argument(
    "results", type=click.File("r", encoding="utf-8", lazy=False), default="-", required=False
)
@click.option("--color/--no-color", default=None, help="Force colors on or off")
@click.option("--output", "-o", type=click.Path(dir_okay=False), help="Write report to file")
@click.option("--summary", is_flag=True, help="Print error/warning counts to stderr")
@click.option("--verbose", is_flag=True, help="Enable verbose logging")
@click.option("--quiet", is_flag=True, help="Suppress warnings (errors only)")
@click.option("--config", type=click.Path(exists=True), help="Path to config file")
def main(
    results: TextIO,
    color: bool | None,
    output: str | None,
    summary: bool,
    verbose: bool,
    quiet: bool,
    config: str | None,
) -> None:
    """Format JSON lint RESULTS (file or stdin) as a scss-lint style report."""
    setup_logging(verbose=verbose, quiet=quiet)
    logger = get_logger(__name__)

    try:
        config_path = Path(config) if config else Path.cwd() / DEFAULT_CONFIG_NAME
        cfg = load_config(config_path)

        output_path = Path(output) if output else (Path(cfg.output) if cfg.output else None)

        if color is None:
            stream = None if output_path else sys.stdout
            color = resolve_color(cfg.color, stream)

        file_results = parse_results(results.read())

        report = ResultFormatter(color_enabled=color).format(file_results)

        if output_path:
            atomic_write_text(report, output_path)
            logger.info(f"Report written to {output_path}")
        else:
            click.echo(report, nl=False, color=color)

        if summary:
            counts = get_summary(file_results)
            click.echo(
                f"{counts['errors']} error(s), {counts['warnings']} warning(s) "
                f"in {counts['files_with_messages']} of {counts['total_files']} file(s)",
                err=True,
            )

        sys.exit(get_exit_code(file_results))

    except KeyboardInterrupt:
        click.echo("\nOperation cancelled by user", err=True)
        sys.exit(130)  # Standard SIGINT exit code
    except (ValueError, FileNotFoundError) as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(2)
    except Exception as e:
        logger.exception("Unexpected error during execution")
        click.echo(
            f"An unexpected error occurred: {e}\n" "Run with --verbose for details.", err=True
        )
        sys.exit(2)


if __name__ == "__main__":
    main()
