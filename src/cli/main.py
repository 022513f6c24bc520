"""Main CLI entry point for the confluence-publish command.

This module provides the Typer application that publishes a tree of
already-rendered pages to Confluence. Settings come from an optional YAML
configuration file and are overridden by command-line options.
"""

import logging
import sys
from datetime import datetime
from pathlib import Path
from typing import Optional

import typer

from src.cli.config import PublishConfigLoader
from src.cli.errors import CLIError
from src.cli.models import ExitCode
from src.cli.output import OutputHandler
from src.cli.publish_command import PublishCommand

__version__ = "0.1.0"

app = typer.Typer(
    name="confluence-publish",
    help="""Publish a tree of rendered pages to Confluence.

EXAMPLE:
  confluence-publish --manifest build/pages.yaml --space-key DOCS --ancestor-id 123456

Credentials are read from CONFLUENCE_URL, CONFLUENCE_USER and
CONFLUENCE_API_TOKEN (a .env file is loaded automatically).""",
    add_completion=False,
    rich_markup_mode=None,
)

logger = logging.getLogger(__name__)


def _configure_logging(verbosity: int, logdir: Optional[str] = None) -> None:
    """Configure logging based on verbosity level.

    Configures only the 'src' namespace logger so third-party libraries keep
    their own settings.

    Args:
        verbosity: Verbosity level (0=WARNING, 1=INFO, 2=DEBUG)
        logdir: Optional directory for log files (creates timestamped log file)
    """
    if verbosity == 0:
        level = logging.WARNING
    elif verbosity == 1:
        level = logging.INFO
    else:
        level = logging.DEBUG

    app_logger = logging.getLogger("src")
    app_logger.setLevel(level)
    app_logger.handlers.clear()

    date_format = "%Y-%m-%d %H:%M:%S"
    formatter = logging.Formatter("%(asctime)s [%(levelname)8s] %(message)s", datefmt=date_format)

    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setLevel(level)
    console_handler.setFormatter(formatter)
    app_logger.addHandler(console_handler)

    if logdir:
        log_path = Path(logdir)
        log_path.mkdir(parents=True, exist_ok=True)

        timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")
        log_file = log_path / f"confluence-publish_{timestamp}.log"

        file_formatter = logging.Formatter(
            "%(asctime)s - %(name)s - %(levelname)s - %(message)s",
            datefmt=date_format
        )
        file_handler = logging.FileHandler(log_file, encoding="utf-8")
        file_handler.setLevel(level)
        file_handler.setFormatter(file_formatter)
        app_logger.addHandler(file_handler)

        logger.info(f"Logging to file: {log_file}")


@app.command()
def main_command(
    manifest: Optional[str] = typer.Option(
        None,
        "--manifest",
        "-m",
        help="Page manifest (YAML/JSON) describing the rendered pages",
        metavar="FILE",
    ),
    space_key: Optional[str] = typer.Option(
        None,
        "--space-key",
        "--spaceKey",
        help="Confluence space in which new pages are created",
    ),
    ancestor_id: Optional[str] = typer.Option(
        None,
        "--ancestor-id",
        "--ancestorId",
        help="ID of the existing page to publish under",
    ),
    strategy: Optional[str] = typer.Option(
        None,
        "--strategy",
        help="APPEND_TO_ANCESTOR (default) or REPLACE_ANCESTOR",
    ),
    page_title_prefix: Optional[str] = typer.Option(
        None,
        "--page-title-prefix",
        help="Prefix added to every page title",
    ),
    page_title_suffix: Optional[str] = typer.Option(
        None,
        "--page-title-suffix",
        help="Suffix added to every page title",
    ),
    source_encoding: Optional[str] = typer.Option(
        None,
        "--source-encoding",
        help="Encoding of the rendered page files (default: utf-8)",
    ),
    confluence_url: Optional[str] = typer.Option(
        None,
        "--url",
        help="Confluence base URL (default: CONFLUENCE_URL)",
        metavar="URL",
    ),
    config_file: Optional[str] = typer.Option(
        None,
        "--config",
        "-c",
        help=f"YAML configuration file (default: {PublishConfigLoader.DEFAULT_CONFIG_PATH} if present)",
        metavar="FILE",
    ),
    logdir: Optional[str] = typer.Option(
        None,
        "--logdir",
        help="Directory for log files (creates timestamped log file)",
    ),
    verbosity: int = typer.Option(
        0,
        "--verbosity",
        "-v",
        help="Verbosity level: 0=summary, 1=info, 2=debug",
    ),
    no_color: bool = typer.Option(
        False,
        "--no-color",
        help="Disable colored output",
    ),
    version: bool = typer.Option(
        False,
        "--version",
        "-V",
        help="Show version and exit",
    ),
) -> None:
    """Publish a tree of rendered pages to Confluence."""
    if version:
        typer.echo(f"confluence-publish version {__version__}")
        raise typer.Exit()

    _configure_logging(verbosity, logdir)
    output = OutputHandler(verbosity=verbosity, no_color=no_color)

    try:
        config = PublishConfigLoader.load(config_file)
        config = PublishConfigLoader.merge(config, {
            'manifest': manifest,
            'space_key': space_key,
            'ancestor_id': ancestor_id,
            'strategy': strategy,
            'page_title_prefix': page_title_prefix,
            'page_title_suffix': page_title_suffix,
            'source_encoding': source_encoding,
            'confluence_url': confluence_url,
        })
    except CLIError as e:
        logger.error(f"Configuration failed: {e}")
        output.error(str(e))
        raise typer.Exit(ExitCode.GENERAL_ERROR)

    exit_code = PublishCommand(output_handler=output).run(config)
    raise typer.Exit(exit_code)


def main() -> None:
    """Main entry point for the console script."""
    app()


if __name__ == "__main__":
    main()
