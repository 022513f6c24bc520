"""Command-line interface for publishing rendered pages to Confluence.

This package provides the `confluence-publish` CLI tool. It loads the
configuration and the desired page tree, runs the publisher against
Confluence and reports every change with Rich terminal output.
"""

from .publish_command import PublishCommand
from .models import ExitCode, PublishConfig
from .errors import CLIError, ConfigError, ConfigNotFoundError

__all__ = [
    'PublishCommand',
    'ExitCode',
    'PublishConfig',
    'CLIError',
    'ConfigError',
    'ConfigNotFoundError',
]
