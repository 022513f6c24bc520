"""Publish command: wires configuration, page tree, Confluence and output.

The command loads the desired page tree, resolves the publish strategy,
builds the Confluence content store and runs the publisher. Every failure is
mapped to an ExitCode; nothing is retried here.
"""

import logging
from typing import Callable, Optional

from src.cli.errors import CLIError, ConfigError
from src.cli.models import ExitCode, PublishConfig
from src.cli.output import ConsoleReportingListener, OutputHandler
from src.confluence_client.api_wrapper import APIWrapper
from src.confluence_client.auth import Authenticator
from src.confluence_client.errors import (
    APIUnreachableError,
    ConfluenceError,
    InvalidCredentialsError,
)
from src.page_tree import MetadataLoader, PageTreeError, PrefixAndSuffixPageTitlePostProcessor
from src.publisher import (
    AmbiguousPageTitleError,
    ConfluencePublisher,
    ContentStore,
    PublishError,
    PublishStrategy,
)

logger = logging.getLogger(__name__)


def _default_store_factory(config: PublishConfig) -> ContentStore:
    return APIWrapper(Authenticator(url=config.confluence_url))


class PublishCommand:
    """Runs one publish of a rendered page tree to Confluence.

    Example:
        >>> command = PublishCommand(OutputHandler(verbosity=1))
        >>> exit_code = command.run(PublishConfig(manifest="build/pages.yaml", ...))
    """

    def __init__(
        self,
        output_handler: Optional[OutputHandler] = None,
        store_factory: Optional[Callable[[PublishConfig], ContentStore]] = None,
    ):
        """Initialize the command.

        Args:
            output_handler: Terminal output; a default handler when None
            store_factory: Builds the content store from the config; the
                Confluence REST store when None
        """
        self.output = output_handler or OutputHandler()
        self._store_factory = store_factory or _default_store_factory

    def run(self, config: PublishConfig) -> ExitCode:
        """Publish the page tree described by config.

        Returns:
            ExitCode describing the outcome
        """
        try:
            return self._publish(config)
        except (ConfigError, PageTreeError) as e:
            logger.error(str(e))
            self.output.error(str(e))
            return ExitCode.GENERAL_ERROR
        except AmbiguousPageTitleError as e:
            logger.error(str(e))
            self.output.error(str(e))
            self.output.print("Rename or remove the duplicate pages in Confluence, then publish again.")
            return ExitCode.AMBIGUOUS_PAGES
        except InvalidCredentialsError as e:
            logger.error(str(e))
            self.output.error(f"Authentication failed: {e}")
            return ExitCode.AUTH_ERROR
        except APIUnreachableError as e:
            logger.error(str(e))
            self.output.error(f"Network error: {e}")
            return ExitCode.NETWORK_ERROR
        except (PublishError, ConfluenceError, CLIError) as e:
            logger.error(str(e))
            self.output.error(f"Publish failed: {e}")
            return ExitCode.GENERAL_ERROR
        except Exception as e:
            logger.exception("Unexpected error during publish")
            self.output.error(f"Unexpected error: {e}")
            return ExitCode.GENERAL_ERROR

    def _publish(self, config: PublishConfig) -> ExitCode:
        if not config.manifest:
            raise ConfigError("A page manifest is required (--manifest)", 'manifest')
        if not config.space_key or not str(config.space_key).strip():
            raise ConfigError("A space key is required (--space-key)", 'space_key')
        if not config.ancestor_id or not str(config.ancestor_id).strip():
            raise ConfigError("An ancestor page ID is required (--ancestor-id)", 'ancestor_id')
        if not str(config.ancestor_id).strip().isdigit():
            raise ConfigError(
                f"'{config.ancestor_id}' is not a Confluence page ID; expected digits only",
                'ancestor_id',
            )

        strategy = PublishStrategy.parse(config.strategy)
        title_processor = PrefixAndSuffixPageTitlePostProcessor(
            config.page_title_prefix, config.page_title_suffix
        )

        with self.output.spinner("Loading rendered pages..."):
            pages = MetadataLoader.load(config.manifest, title_processor, config.source_encoding)
        self.output.info(f"Loaded {len(pages)} root page(s) from {config.manifest}")

        store = self._store_factory(config)
        publisher = ConfluencePublisher(store, ConsoleReportingListener(self.output))
        report = publisher.publish(pages, config.space_key, config.ancestor_id, strategy)

        self.output.print_publish_summary(report)
        return ExitCode.SUCCESS
