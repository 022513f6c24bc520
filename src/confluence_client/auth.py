"""Authentication module for loading Confluence credentials.

Credentials come from explicit values (e.g. CLI options) first and fall back
to environment variables, which python-dotenv populates from a .env file.
Missing credentials are reported before any request is sent.
"""

import os
from typing import NamedTuple, Optional

from dotenv import load_dotenv

from .errors import InvalidCredentialsError


class Credentials(NamedTuple):
    """Confluence API credentials."""
    url: str
    user: str
    api_token: str


class Authenticator:
    """Resolves and validates Confluence credentials.

    Environment variables used when no explicit value is given:
        CONFLUENCE_URL: Confluence base URL (e.g., https://yourinstance.atlassian.net/wiki)
        CONFLUENCE_USER: Confluence user name or email address
        CONFLUENCE_API_TOKEN: Confluence API token or password

    Example:
        >>> auth = Authenticator(url="https://example.atlassian.net/wiki")
        >>> creds = auth.get_credentials()
        >>> print(f"Publishing to {creds.url}")
    """

    def __init__(
        self,
        url: Optional[str] = None,
        user: Optional[str] = None,
        api_token: Optional[str] = None,
    ):
        """Initialize the authenticator and load the .env file.

        Args:
            url: Explicit Confluence base URL (overrides CONFLUENCE_URL)
            user: Explicit user (overrides CONFLUENCE_USER)
            api_token: Explicit API token (overrides CONFLUENCE_API_TOKEN)
        """
        load_dotenv()
        self._url = url
        self._user = user
        self._api_token = api_token

    def get_credentials(self) -> Credentials:
        """Get Confluence credentials.

        Returns:
            Credentials: A named tuple containing url, user, and api_token

        Raises:
            InvalidCredentialsError: If any required credential is missing
        """
        url = self._url or os.getenv('CONFLUENCE_URL')
        user = self._user or os.getenv('CONFLUENCE_USER')
        api_token = self._api_token or os.getenv('CONFLUENCE_API_TOKEN')

        if not url or not user or not api_token:
            raise InvalidCredentialsError(
                user=user if user else "unknown",
                endpoint=url if url else "unknown"
            )

        return Credentials(url=url.rstrip('/'), user=user, api_token=api_token)
