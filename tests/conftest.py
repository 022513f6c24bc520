"""Root pytest configuration for all tests."""

import logging

# Suppress noisy ERROR logs from atlassian-python-api when pages don't exist.
# The library logs at ERROR level for "page not found", which the publisher
# treats as a normal outcome in several places.
logging.getLogger("atlassian").setLevel(logging.WARNING)
