"""Test helper modules for publisher testing.

This package provides utilities for unit tests:
- in_memory_store: ContentStore implementation that records every call
"""

from .in_memory_store import InMemoryContentStore

__all__ = [
    'InMemoryContentStore',
]
