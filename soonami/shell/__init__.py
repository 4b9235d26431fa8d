"""Imperative Shell - I/O and side effects.

This module contains all code that interacts with external systems:
- USGS API client (HTTP)
- Display surfaces
- Configuration loading (environment/files)

Keep this layer thin and simple. All business logic should be in core.
"""

from soonami.shell.usgs_client import USGSClient, USGS_REQUEST_URL
from soonami.shell.display import ConsoleDisplay, Display, MemoryDisplay
from soonami.shell.config_loader import load_config

__all__ = [
    "USGSClient",
    "USGS_REQUEST_URL",
    "ConsoleDisplay",
    "Display",
    "MemoryDisplay",
    "load_config",
]
