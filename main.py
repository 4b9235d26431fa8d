"""Cloud Function Entry Point - Root Module.

This is the root-level entry point for Google Cloud Functions.
It imports from the soonami package.
"""

from soonami.main import latest_earthquake

__all__ = [
    "latest_earthquake",
]
