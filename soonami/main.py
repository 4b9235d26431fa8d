"""Cloud Function Entry Point.

This module provides the entry points for Google Cloud Functions and
for local runs. It's a thin wrapper that loads configuration and runs
the pipeline.
"""

import logging
import os
from typing import Any

import functions_framework
from flask import Request

from soonami.core.config import Config
from soonami.pipeline import EarthquakeTask, Pipeline
from soonami.shell.config_loader import load_config, load_config_from_env
from soonami.shell.display import ConsoleDisplay, MemoryDisplay


# Configure logging
log_level = os.environ.get("LOG_LEVEL", "INFO").upper()
logging.basicConfig(
    level=getattr(logging, log_level, logging.INFO),
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)


def _get_config() -> Config:
    """Load configuration from file or environment."""
    config_path = os.environ.get("CONFIG_PATH")

    if config_path:
        return load_config(config_path)
    elif any(name.startswith("SOONAMI_") for name in os.environ):
        return load_config_from_env()
    else:
        return load_config()


@functions_framework.http
def latest_earthquake(request: Request) -> tuple[dict[str, Any], int]:
    """HTTP Cloud Function entry point.

    Fetches the latest significant earthquake and returns its display
    strings.

    Args:
        request: Flask request object (not used, but required by framework)

    Returns:
        Tuple of (response dict, HTTP status code)
    """
    logger.info("Fetching latest significant earthquake")

    try:
        pipeline = Pipeline(_get_config())
        display = MemoryDisplay()

        if not pipeline.update(display) or display.text is None:
            return {"status": "no_data"}, 200

        return {
            "status": "success",
            "title": display.text.title,
            "date": display.text.date,
            "alert": display.text.alert,
        }, 200

    except Exception as e:
        logger.exception("Unexpected error fetching earthquake")
        return {
            "status": "error",
            "message": str(e),
        }, 500


def run_local(timeout: float | None = 60) -> int:
    """Run the background task once and print the result.

    Returns:
        Process exit code: 0 if an earthquake was displayed, 1 otherwise
    """
    task = EarthquakeTask(Pipeline(_get_config()), ConsoleDisplay())
    task.start()

    if not task.wait(timeout):
        logger.warning("No earthquake to display")
        return 1
    return 0


# For local testing
if __name__ == "__main__":
    import sys

    sys.exit(run_local())
