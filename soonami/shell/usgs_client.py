"""USGS API Client - Imperative Shell.

This module handles HTTP communication with the USGS Earthquake API.
All I/O is contained here; parsing is in the core module.
"""

import logging
from dataclasses import dataclass
from datetime import date
from urllib.parse import urlencode

import requests

from soonami.core.config import DEFAULT_CONNECT_TIMEOUT, DEFAULT_READ_TIMEOUT


logger = logging.getLogger(__name__)


# USGS FDSN Event Web Service base URL
USGS_API_BASE = "https://earthquake.usgs.gov/fdsnws/event/1/query"


@dataclass(frozen=True)
class USGSQueryParams:
    """Parameters for the USGS geojson query.

    Attributes:
        start_date: Fetch earthquakes on or after this date
        end_date: Fetch earthquakes before this date
        min_magnitude: Minimum magnitude to fetch
    """
    start_date: date
    end_date: date
    min_magnitude: float


def build_request_url(query: USGSQueryParams, base_url: str = USGS_API_BASE) -> str:
    """Build the full query URL for a USGS geojson request.

    Pure function.
    """
    params = {
        "format": "geojson",
        "starttime": query.start_date.isoformat(),
        "endtime": query.end_date.isoformat(),
        "minmagnitude": f"{query.min_magnitude:g}",
    }
    return f"{base_url}?{urlencode(params)}"


# Significant earthquakes of 2014 (M7+), most recent first
USGS_REQUEST_URL = build_request_url(
    USGSQueryParams(
        start_date=date(2014, 1, 1),
        end_date=date(2014, 12, 1),
        min_magnitude=7,
    )
)


class USGSClient:
    """Client for fetching the raw earthquake feed from USGS.

    This is part of the imperative shell - it handles HTTP I/O.
    """

    def __init__(
        self,
        connect_timeout: float = DEFAULT_CONNECT_TIMEOUT,
        read_timeout: float = DEFAULT_READ_TIMEOUT,
    ) -> None:
        """Initialize USGS client.

        Args:
            connect_timeout: Seconds to wait for the connection
            read_timeout: Seconds to wait between bytes of the response
        """
        self.connect_timeout = connect_timeout
        self.read_timeout = read_timeout

    def fetch(self, url: str) -> str:
        """Fetch a URL and return its body as text.

        This method performs HTTP I/O. It never raises: any failure is
        logged and reported as an empty string.

        Args:
            url: Absolute URL to GET

        Returns:
            Response body decoded as UTF-8, or "" on failure
        """
        logger.info("Fetching earthquake feed from %s", url)

        try:
            with requests.get(
                url,
                timeout=(self.connect_timeout, self.read_timeout),
            ) as response:
                if response.status_code != 200:
                    logger.error("Error response code: %d", response.status_code)
                    return ""

                return response.content.decode("utf-8")

        except requests.RequestException as e:
            logger.error("Problem retrieving the earthquake JSON results: %s", e)
            return ""
        except UnicodeDecodeError as e:
            logger.error("Earthquake response is not valid UTF-8: %s", e)
            return ""
        except ValueError as e:
            # requests rejects bad timeout values with a plain ValueError
            logger.error("Invalid request settings: %s", e)
            return ""


def fetch(url: str) -> str:
    """Fetch a URL with a default client. See USGSClient.fetch."""
    return USGSClient().fetch(url)
