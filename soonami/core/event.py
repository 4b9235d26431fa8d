"""Earthquake event model and parsing - Pure functions.

This module turns a USGS GeoJSON response into a typed Event.
Parsing never raises: malformed input yields None.
"""

import json
import logging
from dataclasses import dataclass
from datetime import datetime, timedelta, timezone
from typing import Any


logger = logging.getLogger(__name__)


EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)

# Representable event times, one day inside datetime's range so any
# display time zone offset still fits
MIN_TIME_MS = (datetime(1, 1, 2, tzinfo=timezone.utc) - EPOCH) // timedelta(milliseconds=1)
MAX_TIME_MS = (datetime(9999, 12, 30, tzinfo=timezone.utc) - EPOCH) // timedelta(milliseconds=1)


@dataclass(frozen=True)
class Event:
    """Immutable earthquake event.

    Attributes:
        title: Human-readable description, verbatim from USGS
        time: Occurrence time in milliseconds since epoch
        tsunami_alert: 0 = no alert, 1 = alert issued, other = unknown
    """
    title: str
    time: int
    tsunami_alert: int

    @property
    def occurred_at(self) -> datetime:
        """Return the event time as an aware UTC datetime."""
        return EPOCH + timedelta(milliseconds=self.time)


def _is_int(value: Any) -> bool:
    # bool is an int subclass; JSON true/false is not a valid code
    return isinstance(value, int) and not isinstance(value, bool)


def extract_event(geojson: Any) -> Event | None:
    """Extract the first earthquake from a decoded GeoJSON feed.

    Pure function. Only features[0] is considered; later features
    are ignored.

    Args:
        geojson: Decoded GeoJSON FeatureCollection

    Returns:
        Event or None if the feed is empty or malformed
    """
    if not isinstance(geojson, dict):
        logger.warning("GeoJSON root is not an object")
        return None

    features = geojson.get("features")
    if not isinstance(features, list):
        logger.warning("GeoJSON has no features array")
        return None

    if not features:
        logger.info("GeoJSON features array is empty")
        return None

    first = features[0]
    props = first.get("properties") if isinstance(first, dict) else None
    if not isinstance(props, dict):
        logger.warning("First feature has no properties object")
        return None

    title = props.get("title")
    time_ms = props.get("time")
    tsunami = props.get("tsunami")

    if not isinstance(title, str):
        logger.warning("Feature title missing or not a string: %r", title)
        return None
    if not _is_int(time_ms):
        logger.warning("Feature time missing or not an integer: %r", time_ms)
        return None
    if not MIN_TIME_MS <= time_ms <= MAX_TIME_MS:
        logger.warning("Feature time out of range: %d", time_ms)
        return None
    if not _is_int(tsunami):
        logger.warning("Feature tsunami missing or not an integer: %r", tsunami)
        return None

    return Event(title=title, time=time_ms, tsunami_alert=tsunami)


def parse_event(json_text: str) -> Event | None:
    """Parse a raw USGS response body into an Event.

    Args:
        json_text: Response body, possibly empty or malformed

    Returns:
        Event or None if nothing usable was found
    """
    if not json_text or not json_text.strip():
        return None

    try:
        geojson = json.loads(json_text)
    except (ValueError, RecursionError) as e:
        logger.error("Problem parsing the earthquake JSON results: %s", e)
        return None

    return extract_event(geojson)
