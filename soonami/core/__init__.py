"""Functional Core - Pure functions with no side effects.

This module contains all business logic as pure functions:
- Event parsing from the USGS GeoJSON feed
- Display formatting (date and tsunami alert label)
- Configuration models and validation

All functions here are deterministic and have no I/O.
"""

from soonami.core.event import Event, extract_event, parse_event
from soonami.core.formatter import DisplayText, format_event_time, get_tsunami_alert_label, present
from soonami.core.config import AlertLabels, Config, validate_config

__all__ = [
    # Event
    "Event",
    "extract_event",
    "parse_event",
    # Formatter
    "DisplayText",
    "format_event_time",
    "get_tsunami_alert_label",
    "present",
    # Config
    "AlertLabels",
    "Config",
    "validate_config",
]
