"""Display formatting - Pure functions.

This module turns an Event into the three strings shown on screen.
All functions are pure with no side effects.
"""

from dataclasses import dataclass
from datetime import timedelta, timezone, tzinfo

from soonami.core.config import AlertLabels
from soonami.core.event import EPOCH, Event


# Fixed English names so output never depends on the process locale
WEEKDAYS = ("Mon", "Tue", "Wed", "Thu", "Fri", "Sat", "Sun")
MONTHS = (
    "Jan", "Feb", "Mar", "Apr", "May", "Jun",
    "Jul", "Aug", "Sep", "Oct", "Nov", "Dec",
)


@dataclass(frozen=True)
class DisplayText:
    """The strings handed to a display surface.

    Attributes:
        title: Event title, unchanged
        date: Formatted occurrence time
        alert: Tsunami alert label
    """
    title: str
    date: str
    alert: str


def format_event_time(time_ms: int, tz: tzinfo = timezone.utc) -> str:
    """Format an epoch-millisecond timestamp for display.

    Pure function. Produces e.g. "Thu, 2 Jan 2014 at 00:02:00 UTC".

    Args:
        time_ms: Milliseconds since epoch, within MIN_TIME_MS..MAX_TIME_MS
        tz: Time zone to render the time in

    Returns:
        Formatted date string
    """
    local = (EPOCH + timedelta(milliseconds=time_ms)).astimezone(tz)
    return (
        f"{WEEKDAYS[local.weekday()]}, {local.day} {MONTHS[local.month - 1]} "
        f"{local.year} at {local:%H:%M:%S} {local.tzname()}"
    )


def get_tsunami_alert_label(
    tsunami_alert: int,
    labels: AlertLabels | None = None,
) -> str:
    """Get the display string for a tsunami alert code.

    Pure function.
    """
    labels = labels or AlertLabels()
    if tsunami_alert == 0:
        return labels.no_alert
    elif tsunami_alert == 1:
        return labels.alert_issued
    else:
        return labels.not_available


def present(
    event: Event,
    labels: AlertLabels | None = None,
    tz: tzinfo = timezone.utc,
) -> DisplayText:
    """Convert an Event into display strings.

    Pure function.

    Args:
        event: Event to present
        labels: Alert label wording (defaults if None)
        tz: Time zone for the date string

    Returns:
        DisplayText with title, date and alert label
    """
    return DisplayText(
        title=event.title,
        date=format_event_time(event.time, tz),
        alert=get_tsunami_alert_label(event.tsunami_alert, labels),
    )
