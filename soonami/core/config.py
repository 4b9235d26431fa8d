"""Configuration models - Pure data structures.

These are domain models for configuration. The actual loading
(I/O) is handled by the shell layer.
"""

from dataclasses import dataclass, field
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError


# Timeouts for the USGS request (seconds)
DEFAULT_CONNECT_TIMEOUT = 15.0
DEFAULT_READ_TIMEOUT = 10.0

DEFAULT_TIMEZONE = "UTC"


@dataclass(frozen=True)
class AlertLabels:
    """Display strings for the tsunami alert status.

    Attributes:
        no_alert: Shown when no tsunami alert was issued (code 0)
        alert_issued: Shown when a tsunami alert was issued (code 1)
        not_available: Shown for any other code
    """
    no_alert: str = "No tsunami alert issued"
    alert_issued: str = "Tsunami alert was issued"
    not_available: str = "Tsunami alert status not available"


@dataclass
class Config:
    """Application configuration.

    This is a pure data structure - no I/O or side effects.

    Attributes:
        connect_timeout: Seconds to wait for the connection to open
        read_timeout: Seconds to wait for the response body
        display_timezone: IANA zone name used to format the event date
        labels: Tsunami alert display strings
    """
    connect_timeout: float = DEFAULT_CONNECT_TIMEOUT
    read_timeout: float = DEFAULT_READ_TIMEOUT
    display_timezone: str = DEFAULT_TIMEZONE
    labels: AlertLabels = field(default_factory=AlertLabels)


@dataclass
class ValidationError:
    """A configuration validation error.

    Attributes:
        field: The field that has an error
        message: Human-readable error description
        severity: 'error' or 'warning'
    """
    field: str
    message: str
    severity: str = "error"


@dataclass
class ValidationResult:
    """Result of validating configuration.

    Attributes:
        valid: True if no errors (warnings are OK)
        errors: List of validation errors/warnings
    """
    valid: bool
    errors: list[ValidationError] = field(default_factory=list)

    @property
    def warnings(self) -> list[ValidationError]:
        """Get only warnings."""
        return [e for e in self.errors if e.severity == "warning"]

    @property
    def critical_errors(self) -> list[ValidationError]:
        """Get only critical errors."""
        return [e for e in self.errors if e.severity == "error"]


def resolve_timezone(name: str) -> ZoneInfo | None:
    """Look up an IANA time zone, or None if it is unknown."""
    try:
        return ZoneInfo(name)
    except (ZoneInfoNotFoundError, ValueError):
        return None


def validate_config(config: Config) -> ValidationResult:
    """Validate configuration values.

    Pure function (apart from reading the system zone database).

    Args:
        config: Configuration to validate

    Returns:
        ValidationResult with any errors found
    """
    errors = []

    for name in ("connect_timeout", "read_timeout"):
        value = getattr(config, name)
        if value <= 0:
            errors.append(ValidationError(
                field=name,
                message=f"{name} must be positive, got {value}",
            ))
        elif value > 120:
            errors.append(ValidationError(
                field=name,
                message=f"{name} of {value}s is unusually long",
                severity="warning",
            ))

    if resolve_timezone(config.display_timezone) is None:
        errors.append(ValidationError(
            field="display_timezone",
            message=f"Unknown time zone: {config.display_timezone}",
        ))

    for name in ("no_alert", "alert_issued", "not_available"):
        if not getattr(config.labels, name).strip():
            errors.append(ValidationError(
                field=f"labels.{name}",
                message="Alert label is empty",
                severity="warning",
            ))

    has_errors = any(e.severity == "error" for e in errors)
    return ValidationResult(valid=not has_errors, errors=errors)
