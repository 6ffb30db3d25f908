"""Structlog processors and the redaction helper shared with the services.

Session identifiers, cookies and auth data travel through the session and
error services as ordinary context; everything in here keeps them out of
diagnostic output and detailed error notices.
"""

from typing import Any, Callable, Mapping

Processor = Callable[[Any, str, dict], dict]

# Key substrings marking a value as sensitive (case-insensitive)
SENSITIVE_PATTERNS = frozenset(
    {
        "password",
        "secret",
        "token",
        "api_key",
        "apikey",
        "authorization",
        "auth",
        "credential",
        "private_key",
        "session_id",
        "cookie",
        "jwt",
        "bearer",
    }
)

DEFAULT_MASK = "***REDACTED***"


def _static_fields(**fields: Any) -> Processor:
    def processor(logger: Any, method_name: str, event_dict: dict) -> dict:
        event_dict.update(fields)
        return event_dict

    return processor


def add_app_info(app_name: str, app_version: str = "unknown") -> Processor:
    """Processor adding app_name and app_version to every event."""
    return _static_fields(app_name=app_name, app_version=app_version)


def add_environment_info(environment: str) -> Processor:
    """Processor adding the deployment environment to every event."""
    return _static_fields(environment=environment)


def redact_mapping(
    values: Mapping[str, Any],
    mask_value: str = DEFAULT_MASK,
    patterns: frozenset[str] = SENSITIVE_PATTERNS,
) -> dict[str, Any]:
    """Return a copy of values with sensitive entries masked.

    A key is sensitive when it contains any of the patterns. None values are
    left as-is so an absent credential stays distinguishable.

    Args:
        values: Mapping to redact.
        mask_value: Replacement for sensitive values.
        patterns: Substrings marking a key as sensitive.

    Returns:
        New dict with sensitive values replaced.
    """

    def is_sensitive(key: Any) -> bool:
        lowered = str(key).lower()
        return any(pattern in lowered for pattern in patterns)

    return {
        key: mask_value if value is not None and is_sensitive(key) else value
        for key, value in values.items()
    }


def mask_sensitive_data(
    mask_value: str = DEFAULT_MASK,
    additional_patterns: frozenset[str] | None = None,
) -> Processor:
    """Processor masking sensitive top-level event fields.

    Example:
        processors=[mask_sensitive_data(additional_patterns=frozenset({"ssn"}))]
    """
    patterns = SENSITIVE_PATTERNS | (additional_patterns or frozenset())

    def processor(logger: Any, method_name: str, event_dict: dict) -> dict:
        return redact_mapping(event_dict, mask_value, patterns)

    return processor


def truncate_large_values(max_length: int = 500) -> Processor:
    """Processor shortening oversized strings such as exception traces.

    Args:
        max_length: Characters kept before the truncation marker.
    """

    def processor(logger: Any, method_name: str, event_dict: dict) -> dict:
        for key, value in event_dict.items():
            if isinstance(value, str) and len(value) > max_length:
                event_dict[key] = (
                    f"{value[:max_length]}...[truncated, {len(value)} chars total]"
                )
        return event_dict

    return processor
