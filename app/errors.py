"""Application errors and validation helpers."""

from urllib.parse import urlparse


class BackendUnavailableError(Exception):
    """Backend handle not ready (connecting, or connection failed)."""

    def __init__(self, message: str = "Backend not available"):
        self.message = message
        super().__init__(self.message)


class ValidationError(Exception):
    """Input rejected before any backend call."""

    def __init__(self, message: str = "Validation error"):
        self.message = message
        super().__init__(self.message)


def require_text(value: str, field: str) -> None:
    """Validate a required text field is not blank."""
    if not value or not value.strip():
        raise ValidationError(f"{field} must not be empty")


def validate_url(url: str, field: str = "url") -> None:
    """Validate an absolute http(s) URL."""
    parsed = urlparse(url.strip()) if url else None
    if not parsed or parsed.scheme not in ("http", "https") or not parsed.netloc:
        raise ValidationError(f"Invalid {field}: {url!r}. Expected e.g. https://example.com")


def validate_non_negative(value: int, field: str) -> None:
    """Validate an integer amount (cents, minutes, seconds) is >= 0."""
    if value < 0:
        raise ValidationError(f"{field} must not be negative, got {value}")
