"""Service-level error types."""


class UpstreamFetchError(RuntimeError):
    """Raised when meal, dish or goal data cannot be read."""
