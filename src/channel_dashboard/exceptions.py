class DashboardError(Exception):
    """Base exception for the channel dashboard."""


class ConfigurationError(DashboardError):
    """Raised when required configuration is missing or invalid."""


class DataServiceError(DashboardError):
    """
    Raised by data service implementations when a lookup, analysis or
    report generation fails.

    The message, when present, is shown to the user verbatim.
    """


class DialogTransitionError(DashboardError):
    """Raised when a dialog switch is not one of the allowed transitions."""


class DashboardNotInitializedError(DashboardError):
    """Raised when the dashboard app is used before initialization."""
