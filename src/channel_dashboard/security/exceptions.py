"""
Security-related exceptions.
"""


class SecurityError(Exception):
    """Base exception for access and input violations."""

    pass


class ValidationError(SecurityError):
    """Raised when a UI payload fails validation."""

    pass
