"""
Security module for view access policy and UI input validation.
"""

from .exceptions import SecurityError, ValidationError
from .input_validator import InputValidator
from .access_policy import AccessPolicy, DecisionOutcome, NavigationDecision

__all__ = [
    "SecurityError",
    "ValidationError",
    "InputValidator",
    "AccessPolicy",
    "DecisionOutcome",
    "NavigationDecision",
]
