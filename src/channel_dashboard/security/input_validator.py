"""
Input validation and normalization for UI actions.
"""
from enum import Enum
from typing import Optional, Type, TypeVar

from .exceptions import ValidationError

E = TypeVar("E", bound=Enum)


class InputValidator:
    """
    Validates raw values coming from the UI before they become intents.
    """

    MAX_QUERY_LENGTH = 200

    @staticmethod
    def normalize_query(query: Optional[str]) -> str:
        """
        Normalize a channel query.

        Blank input normalizes to "" (callers ignore it silently);
        only over-long input is an error.

        :param query: Raw query (channel name, handle, id or URL)
        :return: Trimmed query, possibly empty
        :raises ValidationError: If query is not a string or too long
        """
        if query is None:
            return ""
        if not isinstance(query, str):
            raise ValidationError("Query must be a string")

        normalized = query.replace("\x00", "").strip()

        if len(normalized) > InputValidator.MAX_QUERY_LENGTH:
            raise ValidationError(
                f"Query exceeds maximum length of {InputValidator.MAX_QUERY_LENGTH} characters"
            )

        return normalized

    @staticmethod
    def parse_choice(enum_cls: Type[E], value, field_name: str) -> E:
        """
        Parse an enum member from its value.

        :raises ValidationError: If value is not a member of ``enum_cls``
        """
        if isinstance(value, enum_cls):
            return value
        if not isinstance(value, str):
            raise ValidationError(f"'{field_name}' must be a string")
        try:
            return enum_cls(value.strip().lower())
        except ValueError:
            allowed = ", ".join(member.value for member in enum_cls)
            raise ValidationError(
                f"Unknown {field_name} '{value}'. Expected one of: {allowed}"
            )
