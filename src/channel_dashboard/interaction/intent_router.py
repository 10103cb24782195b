"""
Deterministic intent router.

Turns raw UI actions (JSON payloads from the HTTP layer, text commands
from the CLI) into typed intents. No guessing: anything that does not
parse is a ValidationError.
"""
from typing import Any, Dict

from ..reports import ReportKind
from ..security.exceptions import ValidationError
from ..security.input_validator import InputValidator
from .dialog_types import DialogKind, NoticeKind
from .intent_types import Intent, IntentType
from .view_types import View


class IntentRouter:
    """
    Parses UI actions into intents.
    """

    # CLI verbs -> intent types
    COMMANDS = {
        "go": IntentType.NAVIGATE,
        "open": IntentType.NAVIGATE_WITH_PAYLOAD,
        "search": IntentType.RUN_ANALYSIS,
        "report": IntentType.GENERATE_REPORT,
        "dialog": IntentType.OPEN_DIALOG,
        "close": IntentType.CLOSE_DIALOG,
        "switch": IntentType.SWITCH_DIALOG,
        "apikey": IntentType.OPEN_API_KEY_PROMPT,
        "notice": IntentType.PREVIEW_SUBSCRIPTION_NOTICE,
    }

    def from_payload(self, data: Dict[str, Any]) -> Intent:
        """
        Parse a JSON action payload.

        :param data: e.g. {"type": "navigate", "view": "channel"}
        :return: Intent
        :raises ValidationError: On unknown types or missing/invalid fields
        """
        if not isinstance(data, dict):
            raise ValidationError("Action payload must be an object")

        intent_type = InputValidator.parse_choice(IntentType, data.get("type"), "action type")

        if intent_type is IntentType.NAVIGATE:
            return Intent(intent_type, view=self._view(data.get("view")))

        if intent_type is IntentType.NAVIGATE_WITH_PAYLOAD:
            return Intent(
                intent_type,
                view=self._view(data.get("view")),
                payload=InputValidator.normalize_query(data.get("payload")),
            )

        if intent_type is IntentType.RUN_ANALYSIS:
            return Intent(intent_type, query=InputValidator.normalize_query(data.get("query")))

        if intent_type is IntentType.GENERATE_REPORT:
            return Intent(
                intent_type,
                report=InputValidator.parse_choice(ReportKind, data.get("report"), "report"),
            )

        if intent_type in (IntentType.OPEN_DIALOG, IntentType.CLOSE_DIALOG):
            return Intent(intent_type, dialog=self._dialog(data.get("dialog")))

        if intent_type is IntentType.SWITCH_DIALOG:
            return Intent(
                intent_type,
                dialog=self._dialog(data.get("dialog")),
                target=self._dialog(data.get("target")),
            )

        if intent_type is IntentType.PREVIEW_SUBSCRIPTION_NOTICE:
            return Intent(
                intent_type,
                notice=InputValidator.parse_choice(NoticeKind, data.get("notice"), "notice"),
                days_left=self._days(data.get("days_left", 0)),
            )

        # OPEN_API_KEY_PROMPT, SUBMIT_API_KEY carry no fields
        return Intent(intent_type)

    def route(self, command: str) -> Intent:
        """
        Parse a CLI command such as ``go channel`` or ``search some channel``.

        :param command: Raw command line
        :return: Intent
        :raises ValidationError: On unknown or incomplete commands
        """
        words = (command or "").strip().split()
        if not words:
            raise ValidationError("Empty command")

        verb, args = words[0].lower(), words[1:]

        if verb == "apikey" and args and args[0].lower() == "set":
            return Intent(IntentType.SUBMIT_API_KEY)

        intent_type = self.COMMANDS.get(verb)
        if intent_type is None:
            raise ValidationError(
                f"Unknown command '{verb}'. Try one of: {', '.join(sorted(self.COMMANDS))}"
            )

        payload: Dict[str, Any] = {"type": intent_type.value}

        if intent_type is IntentType.NAVIGATE:
            payload["view"] = self._arg(args, 0, "view")
        elif intent_type is IntentType.NAVIGATE_WITH_PAYLOAD:
            payload["view"] = self._arg(args, 0, "view")
            payload["payload"] = " ".join(args[1:])
        elif intent_type is IntentType.RUN_ANALYSIS:
            payload["query"] = " ".join(args)
        elif intent_type is IntentType.GENERATE_REPORT:
            payload["report"] = self._arg(args, 0, "report")
        elif intent_type in (IntentType.OPEN_DIALOG, IntentType.CLOSE_DIALOG):
            payload["dialog"] = self._arg(args, 0, "dialog")
        elif intent_type is IntentType.SWITCH_DIALOG:
            payload["dialog"] = self._arg(args, 0, "dialog")
            payload["target"] = self._arg(args, 1, "target")
        elif intent_type is IntentType.PREVIEW_SUBSCRIPTION_NOTICE:
            payload["notice"] = self._arg(args, 0, "notice")
            payload["days_left"] = args[1] if len(args) > 1 else 0

        return self.from_payload(payload)

    @staticmethod
    def _arg(args: list, index: int, name: str) -> str:
        if len(args) <= index:
            raise ValidationError(f"Missing {name}")
        return args[index]

    @staticmethod
    def _view(value) -> View:
        return InputValidator.parse_choice(View, value, "view")

    @staticmethod
    def _dialog(value) -> DialogKind:
        return InputValidator.parse_choice(DialogKind, value, "dialog")

    @staticmethod
    def _days(value) -> int:
        try:
            days = int(value)
        except (TypeError, ValueError):
            raise ValidationError("'days_left' must be an integer")
        if days < 0:
            raise ValidationError("'days_left' cannot be negative")
        return days
