"""
Dialog coordinator.

Holds the modal state of one dashboard session as three independent
parts instead of a flag per dialog:

- primary: at most one account/navigation dialog
- report: at most one AI report dialog, never blocked by the primary slot
- api key prompt: a condition derived from session, view and key status

The coordinator never calls into the gatekeeper or the orchestrator; it
learns about the world from events only.
"""
import logging
from dataclasses import dataclass
from typing import Optional

from ..context.session_context import Session
from ..events import (
    ApiKeyRecorded,
    EventBus,
    NavigationDenied,
    ReportRequested,
    SessionChanged,
    SubscriptionNoticeTriggered,
    ViewChanged,
)
from ..exceptions import DialogTransitionError
from ..interaction.dialog_types import (
    ALLOWED_SWITCHES,
    PRIMARY_DIALOGS,
    REPORT_DIALOGS,
    DialogKind,
    NoticeKind,
)
from ..interaction.view_types import DEFAULT_VIEW, View

logger = logging.getLogger(__name__)

# Closed automatically once the user is logged in
ACCOUNT_DIALOGS = frozenset({DialogKind.LOGIN, DialogKind.SIGNUP, DialogKind.FORGOT_PASSWORD})


@dataclass(frozen=True)
class OpenDialog:
    """The dialog occupying the primary slot."""
    kind: DialogKind
    notice: Optional[NoticeKind] = None
    days_left: int = 0

    def to_dict(self) -> dict:
        data = {"kind": self.kind.value}
        if self.notice is not None:
            data["notice"] = self.notice.value
            data["days_left"] = self.days_left
        return data


class DialogCoordinator:
    """
    Decides which dialogs are open in reaction to dashboard events.
    """

    def __init__(
        self,
        events: EventBus,
        session: Optional[Session] = None,
        active_view: View = DEFAULT_VIEW,
        api_key_recorded: bool = False,
    ):
        """
        :param events: Per-session event bus to subscribe to
        :param session: Session at construction time
        :param active_view: View active at construction time
        :param api_key_recorded: Whether an API key is already configured
        """
        self._session = session or Session.anonymous()
        self._active_view = active_view
        self._api_key_recorded = api_key_recorded
        self._api_key_prompt_requested = False

        self.primary: Optional[OpenDialog] = None
        self.report: Optional[DialogKind] = None

        events.subscribe(SessionChanged, self._on_session_changed)
        events.subscribe(ViewChanged, self._on_view_changed)
        events.subscribe(NavigationDenied, self._on_navigation_denied)
        events.subscribe(ReportRequested, self._on_report_requested)
        events.subscribe(SubscriptionNoticeTriggered, self._on_subscription_notice)
        events.subscribe(ApiKeyRecorded, self._on_api_key_recorded)

    # ----------------------------
    # Queries
    # ----------------------------
    @property
    def api_key_recorded(self) -> bool:
        return self._api_key_recorded

    @property
    def api_key_prompt_visible(self) -> bool:
        if self._api_key_prompt_requested:
            return True
        return (
            self._session.is_authenticated
            and not self._api_key_recorded
            and self._active_view is not DEFAULT_VIEW
        )

    def is_open(self, kind: DialogKind) -> bool:
        if kind is DialogKind.API_KEY_PROMPT:
            return self.api_key_prompt_visible
        if kind in PRIMARY_DIALOGS:
            return self.primary is not None and self.primary.kind is kind
        return self.report is kind

    # ----------------------------
    # Commands
    # ----------------------------
    def open(self, kind: DialogKind) -> bool:
        """
        Open a dialog directly (header buttons, menu entries).

        :return: True if the dialog is now open
        """
        if kind is DialogKind.API_KEY_PROMPT:
            return self.open_api_key_prompt()
        if kind in PRIMARY_DIALOGS:
            return self._open_primary(OpenDialog(kind))
        self.report = kind
        return True

    def close(self, kind: DialogKind) -> bool:
        """
        Close a dialog. Closing a dialog that is not open does nothing.

        :return: True if the caller must navigate back to the default view
            (the API key prompt was dismissed without a key)
        """
        if kind is DialogKind.API_KEY_PROMPT:
            must_leave = self.api_key_prompt_visible and not self._api_key_recorded
            self._api_key_prompt_requested = False
            if must_leave:
                logger.info("API key prompt dismissed without a key")
            return must_leave and self._active_view is not DEFAULT_VIEW

        if kind in PRIMARY_DIALOGS:
            if self.primary is not None and self.primary.kind is kind:
                self.primary = None
        elif self.report is kind:
            self.report = None
        return False

    def switch(self, source: DialogKind, target: DialogKind) -> None:
        """
        Follow an in-dialog link, e.g. login → signup.

        :raises DialogTransitionError: If the transition is not allowed or
            ``source`` is not the open dialog
        """
        if target not in ALLOWED_SWITCHES.get(source, frozenset()):
            raise DialogTransitionError(
                f"Cannot switch from '{source.value}' to '{target.value}'"
            )
        if self.primary is None or self.primary.kind is not source:
            raise DialogTransitionError(f"'{source.value}' is not open")
        logger.debug(f"Dialog switch: {source.value} -> {target.value}")
        self.primary = OpenDialog(target)

    def open_api_key_prompt(self) -> bool:
        """
        "Open API key settings". Anonymous users get the login prompt instead.

        :return: True if the API key prompt is now visible
        """
        if not self._session.is_authenticated:
            self._open_primary(OpenDialog(DialogKind.LOGIN))
            return False
        self._api_key_prompt_requested = True
        return True

    # ----------------------------
    # Event handlers
    # ----------------------------
    def _on_session_changed(self, event: SessionChanged) -> None:
        self._session = event.session
        if not event.session.is_authenticated:
            self._api_key_prompt_requested = False
        elif self.primary is not None and self.primary.kind in ACCOUNT_DIALOGS:
            self.primary = None

    def _on_view_changed(self, event: ViewChanged) -> None:
        self._active_view = event.view

    def _on_navigation_denied(self, event: NavigationDenied) -> None:
        kind = DialogKind.LOGIN if event.requires_login else DialogKind.PRICING
        self._open_primary(OpenDialog(kind))

    def _on_report_requested(self, event: ReportRequested) -> None:
        self.report = REPORT_DIALOGS[event.kind]

    def _on_subscription_notice(self, event: SubscriptionNoticeTriggered) -> None:
        self._open_primary(
            OpenDialog(DialogKind.SUBSCRIPTION_NOTICE, notice=event.kind, days_left=event.days_left)
        )

    def _on_api_key_recorded(self, event: ApiKeyRecorded) -> None:
        self._api_key_recorded = True
        self._api_key_prompt_requested = False

    # ----------------------------
    # Internals
    # ----------------------------
    def _open_primary(self, dialog: OpenDialog) -> bool:
        # Login wins over an upgrade prompt while nobody is logged in
        if (
            dialog.kind is DialogKind.PRICING
            and self.primary is not None
            and self.primary.kind is DialogKind.LOGIN
            and not self._session.is_authenticated
        ):
            logger.debug("Keeping login prompt open over pricing")
            return False
        self.primary = dialog
        return True

    def snapshot(self) -> dict:
        return {
            "primary": self.primary.to_dict() if self.primary is not None else None,
            "report": self.report.value if self.report is not None else None,
            "api_key_prompt": self.api_key_prompt_visible,
            "api_key_recorded": self._api_key_recorded,
        }
