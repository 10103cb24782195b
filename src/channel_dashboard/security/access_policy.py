"""
View access policy based on authentication and subscription tier.
"""
from dataclasses import dataclass
from enum import Enum

from ..context.session_context import Session
from ..interaction.view_types import View, PUBLIC_VIEWS, PRO_VIEWS


class DecisionOutcome(str, Enum):
    ACTIVATE = "activate"
    PROMPT_LOGIN = "prompt_login"
    PROMPT_UPGRADE = "prompt_upgrade"


@dataclass(frozen=True)
class NavigationDecision:
    outcome: DecisionOutcome
    view: View

    @property
    def allowed(self) -> bool:
        return self.outcome is DecisionOutcome.ACTIVATE

    def to_dict(self) -> dict:
        return {"outcome": self.outcome.value, "view": self.view.value}


class AccessPolicy:
    """
    Decides whether a view may be shown for a session.

    Login is checked before tier, so a logged-out user asking for a
    paid view is asked to log in, never to upgrade.
    """

    @staticmethod
    def requires_login(view: View) -> bool:
        return view not in PUBLIC_VIEWS

    @staticmethod
    def requires_pro(view: View) -> bool:
        return view in PRO_VIEWS

    @staticmethod
    def decide(view: View, session: Session) -> NavigationDecision:
        if AccessPolicy.requires_login(view) and not session.is_authenticated:
            return NavigationDecision(DecisionOutcome.PROMPT_LOGIN, view)

        if AccessPolicy.requires_pro(view) and not session.is_pro:
            return NavigationDecision(DecisionOutcome.PROMPT_UPGRADE, view)

        return NavigationDecision(DecisionOutcome.ACTIVATE, view)

    @staticmethod
    def can_stay_on(view: View, session: Session) -> bool:
        """
        Whether an already-active view survives a session change.

        Only the login requirement is re-checked: losing pro access does
        not eject the user from a paid view they are already on.
        """
        return not (AccessPolicy.requires_login(view) and not session.is_authenticated)
