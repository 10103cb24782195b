#!/usr/bin/env python3
"""
Flask REST API for Channel Dashboard.

Serves the dashboard state machine to a browser front end as JSON.
Uses environment variables for configuration (see config_loader).
"""
import os
import sys
import logging
import uuid
from datetime import datetime
from pathlib import Path
from typing import Optional
from flask import Flask, request, jsonify, session
from flask_limiter import Limiter
from flask_limiter.util import get_remote_address
from pydantic import BaseModel, ConfigDict, Field
from pydantic import ValidationError as RequestValidationError

# Add service to path (src/ layout, runnable without installing)
sys.path.insert(0, str(Path(__file__).parent / "src"))

# Public API imports
from channel_dashboard.app import DashboardApp
from channel_dashboard.config_loader import load_config_from_env
from channel_dashboard.context import Session
from channel_dashboard.exceptions import DashboardError, DialogTransitionError
from channel_dashboard.interaction import IntentRouter, IntentType
from channel_dashboard.reports import ReportKind
from channel_dashboard.runtime import DashboardRuntime
from channel_dashboard.security import InputValidator, ValidationError
from channel_dashboard.utils.logging_setup import configure_logging

logger = logging.getLogger(__name__)

# Intents that may wait on the data service; scheduled, answered with 202
BACKGROUND_INTENTS = {
    IntentType.NAVIGATE_WITH_PAYLOAD,
    IntentType.RUN_ANALYSIS,
    IntentType.GENERATE_REPORT,
}

REQUEST_TIMEOUT_SECONDS = 10.0


class SessionRequest(BaseModel):
    """Body of POST /api/session."""
    model_config = ConfigDict(extra="forbid")

    logout: bool = False
    identity: Optional[str] = Field(default=None, min_length=1, max_length=320)
    is_pro: Optional[bool] = None
    is_admin: bool = False
    subscription_active: bool = True
    subscription_end_date: Optional[datetime] = None

    def to_session(self) -> Session:
        if self.logout:
            return Session.anonymous()
        if not self.identity:
            raise ValidationError("'identity' is required unless logging out")
        if self.is_pro is not None:
            return Session(
                is_authenticated=True,
                is_pro=self.is_pro,
                subscription_end_date=self.subscription_end_date,
                identity=self.identity,
            )
        return Session.for_user(
            self.identity,
            subscription_end_date=self.subscription_end_date,
            subscription_active=self.subscription_active,
            is_admin=self.is_admin,
        )


class AnalysisRequest(BaseModel):
    """Body of POST /api/analysis."""
    query: str


def _initialize_dashboard_from_env() -> Optional[DashboardApp]:
    """Initialize the dashboard from environment variables."""
    try:
        config = load_config_from_env()
        configure_logging(config)
        dashboard = DashboardApp(config)
        dashboard.initialize()
        logger.info("Dashboard initialized successfully from environment variables")
        return dashboard
    except DashboardError as e:
        logging.basicConfig(level=logging.INFO)
        logger.error(f"Failed to initialize dashboard: {str(e)}", exc_info=True)
        return None


def _default_limits(dashboard: Optional[DashboardApp]) -> list:
    if dashboard is None:
        return ["200 per hour", "30 per minute"]
    return list(dashboard.config.rate_limits)


def create_app(
    dashboard: Optional[DashboardApp] = None,
    runtime: Optional[DashboardRuntime] = None,
    rate_limits: Optional[list] = None,
) -> Flask:
    """
    Build the Flask application.

    :param dashboard: Initialized dashboard facade; built from the environment if not given
    :param runtime: Event-loop runtime; one is started if not given
    :param rate_limits: Default flask-limiter limits
    """
    if dashboard is None:
        dashboard = _initialize_dashboard_from_env()

    flask_app = Flask(__name__)
    flask_app.secret_key = os.environ.get("FLASK_SECRET_KEY", os.urandom(32).hex())

    # Security: Rate limiting
    limiter = Limiter(
        get_remote_address,
        app=flask_app,
        default_limits=rate_limits or _default_limits(dashboard),
        storage_uri="memory://",
    )

    if runtime is None:
        runtime = DashboardRuntime()
    runtime.start()

    intent_router = IntentRouter()

    def _session_id() -> str:
        if "session_id" not in session:
            session["session_id"] = str(uuid.uuid4())
        return session["session_id"]

    def _not_ready():
        return jsonify({"error": "Dashboard not initialized. Please check configuration."}), 500

    def _state(session_id: str) -> dict:
        return runtime.call(
            lambda: dashboard.snapshot(session_id).to_dict(),
            timeout=REQUEST_TIMEOUT_SECONDS,
        )

    @flask_app.errorhandler(ValidationError)
    def _on_validation_error(e):
        logger.warning(f"Input validation failed: {str(e)}")
        return jsonify({"error": str(e)}), 400

    @flask_app.errorhandler(RequestValidationError)
    def _on_request_error(e):
        logger.warning(f"Malformed request body: {e.error_count()} error(s)")
        return jsonify({"error": "Invalid request body", "details": e.errors(include_url=False, include_context=False)}), 400

    @flask_app.errorhandler(DialogTransitionError)
    def _on_dialog_error(e):
        return jsonify({"error": str(e)}), 409

    @flask_app.errorhandler(DashboardError)
    def _on_dashboard_error(e):
        logger.error(f"Dashboard error: {str(e)}", exc_info=True)
        return jsonify({"error": str(e)}), 500

    @flask_app.route("/health")
    def health():
        """Liveness probe."""
        return jsonify({"status": "ok", "initialized": dashboard is not None})

    @flask_app.route("/api/state")
    def state():
        """Current dashboard snapshot for this browser session."""
        if dashboard is None:
            return _not_ready()
        return jsonify(_state(_session_id()))

    @flask_app.route("/api/session", methods=["POST"])
    @limiter.limit("20 per minute")
    def publish_session():
        """Publish login / logout / subscription changes."""
        if dashboard is None:
            return _not_ready()

        body = SessionRequest.model_validate(request.get_json(silent=True) or {})
        new_session = body.to_session()
        session_id = _session_id()

        runtime.call(dashboard.publish_session, new_session, session_id, timeout=REQUEST_TIMEOUT_SECONDS)
        logger.info(f"Session published - Session: {session_id}, Identity: {new_session.identity}")
        return jsonify(_state(session_id))

    @flask_app.route("/api/session/end", methods=["POST"])
    def end_session():
        """End this browser session; forgets shown subscription warnings."""
        if dashboard is None:
            return _not_ready()

        session_id = session.pop("session_id", None)
        ended = False
        if session_id:
            ended = runtime.call(dashboard.end_session, session_id, timeout=REQUEST_TIMEOUT_SECONDS)
        return jsonify({"status": "success", "ended": ended})

    @flask_app.route("/api/actions", methods=["POST"])
    def actions():
        """Apply one UI action, e.g. {"type": "navigate", "view": "channel"}."""
        if dashboard is None:
            return _not_ready()

        intent = intent_router.from_payload(request.get_json(silent=True))
        session_id = _session_id()
        logger.info(f"Action - Session: {session_id}, Intent: {intent.type.value}")

        if intent.type in BACKGROUND_INTENTS:
            runtime.submit(dashboard.dispatch(intent, session_id))
            return jsonify(_state(session_id)), 202

        runtime.run(dashboard.dispatch(intent, session_id), timeout=REQUEST_TIMEOUT_SECONDS)
        return jsonify(_state(session_id))

    @flask_app.route("/api/analysis", methods=["POST"])
    @limiter.limit("10 per minute")
    def analysis():
        """Start a channel analysis; poll /api/state for the outcome."""
        if dashboard is None:
            return _not_ready()

        body = AnalysisRequest.model_validate(request.get_json(silent=True) or {})
        query = InputValidator.normalize_query(body.query)
        if not query:
            return jsonify({"error": "Empty query"}), 400

        session_id = _session_id()
        logger.info(f"Analysis requested - Session: {session_id}, Query: {query}")
        runtime.submit(dashboard.run_analysis(query, session_id))
        return jsonify(_state(session_id)), 202

    @flask_app.route("/api/reports/<kind>", methods=["POST"])
    @limiter.limit("10 per minute")
    def reports(kind: str):
        """Start generating an AI report for the analyzed videos."""
        if dashboard is None:
            return _not_ready()

        report_kind = InputValidator.parse_choice(ReportKind, kind, "report")
        session_id = _session_id()
        logger.info(f"Report requested - Session: {session_id}, Kind: {report_kind.value}")
        runtime.submit(dashboard.generate_report(report_kind, session_id))
        return jsonify(_state(session_id)), 202

    return flask_app


if __name__ == "__main__":
    app = create_app()
    port = int(os.getenv("PORT", 7860))
    # Disable debug mode for production
    app.run(host="0.0.0.0", port=port, debug=False)
