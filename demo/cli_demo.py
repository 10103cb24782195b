#!/usr/bin/env python3
"""
Interactive CLI demo for Channel Dashboard.

Drives the dashboard state machine from the terminal against the demo
channel fixture: log in, navigate, analyze a channel, request reports
and watch the dialogs react.
"""
import asyncio
import logging
import sys
from datetime import datetime, timedelta, timezone

# Imports assume PYTHONPATH=src is set (e.g., PYTHONPATH=src python demo/cli_demo.py)
from channel_dashboard.app import DashboardApp
from channel_dashboard.config_loader import load_config_from_env
from channel_dashboard.context import Session
from channel_dashboard.exceptions import DashboardError
from channel_dashboard.interaction import IntentRouter
from channel_dashboard.security import ValidationError
from channel_dashboard.utils.logging_setup import configure_logging

SESSION_ID = "cli"


def print_banner():
    """Print welcome banner."""
    print("\n" + "=" * 60)
    print("  Channel Dashboard - Interactive CLI Demo")
    print("=" * 60)
    print("\nCommands:")
    print("  login <id> [pro] [days]   log in (pro plan ending in <days>)")
    print("  logout                    log out")
    print("  go <view>                 navigate (home, channel, news, ...)")
    print("  open <view> <payload>     navigate with data")
    print("  search <channel>          analyze a channel (try 'demo-channel')")
    print("  report <kind>             strategy | growth | consulting")
    print("  dialog / close <dialog>   open or close a dialog")
    print("  switch <from> <to>        follow a link inside a dialog")
    print("  apikey | apikey set       API key settings / record a key")
    print("  notice <kind> [days]      preview a subscription notice")
    print("  state                     show the full state")
    print("\nType 'quit' or 'exit' to end the session.")
    print("-" * 60 + "\n")


def print_state(snapshot: dict, verbose: bool = False):
    """Print a compact view of the dashboard state."""
    session = snapshot["session"]
    analysis = snapshot["analysis"]
    dialogs = snapshot["dialogs"]

    who = session["identity"] or "anonymous"
    tier = "pro" if session["is_pro"] else "free"
    print(f"\n👤 {who} ({tier})   🧭 View: {snapshot['active_view']}")

    if snapshot.get("last_decision"):
        decision = snapshot["last_decision"]
        print(f"🚦 Last navigation: {decision['view']} -> {decision['outcome']}")

    print(f"📊 Analysis: {analysis['phase']}", end="")
    if analysis["query"]:
        print(f" for '{analysis['query']}'", end="")
    print()
    if analysis["videos"]:
        for video in analysis["videos"]:
            print(f"   🎬 {video['title']} ({video['view_count']:,} views)")
    if analysis["channel_info"]:
        info = analysis["channel_info"]
        print(f"   📺 {info['title']} - {info['subscriber_count']:,} subscribers")
    if analysis["message"]:
        print(f"   💬 {analysis['message']}")

    for kind, slot in analysis["reports"].items():
        if slot["processing"]:
            print(f"   ⏳ {kind} report in progress")
        elif slot["error"]:
            print(f"   ❌ {kind} report: {slot['error']}")
        elif slot["result"]:
            print(f"   📝 {kind} report ready")

    if dialogs["primary"]:
        print(f"🪟 Dialog: {dialogs['primary']}")
    if dialogs["report"]:
        print(f"🪟 Report dialog: {dialogs['report']}")
    if dialogs["api_key_prompt"]:
        print("🔑 API key prompt is open")

    if verbose:
        print(f"   raw: {snapshot}")
    print("-" * 60)


def parse_login(args):
    """login <id> [pro] [days]"""
    if not args:
        raise ValidationError("Usage: login <id> [pro] [days]")
    identity = args[0]
    is_pro = len(args) > 1 and args[1].lower() == "pro"
    days = int(args[2]) if len(args) > 2 else 30
    end_date = datetime.now(timezone.utc) + timedelta(days=days) if is_pro else None
    return Session.for_user(identity, subscription_end_date=end_date)


def setup_app() -> DashboardApp:
    """Set up and initialize the dashboard."""
    print("🚀 Initializing Channel Dashboard...")
    config = load_config_from_env()
    configure_logging(config)
    # Keep the console readable; logs still go to DASHBOARD_LOGS_DIR if set
    logging.getLogger().handlers[0].setLevel(logging.WARNING)

    app = DashboardApp(config)
    app.initialize()
    print("✅ Ready!\n")
    return app


def main():
    """Main CLI loop."""
    print_banner()

    try:
        app = setup_app()
    except DashboardError as e:
        print(f"\n❌ Failed to initialize dashboard: {e}")
        print("Please check your environment variables and configuration.")
        return 1

    router = IntentRouter()

    while True:
        try:
            command = input("You: ").strip()

            if not command:
                continue

            if command.lower() in ['quit', 'exit', 'q']:
                app.end_session(SESSION_ID)
                print("\n👋 Thanks for using Channel Dashboard! Goodbye!\n")
                break

            words = command.split()
            verb = words[0].lower()

            try:
                if verb == "login":
                    app.publish_session(parse_login(words[1:]), session_id=SESSION_ID)
                elif verb == "logout":
                    app.publish_session(Session.anonymous(), session_id=SESSION_ID)
                elif verb != "state":
                    intent = router.route(command)
                    asyncio.run(app.dispatch(intent, session_id=SESSION_ID))
                print_state(app.snapshot(SESSION_ID).to_dict(), verbose=(verb == "state"))
            except (ValidationError, ValueError) as e:
                print(f"\n⚠️  {e}")
                print("-" * 60)
            except DashboardError as e:
                print(f"\n❌ Error: {e}")
                print("-" * 60)

        except KeyboardInterrupt:
            print("\n\n👋 Interrupted. Goodbye!\n")
            break
        except EOFError:
            print("\n\n👋 Goodbye!\n")
            break

    return 0


if __name__ == "__main__":
    sys.exit(main())
