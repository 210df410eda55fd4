"""Webhook server and handlers for GitHub events."""

from mergewhengreen.webhook.handlers import handle_github_event
from mergewhengreen.webhook.server import run_webhook_server
from mergewhengreen.webhook.signature import verify_signature

__all__ = ["handle_github_event", "run_webhook_server", "verify_signature"]
