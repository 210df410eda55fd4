"""Webhook HTTP server for GitHub events.

Serves health check and the webhook path; requests are verified against
the webhook secret before any handler runs.
"""

import json
import logging
from http.server import BaseHTTPRequestHandler, HTTPServer
from typing import Any
from urllib.parse import parse_qs

from mergewhengreen.config import AppConfig
from mergewhengreen.webhook.handlers import handle_github_event
from mergewhengreen.webhook.signature import verify_signature

LOG = logging.getLogger("mergewhengreen.webhook")


class WebhookHandler(BaseHTTPRequestHandler):
    """Handle GET /health and POST to the GitHub webhook path."""

    config: AppConfig

    def _send_json(self, status: int, body: dict) -> None:
        self.send_response(status)
        self.send_header("Content-Type", "application/json")
        self.end_headers()
        self.wfile.write(json.dumps(body).encode())

    def do_GET(self) -> None:
        if self.path == "/health" or self.path == "/":
            self._send_json(200, {"status": "ok", "service": "merge-when-green"})
            return
        self.send_response(404)
        self.end_headers()

    def do_POST(self) -> None:
        if self.path == self.config.github.webhook_path:
            self._handle_github_webhook()
            return
        self.send_response(404)
        self.end_headers()

    def _parse_webhook_body(self, body: bytes) -> dict:
        """Parse webhook body as JSON.

        Supports raw JSON and application/x-www-form-urlencoded (payload=...).
        Raises ValueError for bodies that are not UTF-8 JSON objects.
        """
        if not body:
            return {}
        content_type = self.headers.get("Content-Type", "")
        if "application/x-www-form-urlencoded" in content_type:
            parsed = parse_qs(body.decode("utf-8", errors="replace"), keep_blank_values=True)
            raw = (parsed.get("payload") or [None])[0]
            if raw is None:
                return {}
            payload = json.loads(raw)
        else:
            payload = json.loads(body.decode("utf-8"))
        if not isinstance(payload, dict):
            raise ValueError(f"webhook payload must be an object, got {type(payload).__name__}")
        return payload

    def _handle_github_webhook(self) -> None:
        length = int(self.headers.get("Content-Length", 0))
        body = self.rfile.read(length) if length else b""
        signature = self.headers.get("X-Hub-Signature-256")
        if not verify_signature(self.config.webhook_secret_resolved, body, signature):
            LOG.warning("Rejected webhook with invalid signature")
            self._send_json(401, {"error": "invalid signature"})
            return
        try:
            payload = self._parse_webhook_body(body)
        except ValueError:
            LOG.warning("Invalid webhook JSON (%d bytes)", len(body))
            self._send_json(400, {"error": "invalid json"})
            return
        event = self.headers.get("X-GitHub-Event", "")
        LOG.info("Webhook event: %s (action: %s)", event, payload.get("action"))
        outcomes = handle_github_event(self.config, event, payload)
        self._send_json(200, {"received": True, "outcomes": [o.value for o in outcomes]})

    def log_message(self, format: str, *args: Any) -> None:
        LOG.debug(format, *args)


def make_server(config: AppConfig) -> HTTPServer:
    WebhookHandler.config = config
    return HTTPServer((config.webhook.host, config.webhook.port), WebhookHandler)


def run_webhook_server(config: AppConfig) -> None:
    """Run HTTP server for webhooks and health check."""
    server = make_server(config)
    LOG.info("Webhook server listening on %s:%s", config.webhook.host, config.webhook.port)
    server.serve_forever()
