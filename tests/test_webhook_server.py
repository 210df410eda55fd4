"""Tests for webhook signature verification and the HTTP server."""

import json
import threading
import urllib.error
import urllib.request
from typing import Iterator
from unittest.mock import patch

import pytest

from mergewhengreen.config import AppConfig, GitHubConfig, WebhookConfig
from mergewhengreen.pipeline import MergeOutcome
from mergewhengreen.webhook.server import make_server
from mergewhengreen.webhook.signature import compute_signature, verify_signature


class TestVerifySignature:
    def test_empty_secret_disables_check(self) -> None:
        assert verify_signature("", b"{}", None)

    def test_valid_signature(self) -> None:
        body = b'{"action": "labeled"}'
        assert verify_signature("s3cret", body, compute_signature("s3cret", body))

    def test_missing_header_rejected(self) -> None:
        assert not verify_signature("s3cret", b"{}", None)

    def test_wrong_signature_rejected(self) -> None:
        assert not verify_signature("s3cret", b"{}", compute_signature("other", b"{}"))

    def test_signature_format(self) -> None:
        sig = compute_signature("s3cret", b"{}")
        assert sig.startswith("sha256=")
        assert len(sig) == len("sha256=") + 64


@pytest.fixture
def server_url() -> Iterator[str]:
    """Serve on an ephemeral port with a webhook secret."""
    config = AppConfig(
        github=GitHubConfig(webhook_secret="s3cret", token="token"),
        webhook=WebhookConfig(host="127.0.0.1", port=8000),
    )
    config.webhook.port = 0
    server = make_server(config)
    thread = threading.Thread(target=server.serve_forever, daemon=True)
    thread.start()
    host, port = server.server_address[:2]
    yield f"http://{host}:{port}"
    server.shutdown()
    server.server_close()


def _post(url: str, body: bytes, headers: dict) -> tuple:
    req = urllib.request.Request(url, data=body, headers=headers, method="POST")
    try:
        with urllib.request.urlopen(req, timeout=5) as resp:
            return resp.status, json.loads(resp.read())
    except urllib.error.HTTPError as e:
        return e.code, json.loads(e.read() or b"{}")


def test_health(server_url: str) -> None:
    with urllib.request.urlopen(f"{server_url}/health", timeout=5) as resp:
        assert resp.status == 200
        assert json.loads(resp.read())["status"] == "ok"


def test_unknown_path_404(server_url: str) -> None:
    with pytest.raises(urllib.error.HTTPError) as exc_info:
        urllib.request.urlopen(f"{server_url}/nope", timeout=5)
    assert exc_info.value.code == 404


def test_webhook_rejects_bad_signature(server_url: str) -> None:
    with patch("mergewhengreen.webhook.server.handle_github_event") as handler:
        status, _ = _post(
            f"{server_url}/webhook/github",
            b"{}",
            {"Content-Type": "application/json", "X-GitHub-Event": "status", "X-Hub-Signature-256": "sha256=bad"},
        )
    assert status == 401
    handler.assert_not_called()


def test_webhook_rejects_invalid_json(server_url: str) -> None:
    body = b"not json"
    status, _ = _post(
        f"{server_url}/webhook/github",
        body,
        {
            "Content-Type": "application/json",
            "X-GitHub-Event": "status",
            "X-Hub-Signature-256": compute_signature("s3cret", body),
        },
    )
    assert status == 400


@pytest.mark.parametrize("body", [b"[1, 2]", b"\xff\xfe\x00", b"\"text\"", b"null"])
def test_webhook_rejects_body_that_is_not_a_json_object(server_url: str, body: bytes) -> None:
    """Signed bodies that are not UTF-8 JSON objects get 400, not a dropped connection."""
    with patch("mergewhengreen.webhook.server.handle_github_event") as handler:
        status, data = _post(
            f"{server_url}/webhook/github",
            body,
            {
                "Content-Type": "application/json",
                "X-GitHub-Event": "status",
                "X-Hub-Signature-256": compute_signature("s3cret", body),
            },
        )
    assert status == 400
    assert data == {"error": "invalid json"}
    handler.assert_not_called()


def test_webhook_dispatches_signed_event(server_url: str) -> None:
    body = json.dumps({"action": "completed", "repository": {"full_name": "owner/repo"}}).encode()
    with patch(
        "mergewhengreen.webhook.server.handle_github_event", return_value=[MergeOutcome.MERGED]
    ) as handler:
        status, data = _post(
            f"{server_url}/webhook/github",
            body,
            {
                "Content-Type": "application/json",
                "X-GitHub-Event": "check_run",
                "X-Hub-Signature-256": compute_signature("s3cret", body),
            },
        )
    assert status == 200
    assert data == {"received": True, "outcomes": ["merged"]}
    handler.assert_called_once()
    assert handler.call_args[0][1] == "check_run"
    assert handler.call_args[0][2]["action"] == "completed"
