"""GitHub webhook signature verification (X-Hub-Signature-256)."""

import hashlib
import hmac


def compute_signature(secret: str, body: bytes) -> str:
    digest = hmac.new(secret.encode("utf-8"), body, hashlib.sha256).hexdigest()
    return f"sha256={digest}"


def verify_signature(secret: str, body: bytes, signature_header: str | None) -> bool:
    """Check the request body against the signature header.

    An empty secret disables verification.
    """
    if not secret:
        return True
    if not signature_header:
        return False
    return hmac.compare_digest(compute_signature(secret, body), signature_header.strip())
