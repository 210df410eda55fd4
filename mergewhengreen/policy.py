"""Resolve the merge policy of a repository from its config file."""

import logging

import yaml
from pydantic import ValidationError

from mergewhengreen.adapters.base import GitPlatformAdapter
from mergewhengreen.constants import CONFIG_FILE_PATH
from mergewhengreen.models import Policy

LOG = logging.getLogger("mergewhengreen.policy")


class PolicyError(Exception):
    """Raised when the repository policy file cannot be parsed or validated."""


def parse_policy(text: str | None) -> Policy:
    """Parse policy YAML; empty or missing text gives the default policy."""
    if not text or not text.strip():
        return Policy()
    try:
        raw = yaml.safe_load(text)
    except yaml.YAMLError as e:
        raise PolicyError(f"Invalid YAML in {CONFIG_FILE_PATH}: {e}") from e
    if raw is None:
        return Policy()
    if not isinstance(raw, dict):
        raise PolicyError(f"{CONFIG_FILE_PATH} must be a mapping, got {type(raw).__name__}")
    try:
        return Policy.model_validate(raw)
    except ValidationError as e:
        raise PolicyError(f"Invalid policy in {CONFIG_FILE_PATH}: {e}") from e


def resolve_policy(
    adapter: GitPlatformAdapter,
    repo: str,
    log: logging.Logger | None = None,
) -> Policy:
    """Load the policy for repo, falling back to defaults when the file is absent."""
    logger = log or LOG
    text = adapter.get_file_content(repo, CONFIG_FILE_PATH)
    if text is None:
        logger.debug("%s: no %s, using default policy", repo, CONFIG_FILE_PATH)
        return Policy()
    policy = parse_policy(text)
    logger.debug(
        "%s: policy checks=%s statuses=%s require_reviewers=%s",
        repo,
        policy.required_checks,
        policy.required_statuses,
        policy.require_approval_from_requested_reviewers,
    )
    return policy
