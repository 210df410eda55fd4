"""Handle GitHub webhook events that may make a pull request ready to merge.

Every event resolves to a list of PR numbers; each PR is re-fetched (so
``mergeable`` is current) and run through the merge pipeline on its own.
"""

import logging
from typing import Any, Dict, List

import requests

from mergewhengreen.adapters.base import GitPlatformAdapter, GitPlatformError
from mergewhengreen.adapters.github import GitHubAdapter
from mergewhengreen.constants import MERGE_LABEL
from mergewhengreen.pipeline import MergeOutcome, merge_when_green
from mergewhengreen.policy import PolicyError

LOG = logging.getLogger("mergewhengreen.webhook.handlers")

PULL_REQUEST_ACTIONS = ("labeled", "synchronize", "reopened", "ready_for_review")


def _make_adapter(config: Any) -> GitPlatformAdapter | None:
    token = getattr(config, "github_token_resolved", None)
    if not token:
        return None
    return GitHubAdapter(
        token=token,
        api_url=getattr(config.github, "api_url", "https://api.github.com"),
    )


def _pr_numbers_from_pull_request(payload: Dict[str, Any]) -> List[int]:
    action = payload.get("action")
    if action not in PULL_REQUEST_ACTIONS:
        return []
    if action == "labeled":
        label = payload.get("label") or {}
        if label.get("name") != MERGE_LABEL:
            return []
    number = (payload.get("pull_request") or {}).get("number")
    return [int(number)] if number is not None else []


def _pr_numbers_from_review(payload: Dict[str, Any]) -> List[int]:
    if payload.get("action") != "submitted":
        return []
    number = (payload.get("pull_request") or {}).get("number")
    return [int(number)] if number is not None else []


def _pr_numbers_from_check(payload: Dict[str, Any], key: str) -> List[int]:
    if payload.get("action") != "completed":
        return []
    check = payload.get(key) or {}
    return [int(p["number"]) for p in check.get("pull_requests") or [] if isinstance(p, dict) and "number" in p]


def _pr_numbers_from_status(
    adapter: GitPlatformAdapter,
    repo: str,
    payload: Dict[str, Any],
) -> List[int]:
    if payload.get("state") != "success":
        return []
    sha = payload.get("sha")
    if not sha:
        return []
    return [pr.number for pr in adapter.list_open_pull_requests(repo) if pr.head_sha == sha]


def _evaluate(
    adapter: GitPlatformAdapter,
    repo: str,
    pr_number: int,
    log: logging.Logger,
) -> MergeOutcome | None:
    """Fetch PR and run the pipeline; API or policy errors are logged, not raised."""
    try:
        pr = adapter.get_pr(repo, pr_number)
        return merge_when_green(adapter, repo, pr, log=log)
    except (GitPlatformError, PolicyError, requests.RequestException) as e:
        log.exception("PR #%s in %s: evaluation failed: %s", pr_number, repo, e)
        return None


def handle_github_event(
    config: Any,
    event: str,
    payload: Dict[str, Any],
    adapter: GitPlatformAdapter | None = None,
    log: logging.Logger | None = None,
) -> List[MergeOutcome]:
    """Handle a GitHub webhook event.

    Supported events:
    - pull_request (labeled with the merge label, synchronize, reopened, ready_for_review)
    - pull_request_review (submitted)
    - check_run, check_suite (completed): PRs listed in the payload
    - status (state=success): open PRs whose head SHA matches

    Returns the outcome for each evaluated PR (PRs whose evaluation failed
    are left out).
    """
    logger = log or LOG

    repo_payload = payload.get("repository") or {}
    repo = repo_payload.get("full_name") or ""
    if not repo:
        logger.warning("%s payload missing repository.full_name", event)
        return []
    configured = getattr(config.bot, "repository", None)
    if configured and repo != configured:
        logger.debug("Skipping %s: repository %s is not configured repo", event, repo)
        return []

    if event not in ("pull_request", "pull_request_review", "check_run", "check_suite", "status"):
        return []

    if adapter is None:
        adapter = _make_adapter(config)
        if adapter is None:
            logger.warning("No GitHub token; cannot process %s event", event)
            return []

    if event == "pull_request":
        numbers = _pr_numbers_from_pull_request(payload)
    elif event == "pull_request_review":
        numbers = _pr_numbers_from_review(payload)
    elif event in ("check_run", "check_suite"):
        numbers = _pr_numbers_from_check(payload, event)
    else:
        try:
            numbers = _pr_numbers_from_status(adapter, repo, payload)
        except (GitPlatformError, requests.RequestException) as e:
            logger.exception("status event in %s: listing open PRs failed: %s", repo, e)
            return []

    outcomes: List[MergeOutcome] = []
    for number in numbers:
        outcome = _evaluate(adapter, repo, number, logger)
        if outcome is not None:
            outcomes.append(outcome)
    return outcomes
