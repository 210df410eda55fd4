"""
Merge a pull request once it is green, then delete its source branch.

Gates run in order and stop at the first unmet one:

1. eligibility: mergeable and labelled (no API calls)
2. required check runs on the head ref
3. required commit statuses on the head ref
4. no pending requested reviewers (only when the policy asks for it)

When all pass, the PR is merged and, if the host confirms the merge, the
head branch is deleted. Unmet gates end the run quietly. API errors are
not caught here and reach the caller unchanged.
"""

import logging
from enum import Enum

from mergewhengreen.adapters.base import GitPlatformAdapter
from mergewhengreen.models import Policy, PullRequest
from mergewhengreen.pipeline.gates import (
    is_eligible,
    missing_checks,
    missing_statuses,
    reviews_satisfied,
)
from mergewhengreen.policy import resolve_policy

LOG = logging.getLogger("mergewhengreen.pipeline.merge_when_green")


class MergeOutcome(str, Enum):
    """Terminal state of one pipeline run."""

    SKIPPED = "skipped"
    NOT_MERGED = "not_merged"
    MERGED = "merged"


def merge_when_green(
    adapter: GitPlatformAdapter,
    repo: str,
    pr: PullRequest,
    policy: Policy | None = None,
    log: logging.Logger | None = None,
) -> MergeOutcome:
    """Run the gates for pr and merge it when all pass.

    When policy is None it is resolved from the repository config file,
    after the eligibility gate so ineligible PRs cost no API calls.
    """
    logger = log or LOG

    if not is_eligible(pr):
        logger.debug("PR #%s: skipped (mergeable=%s, labels=%s)", pr.number, pr.mergeable, pr.labels)
        return MergeOutcome.SKIPPED

    if policy is None:
        policy = resolve_policy(adapter, repo, log=logger)

    check_runs = adapter.list_check_runs(repo, pr.head_ref)
    missing = missing_checks(check_runs, policy.required_checks)
    if missing:
        logger.info("PR #%s: skipped, checks not successful: %s", pr.number, ", ".join(missing))
        return MergeOutcome.SKIPPED

    statuses = adapter.get_combined_status(repo, pr.head_ref)
    missing = missing_statuses(statuses, policy.required_statuses)
    if missing:
        logger.info("PR #%s: skipped, statuses not successful: %s", pr.number, ", ".join(missing))
        return MergeOutcome.SKIPPED

    if policy.require_approval_from_requested_reviewers:
        review_requests = adapter.list_pending_review_requests(repo, pr.number)
        if not reviews_satisfied(review_requests):
            logger.info(
                "PR #%s: skipped, pending reviews from users=%s teams=%s",
                pr.number,
                review_requests.pending_users,
                review_requests.pending_teams,
            )
            return MergeOutcome.SKIPPED

    result = adapter.merge_pull_request(repo, pr.number)
    if not result.merged:
        logger.warning("PR #%s: merge not completed: %s", pr.number, result.message or "no message")
        return MergeOutcome.NOT_MERGED
    logger.info("PR #%s: merged (%s)", pr.number, result.sha or "unknown sha")

    adapter.delete_branch(repo, pr.head_ref)
    logger.info("PR #%s: deleted branch %s", pr.number, pr.head_ref)
    return MergeOutcome.MERGED
