"""Gate decisions of the merge pipeline.

Each gate is a pure function over already fetched data, so the pipeline
only decides when to fetch and in which order.
"""

from typing import Iterable, List

from mergewhengreen.constants import MERGE_LABEL
from mergewhengreen.models import CheckRun, CommitStatus, PullRequest, ReviewRequests


def is_eligible(pr: PullRequest) -> bool:
    """True when the host reports the PR mergeable and it carries the merge label.

    Unknown mergeability (None) is not ready.
    """
    return pr.mergeable is True and pr.has_label(MERGE_LABEL)


def _check_passed(run: CheckRun, name: str) -> bool:
    return run.app_login == name and run.status == "completed" and run.conclusion == "success"


def missing_checks(check_runs: List[CheckRun], required_checks: Iterable[str]) -> List[str]:
    """Required check names (app logins) without a completed, successful run."""
    return [name for name in required_checks if not any(_check_passed(run, name) for run in check_runs)]


def missing_statuses(statuses: List[CommitStatus], required_statuses: Iterable[str]) -> List[str]:
    """Required contexts without an entry in state success."""
    return [
        context
        for context in required_statuses
        if not any(s.context == context and s.state == "success" for s in statuses)
    ]


def checks_satisfied(check_runs: List[CheckRun], required_checks: Iterable[str]) -> bool:
    return not missing_checks(check_runs, required_checks)


def statuses_satisfied(statuses: List[CommitStatus], required_statuses: Iterable[str]) -> bool:
    return not missing_statuses(statuses, required_statuses)


def reviews_satisfied(review_requests: ReviewRequests) -> bool:
    """No requested user or team review is still pending."""
    return review_requests.is_empty
