"""Tests for the individual pipeline gates."""

from mergewhengreen.constants import MERGE_LABEL
from mergewhengreen.models import CheckRun, CommitStatus, PullRequest, ReviewRequests
from mergewhengreen.pipeline.gates import (
    checks_satisfied,
    is_eligible,
    missing_checks,
    missing_statuses,
    reviews_satisfied,
    statuses_satisfied,
)


class TestIsEligible:
    """is_eligible requires mergeable=True and the merge label."""

    def test_mergeable_with_label(self) -> None:
        assert is_eligible(PullRequest(number=1, mergeable=True, labels=["bug", MERGE_LABEL]))

    def test_not_mergeable(self) -> None:
        assert not is_eligible(PullRequest(number=1, mergeable=False, labels=[MERGE_LABEL]))

    def test_unknown_mergeable_is_not_ready(self) -> None:
        assert not is_eligible(PullRequest(number=1, mergeable=None, labels=[MERGE_LABEL]))

    def test_missing_label(self) -> None:
        assert not is_eligible(PullRequest(number=1, mergeable=True, labels=[]))


class TestChecks:
    """Required checks match on app login, completed and success."""

    def test_empty_requirement_is_satisfied(self) -> None:
        assert checks_satisfied([], [])

    def test_matching_success(self) -> None:
        runs = [CheckRun(status="completed", conclusion="success", app_login="circleci")]
        assert checks_satisfied(runs, ["circleci"])

    def test_match_is_by_app_login_not_name(self) -> None:
        runs = [CheckRun(status="completed", conclusion="success", app_login="github-actions", name="circleci")]
        assert not checks_satisfied(runs, ["circleci"])

    def test_any_successful_run_satisfies(self) -> None:
        runs = [
            CheckRun(status="completed", conclusion="failure", app_login="circleci"),
            CheckRun(status="completed", conclusion="success", app_login="circleci"),
        ]
        assert checks_satisfied(runs, ["circleci"])

    def test_missing_checks_lists_unmet_names(self) -> None:
        runs = [
            CheckRun(status="completed", conclusion="success", app_login="circleci"),
            CheckRun(status="queued", conclusion=None, app_login="travis-ci"),
        ]
        assert missing_checks(runs, ["circleci", "travis-ci", "codecov"]) == ["travis-ci", "codecov"]


class TestStatuses:
    """Required statuses match on context and state success."""

    def test_empty_requirement_is_satisfied(self) -> None:
        assert statuses_satisfied([CommitStatus(context="jenkins", state="failure")], [])

    def test_pending_is_not_success(self) -> None:
        assert not statuses_satisfied([CommitStatus(context="jenkins", state="pending")], ["jenkins"])

    def test_missing_statuses_lists_unmet_contexts(self) -> None:
        statuses = [
            CommitStatus(context="jenkins", state="success"),
            CommitStatus(context="ci/gitlab/gitlab.com", state="error"),
        ]
        assert missing_statuses(statuses, ["jenkins", "ci/gitlab/gitlab.com"]) == ["ci/gitlab/gitlab.com"]


class TestReviews:
    def test_no_pending_requests(self) -> None:
        assert reviews_satisfied(ReviewRequests())

    def test_pending_user(self) -> None:
        assert not reviews_satisfied(ReviewRequests(pending_users=["octocat"]))

    def test_pending_team(self) -> None:
        assert not reviews_satisfied(ReviewRequests(pending_teams=["core"]))
