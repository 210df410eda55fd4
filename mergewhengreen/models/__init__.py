"""Data models for pull requests, checks, statuses and policy (Pydantic)."""

from mergewhengreen.models.check_run import CheckRun
from mergewhengreen.models.commit_status import CommitStatus
from mergewhengreen.models.merge_result import MergeResult
from mergewhengreen.models.policy import Policy
from mergewhengreen.models.pr import PullRequest
from mergewhengreen.models.review_requests import ReviewRequests

__all__ = ["CheckRun", "CommitStatus", "MergeResult", "Policy", "PullRequest", "ReviewRequests"]
