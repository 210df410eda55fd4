"""Abstract base for Git platform adapters."""

from abc import ABC, abstractmethod
from typing import List

from mergewhengreen.models import CheckRun, CommitStatus, MergeResult, PullRequest, ReviewRequests


class GitPlatformError(Exception):
    """Raised when a Git platform API call fails."""

    def __init__(self, message: str, status_code: int | None = None) -> None:
        super().__init__(message)
        self.status_code = status_code


class GitPlatformAdapter(ABC):
    """Operations the merge pipeline needs from a Git hosting platform.

    All methods take the repository as ``owner/repo``. Implementations
    normalize API payloads into the models in ``mergewhengreen.models``.
    """

    @abstractmethod
    def list_check_runs(self, repo: str, ref: str) -> List[CheckRun]:
        """List check runs reported against ref."""
        ...

    @abstractmethod
    def get_combined_status(self, repo: str, ref: str) -> List[CommitStatus]:
        """Return the latest status for each context on ref."""
        ...

    @abstractmethod
    def list_pending_review_requests(self, repo: str, pr_number: int) -> ReviewRequests:
        """Return users and teams whose requested review is still pending."""
        ...

    @abstractmethod
    def merge_pull_request(self, repo: str, pr_number: int) -> MergeResult:
        """Merge a pull request."""
        ...

    @abstractmethod
    def delete_branch(self, repo: str, ref: str) -> None:
        """Delete branch ref (name without refs/heads/)."""
        ...

    @abstractmethod
    def get_pr(self, repo: str, pr_number: int) -> PullRequest:
        """Fetch PR by number."""
        ...

    def list_open_pull_requests(self, repo: str) -> List[PullRequest]:
        """List open PRs. Override if needed."""
        return []

    def get_file_content(self, repo: str, path: str) -> str | None:
        """Return file text from the default branch, None if absent. Override if needed."""
        return None
