"""Pull request model."""

from typing import List

from pydantic import BaseModel, Field


class PullRequest(BaseModel):
    """Pull request snapshot as reported by the host.

    ``mergeable`` is tri-state: None means the host has not computed it yet.
    """

    number: int
    mergeable: bool | None = None
    labels: List[str] = Field(default_factory=list)
    head_ref: str = ""
    head_sha: str = ""
    state: str = "open"
    html_url: str | None = None

    def has_label(self, name: str) -> bool:
        return name in self.labels
