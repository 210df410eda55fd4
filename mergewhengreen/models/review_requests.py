"""Pending review requests on a pull request."""

from typing import List

from pydantic import BaseModel, Field


class ReviewRequests(BaseModel):
    """Users and teams asked for a review that have not submitted one yet."""

    pending_users: List[str] = Field(default_factory=list)
    pending_teams: List[str] = Field(default_factory=list)

    @property
    def is_empty(self) -> bool:
        return not self.pending_users and not self.pending_teams
