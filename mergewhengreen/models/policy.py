"""Repository merge policy."""

from typing import List

from pydantic import BaseModel, ConfigDict, Field


class Policy(BaseModel):
    """Per-repository merge requirements.

    Read from the repository config file, which uses camelCase keys
    (requiredChecks, requiredStatuses, requireApprovalFromRequestedReviewers).
    Snake_case names are accepted as well; unknown keys are ignored.
    """

    model_config = ConfigDict(populate_by_name=True, extra="ignore", frozen=True)

    required_checks: List[str] = Field(
        default_factory=list,
        alias="requiredChecks",
        description="Check run app logins that must complete successfully",
    )
    required_statuses: List[str] = Field(
        default_factory=list,
        alias="requiredStatuses",
        description="Commit status contexts that must report success",
    )
    require_approval_from_requested_reviewers: bool = Field(
        default=False,
        alias="requireApprovalFromRequestedReviewers",
        description="Wait until no requested user or team review is pending",
    )
