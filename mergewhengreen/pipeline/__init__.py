"""Merge pipeline: eligibility gates, merge and branch cleanup."""

from mergewhengreen.pipeline.gates import (
    checks_satisfied,
    is_eligible,
    reviews_satisfied,
    statuses_satisfied,
)
from mergewhengreen.pipeline.merge_when_green import MergeOutcome, merge_when_green

__all__ = [
    "MergeOutcome",
    "checks_satisfied",
    "is_eligible",
    "merge_when_green",
    "reviews_satisfied",
    "statuses_satisfied",
]
