"""Commit status entry from the combined status of a ref."""

from pydantic import BaseModel


class CommitStatus(BaseModel):
    """Commit status (state is success, failure, pending or error)."""

    context: str
    state: str
