"""Result of a merge request."""

from pydantic import BaseModel


class MergeResult(BaseModel):
    """Merge response; ``merged`` may be false even when the call succeeded."""

    merged: bool
    sha: str | None = None
    message: str = ""
