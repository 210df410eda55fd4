"""Check run reported against a ref."""

from pydantic import BaseModel


class CheckRun(BaseModel):
    """Check run; ``app_login`` is the login of the app that authored it."""

    status: str
    conclusion: str | None = None
    app_login: str = ""
    name: str = ""
