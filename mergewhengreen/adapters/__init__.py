"""Git platform adapters."""

from mergewhengreen.adapters.base import GitPlatformAdapter, GitPlatformError
from mergewhengreen.adapters.github import GitHubAdapter

__all__ = ["GitPlatformAdapter", "GitPlatformError", "GitHubAdapter"]
