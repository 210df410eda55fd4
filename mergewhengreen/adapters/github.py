"""GitHub API adapter."""

import base64
from typing import Any, Dict, List
from urllib.parse import quote

import requests

from mergewhengreen.adapters.base import GitPlatformAdapter, GitPlatformError
from mergewhengreen.models import CheckRun, CommitStatus, MergeResult, PullRequest, ReviewRequests


def _pr_from_api(data: Dict[str, Any]) -> PullRequest:
    head = data.get("head") or {}
    labels = [lb["name"] for lb in (data.get("labels") or []) if isinstance(lb, dict) and "name" in lb]
    return PullRequest(
        number=data["number"],
        mergeable=data.get("mergeable"),
        labels=labels,
        head_ref=head.get("ref", ""),
        head_sha=head.get("sha", ""),
        state=data.get("state", "open"),
        html_url=data.get("html_url"),
    )


def _check_run_from_api(data: Dict[str, Any]) -> CheckRun:
    app = data.get("app") or {}
    owner = app.get("owner") or {}
    return CheckRun(
        status=data.get("status") or "",
        conclusion=data.get("conclusion"),
        app_login=owner.get("login", ""),
        name=data.get("name") or "",
    )


def _login(entry: Any, key: str) -> str:
    # Reviewer entries are objects; tolerate bare names as well
    if isinstance(entry, dict):
        return str(entry.get(key) or "")
    return str(entry)


class GitHubAdapter(GitPlatformAdapter):
    """GitHub API implementation."""

    def __init__(self, token: str, api_url: str = "https://api.github.com") -> None:
        self._api_url = api_url.rstrip("/")
        self._session = requests.Session()
        self._session.headers["Authorization"] = f"token {token}"
        self._session.headers["Accept"] = "application/vnd.github.v3+json"

    def _request(
        self,
        method: str,
        path: str,
        params: Dict[str, Any] | None = None,
        json: Dict[str, Any] | None = None,
    ) -> requests.Response:
        url = f"{self._api_url}{path}" if path.startswith("/") else f"{self._api_url}/{path}"
        resp = self._session.request(method, url, params=params, json=json, timeout=30)
        if resp.status_code >= 400:
            msg = resp.text or resp.reason or str(resp.status_code)
            try:
                msg = resp.json().get("message", msg)
            except (ValueError, AttributeError):
                pass
            raise GitPlatformError(f"{resp.status_code}: {msg}", status_code=resp.status_code)
        return resp

    def list_check_runs(self, repo: str, ref: str) -> List[CheckRun]:
        resp = self._request(
            "GET",
            f"/repos/{repo}/commits/{quote(ref, safe='')}/check-runs",
            params={"per_page": 100},
        )
        data = resp.json() or {}
        return [_check_run_from_api(d) for d in data.get("check_runs") or []]

    def get_combined_status(self, repo: str, ref: str) -> List[CommitStatus]:
        resp = self._request(
            "GET",
            f"/repos/{repo}/commits/{quote(ref, safe='')}/status",
            params={"per_page": 100},
        )
        data = resp.json() or {}
        return [
            CommitStatus(context=s.get("context", ""), state=s.get("state", ""))
            for s in data.get("statuses") or []
        ]

    def list_pending_review_requests(self, repo: str, pr_number: int) -> ReviewRequests:
        resp = self._request("GET", f"/repos/{repo}/pulls/{pr_number}/requested_reviewers")
        data = resp.json() or {}
        return ReviewRequests(
            pending_users=[_login(u, "login") for u in data.get("users") or []],
            pending_teams=[_login(t, "slug") for t in data.get("teams") or []],
        )

    def merge_pull_request(self, repo: str, pr_number: int) -> MergeResult:
        resp = self._request("PUT", f"/repos/{repo}/pulls/{pr_number}/merge", json={})
        data = resp.json() or {}
        return MergeResult(
            merged=bool(data.get("merged")),
            sha=data.get("sha"),
            message=data.get("message") or "",
        )

    def delete_branch(self, repo: str, ref: str) -> None:
        self._request("DELETE", f"/repos/{repo}/git/refs/heads/{quote(ref, safe='/')}")

    def get_pr(self, repo: str, pr_number: int) -> PullRequest:
        resp = self._request("GET", f"/repos/{repo}/pulls/{pr_number}")
        return _pr_from_api(resp.json())

    def list_open_pull_requests(self, repo: str) -> List[PullRequest]:
        resp = self._request("GET", f"/repos/{repo}/pulls", params={"state": "open", "per_page": 100})
        data = resp.json() or []
        return [_pr_from_api(d) for d in data]

    def get_file_content(self, repo: str, path: str) -> str | None:
        try:
            resp = self._request("GET", f"/repos/{repo}/contents/{quote(path, safe='/')}")
        except GitPlatformError as e:
            if e.status_code == 404:
                return None
            raise
        data = resp.json() or {}
        content = data.get("content")
        if content is None:
            return None
        if data.get("encoding", "base64") == "base64":
            return base64.b64decode(content).decode("utf-8")
        return str(content)
