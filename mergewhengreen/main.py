"""Merge When Green entry point.

Two commands: serve (webhook server, evaluates PRs on GitHub events) and
evaluate (run the merge pipeline once for one PR).
Usage: mergewhengreen serve | mergewhengreen evaluate --repo owner/repo --pr N.
"""

import argparse
import logging
import sys
from pathlib import Path

import requests

from mergewhengreen.adapters.base import GitPlatformError
from mergewhengreen.adapters.github import GitHubAdapter
from mergewhengreen.config import AppConfig, load_config
from mergewhengreen.logging import configure_logging
from mergewhengreen.pipeline import merge_when_green
from mergewhengreen.policy import PolicyError
from mergewhengreen.webhook.server import run_webhook_server


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse CLI with optional subcommand (serve | evaluate); serve is the default."""
    argv = argv if argv is not None else sys.argv[1:]
    sub = "serve"
    rest = list(argv)
    if argv and argv[0] in ("serve", "evaluate"):
        sub = argv[0]
        rest = argv[1:]

    parser = argparse.ArgumentParser(
        prog=f"mergewhengreen {sub}",
        description="Merge labelled pull requests once required checks and statuses pass",
    )
    parser.add_argument(
        "--config",
        "-c",
        type=Path,
        default=Path("config.yaml"),
        help="Path to YAML config file",
    )
    parser.add_argument(
        "--check",
        action="store_true",
        help="Only load and validate config, then exit",
    )
    if sub == "evaluate":
        parser.add_argument("--repo", required=True, help="Repository (owner/repo)")
        parser.add_argument("--pr", type=int, required=True, help="Pull request number")
    parsed = parser.parse_args(rest)
    parsed.subcommand = sub
    return parsed


def run_evaluate(config: AppConfig, repo: str, pr_number: int) -> int:
    """Run the pipeline for one PR and print the outcome."""
    log = logging.getLogger("mergewhengreen.evaluate")
    token = config.github_token_resolved
    if not token:
        log.error("No GitHub token; set GITHUB_TOKEN or GITHUB_TOKEN_FILE")
        return 1
    adapter = GitHubAdapter(token=token, api_url=config.github.api_url)
    try:
        pr = adapter.get_pr(repo, pr_number)
        outcome = merge_when_green(adapter, repo, pr, log=log)
    except (GitPlatformError, PolicyError, requests.RequestException) as e:
        log.error("PR #%s in %s: %s", pr_number, repo, e)
        return 1
    print(f"{repo}#{pr_number}: {outcome.value}")
    return 0


def run_serve(config: AppConfig) -> None:
    log = logging.getLogger("mergewhengreen.serve")
    if not config.webhook.enabled:
        log.warning("Webhook disabled in config; nothing to serve.")
        return
    log.info(
        "merge-when-green started | repo=%s | webhook=%s:%s%s",
        config.bot.repository or "*",
        config.webhook.host,
        config.webhook.port,
        config.github.webhook_path,
    )
    run_webhook_server(config)


def main(argv: list[str] | None = None) -> int:
    """Entry point: dispatch to serve or evaluate."""
    args = parse_args(argv)
    config = load_config(args.config)
    configure_logging(config.logging)

    if args.check:
        print("Config OK:", config.bot.repository or "*", config.github.api_url)
        return 0

    try:
        if args.subcommand == "evaluate":
            return run_evaluate(config, args.repo, args.pr)
        run_serve(config)
    except KeyboardInterrupt:
        return 0
    except Exception as e:
        logging.getLogger("mergewhengreen").exception("Fatal error: %s", e)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
