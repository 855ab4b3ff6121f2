"""Command-line entry point.

    qsvault process-issue --issue-number 12 --issue-title HealthDataExport \\
        --issue-body "$BODY" --issue-author "$AUTHOR"
    qsvault ingest-export export.json
"""

import argparse
import asyncio
import logging
import sys
from collections.abc import Sequence
from pathlib import Path

import httpx

from qsvault.config import Settings, get_settings
from qsvault.github.client import client_for_issue
from qsvault.ingest.dispatcher import IssueDispatcher
from qsvault.ingest.health import ingest_health_export
from qsvault.ingest.parser import PayloadError, parse_health_export
from qsvault.schemas.issue import Issue
from qsvault.vault.local import LocalVaultStore

logger = logging.getLogger(__name__)


def create_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="qsvault",
        description="Ingest health and location exports into the JSON vault.",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    issue = subparsers.add_parser("process-issue", help="Ingest the payload of a ticket")
    issue.add_argument("--issue-number", type=int, help="GitHub issue number")
    issue.add_argument("--issue-title", help="Issue title, selects the pipeline")
    issue.add_argument("--issue-body", help="Issue body (JSON text)")
    issue.add_argument("--issue-author", help="Login of the issue author")
    issue.add_argument("--issue-created-at", help="Issue creation timestamp")
    issue.set_defaults(handler=process_issue)

    export = subparsers.add_parser(
        "ingest-export", help="Ingest a Health Auto Export JSON file directly"
    )
    export.add_argument("file", type=Path, help="Path to the export JSON file")
    export.set_defaults(handler=ingest_export)

    return parser


async def process_issue(args: argparse.Namespace, settings: Settings) -> int:
    if not args.issue_number or not args.issue_title or args.issue_body is None:
        logger.error("Missing required issue parameters")
        return 1
    if not args.issue_body.strip():
        logger.error("Issue body cannot be empty")
        return 1

    issue = Issue(
        title=args.issue_title,
        body=args.issue_body,
        created_at=args.issue_created_at,
        number=args.issue_number,
        author=args.issue_author,
    )
    if settings.authorized_author and not issue.authored_by(settings.authorized_author):
        logger.error(
            "Issue author %r is not authorized, expected %r",
            args.issue_author,
            settings.authorized_author,
        )
        return 1

    store = LocalVaultStore()
    dispatcher = IssueDispatcher.from_settings(settings, store, store)
    github = client_for_issue(
        settings.github_token,
        settings.github_repository,
        issue.number,
        api_url=settings.github_api_url,
    )

    if github is None:
        result = await dispatcher.dispatch(issue)
    else:
        async with github:
            result = await dispatcher.dispatch(issue, notifier=github)
            if result.success and dispatcher.handles(issue.title):
                try:
                    await github.close_issue()
                except httpx.HTTPError:
                    logger.exception("Failed to close issue #%s", issue.number)

    print(result.message)
    return 0 if result.success else 1


async def ingest_export(args: argparse.Namespace, settings: Settings) -> int:
    try:
        export = parse_health_export(args.file.read_text(encoding="utf-8"))
    except OSError as e:
        logger.error("Cannot read %s: %s", args.file, e)
        return 1
    except PayloadError as e:
        logger.error("%s", e)
        return 1

    store = LocalVaultStore()
    result = await ingest_health_export(
        export,
        reader=store,
        writer=store,
        base_path=settings.healthkit_dir,
        policy=settings.conflict_policy,
    )
    print(result.message)
    return 0 if result.success else 1


def main(argv: Sequence[str] | None = None) -> int:
    settings = get_settings()
    logging.basicConfig(
        level=settings.log_level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    args = create_parser().parse_args(argv)
    return asyncio.run(args.handler(args, settings))


if __name__ == "__main__":
    sys.exit(main())
