"""Ticket delivery endpoint: runs the same dispatcher as the CLI."""

import logging
import secrets

from fastapi import APIRouter, Depends, Header, HTTPException
from pydantic import BaseModel

from qsvault.config import Settings, get_settings
from qsvault.github.client import client_for_issue
from qsvault.ingest.dispatcher import IssueDispatcher
from qsvault.schemas.issue import Issue
from qsvault.vault.base import VaultStore
from qsvault.vault.local import LocalVaultStore

router = APIRouter(prefix="/api/issues", tags=["issues"])
logger = logging.getLogger(__name__)


class IngestionResponse(BaseModel):
    success: bool
    message: str


def get_vault_store() -> VaultStore:
    return LocalVaultStore()


def get_dispatcher(
    settings: Settings = Depends(get_settings),
    store: VaultStore = Depends(get_vault_store),
) -> IssueDispatcher:
    return IssueDispatcher.from_settings(settings, store, store)


def require_api_token(
    authorization: str | None = Header(default=None),
    settings: Settings = Depends(get_settings),
) -> None:
    if not settings.api_token:
        return
    expected = f"Bearer {settings.api_token}".encode()
    if not secrets.compare_digest((authorization or "").encode(), expected):
        raise HTTPException(status_code=401, detail="Invalid API token")


@router.post(
    "",
    response_model=IngestionResponse,
    dependencies=[Depends(require_api_token)],
)
async def process_issue(
    issue: Issue,
    settings: Settings = Depends(get_settings),
    dispatcher: IssueDispatcher = Depends(get_dispatcher),
) -> IngestionResponse:
    """Ingest a delivered ticket.

    Pipeline failures are reported in the body with `success: false`; only
    authorization problems are HTTP errors.
    """
    if settings.authorized_author and not issue.authored_by(settings.authorized_author):
        raise HTTPException(status_code=403, detail=f"Author {issue.author!r} is not authorized")

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

    logger.info("Issue #%s (%s): success=%s", issue.number, issue.title, result.success)
    return IngestionResponse(success=result.success, message=result.message)
