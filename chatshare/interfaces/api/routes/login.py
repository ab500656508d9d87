"""
Login Routes - GitHub OAuth sign-in.

``GET /api/login`` without a code sends the user to GitHub. GitHub sends
them back here with ``?code=...`` (and ``?state=...`` if a chat id was
given), and we answer with both session cookies and a redirect into the app.
"""

from __future__ import annotations

from fastapi import APIRouter, Depends, Query
from fastapi.responses import RedirectResponse

from chatshare.domains.login import LoginOrchestrator
from chatshare.interfaces.api.deps import get_login_orchestrator

router = APIRouter()


@router.get("")
async def login(
    code: str | None = Query(default=None, description="GitHub authorization code"),
    chat_id: str | None = Query(default=None, description="Chat to return to after login"),
    state: str | None = Query(default=None, description="chat_id echoed back by GitHub"),
    orchestrator: LoginOrchestrator = Depends(get_login_orchestrator),
) -> RedirectResponse:
    """Start or complete a GitHub login."""
    redirect = await orchestrator.handle(code=code, chat_id=chat_id or state)

    response = RedirectResponse(url=redirect.location, status_code=redirect.status_code)
    for cookie in redirect.set_cookies:
        response.headers.append("set-cookie", cookie)
    return response
