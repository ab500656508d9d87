"""
Share Routes - Shared chat storage.

- ``PUT /api/share/{user}/{id}``: store a chat (owner only, JSON body)
- ``GET /api/share/{user}/{id}``: fetch a chat (public)
- ``DELETE /api/share/{user}/{id}``: remove a chat (owner only)

Mutating routes re-issue both session cookies on success.
"""

from __future__ import annotations

from fastapi import APIRouter, Depends, Request, Response
from fastapi.responses import JSONResponse

from chatshare.domains.sharing import ShareGateway, ShareResult
from chatshare.domains.tokens import extract_tokens
from chatshare.interfaces.api.deps import get_share_gateway

router = APIRouter()


def _segments(key: str) -> list[str]:
    return key.split("/") if key else []


def _result_response(result: ShareResult) -> JSONResponse:
    response = JSONResponse({"message": result.message})
    for cookie in result.set_cookies:
        response.headers.append("set-cookie", cookie)
    return response


@router.put("/{key:path}")
async def put_share(
    key: str,
    request: Request,
    gateway: ShareGateway = Depends(get_share_gateway),
) -> JSONResponse:
    """Share a chat under the caller's username."""
    result = await gateway.create(
        _segments(key),
        request.headers.get("content-type"),
        await request.body(),
        extract_tokens(request),
    )
    return _result_response(result)


@router.get("/{key:path}")
async def get_share(
    key: str,
    gateway: ShareGateway = Depends(get_share_gateway),
) -> Response:
    """Fetch a shared chat. No authentication required."""
    stored = await gateway.read(_segments(key))
    return Response(
        content=stored.body,
        media_type=stored.content_type,
        headers={"ETag": stored.http_etag},
    )


@router.delete("/{key:path}")
async def delete_share(
    key: str,
    request: Request,
    gateway: ShareGateway = Depends(get_share_gateway),
) -> JSONResponse:
    """Delete one of the caller's shared chats."""
    result = await gateway.delete(_segments(key), extract_tokens(request))
    return _result_response(result)
