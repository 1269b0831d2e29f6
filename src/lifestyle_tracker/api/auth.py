"""API token guard for lifestyle endpoints."""

from __future__ import annotations

import secrets
from typing import TYPE_CHECKING

from fastapi import Depends, Header, HTTPException, Request, status

if TYPE_CHECKING:
    from lifestyle_tracker.containers import AppContainer


def _get_api_token(request: Request) -> str:
    container: AppContainer = request.app.state.container
    return container.settings.api_token


def _bearer_token(authorization: str | None) -> str | None:
    if not authorization:
        return None
    scheme, _, token = authorization.partition(" ")
    if scheme.lower() != "bearer" or not token:
        return None
    return token.strip()


async def require_api_token(
    x_api_token: str | None = Header(default=None),
    authorization: str | None = Header(default=None),
    api_token: str = Depends(_get_api_token),
) -> None:
    """Ensure requests carry the API token as X-Api-Token or a bearer token."""
    supplied = x_api_token or _bearer_token(authorization)
    if not supplied or not secrets.compare_digest(supplied, api_token):
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED)
