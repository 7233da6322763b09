"""FastAPI dependency for LinkedIn token authentication."""

import logging
from typing import Any

from fastapi import HTTPException, Request, status

from .errors import InternalOAuthError
from .strategy import AuthError, AuthFailure, AuthRequest, LinkedInTokenStrategy

logger = logging.getLogger(__name__)


async def request_from_starlette(request: Request) -> AuthRequest:
    """
    Build an AuthRequest from a Starlette request.

    JSON and form bodies are both accepted; anything else is treated
    as an empty body.
    """
    body: dict = {}
    if request.method not in ("GET", "HEAD"):
        content_type = request.headers.get("content-type", "")
        if content_type.startswith("application/json"):
            try:
                payload = await request.json()
            except ValueError:
                raise HTTPException(
                    status_code=status.HTTP_400_BAD_REQUEST,
                    detail="Malformed JSON body",
                )
            if isinstance(payload, dict):
                body = payload
        elif content_type.startswith(
            ("application/x-www-form-urlencoded", "multipart/form-data")
        ):
            form = await request.form()
            body = dict(form)
    return AuthRequest(query=dict(request.query_params), body=body)


class LinkedInTokenAuth:
    """
    Dependency that authenticates the request with a LinkedIn token.

    Usage:
        linkedin_user = LinkedInTokenAuth(strategy)

        @app.post("/auth/linkedin/token")
        async def login(user=Depends(linkedin_user)):
            ...

    Returns:
        The user produced by the verify callback

    Raises:
        HTTPException: 401 on failure, 502 if LinkedIn could not be reached,
            500 for any other error
    """

    def __init__(self, strategy: LinkedInTokenStrategy):
        self.strategy = strategy

    async def __call__(self, request: Request) -> Any:
        auth_request = await request_from_starlette(request)
        outcome = await self.strategy.authenticate(auth_request)

        if isinstance(outcome, AuthFailure):
            detail = "LinkedIn authentication failed"
            if isinstance(outcome.info, dict) and outcome.info.get("message"):
                detail = outcome.info["message"]
            raise HTTPException(
                status_code=status.HTTP_401_UNAUTHORIZED,
                detail=detail,
            )

        if isinstance(outcome, AuthError):
            if isinstance(outcome.error, InternalOAuthError):
                raise HTTPException(
                    status_code=status.HTTP_502_BAD_GATEWAY,
                    detail=str(outcome.error),
                )
            logger.error(f"LinkedIn authentication error: {outcome.error}")
            raise HTTPException(
                status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
                detail="Authentication error",
            )

        return outcome.user
