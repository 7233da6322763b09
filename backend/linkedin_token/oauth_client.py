"""OAuth 1.0a client used to make signed requests on behalf of a user."""

import logging
from typing import Optional, Protocol

import httpx
from authlib.integrations.httpx_client import OAuth1Auth

from .errors import OAuthRequestError

logger = logging.getLogger(__name__)


class OAuthClient(Protocol):
    """Token-bearing HTTP GET capability."""

    async def get(self, url: str, token: str, token_secret: str) -> tuple[str, httpx.Response]:
        """
        Issue a signed GET request.

        Args:
            url: Resource URL
            token: User's OAuth token
            token_secret: User's OAuth token secret

        Returns:
            Tuple of (response body, response)

        Raises:
            OAuthRequestError: If the provider answers with a non-2xx status
            httpx.HTTPError: If the request could not be completed
        """
        ...


class AuthlibOAuthClient:
    """OAuth 1.0a HMAC-SHA1 client backed by authlib and httpx."""

    def __init__(
        self,
        consumer_key: str,
        consumer_secret: str,
        timeout: float = 10.0,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.consumer_key = consumer_key
        self.consumer_secret = consumer_secret
        self.timeout = timeout
        self._transport = transport

    def _auth(self, token: str, token_secret: str) -> OAuth1Auth:
        return OAuth1Auth(
            client_id=self.consumer_key,
            client_secret=self.consumer_secret,
            token=token,
            token_secret=token_secret,
        )

    async def get(self, url: str, token: str, token_secret: str) -> tuple[str, httpx.Response]:
        async with httpx.AsyncClient(timeout=self.timeout, transport=self._transport) as client:
            response = await client.get(
                url,
                headers={"Accept": "application/json"},
                auth=self._auth(token, token_secret),
            )

        if response.status_code < 200 or response.status_code >= 300:
            logger.warning(f"Signed GET {url} failed with HTTP {response.status_code}")
            raise OAuthRequestError(response.status_code, response.text)

        return response.text, response
