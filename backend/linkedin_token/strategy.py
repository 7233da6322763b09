"""LinkedIn token authentication strategy."""

import inspect
import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Callable, Mapping, Optional, Protocol, Union
from urllib.parse import urlencode

from .errors import VerifyError
from .oauth_client import AuthlibOAuthClient, OAuthClient
from .options import StrategyOptions
from .profile import LinkedInProfileLoader

logger = logging.getLogger(__name__)


class IncomingRequest(Protocol):
    """Anything exposing ``query`` and ``body`` mappings."""

    query: Mapping[str, Any]
    body: Optional[Mapping[str, Any]]


@dataclass
class AuthRequest:
    """Plain incoming request, for hosts without their own request type."""

    query: Mapping[str, Any] = field(default_factory=dict)
    body: Optional[Mapping[str, Any]] = None


@dataclass
class AuthSuccess:
    user: Any
    info: Any = None


@dataclass
class AuthFailure:
    info: Any = None


@dataclass
class AuthError:
    error: BaseException


AuthOutcome = Union[AuthSuccess, AuthFailure, AuthError]


class VerifySignature(Enum):
    """Supported call shapes of the verify callback."""

    TOKEN_PROFILE = "token_profile"
    TOKEN_PARAMS_PROFILE = "token_params_profile"
    REQUEST_TOKEN_PROFILE = "request_token_profile"
    REQUEST_TOKEN_PARAMS_PROFILE = "request_token_params_profile"

    @property
    def passes_request(self) -> bool:
        return self in (
            VerifySignature.REQUEST_TOKEN_PROFILE,
            VerifySignature.REQUEST_TOKEN_PARAMS_PROFILE,
        )

    @property
    def passes_params(self) -> bool:
        return self in (
            VerifySignature.TOKEN_PARAMS_PROFILE,
            VerifySignature.REQUEST_TOKEN_PARAMS_PROFILE,
        )

    def build_args(self, request, token, token_secret, params, profile, done) -> tuple:
        """Positional arguments for the verify callback."""
        args = []
        if self.passes_request:
            args.append(request)
        args.extend([token, token_secret])
        if self.passes_params:
            args.append(params)
        args.extend([profile, done])
        return tuple(args)


class _Verified:
    """``done`` callback handed to the verify function; records one outcome."""

    def __init__(self):
        self.outcome: Optional[AuthOutcome] = None

    def __call__(self, err: Optional[BaseException] = None, user: Any = None, info: Any = None):
        if self.outcome is not None:
            raise RuntimeError("verify callback already completed")
        if err:
            self.outcome = AuthError(err)
        elif not user:
            self.outcome = AuthFailure(info)
        else:
            self.outcome = AuthSuccess(user, info)


def _first(request: IncomingRequest, name: str) -> Optional[str]:
    body = request.body or {}
    value = body.get(name)
    if value:
        return value
    return (request.query or {}).get(name)


def user_authorization_params(options: Mapping[str, Any]) -> dict:
    """Extra LinkedIn parameters for the user authorization request."""
    params = {}
    if options.get("force_login"):
        params["force_login"] = options["force_login"]
    if options.get("screen_name"):
        params["screen_name"] = options["screen_name"]
    return params


class LinkedInTokenStrategy:
    """
    Authenticates requests carrying a LinkedIn OAuth token and token secret.

    The application supplies a ``verify`` callback which receives the token,
    token secret and normalized profile (plus the request and/or params,
    depending on ``signature``) and calls ``done(err, user, info)``. ``user``
    should be falsy if the credentials are not valid.

    Example:
        def verify(token, token_secret, profile, done):
            user = users.find_or_create(linkedin_id=profile.id)
            done(None, user)

        strategy = LinkedInTokenStrategy(StrategyOptions(
            consumer_key="123-456-789",
            consumer_secret="shhh-its-a-secret",
        ), verify)
    """

    name = "linkedin-token"

    def __init__(
        self,
        options: StrategyOptions,
        verify: Callable,
        signature: Optional[VerifySignature] = None,
        oauth_client: Optional[OAuthClient] = None,
        profile_loader: Optional[LinkedInProfileLoader] = None,
    ):
        if not callable(verify):
            raise TypeError("LinkedInTokenStrategy requires a verify callback")

        if signature is None:
            signature = (
                VerifySignature.REQUEST_TOKEN_PROFILE
                if options.pass_req_to_callback
                else VerifySignature.TOKEN_PROFILE
            )
        elif signature.passes_request != options.pass_req_to_callback:
            raise ValueError(
                f"Verify signature {signature.name} does not match "
                f"pass_req_to_callback={options.pass_req_to_callback}"
            )

        self.options = options
        self._verify = verify
        self.signature = signature

        if profile_loader is None:
            if oauth_client is None:
                oauth_client = AuthlibOAuthClient(
                    options.consumer_key, options.consumer_secret, timeout=options.timeout
                )
            profile_loader = LinkedInProfileLoader(
                oauth_client,
                profile_fields=options.profile_fields,
                skip_user_profile=options.skip_user_profile,
            )
        self.profile_loader = profile_loader

    async def authenticate(self, request: IncomingRequest) -> AuthOutcome:
        """
        Authenticate a request by verifying its token with LinkedIn.

        Returns:
            Exactly one of AuthSuccess, AuthFailure or AuthError
        """
        # LinkedIn sends users who decline authorization back with ?denied=<request token>
        if request.query and request.query.get("denied"):
            logger.info("LinkedIn authorization denied by user")
            return AuthFailure()

        token = _first(request, self.options.token_field)
        token_secret = _first(request, self.options.token_secret_field)
        params: dict = {}

        try:
            profile = await self.profile_loader.load_user_profile(token, token_secret, params)
        except Exception as e:
            logger.error(f"LinkedIn profile retrieval failed: {e}")
            return AuthError(e)

        done = _Verified()
        args = self.signature.build_args(request, token, token_secret, params, profile, done)
        try:
            result = self._verify(*args)
            if inspect.isawaitable(result):
                await result
        except Exception as e:
            logger.error(f"Verify callback raised: {e}")
            return AuthError(e)

        if done.outcome is None:
            logger.error("Verify callback returned without calling done")
            return AuthError(VerifyError("verify callback returned without calling done"))

        if isinstance(done.outcome, AuthError):
            logger.warning(f"Verify callback reported an error: {done.outcome.error}")
        elif isinstance(done.outcome, AuthFailure):
            logger.info(f"Verify callback rejected LinkedIn user: {done.outcome.info}")
        return done.outcome

    def user_authorization_params(self, options: Mapping[str, Any]) -> dict:
        return user_authorization_params(options)

    def authorization_url(self, request_token: str, **options) -> str:
        """URL to send the user to when authorizing ``request_token``."""
        params = {"oauth_token": request_token}
        params.update(self.user_authorization_params(options))
        return f"{self.options.user_authorization_url}?{urlencode(params)}"
