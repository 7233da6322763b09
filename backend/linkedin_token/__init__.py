"""LinkedIn token authentication strategy."""

import logging

from .config import LINKEDIN_TOKEN_LOG_LEVEL
from .errors import (
    ConfigurationError,
    InternalOAuthError,
    LinkedInTokenError,
    OAuthRequestError,
    ProfileParseError,
    VerifyError,
)
from .oauth_client import AuthlibOAuthClient, OAuthClient
from .options import StrategyOptions
from .profile import LinkedInProfile, LinkedInProfileLoader, ProfileName, parse_profile
from .strategy import (
    AuthError,
    AuthFailure,
    AuthOutcome,
    AuthRequest,
    AuthSuccess,
    LinkedInTokenStrategy,
    VerifySignature,
    user_authorization_params,
)

logging.getLogger(__name__).setLevel(LINKEDIN_TOKEN_LOG_LEVEL)

__all__ = [
    "AuthError",
    "AuthFailure",
    "AuthOutcome",
    "AuthRequest",
    "AuthSuccess",
    "AuthlibOAuthClient",
    "ConfigurationError",
    "InternalOAuthError",
    "LinkedInProfile",
    "LinkedInProfileLoader",
    "LinkedInTokenError",
    "LinkedInTokenStrategy",
    "OAuthClient",
    "OAuthRequestError",
    "ProfileName",
    "ProfileParseError",
    "StrategyOptions",
    "VerifySignature",
    "VerifyError",
    "parse_profile",
    "user_authorization_params",
]
