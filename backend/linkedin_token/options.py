"""Configuration surface of the LinkedIn token strategy."""

from dataclasses import dataclass
from typing import Optional

from . import config
from .errors import ConfigurationError
from .profile import SkipUserProfile

REQUEST_TOKEN_URL = "https://api.linkedin.com/uas/oauth/requestToken"
ACCESS_TOKEN_URL = "https://api.linkedin.com/uas/oauth/accessToken"
USER_AUTHORIZATION_URL = "https://www.linkedin.com/uas/oauth/authenticate"
SESSION_KEY = "oauth:linkedin"


@dataclass(frozen=True)
class StrategyOptions:
    """Static strategy configuration, fixed at construction."""

    consumer_key: str
    consumer_secret: str
    request_token_url: str = REQUEST_TOKEN_URL
    access_token_url: str = ACCESS_TOKEN_URL
    user_authorization_url: str = USER_AUTHORIZATION_URL
    session_key: str = SESSION_KEY
    skip_extended_user_profile: bool = False
    profile_fields: Optional[tuple[str, ...]] = None
    pass_req_to_callback: bool = False
    skip_user_profile: SkipUserProfile = False
    token_field: str = "token"
    token_secret_field: str = "tokenSecret"
    timeout: float = 10.0

    def __post_init__(self):
        if not self.consumer_key:
            raise ConfigurationError("consumer_key is required")
        if not self.consumer_secret:
            raise ConfigurationError("consumer_secret is required")
        if isinstance(self.profile_fields, str):
            fields = tuple(f.strip() for f in self.profile_fields.split(",") if f.strip())
            object.__setattr__(self, "profile_fields", fields or None)
        elif self.profile_fields is not None:
            object.__setattr__(self, "profile_fields", tuple(self.profile_fields))

    @classmethod
    def from_config(cls, **overrides) -> "StrategyOptions":
        """
        Build options from environment configuration.

        Keyword arguments override the environment values.

        Raises:
            ConfigurationError: If the consumer key or secret is not configured
        """
        values = {
            "consumer_key": config.LINKEDIN_CONSUMER_KEY,
            "consumer_secret": config.LINKEDIN_CONSUMER_SECRET,
            "profile_fields": tuple(config.LINKEDIN_PROFILE_FIELDS) or None,
            "pass_req_to_callback": config.LINKEDIN_PASS_REQ_TO_CALLBACK,
            "timeout": config.LINKEDIN_HTTP_TIMEOUT,
        }
        values.update(overrides)
        return cls(**values)
