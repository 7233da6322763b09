"""LinkedIn profile retrieval and normalization."""

import inspect
import json
import logging
from dataclasses import dataclass
from typing import Awaitable, Callable, Iterable, Optional, Union

from .errors import InternalOAuthError, ProfileParseError
from .oauth_client import OAuthClient

logger = logging.getLogger(__name__)

PROFILE_URL_TEMPLATE = "https://api.linkedin.com/v1/people/~:({fields})?format=json"
DEFAULT_PROFILE_URL = PROFILE_URL_TEMPLATE.format(
    fields="id,first-name,last-name,public-profile-url"
)

# Provider-agnostic field identifiers -> LinkedIn field selectors
PROFILE_FIELD_MAP: dict[str, tuple[str, ...]] = {
    "id": ("id",),
    "name": ("first-name", "last-name"),
    "profile_url": ("public-profile-url",),
    "profileUrl": ("public-profile-url",),
    "emails": ("email-address",),
}

SkipUserProfile = Union[bool, Callable[[str, str], Union[bool, Awaitable[bool]]]]


def convert_profile_fields(profile_fields: Iterable[str]) -> list[str]:
    """
    Translate field identifiers into LinkedIn field selectors.

    Unknown identifiers are passed through as raw LinkedIn selectors.
    Duplicates are dropped, first occurrence wins.
    """
    selectors: list[str] = []
    for field in profile_fields:
        for selector in PROFILE_FIELD_MAP.get(field, (field,)):
            if selector not in selectors:
                selectors.append(selector)
    return selectors


def build_profile_url(profile_fields: Optional[Iterable[str]] = None) -> str:
    """Return the profile URL, selecting ``profile_fields`` when given."""
    if not profile_fields:
        return DEFAULT_PROFILE_URL
    selectors = convert_profile_fields(profile_fields)
    if not selectors:
        return DEFAULT_PROFILE_URL
    return PROFILE_URL_TEMPLATE.format(fields=",".join(selectors))


@dataclass(frozen=True)
class ProfileName:
    given_name: Optional[str]
    family_name: Optional[str]


@dataclass
class LinkedInProfile:
    """Normalized LinkedIn profile."""

    id: str
    display_name: str
    name: ProfileName
    raw: str
    json_data: dict
    emails: Optional[list[dict]] = None
    provider: str = "linkedin"

    def to_dict(self) -> dict:
        """Render the provider-agnostic profile mapping."""
        profile = {
            "provider": self.provider,
            "id": self.id,
            "displayName": self.display_name,
            "name": {
                "givenName": self.name.given_name,
                "familyName": self.name.family_name,
            },
        }
        if self.emails is not None:
            profile["emails"] = [dict(email) for email in self.emails]
        profile["_raw"] = self.raw
        profile["_json"] = self.json_data
        return profile


def parse_profile(body: str) -> LinkedInProfile:
    """
    Parse a LinkedIn profile response body.

    Raises:
        json.JSONDecodeError: If the body is not valid JSON
        ProfileParseError: If the body is JSON but not an object
    """
    data = json.loads(body)
    if not isinstance(data, dict):
        raise ProfileParseError(f"Expected a JSON object, got {type(data).__name__}")

    first_name = data.get("firstName")
    last_name = data.get("lastName")

    profile = LinkedInProfile(
        id=data.get("id"),
        display_name=" ".join(part for part in (first_name, last_name) if part is not None),
        name=ProfileName(given_name=first_name, family_name=last_name),
        raw=body,
        json_data=data,
    )
    if data.get("emailAddress"):
        profile.emails = [{"value": data["emailAddress"]}]
    return profile


class LinkedInProfileLoader:
    """Loads and normalizes profiles through an OAuth client."""

    def __init__(
        self,
        oauth_client: OAuthClient,
        profile_fields: Optional[Iterable[str]] = None,
        skip_user_profile: SkipUserProfile = False,
    ):
        self.oauth_client = oauth_client
        self.profile_url = build_profile_url(profile_fields)
        self.skip_user_profile = skip_user_profile
        logger.debug(f"Profile URL: {self.profile_url}")

    async def fetch_profile(self, token: str, token_secret: str, params: dict) -> LinkedInProfile:
        """
        Fetch the user's profile from LinkedIn.

        Args:
            token: User's OAuth token
            token_secret: User's OAuth token secret
            params: Provider-specific extras, passed through to the verify callback

        Returns:
            Normalized profile

        Raises:
            InternalOAuthError: If the request to LinkedIn failed
            json.JSONDecodeError: If the response body is not JSON
            ProfileParseError: If the response body is not a JSON object
        """
        try:
            body, _response = await self.oauth_client.get(self.profile_url, token, token_secret)
        except Exception as e:
            logger.warning(f"Failed to fetch LinkedIn profile: {e}")
            raise InternalOAuthError("failed to fetch user profile", e) from e

        return parse_profile(body)

    async def _should_skip(self, token: str, token_secret: str) -> bool:
        if not callable(self.skip_user_profile):
            return bool(self.skip_user_profile)
        skip = self.skip_user_profile(token, token_secret)
        if inspect.isawaitable(skip):
            skip = await skip
        return bool(skip)

    async def load_user_profile(
        self, token: str, token_secret: str, params: dict
    ) -> Optional[LinkedInProfile]:
        """Fetch the profile unless profile loading is skipped for this token."""
        if await self._should_skip(token, token_secret):
            logger.debug("Skipping LinkedIn profile request")
            return None
        return await self.fetch_profile(token, token_secret, params)
