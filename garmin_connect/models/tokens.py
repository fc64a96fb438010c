"""OAuth token models for Garmin Connect sessions."""

import time
from typing import Optional

from pydantic import BaseModel, ConfigDict


class OAuth1Token(BaseModel):
    """OAuth1 token issued in exchange for an SSO ticket."""
    model_config = ConfigDict(extra="allow")

    oauth_token: str
    oauth_token_secret: str
    mfa_token: Optional[str] = None
    mfa_expiration_timestamp: Optional[str] = None
    domain: Optional[str] = None


class OAuth2Token(BaseModel):
    """OAuth2 bearer token exchanged from the OAuth1 token."""
    model_config = ConfigDict(extra="allow")

    scope: Optional[str] = None
    jti: Optional[str] = None
    token_type: str = "Bearer"
    access_token: str
    refresh_token: Optional[str] = None
    expires_in: int
    refresh_token_expires_in: Optional[int] = None
    expires_at: Optional[int] = None
    refresh_token_expires_at: Optional[int] = None

    @classmethod
    def from_exchange(cls, data: dict, now: Optional[float] = None) -> "OAuth2Token":
        """Build a token from the exchange response, stamping absolute expiry times."""
        now = int(now if now is not None else time.time())
        token = cls(**data)
        token.expires_at = now + token.expires_in
        if token.refresh_token_expires_in is not None:
            token.refresh_token_expires_at = now + token.refresh_token_expires_in
        return token

    @property
    def expired(self) -> bool:
        return self.expires_at is not None and self.expires_at < time.time()


class GarminTokens(BaseModel):
    """The OAuth1/OAuth2 pair. Both tokens are always present together."""
    oauth1: OAuth1Token
    oauth2: OAuth2Token
