"""HTTP client handling Garmin SSO login and authenticated API requests."""

import logging
import re
from typing import Any, Dict, Optional
from urllib.parse import parse_qs, urlencode

import httpx
from oauthlib.oauth1 import Client as OAuth1Client

from garmin_connect.config import GarminConfig
from garmin_connect.exceptions import GarminAPIError, GarminAuthError
from garmin_connect.models.tokens import GarminTokens, OAuth1Token, OAuth2Token
from garmin_connect.urls import OAUTH_CONSUMER_URL, GarminUrls

logger = logging.getLogger(__name__)

MOBILE_USER_AGENT = "com.garmin.android.apps.connectmobile"
BROWSER_USER_AGENT = (
    "Mozilla/5.0 (Macintosh; Intel Mac OS X 10_15_7) AppleWebKit/537.36 "
    "(KHTML, like Gecko) Chrome/120.0.0.0 Safari/537.36"
)
FORM_CONTENT_TYPE = "application/x-www-form-urlencoded"

CSRF_RE = re.compile(r'name="_csrf"\s+value="(.+?)"')
TITLE_RE = re.compile(r"<title>(.+?)</title>")
TICKET_RE = re.compile(r'embed\?ticket=([^"]+)"')


def _drop_empty(params: Optional[Dict[str, Any]]) -> Optional[Dict[str, Any]]:
    if params is None:
        return None
    return {key: value for key, value in params.items() if value is not None}


class HttpClient:
    """Owns the OAuth token pair and performs authenticated requests.

    Login follows Garmin's mobile flow: an SSO ticket is traded for an OAuth1
    token, which is exchanged for a short-lived OAuth2 bearer token. The OAuth2
    token is re-exchanged from the OAuth1 token once it has expired.
    """

    def __init__(
        self,
        urls: GarminUrls,
        config: GarminConfig,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.urls = urls
        self.timeout = config.request_timeout
        self._transport = transport
        self._tokens: Optional[GarminTokens] = None

    # Session state

    @property
    def tokens(self) -> Optional[GarminTokens]:
        """The current token pair, or None when not logged in."""
        return self._tokens

    def set_tokens(self, tokens: GarminTokens) -> None:
        self._tokens = tokens

    def clear_tokens(self) -> None:
        self._tokens = None

    def _client(self, **kwargs: Any) -> httpx.AsyncClient:
        return httpx.AsyncClient(transport=self._transport, timeout=self.timeout, **kwargs)

    # Login

    async def login(self, username: str, password: str) -> None:
        """Sign in through Garmin SSO and store a fresh token pair."""
        logger.info("Logging in to Garmin Connect (%s)", self.urls.domain)
        async with self._client(follow_redirects=True, headers={"User-Agent": BROWSER_USER_AGENT}) as sso:
            try:
                ticket = await self._get_login_ticket(sso, username, password)
            except httpx.HTTPStatusError as e:
                raise GarminAuthError(
                    f"Login failed: {e.response.status_code} - {e.response.text}",
                    status_code=e.response.status_code,
                ) from e
            except httpx.RequestError as e:
                raise GarminAuthError(f"Login request error: {str(e)}") from e

        consumer = await self._get_oauth_consumer()
        oauth1 = await self._get_oauth1_token(consumer, ticket)
        oauth2 = await self._exchange(consumer, oauth1)
        self.set_tokens(GarminTokens(oauth1=oauth1, oauth2=oauth2))
        logger.info("Garmin Connect login successful")

    async def _get_login_ticket(self, sso: httpx.AsyncClient, username: str, password: str) -> str:
        embed_params = {
            "id": "gauth-widget",
            "embedWidget": "true",
            "gauthHost": self.urls.garmin_sso,
        }
        signin_params = {
            **embed_params,
            "gauthHost": self.urls.garmin_sso_embed,
            "service": self.urls.garmin_sso_embed,
            "source": self.urls.garmin_sso_embed,
            "redirectAfterAccountLoginUrl": self.urls.garmin_sso_embed,
            "redirectAfterAccountCreationUrl": self.urls.garmin_sso_embed,
        }

        # Sets the SSO cookies
        response = await sso.get(self.urls.garmin_sso_embed, params=embed_params)
        response.raise_for_status()

        response = await sso.get(self.urls.signin_url, params=signin_params)
        response.raise_for_status()
        csrf = CSRF_RE.search(response.text)
        if not csrf:
            raise GarminAuthError("Login failed: CSRF token not found on sign-in page")

        response = await sso.post(
            self.urls.signin_url,
            params=signin_params,
            headers={"Referer": str(response.url)},
            data={
                "username": username,
                "password": password,
                "embed": "true",
                "_csrf": csrf.group(1),
            },
        )
        response.raise_for_status()

        title = TITLE_RE.search(response.text)
        title_text = title.group(1) if title else ""
        if title_text != "Success":
            # MFA and captcha pages land here as well
            raise GarminAuthError(f"Login failed: unexpected page title '{title_text}'")

        ticket = TICKET_RE.search(response.text)
        if not ticket:
            raise GarminAuthError("Login failed: SSO ticket not found")
        return ticket.group(1)

    async def _get_oauth_consumer(self) -> Dict[str, str]:
        async with self._client() as client:
            try:
                response = await client.get(OAUTH_CONSUMER_URL)
                response.raise_for_status()
                return response.json()
            except (httpx.HTTPError, ValueError) as e:
                raise GarminAuthError(f"Unable to fetch OAuth consumer: {str(e)}") from e

    def _sign(
        self,
        method: str,
        url: str,
        consumer: Dict[str, str],
        oauth1: Optional[OAuth1Token] = None,
        body: Optional[str] = None,
    ) -> Dict[str, str]:
        signer = OAuth1Client(
            consumer["consumer_key"],
            client_secret=consumer["consumer_secret"],
            resource_owner_key=oauth1.oauth_token if oauth1 else None,
            resource_owner_secret=oauth1.oauth_token_secret if oauth1 else None,
        )
        headers = {"User-Agent": MOBILE_USER_AGENT}
        if body is not None:
            headers["Content-Type"] = FORM_CONTENT_TYPE
        _, signed_headers, _ = signer.sign(url, http_method=method, body=body, headers=headers)
        return signed_headers

    async def _get_oauth1_token(self, consumer: Dict[str, str], ticket: str) -> OAuth1Token:
        url = str(httpx.URL(
            self.urls.oauth_preauthorized,
            params={
                "ticket": ticket,
                "login-url": self.urls.garmin_sso_embed,
                "accepts-mfa-tokens": "true",
            },
        ))
        async with self._client() as client:
            try:
                response = await client.get(url, headers=self._sign("GET", url, consumer))
                response.raise_for_status()
            except httpx.HTTPStatusError as e:
                raise GarminAuthError(
                    f"OAuth1 token request failed: {e.response.status_code}",
                    status_code=e.response.status_code,
                ) from e
            except httpx.RequestError as e:
                raise GarminAuthError(f"OAuth1 token request error: {str(e)}") from e

        parsed = {key: values[0] for key, values in parse_qs(response.text).items()}
        if "oauth_token" not in parsed or "oauth_token_secret" not in parsed:
            raise GarminAuthError("OAuth1 token response is incomplete")
        return OAuth1Token(**parsed, domain=self.urls.domain)

    async def _exchange(self, consumer: Dict[str, str], oauth1: OAuth1Token) -> OAuth2Token:
        """Trade the OAuth1 token for a new OAuth2 bearer token."""
        url = self.urls.oauth_exchange
        body = urlencode({"mfa_token": oauth1.mfa_token} if oauth1.mfa_token else {})
        async with self._client() as client:
            try:
                response = await client.post(
                    url,
                    content=body,
                    headers=self._sign("POST", url, consumer, oauth1=oauth1, body=body),
                )
                response.raise_for_status()
                return OAuth2Token.from_exchange(response.json())
            except httpx.HTTPStatusError as e:
                raise GarminAuthError(
                    f"OAuth2 exchange failed: {e.response.status_code}",
                    status_code=e.response.status_code,
                ) from e
            except httpx.RequestError as e:
                raise GarminAuthError(f"OAuth2 exchange error: {str(e)}") from e
            except ValueError as e:
                raise GarminAuthError(f"OAuth2 exchange returned an invalid response: {e}") from e

    async def _authorized_tokens(self) -> GarminTokens:
        if self._tokens is None:
            raise GarminAuthError("Not logged in. Call login() or load a token pair first.")
        if self._tokens.oauth2.expired:
            logger.info("OAuth2 token expired, exchanging OAuth1 token for a new one")
            consumer = await self._get_oauth_consumer()
            oauth2 = await self._exchange(consumer, self._tokens.oauth1)
            self.set_tokens(GarminTokens(oauth1=self._tokens.oauth1, oauth2=oauth2))
        return self._tokens

    # Requests

    async def request(
        self,
        method: str,
        url: str,
        params: Optional[Dict[str, Any]] = None,
        json: Any = None,
        files: Optional[Dict[str, Any]] = None,
        headers: Optional[Dict[str, str]] = None,
        binary: bool = False,
    ) -> Any:
        """Make an authenticated request to Garmin Connect.

        Returns parsed JSON, text, bytes in binary mode, or None for an empty
        response.
        """
        tokens = await self._authorized_tokens()
        request_headers = {
            "User-Agent": MOBILE_USER_AGENT,
            "Authorization": f"Bearer {tokens.oauth2.access_token}",
            **(headers or {}),
        }
        logger.debug("%s %s params=%s", method, url, params)

        async with self._client() as client:
            try:
                response = await client.request(
                    method=method,
                    url=url,
                    params=_drop_empty(params),
                    json=json,
                    files=files,
                    headers=request_headers,
                )
                response.raise_for_status()
            except httpx.HTTPStatusError as e:
                raise GarminAPIError(
                    f"API request failed: {e.response.status_code} - {e.response.text}",
                    status_code=e.response.status_code,
                ) from e
            except httpx.RequestError as e:
                raise GarminAPIError(f"Request error: {str(e)}") from e

        if binary:
            return response.content
        if response.status_code == 204 or not response.content:
            return None
        if "json" in response.headers.get("content-type", ""):
            try:
                return response.json()
            except ValueError as e:
                raise GarminAPIError(
                    f"Invalid JSON response: {e}",
                    status_code=response.status_code,
                ) from e
        return response.text

    async def get(
        self,
        url: str,
        params: Optional[Dict[str, Any]] = None,
        headers: Optional[Dict[str, str]] = None,
        binary: bool = False,
    ) -> Any:
        return await self.request("GET", url, params=params, headers=headers, binary=binary)

    async def post(
        self,
        url: str,
        data: Any = None,
        params: Optional[Dict[str, Any]] = None,
        headers: Optional[Dict[str, str]] = None,
        files: Optional[Dict[str, Any]] = None,
    ) -> Any:
        return await self.request("POST", url, params=params, json=data, files=files, headers=headers)

    async def put(
        self,
        url: str,
        data: Any = None,
        params: Optional[Dict[str, Any]] = None,
        headers: Optional[Dict[str, str]] = None,
    ) -> Any:
        return await self.request("PUT", url, params=params, json=data, headers=headers)

    async def delete(self, url: str, params: Optional[Dict[str, Any]] = None) -> Any:
        return await self.request("DELETE", url, params=params)
