"""Low-level HTTP client for the Mangopay API.

Handles authentication, request execution and error classification.
"""
from __future__ import annotations
import json
import logging
from typing import Optional, Dict, Any

import requests

from .exceptions import MangopayAPIError, MangopayConfigError
from .models import AuthResponse

logger = logging.getLogger(__name__)

REQUEST_TIMEOUT = 10

DEFAULT_ENVIRONMENT = "sandbox"

API_HOSTS = {
    "sandbox": "https://api.sandbox.mangopay.com/v2.01",
    "production": "https://api.mangopay.com/v2.01",
}


def resolve_host(environment: Optional[str] = None, base_url: Optional[str] = None) -> str:
    """Return the API base URL (version path included) for an environment.

    Args:
        environment: Environment label ("sandbox" or "production", default sandbox)
        base_url: Explicit base URL, takes precedence over the label

    Raises:
        MangopayConfigError: If the label is not a known environment
    """
    if base_url:
        return base_url.rstrip("/")
    label = (environment or DEFAULT_ENVIRONMENT).strip().lower()
    try:
        return API_HOSTS[label]
    except KeyError:
        raise MangopayConfigError(
            f"Unknown Mangopay environment '{environment}': expected one of {', '.join(sorted(API_HOSTS))}"
        ) from None


class OAuth2Config:
    """Client credentials used for the token exchange."""

    def __init__(self, client_id: str = "", client_secret: str = ""):
        self.client_id = client_id
        self.client_secret = client_secret

    def __repr__(self) -> str:
        return f"OAuth2Config(client_id={self.client_id!r}, client_secret='****')"


class MangopayClient:
    """HTTP client for the Mangopay API with a single bearer token.

    The token is fetched once at construction and kept for the lifetime of
    the instance; it is never refreshed.

    Usage:
        client = MangopayClient("my-client-id", "my-api-key", "sandbox")
        body = client.do_request(client.new_request("GET", "/hooks"))
    """

    def __init__(
        self,
        client_id: Optional[str] = None,
        client_secret: Optional[str] = None,
        environment: Optional[str] = None,
        base_url: Optional[str] = None,
        http: Optional[requests.Session] = None,
    ):
        """Initialize the client and fetch its token.

        Args:
            client_id: Mangopay client identifier
            client_secret: Mangopay API key
            environment: Environment label, selects the API host
            base_url: Explicit API base URL (overrides environment)
            http: Transport used to send requests (defaults to a new requests.Session)

        Raises:
            MangopayConfigError: If credentials are empty or environment is unknown
            MangopayAPIError: If the token endpoint rejects the credentials
        """
        self.host = resolve_host(environment, base_url)
        self.http = http if http is not None else requests.Session()
        self.environment = environment or DEFAULT_ENVIRONMENT
        self.auth_config = OAuth2Config()
        self.token = ""

        # Without credentials the client stays unauthenticated
        if client_id is None or client_secret is None:
            return

        self.auth_config = OAuth2Config(client_id, client_secret)
        auth = self.get_token()
        self.token = f"Bearer {auth.access_token}"

    def get_token(self) -> AuthResponse:
        """Exchange the client credentials for an access token.

        Returns:
            Parsed token response (the caller stores the token)

        Raises:
            MangopayConfigError: If client ID or secret is empty (no request is sent)
            MangopayAPIError: On a non-200 response
        """
        if not self.auth_config.client_id or not self.auth_config.client_secret:
            raise MangopayConfigError("define client_id and client_secret in order to get token")

        req = requests.Request(
            "POST",
            f"{self.host}/oauth/token",
            data={"grant_type": "client_credentials"},
            auth=(self.auth_config.client_id, self.auth_config.client_secret),
        ).prepare()
        body = self.do_request(req)
        return AuthResponse.from_dict(json.loads(body))

    def build_url(self, path: str) -> str:
        """Return the absolute URL of a path scoped by the client identifier."""
        return f"{self.host}/{self.auth_config.client_id}{path}"

    def new_request(
        self,
        method: str,
        path: str,
        params: Optional[Dict[str, Any]] = None,
        json: Optional[Dict[str, Any]] = None,
    ) -> requests.PreparedRequest:
        """Build a request against a client-scoped path.

        Args:
            method: HTTP method
            path: Path below /{client_id} (e.g., "/hooks")
            params: Query parameters
            json: JSON payload, sent with Content-Type application/json
        """
        return requests.Request(method, self.build_url(path), params=params, json=json).prepare()

    def do_request(self, req: requests.PreparedRequest, auth_token: Optional[str] = None) -> bytes:
        """Send a request and return the raw response body.

        The stored token (or ``auth_token`` when given) is attached unless
        the request already carries an Authorization header.

        Args:
            req: Prepared request
            auth_token: Authorization header value overriding the stored token

        Returns:
            Response body

        Raises:
            MangopayAPIError: If the response status is not 200
            requests.RequestException: On transport failure
        """
        token = auth_token if auth_token is not None else self.token
        if "Authorization" not in req.headers and token:
            req.headers["Authorization"] = token

        logged_headers = dict(req.headers)
        if "Authorization" in logged_headers:
            logged_headers["Authorization"] = "****"
        logger.debug("%s %s headers=%s", req.method, req.url, logged_headers)

        resp = self.http.send(req, timeout=REQUEST_TIMEOUT)
        body = resp.content
        logger.debug("%s %s -> %s", req.method, req.url, resp.status_code)

        self._handle_error(req, resp)
        return body

    def _handle_error(self, req: requests.PreparedRequest, resp: requests.Response) -> None:
        """Raise MangopayAPIError for any status other than 200."""
        if resp.status_code != 200:
            raise MangopayAPIError(resp.status_code, resp.text, req.url)
