"""Pytest shared fixtures: network guard rails and an in-memory Mangopay API."""
import base64
import json
import pathlib
import sys
from urllib.parse import urlsplit, parse_qs

# Add project root to Python path
ROOT = pathlib.Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

import pytest
import requests

from mangopay_provider.core.mangopay import MangopayClient

TEST_CLIENT_ID = "test-client"
TEST_CLIENT_SECRET = "test-secret"
TEST_ACCESS_TOKEN = "test-access-token"


# ─────────────────────────────────────────────────────────────────────────────
# Network Guard Rails
# ─────────────────────────────────────────────────────────────────────────────
@pytest.fixture(autouse=True)
def _block_network(monkeypatch, request):
    """
    Prevent unit tests from hitting the live Mangopay API.

    Integration tests are explicitly marked with @pytest.mark.integration and
    are allowed to perform real HTTP calls by skipping this fixture.
    """
    if request.node.get_closest_marker("integration"):
        return

    def _refuse(self, prepared, *args, **kwargs):
        raise RuntimeError(f"Unexpected network access in tests: {prepared.method} {prepared.url}")

    monkeypatch.setattr(requests.Session, "send", _refuse)


@pytest.fixture(autouse=True)
def _clean_mangopay_env(monkeypatch):
    """Make sure developer credentials never leak into tests."""
    for var in ("MANGOPAY_CLIENT_ID", "MANGOPAY_CLIENT_SECRET", "MANGOPAY_ENVIRONMENT", "MANGOPAY_BASE_URL"):
        monkeypatch.delenv(var, raising=False)


# ─────────────────────────────────────────────────────────────────────────────
# Fake Mangopay API
# ─────────────────────────────────────────────────────────────────────────────
def make_response(request, status_code: int, payload=None, text: str = None) -> requests.Response:
    resp = requests.Response()
    resp.status_code = status_code
    resp.url = request.url
    resp.encoding = "utf-8"
    if text is None:
        text = json.dumps(payload)
        resp.headers["Content-Type"] = "application/json"
    resp._content = text.encode("utf-8")
    return resp


class FakeMangopayBackend:
    """Transport standing in for requests.Session.

    Serves the token endpoint, the client profile and the hook endpoints
    from memory and records every request it receives.
    """

    def __init__(self, client_id: str = TEST_CLIENT_ID, client_secret: str = TEST_CLIENT_SECRET):
        self.client_id = client_id
        self.client_secret = client_secret
        self.requests = []
        self.hooks = {}
        self.next_id = 1000
        self.platform_client = {
            "PlatformType": "MARKETPLACE",
            "ClientId": client_id,
            "Name": "Test Platform",
            "RegisteredName": "Test Platform SAS",
            "TechEmails": ["tech@example.com"],
            "AdminEmails": ["admin@example.com"],
            "BillingEmails": [],
            "FraudEmails": ["fraud@example.com"],
            "HeadquartersAddress": {
                "AddressLine1": "1 rue de la Paix",
                "AddressLine2": None,
                "City": "Paris",
                "Region": "IDF",
                "PostalCode": "75002",
                "Country": "FR",
            },
            "HeadquartersPhoneNumber": "+33100000000",
            "TaxNumber": "FR123",
            "PlatformCategorization": {"BusinessType": "MARKETPLACE", "Sector": "RENTALS"},
            "PlatformURL": "https://example.com",
            "PlatformDescription": "Test platform",
            "CompanyReference": "REF-1",
            "PrimaryThemeColour": "#000000",
            "PrimaryButtonColour": "#FFFFFF",
            "Logo": "https://example.com/logo.png",
            "CompanyNumber": "123456789",
            "MCC": "7299",
        }
        # Set to (status, body) to make every API call (token excluded) fail
        self.fail_with = None

    def add_hook(self, url: str, event_type: str, tag=None, status: str = "ENABLED") -> dict:
        self.next_id += 1
        hook = {
            "Id": str(self.next_id),
            "Url": url,
            "Status": status,
            "Validity": "VALID",
            "EventType": event_type,
            "Tag": tag,
            "CreationDate": 1700000000 + self.next_id,
        }
        self.hooks[hook["Id"]] = hook
        return hook

    def send(self, request, timeout=None, **kwargs):
        self.requests.append(request)
        parts = urlsplit(request.url)
        path = parts.path
        if path.startswith("/v2.01"):
            path = path[len("/v2.01"):]

        if path == "/oauth/token":
            return self._token(request)

        if request.headers.get("Authorization") != f"Bearer {TEST_ACCESS_TOKEN}":
            return make_response(request, 401, {"Message": "invalid token"})

        if self.fail_with is not None:
            status, body = self.fail_with
            return make_response(request, status, text=body)

        prefix = f"/{self.client_id}"
        if not path.startswith(prefix):
            return make_response(request, 404, {"Message": "unknown client"})
        path = path[len(prefix):]

        if path == "/clients" and request.method == "GET":
            return make_response(request, 200, self.platform_client)

        if path == "/hooks":
            if request.method == "GET":
                per_page = int(parse_qs(parts.query).get("per_page", ["10"])[0])
                return make_response(request, 200, list(self.hooks.values())[:per_page])
            if request.method == "POST":
                body = json.loads(request.body)
                hook = self.add_hook(body["Url"], body["EventType"], body.get("Tag"))
                return make_response(request, 200, hook)

        if path.startswith("/hooks/"):
            hook = self.hooks.get(path[len("/hooks/"):])
            if hook is None:
                return make_response(request, 404, {"Message": "The ressource does not exist"})
            if request.method == "GET":
                return make_response(request, 200, hook)
            if request.method == "PUT":
                body = json.loads(request.body)
                for key in ("Url", "Status", "Tag"):
                    if key in body:
                        hook[key] = body[key]
                return make_response(request, 200, hook)

        return make_response(request, 405, {"Message": "method not allowed"})

    def _token(self, request):
        expected = base64.b64encode(f"{self.client_id}:{self.client_secret}".encode()).decode()
        if request.headers.get("Authorization") != f"Basic {expected}":
            return make_response(request, 401, {"error": "invalid_client"})
        if request.body != "grant_type=client_credentials":
            return make_response(request, 400, {"error": "unsupported_grant_type"})
        return make_response(request, 200, {
            "access_token": TEST_ACCESS_TOKEN,
            "token_type": "bearer",
            "expires_in": 1200,
        })


@pytest.fixture()
def backend():
    """In-memory Mangopay API."""
    return FakeMangopayBackend()


@pytest.fixture()
def mangopay_client(backend):
    """Client authenticated against the in-memory API."""
    return MangopayClient(TEST_CLIENT_ID, TEST_CLIENT_SECRET, "sandbox", http=backend)
