"""Mangopay platform client profile."""
from __future__ import annotations
import json

from .client import MangopayClient
from .models import PlatformClient


class PlatformClientService:
    """Read access to the profile of the authenticated platform."""
    
    def __init__(self, client: MangopayClient):
        self.client = client
    
    def get_platform_client(self) -> PlatformClient:
        """Return the client detail of the authenticated platform."""
        body = self.client.do_request(self.client.new_request("GET", "/clients"))
        return PlatformClient.from_dict(json.loads(body))
