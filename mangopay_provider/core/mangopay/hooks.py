"""Mangopay hook (webhook) operations."""
from __future__ import annotations
import json
from typing import List, Optional

from .client import MangopayClient
from .models import Hook

DEFAULT_PER_PAGE = 100


class HookService:
    """Service for managing Mangopay hooks."""
    
    def __init__(self, client: MangopayClient):
        """Initialize hook service.
        
        Args:
            client: Authenticated Mangopay client
        """
        self.client = client
    
    def get_all_hooks(self, page: Optional[int] = None, per_page: int = DEFAULT_PER_PAGE) -> List[Hook]:
        """Return the configured hooks (a single page).
        
        Args:
            page: Page number, omitted from the query when None
            per_page: Page size
            
        Returns:
            List of hooks, empty when none are configured
        """
        params = {"per_page": per_page}
        if page is not None:
            params["page"] = page
        body = self.client.do_request(self.client.new_request("GET", "/hooks", params=params))
        items = json.loads(body)
        if items is None:
            return []
        if not isinstance(items, list):
            raise ValueError(f"unexpected hooks payload: expected a JSON array, got {type(items).__name__}")
        return [Hook.from_dict(item) for item in items]
    
    def get_hook(self, hook_id: str) -> Hook:
        """Retrieve a single hook by its identifier."""
        body = self.client.do_request(self.client.new_request("GET", f"/hooks/{hook_id}"))
        return Hook.from_dict(json.loads(body))
    
    def create_hook(self, hook: Hook) -> Hook:
        """Register a new hook.
        
        Args:
            hook: Hook carrying url, event_type and optionally tag
            
        Returns:
            Hook as created by the API (id, status, validity, creation_date set)
        """
        req = self.client.new_request("POST", "/hooks", json=hook.to_dict())
        body = self.client.do_request(req)
        return Hook.from_dict(json.loads(body))
    
    def update_hook(self, hook_id: str, hook: Hook) -> Hook:
        """Update an existing hook.
        
        Args:
            hook_id: Hook identifier
            hook: Hook carrying the fields to change (url, status, tag)
            
        Returns:
            Hook as stored by the API after the update
        """
        req = self.client.new_request("PUT", f"/hooks/{hook_id}", json=hook.to_dict())
        body = self.client.do_request(req)
        return Hook.from_dict(json.loads(body))
