"""Resource managing a single Mangopay hook (``mangopay_hook``)."""
from __future__ import annotations
import logging
from typing import Dict, Any

import requests

from mangopay_provider.core.mangopay import MangopayError, Hook, HookService

from .base import ProviderComponent, hook_to_state, timestamp_rfc850
from .diagnostics import Diagnostics, Result
from .hooks_data_source import HOOK_ATTRIBUTE_DESCRIPTIONS
from .schema import Schema, Attribute, INT64

logger = logging.getLogger(__name__)

_CLIENT_ERRORS = (MangopayError, requests.RequestException, ValueError)


class HookResource(ProviderComponent):
    """Create, read and update a hook.

    Mangopay offers no way to remove a hook: delete only drops it from
    state and leaves the remote registration untouched.
    """

    type_suffix = "hook"
    kind = "Resource"

    def schema(self) -> Schema:
        d = HOOK_ATTRIBUTE_DESCRIPTIONS
        return Schema(
            description="This is the Hook resource that enables to configure Mangopay webhooks.",
            attributes={
                "id": Attribute(description=d["id"], computed=True),
                "url": Attribute(description=d["url"], required=True),
                "status": Attribute(description=d["status"] + " ENABLED or DISABLED.", optional=True, computed=True),
                "validity": Attribute(description=d["validity"], computed=True),
                "event_type": Attribute(description=d["event_type"], required=True),
                "tag": Attribute(description=d["tag"], optional=True),
                "creation_date": Attribute(description=d["creation_date"], type=INT64, computed=True),
                "last_updated": Attribute(description="Timestamp of the last update of the hook by this provider.", computed=True),
            },
        )

    def create(self, config: Dict[str, Any]) -> Result:
        """Register a hook from its configuration (url, event_type, tag)."""
        diags = self.schema().validate(config)
        if diags.has_error() or not self._require_client(diags):
            return Result(None, diags)

        logger.debug("Creating a hook resource")
        try:
            hook = HookService(self.client).create_hook(Hook(
                url=config["url"],
                event_type=config["event_type"],
                tag=config.get("tag"),
            ))
        except _CLIENT_ERRORS as e:
            diags.add_error("Error creating hook", f"Could not create hook, unexpected error: {e}")
            return Result(None, diags)

        state = hook_to_state(hook)
        state["last_updated"] = timestamp_rfc850()
        logger.info("Created hook %s (%s)", state["id"], state["event_type"])
        return Result(state, diags)

    def read(self, state: Dict[str, Any]) -> Result:
        """Refresh state from the remote hook identified by ``state['id']``."""
        diags = Diagnostics()
        if not self._require_client(diags):
            return Result(None, diags)

        hook_id = state.get("id") or ""
        if not hook_id:
            diags.add_attribute_error("id", "Error Reading Mangopay Hook", "The hook ID is empty.")
            return Result(None, diags)
        try:
            hook = HookService(self.client).get_hook(hook_id)
        except _CLIENT_ERRORS as e:
            diags.add_error("Error Reading Mangopay Hook", f"Could not read Mangopay hook with ID {hook_id}: {e}")
            return Result(None, diags)

        refreshed = dict(state)
        refreshed.update(hook_to_state(hook))
        return Result(refreshed, diags)

    def update(self, config: Dict[str, Any], state: Dict[str, Any]) -> Result:
        """Apply configuration changes (url, status, tag) to an existing hook.

        The event type is not sent: Mangopay does not allow changing it.
        """
        diags = self.schema().validate(config)
        if diags.has_error() or not self._require_client(diags):
            return Result(None, diags)

        hook_id = state.get("id") or ""
        logger.debug("Updating a hook resource with ID: %s", hook_id)
        try:
            hook = HookService(self.client).update_hook(hook_id, Hook(
                url=config["url"],
                status=config.get("status") or state.get("status") or None,
                tag=config.get("tag"),
            ))
        except _CLIENT_ERRORS as e:
            diags.add_error("Error updating hook", f"Could not update hook, unexpected error: {e}")
            return Result(None, diags)

        new_state = hook_to_state(hook)
        new_state["last_updated"] = timestamp_rfc850()
        return Result(new_state, diags)

    def delete(self, state: Dict[str, Any]) -> Result:
        diags = Diagnostics()
        diags.add_warning(
            "Hook not deleted remotely",
            f"Mangopay hooks cannot be deleted; hook {state.get('id')} was removed from state only.",
        )
        return Result(None, diags)

    def import_state(self, hook_id: str) -> Result:
        """Start tracking an existing hook; a subsequent read fills the rest."""
        return Result({"id": hook_id}, Diagnostics())
