"""Data source listing the configured hooks."""
from __future__ import annotations
import logging

import requests

from mangopay_provider.core.mangopay import MangopayError, HookService

from .base import ProviderComponent, hook_to_state
from .diagnostics import Diagnostics, Result
from .schema import Schema, Attribute, STRING, INT64, LIST

logger = logging.getLogger(__name__)

HOOK_ATTRIBUTE_DESCRIPTIONS = {
    "id": "Unique identifier of the hook",
    "url": "The URL (http or https) to which the notification is sent.",
    "status": "Whether the hook is enabled or not.",
    "validity": "Whether the hook is valid or not. Once the hook is set to INVALID it can no longer be modified.",
    "event_type": "The type of the event",
    "tag": "A custom tag for that hook",
    "creation_date": "The date when the hook was created",
}


class HooksDataSource(ProviderComponent):
    """All hooks of the platform (``mangopay_hooks``)."""

    type_suffix = "hooks"

    def schema(self) -> Schema:
        hook_attributes = {
            name: Attribute(
                description=description,
                type=INT64 if name == "creation_date" else STRING,
                computed=True,
            )
            for name, description in HOOK_ATTRIBUTE_DESCRIPTIONS.items()
        }
        return Schema(
            description="Hook data source",
            attributes={
                "hooks": Attribute(
                    description="List of hooks",
                    type=LIST,
                    computed=True,
                    attributes=hook_attributes,
                ),
            },
        )

    def read(self) -> Result:
        diags = Diagnostics()
        if not self._require_client(diags):
            return Result(None, diags)

        try:
            hooks = HookService(self.client).get_all_hooks()
        except (MangopayError, requests.RequestException, ValueError) as e:
            diags.add_error("Unable to Read Mangopay Hook", str(e))
            return Result(None, diags)

        logger.debug("Read %d hook(s)", len(hooks))
        return Result({"hooks": [hook_to_state(hook) for hook in hooks]}, diags)
