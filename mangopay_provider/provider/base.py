"""Shared plumbing for data sources and resources."""
from __future__ import annotations
from datetime import datetime, timezone
from typing import Optional, Any, Dict

from mangopay_provider.core.mangopay import MangopayClient, Hook

from .diagnostics import Diagnostics
from .schema import Schema

# RFC 850 date layout; day and month names are spelled out in English
# so the result does not depend on the process locale
RFC850_FORMAT = "{weekday}, %d-{month}-%y %H:%M:%S %Z"
_WEEKDAYS = ("Monday", "Tuesday", "Wednesday", "Thursday", "Friday", "Saturday", "Sunday")
_MONTHS = ("Jan", "Feb", "Mar", "Apr", "May", "Jun", "Jul", "Aug", "Sep", "Oct", "Nov", "Dec")


class ProviderComponent:
    """Base class for data sources and resources.

    Subclasses set ``type_suffix`` and implement ``schema()``.
    """

    type_suffix = ""
    kind = "Data Source"

    def __init__(self):
        self.client: Optional[MangopayClient] = None

    def type_name(self, provider_type_name: str) -> str:
        return f"{provider_type_name}_{self.type_suffix}"

    def schema(self) -> Schema:
        raise NotImplementedError

    def configure(self, provider_data: Any) -> Diagnostics:
        """Attach the client built by the provider.

        An unconfigured provider (None) is accepted; any other type is
        reported as an error.
        """
        diags = Diagnostics()
        if provider_data is None:
            return diags
        if not isinstance(provider_data, MangopayClient):
            diags.add_error(
                f"Unexpected {self.kind} Configure Type",
                f"Expected MangopayClient, got: {type(provider_data).__name__}. "
                "Please report this issue to the provider developers.",
            )
            return diags
        self.client = provider_data
        return diags

    def _require_client(self, diags: Diagnostics) -> bool:
        if self.client is None:
            diags.add_error(
                "Unconfigured Mangopay Provider",
                "The provider has not been configured; call configure() before using data sources or resources.",
            )
            return False
        return True


def hook_to_state(hook: Hook) -> Dict[str, Any]:
    """Map a Hook onto snake_case state attributes."""
    return {
        "id": hook.id or "",
        "url": hook.url or "",
        "status": hook.status or "",
        "validity": hook.validity or "",
        "event_type": hook.event_type or "",
        "tag": hook.tag,
        "creation_date": hook.creation_date or 0,
    }


def timestamp_rfc850(now: Optional[datetime] = None) -> str:
    now = now or datetime.now(timezone.utc)
    layout = RFC850_FORMAT.format(weekday=_WEEKDAYS[now.weekday()], month=_MONTHS[now.month - 1])
    return now.strftime(layout)
