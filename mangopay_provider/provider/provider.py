"""Mangopay provider: configuration and registry of data sources/resources."""
from __future__ import annotations
import logging
from typing import Optional, Dict, Any, Callable, List

import requests

from mangopay_provider.config.settings import (
    load_settings,
    ENV_CLIENT_ID,
    ENV_CLIENT_SECRET,
    ENV_ENVIRONMENT,
)
from mangopay_provider.core.mangopay import MangopayClient, MangopayError

from .diagnostics import Diagnostics
from .schema import Schema, Attribute

logger = logging.getLogger(__name__)

TYPE_NAME = "mangopay"

_MISSING_ATTRIBUTE_MESSAGES = {
    "client_id": (
        "Missing Mangopay API Client ID",
        "The provider cannot create the Mangopay API client as there is a missing or empty value for the "
        f"Mangopay API Client ID. Set the client_id value in the configuration, or use the {ENV_CLIENT_ID} "
        "environment variable. If either is already set, ensure the value is not empty.",
    ),
    "client_secret": (
        "Missing Mangopay API Client Secret",
        "The provider cannot create the Mangopay API client as there is a missing value for the Mangopay API "
        f"client secret. Set the client_secret value in the configuration, or use the {ENV_CLIENT_SECRET} "
        "environment variable. If either is already set, ensure the value is not empty.",
    ),
    "environment": (
        "Missing Mangopay API Mangopay Environment",
        "The provider cannot create the Mangopay API client as there is a missing value for the Mangopay API "
        f"Mangopay Environment. Set the environment value in the configuration, or use the {ENV_ENVIRONMENT} "
        "environment variable. If either is already set, ensure the value is not empty.",
    ),
}


class MangopayProvider:
    """Provider exposing Mangopay hooks and the platform client profile.

    Usage:
        provider = MangopayProvider()
        diags = provider.configure({"client_id": "my-client", "client_secret": "key"})
        hooks = provider.data_source("mangopay_hooks").read()
    """

    type_name = TYPE_NAME

    def __init__(self, version: str = "dev", http: Optional[requests.Session] = None):
        """Initialize an unconfigured provider.

        Args:
            version: Provider version ("dev" for local builds, "test" in tests)
            http: Transport handed to the Mangopay client (defaults to requests.Session)
        """
        self.version = version
        self.http = http
        self.client: Optional[MangopayClient] = None

    def schema(self) -> Schema:
        return Schema(
            description="Interact with the Mangopay API.",
            attributes={
                "client_id": Attribute(
                    description=f"Client ID for the Mangopay API. May also be provided via {ENV_CLIENT_ID}.",
                    optional=True,
                ),
                "client_secret": Attribute(
                    description=f"Client Secret for the Mangopay API. May also be provided via {ENV_CLIENT_SECRET}.",
                    optional=True,
                    sensitive=True,
                ),
                "environment": Attribute(
                    description=f"Mangopay environment to use (sandbox or production). May also be provided via {ENV_ENVIRONMENT}.",
                    optional=True,
                ),
            },
        )

    def configure(self, config: Optional[Dict[str, Any]] = None) -> Diagnostics:
        """Build the shared Mangopay client from configuration and environment.

        Configuration values win over the MANGOPAY_* environment variables.
        The client (and its token) is created once; data sources and
        resources handed out afterwards share it.
        """
        config = config or {}
        diags = self.schema().validate(config)
        if diags.has_error():
            return diags

        settings = load_settings(
            client_id=config.get("client_id"),
            client_secret=config.get("client_secret"),
            environment=config.get("environment"),
        )

        for name in settings.missing:
            summary, detail = _MISSING_ATTRIBUTE_MESSAGES[name]
            diags.add_attribute_error(name, summary, detail)

        if diags.has_error():
            return diags

        try:
            client = MangopayClient(
                settings.client_id,
                settings.client_secret,
                settings.environment,
                base_url=settings.base_url or None,
                http=self.http,
            )
        except (MangopayError, requests.RequestException, ValueError) as e:
            diags.add_error(
                "Unable to Create Mangopay API Client",
                "An unexpected error occurred when creating the Mangopay API client. "
                "If the error is not clear, please contact the provider developers.\n\n"
                f"Mangopay Client Error: {e}",
            )
            return diags

        logger.info("Provider configured with mangopay client (environment=%s)", client.environment)
        self.client = client
        return diags

    def data_sources(self) -> List[Callable]:
        from .clients_data_source import ClientsDataSource
        from .hooks_data_source import HooksDataSource

        return [ClientsDataSource, HooksDataSource]

    def resources(self) -> List[Callable]:
        from .hook_resource import HookResource

        return [HookResource]

    def data_source(self, type_name: str):
        """Return a configured data source instance by its type name."""
        return self._instantiate(self.data_sources(), type_name)

    def resource(self, type_name: str):
        """Return a configured resource instance by its type name."""
        return self._instantiate(self.resources(), type_name)

    def _instantiate(self, factories: List[Callable], type_name: str):
        for factory in factories:
            instance = factory()
            if instance.type_name(self.type_name) == type_name:
                diags = instance.configure(self.client)
                if diags.has_error():
                    raise TypeError(diags.errors[0].detail)
                return instance
        raise KeyError(f"Unknown type '{type_name}' for provider '{self.type_name}'")
