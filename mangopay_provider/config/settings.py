"""Settings loader with environment variable and Docker secrets integration."""
from __future__ import annotations
import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

logger = logging.getLogger(__name__)

ENV_CLIENT_ID = "MANGOPAY_CLIENT_ID"
ENV_CLIENT_SECRET = "MANGOPAY_CLIENT_SECRET"
ENV_ENVIRONMENT = "MANGOPAY_ENVIRONMENT"
ENV_BASE_URL = "MANGOPAY_BASE_URL"


def _load_secret_from_file(secret_name: str, env_var: str | None = None) -> str | None:
    """
    Load secret from /run/secrets (Docker secrets pattern).

    Priority:
    1. /run/secrets/{secret_name} (Docker secrets mount)
    2. Environment variable (fallback)

    Args:
        secret_name: Name of the secret file in /run/secrets
        env_var: Optional environment variable name to check as fallback

    Returns:
        Secret value or None if not found
    """
    secret_file = Path("/run/secrets") / secret_name

    if secret_file.exists() and secret_file.is_file():
        try:
            secret_value = secret_file.read_text().strip()
            if secret_value:
                logger.info("Loaded %s from /run/secrets", secret_name)
                return secret_value
        except OSError as e:
            logger.warning("Failed to read /run/secrets/%s: %s", secret_name, e)

    if env_var:
        secret_value = os.getenv(env_var)
        if secret_value:
            logger.info("Loaded %s from environment", env_var)
            return secret_value

    return None


@dataclass
class ProviderSettings:
    """Provider configuration container.

    Empty strings mean "not set"; the provider turns them into diagnostics.
    """
    client_id: str = ""
    client_secret: str = ""
    environment: str = ""
    base_url: str = ""

    @property
    def missing(self) -> list[str]:
        """Names of required settings that are empty."""
        return [
            name
            for name in ("client_id", "client_secret", "environment")
            if not getattr(self, name)
        ]


def load_settings(
    client_id: Optional[str] = None,
    client_secret: Optional[str] = None,
    environment: Optional[str] = None,
) -> ProviderSettings:
    """Resolve provider settings.

    Explicit values win; None falls back to /run/secrets (client secret
    only) and then to the MANGOPAY_* environment variables.
    """
    if client_id is None:
        client_id = os.environ.get(ENV_CLIENT_ID, "")
    if client_secret is None:
        client_secret = _load_secret_from_file("mangopay_client_secret", ENV_CLIENT_SECRET) or ""
    if environment is None:
        environment = os.environ.get(ENV_ENVIRONMENT, "")

    base_url = os.environ.get(ENV_BASE_URL, "")

    logger.debug("Settings resolved; client_id=%s environment=%s", client_id or "<unset>", environment or "<unset>")
    return ProviderSettings(
        client_id=client_id,
        client_secret=client_secret,
        environment=environment,
        base_url=base_url,
    )
