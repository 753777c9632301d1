"""Mangopay API client library.

Architecture:
- client.py: HTTP client with token acquisition and request execution
- models.py: Hook, PlatformClient and token representations
- hooks.py: Hook list/read/create/update
- platform_client.py: Platform client profile
- exceptions.py: Typed exceptions for error handling

Usage:
    from mangopay_provider.core.mangopay import MangopayClient, HookService, Hook
    
    client = MangopayClient("my-client-id", "my-api-key", "sandbox")
    hooks = HookService(client)
    hook = hooks.create_hook(Hook(url="https://example.com/hook", event_type="PAYIN_NORMAL_SUCCEEDED"))
"""
from .client import (
    MangopayClient,
    OAuth2Config,
    resolve_host,
    API_HOSTS,
    DEFAULT_ENVIRONMENT,
    REQUEST_TIMEOUT,
)
from .exceptions import (
    MangopayError,
    MangopayAPIError,
    MangopayConfigError,
)
from .models import (
    Address,
    AuthResponse,
    Hook,
    PlatformCategorization,
    PlatformClient,
)
from .hooks import HookService, DEFAULT_PER_PAGE
from .platform_client import PlatformClientService

__all__ = [
    # Client
    "MangopayClient",
    "OAuth2Config",
    "resolve_host",
    "API_HOSTS",
    "DEFAULT_ENVIRONMENT",
    "REQUEST_TIMEOUT",
    
    # Exceptions
    "MangopayError",
    "MangopayAPIError",
    "MangopayConfigError",
    
    # Models
    "Address",
    "AuthResponse",
    "Hook",
    "PlatformCategorization",
    "PlatformClient",
    
    # Services
    "HookService",
    "PlatformClientService",
    "DEFAULT_PER_PAGE",
]
