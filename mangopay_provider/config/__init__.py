"""Configuration module for the Mangopay provider."""
from .settings import ProviderSettings, load_settings

__all__ = ["ProviderSettings", "load_settings"]
