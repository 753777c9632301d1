"""Core Mangopay API access.

Module Structure:
    - mangopay/ : Low-level Mangopay REST client (token, hooks, platform client)

The provider adapter (mangopay_provider.provider) builds on these modules;
nothing here depends on it.
"""
