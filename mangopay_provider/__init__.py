"""Mangopay declarative provider package.

To use the REST client:
    from mangopay_provider.core.mangopay import MangopayClient, HookService

To configure the provider and its data sources/resources:
    from mangopay_provider.provider import MangopayProvider
"""
