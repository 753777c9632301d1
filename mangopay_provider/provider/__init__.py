"""Provider adapter mapping configuration/state onto the Mangopay client.

Data sources and resources exchange plain dicts keyed by snake_case
attribute names and report problems as Diagnostics instead of raising.
"""
from .diagnostics import Diagnostic, Diagnostics, Result
from .schema import Schema, Attribute
from .provider import MangopayProvider, TYPE_NAME
from .clients_data_source import ClientsDataSource
from .hooks_data_source import HooksDataSource
from .hook_resource import HookResource

__all__ = [
    "Diagnostic",
    "Diagnostics",
    "Result",
    "Schema",
    "Attribute",
    "MangopayProvider",
    "TYPE_NAME",
    "ClientsDataSource",
    "HooksDataSource",
    "HookResource",
]
