"""Inbound adapters - implementations for external callers.

Inbound adapters expose the item store over HTTP.
"""

from item_store.adapters.inbound.rest_api import create_app

__all__ = ["create_app"]
