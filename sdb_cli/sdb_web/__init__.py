"""Public exports for the sdb-web viewer."""

from .app import create_app, domain_items_query

__all__ = ["create_app", "domain_items_query"]
