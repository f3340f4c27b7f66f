"""Mini README: Interactive interfaces for Ledgerbook.

Exports the FastAPI application factory serving the ledger as JSON. A
browser or desktop front end renders these payloads; it owns forms, charts
and navigation.
"""

from .web_app import create_application

__all__ = ["create_application"]
