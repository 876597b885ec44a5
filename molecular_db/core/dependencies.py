"""FastAPI dependencies shared by the endpoint modules."""

from fastapi import Request
from molecular_db.repositories.catalog_repository import DatabaseCatalog

def get_catalog(request: Request) -> DatabaseCatalog:
    """Return the catalog installed on the application at startup"""
    return request.app.state.catalog
