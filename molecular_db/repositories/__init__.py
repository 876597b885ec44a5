# Repositories module for data access layer

from .base_repository import BaseRepository
from .catalog_repository import DatabaseCatalog

__all__ = [
    "BaseRepository",
    "DatabaseCatalog",
]
