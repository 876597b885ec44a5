"""Immutable in-memory registry of simulated database sources."""

from datetime import datetime
from typing import Any, Dict, Iterable, List, Optional, Tuple
from molecular_db.models.database import DataSource
from molecular_db.repositories.base_repository import BaseRepository
from molecular_db.repositories.catalog_data import ALL_DATABASES
from molecular_db.utils.helpers import logger


class DatabaseCatalog(BaseRepository[DataSource]):
    """Read-only catalog of database descriptors.

    Built once and shared by every request handler. Sources keep the order
    they were given in, which is the order search and status views report.
    """
    
    def __init__(self, sources: Iterable[DataSource] = ()):
        self._sources: Tuple[DataSource, ...] = tuple(sources)
        self._by_id: Dict[str, DataSource] = {}
        for source in self._sources:
            if source.id in self._by_id:
                raise ValueError(f"Duplicate database id in catalog: {source.id}")
            self._by_id[source.id] = source
    
    @classmethod
    def from_records(cls, records: Iterable[Dict[str, Any]], checked_at: Optional[datetime] = None) -> "DatabaseCatalog":
        """Build a catalog from plain records, stamping them with a health-check time."""
        checked_at = checked_at or datetime.utcnow()
        sources = [
            DataSource(**{"last_checked": checked_at, **record})
            for record in records
        ]
        return cls(sources)
    
    @classmethod
    def default(cls) -> "DatabaseCatalog":
        """Build the built-in tier 1-3 catalog."""
        catalog = cls.from_records(ALL_DATABASES)
        logger.info(f"Database catalog loaded with {len(catalog)} sources")
        return catalog
    
    def __len__(self) -> int:
        return len(self._sources)
    
    def __iter__(self):
        return iter(self._sources)
    
    def __contains__(self, database_id: object) -> bool:
        return database_id in self._by_id
    
    def get_by_id(self, entity_id: str) -> Optional[DataSource]:
        return self._by_id.get(entity_id)
    
    def list_all(self) -> List[DataSource]:
        return list(self._sources)
    
    def list_online(self) -> List[DataSource]:
        """Sources eligible for search and query."""
        return [source for source in self._sources if source.is_online]
