from datetime import datetime
from molecular_db.models.database import (
    DatabaseStatus, SupportedDatabase, SupportedDatabasesResponse, TierCounts,
    StatusCounts, CatalogSummary, DatabaseListResponse, DatabaseStatusEntry,
    DatabaseStatusResponse, DataSource
)
from molecular_db.core.exceptions import DatabaseNotFoundError
from molecular_db.repositories.catalog_repository import DatabaseCatalog
from molecular_db.services.category import normalize_category
from molecular_db.utils.helpers import logger


class CatalogService:
    """Read-only views over the database catalog"""

    def __init__(self, catalog: DatabaseCatalog):
        self.catalog = catalog

    def get_supported_databases(self) -> SupportedDatabasesResponse:
        """One {key, name, category} per catalog entry, with canonical categories"""
        return SupportedDatabasesResponse(databases=[
            SupportedDatabase(key=source.id, name=source.name, category=normalize_category(source.category))
            for source in self.catalog
        ])

    def get_database(self, database_id: str) -> DataSource:
        source = self.catalog.get_by_id(database_id)
        if source is None:
            raise DatabaseNotFoundError(database_id)
        return source

    def list_databases(self) -> DatabaseListResponse:
        return DatabaseListResponse(databases=self.catalog.list_all(), summary=self.get_summary())

    def get_summary(self) -> CatalogSummary:
        sources = self.catalog.list_all()

        by_tier = {f"tier{tier}": 0 for tier in range(1, 7)}
        by_status = {status.value: 0 for status in DatabaseStatus}
        for source in sources:
            by_tier[f"tier{source.tier}"] += 1
            by_status[source.status.value] += 1

        average_response_time = None
        if sources:
            average_response_time = sum(source.response_time for source in sources) / len(sources)
        else:
            logger.warning("Catalog is empty; average response time is undefined")

        return CatalogSummary(
            total_databases=len(sources),
            by_tier=TierCounts(**by_tier),
            by_status=StatusCounts(**by_status),
            average_response_time=average_response_time,
        )

    def get_status(self) -> DatabaseStatusResponse:
        """Snapshot of every source's simulated health"""
        entries = [
            DatabaseStatusEntry(
                id=source.id,
                name=source.name,
                status=source.status,
                response_time=source.response_time,
                last_checked=source.last_checked,
                tier=source.tier,
                category=source.category,
            )
            for source in self.catalog
        ]
        online = sum(1 for source in self.catalog if source.is_online)
        if entries and online == len(entries):
            overall = "healthy"
        elif online > 0:
            overall = "degraded"
        else:
            overall = "down"

        return DatabaseStatusResponse(status=overall, databases=entries, last_update=datetime.utcnow())
