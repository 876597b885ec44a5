from typing import Any, Dict, List, Optional
from molecular_db.core.config import settings
from molecular_db.core.exceptions import DatabaseNotFoundError, DatabaseUnavailableError
from molecular_db.models.database import DataSource
from molecular_db.models.query import DatabaseMatch, DatabaseQuery, QueryType
from molecular_db.models.search import (
    SearchMultipleDatabasesRequest, SingleDatabaseSearchRequest, SearchResultEntry,
    DatabaseSearchResult, CategorySearchResult, SearchMultipleDatabasesResponse
)
from molecular_db.repositories.catalog_repository import DatabaseCatalog
from molecular_db.services.category import normalize_category
from molecular_db.services.mock_generator import MockMatchGenerator, make_rng
from molecular_db.utils.helpers import logger

# Placeholder payload attached to every search entry. It is not computed from
# the query or the source.
PLACEHOLDER_ENTRY_DATA: Dict[str, Any] = {
    "formula": "C9H8O4",
    "molecular_weight": 180.16,
    "smiles": "CC(=O)OC1=CC=CC=C1C(=O)O",
}


class SearchService:
    def __init__(self, catalog: DatabaseCatalog, generator: Optional[MockMatchGenerator] = None):
        self.catalog = catalog
        self.generator = generator or MockMatchGenerator()
        self.result_base_url = settings.SEARCH_RESULT_BASE_URL

    @classmethod
    def seeded(cls, catalog: DatabaseCatalog, seed: Optional[int] = None) -> "SearchService":
        """Build a service whose generator uses the given (or configured) seed"""
        return cls(catalog, MockMatchGenerator(make_rng(seed)))

    def search_multiple_databases(self, request: SearchMultipleDatabasesRequest) -> SearchMultipleDatabasesResponse:
        """Fan a query out over every online source of the requested categories.

        Category keys are taken in the order given, duplicates included. Keys
        with no online source, and sources or categories that end up empty,
        are left out of the response rather than reported.
        """
        category_keys = request.categories.split(",")
        logger.info(f"Searching '{request.query}' across categories {category_keys} (limit={request.limit})")

        results_by_category: List[CategorySearchResult] = []
        total_results = 0

        for category_key in category_keys:
            sources = [
                source for source in self.catalog.list_online()
                if normalize_category(source.category) == category_key
            ]
            if not sources:
                logger.debug(f"No online databases for category '{category_key}'")
                continue

            category_result = CategorySearchResult(category=category_key, databases=[])
            for source in sources:
                database_result = self._search_source(source, request.query, request.limit)
                if database_result.entries:
                    category_result.databases.append(database_result)
                    total_results += len(database_result.entries)

            if category_result.databases:
                results_by_category.append(category_result)

        logger.info(f"Search for '{request.query}' returned {total_results} entries in {len(results_by_category)} categories")
        return SearchMultipleDatabasesResponse(
            query=request.query,
            total_results=total_results,
            results_by_category=results_by_category,
        )

    def search_single_database(self, request: SingleDatabaseSearchRequest) -> DatabaseSearchResult:
        """Search one database; unknown or non-online ids are errors here"""
        source = self.catalog.get_by_id(request.database)
        if source is None:
            raise DatabaseNotFoundError(request.database)
        if not source.is_online:
            raise DatabaseUnavailableError(source.id, source.status.value)

        logger.info(f"Searching '{request.query}' in {source.name} (limit={request.limit})")
        return self._search_source(source, request.query, request.limit)

    def _search_source(self, source: DataSource, query: str, limit: int) -> DatabaseSearchResult:
        descriptor = DatabaseQuery(
            sequence=query,
            databases=[source.id],
            query_type=QueryType.BLAST,
        )
        # Generator output is already ranked, so the head is the top-k by score
        matches = self.generator.generate(source, descriptor)[:max(limit, 0)]
        return DatabaseSearchResult(
            database_name=source.name,
            entries=[self._to_entry(source, query, match) for match in matches],
        )

    def _to_entry(self, source: DataSource, query: str, match: DatabaseMatch) -> SearchResultEntry:
        return SearchResultEntry(
            id=match.accession,
            name=f"{query} match in {source.name}",
            description=match.description,
            url=f"{self.result_base_url}?db={source.id}&id={match.accession}",
            data=dict(PLACEHOLDER_ENTRY_DATA),
            relevance_score=match.score / 1000,
        )
