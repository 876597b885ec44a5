# Pydantic models and schemas
from .database import (
    DatabaseStatus, DataSource, SupportedDatabase, SupportedDatabasesResponse,
    TierCounts, StatusCounts, CatalogSummary, DatabaseListResponse,
    DatabaseStatusEntry, DatabaseStatusResponse
)
from .search import (
    SearchMultipleDatabasesRequest, SingleDatabaseSearchRequest, SearchResultEntry,
    DatabaseSearchResult, CategorySearchResult, SearchMultipleDatabasesResponse
)
from .query import (
    QueryType, AnnotationType, DatabaseAnnotation, DatabaseQuery, DatabaseMatch,
    QueryParameters, DatabaseResultMetadata, DatabaseResult, QueryMetadata,
    QueryDatabasesResponse, AnnotationSearchRequest, AnnotationSearchResponse
)

__all__ = [
    "DatabaseStatus",
    "DataSource",
    "SupportedDatabase",
    "SupportedDatabasesResponse",
    "TierCounts",
    "StatusCounts",
    "CatalogSummary",
    "DatabaseListResponse",
    "DatabaseStatusEntry",
    "DatabaseStatusResponse",
    "SearchMultipleDatabasesRequest",
    "SingleDatabaseSearchRequest",
    "SearchResultEntry",
    "DatabaseSearchResult",
    "CategorySearchResult",
    "SearchMultipleDatabasesResponse",
    "QueryType",
    "AnnotationType",
    "DatabaseAnnotation",
    "DatabaseQuery",
    "DatabaseMatch",
    "QueryParameters",
    "DatabaseResultMetadata",
    "DatabaseResult",
    "QueryMetadata",
    "QueryDatabasesResponse",
    "AnnotationSearchRequest",
    "AnnotationSearchResponse",
]
