from fastapi import APIRouter, HTTPException, Depends
from molecular_db.core.dependencies import get_catalog
from molecular_db.core.exceptions import MolecularDbException
from molecular_db.models.database import (
    DataSource, SupportedDatabasesResponse, DatabaseListResponse, DatabaseStatusResponse
)
from molecular_db.models.search import (
    SearchMultipleDatabasesRequest, SearchMultipleDatabasesResponse,
    SingleDatabaseSearchRequest, DatabaseSearchResult
)
from molecular_db.models.query import (
    DatabaseQuery, QueryDatabasesResponse, AnnotationSearchRequest, AnnotationSearchResponse
)
from molecular_db.repositories.catalog_repository import DatabaseCatalog
from molecular_db.services.annotation_service import AnnotationService
from molecular_db.services.catalog_service import CatalogService
from molecular_db.services.query_service import QueryService
from molecular_db.services.search_service import SearchService
from molecular_db.utils.helpers import log_api_call, logger

router = APIRouter()

@router.get("/supported", response_model=SupportedDatabasesResponse)
async def get_supported_databases(catalog: DatabaseCatalog = Depends(get_catalog)):
    """List every catalog database with its canonical category key"""
    log_api_call("/databases/supported", "GET")
    return CatalogService(catalog).get_supported_databases()

@router.get("/status", response_model=DatabaseStatusResponse)
async def get_database_status(catalog: DatabaseCatalog = Depends(get_catalog)):
    """Health snapshot of the catalog"""
    log_api_call("/databases/status", "GET")
    return CatalogService(catalog).get_status()

@router.get("", response_model=DatabaseListResponse)
async def list_databases(catalog: DatabaseCatalog = Depends(get_catalog)):
    """Full catalog with tier, status and latency summary"""
    log_api_call("/databases", "GET")
    return CatalogService(catalog).list_databases()

@router.post("/search", response_model=SearchMultipleDatabasesResponse)
async def search_multiple_databases(
    search_request: SearchMultipleDatabasesRequest,
    catalog: DatabaseCatalog = Depends(get_catalog)
):
    """
    Search every online database of the requested categories
    
    This endpoint:
    1. Splits `categories` on commas, keeping order and duplicates
    2. Generates mock matches for each online database of each category
    3. Keeps the top `limit` matches per database
    4. Drops empty databases and categories and totals the remaining entries
    """
    try:
        log_api_call("/databases/search", "POST")
        search_service = SearchService.seeded(catalog, search_request.seed)
        return search_service.search_multiple_databases(search_request)
    except MolecularDbException:
        raise
    except Exception as e:
        logger.error(f"Error in multi-database search: {str(e)}")
        log_api_call("/databases/search", "POST", error=str(e))
        raise HTTPException(
            status_code=500,
            detail=f"Search failed: {str(e)}"
        )

@router.post("/search/single", response_model=DatabaseSearchResult)
async def search_single_database(
    search_request: SingleDatabaseSearchRequest,
    catalog: DatabaseCatalog = Depends(get_catalog)
):
    """Search one database by id (404 when unknown, 503 when not online)"""
    try:
        log_api_call("/databases/search/single", "POST")
        search_service = SearchService.seeded(catalog, search_request.seed)
        return search_service.search_single_database(search_request)
    except MolecularDbException:
        raise
    except Exception as e:
        logger.error(f"Error in single-database search: {str(e)}")
        log_api_call("/databases/search/single", "POST", error=str(e))
        raise HTTPException(
            status_code=500,
            detail=f"Search failed: {str(e)}"
        )

@router.post("/query", response_model=QueryDatabasesResponse)
async def query_databases(
    query: DatabaseQuery,
    catalog: DatabaseCatalog = Depends(get_catalog)
):
    """
    Query explicit database ids with simulated per-database latency
    
    Unknown or non-online ids are skipped and listed in `metadata.skippedDatabases`.
    """
    try:
        log_api_call("/databases/query", "POST")
        query_service = QueryService.seeded(catalog, query.seed)
        return await query_service.query_databases(query)
    except MolecularDbException:
        raise
    except Exception as e:
        logger.error(f"Error querying databases: {str(e)}")
        log_api_call("/databases/query", "POST", error=str(e))
        raise HTTPException(
            status_code=500,
            detail=f"Query failed: {str(e)}"
        )

@router.post("/annotations/search", response_model=AnnotationSearchResponse)
async def search_database_annotations(annotation_request: AnnotationSearchRequest):
    """Look up mock annotations for an accession"""
    try:
        log_api_call("/databases/annotations/search", "POST")
        return AnnotationService().search_annotations(annotation_request)
    except Exception as e:
        logger.error(f"Error searching annotations: {str(e)}")
        log_api_call("/databases/annotations/search", "POST", error=str(e))
        raise HTTPException(
            status_code=500,
            detail=f"Annotation search failed: {str(e)}"
        )

@router.get("/{database_id}", response_model=DataSource)
async def get_database(database_id: str, catalog: DatabaseCatalog = Depends(get_catalog)):
    """Get a single catalog entry"""
    log_api_call(f"/databases/{database_id}", "GET")
    return CatalogService(catalog).get_database(database_id)
