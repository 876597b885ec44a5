from pydantic import BaseModel, Field
from typing import Any, Dict, List, Optional

class SearchMultipleDatabasesRequest(BaseModel):
    """Model for a category fan-out search request"""
    query: str = Field(..., description="Search text, echoed back and passed to the generators")
    categories: str = Field(..., description="Comma-separated canonical category keys")
    limit: int = Field(..., description="Maximum entries kept per database")
    seed: Optional[int] = Field(None, ge=0, description="Seed for reproducible mock results")

class SingleDatabaseSearchRequest(BaseModel):
    """Model for a search against one database"""
    database: str = Field(..., description="Database id from the catalog")
    query: str
    limit: int = 10
    seed: Optional[int] = Field(None, ge=0)

class SearchResultEntry(BaseModel):
    """One hit returned for a query against one database"""
    id: str
    name: str
    description: str
    url: str
    data: Dict[str, Any]
    relevance_score: float

class DatabaseSearchResult(BaseModel):
    database_name: str
    entries: List[SearchResultEntry]

class CategorySearchResult(BaseModel):
    category: str
    databases: List[DatabaseSearchResult]

class SearchMultipleDatabasesResponse(BaseModel):
    query: str
    total_results: int = 0
    results_by_category: List[CategorySearchResult] = []
