from enum import Enum
from pydantic import Field
from typing import List, Optional
from molecular_db.models.base import WireModel

class QueryType(str, Enum):
    BLAST = "blast"
    EXACT = "exact"
    SIMILARITY = "similarity"
    ANNOTATION = "annotation"

class AnnotationType(str, Enum):
    FUNCTION = "function"
    STRUCTURE = "structure"
    PATHWAY = "pathway"
    REGULATION = "regulation"
    EXPRESSION = "expression"
    INTERACTION = "interaction"

class DatabaseAnnotation(WireModel):
    type: AnnotationType
    source: str
    value: str
    confidence: float
    evidence: List[str] = []

class DatabaseQuery(WireModel):
    """Model for a query against explicit database ids"""
    sequence: str
    databases: List[str] = []
    query_type: QueryType = Field(..., alias="queryType")
    e_value: Optional[float] = Field(None, alias="eValue")
    identity_threshold: Optional[float] = Field(None, alias="identityThreshold")
    seed: Optional[int] = Field(None, ge=0, description="Seed for reproducible mock results")

class DatabaseMatch(WireModel):
    id: str
    accession: str
    description: str
    organism: Optional[str] = None
    score: float
    e_value: Optional[float] = Field(None, alias="eValue")
    identity: Optional[float] = None
    coverage: Optional[float] = None
    alignment_length: Optional[int] = Field(None, alias="alignmentLength")
    annotations: List[DatabaseAnnotation] = []

class QueryParameters(WireModel):
    e_value: float = Field(..., alias="eValue")
    identity_threshold: float = Field(..., alias="identityThreshold")
    query_type: QueryType = Field(..., alias="queryType")

class DatabaseResultMetadata(WireModel):
    query_time: int = Field(..., alias="queryTime", description="Simulated latency in ms")
    total_hits: int = Field(..., alias="totalHits")
    parameters: QueryParameters

class DatabaseResult(WireModel):
    database_id: str = Field(..., alias="databaseId")
    matches: List[DatabaseMatch] = []
    metadata: DatabaseResultMetadata

class QueryMetadata(WireModel):
    total_query_time: int = Field(..., alias="totalQueryTime", description="Wall-clock time in ms")
    successful_queries: int = Field(..., alias="successfulQueries")
    failed_queries: int = Field(..., alias="failedQueries")
    average_hits_per_database: float = Field(..., alias="averageHitsPerDatabase")
    skipped_databases: List[str] = Field(default_factory=list, alias="skippedDatabases")
    execution_mode: str = Field(..., alias="executionMode")

class QueryDatabasesResponse(WireModel):
    results: List[DatabaseResult] = []
    metadata: QueryMetadata

class AnnotationSearchRequest(WireModel):
    accession: str
    databases: Optional[List[str]] = None

class AnnotationSearchResponse(WireModel):
    annotations: List[DatabaseAnnotation] = []
