from enum import Enum
from pydantic import Field
from typing import List, Optional
from datetime import datetime
from molecular_db.models.base import WireModel, FrozenWireModel

class DatabaseStatus(str, Enum):
    """Availability of a simulated database"""
    ONLINE = "online"
    OFFLINE = "offline"
    MAINTENANCE = "maintenance"
    RATE_LIMITED = "rate_limited"

class DataSource(FrozenWireModel):
    """Descriptor of a (simulated) external database"""
    id: str = Field(..., description="Unique, stable database key")
    name: str = Field(..., description="Display name")
    tier: int = Field(..., ge=1, le=6, description="Informational rank 1-6")
    category: str = Field(..., description="Free-text grouping label, e.g. 'Genomic & Sequence'")
    url: str
    status: DatabaseStatus
    last_checked: datetime = Field(..., alias="lastChecked")
    response_time: int = Field(..., alias="responseTime", description="Simulated latency in milliseconds")

    @property
    def is_online(self) -> bool:
        return self.status == DatabaseStatus.ONLINE

class SupportedDatabase(WireModel):
    key: str
    name: str
    category: str = Field(..., description="Canonical category key")

class SupportedDatabasesResponse(WireModel):
    databases: List[SupportedDatabase] = []

class TierCounts(WireModel):
    tier1: int = 0
    tier2: int = 0
    tier3: int = 0
    tier4: int = 0
    tier5: int = 0
    tier6: int = 0

class StatusCounts(WireModel):
    online: int = 0
    offline: int = 0
    maintenance: int = 0
    rate_limited: int = 0

class CatalogSummary(WireModel):
    total_databases: int = Field(0, alias="totalDatabases")
    by_tier: TierCounts = Field(default_factory=TierCounts, alias="byTier")
    by_status: StatusCounts = Field(default_factory=StatusCounts, alias="byStatus")
    average_response_time: Optional[float] = Field(
        None, alias="averageResponseTime", description="Mean responseTime in ms; null for an empty catalog"
    )

class DatabaseListResponse(WireModel):
    databases: List[DataSource] = []
    summary: CatalogSummary

class DatabaseStatusEntry(WireModel):
    id: str
    name: str
    status: DatabaseStatus
    response_time: int = Field(..., alias="responseTime")
    last_checked: datetime = Field(..., alias="lastChecked")
    tier: int
    category: str

class DatabaseStatusResponse(WireModel):
    status: str = Field(..., description="healthy, degraded or down")
    databases: List[DatabaseStatusEntry] = []
    last_update: datetime = Field(default_factory=datetime.utcnow, alias="lastUpdate")
