import asyncio
import time
from typing import Awaitable, Callable, List, Optional, Tuple
from molecular_db.core.config import settings
from molecular_db.models.database import DataSource
from molecular_db.models.query import (
    DatabaseQuery, DatabaseResult, DatabaseResultMetadata, QueryParameters,
    QueryMetadata, QueryDatabasesResponse
)
from molecular_db.repositories.catalog_repository import DatabaseCatalog
from molecular_db.services.mock_generator import MockMatchGenerator, make_rng
from molecular_db.utils.helpers import logger, SourceQueryTimer

EXECUTION_MODES = ("concurrent", "sequential")


class QueryService:
    """Runs a query against explicit database ids with simulated latency.

    Each online source "responds" after its declared responseTime (scaled by
    `latency_scale`). In concurrent mode the waits overlap and the request takes
    about as long as the slowest source; in sequential mode they add up.
    """

    def __init__(
        self,
        catalog: DatabaseCatalog,
        generator: Optional[MockMatchGenerator] = None,
        execution_mode: Optional[str] = None,
        simulate_latency: Optional[bool] = None,
        latency_scale: Optional[float] = None,
        sleep: Callable[[float], Awaitable[None]] = asyncio.sleep,
    ):
        self.catalog = catalog
        self.generator = generator or MockMatchGenerator()
        self.execution_mode = execution_mode or settings.QUERY_EXECUTION_MODE
        if self.execution_mode not in EXECUTION_MODES:
            raise ValueError(f"Unknown execution mode: {self.execution_mode}")
        self.simulate_latency = settings.SIMULATE_LATENCY if simulate_latency is None else simulate_latency
        self.latency_scale = settings.LATENCY_SCALE if latency_scale is None else latency_scale
        self._sleep = sleep

    @classmethod
    def seeded(cls, catalog: DatabaseCatalog, seed: Optional[int] = None, **kwargs) -> "QueryService":
        return cls(catalog, MockMatchGenerator(make_rng(seed)), **kwargs)

    async def query_databases(self, query: DatabaseQuery) -> QueryDatabasesResponse:
        start = time.perf_counter()

        # Unknown and non-online ids are skipped, not treated as failures of the request
        eligible: List[DataSource] = []
        skipped: List[str] = []
        for database_id in query.databases:
            source = self.catalog.get_by_id(database_id)
            if source is None or not source.is_online:
                skipped.append(database_id)
                continue
            eligible.append(source)

        if skipped:
            logger.info(f"Skipping unavailable databases: {skipped}")

        # Matches are drawn up front, in request order, so a seeded generator
        # gives the same output whichever mode the waits run in
        planned: List[Tuple[DataSource, DatabaseResult]] = [
            (source, self._build_result(source, query)) for source in eligible
        ]

        if self.execution_mode == "concurrent":
            results = list(await asyncio.gather(*(self._respond(source, result) for source, result in planned)))
        else:
            results = []
            for source, result in planned:
                results.append(await self._respond(source, result))

        total_hits = sum(len(result.matches) for result in results)
        metadata = QueryMetadata(
            total_query_time=int((time.perf_counter() - start) * 1000),
            successful_queries=len(results),
            failed_queries=len(query.databases) - len(results),
            average_hits_per_database=total_hits / len(results) if results else 0,
            skipped_databases=skipped,
            execution_mode=self.execution_mode,
        )
        logger.info(
            f"Queried {metadata.successful_queries} databases ({metadata.failed_queries} skipped) "
            f"in {metadata.total_query_time}ms [{self.execution_mode}]"
        )
        return QueryDatabasesResponse(results=results, metadata=metadata)

    def _build_result(self, source: DataSource, query: DatabaseQuery) -> DatabaseResult:
        matches = self.generator.generate(source, query)
        return DatabaseResult(
            database_id=source.id,
            matches=matches,
            metadata=DatabaseResultMetadata(
                query_time=source.response_time,
                total_hits=len(matches),
                parameters=QueryParameters(
                    e_value=query.e_value or settings.DEFAULT_E_VALUE,
                    identity_threshold=query.identity_threshold or settings.DEFAULT_IDENTITY_THRESHOLD,
                    query_type=query.query_type,
                ),
            ),
        )

    async def _respond(self, source: DataSource, result: DatabaseResult) -> DatabaseResult:
        with SourceQueryTimer(source.id, operation=result.metadata.parameters.query_type.value) as timer:
            if self.simulate_latency:
                await self._sleep(source.response_time / 1000 * self.latency_scale)
            timer.set_hits(len(result.matches))
        return result
