import os
os.environ["SIMULATE_LATENCY"] = "false"
os.environ.pop("MOCK_RANDOM_SEED", None)
import pytest
from datetime import datetime
from fastapi.testclient import TestClient

from molecular_db.main import app
from molecular_db.core.dependencies import get_catalog
from molecular_db.models.database import DataSource
from molecular_db.repositories.catalog_repository import DatabaseCatalog


def make_source(database_id: str, name: str = None, category: str = "Genomic & Sequence",
                status: str = "online", tier: int = 1, response_time: int = 100) -> DataSource:
    return DataSource(
        id=database_id,
        name=name or database_id.upper(),
        tier=tier,
        category=category,
        url=f"https://example.org/{database_id}",
        status=status,
        last_checked=datetime(2024, 1, 1),
        response_time=response_time,
    )


@pytest.fixture
def mixed_catalog():
    return DatabaseCatalog([
        make_source("ncbi_genbank", "NCBI GenBank"),
        make_source("embl_ena", "EMBL-EBI ENA", status="offline"),
        make_source("pdb", "PDB", category="Protein Structure & Function", tier=2),
        make_source("pfam", "Pfam", category="Protein Structure & Function", tier=2, status="maintenance"),
        make_source("vfdb", "VFDB", category="Pathogenicity & Virulence", tier=3, status="rate_limited"),
        make_source("card", "CARD", category="Antimicrobial Resistance", tier=4),
    ])


@pytest.fixture
def client():
    with TestClient(app) as c:
        yield c


@pytest.fixture
def use_catalog():
    """Swap the application catalog for the duration of a test"""
    def _install(catalog: DatabaseCatalog):
        app.dependency_overrides[get_catalog] = lambda: catalog
        return catalog
    yield _install
    app.dependency_overrides.pop(get_catalog, None)
