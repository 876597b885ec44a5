from molecular_db.repositories.catalog_repository import DatabaseCatalog
from .conftest import make_source


def test_root_and_health(client):
    assert client.get("/").json()["status"] == "active"
    resp = client.get("/health")
    assert resp.status_code == 200
    data = resp.json()
    assert data["status"] == "healthy"
    assert data["catalog_size"] == 25
    assert data["uptime"] is not None


def test_supported_databases(client):
    resp = client.get("/databases/supported")
    assert resp.status_code == 200
    databases = resp.json()["databases"]
    assert len(databases) == 25
    assert databases[0] == {"key": "ncbi_genbank", "name": "NCBI GenBank", "category": "genomic"}
    assert {db["category"] for db in databases} == {"genomic", "protein", "pathogenicity"}


def test_list_databases_uses_wire_names(client):
    resp = client.get("/databases")
    assert resp.status_code == 200
    data = resp.json()
    first = data["databases"][0]
    assert set(first) == {"id", "name", "tier", "category", "url", "status", "lastChecked", "responseTime"}
    summary = data["summary"]
    assert summary["totalDatabases"] == 25
    assert summary["byTier"] == {"tier1": 10, "tier2": 10, "tier3": 5, "tier4": 0, "tier5": 0, "tier6": 0}
    assert summary["byStatus"]["online"] == 25
    assert summary["averageResponseTime"] == sum(db["responseTime"] for db in data["databases"]) / 25


def test_list_empty_catalog(client, use_catalog):
    use_catalog(DatabaseCatalog())
    summary = client.get("/databases").json()["summary"]
    assert summary["totalDatabases"] == 0
    assert summary["averageResponseTime"] is None


def test_get_database(client):
    resp = client.get("/databases/pfam")
    assert resp.status_code == 200
    assert resp.json()["name"] == "Pfam"

    resp = client.get("/databases/unknown_db")
    assert resp.status_code == 404


def test_search_genbank_scenario(client, use_catalog):
    use_catalog(DatabaseCatalog([make_source("ncbi_genbank", "NCBI GenBank")]))
    resp = client.post("/databases/search", json={"query": "Aspirin", "categories": "genomic", "limit": 2})
    assert resp.status_code == 200
    data = resp.json()
    assert data["query"] == "Aspirin"
    assert len(data["results_by_category"]) == 1
    category = data["results_by_category"][0]
    assert category["category"] == "genomic"
    assert len(category["databases"]) == 1
    database = category["databases"][0]
    assert database["database_name"] == "NCBI GenBank"
    assert 1 <= len(database["entries"]) <= 2
    assert data["total_results"] == len(database["entries"])
    assert set(database["entries"][0]) == {"id", "name", "description", "url", "data", "relevance_score"}


def test_search_unknown_category(client):
    resp = client.post("/databases/search", json={"query": "Aspirin", "categories": "nonexistent", "limit": 5})
    assert resp.status_code == 200
    assert resp.json() == {"query": "Aspirin", "total_results": 0, "results_by_category": []}


def test_search_with_seed_is_reproducible(client):
    payload = {"query": "BRCA1", "categories": "genomic,pathogenicity", "limit": 3, "seed": 123}
    first = client.post("/databases/search", json=payload).json()
    second = client.post("/databases/search", json=payload).json()
    assert first == second
    assert first["total_results"] == sum(
        len(db["entries"]) for category in first["results_by_category"] for db in category["databases"]
    )


def test_search_validation_error(client):
    resp = client.post("/databases/search", json={"query": "x", "categories": "genomic", "limit": "many"})
    assert resp.status_code == 422


def test_single_database_search(client, use_catalog, mixed_catalog):
    use_catalog(mixed_catalog)
    resp = client.post("/databases/search/single", json={"database": "pdb", "query": "lysozyme"})
    assert resp.status_code == 200
    assert resp.json()["database_name"] == "PDB"
    assert 1 <= len(resp.json()["entries"]) <= 10

    assert client.post("/databases/search/single", json={"database": "nope", "query": "x"}).status_code == 404
    assert client.post("/databases/search/single", json={"database": "pfam", "query": "x"}).status_code == 503


def test_query_databases(client, use_catalog, mixed_catalog):
    use_catalog(mixed_catalog)
    resp = client.post("/databases/query", json={
        "sequence": "ATGCGTACGT",
        "databases": ["ncbi_genbank", "vfdb", "nope"],
        "queryType": "similarity",
        "eValue": 0.001,
    })
    assert resp.status_code == 200
    data = resp.json()
    assert [r["databaseId"] for r in data["results"]] == ["ncbi_genbank"]
    result = data["results"][0]
    assert result["metadata"]["parameters"] == {"eValue": 0.001, "identityThreshold": 0.7, "queryType": "similarity"}
    assert result["metadata"]["totalHits"] == len(result["matches"])
    match = result["matches"][0]
    assert {"accession", "organism", "eValue", "identity", "coverage", "alignmentLength", "annotations"} <= set(match)
    metadata = data["metadata"]
    assert metadata["successfulQueries"] == 1
    assert metadata["failedQueries"] == 2
    assert metadata["skippedDatabases"] == ["vfdb", "nope"]


def test_query_rejects_unknown_query_type(client):
    resp = client.post("/databases/query", json={"sequence": "ATGC", "databases": ["pdb"], "queryType": "fuzzy"})
    assert resp.status_code == 422


def test_database_status(client, use_catalog, mixed_catalog):
    resp = client.get("/databases/status")
    assert resp.status_code == 200
    assert resp.json()["status"] == "healthy"

    use_catalog(mixed_catalog)
    data = client.get("/databases/status").json()
    assert data["status"] == "degraded"
    assert "lastUpdate" in data
    assert data["databases"][1]["status"] == "offline"
    assert set(data["databases"][0]) == {"id", "name", "status", "responseTime", "lastChecked", "tier", "category"}


def test_annotation_search(client):
    resp = client.post("/databases/annotations/search", json={"accession": "NP_123456"})
    assert resp.status_code == 200
    annotations = resp.json()["annotations"]
    assert [a["source"] for a in annotations] == ["NCBI RefSeq", "KEGG"]
    assert annotations[0]["evidence"] == ["experimental", "sequence similarity"]
