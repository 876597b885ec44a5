import pytest

from molecular_db.core.exceptions import DatabaseNotFoundError, DatabaseUnavailableError
from molecular_db.models.search import SearchMultipleDatabasesRequest, SingleDatabaseSearchRequest
from molecular_db.repositories.catalog_repository import DatabaseCatalog
from molecular_db.services.search_service import PLACEHOLDER_ENTRY_DATA, SearchService
from .conftest import make_source


def search(catalog, categories, limit=5, query="Aspirin", seed=1):
    service = SearchService.seeded(catalog, seed)
    return service.search_multiple_databases(
        SearchMultipleDatabasesRequest(query=query, categories=categories, limit=limit)
    )


def test_single_genbank_scenario():
    catalog = DatabaseCatalog([make_source("ncbi_genbank", "NCBI GenBank")])
    response = search(catalog, "genomic", limit=2)

    assert response.query == "Aspirin"
    assert len(response.results_by_category) == 1
    category = response.results_by_category[0]
    assert category.category == "genomic"
    assert [db.database_name for db in category.databases] == ["NCBI GenBank"]
    entries = category.databases[0].entries
    assert 1 <= len(entries) <= 2
    assert response.total_results == len(entries)


def test_entry_shape():
    catalog = DatabaseCatalog([make_source("ncbi_genbank", "NCBI GenBank")])
    entry = search(catalog, "genomic").results_by_category[0].databases[0].entries[0]

    assert entry.id.startswith("GB_")
    assert entry.name == "Aspirin match in NCBI GenBank"
    assert entry.url == f"https://example.com/search?db=ncbi_genbank&id={entry.id}"
    assert entry.data == PLACEHOLDER_ENTRY_DATA
    assert 0 <= entry.relevance_score < 1


def test_unknown_category_returns_empty(mixed_catalog):
    response = search(mixed_catalog, "nonexistent")
    assert response.results_by_category == []
    assert response.total_results == 0


def test_only_online_sources_are_searched(mixed_catalog):
    response = search(mixed_catalog, "genomic,protein,pathogenicity,resistance")

    names = [db.database_name for category in response.results_by_category for db in category.databases]
    assert names == ["NCBI GenBank", "PDB", "CARD"]
    # pathogenicity only has a rate-limited source
    assert [c.category for c in response.results_by_category] == ["genomic", "protein", "resistance"]


@pytest.mark.parametrize("limit", [1, 3, 10, 50])
def test_limit_bounds_entries_per_database(mixed_catalog, limit):
    response = search(mixed_catalog, "genomic,protein", limit=limit)
    for category in response.results_by_category:
        for database in category.databases:
            assert 1 <= len(database.entries) <= limit


@pytest.mark.parametrize("limit", [0, -1, -5])
def test_non_positive_limit_yields_nothing(mixed_catalog, limit):
    response = search(mixed_catalog, "genomic,protein", limit=limit)
    assert response.results_by_category == []
    assert response.total_results == 0


def test_total_matches_included_entries(mixed_catalog):
    response = search(mixed_catalog, "genomic,protein,resistance", limit=4)
    assert response.total_results == sum(
        len(database.entries)
        for category in response.results_by_category
        for database in category.databases
    )
    assert all(category.databases for category in response.results_by_category)


def test_duplicate_categories_kept_in_order(mixed_catalog):
    response = search(mixed_catalog, "protein,genomic,protein")
    assert [c.category for c in response.results_by_category] == ["protein", "genomic", "protein"]


def test_categories_are_not_trimmed(mixed_catalog):
    response = search(mixed_catalog, "genomic, protein")
    assert [c.category for c in response.results_by_category] == ["genomic"]


def test_seeded_search_is_reproducible(mixed_catalog):
    first = search(mixed_catalog, "genomic,protein", seed=99)
    second = search(mixed_catalog, "genomic,protein", seed=99)
    assert first.model_dump() == second.model_dump()


def test_single_database_search(mixed_catalog):
    service = SearchService.seeded(mixed_catalog, 5)
    result = service.search_single_database(SingleDatabaseSearchRequest(database="pdb", query="lysozyme", limit=3))
    assert result.database_name == "PDB"
    assert 1 <= len(result.entries) <= 3
    assert all(entry.name == "lysozyme match in PDB" for entry in result.entries)


def test_single_database_search_errors(mixed_catalog):
    service = SearchService.seeded(mixed_catalog, 5)
    with pytest.raises(DatabaseNotFoundError):
        service.search_single_database(SingleDatabaseSearchRequest(database="nope", query="x"))
    with pytest.raises(DatabaseUnavailableError) as exc_info:
        service.search_single_database(SingleDatabaseSearchRequest(database="embl_ena", query="x"))
    assert exc_info.value.status_code == 503
