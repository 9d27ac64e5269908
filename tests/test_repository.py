import pytest
from prometheus_client import REGISTRY
from sqlalchemy.exc import OperationalError

from services.product_service.errors import NotFound, StorageError
from services.product_service.repository import ProductRepository, _storage_failure
from services.product_service.seed import SAMPLE_PRODUCTS
from services.product_service.validation import validate_for_create


def _fields(name, quantity=1):
    return validate_for_create({"name": name, "price": 1.0, "quantity": quantity})


async def test_initialize_seeds_only_when_empty(bare_db):
    inserted = await ProductRepository.initialize(bare_db)
    assert inserted == len(SAMPLE_PRODUCTS) == 20

    again = await ProductRepository.initialize(bare_db)
    assert again == 0
    assert await ProductRepository.count(bare_db) == 20


async def test_seed_ids_follow_insertion_order(bare_db):
    await ProductRepository.initialize(bare_db)
    products = await ProductRepository.list_all(bare_db)
    by_id = {p.id: p.name for p in products}
    assert by_id[1] == SAMPLE_PRODUCTS[0]["name"]
    assert by_id[20] == SAMPLE_PRODUCTS[-1]["name"]


async def test_initialize_without_seed_leaves_table_empty(bare_db):
    assert await ProductRepository.initialize(bare_db, seed=False) == 0
    assert await ProductRepository.list_all(bare_db) == []


async def test_insert_assigns_increasing_ids(db):
    first = await ProductRepository.insert(db, _fields("a"))
    second = await ProductRepository.insert(db, _fields("b"))
    assert second > first


async def test_list_all_is_newest_first(db):
    ids = [await ProductRepository.insert(db, _fields(name)) for name in "abc"]
    listed = [p.id for p in await ProductRepository.list_all(db)]
    assert listed == sorted(ids, reverse=True)


async def test_deleted_ids_are_not_reused(db):
    first = await ProductRepository.insert(db, _fields("a"))
    await ProductRepository.delete(db, first)
    second = await ProductRepository.insert(db, _fields("b"))
    assert second > first


async def test_get_missing_row(db):
    with pytest.raises(NotFound) as exc:
        await ProductRepository.get(db, 404)
    assert exc.value.product_id == 404


async def test_update_and_delete_missing_row(db):
    with pytest.raises(NotFound):
        await ProductRepository.update(db, 404, _fields("ghost"))
    with pytest.raises(NotFound):
        await ProductRepository.delete(db, 404)
    assert await ProductRepository.count(db) == 0


async def test_update_overwrites_row(db):
    product_id = await ProductRepository.insert(db, _fields("old", quantity=1))
    await ProductRepository.update(db, product_id, _fields("new", quantity=9))

    product = await ProductRepository.get(db, product_id)
    assert (product.name, product.quantity) == ("new", 9)


async def test_driver_faults_surface_as_storage_error(bare_db):
    # No schema has been created on this database.
    with pytest.raises(StorageError) as exc:
        await ProductRepository.list_all(bare_db)
    assert exc.value.cause is not None

    with pytest.raises(StorageError):
        await ProductRepository.insert(bare_db, _fields("a"))


class _BrokenRollbackSession:
    async def rollback(self):
        raise RuntimeError("connection lost")


async def test_fault_is_counted_before_rollback_is_attempted():
    before = REGISTRY.get_sample_value("inventory_storage_errors_total") or 0.0
    fault = OperationalError("SELECT 1", {}, Exception("database is locked"))

    with pytest.raises(RuntimeError, match="connection lost"):
        await _storage_failure(_BrokenRollbackSession(), "list_all", fault)

    assert REGISTRY.get_sample_value("inventory_storage_errors_total") == before + 1
