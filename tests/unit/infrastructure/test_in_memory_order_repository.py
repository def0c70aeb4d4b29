"""Tests for InMemoryOrderRepository."""
import threading
from uuid import uuid4

import pytest

from ordering.domain.entities import Order
from ordering.domain.repositories import OrderRepository
from ordering.domain.value_objects import Money


def _order(customer_id: str = "cust-1") -> Order:
    return Order.create(customer_id, Money.of("100.00", "USD"))


def test_repository_implements_interface(repository):
    assert isinstance(repository, OrderRepository)


def test_starts_empty(repository):
    assert len(repository) == 0
    assert repository.find_all() == []


def test_save_returns_same_order(repository):
    order = _order()
    assert repository.save(order) is order


def test_save_then_find_by_id_returns_equal_order(repository):
    order = _order()
    repository.save(order)

    found = repository.find_by_id(order.id)

    assert found == order
    assert found.id == order.id
    assert found.customer_id == order.customer_id
    assert found.status == order.status
    assert found.total_amount == order.total_amount


def test_find_by_id_missing_returns_none(repository):
    assert repository.find_by_id(uuid4()) is None


def test_save_overwrites_snapshot_for_same_id(repository):
    order = _order()
    repository.save(order)
    confirmed = order.confirm()

    repository.save(confirmed)

    assert len(repository) == 1
    assert repository.find_by_id(order.id) == confirmed


def test_last_write_wins(repository):
    """Saving an older snapshot replaces a newer one; there is no conflict check."""
    order = _order()
    confirmed = order.confirm()
    repository.save(confirmed)

    repository.save(order)

    assert repository.find_by_id(order.id) == order


def test_exists(repository):
    order = _order()
    assert not repository.exists(order.id)
    repository.save(order)
    assert repository.exists(order.id)


def test_find_all_respects_limit_and_insertion_order(repository):
    orders = [_order(f"cust-{i}") for i in range(5)]
    for order in orders:
        repository.save(order)

    assert repository.find_all() == orders
    assert repository.find_all(limit=2) == orders[:2]


def test_clear(repository):
    repository.save(_order())
    repository.clear()
    assert len(repository) == 0


def test_atomic_is_reentrant(repository):
    order = _order()
    with repository.atomic():
        repository.save(order)
        with repository.atomic():
            assert repository.find_by_id(order.id) == order


def test_atomic_blocks_other_threads(repository):
    order = _order()
    saved = threading.Event()

    def writer():
        repository.save(order)
        saved.set()

    with repository.atomic():
        thread = threading.Thread(target=writer)
        thread.start()
        assert not saved.wait(timeout=0.2)

    thread.join(timeout=5)
    assert saved.is_set()
    assert repository.exists(order.id)


@pytest.mark.parametrize("workers", [8])
def test_concurrent_saves_keep_every_order(repository, workers):
    orders = [_order(f"cust-{i}") for i in range(workers * 50)]
    chunks = [orders[i::workers] for i in range(workers)]

    threads = [
        threading.Thread(target=lambda chunk=chunk: [repository.save(o) for o in chunk])
        for chunk in chunks
    ]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()

    assert len(repository) == len(orders)
