"""Unit tests for the CounterMemoryDAO

Test coverage includes:

1. Counting within a window
2. Expiry armed on creation only (fixed window)
3. Independent keys
4. Concurrent increments
"""

import threading
from concurrent.futures import ThreadPoolExecutor

import pytest
from freezegun import freeze_time

from cryptshortener.dao.base import CounterBaseDAO
from cryptshortener.dao.memory import CounterMemoryDAO


@pytest.fixture
def dao() -> CounterMemoryDAO:
    return CounterMemoryDAO()


def test_dao_implements_base_interface(dao):
    assert isinstance(dao, CounterBaseDAO)


@freeze_time('2025-10-15 12:00:00')
def test_hit_counts_within_window(dao):
    assert [dao.hit('203.0.113.7', 60) for _ in range(5)] == [1, 2, 3, 4, 5]


def test_hit_resets_after_window_expires(dao):
    with freeze_time('2025-10-15 12:00:00') as frozen:
        assert dao.hit('203.0.113.7', 60) == 1
        frozen.tick(59)
        assert dao.hit('203.0.113.7', 60) == 2
        frozen.tick(1)
        assert dao.hit('203.0.113.7', 60) == 1


def test_hit_does_not_extend_window(dao):
    """Later hits inside the window never push the expiry back."""
    with freeze_time('2025-10-15 12:00:00') as frozen:
        dao.hit('203.0.113.7', 60)
        for _ in range(5):
            frozen.tick(10)
            dao.hit('203.0.113.7', 60)
        frozen.tick(10)  # 60 seconds after the first hit
        assert dao.hit('203.0.113.7', 60) == 1


@freeze_time('2025-10-15 12:00:00')
def test_hit_keys_are_independent(dao):
    dao.hit('203.0.113.7', 60)
    dao.hit('203.0.113.7', 60)
    assert dao.hit('198.51.100.1', 60) == 1


def test_concurrent_hits_are_all_counted(dao):
    workers, hits_per_worker = 8, 250
    barrier = threading.Barrier(workers)

    def worker(_):
        barrier.wait()
        return [dao.hit('203.0.113.7', 3600) for _ in range(hits_per_worker)]

    with ThreadPoolExecutor(max_workers=workers) as pool:
        results = [count for counts in pool.map(worker, range(workers)) for count in counts]

    assert sorted(results) == list(range(1, workers * hits_per_worker + 1))
