"""Testes do MemoryRateLimitStore."""

from __future__ import annotations

import threading

from app.infra.stores import MemoryRateLimitStore

NOW = 1_700_000_000.0
WINDOW = 3600


class TestMemoryRateLimitStore:
    """Janela deslizante, limite e eviction."""

    def test_absent_key_counts_zero(self) -> None:
        assert MemoryRateLimitStore().count("k", WINDOW, NOW) == 0

    def test_try_acquire_until_limit(self) -> None:
        store = MemoryRateLimitStore()
        results = [store.try_acquire("k", 5, WINDOW, NOW + i) for i in range(6)]

        assert results == [True] * 5 + [False]
        assert store.count("k", WINDOW, NOW + 6) == 5

    def test_old_attempts_leave_the_window(self) -> None:
        store = MemoryRateLimitStore()
        for i in range(5):
            store.try_acquire("k", 5, WINDOW, NOW + i)

        # a primeira tentativa sai da janela exatamente em NOW + 3600
        assert store.try_acquire("k", 5, WINDOW, NOW + WINDOW) is True
        assert store.count("k", WINDOW, NOW + WINDOW) == 5

    def test_keys_are_isolated(self) -> None:
        store = MemoryRateLimitStore()
        store.try_acquire("a", 1, WINDOW, NOW)
        assert store.try_acquire("b", 1, WINDOW, NOW) is True
        assert store.try_acquire("a", 1, WINDOW, NOW) is False

    def test_purge_evicts_expired_keys(self) -> None:
        store = MemoryRateLimitStore()
        store.try_acquire("old", 5, WINDOW, NOW)
        store.try_acquire("new", 5, WINDOW, NOW + 3000)

        removed = store.purge(WINDOW, NOW + WINDOW + 1)

        assert removed == 1
        assert list(store.snapshot()) == ["new"]

    def test_concurrent_acquire_never_exceeds_limit(self) -> None:
        store = MemoryRateLimitStore()
        results: list[bool] = []
        lock = threading.Lock()

        def _worker() -> None:
            acquired = store.try_acquire("k", 5, WINDOW, NOW)
            with lock:
                results.append(acquired)

        threads = [threading.Thread(target=_worker) for _ in range(20)]
        for thread in threads:
            thread.start()
        for thread in threads:
            thread.join()

        assert results.count(True) == 5
