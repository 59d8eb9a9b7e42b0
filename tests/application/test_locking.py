"""Concurrency tests for per-owner locking."""

import gc
import threading

from bookstore.application.add_to_cart import AddToCartHandler
from bookstore.application.locking import OwnerLocks
from bookstore.application.show_cart import ShowCartHandler
from tests.fakes import make_book, repos


class TestOwnerLocks:

    def test_same_owner_same_lock(self):
        locks = OwnerLocks()
        assert locks.for_owner(1) is locks.for_owner(1)

    def test_different_owners_different_locks(self):
        locks = OwnerLocks()
        assert locks.for_owner(1) is not locks.for_owner(2)

    def test_unreferenced_locks_are_dropped(self):
        locks = OwnerLocks()
        lock = locks.for_owner(1)
        assert 1 in locks._locks

        del lock
        gc.collect()

        assert 1 not in locks._locks

    def test_lock_held_by_caller_is_shared(self):
        locks = OwnerLocks()
        with locks.for_owner(1):
            gc.collect()
            assert locks.for_owner(1).locked()


class TestConcurrentAdds:

    def test_parallel_adds_keep_totals_and_unique_ids(self):
        book_repo, cart_repo, _ = repos(books=[make_book(price="1.25", stock=1000)])
        locks = OwnerLocks()
        add = AddToCartHandler(cart_repo, book_repo, locks)

        def worker():
            for _ in range(25):
                add.handle(1, "book1", 2)

        threads = [threading.Thread(target=worker) for _ in range(8)]
        for t in threads:
            t.start()
        for t in threads:
            t.join()

        dto = ShowCartHandler(cart_repo, locks).handle(1)
        assert len(dto.items) == 200
        assert dto.total_items == 400
        assert dto.total_price == "$500.00"
        assert sorted(line.id for line in dto.items) == list(range(1, 201))
