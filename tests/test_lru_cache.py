from algoset.lru_cache import LRUCache


def test_worked_example_sequence():
    cache = LRUCache(2)
    cache.put(1, 1)
    cache.put(2, 2)
    assert cache.get(1) == 1
    cache.put(3, 3)
    assert cache.get(2) == -1
    cache.put(4, 4)
    assert cache.get(1) == -1
    assert cache.get(3) == 3
    assert cache.get(4) == 4


def test_missing_key_returns_minus_one():
    cache = LRUCache(3)
    assert cache.get(7) == -1


def test_zero_capacity_stores_nothing():
    cache = LRUCache(0)
    cache.put(1, 10)
    assert cache.get(1) == -1
    assert len(cache) == 0


def test_negative_capacity_is_clamped():
    cache = LRUCache(-5)
    assert cache.capacity == 0
    cache.put(1, 10)
    assert cache.get(1) == -1


def test_put_overwrites_existing_key_without_eviction():
    cache = LRUCache(2)
    cache.put(1, 10)
    cache.put(2, 20)
    cache.put(1, 11)
    assert len(cache) == 2
    assert cache.get(1) == 11
    assert cache.get(2) == 20


def test_update_refreshes_recency():
    cache = LRUCache(2)
    cache.put(1, 10)
    cache.put(2, 20)
    cache.put(1, 11)
    cache.put(3, 30)
    assert 2 not in cache
    assert cache.get(1) == 11
    assert cache.get(3) == 30


def test_size_never_exceeds_capacity():
    cache = LRUCache(3)
    for key in range(20):
        cache.put(key, key * 2)
        assert len(cache) <= 3
    assert [cache.get(k) for k in (17, 18, 19)] == [34, 36, 38]
    assert cache.get(16) == -1