import threading

import pytest

from dstructs.caches import LFUCache, LRUCache


def _fill(cache):
    for key, value in (("one", 1), ("two", 2), ("three", 3)):
        cache.put(key, value)
    return cache


@pytest.mark.parametrize("thread_safe", [False, True])
@pytest.mark.parametrize(
    "cls, reads, evicted",
    [
        (LRUCache, ["one"], "two"),
        (LFUCache, ["one", "one", "one", "two"], "three"),
    ],
)
def test_basic(cls, reads, evicted, thread_safe):
    cache = cls(3, thread_safe)
    assert len(cache) == 0

    _fill(cache)
    assert [cache.get(key) for key in reads][0] == 1

    cache.put("four", 4)
    assert evicted not in cache
    assert cache.get(evicted) is None

    cache.remove("one")
    assert cache.get("one") is None
    assert len(cache) == 2

    cache.clear()
    assert len(cache) == 0


@pytest.mark.parametrize(
    "cls, reads, survivors",
    [
        (LRUCache, ["one"], {"one": 1, "three": 3, "four": 4}),
        (LFUCache, ["one", "one", "two"], {"one": 1, "two": 2, "four": 4}),
        (
            LFUCache,
            ["one"] * 3 + ["two"] * 2 + ["three"],
            {"one": 1, "two": 2, "four": 4},
        ),
    ],
)
def test_eviction(cls, reads, survivors):
    cache = _fill(cls(3, False))
    for key in reads:
        cache.get(key)
    cache.put("four", 4)

    evicted = {"one", "two", "three"} - survivors.keys()
    assert [cache.get(key) for key in evicted] == [None]
    assert {key: cache.get(key) for key in survivors} == survivors


@pytest.mark.parametrize("cls", [LRUCache, LFUCache])
def test_concurrent(cls):
    cache = cls(100, True)
    iterations = 1000
    keys = ("key1", "key2")

    def each_key(work):
        workers = [threading.Thread(target=work, args=(key,)) for key in keys]
        for worker in workers:
            worker.start()
        for worker in workers:
            worker.join()

    each_key(lambda key: [cache.put(key, i) for i in range(iterations)])
    assert len(cache) == 2
    assert [cache.get(key) for key in keys] == [iterations - 1] * 2

    each_key(lambda key: [cache.get(key) for _ in range(iterations)])
    assert len(cache) == 2

    each_key(lambda key: [cache.remove(key) for _ in range(iterations)])
    assert len(cache) == 0


@pytest.mark.parametrize("cls", [LRUCache, LFUCache])
def test_update(cls):
    cache = cls(3, False)
    cache.put("one", 1)
    cache.put("one", 2)
    assert cache.get("one") == 2
    assert len(cache) == 1


@pytest.mark.parametrize("cls, default", [(LRUCache, 0), (LFUCache, -1)])
def test_get_default(cls, default):
    assert cls(1, False).get("missing", default) == default


def test_lru_update_refreshes_recency():
    cache = LRUCache(2, False)
    cache.put("a", 1)
    cache.put("b", 2)
    cache.put("a", 10)
    cache.put("c", 3)
    assert "b" not in cache
    assert (cache.get("a"), cache.get("c")) == (10, 3)


def test_lfu_never_exceeds_capacity():
    cache = LFUCache(2, False)
    sizes = []
    for i in range(10):
        cache.put(i, i)
        sizes.append(len(cache))
    assert max(sizes) == 2
    assert 9 in cache


def test_lfu_remove_then_reinsert_resets_frequency():
    cache = LFUCache(2, False)
    cache.put("a", 1)
    for _ in range(5):
        cache.get("a")
    cache.put("b", 2)
    cache.get("b")
    cache.remove("a")
    cache.put("a", 1)
    cache.put("c", 3)
    assert "a" not in cache
    assert (cache.get("b"), cache.get("c")) == (2, 3)