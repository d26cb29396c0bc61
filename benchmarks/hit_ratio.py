import random
from functools import lru_cache
from unittest.mock import Mock

from cachetools import LFUCache, LRUCache, cached

from rizipf import Zipf

REQUESTS = 1000000


def key_gen():
    z = Zipf(1000000, 1.001, random.Random(10))
    for _ in range(REQUESTS):
        yield z.get()


def bench_lru(cap: int):
    @lru_cache(maxsize=cap)
    def lru_hit(i: int, m: Mock):
        m(i)
        return i

    mock = Mock()
    for num in key_gen():
        v = lru_hit(num, mock)
        assert num == v
    print(f"lru hit ratio: {1 - mock.call_count / REQUESTS:.2f}")


def bench_cachetools(policy: str, cap: int):
    cache = LFUCache(maxsize=cap) if policy == "LFU" else LRUCache(maxsize=cap)

    @cached(cache=cache, key=lambda i, m: i)
    def hit(i: int, m: Mock):
        m(i)
        return i

    mock = Mock()
    for num in key_gen():
        v = hit(num, mock)
        assert num == v
    print(f"cachetools {policy.lower()} hit ratio: {1 - mock.call_count / REQUESTS:.2f}")


for cap in [100, 200, 500, 1000, 2000, 5000, 10000, 20000]:
    print(f"====== Cache Size {cap} ======")
    bench_lru(cap)
    bench_cachetools("LRU", cap)
    bench_cachetools("LFU", cap)
