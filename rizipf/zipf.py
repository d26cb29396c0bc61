from typing import Iterator

from rizipf.models import UniformSource
from rizipf.sampler import ZipfSampler


class Zipf:
    """
    A Zipf generator bound to a random source, handy for key generators in
    benchmarks and load tests::

        z = Zipf(1000000, 1.07, random.Random(42))
        key = f"key:{z.get()}"

    The generator mutates its source, share it between threads only through
    a :class:`rizipf.sources.LockedSource`.
    """

    def __init__(self, num_elements: int, exponent: float, source: UniformSource):
        self._sampler = ZipfSampler(num_elements, exponent)
        self._source = source

    @property
    def sampler(self) -> ZipfSampler:
        return self._sampler

    def get(self) -> int:
        return self._sampler.sample(self._source)

    def next_u32(self) -> int:
        return self.get() & 0xFFFFFFFF

    def next_u64(self) -> int:
        return self.get() & 0xFFFFFFFFFFFFFFFF

    def __iter__(self) -> Iterator[int]:
        while True:
            yield self._sampler.sample(self._source)

    def __repr__(self) -> str:
        return f"Rejection inversion Zipf deviate [{self._source!r}]"
