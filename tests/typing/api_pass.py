import random
from typing import Iterator, List

from rizipf import BitsSource, LockedSource, UniformSource, Zipf, ZipfSampler


def run() -> None:
    sampler = ZipfSampler(1000, 1.07)
    k: int = sampler.sample(random.Random(1))
    ks: List[int] = sampler.sample_n(random.Random(1), 10)
    p: float = sampler.pmf(k)
    h: float = sampler.h_integral_num_elements

    source: UniformSource = BitsSource(random.SystemRandom())
    locked: UniformSource = LockedSource(source)
    z = Zipf(1000, 1.07, locked)
    v: int = z.get()
    it: Iterator[int] = iter(z)
