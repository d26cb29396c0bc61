import random
from collections import Counter

import matplotlib.pyplot as plt
import numpy as np

from rizipf import ZipfSampler

plt.style.use("ggplot")

SAMPLES = 1000000


def init_plot(title):
    fig, ax = plt.subplots()
    ax.set_xlabel("rank")
    ax.set_ylabel("frequency")
    ax.set_xscale("log")
    ax.set_yscale("log")
    ax.set_title(title)
    fig.set_figwidth(12)
    return fig, ax


def sample_and_plot(num_elements, exponents):
    fig, ax = init_plot(f"Rank Frequency - N={num_elements}")
    ranks = np.arange(1, num_elements + 1)

    for exponent, style in zip(exponents, ["b", "r", "c", "g"]):
        sampler = ZipfSampler(num_elements, exponent)
        counter = Counter(sampler.sample_n(random.Random(exponent), SAMPLES))
        observed = np.array([counter[k] for k in ranks]) / SAMPLES
        expected = np.power(ranks, -exponent)
        expected = expected / expected.sum()

        ax.plot(ranks, expected, f"{style}-", label=f"s={exponent}")
        ax.plot(ranks, observed, f"{style}.")

    ax.legend()
    fig.savefig(f"benchmarks/rank_frequency_{num_elements}.png", dpi=200)


sample_and_plot(1000, [0.5, 1.0, 1.5, 2.0])
