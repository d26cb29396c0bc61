from rizipf.models import BitSource, InvalidParameter, SamplingError, UniformSource
from rizipf.sampler import ZipfSampler, harmonic
from rizipf.sources import BitsSource, LockedSource
from rizipf.zipf import Zipf

__all__ = [
    "BitSource",
    "BitsSource",
    "InvalidParameter",
    "LockedSource",
    "SamplingError",
    "UniformSource",
    "Zipf",
    "ZipfSampler",
    "harmonic",
]
