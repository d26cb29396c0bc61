from threading import Lock

from rizipf.models import BitSource, UniformSource
from rizipf.utils import bits_to_unit_float


class BitsSource:
    """
    Turns a source of raw random bits (anything with ``getrandbits``, such as
    random.Random or random.SystemRandom) into a uniform source of floats in [0, 1).
    """

    def __init__(self, bit_source: BitSource):
        self.bit_source = bit_source

    def random(self) -> float:
        return bits_to_unit_float(self.bit_source.getrandbits(64))

    def __repr__(self) -> str:
        return f"BitsSource({self.bit_source!r})"


class LockedSource:
    """
    Serializes access to a uniform source so a single source can be shared by
    samplers running in different threads.

    :param nolock: disables locking. Enable this only if your code does not use multi-threading.
    """

    def __init__(self, source: UniformSource, nolock: bool = False):
        self.source = source
        self.mutex = Lock()
        self.nolock = nolock

    def random(self) -> float:
        if self.nolock:
            return self.source.random()
        with self.mutex:
            return self.source.random()

    def __repr__(self) -> str:
        return f"LockedSource({self.source!r})"
