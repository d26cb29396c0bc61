from typing_extensions import Protocol


class UniformSource(Protocol):
    """Anything producing uniform floats in [0, 1), e.g. random.Random or numpy Generator."""

    def random(self) -> float: ...


class BitSource(Protocol):
    def getrandbits(self, k: int, /) -> int: ...


class InvalidParameter(ValueError):
    pass


class SamplingError(RuntimeError):
    pass
