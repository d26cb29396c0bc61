import logging
import math
import numbers
from functools import lru_cache
from typing import List

from rizipf.models import InvalidParameter, SamplingError, UniformSource
from rizipf.utils import expm1_over_x, log1p_over_x

logger = logging.getLogger(__name__)

# upper bound of rejected attempts for a single draw, the expected count is below 2
MAX_ATTEMPTS = 10000


@lru_cache(maxsize=128)
def harmonic(num_elements: int, exponent: float) -> float:
    """
    Generalized harmonic number H(N, s) = sum(k^-s for k in 1..N). This is O(N),
    use it for verification only.
    """
    return math.fsum(math.exp(-exponent * math.log(k)) for k in range(1, num_elements + 1))


class ZipfSampler:
    """
    Generates Zipf distributed integers in [1, num_elements] using rejection-inversion,
    as described by Wolfgang Hörmann and Gerhard Derflinger in "Rejection-inversion to
    generate variates from monotone discrete distributions", ACM TOMACS 6.3 (1996).

    Construction derives a few constants from the parameters, after that the sampler is
    immutable and can be shared between threads. Randomness comes from the source passed
    to :meth:`sample`, the sampler never owns one.

    :param num_elements: inclusive upper bound of the support, must be at least 1.
    :param exponent: shape of the distribution, must be greater than 0.
    """

    __slots__ = (
        "_num_elements",
        "_exponent",
        "_one_minus_s",
        "_h_integral_x1",
        "_h_integral_num_elements",
        "_acceptance_threshold",
    )

    def __init__(self, num_elements: int, exponent: float):
        if isinstance(num_elements, bool) or not isinstance(
            num_elements, numbers.Integral
        ):
            raise InvalidParameter(
                f"num_elements must be an integer, got {num_elements!r}"
            )
        if num_elements < 1:
            raise InvalidParameter(f"num_elements must be >= 1, got {num_elements}")
        if not isinstance(exponent, numbers.Real) or isinstance(exponent, bool):
            raise InvalidParameter(f"exponent must be a real number, got {exponent!r}")
        if not math.isfinite(exponent) or exponent <= 0:
            raise InvalidParameter(f"exponent must be > 0, got {exponent}")

        try:
            float(num_elements)
        except OverflowError as err:
            raise InvalidParameter(
                f"num_elements is too large for a float, got {num_elements}"
            ) from err

        self._num_elements = int(num_elements)
        self._exponent = float(exponent)
        self._one_minus_s = 1.0 - self._exponent

        self._h_integral_x1 = self._h_integral(1.5) - 1.0
        self._h_integral_num_elements = self._h_integral(self._num_elements + 0.5)
        # f(x) = x - hIntegralInverse(hIntegral(x + 0.5) - h(x)) is non-decreasing,
        # so f(2) bounds the rounding error of every accepted k >= 2
        self._acceptance_threshold = 2.0 - self._h_integral_inverse(
            self._h_integral(2.5) - self._h(2.0)
        )
        logger.debug(
            "zipf sampler n=%d s=%s h_x1=%s h_n=%s threshold=%s",
            self._num_elements,
            self._exponent,
            self._h_integral_x1,
            self._h_integral_num_elements,
            self._acceptance_threshold,
        )

    @property
    def num_elements(self) -> int:
        return self._num_elements

    @property
    def exponent(self) -> float:
        return self._exponent

    @property
    def h_integral_x1(self) -> float:
        return self._h_integral_x1

    @property
    def h_integral_num_elements(self) -> float:
        return self._h_integral_num_elements

    @property
    def acceptance_threshold(self) -> float:
        return self._acceptance_threshold

    def __repr__(self) -> str:
        return f"ZipfSampler(num_elements={self._num_elements}, exponent={self._exponent})"

    def _h_integral(self, x: float) -> float:
        """
        H(x), the antiderivative of h(x):

        - log(x) if exponent == 1
        - (x^(1 - exponent) - 1) / (1 - exponent) otherwise
        """
        log_x = math.log(x)
        if self._exponent == 1.0:
            return log_x
        return expm1_over_x(self._one_minus_s * log_x) * log_x

    def _h(self, x: float) -> float:
        return math.exp(-self._exponent * math.log(x))

    def _h_integral_inverse(self, y: float) -> float:
        if self._exponent == 1.0:
            return math.exp(y)
        t = y * self._one_minus_s
        # 1 + t <= 0 is outside the range of H, collapse to the boundary
        if t <= -1.0:
            return 0.0
        return math.exp(log1p_over_x(t) * y)

    def sample(self, source: UniformSource) -> int:
        if self._num_elements == 1:
            return 1

        # The paper describes the algorithm for exponents larger than 1 with
        # H(x) = (v + x)^(1 - q) / (1 - q), which has no limit for q = 1. Using
        # H(x) = ((v + x)^(1 - q) - 1) / (1 - q) instead works for all positive
        # exponents. v = 0 here and values are taken from [1, num_elements]
        # instead of [0, imax].
        h_num = self._h_integral_num_elements
        h_x1 = self._h_integral_x1
        threshold = self._acceptance_threshold
        n = self._num_elements

        for _ in range(MAX_ATTEMPTS):
            # u is uniform in (h_x1, h_num]
            u = h_num + source.random() * (h_x1 - h_num)
            x = self._h_integral_inverse(u)
            k = math.floor(x + 0.5)
            # numerical inaccuracies may put k outside of the support
            if k < 1:
                k = 1
            elif k > n:
                k = n

            # P(k = 1) = C and P(k = m) = C * (H(m + 1/2) - H(m - 1/2)) for m >= 2,
            # where C = 1 / (h_num - h_x1). The right test accepts m with probability
            # h(m) / (H(m + 1/2) - H(m - 1/2)), so P(m returned) = C * h(m).
            # For k = 1 the right test always holds since H(1.5) - h(1) = h_x1.
            if k - x <= threshold or u >= self._h_integral(k + 0.5) - self._h(k):
                return k

        logger.error(
            "no sample accepted after %d attempts, n=%d s=%s",
            MAX_ATTEMPTS,
            n,
            self._exponent,
        )
        raise SamplingError(f"no sample accepted after {MAX_ATTEMPTS} attempts")

    def sample_n(self, source: UniformSource, count: int) -> List[int]:
        if isinstance(count, bool) or not isinstance(count, numbers.Integral):
            raise InvalidParameter(f"count must be an integer, got {count!r}")
        if count < 0:
            raise InvalidParameter(f"count must be >= 0, got {count}")
        return [self.sample(source) for _ in range(count)]

    def pmf(self, k: int) -> float:
        """
        Exact probability of drawing k. Normalization sums all num_elements terms
        once per (num_elements, exponent), do not call it for huge supports.
        """
        if k < 1 or k > self._num_elements:
            return 0.0
        return self._h(k) / harmonic(self._num_elements, self._exponent)
