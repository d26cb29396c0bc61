import math


def log1p_over_x(x: float) -> float:
    """
    Computes log(1 + x) / x. A Taylor series is used when x is close to 0.
    """
    if abs(x) > 1e-8:
        return math.log1p(x) / x
    return 1.0 - x * (0.5 - x * (1.0 / 3.0 - 0.25 * x))


def expm1_over_x(x: float) -> float:
    """
    Computes (exp(x) - 1) / x. A Taylor series is used when x is close to 0.
    """
    if abs(x) > 1e-8:
        return math.expm1(x) / x
    return 1.0 + x * 0.5 * (1.0 + x * (1.0 / 3.0) * (1.0 + 0.25 * x))


def bits_to_unit_float(v: int) -> float:
    # keep the top 53 bits of a 64 bit value, the full precision of a double
    return ((v & 0xFFFFFFFFFFFFFFFF) >> 11) * (1.0 / 9007199254740992.0)
