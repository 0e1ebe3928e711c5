"""Taylor-series ln, exp and pow over 18-decimal fixed point, plus isqrt.

ln works on the series for ln(1 + a) / ln(1 - a), so its domain is the
open interval (0, 2). pow(base, e) is exp(e * ln(base)) and inherits that
domain for the base. Each series adds terms until one falls below
config.epsilon and gives up with DidNotConverge after
config.max_series_terms terms.

ln carries its partial sum in a SignedDecimal. exp only ever sums
non-negative terms: a negative exponent is evaluated as 1 / e^|k|.
"""

from __future__ import annotations

import structlog

from safemath.config import DEFAULT_CONFIG, MathConfig
from safemath.errors import DidNotConverge, InvalidBaseRange, Overflow
from safemath.math.fixed_point import ONE_18, FixedDecimal, SignedDecimal
from safemath.uint.wide import U128_MAX

__all__ = ["ln", "exp", "pow", "sqrt"]

logger = structlog.get_logger()

# Upper bound (exclusive) of the ln/pow convergence domain: 2.0
TWO_18 = 2 * ONE_18


def _check_domain(x: FixedDecimal, what: str) -> None:
    if x.value == 0 or x.value >= TWO_18:
        raise InvalidBaseRange(f"{what} must be in (0, 2), got {x}")


def ln(x: FixedDecimal, config: MathConfig = DEFAULT_CONFIG) -> SignedDecimal:
    """Natural logarithm of x for 0 < x < 2.

    With a = |x - 1|:
        ln(1 + a) = a - a^2/2 + a^3/3 - ...
        ln(1 - a) = -(a + a^2/2 + a^3/3 + ...)
    Successive terms a^n / n are derived as term * a * n / (n + 1).

    Args:
        x: Input value
        config: Series epsilon and iteration cap

    Returns:
        ln(x), negative for x < 1

    Raises:
        InvalidBaseRange: If x == 0 or x >= 2
        DidNotConverge: If the series needs more than max_series_terms terms
    """
    _check_domain(x, "ln input")

    one = FixedDecimal.one()
    below_one = x < one
    a = one.sub(x) if below_one else x.sub(one)
    if a.is_zero():
        return SignedDecimal.zero()

    total = SignedDecimal.zero()
    term = a
    for n in range(1, config.max_series_terms + 1):
        # Below one every term is negative; above one the even terms are
        total = total.add(SignedDecimal(term, below_one or n % 2 == 0))
        if term.value < config.epsilon:
            logger.debug("ln_series_converged", x=str(x), terms=n)
            return total
        term = term.mul(a).mul_int(n).div_int(n + 1)

    logger.warning("ln_series_did_not_converge", x=str(x), max_terms=config.max_series_terms)
    raise DidNotConverge(
        f"ln({x}) did not converge after {config.max_series_terms} terms"
    )


def _exp_series(k: FixedDecimal, config: MathConfig) -> FixedDecimal:
    total = FixedDecimal.one()
    term = FixedDecimal.one()
    for n in range(1, config.max_series_terms + 1):
        term = term.mul(k).div_int(n)
        total = total.add(term)
        if term.value < config.epsilon:
            logger.debug("exp_series_converged", k=str(k), terms=n)
            return total

    logger.warning("exp_series_did_not_converge", k=str(k), max_terms=config.max_series_terms)
    raise DidNotConverge(
        f"exp({k}) did not converge after {config.max_series_terms} terms"
    )


def exp(k: SignedDecimal, config: MathConfig = DEFAULT_CONFIG) -> FixedDecimal:
    """e^k via 1 + k + k^2/2! + ..., with terms derived as term * k / n.

    The series is only ever summed for |k|, where every term is positive.
    A negative k is evaluated as 1 / e^|k|; if e^|k| leaves the u128 range
    the true result is below 10^-20 and floors to zero.

    Args:
        k: Exponent (may be negative)
        config: Series epsilon and iteration cap

    Returns:
        e^k

    Raises:
        DidNotConverge: If the series needs more than max_series_terms terms
        Overflow: If k is positive and a term or the sum leaves the u128 range
    """
    if not k.negative:
        return _exp_series(k.magnitude, config)
    try:
        reciprocal = _exp_series(k.magnitude, config)
    except Overflow:
        logger.debug("exp_underflow_to_zero", k=str(k))
        return FixedDecimal.zero()
    return FixedDecimal.one().div(reciprocal)


def pow(
    base: FixedDecimal, exponent: FixedDecimal, config: MathConfig = DEFAULT_CONFIG
) -> FixedDecimal:
    """base^exponent for 0 < base < 2, computed as exp(exponent * ln(base)).

    Args:
        base: Base, in (0, 2)
        exponent: Non-negative exponent
        config: Series epsilon and iteration cap

    Returns:
        base^exponent

    Raises:
        InvalidBaseRange: If base == 0 or base >= 2
        DidNotConverge: If either series exceeds the iteration cap
        Overflow: If base > 1 and intermediate terms leave the u128 range
    """
    _check_domain(base, "pow base")
    if exponent.is_zero():
        return FixedDecimal.one()
    log_base = ln(base, config)
    try:
        k = log_base.mul(exponent)
    except Overflow:
        if log_base.negative:
            return FixedDecimal.zero()
        raise
    return exp(k, config)


def _isqrt(n: int) -> int:
    if n < 2:
        return n
    small = _isqrt(n >> 2) << 1
    large = small + 1
    return small if large * large > n else large


def sqrt(n: int) -> int:
    """Floor of the square root of a u128.

    Recurses on n >> 2 (two bits per level), so depth is at most 64.

    Raises:
        ValueError: If n is negative
        Overflow: If n exceeds 2^128 - 1
    """
    if not isinstance(n, int):
        raise TypeError(f"sqrt requires int, got {type(n).__name__}")
    if n < 0:
        raise ValueError(f"sqrt of negative value: {n}")
    if n > U128_MAX:
        raise Overflow(f"sqrt input exceeds u128: {n}")
    return _isqrt(n)
