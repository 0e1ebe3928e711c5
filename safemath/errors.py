"""Safe math error classes.

Every failure in this package is deterministic: the same inputs always
produce the same error. Callers treat these as fatal to the enclosing
operation; nothing here is retryable.
"""


class SafeMathError(ArithmeticError):
    """Base class for safe math errors."""

    pass


class LengthMismatch(SafeMathError):
    """Constructor was given the wrong number of bytes for the width."""

    pass


class ZeroValue(SafeMathError):
    """Bit length was requested for a zero value."""

    pass


class ZeroDivisor(SafeMathError):
    """Division by zero."""

    pass


class Overflow(SafeMathError):
    """Result does not fit the target width, or a subtraction underflowed."""

    pass


class ShiftAmountInvalid(SafeMathError):
    """Sub-limb shift helper called with an amount of a full limb or more.

    This is a programming error inside the kernel, never a user-facing one.
    """

    pass


class InvalidBaseRange(SafeMathError):
    """ln/pow input is outside the series convergence domain (0, 2)."""

    pass


class DidNotConverge(SafeMathError):
    """Taylor series did not reach epsilon within the iteration cap."""

    pass
