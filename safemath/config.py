"""Configuration for the fixed-point series evaluators."""

from __future__ import annotations

import os

from pydantic import BaseModel, Field

# Series terms below this raw magnitude (10^-12 at 10^18 scale) stop the loop
DEFAULT_EPSILON = 10**6

# Hard cap on Taylor-series terms; ln(x) for x near 0 is the slowest case
DEFAULT_MAX_SERIES_TERMS = 4096


class MathConfig(BaseModel):
    """Precision and termination settings for ln/exp/pow.

    Attributes:
        epsilon: Raw fixed-point magnitude at which a series term counts as
            negligible (default: 10^6, i.e. 10^-12)
        max_series_terms: Maximum terms evaluated before raising
            DidNotConverge (default: 4096)
    """

    epsilon: int = Field(default=DEFAULT_EPSILON, gt=0)
    max_series_terms: int = Field(default=DEFAULT_MAX_SERIES_TERMS, gt=0)

    model_config = {"frozen": True}

    @classmethod
    def from_env(cls) -> MathConfig:
        """Build a config from environment variables.

        - SAFEMATH_EPSILON: series epsilon in raw units (default: 10^6)
        - SAFEMATH_MAX_SERIES_TERMS: iteration cap (default: 4096)

        Raises:
            pydantic.ValidationError: If a value is not a positive integer
        """
        return cls(
            epsilon=os.environ.get("SAFEMATH_EPSILON", str(DEFAULT_EPSILON)),
            max_series_terms=os.environ.get(
                "SAFEMATH_MAX_SERIES_TERMS", str(DEFAULT_MAX_SERIES_TERMS)
            ),
        )


# Default configuration instance
DEFAULT_CONFIG = MathConfig()
