"""Test helpers: shared operands and random value generators."""

from tests.helpers.values import A, B, C, ONE, random_int, random_uint256, random_uint512

__all__ = ["A", "B", "C", "ONE", "random_int", "random_uint256", "random_uint512"]
