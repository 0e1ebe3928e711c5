"""Tests for the safemath-calc command line."""

import pytest

from safemath.cli import main
from tests.helpers import A, B, C


class TestCli:
    """Tests for each subcommand and error reporting."""

    def test_mul_div(self, capsys):
        """Hex operands are accepted and the floored quotient printed."""
        assert main(["mul-div", hex(A), hex(B), hex(C)]) == 0
        assert capsys.readouterr().out.strip() == str(A * B // C)

    def test_mul_div_round_up(self, capsys):
        """3 / 2 rounds half-up to 2."""
        assert main(["mul-div", "3", "1", "2", "--round-up"]) == 0
        assert capsys.readouterr().out.strip() == "2"

    def test_sqrt(self, capsys):
        """Prints the floor square root."""
        assert main(["sqrt", "296192746897"]) == 0
        assert capsys.readouterr().out.strip() == "544235"

    def test_ln_negative_result(self, capsys):
        """ln below one prints a signed result."""
        assert main(["ln", "0.5"]) == 0
        assert capsys.readouterr().out.strip().startswith("-0.69314718055")

    def test_pow(self, capsys):
        """Prints a fractional power."""
        assert main(["pow", "0.75", "2.25"]) == 0
        assert capsys.readouterr().out.strip().startswith("0.52346523324")

    def test_arithmetic_error_exit_code(self, capsys):
        """A zero divisor prints the error and exits 1."""
        assert main(["mul-div", "1", "1", "0"]) == 1
        assert "Error: Division by zero" in capsys.readouterr().out

    def test_domain_error(self, capsys):
        """A base outside (0, 2) exits 1."""
        assert main(["pow", "2", "1"]) == 1
        assert "Error:" in capsys.readouterr().out

    def test_invalid_argument(self):
        """A malformed integer is rejected by argument parsing."""
        with pytest.raises(SystemExit) as exc_info:
            main(["sqrt", "not-a-number"])
        assert exc_info.value.code == 2

    def test_malformed_decimal_literal(self, capsys):
        """A bad fixed-point literal is reported, not raised."""
        assert main(["ln", "not-a-number"]) == 1
        assert "Error: Invalid character" in capsys.readouterr().out

    def test_oversized_decimal_literal(self, capsys):
        """A literal past the u128 raw range exits 1 instead of tracebacking."""
        assert main(["ln", "999999999999999999999999"]) == 1
        assert "Error: FixedDecimal raw value outside u128" in capsys.readouterr().out

    def test_oversized_pow_exponent(self, capsys):
        """Out-of-range exponents go through the same error path."""
        assert main(["pow", "1.5", "999999999999999999999999"]) == 1
        assert "Error:" in capsys.readouterr().out

    def test_negative_sqrt(self, capsys):
        """A negative sqrt input exits 1."""
        assert main(["sqrt", "-4"]) == 1
        assert "Error: sqrt of negative value" in capsys.readouterr().out
