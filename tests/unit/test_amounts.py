"""Tests for pl_common.amounts: integer arithmetic utilities."""

import pytest

from src.pl_common.amounts import ceil_div, validate_rate


class TestValidateRate:
    def test_bounds_accepted(self) -> None:
        for rate in [0, 95, 255]:
            validate_rate("interest_rate", rate)  # Should not raise

    def test_above_u8_raises(self) -> None:
        with pytest.raises(ValueError, match=r"interest_rate.*255"):
            validate_rate("interest_rate", 256)

    def test_negative_raises(self) -> None:
        with pytest.raises(ValueError, match=r"0.*255"):
            validate_rate("collateral_factor", -1)


class TestCeilDiv:
    def test_exact(self) -> None:
        assert ceil_div(10, 5) == 2

    def test_rounds_up(self) -> None:
        assert ceil_div(11, 5) == 3

    def test_zero_numerator(self) -> None:
        assert ceil_div(0, 7) == 0

    def test_zero_denominator_raises(self) -> None:
        with pytest.raises(ZeroDivisionError):
            ceil_div(1, 0)

