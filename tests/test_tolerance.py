"""Tests for fuzzy comparison of cell values."""

import pytest

from densematrix.tolerance import ToleranceMode, fuzzy_compare


class TestFuzzyCompare:
    """Test each tolerance mode."""

    def test_exact_equality(self):
        """Test identical values always compare equal."""
        assert fuzzy_compare(3.0, 3.0, 0.0, ToleranceMode.ABSOLUTE)

    def test_relative_within_tolerance(self):
        """Test relative difference below tolerance."""
        assert fuzzy_compare(1000.0, 1000.5, 0.001, ToleranceMode.RELATIVE)

    def test_relative_outside_tolerance(self):
        """Test relative difference above tolerance."""
        assert not fuzzy_compare(1.0, 1.1, 0.001, ToleranceMode.RELATIVE)

    def test_relative_against_zero(self):
        """Test relative mode falls back to the absolute difference at zero."""
        assert fuzzy_compare(0.0, -0.0, 0.001, ToleranceMode.RELATIVE)

    def test_absolute_mode(self):
        """Test absolute tolerance mode."""
        assert fuzzy_compare(1.0, 1.0009, 0.001, ToleranceMode.ABSOLUTE)
        assert not fuzzy_compare(1.0, 1.01, 0.001, ToleranceMode.ABSOLUTE)

    def test_sigfigs_mode(self):
        """Test significant figure comparison."""
        assert fuzzy_compare(1.0, 1.00001, 3, ToleranceMode.SIGFIGS)
        assert not fuzzy_compare(1.0, 1.1, 3, ToleranceMode.SIGFIGS)

    def test_nan_never_matches(self):
        """Test nan does not compare equal, even to itself."""
        nan = float("nan")
        assert not fuzzy_compare(nan, nan, 1.0, ToleranceMode.ABSOLUTE)

    def test_unknown_mode_raises(self):
        """Test an unknown mode raises ValueError."""
        with pytest.raises(ValueError):
            fuzzy_compare(1.0, 2.0, 0.1, "bogus")

    @pytest.mark.parametrize(
        "mode, tolerance",
        [
            (ToleranceMode.SIGFIGS, 3),
            (ToleranceMode.RELATIVE, 0.001),
            (ToleranceMode.ABSOLUTE, 0.001),
        ],
    )
    def test_infinity_against_finite(self, mode, tolerance):
        """Test an infinite value never matches a finite one."""
        inf = float("inf")
        assert not fuzzy_compare(inf, 1.0, tolerance, mode)
        assert not fuzzy_compare(1.0, -inf, tolerance, mode)

    def test_infinity_matches_itself(self):
        """Test equal infinities compare equal in sigfigs mode."""
        inf = float("inf")
        assert fuzzy_compare(inf, inf, 3, ToleranceMode.SIGFIGS)
        assert not fuzzy_compare(inf, -inf, 3, ToleranceMode.SIGFIGS)
