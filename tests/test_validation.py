"""Tests for the project validation policy."""

import pytest

from tietracker.application.project_form import Draft
from tietracker.domain.project import validate, validate_draft


class TestValidate:
    """Name and rate rules."""

    @pytest.mark.parametrize(
        ("name", "rate", "expected"),
        [
            ("Acme", 50, True),
            ("Ac", 50, False),
            ("Acme", -1, False),
            ("Ac", -1, False),
        ],
    )
    def test_quadrants(self, name, rate, expected):
        """Test each combination of valid and invalid name and rate."""
        assert validate(name, rate) is expected

    def test_boundaries(self):
        """Test the exact boundaries are accepted."""
        assert validate("abc", 0) is True
        assert validate("abc", 0.0) is True

    def test_missing_values(self):
        """Test absent values are never valid."""
        assert validate(None, 50) is False
        assert validate("Acme", None) is False
        assert validate(None, None) is False
        assert validate("", 50) is False

    def test_validate_draft(self):
        """Test drafts are validated by their name and rate only."""
        assert validate_draft(Draft(name="Acme", hourly_rate=10, vat_enabled=True)) is True
        assert validate_draft(Draft(name="Acme")) is False
        assert validate_draft(Draft()) is False
