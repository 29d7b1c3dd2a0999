"""Tests for the Result helpers."""

from tietracker.domain.shared import Err, Ok, flat_map, is_err, is_ok, map_result, unwrap_or


def parse_hours(text: str):
    try:
        return Ok(float(text))
    except ValueError:
        return Err(f"Not a number: {text!r}")


class TestResult:
    def test_predicates(self):
        assert is_ok(Ok(1)) is True
        assert is_err(Ok(1)) is False
        assert is_err(Err("x")) is True

    def test_map_result(self):
        assert map_result(Ok(2), lambda v: v * 3) == Ok(6)
        assert map_result(Err("bad"), lambda v: v * 3) == Err("bad")

    def test_flat_map(self):
        """Test chaining stops at the first error."""
        assert flat_map(Ok("7.5"), parse_hours) == Ok(7.5)
        assert flat_map(Ok("abc"), parse_hours) == Err("Not a number: 'abc'")
        assert flat_map(Err("missing"), parse_hours) == Err("missing")

    def test_unwrap_or(self):
        assert unwrap_or(Ok(3), 0) == 3
        assert unwrap_or(Err("x"), 0) == 0
