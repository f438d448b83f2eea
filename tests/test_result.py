"""Tests for RenderResult frozen dataclass.

Covers:
- Construction with all fields
- Frozen (immutable) enforcement
- text property (newline-terminated, empty for no lines)
- __all__ export
"""

from __future__ import annotations

from dataclasses import FrozenInstanceError

import pytest

from structure_printer.result import RenderResult

# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


def make_result(**overrides: object) -> RenderResult:
    """Return a valid RenderResult, optionally overriding specific fields."""
    defaults: dict[str, object] = {
        "lines": ["Element 1:", "  Value: 2"],
        "leaf_count": 1,
        "container_count": 1,
        "max_depth": 1,
        "computation_time_ms": 0.5,
    }
    defaults.update(overrides)
    return RenderResult(**defaults)  # type: ignore[arg-type]


# ---------------------------------------------------------------------------
# Tests
# ---------------------------------------------------------------------------


class TestRenderResult:
    def test_fields_accessible(self) -> None:
        result = make_result()
        assert result.lines == ["Element 1:", "  Value: 2"]
        assert result.leaf_count == 1
        assert result.container_count == 1
        assert result.max_depth == 1
        assert result.computation_time_ms == 0.5

    def test_frozen(self) -> None:
        result = make_result()
        with pytest.raises(FrozenInstanceError):
            result.leaf_count = 2  # type: ignore[misc]

    def test_text_is_newline_terminated(self) -> None:
        assert make_result().text == "Element 1:\n  Value: 2\n"

    def test_text_empty_when_no_lines(self) -> None:
        assert make_result(lines=[]).text == ""

    def test_equality(self) -> None:
        assert make_result() == make_result()

    def test_all_export(self) -> None:
        from structure_printer import result as module

        assert module.__all__ == ["RenderResult"]
