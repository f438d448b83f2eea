"""pytest plugin for structure-printer.

Auto-discovered by pytest via the pytest11 entry point declared in pyproject.toml.
When the package is installed (even in editable mode), pytest discovers this plugin
automatically -- no conftest.py changes are needed.

Source: https://docs.pytest.org/en/stable/how-to/writing_plugins.html
"""

from __future__ import annotations

import difflib
from typing import Any

import pytest

from structure_printer import RenderConfig, render


@pytest.fixture(scope="session")
def assert_renders() -> Any:
    """Fixture that returns a callable listing asserter.

    The fixture is session-scoped because the returned callable is stateless
    (delegates to render() which creates a fresh StructureRenderer per call).

    Usage in tests::

        def test_pair(assert_renders):
            assert_renders((2, 4), "Element 1:\\n  Value: 2\\nElement 2:\\n  Value: 4\\n")

        def test_items(assert_renders):
            assert_renders([6], ["Item 1:", "  Value: 6"], label="Item")

    Returns:
        A callable ``_assert(value, expected, depth=0, label=None, config=None)``
        that raises ``AssertionError`` when the rendered lines differ.
    """

    def _assert(
        value: Any,
        expected: str | list[str],
        depth: int = 0,
        label: str | None = None,
        config: RenderConfig | None = None,
    ) -> None:
        """Assert that ``value`` renders to ``expected``.

        Args:
            value:    The value to render.
            expected: Expected listing, either as text (trailing newline
                      optional) or as a list of lines.
            depth:    Starting depth forwarded to render().
            label:    Sequence label forwarded to render().
            config:   Optional RenderConfig forwarded to render().

        Raises:
            AssertionError: When the rendered lines differ, with a unified
                diff of expected vs actual in the message.
        """
        actual = render(value, depth, label=label, config=config)
        wanted = expected.splitlines() if isinstance(expected, str) else list(expected)
        if actual != wanted:
            diff = "\n".join(
                difflib.unified_diff(
                    wanted, actual, fromfile="expected", tofile="actual", lineterm=""
                )
            )
            raise AssertionError(f"rendered listing differs:\n{diff}")

    return _assert
