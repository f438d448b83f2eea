"""MergedDict: a dict built by merging several source mappings.

Sources are applied left to right, followed by keyword arguments, exactly as
repeated ``dict.update`` calls would: a later source replaces the value of an
earlier key but the key keeps its first position.  Once built, a MergedDict is
an ordinary ``dict`` and renders identically to one.

Example::

    merged = MergedDict({"key1": "value1"}, {"key2": "value2"})
    merged == {"key1": "value1", "key2": "value2"}   # True
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from typing import Any

__all__ = ["MergedDict"]


class MergedDict(dict[Any, Any]):
    """A ``dict`` whose constructor accepts any number of sources.

    Args:
        *sources: Mappings or iterables of ``(key, value)`` pairs.
        **kwargs: Extra entries, applied last.

    Raises:
        TypeError: If a source is neither a mapping nor an iterable.
    """

    def __init__(
        self, *sources: Mapping[Any, Any] | Iterable[tuple[Any, Any]], **kwargs: Any
    ) -> None:
        super().__init__()
        for source in sources:
            self.update(source)
        self.update(kwargs)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({dict.__repr__(self)})"
