"""Capability-based classification of values into SEQUENCE, MAPPING or LEAF.

A value is classified by what it can do, not by its exact type:

- Text and binary buffers (str, bytes, bytearray, memoryview) are always leaves.
- numpy arrays with at least one dimension are sequences; 0-d arrays and
  numpy scalars are leaves.
- Anything registered as ``collections.abc.Sequence`` is a sequence, even if
  it also offers key access.
- Otherwise, anything exposing ``keys()``, ``items()`` and ``__getitem__`` (see
  ``KeyedCollection``), or registered as ``collections.abc.Mapping``, is a
  mapping. Custom dict-like types therefore need no registration.
- Everything else is a leaf.

Apart from the numpy ``ndim`` check the answer depends only on the type, so
per-type results are memoised in a bounded LRU cache.

Example::

    from structure_printer.shapes import Shape, classify

    classify((2, 4))          # Shape.SEQUENCE
    classify({"k": "v"})      # Shape.MAPPING
    classify("text")          # Shape.LEAF
"""

from __future__ import annotations

import logging
import threading
from collections.abc import Mapping, Sequence
from enum import StrEnum, auto
from typing import Any, Protocol, runtime_checkable

import numpy as np
from cachetools import LRUCache, cached
from cachetools.keys import hashkey

__all__ = ["KeyedCollection", "Shape", "classify", "clear_shape_cache"]

logger = logging.getLogger(__name__)

# Sequences by ABC registration, but rendered as a single leaf.
_TEXT_TYPES: tuple[type, ...] = (str, bytes, bytearray, memoryview)

_shape_cache: LRUCache[Any, Shape] = LRUCache(maxsize=1024)
_shape_lock = threading.Lock()


class Shape(StrEnum):
    """The three shapes a value can take during traversal.

    - SEQUENCE -> "sequence" : ordered, positionally indexed container
    - MAPPING  -> "mapping"  : key/value container
    - LEAF     -> "leaf"     : anything printed directly
    """

    SEQUENCE = auto()
    MAPPING = auto()
    LEAF = auto()


@runtime_checkable
class KeyedCollection(Protocol):
    """Structural protocol for key/value containers.

    Any class with ``keys``, ``items`` and ``__getitem__`` satisfies this
    protocol at runtime -- no inheritance from ``dict`` or ``Mapping`` needed.
    """

    def keys(self) -> Any: ...

    def items(self) -> Any: ...

    def __getitem__(self, key: Any) -> Any: ...


@cached(cache=_shape_cache, key=hashkey, lock=_shape_lock)
def _classify_type(tp: type) -> Shape:
    if issubclass(tp, _TEXT_TYPES):
        return Shape.LEAF
    # Sequence before mapping: first match wins.
    if issubclass(tp, np.ndarray) or issubclass(tp, Sequence):
        return Shape.SEQUENCE
    if issubclass(tp, Mapping) or issubclass(tp, KeyedCollection):
        return Shape.MAPPING
    return Shape.LEAF


def classify(value: Any) -> Shape:
    """Return the shape of ``value``.

    Args:
        value: Any Python value.

    Returns:
        ``Shape.SEQUENCE``, ``Shape.MAPPING`` or ``Shape.LEAF``. The result is
        total: every value has exactly one shape.
    """
    shape = _classify_type(type(value))
    if shape is Shape.SEQUENCE and isinstance(value, np.ndarray) and value.ndim == 0:
        return Shape.LEAF
    return shape


def clear_shape_cache() -> None:
    """Forget all memoised per-type classifications."""
    with _shape_lock:
        size = _shape_cache.currsize
        _shape_cache.clear()
    logger.debug("cleared shape cache (%d entries)", size)
