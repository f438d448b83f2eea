"""Structure printer - indented listings of nested sequences, mappings and leaves."""

from __future__ import annotations

from structure_printer.api import (
    describe,
    print_each,
    print_structure,
    render,
    render_text,
)
from structure_printer.config import LeafFormat, RenderConfig
from structure_printer.errors import CycleDetected, DepthExceeded, StructurePrinterError
from structure_printer.mapping import MergedDict
from structure_printer.renderer import StructureRenderer
from structure_printer.result import RenderResult
from structure_printer.shapes import KeyedCollection, Shape, classify

__version__: str = "0.1.0"
__all__: list[str] = [
    "CycleDetected",
    "DepthExceeded",
    "KeyedCollection",
    "LeafFormat",
    "MergedDict",
    "RenderConfig",
    "RenderResult",
    "Shape",
    "StructurePrinterError",
    "StructureRenderer",
    "classify",
    "describe",
    "print_each",
    "print_structure",
    "render",
    "render_text",
]
