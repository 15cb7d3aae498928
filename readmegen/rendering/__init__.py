"""README document assembly."""

from __future__ import annotations

from .assembler import ReadmeAssembler, assemble_readme

__all__ = ["ReadmeAssembler", "assemble_readme"]
