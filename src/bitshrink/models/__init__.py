"""Pydantic models for bitshrink."""

from __future__ import annotations

from .identifiers import Identifier, IdentifierSet

__all__ = [
    "Identifier",
    "IdentifierSet",
]
