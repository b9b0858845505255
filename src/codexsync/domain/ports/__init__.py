"""Domain ports."""

from __future__ import annotations

from .store import AuthoritativeStore, EntityRow, StoreError

__all__ = ["AuthoritativeStore", "EntityRow", "StoreError"]
