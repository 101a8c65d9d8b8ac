from __future__ import annotations

from typing import Any, List, Optional


class RpgInventoryError(Exception):
    """Base exception for the rpg_inventory project."""


class ItemDataError(RpgInventoryError, ValueError):
    """Raised when a raw item record fails schema validation."""

    def __init__(self, message: str, errors: Optional[List[Any]] = None):
        super().__init__(message)
        self.errors = errors or []

    def to_human(self) -> str:
        parts = [str(self)]
        for e in self.errors:
            path = "/".join(str(p) for p in e.path) or "<root>"
            parts.append(f" - at {path}: {e.message}")
        return "\n".join(parts)


class ConfigError(RpgInventoryError):
    """Raised when an inventory configuration file is missing or invalid."""
