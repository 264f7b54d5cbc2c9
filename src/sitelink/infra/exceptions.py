"""Exceptions raised by the reference store implementations."""

from __future__ import annotations

from pathlib import Path

from sitelink.exceptions import SitelinkError


class StoreError(SitelinkError):
    """Base exception for store-related errors."""


class DuplicateRecordError(StoreError):
    def __init__(self, kind: str, record_id: int) -> None:
        self.kind = kind
        self.record_id = record_id
        super().__init__(f"Duplicate {kind} id {record_id}")


class FixtureLoadError(StoreError):
    """Raised when a YAML fixture cannot be read or does not describe a store."""

    def __init__(self, path: Path, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"Cannot load fixture {path}: {reason}")
