"""Read-only JSON record store (``db.json`` with named collections)."""

import json
import logging
from collections.abc import Mapping, Sequence
from pathlib import Path
from typing import Any

from src.search.values import to_text

logger = logging.getLogger(__name__)


class StoreError(Exception):
    """The record store file is missing or malformed."""


class RecordStore:
    """Immutable snapshot of named record collections.

    The top level of the source document maps collection names to lists of
    records. Non-list entries (singular resources) are not served.
    """

    def __init__(self, collections: Mapping[str, Sequence[dict[str, Any]]]) -> None:
        self._collections: dict[str, tuple[dict[str, Any], ...]] = {}
        for name, items in collections.items():
            if not isinstance(items, list | tuple):
                logger.warning("Ignoring non-collection entry '%s' in record store", name)
                continue
            for position, item in enumerate(items):
                if not isinstance(item, dict):
                    raise StoreError(
                        f"Collection '{name}' entry {position} is not an object: {item!r}"
                    )
            self._collections[name] = tuple(items)

    @classmethod
    def from_file(cls, path: str | Path) -> "RecordStore":
        """Load a store from a JSON file."""
        path = Path(path)
        try:
            data = json.loads(path.read_text(encoding="utf-8"))
        except FileNotFoundError as e:
            raise StoreError(f"Record store not found: {path}") from e
        except json.JSONDecodeError as e:
            raise StoreError(f"Record store {path} is not valid JSON: {e}") from e

        if not isinstance(data, dict):
            raise StoreError(f"Record store {path} must contain a JSON object at the top level")

        store = cls(data)
        logger.info(
            "Loaded record store %s: %s",
            path,
            ", ".join(f"{name}={len(items)}" for name, items in store._collections.items()),
        )
        return store

    def names(self) -> list[str]:
        return list(self._collections)

    def collection(self, name: str) -> tuple[dict[str, Any], ...]:
        """All records of ``name``; empty for an unknown collection."""
        return self._collections.get(name, ())

    def get(self, name: str, record_id: str) -> dict[str, Any] | None:
        """Find a record whose ``id`` has the string form ``record_id``."""
        for record in self.collection(name):
            if "id" in record and to_text(record["id"]) == record_id:
                return record
        return None
