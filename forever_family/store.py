"""
Collection storage: whole-file JSON arrays on local disk, plus an in-memory
test double with the same interface.
"""

from __future__ import annotations

import copy
import json
import logging
import os
import tempfile
from dataclasses import dataclass, field
from typing import Protocol

logger = logging.getLogger(__name__)

SUBMISSIONS = "submissions"
REFERRALS = "referrals"
STEPS = "steps"


class CollectionStore(Protocol):
    """Reads and rewrites a named collection as a whole."""

    def read(self, collection: str) -> list[dict]:
        ...

    def write(self, collection: str, records: list[dict]) -> None:
        ...


@dataclass
class InMemoryCollectionStore:
    """Test double for the file store."""

    collections: dict = field(default_factory=dict)

    def read(self, collection: str) -> list[dict]:
        # Hand out a copy so callers mutate their own list, as with the file store.
        return copy.deepcopy(self.collections.get(collection, []))

    def write(self, collection: str, records: list[dict]) -> None:
        self.collections[collection] = json.loads(json.dumps(records))

    def reset(self) -> None:
        self.collections.clear()


class JsonFileStore:
    """
    Persists each collection as ``<data_dir>/<collection>.json``.

    Every read parses the whole file and every write serializes the whole
    list. There is no locking: two requests writing the same collection can
    interleave and the last write wins.
    """

    def __init__(self, data_dir: str):
        os.makedirs(data_dir, exist_ok=True)
        self.data_dir = data_dir

    def path_for(self, collection: str) -> str:
        return os.path.join(self.data_dir, f"{collection}.json")

    def read(self, collection: str) -> list[dict]:
        path = self.path_for(collection)
        if not os.path.exists(path):
            self.write(collection, [])
            return []
        try:
            with open(path, "r", encoding="utf-8") as f:
                data = json.load(f)
        except (OSError, ValueError) as exc:
            logger.warning("Could not parse %s, treating as empty: %s", path, exc)
            return []
        if not isinstance(data, list):
            logger.warning("%s does not hold a JSON array, treating as empty", path)
            return []
        return data

    def write(self, collection: str, records: list[dict]) -> None:
        path = self.path_for(collection)
        # One temp file per write: concurrent writers must not share it.
        fd, tmp_path = tempfile.mkstemp(
            dir=self.data_dir, prefix=f"{collection}.", suffix=".tmp"
        )
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as f:
                json.dump(records, f, indent=2, ensure_ascii=False)
            os.replace(tmp_path, path)
        finally:
            if os.path.exists(tmp_path):
                os.unlink(tmp_path)
