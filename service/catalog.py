"""
Catalog access and timetable snapshot storage.

The generator never reads catalog data from ambient state: a catalog source is
handed to it and reloaded at the start of every generation.
"""

from abc import ABC, abstractmethod
from pathlib import Path
from typing import Optional
import logging

from models.schemas import Catalog, GenerationResult

logger = logging.getLogger(__name__)


class CatalogAccess(ABC):
    """Read-only source of programs, courses, faculty and rooms."""

    @abstractmethod
    def load(self) -> Catalog:
        """Return the current catalog."""


class InMemoryCatalog(CatalogAccess):
    """Catalog held in memory, e.g. taken from a request body."""

    def __init__(self, catalog: Catalog):
        self.catalog = catalog

    def load(self) -> Catalog:
        return self.catalog


class JsonFileCatalog(CatalogAccess):
    """
    Catalog stored as one JSON document:
    {"programs": [...], "courses": [...], "faculty": [...], "rooms": [...]}

    The file is read again on every load so edits are picked up between runs.
    """

    def __init__(self, path: str):
        self.path = Path(path)

    def load(self) -> Catalog:
        if not self.path.exists():
            logger.warning(f"Catalog file {self.path} not found, using empty catalog")
            return Catalog()

        catalog = Catalog.model_validate_json(self.path.read_text(encoding="utf-8"))
        logger.debug(
            f"Loaded catalog from {self.path}: {len(catalog.programs)} programs, "
            f"{len(catalog.courses)} courses, {len(catalog.faculty)} faculty, "
            f"{len(catalog.rooms)} rooms"
        )
        return catalog


class SnapshotStore:
    """Keeps the latest generation result as a JSON file (no history)."""

    def __init__(self, path: str):
        self.path = Path(path)

    def save(self, result: GenerationResult) -> None:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        self.path.write_text(result.model_dump_json(indent=2), encoding="utf-8")
        logger.info(f"Saved timetable snapshot to {self.path}")

    def load(self) -> Optional[GenerationResult]:
        if not self.path.exists():
            return None
        return GenerationResult.model_validate_json(self.path.read_text(encoding="utf-8"))
