import threading
from abc import ABC, abstractmethod
from typing import Dict, Tuple

from pydantic import BaseModel

from dormchef_recipes.app.services.url_parsing.models import ExtractedRecipe


class SavedImport(BaseModel):
    id: int
    recipe: ExtractedRecipe
    already_imported: bool = False


class ImportedRecipeStore(ABC):
    """Persistence for imported recipes, idempotent by source URL per user."""

    @abstractmethod
    def save(self, user_id: int, recipe: ExtractedRecipe) -> SavedImport:  # pragma: no cover - interface
        raise NotImplementedError


class InMemoryImportedRecipeStore(ImportedRecipeStore):
    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._next_id = 1
        self._records: Dict[Tuple[int, str], SavedImport] = {}

    def save(self, user_id: int, recipe: ExtractedRecipe) -> SavedImport:
        key = (user_id, recipe.source_url)
        with self._lock:
            existing = self._records.get(key)
            if existing:
                return existing.model_copy(update={"already_imported": True})
            saved = SavedImport(id=self._next_id, recipe=recipe)
            self._next_id += 1
            self._records[key] = saved
            return saved
