# hubsy/services/lesson_service.py
from typing import Any, Dict, List, Optional

from pymongo.database import Database

from hubsy.models.results_model import SpacesUpdated, UpdateAck
from hubsy.repositories.mongo_repository import MongoRepository


class LessonService:
    def __init__(self, db: Database) -> None:
        self.repo = MongoRepository(db, "lessons")

    # -------------------- helpers internos --------------------
    @staticmethod
    def _search_query(term: Optional[str]) -> Dict[str, Any]:
        # sin término -> patrón vacío, que matchea todo
        pattern = term or ""
        return {
            "$or": [
                {"title": {"$regex": pattern, "$options": "i"}},
                {"location": {"$regex": pattern, "$options": "i"}},
            ]
        }

    # -------------------- API --------------------
    def list(self) -> List[Dict[str, Any]]:
        return self.repo.find({})

    def search(self, term: Optional[str]) -> List[Dict[str, Any]]:
        """Busca por título o ubicación (case-insensitive, el término es una regex)."""
        return self.repo.find(self._search_query(term))

    def update_spaces(self, lesson_id: str, spaces: Any) -> SpacesUpdated:
        # set absoluto; no se valida existencia, signo ni tipo
        res = self.repo.update_one(lesson_id, {"spaces": spaces})
        return SpacesUpdated(result=UpdateAck.from_result(res))
