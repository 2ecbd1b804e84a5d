# hubsy/services/order_service.py
from typing import Any, Dict

from pymongo.database import Database

from hubsy.models.results_model import InsertAck
from hubsy.repositories.mongo_repository import MongoRepository


class OrderService:
    def __init__(self, db: Database) -> None:
        self.repo = MongoRepository(db, "orders")

    def create(self, order: Dict[str, Any]) -> InsertAck:
        # Se guarda tal cual llega, sin validar lessonIds contra "lessons"
        return InsertAck.from_result(self.repo.insert_one(order))
