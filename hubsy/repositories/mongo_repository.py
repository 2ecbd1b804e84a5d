from typing import Any, Dict, List, Optional
from bson import Decimal128, ObjectId
from fastapi.encoders import jsonable_encoder
from pymongo.database import Database
from pymongo.results import InsertManyResult, InsertOneResult, UpdateResult

# Tipos BSON que pydantic no sabe serializar (pueden venir anidados)
BSON_ENCODERS = {
    ObjectId: str,
    Decimal128: lambda d: {"$numberDecimal": str(d)},
}


class MongoRepository:
    def __init__(self, db: Database, collection_name: str):
        # 🔗 La base llega inyectada (ver hubsy/api/dependencies.py)
        self.col = db[collection_name]

    @staticmethod
    def _stringify_id(doc: Dict[str, Any]) -> Dict[str, Any]:
        if not doc:
            return doc
        if "_id" in doc and isinstance(doc["_id"], ObjectId):
            doc["_id"] = str(doc["_id"])
        return doc

    @staticmethod
    def to_json(docs: Any) -> Any:
        """Convierte documentos a tipos JSON, incluidos ObjectId/Decimal128 anidados."""
        return jsonable_encoder(docs, custom_encoder=BSON_ENCODERS)

    @staticmethod
    def to_object_id(_id: str) -> ObjectId:
        # lanza bson.errors.InvalidId si no es un hex de 24 chars
        return ObjectId(_id)

    def find(self, query: Optional[Dict[str, Any]] = None) -> List[Dict[str, Any]]:
        return self.to_json([self._stringify_id(d) for d in self.col.find(query or {})])

    def insert_one(self, data: Dict[str, Any]) -> InsertOneResult:
        # pymongo agrega "_id" al dict; trabajamos sobre una copia
        return self.col.insert_one(dict(data))

    def insert_many(self, docs: List[Dict[str, Any]]) -> InsertManyResult:
        return self.col.insert_many([dict(d) for d in docs])

    def update_one(self, _id: str, updates: Dict[str, Any]) -> UpdateResult:
        return self.col.update_one({"_id": self.to_object_id(_id)}, {"$set": updates})

    def delete_all(self) -> int:
        return self.col.delete_many({}).deleted_count
