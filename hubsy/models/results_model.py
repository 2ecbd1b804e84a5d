# hubsy/models/results_model.py
from pydantic import BaseModel, ConfigDict
from typing import Any, Dict, Optional

from pymongo.results import InsertOneResult, UpdateResult

from hubsy.repositories.mongo_repository import MongoRepository


# Los nombres de campos siguen el formato que ya consume el frontend
class InsertAck(BaseModel):
    acknowledged: bool
    # ObjectId -> hex; un _id propio (ej. 5) se devuelve tal cual
    insertedId: Any = None

    @classmethod
    def from_result(cls, res: InsertOneResult) -> "InsertAck":
        inserted_id = res.inserted_id if res.acknowledged else None
        return cls(
            acknowledged=res.acknowledged,
            insertedId=MongoRepository.to_json(inserted_id),
        )


class UpdateAck(BaseModel):
    acknowledged: bool
    matchedCount: int = 0
    modifiedCount: int = 0
    upsertedId: Optional[str] = None
    upsertedCount: int = 0

    @classmethod
    def from_result(cls, res: UpdateResult) -> "UpdateAck":
        if not res.acknowledged:
            return cls(acknowledged=False)
        upserted = res.upserted_id
        return cls(
            acknowledged=True,
            matchedCount=res.matched_count,
            modifiedCount=res.modified_count,
            upsertedId=str(upserted) if upserted is not None else None,
            upsertedCount=1 if upserted is not None else 0,
        )


class SpacesUpdated(BaseModel):
    message: str = "Spaces updated"
    result: UpdateAck


class ErrorOut(BaseModel):
    message: str

    model_config = ConfigDict(json_schema_extra={"example": {"message": "MongoDB connection is not ready"}})


def error_content(exc: Exception) -> Dict[str, Any]:
    return ErrorOut(message=str(exc)).model_dump()
