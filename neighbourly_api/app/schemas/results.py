"""
Write results returned to clients.

The web client inspects the driver's acknowledgement fields directly
(``insertedId``, ``modifiedCount``, ``deletedCount`` ...), so these
models reproduce that camelCase shape from pymongo's result objects.
"""

from typing import Optional

from pydantic import BaseModel, Field
from pymongo.results import DeleteResult, InsertOneResult, UpdateResult


class InsertRead(BaseModel):
    acknowledged: bool
    inserted_id: str = Field(..., alias="insertedId")

    model_config = {
        "populate_by_name": True,
    }

    @classmethod
    def from_result(cls, result: InsertOneResult) -> "InsertRead":
        return cls(acknowledged=result.acknowledged, inserted_id=str(result.inserted_id))


class UpdateRead(BaseModel):
    acknowledged: bool
    matched_count: int = Field(..., alias="matchedCount")
    modified_count: int = Field(..., alias="modifiedCount")
    upserted_count: int = Field(0, alias="upsertedCount")
    upserted_id: Optional[str] = Field(None, alias="upsertedId")

    model_config = {
        "populate_by_name": True,
    }

    @classmethod
    def from_result(cls, result: UpdateResult) -> "UpdateRead":
        upserted_id = result.upserted_id
        return cls(
            acknowledged=result.acknowledged,
            matched_count=result.matched_count,
            modified_count=result.modified_count,
            upserted_count=0 if upserted_id is None else 1,
            upserted_id=None if upserted_id is None else str(upserted_id),
        )


class DeleteRead(BaseModel):
    acknowledged: bool
    deleted_count: int = Field(..., alias="deletedCount")

    model_config = {
        "populate_by_name": True,
    }

    @classmethod
    def from_result(cls, result: DeleteResult) -> "DeleteRead":
        return cls(acknowledged=result.acknowledged, deleted_count=result.deleted_count)
