# ========================================
# nexthire/schemas/common.py - DRIVER ACKNOWLEDGMENTS
# ========================================

from typing import Optional

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel
from pymongo.results import DeleteResult, InsertOneResult, UpdateResult


class Acknowledgment(BaseModel):
    """Raw write results, serialized with the driver's camelCase keys."""
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    acknowledged: bool = True


# 1. Output: insert_one
class InsertAck(Acknowledgment):
    inserted_id: str

    @classmethod
    def from_result(cls, result: InsertOneResult) -> "InsertAck":
        return cls(acknowledged=result.acknowledged, inserted_id=str(result.inserted_id))


# 2. Output: update_one
class UpdateAck(Acknowledgment):
    matched_count: int
    modified_count: int
    upserted_count: int = 0
    upserted_id: Optional[str] = None

    @classmethod
    def from_result(cls, result: UpdateResult) -> "UpdateAck":
        upserted_id = result.upserted_id
        return cls(
            acknowledged=result.acknowledged,
            matched_count=result.matched_count,
            modified_count=result.modified_count,
            upserted_count=1 if upserted_id is not None else 0,
            upserted_id=str(upserted_id) if upserted_id is not None else None,
        )


# 3. Output: delete_one
class DeleteAck(Acknowledgment):
    deleted_count: int

    @classmethod
    def from_result(cls, result: DeleteResult) -> "DeleteAck":
        return cls(acknowledged=result.acknowledged, deleted_count=result.deleted_count)


class CountResponse(BaseModel):
    count: int


class SuccessResponse(BaseModel):
    success: bool = True
