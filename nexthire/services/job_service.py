# ========================================
# nexthire/services/job_service.py - JOBS COLLECTION ACCESS
# ========================================

from typing import Any, Dict, List, Optional

from bson import ObjectId
from motor.motor_asyncio import AsyncIOMotorDatabase
from pymongo import ASCENDING, DESCENDING
from pymongo.results import DeleteResult, InsertOneResult, UpdateResult

from nexthire.config import JOBS_COLLECTION


def build_category_query(category: Optional[str]) -> Dict[str, Any]:
    return {"category": category} if category else {}


async def list_jobs(db: AsyncIOMotorDatabase) -> List[dict]:
    return await db[JOBS_COLLECTION].find().to_list(length=None)


async def list_jobs_page(
    db: AsyncIOMotorDatabase,
    page: int,
    size: int,
    category: Optional[str] = None,
    sort: Optional[str] = None,
) -> List[dict]:
    """One page of jobs; ``page`` is 1-based, ``sort`` orders by deadline."""
    options = {"skip": (page - 1) * size, "limit": size}
    if sort:
        options["sort"] = [("deadline", ASCENDING if sort == "asc" else DESCENDING)]
    cursor = db[JOBS_COLLECTION].find(build_category_query(category), **options)
    return await cursor.to_list(length=None)


async def count_jobs(db: AsyncIOMotorDatabase, category: Optional[str] = None) -> int:
    return await db[JOBS_COLLECTION].count_documents(build_category_query(category))


async def get_job(db: AsyncIOMotorDatabase, job_id: ObjectId) -> Optional[dict]:
    return await db[JOBS_COLLECTION].find_one({"_id": job_id})


async def list_jobs_by_buyer(db: AsyncIOMotorDatabase, email: str) -> List[dict]:
    return await db[JOBS_COLLECTION].find({"buyer.email": email}).to_list(length=None)


async def create_job(db: AsyncIOMotorDatabase, job_data: dict) -> InsertOneResult:
    job_data.pop("_id", None)
    return await db[JOBS_COLLECTION].insert_one(job_data)


async def upsert_job(db: AsyncIOMotorDatabase, job_id: ObjectId, job_data: dict) -> UpdateResult:
    job_data.pop("_id", None)
    return await db[JOBS_COLLECTION].update_one(
        {"_id": job_id},
        {"$set": job_data},
        upsert=True,
    )


async def delete_job(db: AsyncIOMotorDatabase, job_id: ObjectId) -> DeleteResult:
    return await db[JOBS_COLLECTION].delete_one({"_id": job_id})
