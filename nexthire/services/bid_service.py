# ========================================
# nexthire/services/bid_service.py - BIDS COLLECTION ACCESS
# ========================================

from typing import List, Optional

from bson import ObjectId
from motor.motor_asyncio import AsyncIOMotorDatabase
from pymongo.errors import DuplicateKeyError
from pymongo.results import InsertOneResult, UpdateResult

from nexthire.config import BIDS_COLLECTION
from nexthire.utils.exceptions import DuplicateBidError
from nexthire.utils.logger import db_logger


async def find_bid(db: AsyncIOMotorDatabase, email: str, job_id: str) -> Optional[dict]:
    return await db[BIDS_COLLECTION].find_one({"email": email, "jobId": job_id})


async def create_bid(db: AsyncIOMotorDatabase, bid_data: dict) -> InsertOneResult:
    """Insert a bid unless this bidder already bid on the job."""
    email, job_id = bid_data["email"], bid_data["jobId"]

    if await find_bid(db, email, job_id):
        db_logger.info("Rejected duplicate bid from %s on job %s", email, job_id)
        raise DuplicateBidError(email, job_id)

    bid_data.pop("_id", None)
    try:
        return await db[BIDS_COLLECTION].insert_one(bid_data)
    except DuplicateKeyError:
        # Lost the race against a concurrent identical submission
        db_logger.info("Rejected concurrent duplicate bid from %s on job %s", email, job_id)
        raise DuplicateBidError(email, job_id)


async def list_bids_by_bidder(db: AsyncIOMotorDatabase, email: str) -> List[dict]:
    return await db[BIDS_COLLECTION].find({"email": email}).to_list(length=None)


async def list_bids_by_buyer(db: AsyncIOMotorDatabase, email: str) -> List[dict]:
    return await db[BIDS_COLLECTION].find({"buyer.email": email}).to_list(length=None)


async def update_bid_status(db: AsyncIOMotorDatabase, bid_id: ObjectId, status: str) -> UpdateResult:
    return await db[BIDS_COLLECTION].update_one({"_id": bid_id}, {"$set": {"status": status}})
