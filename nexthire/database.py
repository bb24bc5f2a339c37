# ========================================
# nexthire/database.py - MONGODB CONNECTION
# ========================================

from typing import Any, Dict, List, Optional

from bson import ObjectId
from fastapi import HTTPException, Request
from motor.motor_asyncio import AsyncIOMotorClient, AsyncIOMotorDatabase
from pymongo import ASCENDING
from pymongo.server_api import ServerApi

from nexthire.config import BIDS_COLLECTION, DATABASE_NAME, get_mongo_uri
from nexthire.utils.logger import db_logger


def create_client(uri: Optional[str] = None) -> AsyncIOMotorClient:
    """Build the shared Motor client pinned to the Stable API v1."""
    return AsyncIOMotorClient(
        uri or get_mongo_uri(),
        server_api=ServerApi("1", strict=True, deprecation_errors=True),
    )


async def connect_to_mongo(uri: Optional[str] = None):
    """Connect, ping the deployment and return (client, db)."""
    client = create_client(uri)
    db = client[DATABASE_NAME]
    await client.admin.command("ping")
    db_logger.info("Pinged your deployment. Connected to MongoDB database %r", DATABASE_NAME)
    return client, db


async def close_mongo_connection(client: Optional[AsyncIOMotorClient]):
    if client:
        client.close()
        db_logger.info("MongoDB connection closed")


async def ensure_indexes(db: AsyncIOMotorDatabase):
    """One bid per (email, jobId), also under concurrent submissions."""
    await db[BIDS_COLLECTION].create_index(
        [("email", ASCENDING), ("jobId", ASCENDING)],
        unique=True,
        name="unique_bid_per_job",
    )


def get_db(request: Request) -> AsyncIOMotorDatabase:
    """FastAPI dependency: the database opened in the app lifespan."""
    return request.app.state.db


# ===========================
# HELPERS
# ===========================

def parse_object_id(value: str, label: str = "ID") -> ObjectId:
    """Convert a path id to ObjectId, rejecting malformed ids with a 400."""
    if not ObjectId.is_valid(value):
        raise HTTPException(status_code=400, detail=f"Invalid {label}")
    return ObjectId(value)


def serialize_document(doc: Optional[Dict[str, Any]]) -> Optional[Dict[str, Any]]:
    if doc is None:
        return None
    if isinstance(doc.get("_id"), ObjectId):
        doc["_id"] = str(doc["_id"])
    return doc


def serialize_documents(docs: List[Dict[str, Any]]) -> List[Dict[str, Any]]:
    return [serialize_document(doc) for doc in docs]
