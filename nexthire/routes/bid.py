# ========================================
# nexthire/routes/bid.py
# ========================================

from typing import List

from fastapi import APIRouter, Depends
from motor.motor_asyncio import AsyncIOMotorDatabase

from nexthire.database import get_db, parse_object_id, serialize_documents
from nexthire.schemas.bid import BidCreate, BidStatusUpdate
from nexthire.schemas.common import InsertAck, UpdateAck
from nexthire.services import bid_service

router = APIRouter(tags=["Bids"])


# ✅ 1. PLACE A BID (409 if already placed)
@router.post("/bid", response_model=InsertAck)
async def place_bid(bid: BidCreate, db: AsyncIOMotorDatabase = Depends(get_db)):
    result = await bid_service.create_bid(db, bid.model_dump(exclude_none=True))
    return InsertAck.from_result(result)


# ✅ 2. MY BIDS (bidder)
@router.get("/my-bids/{email}", response_model=List[dict])
async def get_my_bids(email: str, db: AsyncIOMotorDatabase = Depends(get_db)):
    bids = await bid_service.list_bids_by_bidder(db, email)
    return serialize_documents(bids)


# ✅ 3. BID REQUESTS (buyer)
@router.get("/bid-requests/{email}", response_model=List[dict])
async def get_bid_requests(email: str, db: AsyncIOMotorDatabase = Depends(get_db)):
    bids = await bid_service.list_bids_by_buyer(db, email)
    return serialize_documents(bids)


# ✅ 4. UPDATE BID STATUS
@router.patch("/bid/{bid_id}", response_model=UpdateAck)
async def update_bid_status(
    bid_id: str,
    status_update: BidStatusUpdate,
    db: AsyncIOMotorDatabase = Depends(get_db),
):
    object_id = parse_object_id(bid_id, "bid ID")
    result = await bid_service.update_bid_status(db, object_id, status_update.status)
    return UpdateAck.from_result(result)
