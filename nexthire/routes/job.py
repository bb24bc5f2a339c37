# ========================================
# nexthire/routes/job.py
# ========================================

from typing import List, Optional

from fastapi import APIRouter, Depends, Query
from motor.motor_asyncio import AsyncIOMotorDatabase

from nexthire.database import get_db, parse_object_id, serialize_document, serialize_documents
from nexthire.schemas.auth import TokenData
from nexthire.schemas.common import CountResponse, DeleteAck, InsertAck, UpdateAck
from nexthire.schemas.job import JobCreate
from nexthire.services import job_service
from nexthire.utils.auth import verify_token
from nexthire.utils.exceptions import ForbiddenException

router = APIRouter(tags=["Jobs"])

# ===========================
# PUBLIC ENDPOINTS
# ===========================

# ✅ 1. GET ALL JOBS
@router.get("/jobs", response_model=List[dict])
async def get_all_jobs(db: AsyncIOMotorDatabase = Depends(get_db)):
    jobs = await job_service.list_jobs(db)
    return serialize_documents(jobs)


# ✅ 2. GET JOBS PAGE (filter by category, sort by deadline)
@router.get("/all-jobs", response_model=List[dict])
async def get_jobs_page(
    page: int = Query(1, ge=1, description="1-based page number"),
    size: int = Query(10, ge=1, description="Jobs per page"),
    category: Optional[str] = Query(None, alias="filter", description="Exact category match"),
    sort: Optional[str] = Query(None, description="'asc' for earliest deadline first, otherwise latest first"),
    db: AsyncIOMotorDatabase = Depends(get_db),
):
    jobs = await job_service.list_jobs_page(db, page, size, category=category, sort=sort)
    return serialize_documents(jobs)


# ✅ 3. COUNT JOBS (for the pager)
@router.get("/jobs-count", response_model=CountResponse)
async def get_jobs_count(
    category: Optional[str] = Query(None, alias="filter", description="Exact category match"),
    db: AsyncIOMotorDatabase = Depends(get_db),
):
    count = await job_service.count_jobs(db, category=category)
    return {"count": count}


# ✅ 4. GET SINGLE JOB (null when missing)
@router.get("/job/{job_id}", response_model=Optional[dict])
async def get_job(job_id: str, db: AsyncIOMotorDatabase = Depends(get_db)):
    job = await job_service.get_job(db, parse_object_id(job_id, "job ID"))
    return serialize_document(job)


# ===========================
# BUYER ENDPOINTS
# ===========================

# ✅ 5. POST A JOB
@router.post("/job", response_model=InsertAck)
async def create_job(job: JobCreate, db: AsyncIOMotorDatabase = Depends(get_db)):
    result = await job_service.create_job(db, job.model_dump(exclude_unset=True))
    return InsertAck.from_result(result)


# ✅ 6. REPLACE/UPSERT A JOB
@router.put("/job/{job_id}", response_model=UpdateAck)
async def update_job(job_id: str, job: JobCreate, db: AsyncIOMotorDatabase = Depends(get_db)):
    object_id = parse_object_id(job_id, "job ID")
    result = await job_service.upsert_job(db, object_id, job.model_dump(exclude_unset=True))
    return UpdateAck.from_result(result)


# ✅ 7. DELETE A JOB (no-op when missing)
@router.delete("/job/{job_id}", response_model=DeleteAck)
async def delete_job(job_id: str, db: AsyncIOMotorDatabase = Depends(get_db)):
    result = await job_service.delete_job(db, parse_object_id(job_id, "job ID"))
    return DeleteAck.from_result(result)


# ✅ 8. MY POSTED JOBS (token email must match)
@router.get("/jobs/{email}", response_model=List[dict])
async def get_my_posted_jobs(
    email: str,
    user: TokenData = Depends(verify_token),
    db: AsyncIOMotorDatabase = Depends(get_db),
):
    if user.email != email:
        raise ForbiddenException()

    jobs = await job_service.list_jobs_by_buyer(db, email)
    return serialize_documents(jobs)
