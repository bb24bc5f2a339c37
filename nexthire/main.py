# ========================================
# nexthire/main.py - APPLICATION ENTRYPOINT
# ========================================

from contextlib import asynccontextmanager

from fastapi import Depends, FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse, PlainTextResponse
from motor.motor_asyncio import AsyncIOMotorDatabase
from pymongo.errors import PyMongoError

from nexthire import config
from nexthire.database import close_mongo_connection, connect_to_mongo, ensure_indexes, get_db
from nexthire.routes.auth import router as auth_router
from nexthire.routes.bid import router as bid_router
from nexthire.routes.job import router as job_router
from nexthire.utils.exceptions import register_exception_handlers
from nexthire.utils.logger import app_logger


# ===========================
# DATABASE LIFESPAN
# ===========================

@asynccontextmanager
async def lifespan(app: FastAPI):
    client, db = await connect_to_mongo()
    await ensure_indexes(db)
    app.state.mongo_client = client
    app.state.db = db
    app_logger.info("nextHire Server : %s", config.PORT)
    yield
    await close_mongo_connection(client)


# ===========================
# CREATE FASTAPI APP
# ===========================

app = FastAPI(
    title="nextHire API",
    description="Job postings, bids and cookie-based auth for the nextHire marketplace",
    version="1.0.0",
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=config.ALLOWED_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

register_exception_handlers(app)

app.include_router(auth_router)
app.include_router(job_router)
app.include_router(bid_router)


# ===========================
# ROOT ENDPOINTS
# ===========================

@app.get("/", response_class=PlainTextResponse)
async def root():
    return "nextHire Server Running"


@app.get("/health")
async def health_check(db: AsyncIOMotorDatabase = Depends(get_db)):
    """Health check endpoint, pings the database"""
    try:
        await db.command("ping")
    except PyMongoError as e:
        app_logger.error("Health check ping failed: %s", e)
        return JSONResponse(status_code=503, content={"status": "unhealthy", "database": "unreachable"})

    return {"status": "healthy", "database": "connected"}


if __name__ == "__main__":
    import uvicorn

    uvicorn.run("nexthire.main:app", host="0.0.0.0", port=config.PORT)
