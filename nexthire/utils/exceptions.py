from fastapi import FastAPI, HTTPException, Request, status
from fastapi.responses import JSONResponse
from pymongo.errors import PyMongoError

from nexthire.utils.logger import app_logger


class DuplicateBidError(HTTPException):
    """A bidder may only bid once per job."""
    def __init__(self, email: str, job_id: str):
        super().__init__(
            status_code=status.HTTP_409_CONFLICT,
            detail="You have already placed a bid on this job",
        )
        self.email = email
        self.job_id = job_id


class UnauthorizedException(HTTPException):
    def __init__(self, message: str = "unauthorized access"):
        super().__init__(status_code=status.HTTP_401_UNAUTHORIZED, detail=message)


class ForbiddenException(HTTPException):
    def __init__(self, message: str = "forbidden access"):
        super().__init__(status_code=status.HTTP_403_FORBIDDEN, detail=message)


async def database_error_handler(request: Request, exc: PyMongoError) -> JSONResponse:
    app_logger.error("Database error on %s %s: %s", request.method, request.url.path, exc)
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"detail": "Database error"},
    )


def register_exception_handlers(app: FastAPI):
    app.add_exception_handler(PyMongoError, database_error_handler)
