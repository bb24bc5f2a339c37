# ========================================
# nexthire/routes/auth.py - TOKEN ISSUANCE
# ========================================

from fastapi import APIRouter, Response

from nexthire.schemas.auth import TokenRequest
from nexthire.schemas.common import SuccessResponse
from nexthire.utils.auth import clear_token_cookie, create_access_token, set_token_cookie
from nexthire.utils.logger import auth_logger

router = APIRouter(tags=["Auth"])


# ✅ 1. SIGN A TOKEN INTO THE COOKIE
@router.post("/jwt", response_model=SuccessResponse)
async def issue_token(payload: TokenRequest, response: Response):
    """Sign a long-lived token for the email and set it as an httpOnly cookie."""
    token = create_access_token(payload.email)
    set_token_cookie(response, token)
    auth_logger.info("Issued token for %s", payload.email)
    return {"success": True}


# ✅ 2. CLEAR THE COOKIE
@router.get("/logout", response_model=SuccessResponse)
async def logout(response: Response):
    clear_token_cookie(response)
    return {"success": True}
