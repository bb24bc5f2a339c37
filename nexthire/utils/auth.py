# ========================================
# nexthire/utils/auth.py - COOKIE JWT
# ========================================

from datetime import datetime, timedelta, timezone
from typing import Optional

from fastapi import Cookie, Response
from jose import JWTError, jwt

from nexthire import config
from nexthire.schemas.auth import TokenData
from nexthire.utils.exceptions import UnauthorizedException
from nexthire.utils.logger import auth_logger


def create_access_token(email: str, expires_delta: Optional[timedelta] = None) -> str:
    expire = datetime.now(timezone.utc) + (expires_delta or timedelta(days=config.TOKEN_EXPIRE_DAYS))
    to_encode = {"email": email, "exp": expire}
    return jwt.encode(to_encode, config.SECRET_KEY, algorithm=config.ALGORITHM)


def cookie_options() -> dict:
    """httpOnly always; cross-site cookies need Secure + SameSite=None."""
    production = config.is_production()
    return {
        "httponly": True,
        "secure": production,
        "samesite": "none" if production else "strict",
    }


def set_token_cookie(response: Response, token: str):
    response.set_cookie(config.TOKEN_COOKIE_NAME, token, **cookie_options())


def clear_token_cookie(response: Response):
    response.delete_cookie(config.TOKEN_COOKIE_NAME, **cookie_options())


async def verify_token(token: Optional[str] = Cookie(None)) -> TokenData:
    """Dependency: decode the ``token`` cookie or reject with 401."""
    if not token:
        raise UnauthorizedException()

    try:
        payload = jwt.decode(token, config.SECRET_KEY, algorithms=[config.ALGORITHM])
    except JWTError as e:
        auth_logger.warning("Rejected token: %s", e)
        raise UnauthorizedException()

    email = payload.get("email")
    if email is None:
        raise UnauthorizedException()

    return TokenData(email=email)
