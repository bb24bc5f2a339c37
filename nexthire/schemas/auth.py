from pydantic import BaseModel

from nexthire.schemas.fields import EmailAddress


# 1. Input: POST /jwt
class TokenRequest(BaseModel):
    email: EmailAddress


# 2. Decoded cookie identity
class TokenData(BaseModel):
    email: str
