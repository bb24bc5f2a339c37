# ========================================
# nexthire/schemas/job.py
# ========================================

from typing import Optional

from pydantic import BaseModel, ConfigDict

from nexthire.schemas.fields import Deadline, EmailAddress


class Buyer(BaseModel):
    """The job poster, embedded on jobs and copied onto bids."""
    model_config = ConfigDict(extra="allow")

    email: EmailAddress
    name: Optional[str] = None
    photo: Optional[str] = None


# 1. Input: What the buyer posts (and re-sends on PUT)
class JobCreate(BaseModel):
    model_config = ConfigDict(extra="allow")

    title: str
    description: Optional[str] = None
    category: str
    deadline: Deadline
    min_price: Optional[float] = None
    max_price: Optional[float] = None
    buyer: Buyer
