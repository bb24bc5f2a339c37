# ========================================
# nexthire/schemas/bid.py
# ========================================

from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from nexthire.schemas.fields import Deadline, EmailAddress
from nexthire.schemas.job import Buyer


class BidStatus(str, Enum):
    PENDING = "Pending"
    IN_PROGRESS = "In Progress"
    COMPLETED = "Completed"
    REJECTED = "Rejected"


# 1. Input: Place a bid
class BidCreate(BaseModel):
    model_config = ConfigDict(extra="allow", use_enum_values=True)

    email: EmailAddress
    jobId: str
    buyer: Buyer
    status: BidStatus = Field(default=BidStatus.PENDING, validate_default=True)
    price: Optional[float] = None
    comment: Optional[str] = None
    deadline: Optional[Deadline] = None
    title: Optional[str] = None
    category: Optional[str] = None


# 2. Input: Update status (buyer accepts/rejects, bidder completes)
class BidStatusUpdate(BaseModel):
    model_config = ConfigDict(use_enum_values=True)

    status: BidStatus
