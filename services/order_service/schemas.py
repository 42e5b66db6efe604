from datetime import datetime
from typing import Optional
from pydantic import BaseModel, Field

class OrderCreate(BaseModel):
    user_id: int
    product_id: int
    quantity: int = Field(gt=0)
    unit_price: float = Field(ge=0) # total_price is derived from this at creation
    status: Optional[str] = None # storage default applies when omitted

class OrderStatusUpdate(BaseModel):
    status: str

class OrderResponse(BaseModel):
    id: int
    user_id: int
    product_id: int
    quantity: int
    total_price: float
    status: str
    created_at: Optional[datetime] = None

    class Config:
        from_attributes = True

class UserRecord(BaseModel):
    """Read-only projection of a user returned by the user service."""
    id: Optional[int] = None # only presence of the record matters

    class Config:
        extra = "allow"
