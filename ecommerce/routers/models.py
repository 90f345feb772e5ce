"""
API Pydantic Models

Request bodies shared by the routers.
"""
from pydantic import BaseModel, Field


# ==================== CART MODELS ====================

class ModifyCartRequest(BaseModel):
    username: str
    item_id: int = Field(alias="itemId")
    quantity: int

    class Config:
        populate_by_name = True  # accept item_id as well as itemId
