"""
Review schemas
"""
from datetime import datetime
from typing import Optional

from pydantic import Field

from plastics_catalog.schemas.common import CamelModel


class ReviewCreate(CamelModel):
    """Create a review for the material in the URL path"""
    rating: int = Field(..., ge=1, le=5, description="1-5 stars")
    title: Optional[str] = Field(None, max_length=255)
    body: Optional[str] = Field(None, max_length=5000)
    application: Optional[str] = Field(None, max_length=255)
    processing_method: Optional[str] = Field(None, max_length=100)


class ReviewResponse(CamelModel):
    id: int
    user_id: str
    material_id: int
    rating: int
    title: Optional[str] = None
    body: Optional[str] = None
    application: Optional[str] = None
    processing_method: Optional[str] = None
    verified_purchase: bool
    helpful_count: int
    created_at: datetime
    updated_at: datetime
