"""
User and identity schemas
"""
from datetime import datetime
from typing import Optional

from pydantic import BaseModel

from plastics_catalog.schemas.common import CamelModel


class Identity(BaseModel):
    """Verified claims of the current session, resolved once per request"""
    user_id: str
    email: Optional[str] = None
    first_name: Optional[str] = None
    last_name: Optional[str] = None
    profile_image_url: Optional[str] = None


class UserResponse(CamelModel):
    id: str
    email: Optional[str] = None
    first_name: Optional[str] = None
    last_name: Optional[str] = None
    profile_image_url: Optional[str] = None
    created_at: datetime
    updated_at: datetime
