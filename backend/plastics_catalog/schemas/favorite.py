"""
Favorite schemas
"""
from datetime import datetime

from pydantic import Field

from plastics_catalog.schemas.common import CamelModel
from plastics_catalog.schemas.material import MaterialResponse


class FavoriteCreate(CamelModel):
    """Body of POST /favorites; the user comes from the session"""
    material_id: int = Field(..., ge=1)


class FavoriteResponse(CamelModel):
    id: int
    user_id: str
    material_id: int
    created_at: datetime


class FavoriteWithMaterial(FavoriteResponse):
    """Favorite with the bookmarked material embedded"""
    material: MaterialResponse


class FavoriteCheckResponse(CamelModel):
    is_favorite: bool
