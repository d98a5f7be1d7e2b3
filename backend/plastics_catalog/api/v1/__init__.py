"""
API v1 Router - Plastics Catalog
"""
from fastapi import APIRouter
from plastics_catalog.api.v1.endpoints import (
    auth,
    materials,
    vendors,
    favorites,
    reviews,
    tools,
)

router = APIRouter()

# Authentication
router.include_router(
    auth.router,
    prefix="/auth",
    tags=["auth"]
)

# Materials (search, CRUD, vendor listings, reviews)
router.include_router(
    materials.router,
    prefix="/materials",
    tags=["materials"]
)

# Vendors
router.include_router(
    vendors.router,
    prefix="/vendors",
    tags=["vendors"]
)

# Favorites
router.include_router(
    favorites.router,
    prefix="/favorites",
    tags=["favorites"]
)

# Reviews
router.include_router(
    reviews.router,
    prefix="/reviews",
    tags=["reviews"]
)

# Technical tools
router.include_router(
    tools.router,
    prefix="/tools",
    tags=["tools"]
)
