"""
Material API Endpoints

Search, detail, comparison and admin CRUD for catalog materials, plus the
per-material vendor listings and reviews.
"""
from typing import List, Optional

from fastapi import APIRouter, Depends, Query, Request, Response, status
from sqlalchemy.orm import Session

from plastics_catalog.api.v1.endpoints.auth import get_current_user
from plastics_catalog.core.config import settings
from plastics_catalog.db.session import get_db
from plastics_catalog.logging_config import audit_log, get_client_ip
from plastics_catalog.models import User
from plastics_catalog.schemas.common import parse_query
from plastics_catalog.schemas.material import (
    MaterialCreate,
    MaterialResponse,
    MaterialSearchFilters,
    MaterialUpdate,
)
from plastics_catalog.schemas.review import ReviewCreate, ReviewResponse
from plastics_catalog.schemas.vendor import (
    MaterialVendorCreate,
    MaterialVendorResponse,
    MaterialVendorWithVendor,
)
from plastics_catalog.services import material_service, review_service, vendor_service
from plastics_catalog.services.material_search import search_materials

router = APIRouter()


def get_search_filters(
    material_type: Optional[str] = Query(None, alias="materialType"),
    manufacturer: Optional[str] = None,
    color: Optional[str] = None,
    ul94_rating: Optional[str] = Query(None, alias="ul94Rating"),
    melting_temp_min: Optional[str] = Query(None, alias="meltingTempMin"),
    melting_temp_max: Optional[str] = Query(None, alias="meltingTempMax"),
    tensile_strength_min: Optional[str] = Query(None, alias="tensileStrengthMin"),
    tensile_strength_max: Optional[str] = Query(None, alias="tensileStrengthMax"),
    mfr_min: Optional[str] = Query(None, alias="mfrMin"),
    mfr_max: Optional[str] = Query(None, alias="mfrMax"),
    density_min: Optional[str] = Query(None, alias="densityMin"),
    density_max: Optional[str] = Query(None, alias="densityMax"),
    impact_strength_min: Optional[str] = Query(None, alias="impactStrengthMin"),
    impact_strength_max: Optional[str] = Query(None, alias="impactStrengthMax"),
    heat_deflection_temp_min: Optional[str] = Query(None, alias="heatDeflectionTempMin"),
    heat_deflection_temp_max: Optional[str] = Query(None, alias="heatDeflectionTempMax"),
    fda_approved: Optional[str] = Query(None, alias="fdaApproved"),
    search: Optional[str] = None,
) -> MaterialSearchFilters:
    """
    Collect the material search query parameters.

    Values arrive as raw strings so that blanks can be dropped before
    numbers and flags are parsed; anything left that does not parse is a 400.
    """
    return parse_query(MaterialSearchFilters, {
        "materialType": material_type,
        "manufacturer": manufacturer,
        "color": color,
        "ul94Rating": ul94_rating,
        "meltingTempMin": melting_temp_min,
        "meltingTempMax": melting_temp_max,
        "tensileStrengthMin": tensile_strength_min,
        "tensileStrengthMax": tensile_strength_max,
        "mfrMin": mfr_min,
        "mfrMax": mfr_max,
        "densityMin": density_min,
        "densityMax": density_max,
        "impactStrengthMin": impact_strength_min,
        "impactStrengthMax": impact_strength_max,
        "heatDeflectionTempMin": heat_deflection_temp_min,
        "heatDeflectionTempMax": heat_deflection_temp_max,
        "fdaApproved": fda_approved,
        "search": search,
    })


# ============================================================================
# SEARCH & FACETS
# ============================================================================

@router.get("", response_model=List[MaterialResponse])
def list_materials(
    response: Response,
    filters: MaterialSearchFilters = Depends(get_search_filters),
    limit: int = Query(settings.DEFAULT_PAGE_SIZE, ge=1, le=settings.MAX_PAGE_SIZE),
    offset: int = Query(0, ge=0),
    db: Session = Depends(get_db),
):
    """
    Search materials.

    All criteria are optional and AND-combined. Ranges are inclusive; a
    material with no value for a bounded property is excluded. Newest
    first. The total match count is returned in the X-Total-Count header.
    """
    materials, total = search_materials(db, filters, limit=limit, offset=offset)
    response.headers["X-Total-Count"] = str(total)
    return materials


@router.get("/manufacturers", response_model=List[str])
def list_manufacturers(db: Session = Depends(get_db)):
    """Distinct manufacturers in the catalog (for the filter dropdown)"""
    return material_service.list_manufacturers(db)


@router.get("/types", response_model=List[str])
def list_material_types(db: Session = Depends(get_db)):
    """Distinct material type codes in the catalog (for the filter dropdown)"""
    return material_service.list_material_types(db)


@router.get("/compare", response_model=List[MaterialResponse])
def compare_materials(
    ids: List[int] = Query(..., description="Material ids, repeated: ?ids=1&ids=2"),
    db: Session = Depends(get_db),
):
    """Materials for a side-by-side comparison, in the order requested"""
    return material_service.get_materials_for_comparison(db, ids, settings.MAX_COMPARE_ITEMS)


# ============================================================================
# MATERIAL CRUD
# ============================================================================

@router.get("/{material_id}", response_model=MaterialResponse)
def get_material(material_id: int, db: Session = Depends(get_db)):
    """Get a material by id"""
    return material_service.get_material(db, material_id)


@router.post("", response_model=MaterialResponse, status_code=status.HTTP_201_CREATED)
def create_material(
    data: MaterialCreate,
    request: Request,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    """Add a material to the catalog"""
    material = material_service.create_material(db, data)
    audit_log(
        "MATERIAL_CREATED",
        user_id=current_user.id,
        resource_type="material",
        resource_id=material.id,
        details={"name": material.name, "material_type": material.material_type},
        ip_address=get_client_ip(request),
    )
    return material


@router.put("/{material_id}", response_model=MaterialResponse)
def update_material(
    material_id: int,
    data: MaterialUpdate,
    request: Request,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    """Partially update a material; omitted fields keep their stored values"""
    material = material_service.update_material(db, material_id, data)
    audit_log(
        "MATERIAL_UPDATED",
        user_id=current_user.id,
        resource_type="material",
        resource_id=material_id,
        details={"fields": sorted(data.model_dump(exclude_unset=True))},
        ip_address=get_client_ip(request),
    )
    return material


@router.delete("/{material_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_material(
    material_id: int,
    request: Request,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    """Delete a material along with its vendor listings, favorites and reviews"""
    material_service.delete_material(db, material_id)
    audit_log(
        "MATERIAL_DELETED",
        user_id=current_user.id,
        resource_type="material",
        resource_id=material_id,
        ip_address=get_client_ip(request),
    )
    return Response(status_code=status.HTTP_204_NO_CONTENT)


# ============================================================================
# VENDOR LISTINGS
# ============================================================================

@router.get("/{material_id}/vendors", response_model=List[MaterialVendorWithVendor])
def list_material_vendors(material_id: int, db: Session = Depends(get_db)):
    """Vendors selling this material, with their pricing"""
    return vendor_service.get_material_vendors(db, material_id)


@router.post(
    "/{material_id}/vendors",
    response_model=MaterialVendorResponse,
    status_code=status.HTTP_201_CREATED,
)
def create_material_vendor(
    material_id: int,
    data: MaterialVendorCreate,
    request: Request,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    """List a material at a vendor with price, minimum order and availability"""
    link = vendor_service.create_material_vendor(db, material_id, data)
    audit_log(
        "MATERIAL_VENDOR_CREATED",
        user_id=current_user.id,
        resource_type="material_vendor",
        resource_id=link.id,
        details={"material_id": material_id, "vendor_id": data.vendor_id, "price": data.price},
        ip_address=get_client_ip(request),
    )
    return link


# ============================================================================
# REVIEWS
# ============================================================================

@router.get("/{material_id}/reviews", response_model=List[ReviewResponse])
def list_material_reviews(material_id: int, db: Session = Depends(get_db)):
    """Reviews of a material, newest first"""
    return review_service.list_reviews(db, material_id)


@router.post(
    "/{material_id}/reviews",
    response_model=ReviewResponse,
    status_code=status.HTTP_201_CREATED,
)
def create_material_review(
    material_id: int,
    data: ReviewCreate,
    request: Request,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    """Review a material"""
    review = review_service.create_review(db, current_user.id, material_id, data)
    audit_log(
        "REVIEW_CREATED",
        user_id=current_user.id,
        resource_type="review",
        resource_id=review.id,
        details={"material_id": material_id, "rating": review.rating},
        ip_address=get_client_ip(request),
    )
    return review
