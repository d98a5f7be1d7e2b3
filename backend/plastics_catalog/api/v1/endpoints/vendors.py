"""
Vendor API Endpoints
"""
from typing import List

from fastapi import APIRouter, Depends, Request, status
from sqlalchemy.orm import Session

from plastics_catalog.api.v1.endpoints.auth import get_current_user
from plastics_catalog.db.session import get_db
from plastics_catalog.logging_config import audit_log, get_client_ip
from plastics_catalog.models import User
from plastics_catalog.schemas.vendor import VendorCreate, VendorResponse
from plastics_catalog.services import vendor_service

router = APIRouter()


@router.get("", response_model=List[VendorResponse])
def list_vendors(db: Session = Depends(get_db)):
    """List all vendors"""
    return vendor_service.list_vendors(db)


@router.get("/{vendor_id}", response_model=VendorResponse)
def get_vendor(vendor_id: int, db: Session = Depends(get_db)):
    """Get a vendor by id"""
    return vendor_service.get_vendor(db, vendor_id)


@router.post("", response_model=VendorResponse, status_code=status.HTTP_201_CREATED)
def create_vendor(
    data: VendorCreate,
    request: Request,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    """Create a vendor"""
    vendor = vendor_service.create_vendor(db, data)
    audit_log(
        "VENDOR_CREATED",
        user_id=current_user.id,
        resource_type="vendor",
        resource_id=vendor.id,
        details={"name": vendor.name},
        ip_address=get_client_ip(request),
    )
    return vendor
