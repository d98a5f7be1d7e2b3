"""
Vendor Service

Vendors and the per-material pricing links that tie them to the catalog.
Vendors have no delete path.
"""
from typing import List

from sqlalchemy.orm import Session, contains_eager

from plastics_catalog.exceptions import VendorNotFoundError
from plastics_catalog.logging_config import get_logger
from plastics_catalog.models import MaterialVendor, Vendor
from plastics_catalog.schemas.vendor import MaterialVendorCreate, VendorCreate
from plastics_catalog.services.material_service import get_material

logger = get_logger(__name__)


def list_vendors(db: Session) -> List[Vendor]:
    """All vendors ordered by name"""
    return db.query(Vendor).order_by(Vendor.name, Vendor.id).all()


def get_vendor(db: Session, vendor_id: int) -> Vendor:
    """
    Get a vendor by id

    Raises:
        VendorNotFoundError: If no vendor has this id
    """
    vendor = db.query(Vendor).filter(Vendor.id == vendor_id).first()
    if not vendor:
        raise VendorNotFoundError(vendor_id)
    return vendor


def create_vendor(db: Session, data: VendorCreate) -> Vendor:
    """Insert a vendor"""
    vendor = Vendor(**data.model_dump())
    db.add(vendor)
    db.commit()
    db.refresh(vendor)

    logger.info("Vendor created", extra={"vendor_id": vendor.id})
    return vendor


def get_material_vendors(db: Session, material_id: int) -> List[MaterialVendor]:
    """
    Pricing links for a material, each with its vendor loaded.

    Inner join: links whose vendor row is missing are not returned. A
    material without listings (or an unknown material id) gives [].
    """
    return (
        db.query(MaterialVendor)
        .join(Vendor, MaterialVendor.vendor_id == Vendor.id)
        .options(contains_eager(MaterialVendor.vendor))
        .filter(MaterialVendor.material_id == material_id)
        .order_by(MaterialVendor.price.is_(None), MaterialVendor.price, MaterialVendor.id)
        .all()
    )


def create_material_vendor(
    db: Session,
    material_id: int,
    data: MaterialVendorCreate,
) -> MaterialVendor:
    """
    Create a pricing link between an existing material and vendor.

    Raises:
        MaterialNotFoundError: If the material does not exist
        VendorNotFoundError: If the vendor does not exist
    """
    get_material(db, material_id)
    get_vendor(db, data.vendor_id)

    link = MaterialVendor(material_id=material_id, **data.model_dump())
    db.add(link)
    db.commit()
    db.refresh(link)

    logger.info(
        "Material vendor link created",
        extra={"material_id": material_id, "vendor_id": data.vendor_id, "link_id": link.id},
    )
    return link
