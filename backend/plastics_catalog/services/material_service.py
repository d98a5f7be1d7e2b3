"""
Material Service

Lookup, create, partial update and delete of catalog materials, plus the
facet lists (manufacturers, material types) and the side-by-side comparison
set used by the catalog UI.
"""
from datetime import datetime
from typing import List, Sequence

from sqlalchemy.orm import Session

from plastics_catalog.exceptions import MaterialNotFoundError, ValidationError
from plastics_catalog.logging_config import get_logger
from plastics_catalog.models import Material
from plastics_catalog.schemas.material import MaterialCreate, MaterialUpdate

logger = get_logger(__name__)


def get_material(db: Session, material_id: int) -> Material:
    """
    Get a material by id

    Raises:
        MaterialNotFoundError: If no material has this id
    """
    material = db.query(Material).filter(Material.id == material_id).first()
    if not material:
        raise MaterialNotFoundError(material_id)
    return material


def create_material(db: Session, data: MaterialCreate) -> Material:
    """
    Insert a validated material record.

    Args:
        db: Database session
        data: Validated create payload

    Returns:
        The stored Material with id and timestamps assigned
    """
    material = Material(**data.model_dump())
    db.add(material)
    db.commit()
    db.refresh(material)

    logger.info(
        "Material created",
        extra={"material_id": material.id, "material_type": material.material_type},
    )
    return material


def update_material(db: Session, material_id: int, data: MaterialUpdate) -> Material:
    """
    Apply a partial update.

    Only fields present in the payload are written; updated_at is refreshed
    even when the payload is empty.

    Raises:
        MaterialNotFoundError: If no material has this id
    """
    material = get_material(db, material_id)

    changes = data.model_dump(exclude_unset=True)
    for field, value in changes.items():
        setattr(material, field, value)
    material.updated_at = datetime.utcnow()

    db.commit()
    db.refresh(material)

    logger.info(
        "Material updated",
        extra={"material_id": material.id, "fields": sorted(changes)},
    )
    return material


def delete_material(db: Session, material_id: int) -> None:
    """
    Delete a material together with its vendor listings, favorites and reviews.

    Raises:
        MaterialNotFoundError: If no material has this id
    """
    material = get_material(db, material_id)
    db.delete(material)
    db.commit()

    logger.info("Material deleted", extra={"material_id": material_id})


def list_manufacturers(db: Session) -> List[str]:
    """Distinct manufacturer names, alphabetical"""
    rows = (
        db.query(Material.manufacturer)
        .distinct()
        .order_by(Material.manufacturer)
        .all()
    )
    return [row[0] for row in rows]


def list_material_types(db: Session) -> List[str]:
    """Distinct material type codes, alphabetical"""
    rows = (
        db.query(Material.material_type)
        .distinct()
        .order_by(Material.material_type)
        .all()
    )
    return [row[0] for row in rows]


def get_materials_for_comparison(
    db: Session,
    material_ids: Sequence[int],
    max_items: int,
) -> List[Material]:
    """
    Load materials for a side-by-side comparison, in the requested order.

    Repeated ids are collapsed to their first occurrence.

    Raises:
        ValidationError: If no ids, or more than max_items distinct ids, are given
        MaterialNotFoundError: For the first id that does not exist
    """
    ordered_ids = list(dict.fromkeys(material_ids))
    if not ordered_ids:
        raise ValidationError(
            "At least one material id is required",
            errors=[{"field": "ids", "message": "must not be empty", "type": "missing"}],
        )
    if len(ordered_ids) > max_items:
        raise ValidationError(
            f"At most {max_items} materials can be compared",
            errors=[{"field": "ids", "message": f"more than {max_items} ids", "type": "too_long"}],
        )

    found = {
        m.id: m
        for m in db.query(Material).filter(Material.id.in_(ordered_ids)).all()
    }
    for material_id in ordered_ids:
        if material_id not in found:
            raise MaterialNotFoundError(material_id)

    return [found[material_id] for material_id in ordered_ids]
