"""
Material Search Service

Turns a MaterialSearchFilters object into one SQLAlchemy query.

Every supported criterion is declared once in MATERIAL_FILTERS as
(filter field -> material column -> comparator). build_material_query walks
that table; there is no other place where search conditions are assembled.
"""
from dataclasses import dataclass
from enum import Enum
from typing import Any, List, Optional, Tuple

from sqlalchemy import desc
from sqlalchemy.orm import Query, Session
from sqlalchemy.sql.elements import ColumnElement

from plastics_catalog.exceptions import InvalidFilterError
from plastics_catalog.logging_config import get_logger
from plastics_catalog.models import Material
from plastics_catalog.schemas.material import MaterialSearchFilters

logger = get_logger(__name__)


class Comparator(str, Enum):
    """How a filter value is compared against its column"""
    EQ = "eq"
    GTE = "gte"
    LTE = "lte"
    CONTAINS = "contains"  # case-insensitive substring
    IS_TRUE = "is_true"  # applied only when the filter value is True


@dataclass(frozen=True)
class FilterSpec:
    field: str
    column: Any
    comparator: Comparator

    def condition(self, value: Any) -> Optional[ColumnElement]:
        """SQL condition for ``value``, or None when the value imposes no constraint"""
        if value is None:
            return None
        if self.comparator is Comparator.EQ:
            return self.column == value
        if self.comparator is Comparator.GTE:
            return self.column >= value
        if self.comparator is Comparator.LTE:
            return self.column <= value
        if self.comparator is Comparator.CONTAINS:
            return self.column.ilike(f"%{_escape_like(value)}%", escape="\\")
        if self.comparator is Comparator.IS_TRUE:
            return (self.column == True) if value else None
        raise ValueError(f"Unsupported comparator: {self.comparator}")


def _escape_like(value: str) -> str:
    return value.replace("\\", "\\\\").replace("%", "\\%").replace("_", "\\_")


MATERIAL_FILTERS: Tuple[FilterSpec, ...] = (
    # Exact match
    FilterSpec("material_type", Material.material_type, Comparator.EQ),
    FilterSpec("manufacturer", Material.manufacturer, Comparator.EQ),
    FilterSpec("color", Material.color, Comparator.EQ),
    FilterSpec("ul94_rating", Material.ul94_rating, Comparator.EQ),
    # Inclusive ranges; SQL NULL never satisfies a comparison
    FilterSpec("melting_temp_min", Material.melting_temperature, Comparator.GTE),
    FilterSpec("melting_temp_max", Material.melting_temperature, Comparator.LTE),
    FilterSpec("tensile_strength_min", Material.tensile_strength, Comparator.GTE),
    FilterSpec("tensile_strength_max", Material.tensile_strength, Comparator.LTE),
    FilterSpec("mfr_min", Material.mfr, Comparator.GTE),
    FilterSpec("mfr_max", Material.mfr, Comparator.LTE),
    FilterSpec("density_min", Material.density, Comparator.GTE),
    FilterSpec("density_max", Material.density, Comparator.LTE),
    FilterSpec("impact_strength_min", Material.impact_strength, Comparator.GTE),
    FilterSpec("impact_strength_max", Material.impact_strength, Comparator.LTE),
    FilterSpec("heat_deflection_temp_min", Material.heat_deflection_temp, Comparator.GTE),
    FilterSpec("heat_deflection_temp_max", Material.heat_deflection_temp, Comparator.LTE),
    # Flags
    FilterSpec("fda_approved", Material.fda_approved, Comparator.IS_TRUE),
    # Free text
    FilterSpec("search", Material.name, Comparator.CONTAINS),
)

# (min field, max field) pairs checked for inverted bounds
RANGE_PAIRS: Tuple[Tuple[str, str], ...] = (
    ("melting_temp_min", "melting_temp_max"),
    ("tensile_strength_min", "tensile_strength_max"),
    ("mfr_min", "mfr_max"),
    ("density_min", "density_max"),
    ("impact_strength_min", "impact_strength_max"),
    ("heat_deflection_temp_min", "heat_deflection_temp_max"),
)


def validate_filters(filters: MaterialSearchFilters) -> None:
    """
    Reject range filters whose lower bound exceeds the upper bound.

    Raises:
        InvalidFilterError: naming the offending minimum field
    """
    for min_field, max_field in RANGE_PAIRS:
        low = getattr(filters, min_field)
        high = getattr(filters, max_field)
        if low is not None and high is not None and low > high:
            raise InvalidFilterError(
                min_field,
                f"{min_field} ({low}) is greater than {max_field} ({high})",
            )


def filter_conditions(filters: MaterialSearchFilters) -> List[ColumnElement]:
    """SQL conditions for every criterion that is set"""
    conditions = []
    for spec in MATERIAL_FILTERS:
        condition = spec.condition(getattr(filters, spec.field))
        if condition is not None:
            conditions.append(condition)
    return conditions


def build_material_query(db: Session, filters: Optional[MaterialSearchFilters] = None) -> Query:
    """
    Build the filtered, unpaginated material query.

    Args:
        db: Database session
        filters: Search criteria; None means no constraint

    Returns:
        Query over Material with all set criteria AND-combined
    """
    query = db.query(Material)
    if filters is None:
        return query

    validate_filters(filters)
    conditions = filter_conditions(filters)
    if conditions:
        query = query.filter(*conditions)
    return query


def search_materials(
    db: Session,
    filters: Optional[MaterialSearchFilters] = None,
    limit: int = 50,
    offset: int = 0,
) -> Tuple[List[Material], int]:
    """
    Run a material search.

    Results are ordered newest first, with id as tie-breaker so that pages
    never overlap or skip rows.

    Args:
        db: Database session
        filters: Search criteria
        limit: Page size
        offset: Rows to skip

    Returns:
        (materials on this page, total number of matches)
    """
    query = build_material_query(db, filters)

    total = query.count()
    materials = (
        query.order_by(desc(Material.created_at), desc(Material.id))
        .offset(offset)
        .limit(limit)
        .all()
    )

    logger.debug(
        "Material search",
        extra={"total": total, "returned": len(materials), "limit": limit, "offset": offset},
    )
    return materials, total
