"""
Material Pydantic Schemas

Create/update payloads, the full material record returned by the API, and
the search filter set accepted by the materials listing.

Datasheet numbers carry the precision of their NUMERIC columns, so a value
the database would round or overflow is a 400 here instead.
"""
from datetime import datetime
from typing import Optional

from pydantic import Field, field_validator

from plastics_catalog.schemas.common import CamelModel, JSONDecimal, QueryModel


# ============================================================================
# Material payloads
# ============================================================================

class MaterialProperties(CamelModel):
    """Optional datasheet fields shared by create, update and response"""
    description: Optional[str] = None
    image_url: Optional[str] = Field(None, max_length=500)

    # Mechanical, NUMERIC(8, 2)
    tensile_strength: Optional[JSONDecimal] = Field(None, ge=0, max_digits=8, decimal_places=2, description="MPa")
    flexural_strength: Optional[JSONDecimal] = Field(None, ge=0, max_digits=8, decimal_places=2, description="MPa")
    impact_strength: Optional[JSONDecimal] = Field(None, ge=0, max_digits=8, decimal_places=2, description="kJ/m²")
    elongation_at_break: Optional[JSONDecimal] = Field(None, ge=0, max_digits=8, decimal_places=2, description="%")

    # Thermal
    melting_temperature: Optional[JSONDecimal] = Field(None, max_digits=8, decimal_places=2, description="°C")
    heat_deflection_temp: Optional[JSONDecimal] = Field(None, max_digits=8, decimal_places=2, description="°C")
    vicat_softening_point: Optional[JSONDecimal] = Field(None, max_digits=8, decimal_places=2, description="°C")
    thermal_expansion: Optional[JSONDecimal] = Field(None, max_digits=12, decimal_places=8, description="1/°C")

    # Physical
    density: Optional[JSONDecimal] = Field(None, gt=0, max_digits=8, decimal_places=3, description="g/cm³")
    mfr: Optional[JSONDecimal] = Field(None, ge=0, max_digits=8, decimal_places=2, description="g/10 min")
    water_absorption: Optional[JSONDecimal] = Field(None, ge=0, le=100, max_digits=8, decimal_places=2, description="%")
    shore_hardness: Optional[int] = Field(None, ge=0, le=100)

    # Appearance
    color: Optional[str] = Field(None, max_length=100)
    transparency: Optional[str] = Field(None, max_length=50, description="transparent, translucent, opaque")

    # Certifications
    ul94_rating: Optional[str] = Field(None, max_length=10, description="V-0, V-1, V-2, HB")

    # Documentation
    technical_data_sheet_url: Optional[str] = Field(None, max_length=500)
    safety_data_sheet_url: Optional[str] = Field(None, max_length=500)
    processing_guidelines_url: Optional[str] = Field(None, max_length=500)


class MaterialCreate(MaterialProperties):
    """Create a new material; name, manufacturer and type are required"""
    name: str = Field(..., min_length=1, max_length=255)
    manufacturer: str = Field(..., min_length=1, max_length=255)
    material_type: str = Field(..., min_length=1, max_length=50, description="ABS, PLA, PETG, PC, ...")

    fda_approved: bool = False
    rohs_compliant: bool = False
    reach_compliant: bool = False

    @field_validator("name", "manufacturer", "material_type")
    @classmethod
    def not_blank(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("must not be blank")
        return v


class MaterialUpdate(MaterialProperties):
    """
    Partial update: only fields present in the payload are written.

    Required identity fields and certification flags may be omitted but not
    set to null.
    """
    name: Optional[str] = Field(None, min_length=1, max_length=255)
    manufacturer: Optional[str] = Field(None, min_length=1, max_length=255)
    material_type: Optional[str] = Field(None, min_length=1, max_length=50)

    fda_approved: Optional[bool] = None
    rohs_compliant: Optional[bool] = None
    reach_compliant: Optional[bool] = None

    @field_validator(
        "name", "manufacturer", "material_type",
        "fda_approved", "rohs_compliant", "reach_compliant",
    )
    @classmethod
    def not_null(cls, v):
        if v is None:
            raise ValueError("may be omitted but not null")
        if isinstance(v, str):
            v = v.strip()
            if not v:
                raise ValueError("must not be blank")
        return v


class MaterialResponse(MaterialProperties):
    """Full material record"""
    id: int
    name: str
    manufacturer: str
    material_type: str

    fda_approved: bool
    rohs_compliant: bool
    reach_compliant: bool

    created_at: datetime
    updated_at: datetime


# ============================================================================
# Search
# ============================================================================

class MaterialSearchFilters(QueryModel):
    """
    Optional, AND-combined criteria for the materials listing.

    Range bounds are inclusive and independently optional. ``fda_approved``
    only narrows the result when true.
    """
    material_type: Optional[str] = None
    manufacturer: Optional[str] = None
    color: Optional[str] = None
    ul94_rating: Optional[str] = None

    melting_temp_min: Optional[float] = None
    melting_temp_max: Optional[float] = None
    tensile_strength_min: Optional[float] = None
    tensile_strength_max: Optional[float] = None
    mfr_min: Optional[float] = None
    mfr_max: Optional[float] = None
    density_min: Optional[float] = None
    density_max: Optional[float] = None
    impact_strength_min: Optional[float] = None
    impact_strength_max: Optional[float] = None
    heat_deflection_temp_min: Optional[float] = None
    heat_deflection_temp_max: Optional[float] = None

    fda_approved: Optional[bool] = None
    search: Optional[str] = None
