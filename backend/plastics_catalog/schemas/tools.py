"""
Technical tool schemas: property calculator and application search
"""
from enum import Enum
from typing import Optional

from pydantic import Field

from plastics_catalog.schemas.common import CamelModel, QueryModel


class PropertyCalculatorRequest(CamelModel):
    """Calculator inputs; a missing value counts as zero"""
    model_config = {"allow_inf_nan": False}

    tensile_strength: Optional[float] = Field(None, ge=0, description="MPa")
    elongation: Optional[float] = Field(None, ge=0, description="%")
    density: Optional[float] = Field(None, ge=0, description="g/cm³")
    temperature: Optional[float] = Field(None, description="°C")
    thickness: Optional[float] = Field(None, ge=0, description="mm")
    load: Optional[float] = Field(None, ge=0, description="N")


class PropertyCalculatorResult(CamelModel):
    """Calculated values, rounded to two decimals"""
    young_modulus: float = Field(..., description="MPa")
    stress_at_break: float = Field(..., description="MPa")
    volumetric_stress: float
    thermal_stress: float = Field(..., description="MPa")
    safety_factor: float


class Application(str, Enum):
    """End-use applications with preset search requirements"""
    AUTOMOTIVE = "automotive"
    MEDICAL = "medical"
    ELECTRONICS = "electronics"


class ApplicationSearchParams(QueryModel):
    application: Optional[Application] = None
    process_temperature: Optional[float] = None
