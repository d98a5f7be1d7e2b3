"""
Property Calculator

Closed-form estimates used by the advanced search tools, plus the
application presets that translate an end use into search filters.

Units: stresses and modulus in MPa, thickness in mm, load in N,
density in g/cm³, temperature in °C.
"""
from typing import Optional

from plastics_catalog.schemas.material import MaterialSearchFilters
from plastics_catalog.schemas.tools import (
    Application,
    PropertyCalculatorRequest,
    PropertyCalculatorResult,
)

GRAVITY = 9.81  # m/s²
TYPICAL_POLYMER_CTE = 0.00002  # 1/°C, used when no material value is given

# Process temperature window around the melt point: [T - below, T + above]
PROCESS_WINDOW_BELOW = 20
PROCESS_WINDOW_ABOVE = 50

APPLICATION_PRESETS = {
    Application.AUTOMOTIVE: {"tensile_strength_min": 40, "heat_deflection_temp_min": 80},
    Application.MEDICAL: {"fda_approved": True},
    Application.ELECTRONICS: {"ul94_rating": "V-0"},
}


def young_modulus(tensile_strength: float, elongation_pct: float) -> float:
    """E = σ / ε, with ε given in percent"""
    if elongation_pct <= 0:
        return 0.0
    return tensile_strength / (elongation_pct / 100)


def stress_at_break(load: float, thickness: float) -> float:
    """Load over a square cross-section of side ``thickness``"""
    if thickness <= 0:
        return 0.0
    return load / (thickness * thickness)


def volumetric_stress(density: float, thickness: float) -> float:
    """ρ · g · h"""
    return density * GRAVITY * thickness


def thermal_stress(modulus: float, temperature: float, expansion: float = TYPICAL_POLYMER_CTE) -> float:
    """E · α · ΔT"""
    return modulus * expansion * temperature


def safety_factor(tensile_strength: float, *stresses: float) -> float:
    """Tensile strength over the largest applied stress, floored at 1 MPa"""
    if tensile_strength <= 0:
        return 0.0
    return tensile_strength / max((*stresses, 1.0))


def calculate_properties(request: PropertyCalculatorRequest) -> PropertyCalculatorResult:
    tensile = request.tensile_strength or 0.0
    elongation = request.elongation or 0.0
    density = request.density or 0.0
    temperature = request.temperature or 0.0
    thickness = request.thickness or 0.0
    load = request.load or 0.0

    modulus = young_modulus(tensile, elongation)
    break_stress = stress_at_break(load, thickness)
    t_stress = thermal_stress(modulus, temperature)

    return PropertyCalculatorResult(
        young_modulus=round(modulus, 2),
        stress_at_break=round(break_stress, 2),
        volumetric_stress=round(volumetric_stress(density, thickness), 2),
        thermal_stress=round(t_stress, 2),
        safety_factor=round(safety_factor(tensile, break_stress, t_stress), 2),
    )


def application_filters(
    application: Optional[Application] = None,
    process_temperature: Optional[float] = None,
) -> MaterialSearchFilters:
    """
    Search filters for an end-use application and/or processing temperature.

    A process temperature T restricts the melting temperature to
    [T - 20, T + 50].
    """
    criteria = {}
    if application is not None:
        criteria.update(APPLICATION_PRESETS[application])
    if process_temperature is not None:
        criteria["melting_temp_min"] = process_temperature - PROCESS_WINDOW_BELOW
        criteria["melting_temp_max"] = process_temperature + PROCESS_WINDOW_ABOVE
    return MaterialSearchFilters(**criteria)
