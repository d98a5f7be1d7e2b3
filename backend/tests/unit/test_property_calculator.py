"""
Unit tests for the property calculator and application presets
"""
import pytest

from plastics_catalog.schemas.tools import Application, PropertyCalculatorRequest
from plastics_catalog.services.property_calculator import (
    application_filters,
    calculate_properties,
    safety_factor,
    stress_at_break,
    thermal_stress,
    volumetric_stress,
    young_modulus,
)


class TestFormulas:

    def test_young_modulus(self):
        assert young_modulus(44, 25) == pytest.approx(176)

    def test_young_modulus_zero_elongation(self):
        assert young_modulus(44, 0) == 0.0

    def test_stress_at_break(self):
        assert stress_at_break(1000, 10) == pytest.approx(10)

    def test_stress_at_break_zero_thickness(self):
        assert stress_at_break(1000, 0) == 0.0

    def test_volumetric_stress(self):
        assert volumetric_stress(1.04, 10) == pytest.approx(102.024)

    def test_thermal_stress_default_expansion(self):
        assert thermal_stress(176, 100) == pytest.approx(0.352)

    def test_safety_factor_uses_largest_stress(self):
        assert safety_factor(44, 10, 0.352) == pytest.approx(4.4)

    def test_safety_factor_floors_stress_at_one(self):
        assert safety_factor(44, 0.2) == pytest.approx(44)
        assert safety_factor(44) == pytest.approx(44)

    def test_safety_factor_without_strength(self):
        assert safety_factor(0, 10) == 0.0


class TestCalculateProperties:

    def test_full_input(self):
        result = calculate_properties(PropertyCalculatorRequest(
            tensile_strength=44,
            elongation=25,
            density=1.04,
            temperature=100,
            thickness=10,
            load=1000,
        ))

        assert result.young_modulus == 176.0
        assert result.stress_at_break == 10.0
        assert result.volumetric_stress == 102.02
        assert result.thermal_stress == 0.35
        assert result.safety_factor == 4.4

    def test_missing_inputs_count_as_zero(self):
        result = calculate_properties(PropertyCalculatorRequest())

        assert result.young_modulus == 0.0
        assert result.stress_at_break == 0.0
        assert result.volumetric_stress == 0.0
        assert result.thermal_stress == 0.0
        assert result.safety_factor == 0.0


class TestApplicationFilters:

    def test_automotive_preset(self):
        filters = application_filters(Application.AUTOMOTIVE)
        assert filters.tensile_strength_min == 40
        assert filters.heat_deflection_temp_min == 80

    def test_medical_preset(self):
        assert application_filters(Application.MEDICAL).fda_approved is True

    def test_electronics_preset(self):
        assert application_filters(Application.ELECTRONICS).ul94_rating == "V-0"

    def test_process_temperature_window(self):
        filters = application_filters(process_temperature=230)
        assert filters.melting_temp_min == 210
        assert filters.melting_temp_max == 280

    def test_application_and_temperature_combine(self):
        filters = application_filters(Application.MEDICAL, 200)
        assert filters.fda_approved is True
        assert filters.melting_temp_min == 180
        assert filters.melting_temp_max == 250

    def test_nothing_selected_is_unfiltered(self):
        filters = application_filters()
        assert filters.model_dump(exclude_none=True) == {}
