"""
Unit tests for request schemas: required fields, partial updates and wire format
"""
from decimal import Decimal

import pytest
from pydantic import ValidationError

from plastics_catalog.exceptions import ValidationError as CatalogValidationError
from plastics_catalog.schemas.common import parse_query
from plastics_catalog.schemas.material import MaterialCreate, MaterialSearchFilters, MaterialUpdate
from plastics_catalog.schemas.vendor import MaterialVendorCreate


class TestMaterialCreate:

    def test_accepts_camel_case(self):
        data = MaterialCreate.model_validate({
            "name": "Cycolac ABS MG47",
            "manufacturer": "SABIC",
            "materialType": "ABS",
            "tensileStrength": 44,
        })
        assert data.material_type == "ABS"
        assert data.tensile_strength == 44
        assert data.fda_approved is False

    @pytest.mark.parametrize("missing", ["name", "manufacturer", "materialType"])
    def test_required_fields(self, missing):
        payload = {"name": "X", "manufacturer": "Y", "materialType": "ABS"}
        del payload[missing]
        with pytest.raises(ValidationError):
            MaterialCreate.model_validate(payload)

    def test_blank_name_rejected(self):
        with pytest.raises(ValidationError):
            MaterialCreate(name="   ", manufacturer="Y", material_type="ABS")

    def test_negative_strength_rejected(self):
        with pytest.raises(ValidationError):
            MaterialCreate(name="X", manufacturer="Y", material_type="ABS", tensile_strength=-1)

    def test_zero_density_rejected(self):
        with pytest.raises(ValidationError):
            MaterialCreate(name="X", manufacturer="Y", material_type="ABS", density=0)

    def test_serializes_camel_case(self):
        data = MaterialCreate(name="X", manufacturer="Y", material_type="ABS")
        dumped = data.model_dump(by_alias=True)
        assert "materialType" in dumped
        assert "fdaApproved" in dumped


class TestMaterialUpdate:

    def test_only_sent_fields_are_set(self):
        data = MaterialUpdate.model_validate({"tensileStrength": 50})
        assert data.model_dump(exclude_unset=True) == {"tensile_strength": 50}

    def test_optional_property_may_be_cleared(self):
        data = MaterialUpdate.model_validate({"color": None})
        assert data.model_dump(exclude_unset=True) == {"color": None}

    @pytest.mark.parametrize("field", ["name", "materialType", "fdaApproved"])
    def test_required_fields_not_nullable(self, field):
        with pytest.raises(ValidationError):
            MaterialUpdate.model_validate({field: None})


class TestMaterialVendorCreate:

    def test_defaults(self):
        data = MaterialVendorCreate(vendor_id=1)
        assert data.currency == "USD"
        assert data.availability == "in_stock"

    def test_currency_uppercased(self):
        assert MaterialVendorCreate(vendor_id=1, currency="eur").currency == "EUR"

    def test_currency_must_be_letters(self):
        with pytest.raises(ValidationError):
            MaterialVendorCreate(vendor_id=1, currency="12$")

    def test_negative_price_rejected(self):
        with pytest.raises(ValidationError):
            MaterialVendorCreate(vendor_id=1, price=-0.5)

    def test_price_precision(self):
        assert MaterialVendorCreate(vendor_id=1, price="3.20").price == Decimal("3.20")
        with pytest.raises(ValidationError):
            MaterialVendorCreate(vendor_id=1, price="3.205")


class TestDatasheetPrecision:

    def test_values_kept_exactly(self):
        data = MaterialCreate.model_validate({
            "name": "X", "manufacturer": "Y", "materialType": "ABS",
            "density": 1.046, "thermalExpansion": 0.00007,
        })
        assert data.density == Decimal("1.046")
        assert data.thermal_expansion == Decimal("0.00007")

    def test_serialized_as_json_numbers(self):
        data = MaterialCreate(name="X", manufacturer="Y", material_type="ABS", density="1.040")
        assert data.model_dump(mode="json", by_alias=True)["density"] == 1.04

    @pytest.mark.parametrize("field,value", [
        ("tensile_strength", "12.345"),
        ("tensile_strength", "123456789"),
        ("density", "1.0455"),
        ("thermal_expansion", "0.000000001"),
    ])
    def test_rejects_what_the_column_cannot_hold(self, field, value):
        with pytest.raises(ValidationError):
            MaterialCreate(name="X", manufacturer="Y", material_type="ABS", **{field: value})


class TestMaterialSearchFilters:

    def test_blank_values_dropped(self):
        filters = MaterialSearchFilters.model_validate({"densityMin": "", "fdaApproved": " ", "color": ""})
        assert filters.density_min is None
        assert filters.fda_approved is None
        assert filters.color is None

    def test_strings_parsed(self):
        filters = MaterialSearchFilters.model_validate({"densityMin": "1.2", "fdaApproved": "true"})
        assert filters.density_min == 1.2
        assert filters.fda_approved is True

    @pytest.mark.parametrize("value", ["nan", "inf", float("nan")])
    def test_non_finite_rejected(self, value):
        with pytest.raises(ValidationError):
            MaterialSearchFilters.model_validate({"densityMin": value})

    def test_parse_query_raises_catalog_error(self):
        with pytest.raises(CatalogValidationError) as exc_info:
            parse_query(MaterialSearchFilters, {"meltingTempMin": "hot", "densityMax": None})
        errors = exc_info.value.details["errors"]
        assert [e["field"] for e in errors] == ["meltingTempMin"]
        assert exc_info.value.status_code == 400
