"""
Vendor and pricing-link schemas
"""
from datetime import datetime
from typing import Optional

from pydantic import Field, field_validator

from plastics_catalog.schemas.common import CamelModel, JSONDecimal


class VendorCreate(CamelModel):
    """Create a vendor"""
    name: str = Field(..., min_length=1, max_length=255)
    website: Optional[str] = Field(None, max_length=500)
    contact_email: Optional[str] = Field(None, max_length=255, pattern=r"^[^@\s]+@[^@\s]+\.[^@\s]+$")
    contact_phone: Optional[str] = Field(None, max_length=50)

    @field_validator("name")
    @classmethod
    def not_blank(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("must not be blank")
        return v


class VendorResponse(CamelModel):
    """Vendor record"""
    id: int
    name: str
    website: Optional[str] = None
    contact_email: Optional[str] = None
    contact_phone: Optional[str] = None
    created_at: datetime


class MaterialVendorCreate(CamelModel):
    """
    Link a vendor to a material with pricing.

    The material comes from the URL path, never the body.
    """
    vendor_id: int
    price: Optional[JSONDecimal] = Field(None, ge=0, max_digits=10, decimal_places=2, description="Price per kg")
    currency: str = Field("USD", min_length=3, max_length=3, description="ISO 4217 code")
    minimum_order: Optional[JSONDecimal] = Field(None, ge=0, max_digits=10, decimal_places=2, description="kg")
    availability: str = Field("in_stock", min_length=1, max_length=50)
    product_url: Optional[str] = Field(None, max_length=500)

    @field_validator("currency")
    @classmethod
    def upper_currency(cls, v: str) -> str:
        if not v.isalpha():
            raise ValueError("currency must be a 3-letter code")
        return v.upper()


class MaterialVendorResponse(CamelModel):
    """Pricing link record"""
    id: int
    material_id: int
    vendor_id: int
    price: Optional[JSONDecimal] = None
    currency: str
    minimum_order: Optional[JSONDecimal] = None
    availability: str
    product_url: Optional[str] = None
    created_at: datetime
    updated_at: datetime


class MaterialVendorWithVendor(MaterialVendorResponse):
    """Pricing link merged with the vendor it points to"""
    vendor: VendorResponse
