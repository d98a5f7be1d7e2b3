"""
Vendor and pricing-link models

A Vendor sells materials; MaterialVendor is one vendor's listing of one
material with its price, minimum order and availability.
"""
from sqlalchemy import Column, Integer, String, DateTime, Numeric, ForeignKey, Index
from sqlalchemy.orm import relationship
from datetime import datetime

from plastics_catalog.db.base import Base


class Vendor(Base):
    """Vendor/distributor selling catalog materials"""
    __tablename__ = "vendors"

    id = Column(Integer, primary_key=True, index=True)

    name = Column(String(255), nullable=False)
    website = Column(String(500), nullable=True)

    # Contact info
    contact_email = Column(String(255), nullable=True)
    contact_phone = Column(String(50), nullable=True)

    created_at = Column(DateTime, default=datetime.utcnow, nullable=False)

    material_links = relationship("MaterialVendor", back_populates="vendor")

    def __repr__(self):
        return f"<Vendor {self.id}: {self.name}>"


class MaterialVendor(Base):
    """
    Junction table: which vendor sells which material, and for how much

    A material may have zero or more listings; the same vendor may list a
    material more than once (e.g. different package sizes).
    """
    __tablename__ = "material_vendors"

    id = Column(Integer, primary_key=True, index=True)

    material_id = Column(Integer, ForeignKey("materials.id", ondelete="CASCADE"), nullable=False)
    vendor_id = Column(Integer, ForeignKey("vendors.id"), nullable=False, index=True)

    # Pricing
    price = Column(Numeric(10, 2), nullable=True)  # per kg
    currency = Column(String(3), nullable=False, default="USD")
    minimum_order = Column(Numeric(10, 2), nullable=True)  # kg

    availability = Column(String(50), nullable=False, default="in_stock")  # in_stock, limited, out_of_stock
    product_url = Column(String(500), nullable=True)

    # Timestamps
    created_at = Column(DateTime, default=datetime.utcnow, nullable=False)
    updated_at = Column(DateTime, default=datetime.utcnow, onupdate=datetime.utcnow, nullable=False)

    material = relationship("Material", back_populates="vendor_links")
    vendor = relationship("Vendor", back_populates="material_links")

    __table_args__ = (
        Index("ix_material_vendors_material", "material_id"),
    )

    def __repr__(self):
        return f"<MaterialVendor material={self.material_id} vendor={self.vendor_id}: {self.price} {self.currency}>"
