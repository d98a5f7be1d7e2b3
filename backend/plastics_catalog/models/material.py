"""
Material model for the plastics catalog

One row per commercial grade (e.g. "Cycolac ABS MG47" from SABIC) with its
datasheet properties. Every numeric property is nullable: NULL means the
datasheet does not specify it, never zero.
"""
from datetime import datetime
from sqlalchemy import (
    Column, Integer, String, Numeric, Boolean, DateTime, Text, Index
)
from sqlalchemy.orm import relationship

from plastics_catalog.db.base import Base


class Material(Base):
    """Plastic material grade with mechanical, thermal and physical properties"""
    __tablename__ = "materials"

    id = Column(Integer, primary_key=True, index=True)

    # Identification
    name = Column(String(255), nullable=False)
    manufacturer = Column(String(255), nullable=False, index=True)
    material_type = Column(String(50), nullable=False, index=True)  # ABS, PLA, PETG, PC, PA
    description = Column(Text, nullable=True)
    image_url = Column(String(500), nullable=True)

    # Mechanical properties
    tensile_strength = Column(Numeric(8, 2), nullable=True)  # MPa
    flexural_strength = Column(Numeric(8, 2), nullable=True)  # MPa
    impact_strength = Column(Numeric(8, 2), nullable=True)  # kJ/m²
    elongation_at_break = Column(Numeric(8, 2), nullable=True)  # %

    # Thermal properties
    melting_temperature = Column(Numeric(8, 2), nullable=True)  # °C
    heat_deflection_temp = Column(Numeric(8, 2), nullable=True)  # °C
    vicat_softening_point = Column(Numeric(8, 2), nullable=True)  # °C
    thermal_expansion = Column(Numeric(12, 8), nullable=True)  # 1/°C

    # Physical properties
    density = Column(Numeric(8, 3), nullable=True)  # g/cm³
    mfr = Column(Numeric(8, 2), nullable=True)  # g/10 min (melt flow rate)
    water_absorption = Column(Numeric(8, 2), nullable=True)  # %
    shore_hardness = Column(Integer, nullable=True)

    # Appearance
    color = Column(String(100), nullable=True)
    transparency = Column(String(50), nullable=True)  # transparent, translucent, opaque

    # Certifications
    fda_approved = Column(Boolean, default=False, nullable=False)
    ul94_rating = Column(String(10), nullable=True)  # V-0, V-1, V-2, HB
    rohs_compliant = Column(Boolean, default=False, nullable=False)
    reach_compliant = Column(Boolean, default=False, nullable=False)

    # Documentation
    technical_data_sheet_url = Column(String(500), nullable=True)
    safety_data_sheet_url = Column(String(500), nullable=True)
    processing_guidelines_url = Column(String(500), nullable=True)

    # Timestamps
    created_at = Column(DateTime, default=datetime.utcnow, nullable=False)
    updated_at = Column(DateTime, default=datetime.utcnow, onupdate=datetime.utcnow, nullable=False)

    # Dependents go with the material
    vendor_links = relationship(
        "MaterialVendor", back_populates="material", cascade="all, delete-orphan"
    )
    favorites = relationship(
        "Favorite", back_populates="material", cascade="all, delete-orphan"
    )
    reviews = relationship(
        "Review", back_populates="material", cascade="all, delete-orphan"
    )

    __table_args__ = (
        # Default listing order: newest first, id as tie-breaker
        Index("ix_materials_created_at_id", "created_at", "id"),
    )

    def __repr__(self):
        return f"<Material {self.id}: {self.name} ({self.material_type})>"
