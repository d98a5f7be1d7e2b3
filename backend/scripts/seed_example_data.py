"""
Seed Example Data for the Plastics Catalog

This script seeds the database with:
1. A handful of common engineering grades (ABS, PC, PA66, PLA, PETG, POM, PP)
2. Example vendors and their per-kg pricing for those grades

Idempotent: materials are matched by (name, manufacturer), vendors by name,
and pricing links by (material, vendor), so re-running skips existing rows.

Run with: python backend/scripts/seed_example_data.py
"""
from decimal import Decimal
from typing import Dict, List, Tuple

from sqlalchemy.orm import Session

from plastics_catalog.db.session import SessionLocal
from plastics_catalog.models import Material, MaterialVendor, Vendor


EXAMPLE_MATERIALS: List[Dict] = [
    {
        "name": "Cycolac ABS MG47",
        "manufacturer": "SABIC",
        "material_type": "ABS",
        "description": "General purpose, high gloss ABS for injection molding",
        "tensile_strength": Decimal("44"),
        "flexural_strength": Decimal("72"),
        "impact_strength": Decimal("21"),
        "elongation_at_break": Decimal("25"),
        "melting_temperature": Decimal("230"),
        "heat_deflection_temp": Decimal("88"),
        "vicat_softening_point": Decimal("99"),
        "density": Decimal("1.040"),
        "mfr": Decimal("18"),
        "water_absorption": Decimal("0.30"),
        "color": "Natural",
        "transparency": "opaque",
        "ul94_rating": "HB",
        "rohs_compliant": True,
        "reach_compliant": True,
    },
    {
        "name": "Lexan PC 141R",
        "manufacturer": "SABIC",
        "material_type": "PC",
        "description": "Medium viscosity polycarbonate with mold release",
        "tensile_strength": Decimal("63"),
        "flexural_strength": Decimal("93"),
        "impact_strength": Decimal("65"),
        "elongation_at_break": Decimal("110"),
        "melting_temperature": Decimal("295"),
        "heat_deflection_temp": Decimal("132"),
        "vicat_softening_point": Decimal("145"),
        "thermal_expansion": Decimal("0.00007000"),
        "density": Decimal("1.200"),
        "mfr": Decimal("10.5"),
        "water_absorption": Decimal("0.15"),
        "color": "Clear",
        "transparency": "transparent",
        "ul94_rating": "V-2",
        "fda_approved": True,
        "rohs_compliant": True,
        "reach_compliant": True,
    },
    {
        "name": "Zytel 101L NC010",
        "manufacturer": "DuPont",
        "material_type": "PA66",
        "description": "Unreinforced, lubricated nylon 66",
        "tensile_strength": Decimal("82"),
        "flexural_strength": Decimal("115"),
        "impact_strength": Decimal("5.5"),
        "elongation_at_break": Decimal("40"),
        "melting_temperature": Decimal("262"),
        "heat_deflection_temp": Decimal("90"),
        "density": Decimal("1.140"),
        "water_absorption": Decimal("2.50"),
        "color": "Natural",
        "transparency": "translucent",
        "ul94_rating": "V-2",
        "fda_approved": True,
        "rohs_compliant": True,
    },
    {
        "name": "Ingeo 4043D",
        "manufacturer": "NatureWorks",
        "material_type": "PLA",
        "description": "Film and 3D printing grade polylactide",
        "tensile_strength": Decimal("53"),
        "elongation_at_break": Decimal("6"),
        "melting_temperature": Decimal("155"),
        "heat_deflection_temp": Decimal("55"),
        "density": Decimal("1.240"),
        "mfr": Decimal("6"),
        "color": "Natural",
        "transparency": "translucent",
        "fda_approved": True,
    },
    {
        "name": "Eastar 6763",
        "manufacturer": "Eastman",
        "material_type": "PETG",
        "description": "Clear copolyester for sheet and injection molding",
        "tensile_strength": Decimal("50"),
        "flexural_strength": Decimal("69"),
        "impact_strength": Decimal("8.5"),
        "elongation_at_break": Decimal("110"),
        "melting_temperature": Decimal("225"),
        "heat_deflection_temp": Decimal("70"),
        "density": Decimal("1.270"),
        "color": "Clear",
        "transparency": "transparent",
        "ul94_rating": "HB",
        "fda_approved": True,
    },
    {
        "name": "Delrin 100P NC010",
        "manufacturer": "DuPont",
        "material_type": "POM",
        "description": "High viscosity acetal homopolymer",
        "tensile_strength": Decimal("71"),
        "impact_strength": Decimal("12"),
        "elongation_at_break": Decimal("45"),
        "melting_temperature": Decimal("178"),
        "heat_deflection_temp": Decimal("95"),
        "density": Decimal("1.420"),
        "mfr": Decimal("2.2"),
        "shore_hardness": 86,
        "color": "Natural",
        "transparency": "opaque",
        "ul94_rating": "HB",
        "rohs_compliant": True,
    },
    {
        "name": "Pro-fax 6523",
        "manufacturer": "LyondellBasell",
        "material_type": "PP",
        "description": "General purpose polypropylene homopolymer",
        "tensile_strength": Decimal("34"),
        "elongation_at_break": Decimal("12"),
        "melting_temperature": Decimal("163"),
        "heat_deflection_temp": Decimal("93"),
        "density": Decimal("0.900"),
        "mfr": Decimal("4"),
        "water_absorption": Decimal("0.01"),
        "color": "Natural",
        "transparency": "translucent",
        "fda_approved": True,
    },
    {
        "name": "Cycoloy C6600",
        "manufacturer": "SABIC",
        "material_type": "PC/ABS",
        "description": "Flame retardant PC/ABS blend for electronics housings",
        "tensile_strength": Decimal("60"),
        "flexural_strength": Decimal("90"),
        "impact_strength": Decimal("45"),
        "melting_temperature": Decimal("260"),
        "heat_deflection_temp": Decimal("85"),
        "density": Decimal("1.180"),
        "mfr": Decimal("17"),
        "color": "Black",
        "transparency": "opaque",
        "ul94_rating": "V-0",
        "rohs_compliant": True,
        "reach_compliant": True,
    },
]

EXAMPLE_VENDORS: List[Dict] = [
    {
        "name": "Polymer Supply Direct",
        "website": "https://polymersupply.example.com",
        "contact_email": "sales@polymersupply.example.com",
        "contact_phone": "+1-555-0100",
    },
    {
        "name": "Resin Exchange",
        "website": "https://resinexchange.example.com",
        "contact_email": "orders@resinexchange.example.com",
    },
    {
        "name": "EuroPlast Distribution",
        "website": "https://europlast.example.com",
        "contact_email": "info@europlast.example.com",
    },
]

# (material name, vendor name, price per kg, currency, minimum order kg, availability)
EXAMPLE_PRICING: List[Tuple[str, str, str, str, str, str]] = [
    ("Cycolac ABS MG47", "Polymer Supply Direct", "3.20", "USD", "25", "in_stock"),
    ("Cycolac ABS MG47", "Resin Exchange", "2.95", "USD", "500", "limited"),
    ("Lexan PC 141R", "Polymer Supply Direct", "4.80", "USD", "25", "in_stock"),
    ("Lexan PC 141R", "EuroPlast Distribution", "4.35", "EUR", "100", "in_stock"),
    ("Zytel 101L NC010", "Resin Exchange", "5.60", "USD", "25", "in_stock"),
    ("Ingeo 4043D", "Polymer Supply Direct", "2.70", "USD", "25", "in_stock"),
    ("Eastar 6763", "EuroPlast Distribution", "3.10", "EUR", "100", "out_of_stock"),
    ("Delrin 100P NC010", "Resin Exchange", "6.40", "USD", "25", "limited"),
    ("Pro-fax 6523", "Polymer Supply Direct", "1.45", "USD", "1000", "in_stock"),
    ("Cycoloy C6600", "EuroPlast Distribution", "4.90", "EUR", "100", "in_stock"),
]


def seed_materials(db: Session) -> Tuple[int, int]:
    """Create example materials that don't exist yet"""
    print("\n🧪 Seeding materials...")
    created, skipped = 0, 0

    for data in EXAMPLE_MATERIALS:
        existing = db.query(Material).filter(
            Material.name == data["name"],
            Material.manufacturer == data["manufacturer"],
        ).first()
        if existing:
            skipped += 1
            continue

        db.add(Material(**data))
        created += 1
        print(f"  ✓ {data['manufacturer']} {data['name']} ({data['material_type']})")

    db.commit()
    return created, skipped


def seed_vendors(db: Session) -> Tuple[int, int]:
    """Create example vendors that don't exist yet"""
    print("\n🏭 Seeding vendors...")
    created, skipped = 0, 0

    for data in EXAMPLE_VENDORS:
        if db.query(Vendor).filter(Vendor.name == data["name"]).first():
            skipped += 1
            continue

        db.add(Vendor(**data))
        created += 1
        print(f"  ✓ {data['name']}")

    db.commit()
    return created, skipped


def seed_pricing(db: Session) -> int:
    """Link example materials to vendors with pricing"""
    print("\n💲 Seeding vendor pricing...")
    created = 0

    for material_name, vendor_name, price, currency, minimum_order, availability in EXAMPLE_PRICING:
        material = db.query(Material).filter(Material.name == material_name).first()
        vendor = db.query(Vendor).filter(Vendor.name == vendor_name).first()
        if not material or not vendor:
            print(f"  ⚠ Skipping {material_name} @ {vendor_name}: not found")
            continue

        existing = db.query(MaterialVendor).filter(
            MaterialVendor.material_id == material.id,
            MaterialVendor.vendor_id == vendor.id,
        ).first()
        if existing:
            continue

        db.add(MaterialVendor(
            material_id=material.id,
            vendor_id=vendor.id,
            price=Decimal(price),
            currency=currency,
            minimum_order=Decimal(minimum_order),
            availability=availability,
        ))
        created += 1

    db.commit()
    return created


def main():
    """Main seed function"""
    print("=" * 60)
    print("Plastics Catalog Example Data Seeder")
    print("=" * 60)

    db: Session = SessionLocal()

    try:
        materials_created, materials_skipped = seed_materials(db)
        vendors_created, vendors_skipped = seed_vendors(db)
        links_created = seed_pricing(db)

        print("\n" + "=" * 60)
        print("✅ Seeding complete!")
        print("=" * 60)
        print("\nSummary:")
        print(f"  🧪 Materials: {materials_created} created, {materials_skipped} skipped")
        print(f"  🏭 Vendors: {vendors_created} created, {vendors_skipped} skipped")
        print(f"  💲 Pricing links: {links_created} created")

    except Exception as e:
        print(f"\n❌ Error: {e}")
        db.rollback()
        raise
    finally:
        db.close()


if __name__ == "__main__":
    main()
