"""
ORM models for the plastics catalog

Importing this package registers every table on Base.metadata.
"""
from plastics_catalog.models.user import User
from plastics_catalog.models.material import Material
from plastics_catalog.models.vendor import Vendor, MaterialVendor
from plastics_catalog.models.favorite import Favorite
from plastics_catalog.models.review import Review, ReviewHelpful

__all__ = [
    "User",
    "Material",
    "Vendor",
    "MaterialVendor",
    "Favorite",
    "Review",
    "ReviewHelpful",
]
