"""
Favorite model: a user bookmarking a material
"""
from datetime import datetime
from sqlalchemy import Column, Integer, String, DateTime, ForeignKey, UniqueConstraint
from sqlalchemy.orm import relationship

from plastics_catalog.db.base import Base


class Favorite(Base):
    """One (user, material) pair; a user either favorites a material or not"""
    __tablename__ = "favorites"

    id = Column(Integer, primary_key=True, index=True)

    user_id = Column(String(255), ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True)
    material_id = Column(Integer, ForeignKey("materials.id", ondelete="CASCADE"), nullable=False)

    created_at = Column(DateTime, default=datetime.utcnow, nullable=False)

    user = relationship("User", back_populates="favorites")
    material = relationship("Material", back_populates="favorites")

    __table_args__ = (
        UniqueConstraint("user_id", "material_id", name="uq_favorite_user_material"),
    )

    def __repr__(self):
        return f"<Favorite user={self.user_id} material={self.material_id}>"
