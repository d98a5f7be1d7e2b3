"""
Local mirror of identity-provider users

The identity provider owns these records; we only keep enough to join
favorites and reviews against. Rows are upserted from session claims.
"""
from datetime import datetime
from sqlalchemy import Column, String, DateTime
from sqlalchemy.orm import relationship

from plastics_catalog.db.base import Base


class User(Base):
    """User as last seen in a verified session token"""
    __tablename__ = "users"

    id = Column(String(255), primary_key=True)  # opaque external id (token "sub")
    email = Column(String(255), unique=True, nullable=True)
    first_name = Column(String(100), nullable=True)
    last_name = Column(String(100), nullable=True)
    profile_image_url = Column(String(500), nullable=True)

    created_at = Column(DateTime, default=datetime.utcnow, nullable=False)
    updated_at = Column(DateTime, default=datetime.utcnow, onupdate=datetime.utcnow, nullable=False)

    favorites = relationship("Favorite", back_populates="user", cascade="all, delete-orphan")

    def __repr__(self):
        return f"<User {self.id}: {self.email}>"
