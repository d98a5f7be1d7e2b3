"""
Material reviews

Users rate a material 1-5 and describe the application and process they
used it in. ReviewHelpful records who found a review useful so each user
counts at most once toward helpful_count.
"""
from datetime import datetime
from sqlalchemy import (
    Column, Integer, String, Boolean, DateTime, Text,
    ForeignKey, UniqueConstraint, CheckConstraint, Index
)
from sqlalchemy.orm import relationship

from plastics_catalog.db.base import Base


class Review(Base):
    """User review of a material"""
    __tablename__ = "reviews"

    id = Column(Integer, primary_key=True, index=True)

    user_id = Column(String(255), ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True)
    material_id = Column(Integer, ForeignKey("materials.id", ondelete="CASCADE"), nullable=False)

    rating = Column(Integer, nullable=False)  # 1-5 stars
    title = Column(String(255), nullable=True)
    body = Column(Text, nullable=True)

    # Where/how the reviewer used the material
    application = Column(String(255), nullable=True)  # "automotive interior trim"
    processing_method = Column(String(100), nullable=True)  # injection molding, extrusion, FDM

    verified_purchase = Column(Boolean, default=False, nullable=False)
    helpful_count = Column(Integer, default=0, nullable=False)

    created_at = Column(DateTime, default=datetime.utcnow, nullable=False)
    updated_at = Column(DateTime, default=datetime.utcnow, onupdate=datetime.utcnow, nullable=False)

    material = relationship("Material", back_populates="reviews")
    user = relationship("User")
    helpful_marks = relationship("ReviewHelpful", back_populates="review", cascade="all, delete-orphan")

    __table_args__ = (
        CheckConstraint("rating BETWEEN 1 AND 5", name="ck_review_rating_range"),
        Index("ix_reviews_material_created", "material_id", "created_at"),
    )

    def __repr__(self):
        return f"<Review {self.id}: material={self.material_id} rating={self.rating}>"


class ReviewHelpful(Base):
    """A user marking a review as helpful"""
    __tablename__ = "review_helpful"

    id = Column(Integer, primary_key=True, index=True)

    review_id = Column(Integer, ForeignKey("reviews.id", ondelete="CASCADE"), nullable=False)
    user_id = Column(String(255), ForeignKey("users.id", ondelete="CASCADE"), nullable=False)

    created_at = Column(DateTime, default=datetime.utcnow, nullable=False)

    review = relationship("Review", back_populates="helpful_marks")

    __table_args__ = (
        UniqueConstraint("review_id", "user_id", name="uq_review_helpful_user"),
    )

    def __repr__(self):
        return f"<ReviewHelpful review={self.review_id} user={self.user_id}>"
