"""Sub-category model, grouping sellable items under a category."""

from sqlalchemy import Column, ForeignKey, Integer, String
from sqlalchemy.orm import relationship

from pos_backend.app.db.base_class import Base, TimestampMixin


class Subcategory(TimestampMixin, Base):
    __tablename__ = "subcategories"

    id = Column(Integer, primary_key=True, index=True)
    category_id = Column(Integer, ForeignKey("categories.id"), nullable=False, index=True)
    title = Column(String(255), nullable=False)

    category = relationship("Category", back_populates="subcategories")
    items = relationship("Item", back_populates="subcategory", cascade="all, delete-orphan")
