"""Top level of the catalog hierarchy."""

from sqlalchemy import Column, Integer, String
from sqlalchemy.orm import relationship

from pos_backend.app.db.base_class import Base, TimestampMixin


class Category(TimestampMixin, Base):
    __tablename__ = "categories"

    id = Column(Integer, primary_key=True, index=True)
    title = Column(String(255), nullable=False)

    subcategories = relationship("Subcategory", back_populates="category", cascade="all, delete-orphan")
