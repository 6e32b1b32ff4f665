"""Sellable catalog item."""

from decimal import Decimal

from sqlalchemy import Column, ForeignKey, Integer, Numeric, String
from sqlalchemy.orm import relationship

from pos_backend.app.db.base_class import Base, TimestampMixin


class Item(TimestampMixin, Base):
    __tablename__ = "items"

    id = Column(Integer, primary_key=True, index=True)
    subcategory_id = Column(Integer, ForeignKey("subcategories.id"), nullable=False, index=True)
    title = Column(String(255), nullable=False)
    price = Column(Numeric(10, 2), nullable=False, default=Decimal("0.00"))
    # Stock on hand from seed data; sales never decrement it.
    qty = Column(Integer, nullable=False, default=0)

    subcategory = relationship("Subcategory", back_populates="items")
