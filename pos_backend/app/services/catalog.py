"""Read-only lookups over the category -> sub-category -> item hierarchy."""

from typing import List, Optional

from sqlalchemy.orm import Session

from pos_backend.app.models.category import Category
from pos_backend.app.models.item import Item
from pos_backend.app.models.subcategory import Subcategory


def list_categories(db: Session) -> List[Category]:
    return db.query(Category).filter(Category.deleted_at.is_(None)).order_by(Category.id.asc()).all()


def list_subcategories(db: Session, category_id: int) -> List[Subcategory]:
    """Return live sub-categories of a category; unknown ids yield an empty list."""
    return (
        db.query(Subcategory)
        .filter(Subcategory.category_id == category_id, Subcategory.deleted_at.is_(None))
        .order_by(Subcategory.id.asc())
        .all()
    )


def list_items(db: Session, subcategory_id: int) -> List[Item]:
    """Return live items of a sub-category; unknown ids yield an empty list."""
    return (
        db.query(Item)
        .filter(Item.subcategory_id == subcategory_id, Item.deleted_at.is_(None))
        .order_by(Item.id.asc())
        .all()
    )


def get_item(db: Session, item_id: int) -> Optional[Item]:
    return db.query(Item).filter(Item.id == item_id, Item.deleted_at.is_(None)).first()
