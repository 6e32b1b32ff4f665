import logging
import os
from decimal import Decimal

from sqlalchemy.orm import Session

from pos_backend.app.models.category import Category
from pos_backend.app.models.item import Item
from pos_backend.app.models.subcategory import Subcategory

logger = logging.getLogger(__name__)

# category -> sub-category -> [(item title, price, stock qty)]
DEFAULT_CATALOG = {
    "Food Items": {
        "Froozen": [("Chicken", 150, 40), ("Fish", 350, 200), ("Meat", 500, 10), ("Beaf", 450, 20)],
        "Fruit": [("Apple", 150, 20), ("Mango", 100, 400), ("Grapes", 250, 40)],
        "Vagetable": [("Onion", 10, 500), ("Potato", 5, 400), ("Lady Finger", 25, 25)],
    },
    "Home Accessories": {
        "Dacoration": [("Indoor Plants", 15, 400), ("Fairy Lights", 15, 40)],
        "Wall Papers": [("2D Wall Papers", 150, 40), ("3D Wall Papers", 100, 30)],
        "Kitchen Products": [("Plates", 50, 40), ("Glass Fancy", 250, 50)],
    },
    "Beauty Products": {
        "Lip Sticks": [("Matte", 75, 10), ("Gloss", 150, 65)],
        "Nail Paint": [("Glass", 100, 40), ("Plain", 150, 45)],
    },
    "Electronics": {
        "Mobiles": [("Samsung", 45000, 4), ("IPhone Promax", 150000, 10)],
        "Computers": [("Laptops", 15000, 40), ("Lenovo Think Pad", 15500, 40), ("HP Matbook", 15900, 40)],
        "Air Conditionars": [("Kanwood", 150000, 10), ("Dawlance", 75000, 40), ("Pell", 150, 40), ("Gree", 150, 40)],
    },
}


def seed_catalog(db: Session, catalog: dict | None = None) -> bool:
    """Insert the catalog when no categories exist yet. Returns True if rows were added."""
    if db.query(Category).first() is not None:
        return False

    catalog = DEFAULT_CATALOG if catalog is None else catalog
    for category_title, subcategories in catalog.items():
        category = Category(title=category_title)
        db.add(category)
        for subcategory_title, items in subcategories.items():
            subcategory = Subcategory(title=subcategory_title)
            category.subcategories.append(subcategory)
            for title, price, qty in items:
                subcategory.items.append(Item(title=title, price=Decimal(str(price)), qty=qty))
    db.commit()
    logger.info("Seeded catalog with %d categories", len(catalog))
    return True


def ensure_dev_catalog(db: Session) -> None:
    """
    Seed the default catalog for local development if the tables are empty.
    Skips execution when running under pytest to avoid altering test expectations.
    """
    if os.getenv("PYTEST_CURRENT_TEST"):
        return
    seed_catalog(db)
