"""Catalog lookup routes consumed by the POS page."""

from typing import List

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from pos_backend.app.db.session import get_db
from pos_backend.app.schemas.catalog import CategoryRead, ItemRead, SubcategoryRead
from pos_backend.app.services.catalog import list_categories, list_items, list_subcategories

router = APIRouter(tags=["catalog"])


@router.get("/categories", response_model=List[CategoryRead])
def get_categories(db: Session = Depends(get_db)):
    return list_categories(db)


@router.get("/subCategories", response_model=List[SubcategoryRead])
def get_subcategories(category_id: int, db: Session = Depends(get_db)):
    return list_subcategories(db, category_id)


@router.get("/items", response_model=List[ItemRead])
def get_items(subcategory_id: int, db: Session = Depends(get_db)):
    return list_items(db, subcategory_id)
