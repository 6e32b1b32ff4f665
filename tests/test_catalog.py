import pytest
from datetime import datetime, timezone
from decimal import Decimal

from fastapi.testclient import TestClient

from pos_backend.app.core.dev_seed import seed_catalog
from pos_backend.app.db.base import Base
from pos_backend.app.db.session import SessionLocal, engine
from pos_backend.app.main import app
from pos_backend.app.models.category import Category
from pos_backend.app.models.item import Item
from pos_backend.app.models.subcategory import Subcategory
from pos_backend.app.services.catalog import get_item, list_categories, list_items, list_subcategories

client = TestClient(app)

SMALL_CATALOG = {
    "Food Items": {
        "Froozen": [("Chicken", 150, 40), ("Fish", 350, 200)],
        "Fruit": [("Apple", 150, 20)],
    },
    "Electronics": {
        "Mobiles": [("Samsung", 45000, 4)],
    },
}


@pytest.fixture(autouse=True)
def setup_db():
    Base.metadata.drop_all(bind=engine)
    Base.metadata.create_all(bind=engine)
    db = SessionLocal()
    try:
        seed_catalog(db, SMALL_CATALOG)
    finally:
        db.close()
    yield
    Base.metadata.drop_all(bind=engine)


def _subcategory_id(db, title):
    return db.query(Subcategory).filter(Subcategory.title == title).one().id


def test_list_categories_in_id_order():
    db = SessionLocal()
    try:
        assert [c.title for c in list_categories(db)] == ["Food Items", "Electronics"]
    finally:
        db.close()


def test_list_subcategories_filters_by_category():
    db = SessionLocal()
    try:
        food = db.query(Category).filter(Category.title == "Food Items").one()
        assert [s.title for s in list_subcategories(db, food.id)] == ["Froozen", "Fruit"]
        assert list_subcategories(db, 9999) == []
    finally:
        db.close()


def test_list_items_filters_by_subcategory():
    db = SessionLocal()
    try:
        items = list_items(db, _subcategory_id(db, "Froozen"))
        assert [(i.title, i.price) for i in items] == [("Chicken", Decimal("150.00")), ("Fish", Decimal("350.00"))]
        assert list_items(db, 9999) == []
    finally:
        db.close()


def test_soft_deleted_rows_are_hidden():
    db = SessionLocal()
    try:
        fish = db.query(Item).filter(Item.title == "Fish").one()
        fish.deleted_at = datetime.now(timezone.utc)
        electronics = db.query(Category).filter(Category.title == "Electronics").one()
        electronics.deleted_at = datetime.now(timezone.utc)
        db.commit()

        assert [i.title for i in list_items(db, _subcategory_id(db, "Froozen"))] == ["Chicken"]
        assert [c.title for c in list_categories(db)] == ["Food Items"]
        assert get_item(db, fish.id) is None
    finally:
        db.close()


def test_get_item_returns_item_or_none():
    db = SessionLocal()
    try:
        chicken = db.query(Item).filter(Item.title == "Chicken").one()
        assert get_item(db, chicken.id).title == "Chicken"
        assert get_item(db, 9999) is None
    finally:
        db.close()


def test_categories_endpoint():
    response = client.get("/categories")
    assert response.status_code == 200
    data = response.json()
    assert [row["title"] for row in data] == ["Food Items", "Electronics"]
    assert set(data[0].keys()) == {"id", "title"}


def test_subcategories_endpoint():
    categories = client.get("/categories").json()
    response = client.get("/subCategories", params={"category_id": categories[0]["id"]})
    assert response.status_code == 200
    assert [row["title"] for row in response.json()] == ["Froozen", "Fruit"]


def test_subcategories_endpoint_returns_empty_list_for_unknown_category():
    response = client.get("/subCategories", params={"category_id": 9999})
    assert response.status_code == 200
    assert response.json() == []


def test_items_endpoint():
    db = SessionLocal()
    try:
        subcategory_id = _subcategory_id(db, "Froozen")
    finally:
        db.close()
    response = client.get("/items", params={"subcategory_id": subcategory_id})
    assert response.status_code == 200
    data = response.json()
    assert [(row["title"], row["price"]) for row in data] == [("Chicken", "150.00"), ("Fish", "350.00")]
    assert set(data[0].keys()) == {"id", "title", "price"}


def test_items_endpoint_returns_empty_list_for_unknown_subcategory():
    response = client.get("/items", params={"subcategory_id": 9999})
    assert response.status_code == 200
    assert response.json() == []


def test_catalog_endpoints_require_ids():
    assert client.get("/subCategories").status_code == 422
    assert client.get("/items", params={"subcategory_id": "abc"}).status_code == 422
