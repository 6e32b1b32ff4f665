from pos_backend.app.db.base_class import Base

# Import models to register metadata for Base.metadata.create_all in tests
from pos_backend.app.models.category import Category  # noqa: F401
from pos_backend.app.models.subcategory import Subcategory  # noqa: F401
from pos_backend.app.models.item import Item  # noqa: F401
