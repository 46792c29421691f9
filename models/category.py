from pydantic import BaseModel
from sqlalchemy import Column, Integer, String, ForeignKey

from models.base import Base


class Category(Base):
    __tablename__ = 'categories'

    id = Column(Integer, primary_key=True, unique=True)
    slug = Column(String, nullable=False, unique=True)
    name = Column(String, nullable=True)


# many-to-many link between products and categories
class ProductCategory(Base):
    __tablename__ = 'products_categories'

    product_id = Column("productId", Integer, ForeignKey("products.id", ondelete="CASCADE"), primary_key=True)
    category_id = Column("categoryId", Integer, ForeignKey("categories.id", ondelete="CASCADE"), primary_key=True)


class CategoryDTO(BaseModel):
    id: int | None = None
    slug: str | None = None
    name: str | None = None
