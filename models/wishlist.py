from datetime import datetime

from pydantic import BaseModel
from sqlalchemy import Column, Integer, String, DateTime, ForeignKey, UniqueConstraint, func

from models.base import Base


class WishlistItem(Base):
    __tablename__ = "wishlist"

    id = Column(Integer, primary_key=True)
    user_id = Column(String, nullable=False, index=True)
    product_id = Column(Integer, ForeignKey("products.id", ondelete="CASCADE"), nullable=False)
    created_at = Column(DateTime, nullable=True, server_default=func.now())

    __table_args__ = (
        UniqueConstraint('user_id', 'product_id', name='wishlist_user_product_key'),
    )


class WishlistItemDTO(BaseModel):
    id: int | None = None
    user_id: str | None = None
    product_id: int | None = None
    created_at: datetime | None = None
