import uuid

from pydantic import BaseModel
from sqlalchemy import Column, Integer, String, ForeignKey, CheckConstraint

from models.base import Base


class CartItem(Base):
    __tablename__ = "cartItem"

    id = Column(String, primary_key=True, default=lambda: str(uuid.uuid4()))
    cart_id = Column("cartId", String, ForeignKey("cart.id", ondelete="CASCADE"), nullable=False, index=True)
    product_id = Column("productId", Integer, ForeignKey("products.id"), nullable=False)
    quantity = Column(Integer, nullable=False, default=1)

    __table_args__ = (
        CheckConstraint('quantity > 0', name='check_quantity_positive'),
    )


class CartItemDTO(BaseModel):
    id: str | None = None
    cart_id: str | None = None
    product_id: int | None = None
    quantity: int | None = None
