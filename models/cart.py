# A cart belongs to the user who created it. A user may end up with several
# carts, the storefront always works with the most recently updated one.
import uuid
from datetime import datetime

from pydantic import BaseModel
from sqlalchemy import Column, String, DateTime, func

from models.base import Base


class Cart(Base):
    __tablename__ = "cart"

    id = Column(String, primary_key=True, default=lambda: str(uuid.uuid4()))
    created_by = Column("createdby", String, nullable=False, index=True)
    updated_at = Column("updatedat", DateTime, nullable=True, server_default=func.now())


class CartDTO(BaseModel):
    id: str | None = None
    created_by: str | None = None
    updated_at: datetime | None = None
