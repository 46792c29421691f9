# Column names mirror the hosted backend schema (camelCase), attribute names
# stay pythonic. The vendor is loaded eagerly so DTOs can be built from async
# sessions without a lazy load.
from datetime import datetime

from pydantic import BaseModel
from sqlalchemy import Column, Integer, String, Float, Boolean, DateTime, ForeignKey, func
from sqlalchemy.orm import relationship

from models.base import Base
from models.vendor import VendorDTO


class Product(Base):
    __tablename__ = "products"

    id = Column(Integer, primary_key=True)
    name = Column(String, nullable=False)
    unit_price = Column("unitPrice", Float, nullable=False)
    currency = Column(String(3), nullable=False, default="USD")
    in_stock = Column("inStock", Boolean, nullable=False, default=True)
    primary_image = Column("primaryImage", String, nullable=True)
    product_type = Column("productType", String, nullable=True)
    created_at = Column("createdAt", DateTime, nullable=False, server_default=func.now())
    vendor_id = Column("vendorId", Integer, ForeignKey("vendors.id"), nullable=True)
    vendor = relationship("Vendor", lazy="joined")


class ProductDTO(BaseModel):
    id: int | None = None
    name: str | None = None
    unit_price: float | None = None
    currency: str | None = None
    in_stock: bool | None = None
    primary_image: str | None = None
    product_type: str | None = None
    created_at: datetime | None = None
    vendor_id: int | None = None
    vendor: VendorDTO | None = None


class ProductSummaryDTO(BaseModel):
    """Fixed projection used by the product page: no id, vendor reduced to its name."""
    name: str | None = None
    unit_price: float | None = None
    primary_image: str | None = None
    currency: str | None = None
    in_stock: bool | None = None
    vendor: VendorDTO | None = None
