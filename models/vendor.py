from pydantic import BaseModel
from sqlalchemy import Column, Integer, String

from models.base import Base


class Vendor(Base):
    __tablename__ = "vendors"

    id = Column(Integer, primary_key=True)
    name = Column(String, nullable=False)


class VendorDTO(BaseModel):
    id: int | None = None
    name: str | None = None
