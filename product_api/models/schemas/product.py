import math
import struct
from uuid import UUID

from pydantic import BaseModel, Field, field_validator

from .base import OrmModel

NIL_UUID = UUID(int=0)


class ProductBase(BaseModel):
    name: str
    price: float = Field(..., strict=True)

    @field_validator("price")
    @classmethod
    def _fits_single_precision(cls, value: float) -> float:
        if not math.isfinite(value):
            raise ValueError("price must be a finite 32-bit float")
        try:
            # OverflowError once the value rounds past the largest single precision float
            struct.pack("f", value)
        except OverflowError as e:
            raise ValueError("price must be a finite 32-bit float") from e
        return value


class ProductCreate(ProductBase):
    """Body of a create request; any client supplied id is ignored."""
    pass


class ProductUpdate(ProductBase):
    pass


class Product(ProductBase, OrmModel):
    id: UUID = Field(..., examples=[str(NIL_UUID)])
