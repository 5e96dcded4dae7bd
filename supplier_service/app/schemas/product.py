from decimal import Decimal
from typing import Annotated, Optional

from pydantic import BaseModel, ConfigDict, Field, PlainSerializer, field_validator
from pydantic.alias_generators import to_camel

from .category import MAX_STORE_ID, CategoryResponse

# Prices travel as JSON numbers, not strings
Price = Annotated[Decimal, PlainSerializer(float, return_type=float, when_used="json")]


class ProductBase(BaseModel):
    model_config = ConfigDict(
        alias_generator=to_camel, populate_by_name=True, from_attributes=True
    )

    name: str = Field(
        ..., min_length=1, description="Product name (required, non-empty)"
    )
    description: str = Field(
        ..., min_length=1, description="Product description (required, non-empty)"
    )
    price: Price = Field(
        ..., ge=0, max_digits=10, decimal_places=2, description="Non-negative price"
    )

    @field_validator("name", "description")
    @classmethod
    def validate_not_blank(cls, v, info):
        if not v.strip():
            raise ValueError(f"{info.field_name} cannot be empty or whitespace only")
        return v.strip()


class ProductCreate(ProductBase):
    category_id: int = Field(
        ..., gt=0, le=MAX_STORE_ID, description="Owning category id"
    )


class ProductUpdate(ProductBase):
    # Accepted for wire compatibility; updates never move a product
    category_id: Optional[int] = Field(None, le=MAX_STORE_ID)


class ProductDto(ProductBase):
    id: int
    category_id: int


class ProductDetailResponse(ProductDto):
    """Stored entity shape: the DTO fields plus the owning category."""

    category: CategoryResponse
