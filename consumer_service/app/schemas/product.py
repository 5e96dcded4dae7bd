from decimal import Decimal
from typing import Annotated, Optional

from pydantic import BaseModel, ConfigDict, Field, PlainSerializer, field_validator
from pydantic.alias_generators import to_camel

Price = Annotated[Decimal, PlainSerializer(float, return_type=float, when_used="json")]


class ProductDto(BaseModel):
    """Product as seen by consumer clients.

    The supplier's nested ``category`` object is not part of this shape and is
    discarded when parsing supplier responses.
    """

    model_config = ConfigDict(
        alias_generator=to_camel, populate_by_name=True, extra="ignore"
    )

    id: Optional[int] = None
    name: str = Field(..., min_length=1)
    description: str = Field(..., min_length=1)
    price: Price = Field(..., ge=0, max_digits=10, decimal_places=2)
    category_id: Optional[int] = Field(None, gt=0)

    @field_validator("name", "description")
    @classmethod
    def validate_not_blank(cls, v, info):
        if not v.strip():
            raise ValueError(f"{info.field_name} cannot be empty or whitespace only")
        return v.strip()
