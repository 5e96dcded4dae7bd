from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel

# Ids are stored as signed 64-bit integers
MAX_STORE_ID = 2**63 - 1


class CategoryBase(BaseModel):
    model_config = ConfigDict(
        alias_generator=to_camel, populate_by_name=True, from_attributes=True
    )

    name: str = Field(..., min_length=1, description="Category name (required)")

    @field_validator("name")
    @classmethod
    def validate_name(cls, v):
        if not v.strip():
            raise ValueError("name cannot be empty or whitespace only")
        return v.strip()


class CategoryCreate(CategoryBase):
    # Only used to reject collisions; the store always assigns the id
    id: Optional[int] = Field(None, gt=0, le=MAX_STORE_ID)


class CategoryUpdate(CategoryBase):
    pass


class CategoryResponse(CategoryBase):
    id: int
