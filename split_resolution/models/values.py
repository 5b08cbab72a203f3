"""Small immutable value objects shared by splits and data cubes."""
from __future__ import annotations

from typing import Literal, Optional

from pydantic import BaseModel, ConfigDict, Field

SortDirection = Literal["ascending", "descending"]
BucketKind = Literal["time", "number"]


def ref(name: str) -> str:
    """Reference expression for a dimension or measure name."""
    return name if name.startswith("$") else f"${name}"


# Sort directive applied to a split
class SortSpec(BaseModel):
    model_config = ConfigDict(frozen=True)

    expression: str = Field(..., min_length=1)
    direction: SortDirection = "descending"

    @classmethod
    def ascending(cls, name: str) -> "SortSpec":
        return cls(expression=ref(name), direction="ascending")

    @classmethod
    def descending(cls, name: str) -> "SortSpec":
        return cls(expression=ref(name), direction="descending")


# Bucketing transform (time bucket or numeric bin)
class Bucket(BaseModel):
    model_config = ConfigDict(frozen=True)

    kind: BucketKind
    granularity: str = Field(..., min_length=1)


# Color each series by the top-K values of one dimension
class ColorEncoding(BaseModel):
    model_config = ConfigDict(frozen=True)

    dimension: str = Field(..., min_length=1)
    limit: Optional[int] = Field(default=None, ge=1)

    @classmethod
    def from_limit(cls, dimension: str, limit: int) -> "ColorEncoding":
        return cls(dimension=dimension, limit=limit)
