"""Split and SplitSet value objects."""
from __future__ import annotations

from typing import TYPE_CHECKING, List, Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field

from split_resolution.models.values import Bucket, SortSpec

if TYPE_CHECKING:
    from split_resolution.models.data_cube import DataCube, Dimension


# Grouping of the data by one dimension
class Split(BaseModel):
    model_config = ConfigDict(frozen=True)

    expression: str = Field(..., min_length=1)
    sort: Optional[SortSpec] = None
    limit: Optional[int] = Field(default=None, ge=1)
    bucket: Optional[Bucket] = None

    @property
    def is_bucketed(self) -> bool:
        return self.bucket is not None

    def with_sort(self, sort: Optional[SortSpec]) -> "Split":
        return self.model_copy(update={"sort": sort})

    def with_limit(self, limit: Optional[int]) -> "Split":
        return self.model_copy(update={"limit": limit})

    def get_dimension(self, data_cube: "DataCube") -> "Dimension":
        return data_cube.get_dimension_by_expression(self.expression)

    def can_bucket_by_default(self, data_cube: "DataCube") -> bool:
        return self.get_dimension(data_cube).can_bucket_by_default()

    @classmethod
    def from_expression(cls, expression: str) -> "Split":
        return cls(expression=expression)

    @classmethod
    def from_dimension(cls, dimension: "Dimension") -> "Split":
        return cls(expression=dimension.expression, bucket=dimension.default_bucket())


# Ordered splits; order encodes nesting
class SplitSet(BaseModel):
    model_config = ConfigDict(frozen=True)

    splits: Tuple[Split, ...] = ()

    @classmethod
    def of(cls, *splits: Split) -> "SplitSet":
        return cls(splits=tuple(splits))

    @classmethod
    def from_split(cls, split: Split) -> "SplitSet":
        return cls(splits=(split,))

    @classmethod
    def empty(cls) -> "SplitSet":
        return cls()

    def length(self) -> int:
        return len(self.splits)

    def has_length(self, length: int) -> bool:
        return len(self.splits) == length

    def first(self) -> Split:
        return self.splits[0]

    def get(self, index: int) -> Split:
        return self.splits[index]

    def to_list(self) -> List[Split]:
        return list(self.splits)

    def bucketed(self) -> List[Split]:
        return [s for s in self.splits if s.is_bucketed]

    def any_bucketed(self) -> bool:
        return any(s.is_bucketed for s in self.splits)

    def all_bucketed(self) -> bool:
        return bool(self.splits) and all(s.is_bucketed for s in self.splits)
