"""Read-only data cube and dimension metadata consumed by the resolvers."""
from __future__ import annotations

import re
from typing import Any, Dict, List, Literal, Optional, Sequence, Tuple

import pandas as pd
from pandas.api import types as pdt
from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from split_resolution.errors import ContractViolation
from split_resolution.models.values import Bucket, SortSpec, ref
from split_resolution.utils.logging import log_event

DimensionKind = Literal["categorical", "numeric", "time"]
BucketingStrategy = Literal["default_bucket", "default_no_bucket"]

_DEFAULT_TIME_GRANULARITY = "P1D"
_DEFAULT_NUMBER_GRANULARITY = "1"
_DEFAULT_SORT_MEASURE = "count"
# column name tokens that mark a string column as a time candidate
_TIME_NAME_TOKENS = ("time", "date", "day", "month", "year")


def _make_title(name: str) -> str:
    return name.replace("_", " ").strip().title() or name


class Dimension(BaseModel):
    model_config = ConfigDict(frozen=True)

    name: str = Field(..., min_length=1)
    title: str = ""
    kind: DimensionKind = "categorical"
    expression: str = ""
    # "self" or the name of another dimension/measure to order by
    sort_strategy: Optional[str] = None
    bucketing_strategy: BucketingStrategy = "default_bucket"
    granularity: Optional[str] = None

    @model_validator(mode="before")
    @classmethod
    def _fill_defaults(cls, data: Any) -> Any:
        if not isinstance(data, dict) or not data.get("name"):
            return data
        data = dict(data)
        if not data.get("title"):
            data["title"] = _make_title(str(data["name"]))
        if not data.get("expression"):
            data["expression"] = ref(str(data["name"]))
        return data

    def is_continuous(self) -> bool:
        return self.kind in ("time", "numeric")

    def can_bucket_by_default(self) -> bool:
        return self.is_continuous() and self.bucketing_strategy != "default_no_bucket"

    def default_bucket(self) -> Optional[Bucket]:
        if not self.can_bucket_by_default():
            return None
        if self.kind == "time":
            return Bucket(kind="time", granularity=self.granularity or _DEFAULT_TIME_GRANULARITY)
        return Bucket(kind="number", granularity=self.granularity or _DEFAULT_NUMBER_GRANULARITY)


class DataCube(BaseModel):
    model_config = ConfigDict(frozen=True)

    name: str = "data_cube"
    dimensions: Tuple[Dimension, ...] = ()
    measures: Tuple[str, ...] = ()
    default_sort_measure: Optional[str] = None

    @field_validator("dimensions")
    @classmethod
    def _unique_dimension_names(cls, value: Tuple[Dimension, ...]) -> Tuple[Dimension, ...]:
        seen: set[str] = set()
        for dimension in value:
            if dimension.name in seen:
                raise ValueError(f"duplicate dimension name: {dimension.name}")
            seen.add(dimension.name)
        return value

    def get_dimension(self, name: str) -> Dimension:
        for dimension in self.dimensions:
            if dimension.name == name:
                return dimension
        raise ContractViolation(f"dimension '{name}' is not part of data cube '{self.name}'")

    def get_dimension_by_expression(self, expression: str) -> Dimension:
        for dimension in self.dimensions:
            if dimension.expression == expression:
                return dimension
        raise ContractViolation(f"no dimension for expression '{expression}' in data cube '{self.name}'")

    def get_default_sort(self) -> SortSpec:
        measure = self.default_sort_measure
        if not measure:
            measure = self.measures[0] if self.measures else _DEFAULT_SORT_MEASURE
        return SortSpec.descending(measure)

    def bucketable_dimensions(self) -> List[Dimension]:
        return [d for d in self.dimensions if d.can_bucket_by_default()]

    @classmethod
    def from_dict(cls, payload: Dict[str, Any]) -> "DataCube":
        return cls.model_validate(payload)

    @classmethod
    def from_dataframe(
        cls,
        df: pd.DataFrame,
        *,
        name: str = "data_cube",
        numeric_dimensions: Sequence[str] = (),
        default_sort_measure: Optional[str] = None,
    ) -> "DataCube":
        """Infer dimensions and measures from the dtypes of a result frame.

        Datetime columns, and string columns whose name looks like a time
        column and whose values all parse as dates, become time dimensions.
        Integer columns with a ``year`` name token (``admit_year``) are time
        dimensions too. Other numeric columns become measures unless listed in
        ``numeric_dimensions``. Everything else is categorical.
        """
        numeric_names = {str(col) for col in numeric_dimensions}
        dimensions: List[Dimension] = []
        measures: List[str] = []

        for col in df.columns:
            col_name = str(col)
            series = df[col]
            if pdt.is_bool_dtype(series):
                dimensions.append(Dimension(name=col_name, kind="categorical"))
            elif pdt.is_datetime64_any_dtype(series) or _looks_like_time(col_name, series):
                dimensions.append(Dimension(name=col_name, kind="time"))
            elif pdt.is_numeric_dtype(series):
                if col_name in numeric_names:
                    dimensions.append(Dimension(name=col_name, kind="numeric"))
                elif _looks_like_year(col_name, series):
                    dimensions.append(Dimension(name=col_name, kind="time"))
                else:
                    measures.append(col_name)
            else:
                dimensions.append(Dimension(name=col_name, kind="categorical"))

        log_event(
            "data_cube.from_dataframe",
            {"data_cube": name, "dimension_count": len(dimensions), "measure_count": len(measures)},
            level="debug",
        )
        return cls(
            name=name,
            dimensions=tuple(dimensions),
            measures=tuple(measures),
            default_sort_measure=default_sort_measure,
        )


def _looks_like_time(col_name: str, series: pd.Series) -> bool:
    lower = col_name.lower()
    if not any(token in lower for token in _TIME_NAME_TOKENS):
        return False
    if not (pdt.is_string_dtype(series) or pdt.is_object_dtype(series)):
        return False
    values = series.dropna()
    if values.empty:
        return False
    parsed = pd.to_datetime(values.astype(str), errors="coerce")
    return bool(parsed.notna().all())


def _looks_like_year(col_name: str, series: pd.Series) -> bool:
    if not pdt.is_integer_dtype(series):
        return False
    return "year" in re.split(r"[^a-z0-9]+", col_name.lower())
