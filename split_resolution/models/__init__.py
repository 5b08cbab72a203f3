from .data_cube import DataCube, Dimension
from .split import Split, SplitSet
from .values import Bucket, ColorEncoding, SortSpec, ref
from .verdict import Adjustment, Automatic, Manual, Never, Ready, Suggestion, Verdict, parse_verdict

__all__ = [
    "Adjustment",
    "Automatic",
    "Bucket",
    "ColorEncoding",
    "DataCube",
    "Dimension",
    "Manual",
    "Never",
    "Ready",
    "SortSpec",
    "Split",
    "SplitSet",
    "Suggestion",
    "Verdict",
    "parse_verdict",
    "ref",
]
