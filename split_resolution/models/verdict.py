"""Verdict types returned by a resolution."""
from __future__ import annotations

from typing import Annotated, Any, Dict, Literal, Optional, Tuple, Union

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter

from split_resolution.models.split import SplitSet
from split_resolution.models.values import ColorEncoding


# Proposed configuration: replacement splits and color encoding
class Adjustment(BaseModel):
    model_config = ConfigDict(frozen=True)

    splits: SplitSet
    colors: Optional[ColorEncoding] = None


class Suggestion(BaseModel):
    model_config = ConfigDict(frozen=True)

    description: str
    adjustment: Adjustment


class _VerdictBase(BaseModel):
    model_config = ConfigDict(frozen=True)

    def is_ready(self) -> bool:
        return getattr(self, "kind", None) == "ready"

    def is_automatic(self) -> bool:
        return getattr(self, "kind", None) == "automatic"

    def is_manual(self) -> bool:
        return getattr(self, "kind", None) == "manual"

    def is_never(self) -> bool:
        return getattr(self, "kind", None) == "never"


class Ready(_VerdictBase):
    """Usable unchanged."""

    kind: Literal["ready"] = "ready"
    score: int


class Automatic(_VerdictBase):
    """Usable once ``adjustment`` is applied; no confirmation needed."""

    kind: Literal["automatic"] = "automatic"
    score: int
    adjustment: Adjustment


class Manual(_VerdictBase):
    """Not renderable; the user picks one of ``suggestions``."""

    kind: Literal["manual"] = "manual"
    score: int
    message: str
    suggestions: Tuple[Suggestion, ...] = ()


class Never(_VerdictBase):
    """The visualization cannot apply to this data cube."""

    kind: Literal["never"] = "never"

    @property
    def score(self) -> int:
        return 0


Verdict = Annotated[Union[Ready, Automatic, Manual, Never], Field(discriminator="kind")]

_VERDICT_ADAPTER: TypeAdapter = TypeAdapter(Verdict)


def parse_verdict(payload: Dict[str, Any]) -> Union[Ready, Automatic, Manual, Never]:
    return _VERDICT_ADAPTER.validate_python(payload)
