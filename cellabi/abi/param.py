"""Named function and event parameters."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .param_type import ParamType


@dataclass(frozen=True, slots=True)
class Param:
    """A named element of a function, event or tuple parameter list."""

    name: str
    kind: ParamType

    def type_signature(self) -> str:
        return self.kind.type_signature()

    def __str__(self) -> str:
        return f"{self.name}: {self.kind}"
