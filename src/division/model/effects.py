"""Non-paint effects attached to a style: ripple and overflow."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, TYPE_CHECKING

from division.model.enums import Axis, OverflowType

if TYPE_CHECKING:
    from division.model.primitives import Color


@dataclass(frozen=True)
class RippleModel:
    """Material ripple effect shown on touch."""
    enable: bool
    splash_color: Optional[Color] = None
    highlight_color: Optional[Color] = None


@dataclass(frozen=True)
class OverflowModel:
    overflow: OverflowType
    direction: Axis = Axis.VERTICAL

    @property
    def clips(self) -> bool:
        return self.overflow != OverflowType.VISIBLE
