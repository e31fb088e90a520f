from __future__ import annotations

import re
from numbers import Real
from typing import Any

from division.config import NAMED_ALIGNMENTS
from division.model.primitives import Alignment


def _snake_to_camel(name: str) -> str:
    return re.sub(r"_([a-z])", lambda m: m.group(1).upper(), name)


def format_alignment(alignment: Any) -> Alignment:
    """
    Convert the supported alignment formats to an `Alignment`.

    Supported formats:
        - Alignment: returned as is.
        - str: 'center', 'top', 'bottom', 'left', 'right', 'topLeft', 'topRight',
          'bottomLeft', 'bottomRight' (snake_case spellings like 'top_left' work too).
        - [dx, dy]: 0.0 is centered, -1.0 and 1.0 are the sides.
        - float: same value for dx and dy.

    Raises:
        ValueError: For unknown names or sequences not of length 2.
        TypeError: For any other input type.
    """
    if isinstance(alignment, Alignment):
        return alignment

    if isinstance(alignment, str):
        key = _snake_to_camel(alignment.strip())
        if key not in NAMED_ALIGNMENTS:
            raise ValueError(f"Unknown alignment: '{alignment}'")
        return Alignment(*NAMED_ALIGNMENTS[key])

    # bool is a Real
    if isinstance(alignment, Real) and not isinstance(alignment, bool):
        return Alignment(float(alignment), float(alignment))

    if isinstance(alignment, (list, tuple)):
        if len(alignment) != 2:
            raise ValueError(f"Alignment list must be [dx, dy], got {list(alignment)}")
        return Alignment(float(alignment[0]), float(alignment[1]))

    raise TypeError(f"Unsupported alignment type: {type(alignment).__name__}")
