from division.model.enums import OverflowType


def format_overflow(overflow: str | OverflowType) -> OverflowType:
    """'visible', 'hidden' or 'scroll' (case-insensitive) -> `OverflowType`."""
    if isinstance(overflow, OverflowType):
        return overflow
    try:
        return OverflowType(str(overflow).strip().lower())
    except ValueError:
        raise ValueError(
            f"Invalid overflow value: '{overflow}'. Expected one of "
            f"{', '.join(o.value for o in OverflowType)}."
        ) from None
