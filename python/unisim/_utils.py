"""Internal utilities for unisim."""

from typing import Union

from unisim._core.errors import ValidationError
from unisim.enums import NormalizationMode, Unit

# Valid normalization mode names (lowercase)
VALID_MODES = frozenset(m.value for m in NormalizationMode)

# Valid comparison units (lowercase)
VALID_UNITS = frozenset(u.value for u in Unit)


def ensure_str(value: object, name: str) -> str:
    """Reject non-string arguments with a TypeError.

    Args:
        value: The argument to check.
        name: Parameter name used in the error message.

    Returns:
        The value unchanged.

    Raises:
        TypeError: If value is not a str.
    """
    if not isinstance(value, str):
        raise TypeError(f"{name} must be str, got {type(value).__name__}")
    return value


def normalize_mode(mode: Union[str, NormalizationMode]) -> NormalizationMode:
    """Convert a string to a NormalizationMode, or pass an enum member through.

    Args:
        mode: Either a NormalizationMode value or a mode name.

    Returns:
        The matching NormalizationMode member.

    Raises:
        ValidationError: If the mode name is not recognized.
        TypeError: If mode is not a string or NormalizationMode enum.

    Example:
        >>> normalize_mode("Strict")
        <NormalizationMode.STRICT: 'strict'>
    """
    if isinstance(mode, NormalizationMode):
        return mode

    if isinstance(mode, str):
        mode_lower = mode.lower()
        if mode_lower in VALID_MODES:
            return NormalizationMode(mode_lower)
        raise ValidationError(
            f"Unknown normalization mode: '{mode}'. Valid options: {sorted(VALID_MODES)}"
        )

    raise TypeError(
        f"mode must be str or NormalizationMode enum, got {type(mode).__name__}"
    )


def normalize_unit(unit: Union[str, Unit]) -> Unit:
    """Convert a string to a Unit, or pass an enum member through.

    Raises:
        ValidationError: If the unit name is not recognized.
        TypeError: If unit is not a string or Unit enum.
    """
    if isinstance(unit, Unit):
        return unit

    if isinstance(unit, str):
        unit_lower = unit.lower()
        if unit_lower in VALID_UNITS:
            return Unit(unit_lower)
        raise ValidationError(f"Unknown unit: '{unit}'. Valid options: {sorted(VALID_UNITS)}")

    raise TypeError(f"unit must be str or Unit enum, got {type(unit).__name__}")


def check_max_distance(max_distance: int) -> int:
    """Validate a max_distance argument."""
    if isinstance(max_distance, bool) or not isinstance(max_distance, int):
        raise TypeError(f"max_distance must be int, got {type(max_distance).__name__}")
    if max_distance < 0:
        raise ValidationError(f"max_distance must be non-negative, got {max_distance}")
    return max_distance


__all__ = [
    "ensure_str",
    "normalize_mode",
    "normalize_unit",
    "check_max_distance",
    "VALID_MODES",
    "VALID_UNITS",
]
