"""Shoe size conversion between measurement systems.

Supported systems:
- cm          foot length in centimeters (the base unit)
- mondopoint  foot length in millimeters
- eu          EU = (cm + 1.5) × 1.5
- uk          UK = (cm - 22) × 3
- us-men      US Men = UK + 1
- us-women    US Women = US Men + 1.5

Every conversion goes through centimeters. These are approximations;
actual sizing varies by brand.
"""

import math

from gear_sizer.config import (
    SIZE_SYSTEM_INCREMENTS,
    SIZE_SYSTEM_LABELS,
    SIZE_SYSTEM_SHORT_LABELS,
    SIZE_SYSTEMS,
)
from gear_sizer.models import AllShoeSizes


def round_half_up(value: float) -> int:
    """Round to the nearest integer, halves rounding up (2.5 -> 3)."""
    return int(math.floor(value + 0.5))


def round_to_increment(value: float, increment: float) -> float:
    """Round to the nearest increment (0.1, 0.5, 1), halves rounding up."""
    factor = round(1 / increment)
    return math.floor(value * factor + 0.5) / factor


def _check_system(system: str) -> None:
    if system not in SIZE_SYSTEMS:
        raise ValueError(f"Unknown size system: {system!r}. Choose from: {', '.join(SIZE_SYSTEMS)}")


def to_cm(value: float, system: str) -> float:
    """Convert a size in any system to foot length in centimeters."""
    _check_system(system)
    if system == "cm":
        return value
    if system == "mondopoint":
        return value / 10
    if system == "eu":
        return value / 1.5 - 1.5
    if system == "uk":
        return value / 3 + 22
    if system == "us-men":
        return (value - 1) / 3 + 22
    return (value - 2.5) / 3 + 22  # us-women


def from_cm(cm: float, system: str) -> float:
    """Convert foot length in cm to a system, rounded to its display increment."""
    _check_system(system)
    if system == "cm":
        raw = cm
    elif system == "mondopoint":
        return round_half_up(cm * 10)
    elif system == "eu":
        raw = (cm + 1.5) * 1.5
    elif system == "uk":
        raw = (cm - 22) * 3
    elif system == "us-men":
        raw = (cm - 22) * 3 + 1
    else:
        raw = (cm - 22) * 3 + 2.5
    return round_to_increment(raw, SIZE_SYSTEM_INCREMENTS[system])


def convert_shoe_size(value: float, from_system: str, to_system: str) -> float:
    """Convert between any two size systems."""
    return from_cm(to_cm(value, from_system), to_system)


def get_all_shoe_sizes(value: float, system: str = "cm") -> AllShoeSizes:
    """Get every size equivalent from a single measurement."""
    cm = to_cm(value, system)
    return AllShoeSizes(
        cm=from_cm(cm, "cm"),
        mondopoint=from_cm(cm, "mondopoint"),
        eu=from_cm(cm, "eu"),
        uk=from_cm(cm, "uk"),
        us_men=from_cm(cm, "us-men"),
        us_women=from_cm(cm, "us-women"),
    )


def get_shoe_sizes_from_foot_length(foot_length_cm: float) -> AllShoeSizes:
    return get_all_shoe_sizes(foot_length_cm, "cm")


def format_number(value: float) -> str:
    """Render a size without a trailing ".0" (7.0 -> "7", 10.5 -> "10.5")."""
    return f"{value:g}"


def format_shoe_size(system: str, value: float) -> str:
    """Format a size with its short system label, e.g. "US M 10.5"."""
    _check_system(system)
    return f"{SIZE_SYSTEM_SHORT_LABELS[system]} {format_number(value)}"


def get_size_system_label(system: str) -> str:
    _check_system(system)
    return SIZE_SYSTEM_LABELS[system]
