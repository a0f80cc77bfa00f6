"""Unit conversion utilities for imperial/metric display.

Measurements and sizing results are always metric (cm, kg). These helpers
convert them for display according to the user's AppSettings.
"""

from gear_sizer.models import AppSettings

# Conversion constants
LBS_PER_KG = 2.20462
CM_PER_INCH = 2.54
INCHES_PER_FOOT = 12


def kg_to_lbs(kg: float) -> float:
    """Convert kilograms to pounds."""
    return kg * LBS_PER_KG


def cm_to_ft_in(cm: float) -> tuple:
    """Convert centimeters to (feet, inches)."""
    total_inches = cm / CM_PER_INCH
    feet = int(total_inches // INCHES_PER_FOOT)
    inches = int(round(total_inches % INCHES_PER_FOOT))
    if inches == 12:
        feet += 1
        inches = 0
    return feet, inches


def cm_to_in(cm: float) -> float:
    return cm / CM_PER_INCH


def format_height(cm: float, settings: AppSettings) -> str:
    if settings.height_unit == "ft-in":
        feet, inches = cm_to_ft_in(cm)
        return f"{feet}'{inches}\""
    return f"{cm:g} cm"


def format_weight(kg: float, settings: AppSettings) -> str:
    if settings.weight_unit == "lbs":
        return f"{kg_to_lbs(kg):.0f} lbs"
    return f"{kg:g} kg"


def format_length(cm: float, settings: AppSettings) -> str:
    """Format a ski, board or pole length in the preferred length unit."""
    if settings.ski_length_unit == "in":
        return f"{cm_to_in(cm):.0f} in"
    return f"{cm:g} cm"
