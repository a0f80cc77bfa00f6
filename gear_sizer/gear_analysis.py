"""Gear photo analysis.

Guesses a gear item's brand, model, size and sport-specific details from
photos plus the sport/type the user picked. The bundled
``HeuristicGearAnalyzer`` does no image recognition: it maps the hints to
a representative item and scores confidence by which photos were
supplied. A real vision backend can be plugged in by subclassing
``GearPhotoAnalyzer`` and passing it to ``analyze_gear_photos``.

Also holds the parsers for the strings printed on gear labels
("170cm", "121/68/103", "R15.5").
"""

import logging
import re
from typing import Optional

from gear_sizer.models import (
    AlpineSkiDetails,
    BindingInfo,
    BootDetails,
    ExtendedGearDetails,
    GearAnalysisResult,
    NordicSkiDetails,
    SkateDetails,
    SkiProfile,
    SnowboardDetails,
)

logger = logging.getLogger(__name__)

CONFIDENCE_WITH_PHOTOS = 0.85
CONFIDENCE_WITHOUT_PHOTOS = 0.3
CONFIDENCE_UNKNOWN_GEAR = 0.5

NO_PHOTOS_NOTE = "No photos provided - results may be inaccurate"
FALLBACK_NOTE = "AI analysis unavailable - showing demo data"


class GearPhotoAnalyzer:
    """Interface for photo analysis backends."""

    def analyze(self, photos: list, hints: dict) -> GearAnalysisResult:
        raise NotImplementedError


class HeuristicGearAnalyzer(GearPhotoAnalyzer):
    """Deterministic hint-to-shape mapping with photo-based confidence."""

    def analyze(self, photos: list, hints: dict) -> GearAnalysisResult:
        sport = hints.get("sport")
        gear_type = hints.get("type")
        result = GearAnalysisResult(confidence=CONFIDENCE_WITH_PHOTOS)

        has_usable_photo = any(p.type in ("labelView", "fullView") for p in photos)
        if not has_usable_photo:
            result.confidence = CONFIDENCE_WITHOUT_PHOTOS
            result.notes.append(NO_PHOTOS_NOTE)

        if gear_type == "ski" and sport == "alpine":
            self._alpine_ski(result)
        elif gear_type == "ski" and sport in ("nordic-classic", "nordic-skate", "nordic-combi"):
            self._nordic_ski(result, sport)
        elif gear_type == "snowboard":
            self._snowboard(result)
        elif gear_type == "boot":
            self._boot(result)
        elif gear_type == "skate":
            self._skate(result)
        else:
            result.brand = "Unknown"
            result.model = "Unknown"
            result.confidence = min(result.confidence, CONFIDENCE_UNKNOWN_GEAR)
            result.notes.append("Unable to determine specific gear details")

        return result

    @staticmethod
    def _alpine_ski(result: GearAnalysisResult) -> None:
        result.brand, result.model, result.size = "Atomic", "Redster X9", "170cm"
        result.year, result.condition = 2023, "good"
        result.extended_details = ExtendedGearDetails(
            type="alpineSki",
            details=AlpineSkiDetails(
                length_cm=170,
                profile=SkiProfile(tip=121, waist=68, tail=103),
                radius_m=15.5,
                bindings=BindingInfo(brand="Atomic", model="X12 GW", din_range="4-12"),
                rocker="tip rocker",
            ),
        )
        result.notes.append("Detected alpine ski with integrated bindings")

    @staticmethod
    def _nordic_ski(result: GearAnalysisResult, sport: str) -> None:
        style = sport.split("-", 1)[1]
        result.brand, result.model, result.size = "Fischer", "RCS Skate", "186cm"
        result.year, result.condition = 2022, "good"
        result.extended_details = ExtendedGearDetails(
            type="nordicSki",
            details=NordicSkiDetails(
                length_cm=186,
                style=style,
                stiffness="medium",
                grip="skin" if style == "classic" else None,
            ),
        )

    @staticmethod
    def _snowboard(result: GearAnalysisResult) -> None:
        result.brand, result.model, result.size = "Burton", "Custom", "156cm"
        result.year, result.condition = 2023, "new"
        result.extended_details = ExtendedGearDetails(
            type="snowboard",
            details=SnowboardDetails(
                length_cm=156,
                profile=SkiProfile(tip=295, waist=252, tail=290),
                flex=6,
                shape="directional-twin",
            ),
        )

    @staticmethod
    def _boot(result: GearAnalysisResult) -> None:
        result.brand, result.model, result.size = "Tecnica", "Mach1 MV 120", "27.5"
        result.year, result.condition = 2023, "good"
        result.extended_details = ExtendedGearDetails(
            type="boot",
            details=BootDetails(mondopoint=275, flex=120, last_width=100),
        )

    @staticmethod
    def _skate(result: GearAnalysisResult) -> None:
        result.brand, result.model, result.size = "Bauer", "Supreme 3S Pro", "8D"
        result.year, result.condition = 2022, "good"
        result.extended_details = ExtendedGearDetails(
            type="skate",
            details=SkateDetails(size_us=8, width="D", holder="Tuuk LS Pulse TI", steel="LS5"),
        )


def analyze_gear_photos(
    photos: list,
    hints: Optional[dict] = None,
    analyzer: Optional[GearPhotoAnalyzer] = None,
) -> GearAnalysisResult:
    """Analyze gear photos, falling back to the heuristic guess on failure.

    ``hints`` may carry "sport" and "type"; they fill in whatever the
    analyzer could not determine.
    """
    hints = hints or {}
    heuristic = HeuristicGearAnalyzer()
    if analyzer is None or isinstance(analyzer, HeuristicGearAnalyzer):
        return heuristic.analyze(photos, hints)

    try:
        result = analyzer.analyze(photos, hints)
    except Exception:
        logger.exception("Photo analysis failed, falling back to heuristic guess")
        result = heuristic.analyze(photos, hints)
        result.notes.append(FALLBACK_NOTE)
        return result

    if not result.sport and hints.get("sport"):
        result.sport = hints["sport"]
    if not result.type and hints.get("type"):
        result.type = hints["type"]
    return result


# ============================================
# LABEL STRING PARSING
# ============================================

def parse_ski_size(size_string: str) -> Optional[int]:
    """Extract the length from "170cm", "175 cm" or "186"."""
    match = re.search(r"(\d+)", size_string)
    return int(match.group(1)) if match else None


def parse_profile(profile_string: str) -> Optional[SkiProfile]:
    """Parse "tip/waist/tail" or "tip-waist-tail" widths in mm."""
    match = re.fullmatch(r"(\d+)[/\-\s]+(\d+)[/\-\s]+(\d+)", profile_string.strip())
    if not match:
        return None
    tip, waist, tail = (int(g) for g in match.groups())
    return SkiProfile(tip=tip, waist=waist, tail=tail)


def parse_radius(radius_string: str) -> Optional[float]:
    """Parse a turn radius such as "R15.5", "r15.5", "15.5m" or "16"."""
    match = re.search(r"R?(\d+(?:\.\d+)?)", radius_string, re.IGNORECASE)
    return float(match.group(1)) if match else None


def format_profile(profile: SkiProfile) -> str:
    return f"{profile.tip}/{profile.waist}/{profile.tail}"


def format_ski_details(details: AlpineSkiDetails) -> str:
    """Format ski details as "170cm | 121/68/103 | R15.5m", skipping missing parts."""
    parts = []
    if details.length_cm:
        parts.append(f"{details.length_cm}cm")
    if details.profile:
        parts.append(format_profile(details.profile))
    if details.radius_m:
        parts.append(f"R{details.radius_m:g}m")
    return " | ".join(parts)
