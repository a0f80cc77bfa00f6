"""Sizing result display components for Streamlit pages."""

import streamlit as st

from gear_sizer.models import AppSettings, SizingRecommendation
from gear_sizer.shoe_size import convert_shoe_size, format_number
from gear_sizer.sizing import check_din_safety, format_size_range
from pages.components.unit_converter import format_length

BOOT_UNIT_LABELS = {
    "mp": "Mondopoint",
    "eu": "EU",
    "us-men": "US Men",
    "us-women": "US Women",
}


def _length(low: float, high: float, recommended: float, settings: AppSettings) -> str:
    if settings.sizing_display == "single":
        return format_length(recommended, settings)
    return f"{format_length(low, settings)} - {format_length(high, settings)}"


def _boot(mondopoint: int, settings: AppSettings) -> str:
    if settings.boot_unit == "mp":
        return str(mondopoint)
    return format_number(convert_shoe_size(mondopoint, "mondopoint", settings.boot_unit))


def render_recommendation(rec: SizingRecommendation, settings: AppSettings):
    """Render sizing metrics for one recommendation.

    Args:
        rec: SizingRecommendation from recommend_for_member
        settings: Display preferences (length unit, range/single, boot unit)
    """
    boot_label = f"Boots ({BOOT_UNIT_LABELS.get(settings.boot_unit, 'Mondopoint')})"

    if rec.nordic_ski:
        ski = rec.nordic_ski
        if ski.model_name:
            st.caption(f"Sizing chart: {ski.model_name}")
        cols = st.columns(3)
        cols[0].metric("Skis", _length(ski.ski_length_min, ski.ski_length_max, ski.ski_length_recommended, settings),
                       help=f"Recommended {format_length(ski.ski_length_recommended, settings)}")
        cols[1].metric("Poles", _length(ski.pole_length_min, ski.pole_length_max, ski.pole_length_recommended, settings),
                       help=f"Recommended {format_length(ski.pole_length_recommended, settings)}")
        if rec.nordic_boot:
            cols[2].metric(boot_label, _boot(rec.nordic_boot.mondopoint, settings))
        if ski.fa_value_range:
            st.metric("FA Value", format_size_range(ski.fa_value_range.min, ski.fa_value_range.max, "kg"))
        for note in ski.model_notes:
            st.info(note)

    if rec.alpine_ski:
        ski = rec.alpine_ski
        cols = st.columns(3)
        cols[0].metric("Skis", _length(ski.ski_length_min, ski.ski_length_max, ski.ski_length_recommended, settings),
                       help=f"Recommended {format_length(ski.ski_length_recommended, settings)}")
        cols[1].metric("DIN", format_size_range(ski.din.min, ski.din.max, "").strip())
        if rec.alpine_waist_width:
            cols[2].metric("Waist Width",
                           format_size_range(rec.alpine_waist_width.min, rec.alpine_waist_width.max, "mm"))

        if settings.default_din is not None:
            render_din_check(settings.default_din, ski.din)

    if rec.alpine_boot:
        boot = rec.alpine_boot
        cols = st.columns(4)
        cols[0].metric(boot_label, _boot(boot.mondopoint, settings))
        cols[1].metric("Shell", f"{boot.shell_size}")
        cols[2].metric("Last", boot.last_width.title(), help=f"{boot.last_width_mm} mm")
        cols[3].metric("Flex", format_size_range(boot.flex_rating.min, boot.flex_rating.max, "").strip())

    if rec.snowboard:
        board = rec.snowboard
        cols = st.columns(3)
        cols[0].metric("Board", _length(board.board_length_min, board.board_length_max,
                                        board.board_length_recommended, settings),
                       help=f"Recommended {format_length(board.board_length_recommended, settings)}")
        cols[1].metric("Min Waist", f"{board.waist_width_min} mm")
        cols[2].metric("Stance", format_size_range(board.stance_width.min, board.stance_width.max, "cm"))
    if rec.snowboard_boot:
        st.metric(boot_label, _boot(rec.snowboard_boot.mondopoint, settings))

    if rec.hockey_skate:
        skate = rec.hockey_skate
        cols = st.columns(3)
        cols[0].metric("Skate (US)", f"{format_number(skate.skate_size_us)} {skate.width}")
        cols[1].metric("Skate (EU)", f"{skate.skate_size_eu}")
        cols[2].metric("Brand", skate.brand.upper())

    if rec.helmet:
        helmet = rec.helmet
        st.metric("Helmet", helmet.size, help=format_size_range(helmet.range_min, helmet.range_max, "cm"))


def render_din_check(din_setting: float, recommended):
    """Show whether a binding's DIN setting falls in the recommended range.

    Color coding:
        - Green: safe
        - Orange: too low (pre-release)
        - Red: too high (may not release)
    """
    status = check_din_safety(din_setting, recommended)
    if status == "safe":
        st.success(f"DIN {format_number(din_setting)} is within the recommended range.")
    elif status == "too-low":
        st.warning(f"DIN {format_number(din_setting)} is below the recommended range; "
                   "the binding may release during normal skiing.")
    else:
        st.error(f"DIN {format_number(din_setting)} is above the recommended range; "
                 "the binding may not release in a fall.")


def length_rows(rec: SizingRecommendation) -> list:
    """(label, min, max, recommended) rows for the range chart."""
    rows = []
    if rec.nordic_ski:
        ski = rec.nordic_ski
        rows.append(("Skis", ski.ski_length_min, ski.ski_length_max, ski.ski_length_recommended))
        rows.append(("Poles", ski.pole_length_min, ski.pole_length_max, ski.pole_length_recommended))
    if rec.alpine_ski:
        ski = rec.alpine_ski
        rows.append(("Skis", ski.ski_length_min, ski.ski_length_max, ski.ski_length_recommended))
    if rec.snowboard:
        board = rec.snowboard
        rows.append(("Board", board.board_length_min, board.board_length_max, board.board_length_recommended))
    return rows
