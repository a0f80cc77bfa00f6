"""Streamlit frontend for the Gear Sizer app.

Main entry point for the multi-page Streamlit application.
"""

import logging

import streamlit as st

from gear_sizer.config import (
    DATA_PATH,
    GEAR_TYPE_LABELS,
    SIZING_MODEL_LABELS,
    SIZING_MODELS,
    SPORT_LABELS,
    SPORTS,
)
from gear_sizer.growth import growth_warning_reason
from gear_sizer.notifications import filter_dismissed, generate_notifications
from gear_sizer.sizing import calculate_age
from pages.components.family_state import get_dismissed, get_family, get_settings
from pages.components.unit_converter import format_height, format_weight

logging.basicConfig(level=logging.INFO, format="%(asctime)s - %(name)s - %(levelname)s - %(message)s")

st.set_page_config(
    page_title="Gear Sizer",
    page_icon="⛷️",
    layout="wide",
    initial_sidebar_state="expanded"
)

settings = get_settings()
members, gear = get_family()
dismissed = get_dismissed()

GROWTH_BADGES = {
    "stale": "📏 Re-measure",
    "growing": "📈 Growing",
    "both": "📈📏 Growing, re-measure",
}
NOTIFICATION_ICONS = {"replace": "🔴", "service": "🟠", "old-gear": "🟡"}

# Sidebar: display preferences
with st.sidebar:
    st.markdown("## ⛷️ Gear Sizer")
    st.markdown("---")
    st.markdown("### Settings")

    settings.height_unit = st.radio("Height", ["cm", "ft-in"],
                                    index=["cm", "ft-in"].index(settings.height_unit), horizontal=True)
    settings.weight_unit = st.radio("Weight", ["kg", "lbs"],
                                    index=["kg", "lbs"].index(settings.weight_unit), horizontal=True)
    settings.ski_length_unit = st.radio("Ski length", ["cm", "in"],
                                        index=["cm", "in"].index(settings.ski_length_unit), horizontal=True)
    settings.sizing_display = st.radio("Show sizes as", ["range", "single"],
                                       index=["range", "single"].index(settings.sizing_display), horizontal=True)
    boot_units = ["mp", "eu", "us-men", "us-women"]
    settings.boot_unit = st.selectbox("Boot size unit", boot_units, index=boot_units.index(settings.boot_unit))
    settings.default_sport = st.selectbox("Default sport", SPORTS, index=SPORTS.index(settings.default_sport),
                                          format_func=lambda s: SPORT_LABELS[s])
    settings.sizing_model = st.selectbox("Nordic sizing chart", SIZING_MODELS,
                                         index=SIZING_MODELS.index(settings.sizing_model),
                                         format_func=lambda m: SIZING_MODEL_LABELS[m])
    settings.notifications_enabled = st.checkbox("Show gear notifications", value=settings.notifications_enabled)

    st.markdown("---")
    st.markdown("### Navigation")
    st.markdown("- 📐 **Sizing** - Recommendations per sport")
    st.markdown("- 👟 **Shoe Sizes** - Size conversion")
    st.markdown("- 📈 **Growth** - Measurement history")
    st.markdown("- 🎿 **Gear** - Inventory & photo analysis")

# Main home page
st.title("⛷️ Family Gear Sizer")

if not members:
    st.info(f"No family data found at `{DATA_PATH}`.")
    st.markdown("""
Create a JSON file with your family's measurements and gear, then set the
`GEAR_SIZER_DATA` environment variable to its path (or save it at the default
location above). The **Shoe Sizes** page works without any family data.
""")
    st.stop()

st.markdown("### Family")

for member in members:
    m = member.measurements
    reason = growth_warning_reason(member)
    owned = [g for g in gear if g.owner_id == member.id]

    with st.container(border=True):
        col1, col2, col3, col4 = st.columns([2, 1, 1, 2])
        with col1:
            st.markdown(f"#### {member.name}")
            st.caption(f"Age {calculate_age(member.date_of_birth)}")
            if reason:
                st.warning(GROWTH_BADGES[reason])
        col2.metric("Height", format_height(m.height, settings))
        col3.metric("Weight", format_weight(m.weight, settings))
        with col4:
            st.write(f"**Gear:** {len(owned)} items")
            if owned:
                st.caption(", ".join(sorted({GEAR_TYPE_LABELS.get(g.type, g.type) for g in owned})))

if settings.notifications_enabled:
    st.markdown("---")
    notifications = filter_dismissed(generate_notifications(members, gear), dismissed)
    st.markdown(f"### Notifications ({len(notifications)})")

    if not notifications:
        st.success("All gear looks good.")

    for n in notifications:
        col1, col2 = st.columns([6, 1])
        with col1:
            st.markdown(f"{NOTIFICATION_ICONS.get(n.type, '')} **{n.title}**")
            st.caption(n.body)
        with col2:
            if st.button("Dismiss", key=f"dismiss-{n.id}"):
                dismissed.add(n.id)
                st.rerun()

st.markdown("---")
st.caption("💡 **Tip:** Sizes are rules of thumb. Always try gear on, and have a certified technician set binding DIN values.")
