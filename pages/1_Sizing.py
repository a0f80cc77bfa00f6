"""Sizing Recommendations Page.

Pick a family member and sport to see ski, pole, board, boot, skate and
helmet sizes.
"""

import streamlit as st

from gear_sizer.config import (
    ALPINE_TERRAIN_LABELS,
    ALPINE_TERRAINS,
    NORDIC_STYLES,
    SIZING_MODEL_LABELS,
    SIZING_MODELS,
    SKATE_BRANDS,
    SKILL_LEVELS,
    SPORT_LABELS,
    SPORTS,
)
from gear_sizer.growth import growth_warning_reason
from gear_sizer.sizing import calculate_age, recommend_for_member
from pages.components.charts import create_size_range_chart
from pages.components.family_state import get_family, get_settings, member_picker
from pages.components.sizing_display import length_rows, render_recommendation

st.set_page_config(page_title="Sizing | Gear Sizer", page_icon="📐", layout="wide")
st.title("📐 Sizing Recommendations")

settings = get_settings()
members, _ = get_family()

if not members:
    st.warning("⚠️ No family members found. Add family data first (see the home page).")
    st.stop()

col1, col2, col3 = st.columns(3)
with col1:
    member = member_picker(members)
with col2:
    sport = st.selectbox("Sport", SPORTS, index=SPORTS.index(settings.default_sport),
                         format_func=lambda s: SPORT_LABELS[s])
with col3:
    recorded_skill = member.skill_levels.get(sport, "intermediate")
    skill = st.selectbox("Skill level", SKILL_LEVELS, index=SKILL_LEVELS.index(recorded_skill),
                         format_func=str.title)

model = settings.sizing_model
terrain = "all-mountain"
brand = "bauer"
if sport in NORDIC_STYLES:
    model = st.radio("Sizing chart", SIZING_MODELS, index=SIZING_MODELS.index(settings.sizing_model),
                     format_func=lambda m: SIZING_MODEL_LABELS[m], horizontal=True)
elif sport == "alpine":
    terrain = st.radio("Terrain", ALPINE_TERRAINS, index=ALPINE_TERRAINS.index("all-mountain"),
                       format_func=lambda t: ALPINE_TERRAIN_LABELS[t], horizontal=True)
elif sport == "hockey":
    brand = st.radio("Skate brand", SKATE_BRANDS, format_func=str.upper, horizontal=True)

if sport == "alpine":
    with st.sidebar:
        din = st.number_input("Current binding DIN", min_value=0.0, max_value=16.0,
                              value=settings.default_din or 0.0, step=0.5, help="0 = not set")
        settings.default_din = din or None

reason = growth_warning_reason(member)
if reason in ("stale", "both"):
    st.warning(f"⚠️ {member.name}'s measurements are over 6 months old. Re-measure before buying gear.")
if reason in ("growing", "both"):
    st.info(f"📈 {member.name} is growing fast. Consider sizing toward the upper end.")

rec = recommend_for_member(member, sport, skill_level=skill, model=model, terrain=terrain, brand=brand)

st.markdown(f"### {member.name} ({calculate_age(member.date_of_birth)}) - {SPORT_LABELS[sport]}")
render_recommendation(rec, settings)

rows = length_rows(rec)
if rows:
    st.plotly_chart(create_size_range_chart(rows), use_container_width=True)

st.markdown("---")
st.caption("💡 **Tip:** Enter a binding's current DIN in the sidebar to check it against the recommended range.")
