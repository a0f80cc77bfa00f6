"""Gear Inventory Page.

Browse the family's gear, and add items with help from photo analysis.
"""

import uuid
from datetime import datetime, timezone

import streamlit as st
import pandas as pd

from gear_sizer.config import (
    GEAR_CONDITIONS,
    GEAR_STATUSES,
    GEAR_TYPE_LABELS,
    GEAR_TYPES,
    SPORT_LABELS,
    SPORTS,
)
from gear_sizer.gear_analysis import analyze_gear_photos, format_ski_details
from gear_sizer.models import GearItem, GearPhoto
from pages.components.family_state import add_gear_item, get_family, member_picker

st.set_page_config(page_title="Gear | Gear Sizer", page_icon="🎿", layout="wide")
st.title("🎿 Gear Inventory")

members, gear = get_family()
names = {m.id: m.name for m in members}

# Search and filter controls
st.markdown("### Inventory")

col1, col2, col3 = st.columns(3)
with col1:
    owner_filter = st.multiselect("Owner", options=[m.id for m in members],
                                  format_func=lambda i: names[i])
with col2:
    type_filter = st.multiselect("Type", options=GEAR_TYPES, format_func=lambda t: GEAR_TYPE_LABELS[t])
with col3:
    condition_filter = st.multiselect("Condition", options=GEAR_CONDITIONS, format_func=str.title)

filtered = gear
if owner_filter:
    filtered = [g for g in filtered if g.owner_id in owner_filter]
if type_filter:
    filtered = [g for g in filtered if g.type in type_filter]
if condition_filter:
    filtered = [g for g in filtered if g.condition in condition_filter]

if filtered:
    df = pd.DataFrame([
        {
            "Owner": names.get(g.owner_id, "Unknown"),
            "Type": GEAR_TYPE_LABELS.get(g.type, g.type),
            "Brand": g.brand,
            "Model": g.model,
            "Size": g.size,
            "Year": g.year or "",
            "Condition": g.condition,
            "Status": g.status or "",
            "Location": g.location,
        }
        for g in filtered
    ])
    st.dataframe(df, use_container_width=True, hide_index=True)
    st.caption(f"Showing {len(filtered)} of {len(gear)} items")
else:
    st.info("No gear matches the current filters.")

if not members:
    st.stop()

st.divider()
st.markdown("### Add Gear")

col1, col2 = st.columns(2)
with col1:
    sport = st.selectbox("Sport", SPORTS, format_func=lambda s: SPORT_LABELS[s])
with col2:
    gear_type = st.selectbox("Type", GEAR_TYPES, format_func=lambda t: GEAR_TYPE_LABELS[t], key="add_type")

uploads = st.file_uploader("Photos (label or full view)", type=["jpg", "jpeg", "png"],
                           accept_multiple_files=True)
photo_type = st.radio("Photo shows", ["labelView", "fullView", "other"], horizontal=True,
                      format_func=lambda t: {"labelView": "Label", "fullView": "Full item", "other": "Other"}[t])

if st.button("🔍 Analyze Photos"):
    photos = [GearPhoto(id=str(i), type=photo_type, url=f.name) for i, f in enumerate(uploads or [], 1)]
    st.session_state.analysis = analyze_gear_photos(photos, {"sport": sport, "type": gear_type})
    st.session_state.analysis_photos = photos

analysis = st.session_state.get("analysis")
if analysis:
    st.metric("Confidence", f"{analysis.confidence:.0%}")
    if analysis.extended_details and analysis.extended_details.type == "alpineSki":
        st.caption(format_ski_details(analysis.extended_details.details))
    for note in analysis.notes:
        st.caption(f"• {note}")

with st.form("gear_form"):
    owner = member_picker(members, "Owner")
    col1, col2, col3 = st.columns(3)
    with col1:
        brand = st.text_input("Brand*", value=(analysis.brand if analysis else "") or "")
        model = st.text_input("Model", value=(analysis.model if analysis else "") or "")
    with col2:
        size = st.text_input("Size", value=(analysis.size if analysis else "") or "")
        year = st.number_input("Year", min_value=1980, max_value=datetime.now().year + 1,
                               value=(analysis.year if analysis and analysis.year else datetime.now().year))
    with col3:
        default_condition = analysis.condition if analysis and analysis.condition else "good"
        condition = st.selectbox("Condition", GEAR_CONDITIONS, index=GEAR_CONDITIONS.index(default_condition),
                                 format_func=str.title)
        status = st.selectbox("Status", GEAR_STATUSES, format_func=lambda s: s.replace("-", " ").title())
    location = st.text_input("Location", placeholder="e.g., garage rack")
    notes = st.text_area("Notes")

    submitted = st.form_submit_button("💾 Save Gear", use_container_width=True)

    if submitted:
        if not brand.strip():
            st.error("⚠️ Brand is required")
        else:
            item = GearItem(
                id=uuid.uuid4().hex[:12],
                owner_id=owner.id,
                sports=[sport],
                type=gear_type,
                brand=brand.strip(),
                model=model.strip(),
                size=size.strip(),
                condition=condition,
                year=int(year),
                status=status,
                location=location.strip(),
                notes=notes.strip(),
                photos=st.session_state.get("analysis_photos", []),
                extended_details=analysis.extended_details if analysis else None,
                updated_at=datetime.now(timezone.utc),
            )
            try:
                add_gear_item(members, gear, item)
                st.success(f"✅ Saved {item.brand} {item.model} for {owner.name}")
                st.session_state.pop("analysis", None)
                st.session_state.pop("analysis_photos", None)
                st.rerun()
            except OSError as e:
                st.error(f"❌ Error saving gear: {e}")
