"""Shoe Size Converter Page.

Convert a size between US, UK, EU, Mondopoint and centimeters, and show
every family member's sizes side by side.
"""

import streamlit as st
import pandas as pd

from gear_sizer.config import SIZE_SYSTEM_INCREMENTS, SIZE_SYSTEM_LABELS, SIZE_SYSTEMS
from gear_sizer.shoe_size import get_all_shoe_sizes, get_shoe_sizes_from_foot_length
from pages.components.charts import create_shoe_size_chart
from pages.components.family_state import get_family

st.set_page_config(page_title="Shoe Sizes | Gear Sizer", page_icon="👟", layout="wide")
st.title("👟 Shoe Size Converter")

DEFAULT_VALUES = {
    "cm": 27.0,
    "mondopoint": 270.0,
    "eu": 43.0,
    "uk": 9.0,
    "us-men": 10.0,
    "us-women": 11.5,
}

col1, col2 = st.columns([1, 2])
with col1:
    system = st.selectbox("Size system", SIZE_SYSTEMS, format_func=lambda s: SIZE_SYSTEM_LABELS[s])
    value = st.number_input(
        f"Size ({SIZE_SYSTEM_LABELS[system]})",
        min_value=0.0,
        max_value=400.0,
        value=DEFAULT_VALUES[system],
        step=float(SIZE_SYSTEM_INCREMENTS[system]),
    )

sizes = get_all_shoe_sizes(value, system)
labelled = {SIZE_SYSTEM_LABELS[s]: v for s, v in sizes.as_dict().items()}

with col2:
    cols = st.columns(len(labelled))
    for col, (label, size) in zip(cols, labelled.items()):
        col.metric(label, f"{size:g}")

st.plotly_chart(create_shoe_size_chart(labelled), use_container_width=True)
st.caption("Conversions are approximations; actual sizing varies by brand.")

members, _ = get_family()
if members:
    st.markdown("### Family Shoe Sizes")
    rows = []
    for member in members:
        foot_length = member.measurements.foot_length
        row = {"Name": member.name, "Foot (cm)": foot_length}
        for s, size in get_shoe_sizes_from_foot_length(foot_length).as_dict().items():
            if s != "cm":
                row[SIZE_SYSTEM_LABELS[s]] = size
        rows.append(row)

    df = pd.DataFrame(rows)
    st.dataframe(df, use_container_width=True, hide_index=True)
