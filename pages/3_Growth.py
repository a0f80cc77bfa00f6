"""Growth Tracking Page.

Height history, growth rate and measurement staleness for each member.
"""

import streamlit as st
import pandas as pd

from gear_sizer.growth import analyze_growth_trend, growth_warning_reason, is_measurement_stale
from gear_sizer.sizing import calculate_age
from pages.components.charts import create_height_history_chart
from pages.components.family_state import get_family, get_settings, member_picker
from pages.components.unit_converter import format_height, format_weight

st.set_page_config(page_title="Growth | Gear Sizer", page_icon="📈", layout="wide")
st.title("📈 Growth Tracking")

settings = get_settings()
members, _ = get_family()

if not members:
    st.warning("⚠️ No family members found. Add family data first (see the home page).")
    st.stop()

# Overview of everyone
st.markdown("### Overview")
overview = []
for member in members:
    trend = analyze_growth_trend(member.measurement_history)
    measured_at = member.measurements.measured_at
    overview.append({
        "Name": member.name,
        "Age": calculate_age(member.date_of_birth),
        "Height": format_height(member.measurements.height, settings),
        "Last Measured": measured_at.date().isoformat() if measured_at else "-",
        "Stale": "Yes" if is_measurement_stale(member) else "No",
        "Growth (cm/month)": round(trend.growth_rate_cm_per_month, 2),
        "Warning": growth_warning_reason(member) or "",
    })
st.dataframe(pd.DataFrame(overview), use_container_width=True, hide_index=True)

st.divider()

member = member_picker(members)
trend = analyze_growth_trend(member.measurement_history)

col1, col2, col3 = st.columns(3)
col1.metric("Height", format_height(member.measurements.height, settings))
col2.metric("Weight", format_weight(member.measurements.weight, settings))
col3.metric("Growth Rate", f"{trend.growth_rate_cm_per_month:.2f} cm/month",
            delta=f"{trend.growth_rate_cm_per_month * 12:.1f} cm/year")

reason = growth_warning_reason(member)
if reason == "both":
    st.warning("⚠️ Growing fast and measurements are over 6 months old. Re-measure.")
elif reason == "stale":
    st.warning("⚠️ Measurements are over 6 months old. Re-measure before buying gear.")
elif reason == "growing":
    st.info("📈 Growing fast (0.3 cm/month or more). Check gear fit soon.")

if len(member.measurement_history) < 2:
    st.info("Record at least two measurements to see a growth trend.")

st.plotly_chart(create_height_history_chart(member), use_container_width=True)

if member.measurement_history:
    st.markdown("### Measurement History")
    history = sorted(member.measurement_history, key=lambda e: e.recorded_at, reverse=True)
    df = pd.DataFrame([
        {
            "Date": e.recorded_at.date().isoformat(),
            "Height (cm)": e.height,
            "Weight (kg)": e.weight,
            "Foot L (cm)": e.foot_length_left,
            "Foot R (cm)": e.foot_length_right,
        }
        for e in history
    ])
    st.dataframe(df, use_container_width=True, hide_index=True)
