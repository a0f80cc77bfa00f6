"""Growth and measurement staleness analysis.

Children outgrow gear quickly. A member under 18 is flagged when their
current measurements are more than six months old, or when their
measurement history shows them growing at 0.3 cm/month (~3.6 cm/year)
or faster. Months are average months of 30.4375 days throughout.
"""

from datetime import datetime, timezone
from typing import Optional

from gear_sizer.config import (
    ADULT_AGE,
    DAYS_PER_MONTH,
    GROWTH_THRESHOLD_CM_PER_MONTH,
    STALE_MONTHS,
)
from gear_sizer.models import FamilyMember, GrowthTrend
from gear_sizer.sizing import calculate_age

SECONDS_PER_MONTH = DAYS_PER_MONTH * 24 * 60 * 60


def _as_utc(moment: datetime) -> datetime:
    """Treat naive datetimes as UTC so they compare with aware ones."""
    if moment.tzinfo is None:
        return moment.replace(tzinfo=timezone.utc)
    return moment


def _now(now: Optional[datetime]) -> datetime:
    return _as_utc(now) if now is not None else datetime.now(timezone.utc)


def months_between(start: datetime, end: datetime) -> float:
    """Elapsed average months from start to end."""
    return (_as_utc(end) - _as_utc(start)).total_seconds() / SECONDS_PER_MONTH


def is_measurement_stale(member: FamilyMember, now: Optional[datetime] = None) -> bool:
    """True if the member is under 18 and measured more than 6 months ago."""
    now = _now(now)
    if calculate_age(member.date_of_birth, now.date()) >= ADULT_AGE:
        return False

    measured_at = member.measurements.measured_at
    if measured_at is None:
        return False
    return months_between(measured_at, now) > STALE_MONTHS


def analyze_growth_trend(history: list) -> GrowthTrend:
    """Least-squares slope of height (cm) against time (months).

    Entries are sorted by recorded_at; time is measured from the earliest
    one. Fewer than two entries, or all entries recorded at the same
    moment, give a flat trend.
    """
    if len(history) < 2:
        return GrowthTrend(is_growing=False, growth_rate_cm_per_month=0.0)

    entries = sorted(history, key=lambda e: _as_utc(e.recorded_at))
    t0 = entries[0].recorded_at
    xs = [months_between(t0, e.recorded_at) for e in entries]
    ys = [e.height for e in entries]

    n = len(xs)
    sum_x = sum(xs)
    sum_y = sum(ys)
    sum_xy = sum(x * y for x, y in zip(xs, ys))
    sum_x2 = sum(x * x for x in xs)

    denom = n * sum_x2 - sum_x * sum_x
    if denom == 0:
        return GrowthTrend(is_growing=False, growth_rate_cm_per_month=0.0)

    slope = (n * sum_xy - sum_x * sum_y) / denom
    return GrowthTrend(
        is_growing=slope >= GROWTH_THRESHOLD_CM_PER_MONTH,
        growth_rate_cm_per_month=slope,
    )


def growth_warning_reason(member: FamilyMember, now: Optional[datetime] = None) -> Optional[str]:
    """Why a growth badge should show: "stale", "growing", "both" or None."""
    stale = is_measurement_stale(member, now)
    history = member.measurement_history or []
    growing = len(history) >= 2 and analyze_growth_trend(history).is_growing

    if stale and growing:
        return "both"
    if stale:
        return "stale"
    if growing:
        return "growing"
    return None


def should_warn_growth(member: FamilyMember, now: Optional[datetime] = None) -> bool:
    """True if measurements are stale OR the history shows active growth."""
    return growth_warning_reason(member, now) is not None


def format_growth_summary(member: FamilyMember, now: Optional[datetime] = None) -> str:
    """Format a member's growth status for display."""
    now = _now(now)
    age = calculate_age(member.date_of_birth, now.date())
    trend = analyze_growth_trend(member.measurement_history or [])
    reason = growth_warning_reason(member, now)

    lines = [f"{member.name} (age {age})"]
    measured_at = member.measurements.measured_at
    if measured_at is not None:
        lines.append(f"  Last measured: {measured_at.date().isoformat()} "
                     f"({months_between(measured_at, now):.1f} months ago)")
    lines.append(f"  Height: {member.measurements.height:g} cm")
    if len(member.measurement_history or []) >= 2:
        lines.append(f"  Growth rate: {trend.growth_rate_cm_per_month:.2f} cm/month")

    messages = {
        "stale": "Measurements are over 6 months old - re-measure before buying gear.",
        "growing": "Growing fast - check gear fit soon.",
        "both": "Growing fast and measurements are over 6 months old - re-measure.",
    }
    if reason:
        lines.append(f"  ! {messages[reason]}")
    return "\n".join(lines)
