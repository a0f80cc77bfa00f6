"""Gear maintenance and replacement notifications.

Notifications are derived from the current gear inventory, never stored.
Their IDs are deterministic ("worn-{gear id}", "fair-{gear id}",
"old-{gear id}") so a dismissal recorded against an ID keeps matching
when the list is regenerated.

Notification types:
- replace  : condition is worn, replace or sell
- service  : condition is fair, service or replace soon
- old-gear : the item is past the typical lifespan for its type
"""

from datetime import date
from typing import Optional

from gear_sizer.config import (
    GEAR_TYPE_LABELS,
    NOTIFICATION_PRIORITY,
    OLD_GEAR_DEFAULT_THRESHOLD,
    OLD_GEAR_THRESHOLD_YEARS,
)
from gear_sizer.models import AppNotification, GearItem


def _gear_label(item: GearItem, type_label: str) -> str:
    return " ".join(part for part in (item.brand, item.model, type_label) if part)


def _notification(kind: str, type_: str, item: GearItem, title: str, body: str) -> AppNotification:
    return AppNotification(
        id=f"{kind}-{item.id}",
        type=type_,
        title=title,
        body=body,
        gear_item_id=item.id,
        member_id=item.owner_id,
        created_at=item.updated_at,
    )


def generate_notifications(
    members: list,
    gear_items: list,
    current_year: Optional[int] = None,
) -> list:
    """Generate prioritized notifications for a family's gear.

    Each item is checked against every rule, so one item can raise several
    notifications. Results are ordered replace, then service, then
    old-gear, keeping gear order within each group.
    """
    if current_year is None:
        current_year = date.today().year
    names = {member.id: member.name for member in members}
    notifications = []

    for item in gear_items:
        member_name = names.get(item.owner_id, "Unknown")
        type_label = GEAR_TYPE_LABELS.get(item.type, item.type)
        gear_label = _gear_label(item, type_label)

        if item.condition == "worn":
            notifications.append(_notification(
                "worn", "replace", item,
                f"Replace {member_name}'s {type_label}",
                f"{gear_label} is worn out. Time to replace or sell.",
            ))

        if item.condition == "fair":
            notifications.append(_notification(
                "fair", "service", item,
                f"Service {member_name}'s {type_label}",
                f"{gear_label} is in fair condition. Consider servicing or replacing soon.",
            ))

        if item.year:
            age_years = current_year - item.year
            threshold = OLD_GEAR_THRESHOLD_YEARS.get(item.type, OLD_GEAR_DEFAULT_THRESHOLD)
            if age_years >= threshold:
                notifications.append(_notification(
                    "old", "old-gear", item,
                    f"Check {member_name}'s {item.year} {type_label}",
                    f"{gear_label} is {age_years} years old. Consider replacing.",
                ))

    # sorted() is stable, so gear order survives within each type
    return sorted(notifications, key=lambda n: NOTIFICATION_PRIORITY.get(n.type, len(NOTIFICATION_PRIORITY)))


def filter_dismissed(notifications: list, dismissed_ids) -> list:
    """Drop notifications whose IDs the user has dismissed."""
    dismissed = set(dismissed_ids)
    return [n for n in notifications if n.id not in dismissed]


def format_notifications(notifications: list) -> str:
    """Format notifications for display."""
    if not notifications:
        return "No notifications. All gear looks good."

    markers = {"replace": "!!", "service": "! ", "old-gear": "? "}
    lines = [f"Notifications ({len(notifications)})", "=" * 45]
    for n in notifications:
        lines.append(f"{markers.get(n.type, '  ')} {n.title}")
        lines.append(f"   {n.body}")
    return "\n".join(lines)
