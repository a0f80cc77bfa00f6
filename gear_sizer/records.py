"""Family data import/export.

Family members and gear items are stored by the caller (a database, an
API, or a JSON file). This module maps plain JSON documents to the model
dataclasses and back. Both snake_case keys and the camelCase keys used by
the web app's exports are accepted; exports are written in snake_case.

File layout:
    {"members": [...], "gear": [...]}
"""

import json
import os
from dataclasses import fields, is_dataclass
from datetime import date, datetime
from typing import Optional

from gear_sizer.config import DATA_PATH, GENDERS, SKILL_LEVELS
from gear_sizer.models import (
    EXTENDED_DETAIL_TYPES,
    BindingInfo,
    ExtendedGearDetails,
    FamilyMember,
    GearItem,
    GearPhoto,
    MeasurementEntry,
    Measurements,
    SkiProfile,
)

BODY_FIELDS = (
    "height",
    "weight",
    "foot_length_left",
    "foot_length_right",
    "foot_width_left",
    "foot_width_right",
    "us_shoe_size",
    "eu_shoe_size",
    "arm_length",
    "inseam",
    "head_circumference",
    "hand_size",
    "hand_size_left",
    "hand_size_right",
)
REQUIRED_BODY_FIELDS = ("height", "weight", "foot_length_left", "foot_length_right")

# camelCase spellings that don't follow the plain conversion
CAMEL_ALIASES = {
    "size_us": "sizeUS",
}


def _camel(name: str) -> str:
    if name in CAMEL_ALIASES:
        return CAMEL_ALIASES[name]
    head, *rest = name.split("_")
    return head + "".join(part.capitalize() for part in rest)


def _get(data: dict, name: str, default=None):
    """Read a key by its snake_case or camelCase spelling."""
    if name in data:
        return data[name]
    return data.get(_camel(name), default)


def _require(data: dict, name: str):
    value = _get(data, name)
    if value is None:
        raise KeyError(name)
    return value


def parse_datetime(value) -> Optional[datetime]:
    """Parse an ISO timestamp; a trailing "Z" means UTC."""
    if value is None or isinstance(value, datetime):
        return value
    return datetime.fromisoformat(value.replace("Z", "+00:00"))


def parse_date(value) -> Optional[date]:
    if value is None:
        return None
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    return date.fromisoformat(value[:10])


def _body(data: dict) -> dict:
    for name in REQUIRED_BODY_FIELDS:
        _require(data, name)
    return {name: _get(data, name) for name in BODY_FIELDS}


def measurements_from_dict(data: dict) -> Measurements:
    return Measurements(measured_at=parse_datetime(_get(data, "measured_at")), **_body(data))


def entry_from_dict(data: dict) -> MeasurementEntry:
    return MeasurementEntry(
        id=str(_require(data, "id")),
        recorded_at=parse_datetime(_require(data, "recorded_at")),
        **_body(data),
    )


def member_from_dict(data: dict) -> FamilyMember:
    gender = _get(data, "gender", "other")
    if gender not in GENDERS:
        raise ValueError(f"Unknown gender: {gender!r}")
    skill_levels = dict(_get(data, "skill_levels") or {})
    for sport, level in skill_levels.items():
        if level not in SKILL_LEVELS:
            raise ValueError(f"Unknown skill level for {sport}: {level!r}")
    return FamilyMember(
        id=str(_require(data, "id")),
        name=_require(data, "name"),
        date_of_birth=parse_date(_require(data, "date_of_birth")),
        gender=gender,
        measurements=measurements_from_dict(_require(data, "measurements")),
        measurement_history=[entry_from_dict(e) for e in _get(data, "measurement_history") or []],
        skill_levels=skill_levels,
    )


def _details_from_dict(cls, data: dict):
    kwargs = {}
    for f in fields(cls):
        value = _get(data, f.name)
        if value is None:
            continue
        if f.name == "profile":
            value = SkiProfile(tip=int(value["tip"]), waist=int(value["waist"]), tail=int(value["tail"]))
        elif f.name == "bindings":
            value = _details_from_dict(BindingInfo, value)
        kwargs[f.name] = value
    return cls(**kwargs)


def extended_details_from_dict(data: Optional[dict]) -> Optional[ExtendedGearDetails]:
    if not data:
        return None
    detail_type = data["type"]
    if detail_type not in EXTENDED_DETAIL_TYPES:
        raise ValueError(f"Unknown extended details type: {detail_type!r}")
    details = _details_from_dict(EXTENDED_DETAIL_TYPES[detail_type], data.get("details") or {})
    return ExtendedGearDetails(type=detail_type, details=details)


def gear_from_dict(data: dict) -> GearItem:
    photos = [
        GearPhoto(id=str(p["id"]), type=p.get("type", "other"), url=p["url"], caption=p.get("caption", ""))
        for p in data.get("photos") or []
    ]
    return GearItem(
        id=str(_require(data, "id")),
        owner_id=str(_require(data, "owner_id")),
        sports=list(_get(data, "sports") or []),
        type=_require(data, "type"),
        brand=_get(data, "brand", ""),
        model=_get(data, "model", ""),
        size=str(_get(data, "size", "")),
        condition=_require(data, "condition"),
        year=_get(data, "year"),
        status=_get(data, "status"),
        location=_get(data, "location", ""),
        checked_out_to=_get(data, "checked_out_to", ""),
        notes=_get(data, "notes", ""),
        photos=photos,
        extended_details=extended_details_from_dict(_get(data, "extended_details")),
        updated_at=parse_datetime(_get(data, "updated_at")),
    )


def to_dict(record) -> dict:
    """Convert a model dataclass to a JSON-compatible dict (None fields dropped)."""
    result = {}
    for f in fields(record):
        value = _to_jsonable(getattr(record, f.name))
        if value is not None:
            result[f.name] = value
    return result


def _to_jsonable(value):
    if is_dataclass(value):
        return to_dict(value)
    if isinstance(value, (datetime, date)):
        return value.isoformat()
    if isinstance(value, list):
        return [_to_jsonable(v) for v in value]
    if isinstance(value, dict):
        return {k: _to_jsonable(v) for k, v in value.items()}
    return value


member_to_dict = to_dict
gear_to_dict = to_dict


def parse_family(data: dict) -> tuple:
    """Parse a {"members": [...], "gear": [...]} document."""
    members = []
    for index, item in enumerate(data.get("members", [])):
        try:
            members.append(member_from_dict(item))
        except (KeyError, TypeError, ValueError) as e:
            raise ValueError(f"Invalid member record #{index}: {e}") from e

    gear = []
    for index, item in enumerate(data.get("gear", [])):
        try:
            gear.append(gear_from_dict(item))
        except (KeyError, TypeError, ValueError) as e:
            raise ValueError(f"Invalid gear record #{index}: {e}") from e
    return members, gear


def load_family(path: str = DATA_PATH) -> tuple:
    """Load (members, gear) from a family JSON file."""
    if not os.path.exists(path):
        raise FileNotFoundError(f"Family data not found at {path}")

    with open(path, "r") as f:
        data = json.load(f)
    return parse_family(data)


def save_family(members: list, gear: list, path: str = DATA_PATH) -> None:
    """Write members and gear to a family JSON file."""
    directory = os.path.dirname(path)
    if directory:
        os.makedirs(directory, exist_ok=True)
    data = {
        "members": [member_to_dict(m) for m in members],
        "gear": [gear_to_dict(g) for g in gear],
    }
    with open(path, "w") as f:
        json.dump(data, f, indent=2)


def find_member(members: list, member_id: str) -> Optional[FamilyMember]:
    """Find a member by ID, or by case-insensitive name."""
    for member in members:
        if member.id == member_id:
            return member
    for member in members:
        if member.name.lower() == member_id.lower():
            return member
    return None
