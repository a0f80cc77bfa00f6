"""Command-line interface for the gear sizing application."""

import argparse
import logging
import sys

from gear_sizer.config import (
    ALPINE_TERRAINS,
    DATA_PATH,
    GEAR_TYPES,
    SIZE_SYSTEMS,
    SIZING_MODELS,
    SKATE_BRANDS,
    SKILL_LEVELS,
    SPORTS,
)
from gear_sizer.gear_analysis import analyze_gear_photos, format_ski_details
from gear_sizer.growth import format_growth_summary
from gear_sizer.models import AppSettings, GearPhoto
from gear_sizer.notifications import filter_dismissed, format_notifications, generate_notifications
from gear_sizer.records import find_member, load_family
from gear_sizer.shoe_size import (
    convert_shoe_size,
    format_number,
    get_all_shoe_sizes,
    get_size_system_label,
)
from gear_sizer.sizing import (
    calculate_age,
    calculate_din,
    check_din_safety,
    format_recommendation,
    format_size_range,
    recommend_for_member,
)

logger = logging.getLogger(__name__)


# --- Data helpers ---

def _load(args) -> tuple:
    try:
        return load_family(args.data)
    except FileNotFoundError:
        print(f"No family data found at {args.data}")
        print("Point --data at a family JSON file (see README for the format).")
        sys.exit(1)
    except ValueError as e:
        print(f"Could not read {args.data}: {e}")
        sys.exit(1)


def _get_member(members: list, member_id: str):
    member = find_member(members, member_id)
    if not member:
        known = ", ".join(f"{m.id} ({m.name})" for m in members) or "none"
        print(f"Member '{member_id}' not found. Known members: {known}")
        sys.exit(1)
    return member


# --- Command handlers ---

def cmd_convert(args):
    if args.to:
        value = convert_shoe_size(args.value, args.from_system, args.to)
        print(f"{format_number(args.value)} {get_size_system_label(args.from_system)} = "
              f"{format_number(value)} {get_size_system_label(args.to)}")
        return

    sizes = get_all_shoe_sizes(args.value, args.from_system).as_dict()
    print(f"{format_number(args.value)} {get_size_system_label(args.from_system)}:")
    for system in SIZE_SYSTEMS:
        print(f"  {get_size_system_label(system):<12} {format_number(sizes[system])}")


def cmd_members(args):
    members, gear = _load(args)
    if not members:
        print("No family members found.")
        return

    print(f"{'ID':<12}  {'Name':<20}  {'Age':>3}  {'Height':>7}  {'Weight':>7}  {'Gear':>4}")
    print("-" * 62)
    for m in members:
        count = sum(1 for g in gear if g.owner_id == m.id)
        print(f"{m.id:<12}  {m.name:<20}  {calculate_age(m.date_of_birth):>3}  "
              f"{m.measurements.height:>5g}cm  {m.measurements.weight:>5g}kg  {count:>4}")


def cmd_size(args):
    members, _ = _load(args)
    member = _get_member(members, args.member)
    settings = AppSettings(
        ski_length_unit=args.length_unit,
        sizing_display=args.display,
        boot_unit=args.boot_unit,
        sizing_model=args.model,
    )

    rec = recommend_for_member(
        member, args.sport,
        skill_level=args.skill,
        model=args.model,
        terrain=args.terrain,
        brand=args.brand,
    )
    print(f"{member.name}")
    print(format_recommendation(rec, settings))


def cmd_growth(args):
    members, _ = _load(args)
    if args.member:
        members = [_get_member(members, args.member)]

    for i, member in enumerate(members):
        if i:
            print()
        print(format_growth_summary(member))


def cmd_notifications(args):
    members, gear = _load(args)
    notifications = generate_notifications(members, gear)
    notifications = filter_dismissed(notifications, args.dismiss or [])
    print(format_notifications(notifications))


def cmd_din(args):
    members, _ = _load(args)
    member = _get_member(members, args.member)
    skill = args.skill or member.skill_levels.get("alpine", "intermediate")
    recommended = calculate_din(member.measurements.weight, skill)
    status = check_din_safety(args.setting, recommended)

    messages = {
        "too-low": "Binding may release during normal skiing.",
        "safe": "Setting is within the recommended range.",
        "too-high": "Binding may not release in a fall.",
    }
    print(f"{member.name}: DIN {format_number(args.setting)} "
          f"(recommended {format_size_range(recommended.min, recommended.max, '').strip()})")
    print(f"  {status.upper()}: {messages[status]}")


def cmd_analyze(args):
    photos = [
        GearPhoto(id=str(i), type=args.photo_type, url=path)
        for i, path in enumerate(args.photo or [], 1)
    ]
    hints = {"sport": args.sport, "type": args.type}
    result = analyze_gear_photos(photos, hints)

    print(f"Brand:      {result.brand or '-'}")
    print(f"Model:      {result.model or '-'}")
    print(f"Size:       {result.size or '-'}")
    if result.year:
        print(f"Year:       {result.year}")
    if result.condition:
        print(f"Condition:  {result.condition}")
    if result.extended_details and result.extended_details.type == "alpineSki":
        print(f"Details:    {format_ski_details(result.extended_details.details)}")
    print(f"Confidence: {result.confidence:.0%}")
    for note in result.notes:
        print(f"  * {note}")


# --- Argument parser ---

def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="gear_sizer",
        description="Gear Sizer - Family ski, snowboard and hockey equipment sizing",
    )
    parser.add_argument("--data", default=DATA_PATH,
                        help=f"Family JSON file (default: {DATA_PATH})")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # --- convert ---
    convert_p = subparsers.add_parser("convert", help="Convert shoe sizes between systems")
    convert_p.add_argument("value", type=float, help="Size to convert")
    convert_p.add_argument("--from", dest="from_system", default="cm", choices=SIZE_SYSTEMS,
                           help="Size system of VALUE (default: cm)")
    convert_p.add_argument("--to", choices=SIZE_SYSTEMS, help="Target system (default: all)")
    convert_p.set_defaults(func=cmd_convert)

    # --- members ---
    members_p = subparsers.add_parser("members", help="List family members")
    members_p.set_defaults(func=cmd_members)

    # --- size ---
    size_p = subparsers.add_parser("size", help="Show sizing recommendations for a member")
    size_p.add_argument("member", help="Member ID or name")
    size_p.add_argument("--sport", required=True, choices=SPORTS)
    size_p.add_argument("--skill", choices=SKILL_LEVELS,
                        help="Skill level (default: member's recorded level, else intermediate)")
    size_p.add_argument("--model", default="generic", choices=SIZING_MODELS,
                        help="Nordic sizing chart")
    size_p.add_argument("--terrain", default="all-mountain", choices=ALPINE_TERRAINS,
                        help="Alpine terrain preference")
    size_p.add_argument("--brand", default="bauer", choices=SKATE_BRANDS, help="Hockey skate brand")
    size_p.add_argument("--length-unit", default="cm", choices=["cm", "in"])
    size_p.add_argument("--display", default="range", choices=["range", "single"])
    size_p.add_argument("--boot-unit", default="mp", choices=["mp", "eu", "us-men", "us-women"])
    size_p.set_defaults(func=cmd_size)

    # --- growth ---
    growth_p = subparsers.add_parser("growth", help="Check measurement staleness and growth")
    growth_p.add_argument("member", nargs="?", help="Member ID or name (default: everyone)")
    growth_p.set_defaults(func=cmd_growth)

    # --- notifications ---
    notif_p = subparsers.add_parser("notifications", help="Show gear maintenance alerts")
    notif_p.add_argument("--dismiss", action="append", metavar="ID",
                         help="Hide a notification by ID (repeatable)")
    notif_p.set_defaults(func=cmd_notifications)

    # --- din ---
    din_p = subparsers.add_parser("din", help="Check a binding DIN setting")
    din_p.add_argument("setting", type=float, help="Current DIN setting")
    din_p.add_argument("--member", required=True, help="Member ID or name")
    din_p.add_argument("--skill", choices=SKILL_LEVELS)
    din_p.set_defaults(func=cmd_din)

    # --- analyze ---
    analyze_p = subparsers.add_parser("analyze", help="Guess gear details from photos")
    analyze_p.add_argument("--sport", choices=SPORTS)
    analyze_p.add_argument("--type", choices=GEAR_TYPES)
    analyze_p.add_argument("--photo", action="append", help="Photo path (repeatable)")
    analyze_p.add_argument("--photo-type", default="fullView",
                           choices=["fullView", "labelView", "other"])
    analyze_p.set_defaults(func=cmd_analyze)

    return parser


def main(argv=None):
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    if not args.command:
        parser.print_help()
        return

    logger.debug("Running %s (data=%s)", args.command, args.data)
    args.func(args)


if __name__ == "__main__":
    main()
