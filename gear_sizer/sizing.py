"""Equipment sizing engine.

Turns body measurements into recommended lengths, sizes and settings for
Nordic skis and poles, alpine skis and boots, snowboards, hockey skates
and helmets. All functions are pure: the same measurements always give
the same recommendation.

Rules of thumb behind the tables in config.py:
- Nordic classic skis: height + 10-20 cm, skate: + 5-15 cm, combi: + 5-10 cm
- Alpine skis: chin (beginner) to head height (expert)
- Snowboards: chin to nose, weight matters more than height
- Hockey skates: 1-1.5 sizes below shoe size
"""

import logging
from datetime import date, datetime
from typing import Optional

from gear_sizer.config import (
    ALPINE_FEMALE_OFFSET,
    ALPINE_SKILL_OFFSETS,
    ALPINE_TERRAINS,
    ALPINE_WAIST_WIDTHS,
    ALPINE_WEIGHT_ADJUSTMENT,
    BOOT_EU_MULTIPLIER,
    BOOT_EU_OFFSET,
    BOOT_FLEX_BY_SKILL,
    BOOT_FLEX_FEMALE_OFFSET,
    BOOT_FLEX_MAX,
    BOOT_FLEX_MIN,
    BOOT_FLEX_WEIGHT_ADJUSTMENT,
    BOOT_US_FROM_EU_OFFSET,
    DIN_BASE_MAX,
    DIN_MAX,
    DIN_MIN,
    DIN_SKILL_OFFSETS,
    DIN_WEIGHT_BANDS,
    EVOSPORTS_SHORT_BIAS,
    EVOSPORTS_SKILL_FRACTIONS,
    EVOSPORTS_STYLE_BANDS,
    EVOSPORTS_WEIGHT_ADJUSTMENT,
    FISCHER_FA_MULTIPLIERS,
    FISCHER_STYLE_BANDS,
    FISCHER_WEIGHT_ADJUSTMENT,
    HELMET_SIZE_MAX,
    HELMET_SIZES,
    LAST_WIDTH_BANDS,
    LAST_WIDTH_DEFAULT,
    NORDIC_SKILL_FRACTIONS,
    NORDIC_STYLE_BANDS,
    NORDIC_STYLES,
    NORDIC_WEIGHT_ADJUSTMENT,
    SIZING_MODEL_LABELS,
    SKATE_EU_OFFSET,
    SKATE_NARROW_RATIO,
    SKATE_SIZE_DOWN,
    SKATE_WIDE_CODES,
    SKATE_WIDE_RATIO,
    SKILL_LEVELS,
    SNOWBOARD_HEAVY_ADJUSTMENT,
    SNOWBOARD_HEAVY_WEIGHT,
    SNOWBOARD_HEIGHT_OFFSETS,
    SNOWBOARD_SKILL_OFFSETS,
    SNOWBOARD_STANCE_MULTIPLIERS,
    SNOWBOARD_WAIST_BANDS,
    SNOWBOARD_WAIST_WIDE,
    SNOWBOARD_WEIGHT_BANDS,
    SPORT_LABELS,
    SPORTS,
)
from gear_sizer.models import (
    AlpineBootSizing,
    AlpineSkiSizing,
    AppSettings,
    FamilyMember,
    HelmetSizing,
    HockeySkateSize,
    Measurements,
    NordicBootSizing,
    NordicSkiSizing,
    SizeRange,
    SizingRecommendation,
    SnowboardBootSizing,
    SnowboardSizing,
)
from gear_sizer.shoe_size import (
    convert_shoe_size,
    format_number,
    get_shoe_sizes_from_foot_length,
    round_half_up,
    round_to_increment,
)

logger = logging.getLogger(__name__)

CM_PER_INCH = 2.54


def _check_choice(value: str, choices: tuple, what: str) -> None:
    if value not in choices:
        raise ValueError(f"Unknown {what}: {value!r}. Choose from: {', '.join(choices)}")


def _weight_adjustment(weight: float, table: tuple) -> float:
    """Apply a (heavy above, heavy adj, light below, light adj) table."""
    heavy_above, heavy_adj, light_below, light_adj = table
    if weight > heavy_above:
        return heavy_adj
    if weight < light_below:
        return light_adj
    return 0


def _clamp(value, low, high):
    return max(low, min(high, value))


# ============================================
# NORDIC SKIING
# ============================================

def _nordic_lengths(
    measurements: Measurements,
    style: str,
    skill_level: str,
    bands: dict,
    skill_fractions: dict,
    weight_table: tuple,
    bias: float = 1.0,
) -> NordicSkiSizing:
    """Shared ski/pole computation for every Nordic sizing chart.

    The recommended ski sits at the skill fraction of the length band
    (optionally pulled toward the short end by ``bias``), then shifts by
    the weight adjustment and is kept inside the band.
    """
    _check_choice(style, NORDIC_STYLES, "Nordic style")
    _check_choice(skill_level, SKILL_LEVELS, "skill level")
    height, weight = measurements.height, measurements.weight
    skill = skill_fractions[skill_level]
    offset_min, offset_max, pole_mult_min, pole_mult_max = bands[style]

    ski_min = round_half_up(height + offset_min)
    ski_max = round_half_up(height + offset_max)
    raw_recommended = (
        height + offset_min
        + (offset_max - offset_min) * skill * bias
        + _weight_adjustment(weight, weight_table)
    )
    ski_recommended = _clamp(round_half_up(raw_recommended), ski_min, ski_max)

    pole_min = round_half_up(height * pole_mult_min)
    pole_max = round_half_up(height * pole_mult_max)
    pole_recommended = round_half_up(pole_min + (pole_max - pole_min) * skill)

    return NordicSkiSizing(
        sport=style,
        ski_length_min=ski_min,
        ski_length_max=ski_max,
        ski_length_recommended=ski_recommended,
        pole_length_min=pole_min,
        pole_length_max=pole_max,
        pole_length_recommended=pole_recommended,
    )


def calculate_nordic_ski_sizing(
    measurements: Measurements,
    style: str,
    skill_level: str,
) -> NordicSkiSizing:
    """Calculate Nordic ski and pole sizing with the generic chart.

    Classic poles: height × 0.83-0.85, skate: × 0.89-0.91, combi: × 0.86-0.88.
    Skiers over 80 kg get +2 cm, under 60 kg get -2 cm.
    """
    return _nordic_lengths(
        measurements, style, skill_level,
        NORDIC_STYLE_BANDS, NORDIC_SKILL_FRACTIONS, NORDIC_WEIGHT_ADJUSTMENT,
    )


def _nordic_fischer(measurements: Measurements, style: str, skill_level: str) -> NordicSkiSizing:
    """Fischer fit guide: wider length brackets plus an FA value.

    The FA value is the recommended ski stiffness in kg, a fraction of body
    weight (classic 0.85-0.95, skate 0.80-0.90).
    """
    result = _nordic_lengths(
        measurements, style, skill_level,
        FISCHER_STYLE_BANDS, NORDIC_SKILL_FRACTIONS, FISCHER_WEIGHT_ADJUSTMENT,
    )
    fa_mult_min, fa_mult_max = FISCHER_FA_MULTIPLIERS[style]
    fa_min = round_half_up(measurements.weight * fa_mult_min)
    fa_max = round_half_up(measurements.weight * fa_mult_max)

    result.fa_value_range = SizeRange(min=fa_min, max=fa_max)
    result.model_name = SIZING_MODEL_LABELS["fischer"]
    result.model_notes = [
        f"FA Value {fa_min}-{fa_max} kg: confirm ski flex matches your body weight at a Fischer dealer.",
    ]
    if style == "nordic-classic":
        result.model_notes.append(
            "Fischer recommends kick-zone testing (paper test) when selecting classic ski length."
        )
    return result


def _nordic_evosports(measurements: Measurements, style: str, skill_level: str) -> NordicSkiSizing:
    """Evosports guide: generic lengths, biased toward the shorter end."""
    result = _nordic_lengths(
        measurements, style, skill_level,
        EVOSPORTS_STYLE_BANDS, EVOSPORTS_SKILL_FRACTIONS, EVOSPORTS_WEIGHT_ADJUSTMENT,
        bias=EVOSPORTS_SHORT_BIAS,
    )
    result.model_name = SIZING_MODEL_LABELS["evosports"]
    result.model_notes = [
        "Evosports recommends choosing the shorter end of the range for all-round recreational use.",
        "Longer skis offer more glide; shorter skis are easier to control in varied terrain.",
    ]
    return result


NORDIC_SIZING_MODELS = {
    "generic": calculate_nordic_ski_sizing,
    "fischer": _nordic_fischer,
    "evosports": _nordic_evosports,
}


def calculate_nordic_ski_sizing_by_model(
    measurements: Measurements,
    style: str,
    skill_level: str,
    model: str = "generic",
) -> NordicSkiSizing:
    """Nordic sizing using a vendor chart. Unknown models use the generic chart."""
    chart = NORDIC_SIZING_MODELS.get(model, calculate_nordic_ski_sizing)
    return chart(measurements, style, skill_level)


def _boot_eu_us(foot_length: float) -> tuple:
    """Simplified EU/US boot size used on sizing cards."""
    eu_size = round_half_up(foot_length * BOOT_EU_MULTIPLIER + BOOT_EU_OFFSET)
    us_size = max(eu_size - BOOT_US_FROM_EU_OFFSET, 1)
    return eu_size, us_size


def calculate_nordic_boot_sizing(measurements: Measurements) -> NordicBootSizing:
    """Mondopoint = longer foot (cm) × 10."""
    foot_length = measurements.foot_length
    eu_size, us_size = _boot_eu_us(foot_length)
    return NordicBootSizing(
        mondopoint=round_half_up(foot_length * 10),
        eu_size=eu_size,
        us_size=us_size,
    )


# ============================================
# ALPINE SKIING
# ============================================

def calculate_din(weight: float, skill_level: str) -> SizeRange:
    """Simplified DIN release setting range; a technician sets the real one."""
    _check_choice(skill_level, SKILL_LEVELS, "skill level")
    base = DIN_BASE_MAX
    for upper_bound, band_din in DIN_WEIGHT_BANDS:
        if weight < upper_bound:
            base = band_din
            break

    adjusted = base + DIN_SKILL_OFFSETS[skill_level]
    return SizeRange(
        min=max(adjusted - 1, DIN_MIN),
        max=min(adjusted + 1, DIN_MAX),
    )


def calculate_alpine_ski_sizing(
    measurements: Measurements,
    skill_level: str,
    gender: str,
) -> AlpineSkiSizing:
    """Calculate alpine ski length and DIN range.

    Beginners ski at chin height (height - 20 to -15), intermediates at
    nose height, advanced at forehead height and experts at or slightly
    above their height. Women get 3 cm shorter skis; weight shifts only
    the upper bound.
    """
    _check_choice(skill_level, SKILL_LEVELS, "skill level")
    height, weight = measurements.height, measurements.weight
    offset_min, offset_max = ALPINE_SKILL_OFFSETS[skill_level]
    gender_offset = ALPINE_FEMALE_OFFSET if gender == "female" else 0

    ski_min = height + offset_min + gender_offset
    ski_max = height + offset_max + gender_offset + _weight_adjustment(weight, ALPINE_WEIGHT_ADJUSTMENT)
    # A light beginner's shortened max must not drop below the min
    ski_max = max(ski_max, ski_min)

    return AlpineSkiSizing(
        ski_length_min=round_half_up(ski_min),
        ski_length_max=round_half_up(ski_max),
        ski_length_recommended=round_half_up((ski_min + ski_max) / 2),
        din=calculate_din(weight, skill_level),
    )


def calculate_alpine_waist_width(terrain: str) -> SizeRange:
    """Recommended ski waist width (mm) for a terrain preference.

    groomed 65-80 mm (hardpack, carving), all-mountain 80-96 mm,
    powder 96-120 mm (off-piste, soft snow).
    """
    _check_choice(terrain, ALPINE_TERRAINS, "terrain")
    low, high = ALPINE_WAIST_WIDTHS[terrain]
    return SizeRange(min=low, max=high)


def check_din_safety(din_setting: float, recommended_range: SizeRange) -> str:
    """Compare a binding's DIN setting against the recommended range.

    Returns "too-low" (pre-release risk), "safe" or "too-high" (the binding
    may not release in a crash). Both bounds count as safe.
    """
    if din_setting < recommended_range.min:
        return "too-low"
    if din_setting > recommended_range.max:
        return "too-high"
    return "safe"


def calculate_last_width(foot_width: float) -> tuple:
    """Classify boot last width from foot width in cm.

    Returns (classification, width in mm). Without a width measurement the
    last is assumed medium (100 mm).
    """
    if not foot_width:
        return LAST_WIDTH_DEFAULT

    estimated_last = round_half_up(foot_width * 10)
    for upper_bound, label in LAST_WIDTH_BANDS:
        if estimated_last < upper_bound:
            return label, estimated_last
    return "extra-wide", estimated_last


def calculate_flex_rating(weight: float, skill_level: str, gender: str) -> SizeRange:
    _check_choice(skill_level, SKILL_LEVELS, "skill level")
    flex_min, flex_max = BOOT_FLEX_BY_SKILL[skill_level]

    if gender == "female":
        flex_min += BOOT_FLEX_FEMALE_OFFSET
        flex_max += BOOT_FLEX_FEMALE_OFFSET

    weight_adj = _weight_adjustment(weight, BOOT_FLEX_WEIGHT_ADJUSTMENT)
    flex_min += weight_adj
    flex_max += weight_adj

    return SizeRange(
        min=max(flex_min, BOOT_FLEX_MIN),
        max=min(flex_max, BOOT_FLEX_MAX),
    )


def calculate_alpine_boot_sizing(
    measurements: Measurements,
    skill_level: str,
    gender: str,
) -> AlpineBootSizing:
    """Calculate alpine boot mondopoint, shell size, last width and flex.

    Shell sizes come in whole centimeters, so the foot length is rounded
    to the nearest one.
    """
    foot_length = measurements.foot_length
    eu_size, us_size = _boot_eu_us(foot_length)
    last_width, last_width_mm = calculate_last_width(measurements.foot_width)

    return AlpineBootSizing(
        mondopoint=round_half_up(foot_length * 10),
        shell_size=round_half_up(foot_length),
        eu_size=eu_size,
        us_size=us_size,
        last_width=last_width,
        last_width_mm=last_width_mm,
        flex_rating=calculate_flex_rating(measurements.weight, skill_level, gender),
    )


# ============================================
# SNOWBOARDING
# ============================================

def _snowboard_weight_adjustment(weight: float) -> float:
    for upper_bound, adjustment in SNOWBOARD_WEIGHT_BANDS:
        if weight < upper_bound:
            return adjustment
    if weight > SNOWBOARD_HEAVY_WEIGHT:
        return SNOWBOARD_HEAVY_ADJUSTMENT
    return 0


def _snowboard_waist_width(mondopoint: float) -> int:
    """Minimum board waist width so toes and heels don't drag."""
    for upper_bound, waist in SNOWBOARD_WAIST_BANDS:
        if mondopoint < upper_bound:
            return waist
    return SNOWBOARD_WAIST_WIDE


def calculate_snowboard_sizing(measurements: Measurements, skill_level: str) -> SnowboardSizing:
    """Calculate board length, minimum waist width and stance width.

    Length spans height - 25 to height - 10, shifted by weight bucket;
    skill only moves the upper bound.
    """
    _check_choice(skill_level, SKILL_LEVELS, "skill level")
    height = measurements.height
    weight_adj = _snowboard_weight_adjustment(measurements.weight)
    offset_min, offset_max = SNOWBOARD_HEIGHT_OFFSETS

    board_min = round_half_up(height + offset_min + weight_adj)
    board_max = round_half_up(height + offset_max + weight_adj + SNOWBOARD_SKILL_OFFSETS[skill_level])
    stance_min_mult, stance_max_mult = SNOWBOARD_STANCE_MULTIPLIERS

    return SnowboardSizing(
        board_length_min=board_min,
        board_length_max=board_max,
        board_length_recommended=round_half_up((board_min + board_max) / 2),
        waist_width_min=_snowboard_waist_width(measurements.foot_length * 10),
        stance_width=SizeRange(
            min=round_half_up(height * stance_min_mult),
            max=round_half_up(height * stance_max_mult),
        ),
    )


def calculate_snowboard_boot_sizing(measurements: Measurements) -> SnowboardBootSizing:
    foot_length = measurements.foot_length
    eu_size, us_size = _boot_eu_us(foot_length)
    return SnowboardBootSizing(
        mondopoint=round_half_up(foot_length * 10),
        eu_size=eu_size,
        us_size=us_size,
    )


# ============================================
# HOCKEY
# ============================================

def determine_skate_width(foot_width: float, foot_length: float, brand: str) -> str:
    """Pick a skate width code from the foot width/length ratio.

    Bauer: C (narrow), D (standard), EE (wide). CCM uses W for wide.
    Without a width measurement the standard D fit is assumed.
    """
    if not foot_width or not foot_length:
        return "D"

    ratio = foot_width / foot_length
    if ratio < SKATE_NARROW_RATIO:
        return "C"
    if ratio < SKATE_WIDE_RATIO:
        return "D"
    return SKATE_WIDE_CODES.get(brand, "EE")


def calculate_hockey_skate_size(measurements: Measurements, brand: str = "bauer") -> HockeySkateSize:
    """Hockey skates run about 1.5 sizes below the US shoe size.

    A recorded US shoe size wins over one derived from foot length.
    """
    foot_length = measurements.foot_length
    us_shoe_size = measurements.us_shoe_size
    if us_shoe_size is None:
        us_shoe_size = get_shoe_sizes_from_foot_length(foot_length).us_men if foot_length > 0 else 0

    skate_size_us = round_to_increment(us_shoe_size - SKATE_SIZE_DOWN, 0.5)

    return HockeySkateSize(
        skate_size_us=max(skate_size_us, 1),
        skate_size_eu=round_half_up(skate_size_us + SKATE_EU_OFFSET),
        width=determine_skate_width(measurements.foot_width, foot_length, brand),
        brand=brand,
    )


# ============================================
# HELMETS
# ============================================

def calculate_helmet_sizing(head_circumference: float) -> HelmetSizing:
    """Look up the helmet size for a head circumference in cm."""
    for upper_bound, size, range_min, range_max in HELMET_SIZES:
        if head_circumference < upper_bound:
            return HelmetSizing(size=size, range_min=range_min, range_max=range_max)
    size, range_min, range_max = HELMET_SIZE_MAX
    return HelmetSizing(size=size, range_min=range_min, range_max=range_max)


# ============================================
# UTILITIES
# ============================================

def calculate_age(date_of_birth: date, today: Optional[date] = None) -> int:
    """Whole years of age, one less if this year's birthday is still ahead."""
    if today is None:
        today = date.today()
    age = today.year - date_of_birth.year
    if (today.month, today.day) < (date_of_birth.month, date_of_birth.day):
        age -= 1
    return age


def format_size_range(min_value: float, max_value: float, unit: str = "cm") -> str:
    """Format a range for display: "160-170 cm", or "165 cm" when min == max."""
    if min_value == max_value:
        return f"{format_number(min_value)} {unit}"
    return f"{format_number(min_value)}-{format_number(max_value)} {unit}"


# ============================================
# RECOMMENDATION BUNDLE
# ============================================

def recommend_for_member(
    member: FamilyMember,
    sport: str,
    skill_level: Optional[str] = None,
    model: str = "generic",
    terrain: str = "all-mountain",
    brand: str = "bauer",
    generated_at: Optional[datetime] = None,
) -> SizingRecommendation:
    """Compute every sizing result relevant to one member and sport.

    The skill level defaults to the member's recorded level for the sport,
    then to intermediate. A helmet size is included whenever a head
    circumference was measured.
    """
    _check_choice(sport, SPORTS, "sport")
    if skill_level is None:
        skill_level = member.skill_levels.get(sport, "intermediate")
    if generated_at is None:
        generated_at = datetime.now()

    m = member.measurements
    rec = SizingRecommendation(
        member_id=member.id,
        sport=sport,
        skill_level=skill_level,
        generated_at=generated_at,
    )

    if sport in NORDIC_STYLES:
        rec.nordic_ski = calculate_nordic_ski_sizing_by_model(m, sport, skill_level, model)
        rec.nordic_boot = calculate_nordic_boot_sizing(m)
    elif sport == "alpine":
        rec.alpine_ski = calculate_alpine_ski_sizing(m, skill_level, member.gender)
        rec.alpine_waist_width = calculate_alpine_waist_width(terrain)
        rec.alpine_boot = calculate_alpine_boot_sizing(m, skill_level, member.gender)
    elif sport == "snowboard":
        rec.snowboard = calculate_snowboard_sizing(m, skill_level)
        rec.snowboard_boot = calculate_snowboard_boot_sizing(m)
    else:
        rec.hockey_skate = calculate_hockey_skate_size(m, brand)

    if m.head_circumference:
        rec.helmet = calculate_helmet_sizing(m.head_circumference)

    logger.debug("Sized %s for %s (%s, model=%s)", member.id, sport, skill_level, model)
    return rec


def _format_length(low: float, high: float, recommended: float, settings: AppSettings) -> str:
    """Format a ski/board length in the preferred unit and display mode."""
    unit = settings.ski_length_unit
    if unit == "in":
        low, high, recommended = (round_half_up(v / CM_PER_INCH) for v in (low, high, recommended))
    if settings.sizing_display == "single":
        return f"{format_number(recommended)} {unit}"
    return f"{format_size_range(low, high, unit)} (recommended {format_number(recommended)} {unit})"


BOOT_UNIT_SYSTEMS = {
    "mp": "mondopoint",
    "eu": "eu",
    "us-men": "us-men",
    "us-women": "us-women",
}


def _format_boot(mondopoint: int, settings: AppSettings) -> str:
    system = BOOT_UNIT_SYSTEMS.get(settings.boot_unit, "mondopoint")
    if system == "mondopoint":
        return f"Mondopoint {mondopoint}"
    value = convert_shoe_size(mondopoint, "mondopoint", system)
    labels = {"eu": "EU", "us-men": "US Men", "us-women": "US Women"}
    return f"{labels[system]} {format_number(value)}"


def format_recommendation(rec: SizingRecommendation, settings: Optional[AppSettings] = None) -> str:
    """Format a sizing recommendation for display."""
    if settings is None:
        settings = AppSettings()

    lines = [
        f"{SPORT_LABELS.get(rec.sport, rec.sport)} sizing ({rec.skill_level})",
        "=" * 45,
    ]

    if rec.nordic_ski:
        ski = rec.nordic_ski
        if ski.model_name:
            lines.append(f"Chart:      {ski.model_name}")
        lines.append(f"Skis:       {_format_length(ski.ski_length_min, ski.ski_length_max, ski.ski_length_recommended, settings)}")
        lines.append(f"Poles:      {_format_length(ski.pole_length_min, ski.pole_length_max, ski.pole_length_recommended, settings)}")
        if ski.fa_value_range:
            lines.append(f"FA value:   {format_size_range(ski.fa_value_range.min, ski.fa_value_range.max, 'kg')}")
        for note in ski.model_notes:
            lines.append(f"  * {note}")
    if rec.nordic_boot:
        lines.append(f"Boots:      {_format_boot(rec.nordic_boot.mondopoint, settings)}")

    if rec.alpine_ski:
        ski = rec.alpine_ski
        lines.append(f"Skis:       {_format_length(ski.ski_length_min, ski.ski_length_max, ski.ski_length_recommended, settings)}")
        lines.append(f"DIN:        {format_size_range(ski.din.min, ski.din.max, '')}".rstrip())
    if rec.alpine_waist_width:
        lines.append(f"Waist:      {format_size_range(rec.alpine_waist_width.min, rec.alpine_waist_width.max, 'mm')}")
    if rec.alpine_boot:
        boot = rec.alpine_boot
        lines.append(f"Boots:      {_format_boot(boot.mondopoint, settings)} (shell {boot.shell_size})")
        lines.append(f"Last:       {boot.last_width} ({boot.last_width_mm} mm)")
        lines.append(f"Flex:       {format_size_range(boot.flex_rating.min, boot.flex_rating.max, '')}".rstrip())

    if rec.snowboard:
        board = rec.snowboard
        lines.append(f"Board:      {_format_length(board.board_length_min, board.board_length_max, board.board_length_recommended, settings)}")
        lines.append(f"Waist:      {board.waist_width_min}+ mm")
        lines.append(f"Stance:     {format_size_range(board.stance_width.min, board.stance_width.max, 'cm')}")
    if rec.snowboard_boot:
        lines.append(f"Boots:      {_format_boot(rec.snowboard_boot.mondopoint, settings)}")

    if rec.hockey_skate:
        skate = rec.hockey_skate
        lines.append(f"Skates:     US {format_number(skate.skate_size_us)} {skate.width} / EU {skate.skate_size_eu} ({skate.brand.upper()})")

    if rec.helmet:
        helmet = rec.helmet
        lines.append(f"Helmet:     {helmet.size} ({format_size_range(helmet.range_min, helmet.range_max, 'cm')})")

    return "\n".join(lines)
