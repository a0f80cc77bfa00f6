"""Application configuration and constants."""

import os

# Data file (family members + gear inventory as JSON)
DATA_DIR = os.path.join(os.path.expanduser("~"), ".gear_sizer")
DATA_PATH = os.environ.get("GEAR_SIZER_DATA", os.path.join(DATA_DIR, "family.json"))

# Domain vocabularies
SPORTS = ("nordic-classic", "nordic-skate", "nordic-combi", "alpine", "snowboard", "hockey")
NORDIC_STYLES = ("nordic-classic", "nordic-skate", "nordic-combi")
SKILL_LEVELS = ("beginner", "intermediate", "advanced", "expert")
GENDERS = ("male", "female", "other")
GEAR_TYPES = ("ski", "pole", "boot", "binding", "snowboard", "skate", "helmet", "other")
GEAR_CONDITIONS = ("new", "good", "fair", "worn")
GEAR_STATUSES = ("active", "available", "outgrown", "to-sell", "sold", "needs-repair")
SIZING_MODELS = ("generic", "fischer", "evosports")
ALPINE_TERRAINS = ("groomed", "all-mountain", "powder")
SKATE_BRANDS = ("bauer", "ccm", "true", "other")
SIZE_SYSTEMS = ("cm", "mondopoint", "eu", "uk", "us-men", "us-women")

# Display labels
SPORT_LABELS = {
    "alpine": "Alpine / Downhill",
    "nordic-classic": "XC Classic",
    "nordic-skate": "XC Skate",
    "nordic-combi": "XC Combi",
    "snowboard": "Snowboard",
    "hockey": "Hockey",
}

GEAR_TYPE_LABELS = {
    "ski": "Skis",
    "pole": "Poles",
    "boot": "Boots",
    "binding": "Bindings",
    "snowboard": "Snowboard",
    "skate": "Skates",
    "helmet": "Helmet",
    "other": "Other",
}

SIZING_MODEL_LABELS = {
    "generic": "Generic",
    "fischer": "Fischer",
    "evosports": "Evosports",
}

ALPINE_TERRAIN_LABELS = {
    "groomed": "Groomed",
    "all-mountain": "All-Mountain",
    "powder": "Powder",
}

SIZE_SYSTEM_LABELS = {
    "us-men": "US Men",
    "us-women": "US Women",
    "uk": "UK",
    "eu": "EU",
    "mondopoint": "Mondopoint",
    "cm": "Centimeters",
}

SIZE_SYSTEM_SHORT_LABELS = {
    "us-men": "US M",
    "us-women": "US W",
    "uk": "UK",
    "eu": "EU",
    "mondopoint": "MP",
    "cm": "cm",
}

# Display rounding increment per size system
SIZE_SYSTEM_INCREMENTS = {
    "cm": 0.1,
    "mondopoint": 1,
    "eu": 0.5,
    "uk": 0.5,
    "us-men": 0.5,
    "us-women": 0.5,
}

# --- Nordic skiing ---

# Fraction of the length band a skier is placed at, by skill
NORDIC_SKILL_FRACTIONS = {
    "beginner": 0,
    "intermediate": 0.33,
    "advanced": 0.66,
    "expert": 1,
}

# (ski offset min, ski offset max, pole multiplier min, pole multiplier max)
NORDIC_STYLE_BANDS = {
    "nordic-classic": (10, 20, 0.83, 0.85),
    "nordic-skate": (5, 15, 0.89, 0.91),
    "nordic-combi": (5, 10, 0.86, 0.88),
}

# (weight above which to lengthen, cm added, weight below which to shorten, cm removed)
NORDIC_WEIGHT_ADJUSTMENT = (80, 2, 60, -2)

FISCHER_STYLE_BANDS = {
    "nordic-classic": (10, 30, 0.83, 0.87),
    "nordic-skate": (5, 25, 0.90, 0.93),
    "nordic-combi": (5, 15, 0.86, 0.88),
}
FISCHER_WEIGHT_ADJUSTMENT = (80, 3, 60, -2)
# FA value (ski stiffness, kg) as a fraction of body weight
FISCHER_FA_MULTIPLIERS = {
    "nordic-classic": (0.85, 0.95),
    "nordic-skate": (0.80, 0.90),
    "nordic-combi": (0.85, 0.95),
}

EVOSPORTS_SKILL_FRACTIONS = {
    "beginner": 0,
    "intermediate": 0.25,
    "advanced": 0.66,
    "expert": 1,
}
EVOSPORTS_STYLE_BANDS = {
    "nordic-classic": (10, 20, 0.83, 0.85),
    "nordic-skate": (5, 15, 0.90, 0.92),
    "nordic-combi": (5, 10, 0.86, 0.88),
}
EVOSPORTS_WEIGHT_ADJUSTMENT = (80, 2, 60, -2)
EVOSPORTS_SHORT_BIAS = 0.85

# --- Alpine skiing ---

ALPINE_SKILL_OFFSETS = {
    "beginner": (-20, -15),
    "intermediate": (-15, -10),
    "advanced": (-10, -5),
    "expert": (-5, 5),
}
ALPINE_FEMALE_OFFSET = -3
# Applied to the max bound only
ALPINE_WEIGHT_ADJUSTMENT = (85, 3, 55, -3)

ALPINE_WAIST_WIDTHS = {
    "groomed": (65, 80),
    "all-mountain": (80, 96),
    "powder": (96, 120),
}

# (upper weight bound exclusive, base DIN); heavier skiers fall through to DIN_BASE_MAX
DIN_WEIGHT_BANDS = (
    (50, 3),
    (60, 4),
    (70, 5),
    (80, 6),
    (90, 7),
)
DIN_BASE_MAX = 8
DIN_SKILL_OFFSETS = {
    "beginner": -1,
    "intermediate": 0,
    "advanced": 1,
    "expert": 2,
}
DIN_MIN = 1
DIN_MAX = 12

# Last width classification (mm, upper bounds exclusive)
LAST_WIDTH_BANDS = (
    (98, "narrow"),
    (101, "medium"),
    (104, "wide"),
)
LAST_WIDTH_DEFAULT = ("medium", 100)

BOOT_FLEX_BY_SKILL = {
    "beginner": (60, 80),
    "intermediate": (80, 100),
    "advanced": (100, 120),
    "expert": (120, 140),
}
BOOT_FLEX_FEMALE_OFFSET = -15
BOOT_FLEX_WEIGHT_ADJUSTMENT = (85, 10, 60, -10)
BOOT_FLEX_MIN = 50
BOOT_FLEX_MAX = 150

# --- Snowboarding ---

SNOWBOARD_HEIGHT_OFFSETS = (-25, -10)
# (upper weight bound exclusive, adjustment)
SNOWBOARD_WEIGHT_BANDS = (
    (55, -5),
    (65, -2),
)
SNOWBOARD_HEAVY_WEIGHT = 80
SNOWBOARD_HEAVY_ADJUSTMENT = 3
SNOWBOARD_SKILL_OFFSETS = {
    "beginner": -5,
    "intermediate": 0,
    "advanced": 3,
    "expert": 5,
}
# (upper mondopoint bound exclusive, minimum waist width mm)
SNOWBOARD_WAIST_BANDS = (
    (260, 245),
    (275, 250),
    (290, 255),
)
SNOWBOARD_WAIST_WIDE = 260
SNOWBOARD_STANCE_MULTIPLIERS = (0.28, 0.33)

# --- Boots (simplified EU/US approximation used on sizing cards) ---

BOOT_EU_MULTIPLIER = 1.5
BOOT_EU_OFFSET = 2
BOOT_US_FROM_EU_OFFSET = 32

# --- Hockey ---

SKATE_SIZE_DOWN = 1.5
SKATE_EU_OFFSET = 33
# Foot width / foot length ratio bounds (exclusive)
SKATE_NARROW_RATIO = 0.36
SKATE_WIDE_RATIO = 0.40
SKATE_WIDE_CODES = {
    "bauer": "EE",
    "ccm": "W",
    "true": "EE",
    "other": "EE",
}

# --- Helmets ---

# (upper head circumference bound exclusive, size, range min, range max)
HELMET_SIZES = (
    (55, "XS", 51, 54),
    (57, "S", 55, 56),
    (59, "M", 57, 58),
    (61, "L", 59, 60),
    (63, "XL", 61, 62),
)
HELMET_SIZE_MAX = ("XXL", 63, 65)

# --- Growth analysis ---

DAYS_PER_MONTH = 30.4375
STALE_MONTHS = 6
ADULT_AGE = 18
GROWTH_THRESHOLD_CM_PER_MONTH = 0.3  # ~3.6 cm/year

# --- Notifications ---

# Years after which gear is flagged as past its typical lifespan
OLD_GEAR_THRESHOLD_YEARS = {
    "ski": 7,
    "snowboard": 7,
    "pole": 10,
    "boot": 5,
    "binding": 7,
    "skate": 5,
    "helmet": 5,
    "other": 7,
}
OLD_GEAR_DEFAULT_THRESHOLD = 7

NOTIFICATION_PRIORITY = {
    "replace": 0,
    "service": 1,
    "old-gear": 2,
}

# --- Display settings ---

DEFAULT_SETTINGS = {
    "height_unit": "cm",
    "weight_unit": "kg",
    "ski_length_unit": "cm",
    "default_sport": "alpine",
    "sizing_model": "generic",
    "sizing_display": "range",
    "boot_unit": "mp",
    "default_din": None,
    "notifications_enabled": True,
}
