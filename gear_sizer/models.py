"""Data models for the gear sizing application."""

from dataclasses import dataclass, field
from datetime import date, datetime
from typing import Optional

from gear_sizer.config import DEFAULT_SETTINGS


@dataclass
class Measurements:
    """Body measurements for one member at one point in time (cm / kg)."""
    height: float
    weight: float
    foot_length_left: float
    foot_length_right: float
    foot_width_left: Optional[float] = None
    foot_width_right: Optional[float] = None
    us_shoe_size: Optional[float] = None
    eu_shoe_size: Optional[float] = None
    arm_length: Optional[float] = None
    inseam: Optional[float] = None
    head_circumference: Optional[float] = None
    hand_size: Optional[float] = None
    hand_size_left: Optional[float] = None
    hand_size_right: Optional[float] = None
    measured_at: Optional[datetime] = None

    @property
    def foot_length(self) -> float:
        """Length of the longer foot; boots are sized to it."""
        return max(self.foot_length_left, self.foot_length_right)

    @property
    def foot_width(self) -> float:
        """Width of the wider foot, 0 when no width was measured."""
        return max(self.foot_width_left or 0, self.foot_width_right or 0)


@dataclass
class MeasurementEntry:
    """A historical measurement snapshot."""
    id: str
    recorded_at: datetime
    height: float
    weight: float
    foot_length_left: float
    foot_length_right: float
    foot_width_left: Optional[float] = None
    foot_width_right: Optional[float] = None
    us_shoe_size: Optional[float] = None
    eu_shoe_size: Optional[float] = None
    arm_length: Optional[float] = None
    inseam: Optional[float] = None
    head_circumference: Optional[float] = None
    hand_size: Optional[float] = None
    hand_size_left: Optional[float] = None
    hand_size_right: Optional[float] = None


@dataclass
class FamilyMember:
    """A family member with current measurements and history."""
    id: str
    name: str
    date_of_birth: date
    gender: str  # "male", "female" or "other"
    measurements: Measurements
    measurement_history: list = field(default_factory=list)  # List[MeasurementEntry]
    skill_levels: dict = field(default_factory=dict)  # sport -> skill level


@dataclass
class GearPhoto:
    """An opaque reference to a stored gear photo."""
    id: str
    type: str  # "fullView", "labelView" or "other"
    url: str
    caption: str = ""


# --- Extended gear details ---

@dataclass
class SkiProfile:
    """Tip/waist/tail widths in mm."""
    tip: int
    waist: int
    tail: int


@dataclass
class BindingInfo:
    brand: str
    model: str
    din_range: Optional[str] = None  # binding capacity, e.g. "4-13"
    din_setting: Optional[float] = None
    size: Optional[str] = None  # snowboard bindings


@dataclass
class AlpineSkiDetails:
    length_cm: int
    profile: Optional[SkiProfile] = None
    radius_m: Optional[float] = None
    bindings: Optional[BindingInfo] = None
    rocker: Optional[str] = None  # e.g. "tip rocker", "full rocker", "camber"


@dataclass
class NordicSkiDetails:
    length_cm: int
    style: Optional[str] = None  # classic, skate, combi
    stiffness: Optional[str] = None  # soft, medium, stiff or an FA value
    grip: Optional[str] = None  # waxable, skin, zero


@dataclass
class SnowboardDetails:
    length_cm: int
    profile: Optional[SkiProfile] = None
    flex: Optional[int] = None  # 1-10
    shape: Optional[str] = None  # directional, twin, directional-twin
    bindings: Optional[BindingInfo] = None


@dataclass
class BootDetails:
    mondopoint: Optional[int] = None
    flex: Optional[int] = None
    last_width: Optional[int] = None  # mm


@dataclass
class SkateDetails:
    size_us: Optional[float] = None
    width: Optional[str] = None  # C, D, EE, R, W
    holder: Optional[str] = None
    steel: Optional[str] = None


EXTENDED_DETAIL_TYPES = {
    "alpineSki": AlpineSkiDetails,
    "nordicSki": NordicSkiDetails,
    "snowboard": SnowboardDetails,
    "boot": BootDetails,
    "skate": SkateDetails,
}


@dataclass
class ExtendedGearDetails:
    """Sport-specific gear details tagged by variant name."""
    type: str  # key of EXTENDED_DETAIL_TYPES
    details: object


@dataclass
class GearItem:
    """An owned piece of equipment."""
    id: str
    owner_id: str
    sports: list  # List[str], at least one sport
    type: str  # see config.GEAR_TYPES
    brand: str
    model: str
    size: str
    condition: str  # new, good, fair, worn
    year: Optional[int] = None
    status: Optional[str] = None
    location: str = ""
    checked_out_to: str = ""
    notes: str = ""
    photos: list = field(default_factory=list)  # List[GearPhoto]
    extended_details: Optional[ExtendedGearDetails] = None
    updated_at: Optional[datetime] = None


# --- Sizing results ---

@dataclass
class SizeRange:
    min: float
    max: float

    def contains(self, value: float) -> bool:
        return self.min <= value <= self.max


@dataclass
class NordicSkiSizing:
    sport: str
    ski_length_min: int
    ski_length_max: int
    ski_length_recommended: int
    pole_length_min: int
    pole_length_max: int
    pole_length_recommended: int
    fa_value_range: Optional[SizeRange] = None  # Fischer only
    model_name: Optional[str] = None
    model_notes: list = field(default_factory=list)


@dataclass
class NordicBootSizing:
    mondopoint: int
    eu_size: int
    us_size: int


@dataclass
class AlpineSkiSizing:
    ski_length_min: int
    ski_length_max: int
    ski_length_recommended: int
    din: SizeRange


@dataclass
class AlpineBootSizing:
    mondopoint: int
    shell_size: int
    eu_size: int
    us_size: int
    last_width: str  # narrow, medium, wide, extra-wide
    last_width_mm: int
    flex_rating: SizeRange


@dataclass
class SnowboardSizing:
    board_length_min: int
    board_length_max: int
    board_length_recommended: int
    waist_width_min: int  # mm
    stance_width: SizeRange  # cm


@dataclass
class SnowboardBootSizing:
    us_size: int
    eu_size: int
    mondopoint: int


@dataclass
class HockeySkateSize:
    skate_size_us: float
    skate_size_eu: int
    width: str  # C, D, EE, R, W
    brand: str


@dataclass
class HelmetSizing:
    size: str
    range_min: int
    range_max: int


@dataclass
class AllShoeSizes:
    us_men: float
    us_women: float
    uk: float
    eu: float
    mondopoint: int
    cm: float

    def as_dict(self) -> dict:
        return {
            "cm": self.cm,
            "mondopoint": self.mondopoint,
            "eu": self.eu,
            "uk": self.uk,
            "us-men": self.us_men,
            "us-women": self.us_women,
        }


@dataclass
class SizingRecommendation:
    """All sizing results for one member and sport."""
    member_id: str
    sport: str
    skill_level: str
    generated_at: datetime
    nordic_ski: Optional[NordicSkiSizing] = None
    nordic_boot: Optional[NordicBootSizing] = None
    alpine_ski: Optional[AlpineSkiSizing] = None
    alpine_waist_width: Optional[SizeRange] = None
    alpine_boot: Optional[AlpineBootSizing] = None
    snowboard: Optional[SnowboardSizing] = None
    snowboard_boot: Optional[SnowboardBootSizing] = None
    hockey_skate: Optional[HockeySkateSize] = None
    helmet: Optional[HelmetSizing] = None


@dataclass
class GrowthTrend:
    is_growing: bool
    growth_rate_cm_per_month: float


@dataclass
class AppNotification:
    """A derived maintenance/replacement alert."""
    id: str  # deterministic, e.g. "worn-{gear id}"
    type: str  # replace, service, old-gear
    title: str
    body: str
    gear_item_id: Optional[str] = None
    member_id: Optional[str] = None
    created_at: Optional[datetime] = None


@dataclass
class GearAnalysisResult:
    """Best-effort guess of a gear item's specifications."""
    confidence: float
    brand: Optional[str] = None
    model: Optional[str] = None
    size: Optional[str] = None
    year: Optional[int] = None
    condition: Optional[str] = None
    sport: Optional[str] = None
    type: Optional[str] = None
    extended_details: Optional[ExtendedGearDetails] = None
    raw_text: Optional[str] = None
    notes: list = field(default_factory=list)


@dataclass
class AppSettings:
    """Unit and display preferences, passed explicitly into formatting calls."""
    height_unit: str = DEFAULT_SETTINGS["height_unit"]  # cm, ft-in
    weight_unit: str = DEFAULT_SETTINGS["weight_unit"]  # kg, lbs
    ski_length_unit: str = DEFAULT_SETTINGS["ski_length_unit"]  # cm, in
    default_sport: str = DEFAULT_SETTINGS["default_sport"]
    sizing_model: str = DEFAULT_SETTINGS["sizing_model"]
    sizing_display: str = DEFAULT_SETTINGS["sizing_display"]  # range, single
    boot_unit: str = DEFAULT_SETTINGS["boot_unit"]  # mp, eu, us-men, us-women
    default_din: Optional[float] = DEFAULT_SETTINGS["default_din"]
    notifications_enabled: bool = DEFAULT_SETTINGS["notifications_enabled"]
