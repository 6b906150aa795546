"""
Component catalog — frame sizes, platform lengths, scaffold systems.

Static, read-only tables built once at import. Every lookup goes through
get_frame / get_platform / get_system, which raise UnknownCatalogKey for
keys that are not listed here.

Dimensions are in centimeters, weights in kilograms.
Source: manufacturer mason-frame data sheets (US imperial sizes converted
to cm) + ScaffoldPro field averages.
"""

from dataclasses import dataclass
from types import MappingProxyType
from typing import Dict, Mapping

from .exceptions import UnknownCatalogKey

WORK_LEVEL_RANGE = (1, 5)
BUILDING_SIDE_RANGE = (1, 4)

# Order of component lines in every result
COMPONENT_KINDS = (
    "frames",
    "cross_braces",
    "base_plates",
    "platforms",
    "screw_jacks",
    "toe_boards",
    "outriggers",
    "ladders",
    "guardrails",
    "leg_holders",
    "wall_attachments",
    "side_guardrails",
)


@dataclass(frozen=True)
class FrameSpec:
    key: str
    name: str
    description: str
    width_cm: float
    height_cm: float
    weight_kg: float


@dataclass(frozen=True)
class PlatformSpec:
    key: str
    name: str
    description: str
    length_cm: float
    width_cm: float
    weight_kg: float


@dataclass(frozen=True)
class SystemSpec:
    key: str
    name: str
    unit_weights: Mapping[str, float]
    specifications: Mapping[str, str]
    load_capacity: float     # kg/m²
    safety_factor: float


def _frame(key, name, description, width_cm, height_cm, weight_kg):
    return key, FrameSpec(key, name, description, width_cm, height_cm, weight_kg)


def _platform(key, name, description, length_cm, width_cm, weight_kg):
    return key, PlatformSpec(key, name, description, length_cm, width_cm, weight_kg)


FRAME_SIZES: Mapping[str, FrameSpec] = MappingProxyType(dict([
    # 3' x 5'
    _frame("mason-frame-91x152", "Mason Frame 91.44 x 152.4 cm",
           "Compact mason frame ideal for limited-space applications",
           91.44, 152.4, 15.2),
    # 5' x 5'
    _frame("mason-frame-152x152", "Mason Frame 152.4 x 152.4 cm",
           "Square mason frame with versatile application potential",
           152.4, 152.4, 18.5),
    # 6' x 5'
    _frame("mason-frame-183x152", "Mason Frame 182.88 x 152.4 cm",
           "Extended width mason frame for larger spans",
           182.88, 152.4, 22.1),
    # 6'4" x 5'
    _frame("mason-frame-193x152", "Mason Frame 193.04 x 152.4 cm",
           "Wide mason frame for maximum horizontal coverage",
           193.04, 152.4, 23.4),
    # 6'4" x 3'
    _frame("mason-frame-193x91", "Mason Frame 193.04 x 91.44 cm",
           "Low-height wide-span mason frame",
           193.04, 91.44, 19.8),
    # 6'4" x 3'6"
    _frame("mason-frame-193x107", "Mason Frame 193.04 x 106.68 cm",
           "Mid-height wide-span mason frame",
           193.04, 106.68, 21.2),
    # 6'6" x 5'
    _frame("mason-frame-198x152", "Mason Frame 198.12 x 152.4 cm",
           "Extra-wide mason frame for maximum coverage",
           198.12, 152.4, 24.3),
    # Metric
    _frame("mason-frame-220x70", "Mason Frame 220 x 70 cm",
           "Specialized narrow mason frame for unique applications",
           220.0, 70.0, 18.7),
]))

PLATFORM_LENGTHS: Mapping[str, PlatformSpec] = MappingProxyType(dict([
    # 7'
    _platform("platform-213", "213.36 cm Plywood Platform",
              "Standard-length platform for most applications",
              213.36, 60.0, 15.5),
    # 8'
    _platform("platform-244", "243.84 cm Plywood Platform",
              "Extended-length platform for medium spans",
              243.84, 60.0, 17.8),
    _platform("platform-250", "250 cm Plywood Platform",
              "Metric standard platform for European specifications",
              250.0, 60.0, 18.5),
    # 10'
    _platform("platform-305", "304.8 cm Plywood Platform",
              "Maximum-length platform for long spans",
              304.8, 60.0, 22.3),
]))

# Specification templates are formatted with frame_* / platform_* values
# by the calculator.
MASON_FRAME_SYSTEM = SystemSpec(
    key="mason-frame",
    name="Mason Frame Scaffolding",
    unit_weights=MappingProxyType({
        "frames": 20.0,
        "cross_braces": 5.0,
        "base_plates": 2.5,
        "platforms": 20.0,
        "screw_jacks": 3.0,
        "toe_boards": 4.0,
        "outriggers": 8.0,
        "ladders": 15.0,
        "guardrails": 4.0,
        "leg_holders": 2.5,
        "wall_attachments": 0.5,
        "side_guardrails": 4.5,
    }),
    specifications=MappingProxyType({
        "frames": "{frame_name}",
        "cross_braces": "Cross brace for {frame_width_cm:g} cm bay",
        "base_plates": "150 x 150 mm steel base plate",
        "platforms": "{platform_name}",
        "screw_jacks": "Adjustable leveling screw jack, 60 cm",
        "toe_boards": "Toe board, {platform_length_cm:g} cm",
        "outriggers": "Outrigger stabilizer, 91 cm",
        "ladders": "Frame-mounted access ladder",
        "guardrails": "Guardrail post with top and mid rail",
        "leg_holders": "Coupling pin / leg holder",
        "wall_attachments": "Wall tie with tie bracket",
        "side_guardrails": "Side guardrail, {platform_length_cm:g} cm",
    }),
    load_capacity=675.0,
    safety_factor=1.4,
)

SCAFFOLD_SYSTEMS: Mapping[str, SystemSpec] = MappingProxyType({
    MASON_FRAME_SYSTEM.key: MASON_FRAME_SYSTEM,
})


# --- Lookups ---

def get_frame(key: str) -> FrameSpec:
    try:
        return FRAME_SIZES[key]
    except (KeyError, TypeError):
        raise UnknownCatalogKey("frame_size", key, FRAME_SIZES.keys()) from None


def get_platform(key: str) -> PlatformSpec:
    try:
        return PLATFORM_LENGTHS[key]
    except (KeyError, TypeError):
        raise UnknownCatalogKey("platform_length", key, PLATFORM_LENGTHS.keys()) from None


def get_system(key: str) -> SystemSpec:
    try:
        return SCAFFOLD_SYSTEMS[key]
    except (KeyError, TypeError):
        raise UnknownCatalogKey("system", key, SCAFFOLD_SYSTEMS.keys()) from None


def frame_keys() -> frozenset:
    return frozenset(FRAME_SIZES)


def platform_keys() -> frozenset:
    return frozenset(PLATFORM_LENGTHS)


def system_keys() -> frozenset:
    return frozenset(SCAFFOLD_SYSTEMS)


def catalog_summary() -> Dict[str, object]:
    """JSON-ready listing of every catalog entry, for the calculator form."""
    return {
        "frame_sizes": [
            {
                "key": f.key,
                "name": f.name,
                "description": f.description,
                "width_cm": f.width_cm,
                "height_cm": f.height_cm,
                "weight_kg": f.weight_kg,
            }
            for f in FRAME_SIZES.values()
        ],
        "platform_lengths": [
            {
                "key": p.key,
                "name": p.name,
                "description": p.description,
                "length_cm": p.length_cm,
                "width_cm": p.width_cm,
                "weight_kg": p.weight_kg,
            }
            for p in PLATFORM_LENGTHS.values()
        ],
        "systems": [
            {
                "key": s.key,
                "name": s.name,
                "load_capacity": s.load_capacity,
                "safety_factor": s.safety_factor,
                "unit_weights": dict(s.unit_weights),
            }
            for s in SCAFFOLD_SYSTEMS.values()
        ],
        "work_levels": {"min": WORK_LEVEL_RANGE[0], "max": WORK_LEVEL_RANGE[1]},
        "building_sides": {"min": BUILDING_SIDE_RANGE[0], "max": BUILDING_SIDE_RANGE[1]},
    }
