"""
Calculator input records.

CalculationInput is a tagged variant: DimensionForm (per-side measurements)
or AreaForm (total area + height). The calculator dispatches on the type.
Measurements are in meters.
"""

from dataclasses import dataclass, field
from typing import Tuple, Union

from ..config import settings


@dataclass(frozen=True)
class SideDimension:
    width: float
    height: float


@dataclass(frozen=True)
class DimensionForm:
    sides: Tuple[SideDimension, ...]
    frame_size: str
    platform_length: str
    work_levels: int
    building_sides: int
    system: str = field(default_factory=lambda: settings.DEFAULT_SYSTEM)


@dataclass(frozen=True)
class AreaForm:
    area: float
    height: float
    frame_size: str
    platform_length: str
    work_levels: int
    building_sides: int
    system: str = field(default_factory=lambda: settings.DEFAULT_SYSTEM)


CalculationInput = Union[DimensionForm, AreaForm]


@dataclass(frozen=True)
class CalculationPolicy:
    """
    Sizing conventions. Only one convention is ever applied per calculation.

    frames_per_level: a frame is one lift of one work level, so the frame
        count scales with work levels. False models one shared vertical run.
    guardrails_top_level_only: guardrails only at the final working level.
        The default puts them on every level.
    uniform_height: every side must share one height. False uses the tallest
        side as the representative height.
    """
    frames_per_level: bool = True
    guardrails_top_level_only: bool = False
    uniform_height: bool = True

    @classmethod
    def from_settings(cls, **overrides) -> "CalculationPolicy":
        values = {
            "frames_per_level": settings.FRAMES_PER_LEVEL,
            "guardrails_top_level_only": settings.GUARDRAILS_TOP_LEVEL_ONLY,
            "uniform_height": settings.UNIFORM_HEIGHT,
        }
        values.update({k: v for k, v in overrides.items() if v is not None})
        return cls(**values)
