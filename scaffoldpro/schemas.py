from pydantic import BaseModel, EmailStr
from typing import Optional, List, Dict
from datetime import datetime

from .calculators.inputs import AreaForm, CalculationPolicy, DimensionForm, SideDimension
from .config import settings


# --- Calculator requests ---
# Field ranges are checked by the calculator so every caller gets the same
# ValidationError; these models only check shape and types.

class SideDimensionIn(BaseModel):
    width: float
    height: float


class CalculationOptions(BaseModel):
    frame_size: str
    platform_length: str
    work_levels: int
    building_sides: int = 1
    system: Optional[str] = None
    frames_per_level: Optional[bool] = None
    guardrails_top_level_only: Optional[bool] = None
    uniform_height: Optional[bool] = None

    def to_policy(self) -> CalculationPolicy:
        return CalculationPolicy.from_settings(
            frames_per_level=self.frames_per_level,
            guardrails_top_level_only=self.guardrails_top_level_only,
            uniform_height=self.uniform_height,
        )


class DimensionsRequest(CalculationOptions):
    sides: List[SideDimensionIn]

    def to_form(self) -> DimensionForm:
        return DimensionForm(
            sides=tuple(SideDimension(width=s.width, height=s.height) for s in self.sides),
            frame_size=self.frame_size,
            platform_length=self.platform_length,
            work_levels=self.work_levels,
            building_sides=self.building_sides,
            system=self.system or settings.DEFAULT_SYSTEM,
        )


class AreaRequest(CalculationOptions):
    area: float
    height: float

    def to_form(self) -> AreaForm:
        return AreaForm(
            area=self.area,
            height=self.height,
            frame_size=self.frame_size,
            platform_length=self.platform_length,
            work_levels=self.work_levels,
            building_sides=self.building_sides,
            system=self.system or settings.DEFAULT_SYSTEM,
        )


# --- Calculator response ---

class ComponentLine(BaseModel):
    quantity: int
    specification: str


class CalculationResult(BaseModel):
    system: str
    components: Dict[str, ComponentLine]
    total_components: int
    weight: int
    load_capacity: float
    dimensions: str
    area: float
    scaffold_coverage: float
    wall_length: float
    height: float
    frames_per_side: int
    bays_per_level: int
    end_guardrails: int
    wall_attachment_tie_brackets: int
    frame_size: str
    platform_length: str
    work_levels: int
    building_sides: int
    safety_factor: float
    assumptions: List[str] = []


# --- Waitlist ---

class WaitlistCreate(BaseModel):
    email: EmailStr


class WaitlistEntry(BaseModel):
    id: int
    email: str
    created_at: datetime
    class Config:
        from_attributes = True


class WaitlistResponse(BaseModel):
    success: bool
    message: Optional[str] = None
    data: Optional[Dict[str, str]] = None


class WaitlistListResponse(BaseModel):
    success: bool
    data: List[WaitlistEntry] = []
