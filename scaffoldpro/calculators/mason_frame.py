"""
Mason frame scaffolding calculator.

Both input forms reduce to one canonical shape (one wall length per side,
representative height, side count, plan area) and go through the shared
sizing algorithm in _size().

Conventions (CalculationPolicy defaults):
- A frame is one lift of one work level, so frames scale with work levels.
- Guardrails on every working level.
- All building sides share one height.

Base plates, screw jacks and leg holders exist only in the ground row and
never scale with work levels.
"""

import logging
import math

from .base import BaseCalculator
from .catalog import get_frame, get_platform, get_system
from .exceptions import ValidationError
from .inputs import AreaForm, DimensionForm, SideDimension

logger = logging.getLogger(__name__)

END_GUARDRAILS = 4          # two end caps × two rail tiers
PLATFORMS_PER_BAY = 3
CROSS_BRACES_PER_BAY = 2    # one per bay face
SIDE_GUARDRAILS_PER_BAY = 2
RAIL_SEGMENTS_PER_TOE_BOARD = 3
OUTRIGGERS_PER_SIDE = 2
LEVELS_PER_LADDER = 2
WALL_TIE_SPACING_M = 5.0
HEIGHT_TOLERANCE_M = 1e-6
MAX_WALL_LENGTH_M = 100_000.0   # per side
MAX_HEIGHT_M = 1_000.0


class MasonFrameCalculator(BaseCalculator):

    def calculate(self, form) -> dict:
        if isinstance(form, DimensionForm):
            return self.from_dimensions(form)
        if isinstance(form, AreaForm):
            return self.from_area(form)
        raise TypeError(
            f"Unsupported calculation input: {type(form).__name__}. "
            "Expected DimensionForm or AreaForm."
        )

    def from_dimensions(self, form: DimensionForm) -> dict:
        work_levels = self.require_work_levels(form.work_levels)
        building_sides = self.require_building_sides(form.building_sides)
        sides = self._require_sides(form.sides, building_sides)
        frame, platform, system = self._resolve(form)

        if len(sides) == 1 and building_sides > 1:
            sides = sides * building_sides

        area = sum(s.width * s.height for s in sides)
        height = self._representative_height(sides)

        return self._size(
            side_lengths=[s.width for s in sides],
            height=height,
            area=area,
            frame=frame,
            platform=platform,
            system=system,
            work_levels=work_levels,
            building_sides=building_sides,
        )

    def from_area(self, form: AreaForm) -> dict:
        area = self.require_positive("area", form.area)
        height = self.require_at_most(
            "height", self.require_positive("height", form.height), MAX_HEIGHT_M)
        work_levels = self.require_work_levels(form.work_levels)
        building_sides = self.require_building_sides(form.building_sides)
        frame, platform, system = self._resolve(form)

        area_per_side = area / building_sides
        wall_length = self.require_at_most("area", area_per_side / height, MAX_WALL_LENGTH_M)

        return self._size(
            side_lengths=[wall_length] * building_sides,
            height=height,
            area=area,
            frame=frame,
            platform=platform,
            system=system,
            work_levels=work_levels,
            building_sides=building_sides,
        )

    # --- Shared sizing algorithm ---

    def _size(self, side_lengths, height, area, frame, platform, system,
              work_levels, building_sides) -> dict:
        """
        side_lengths holds one wall length per building side. Each side is
        framed on its own, so a short side never borrows frames from a long one.
        """
        policy = self.policy
        frame_width_m = self.cm_to_m(frame.width_cm)
        frame_height_m = self.cm_to_m(frame.height_cm)
        platform_length_m = self.cm_to_m(platform.length_cm)

        # One extra frame closes the span
        side_frames = [self.ceil_count(length / frame_width_m) + 1 for length in side_lengths]
        ground_frames = sum(side_frames)
        bays = ground_frames - building_sides

        wall_length = max(side_lengths)
        frames_per_side = max(side_frames)

        frame_levels = work_levels if policy.frames_per_level else 1
        frames = ground_frames * frame_levels

        cross_braces = bays * work_levels * CROSS_BRACES_PER_BAY
        platforms = bays * PLATFORMS_PER_BAY * work_levels

        # Ground row only
        base_plates = ground_frames
        screw_jacks = base_plates
        leg_holders = ground_frames

        guarded_levels = 1 if policy.guardrails_top_level_only else work_levels
        guardrails = ground_frames * guarded_levels
        side_guardrails = bays * SIDE_GUARDRAILS_PER_BAY * guarded_levels
        toe_boards = self.ceil_count(
            (side_guardrails + END_GUARDRAILS) / RAIL_SEGMENTS_PER_TOE_BOARD)

        outriggers = OUTRIGGERS_PER_SIDE * building_sides
        ladders = self.ceil_count(work_levels / LEVELS_PER_LADDER)
        wall_attachments = self.ceil_count(
            sum(side_lengths) / WALL_TIE_SPACING_M) * work_levels

        coverage = frame_width_m * platform_length_m * ground_frames

        quantities = {
            "frames": frames,
            "cross_braces": cross_braces,
            "base_plates": base_plates,
            "platforms": platforms,
            "screw_jacks": screw_jacks,
            "toe_boards": toe_boards,
            "outriggers": outriggers,
            "ladders": ladders,
            "guardrails": guardrails,
            "leg_holders": leg_holders,
            "wall_attachments": wall_attachments,
            "side_guardrails": side_guardrails,
        }

        spec_context = {
            "frame_name": frame.name,
            "frame_width_cm": frame.width_cm,
            "frame_height_cm": frame.height_cm,
            "platform_name": platform.name,
            "platform_length_cm": platform.length_cm,
        }
        components = self.ordered_components({
            kind: self.make_component_line(
                qty, system.specifications[kind].format(**spec_context))
            for kind, qty in quantities.items()
        })

        unit_weights = dict(system.unit_weights)
        unit_weights["frames"] = frame.weight_kg
        unit_weights["platforms"] = platform.weight_kg

        total_components = self.total_components(components)
        weight = self.total_weight_kg(components, unit_weights)

        logger.debug(
            "%s: wall=%.2fm height=%.2fm levels=%d sides=%d -> %d components, %d kg",
            system.key, wall_length, height, work_levels, building_sides,
            total_components, weight,
        )

        return {
            "system": system.key,
            "components": components,
            "total_components": total_components,
            "weight": weight,
            "load_capacity": system.load_capacity,
            "dimensions": f"{wall_length:.1f}m x {frame_width_m:.1f}m x {height:.1f}m",
            "area": round(area, 1),
            "scaffold_coverage": round(coverage, 2),
            "wall_length": round(wall_length, 2),
            "height": round(height, 2),
            "frames_per_side": frames_per_side,
            "bays_per_level": bays,
            "end_guardrails": END_GUARDRAILS,
            "wall_attachment_tie_brackets": wall_attachments,
            "frame_size": frame.name,
            "platform_length": platform.name,
            "work_levels": work_levels,
            "building_sides": building_sides,
            "safety_factor": system.safety_factor,
            "assumptions": self._assumptions(
                wall_length, height, frame_height_m, work_levels, building_sides),
        }

    # --- Input normalization ---

    def _resolve(self, form):
        return (
            get_frame(form.frame_size),
            get_platform(form.platform_length),
            get_system(form.system),
        )

    def _require_sides(self, sides, building_sides: int) -> list:
        if not isinstance(sides, (list, tuple)) or not sides:
            raise ValidationError("sides", "at least one side is required", sides)
        if len(sides) not in (1, building_sides):
            raise ValidationError(
                "sides",
                f"expected 1 or {building_sides} side measurements for "
                f"{building_sides} building side(s)",
                len(sides),
            )
        parsed = []
        for i, side in enumerate(sides):
            if isinstance(side, dict):
                width, height = side.get("width"), side.get("height")
            else:
                width = getattr(side, "width", None)
                height = getattr(side, "height", None)
            parsed.append(SideDimension(
                width=self.require_at_most(
                    f"sides[{i}].width",
                    self.require_positive(f"sides[{i}].width", width),
                    MAX_WALL_LENGTH_M,
                ),
                height=self.require_at_most(
                    f"sides[{i}].height",
                    self.require_positive(f"sides[{i}].height", height),
                    MAX_HEIGHT_M,
                ),
            ))
        return parsed

    def _representative_height(self, sides: list) -> float:
        heights = [s.height for s in sides]
        if not self.policy.uniform_height:
            return max(heights)
        first = heights[0]
        for i, h in enumerate(heights[1:], start=1):
            if abs(h - first) > HEIGHT_TOLERANCE_M:
                raise ValidationError(
                    f"sides[{i}].height",
                    f"all sides must share one height ({first:g} m)",
                    h,
                )
        return first

    def _assumptions(self, wall_length, height, frame_height_m,
                     work_levels, building_sides) -> list:
        lifts = math.ceil(round(height / frame_height_m, 9))
        assumptions = [
            "%d building side(s), longest side %.2f m, %.1f m working height." % (
                building_sides, wall_length, height),
            "Reaching %.1f m takes about %d lift(s) of %.2f m frames; "
            "%d work level(s) quantified." % (height, lifts, frame_height_m, work_levels),
        ]
        if self.policy.frames_per_level:
            assumptions.append("Frames counted per work level (one frame per lift).")
        else:
            assumptions.append("Frames counted once per vertical run.")
        if self.policy.guardrails_top_level_only:
            assumptions.append("Guardrails at the top working level only.")
        else:
            assumptions.append("Guardrails on every working level.")
        assumptions.append("Planning estimate only, not a certified structural design.")
        return assumptions
