"""Footstep sounds chosen by walking state, timing and the surface underfoot."""

from __future__ import annotations

import random
from dataclasses import dataclass
from enum import Enum

SURF_METAL = 0x1000
SURF_WOOD = 0x40000
SURF_SNOW = 0x400000

STEP_VARIANTS = 4
STEP_INTERVAL = 0.35
PITCH_LOW = 0.9
PITCH_HIGH = 1.1
STEP_PAN = 0.1


class Surface(Enum):
    """Kind of ground that picks a footstep sound set."""

    DEFAULT = "step"
    WOOD = "wood"
    SNOW = "snow"
    METAL = "clank"


def surface_from_flags(flags: int) -> Surface:
    """Map surface flags to a footstep set; wood wins over snow, snow over metal."""
    if flags & SURF_WOOD:
        return Surface.WOOD
    if flags & SURF_SNOW:
        return Surface.SNOW
    if flags & SURF_METAL:
        return Surface.METAL
    return Surface.DEFAULT


@dataclass(frozen=True)
class FootstepEvent:
    """One footstep to play: which sound, at what pitch and stereo pan."""

    surface: Surface
    step_id: int
    pitch: float
    pan: float

    @property
    def sound_name(self) -> str:
        """File stem of the sound, such as ``wood3``."""
        return f"{self.surface.value}{self.step_id + 1}"


class FootstepPlayer:
    """Decides when a footstep sounds while the player walks.

    A step sounds on the first update of a walk and then every time the step
    timer wraps past the interval. The same variant is never played twice in a
    row, and steps alternate between right and left.
    """

    def __init__(self, rng: random.Random | None = None) -> None:
        self.rng = rng if rng is not None else random.Random()
        self.step_timer = 0.0
        self.prev_step_id = -1
        self.is_right_step = True

    def _next_step_id(self) -> int:
        step_id = self.rng.randrange(STEP_VARIANTS)
        if step_id == self.prev_step_id:
            step_id = (step_id + 1) % STEP_VARIANTS
        self.prev_step_id = step_id
        return step_id

    def update(self, dt: float, walking: bool, surface_flags: int) -> FootstepEvent | None:
        """Advance by ``dt`` seconds; return the footstep to play, if any."""
        if not walking:
            self.step_timer = 0.0
            self.is_right_step = True
            return None

        event = None
        if self.step_timer == 0.0:
            step_id = self._next_step_id()
            pitch = PITCH_LOW + self.rng.random() * (PITCH_HIGH - PITCH_LOW)
            pan = STEP_PAN if self.is_right_step else -STEP_PAN
            event = FootstepEvent(surface_from_flags(surface_flags), step_id, pitch, pan)
            self.is_right_step = not self.is_right_step

        self.step_timer += dt
        if self.step_timer > STEP_INTERVAL:
            self.step_timer = 0.0
        return event