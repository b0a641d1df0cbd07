"""
LayoutConfig: the live, tunable parameters of the force simulation.

The force field reads the session's current record at the start of every
tick. Edits replace the whole record (see `adjusted`), so a tick never sees
a half-applied change.
"""

from __future__ import annotations
from dataclasses import dataclass, fields, replace


# Fields that may be changed interactively, scaled by step_factor per event
TUNABLE_FIELDS = ("spring_length", "spring_force", "spring_scale", "electric_force")


@dataclass(frozen=True)
class LayoutConfig:
    """Parameters of the spring/electric force model."""

    spring_length: float = 10.0  # Rest length: springs exert no force at this distance
    spring_force: float = 1.0  # Spring coefficient
    spring_scale: float = 1.0  # Divisor applied to the spring displacement
    electric_force: float = 1.0  # Inverse-square repulsion coefficient
    wall_repulsion: float = 1.0  # Inverse-square push away from each window edge
    step_factor: float = 1.2  # Multiplier used by interactive edits

    def __post_init__(self):
        if self.spring_length < 0:
            raise ValueError(f"spring_length must be >= 0, got {self.spring_length}")
        if self.spring_scale <= 0:
            raise ValueError(f"spring_scale must be > 0, got {self.spring_scale}")
        for name in ("spring_force", "electric_force", "wall_repulsion"):
            value = getattr(self, name)
            if value < 0:
                raise ValueError(f"{name} must be >= 0, got {value}")
        if self.step_factor <= 1:
            raise ValueError(f"step_factor must be > 1, got {self.step_factor}")

    def adjusted(self, name: str, increase: bool) -> LayoutConfig:
        """
        Return a copy with one tunable field multiplied or divided by step_factor.

        Args:
            name: One of TUNABLE_FIELDS
            increase: Multiply if True, divide if False
        """
        if name not in TUNABLE_FIELDS:
            raise ValueError(
                f"Unknown tunable field: {name} (expected one of {TUNABLE_FIELDS})"
            )
        value = getattr(self, name)
        new_value = value * self.step_factor if increase else value / self.step_factor
        return replace(self, **{name: new_value})

    def as_dict(self) -> dict[str, float]:
        return {f.name: getattr(self, f.name) for f in fields(self)}


# Key → (field, increase). Lower-case increases, upper-case decreases.
KEY_BINDINGS: dict[str, tuple[str, bool]] = {
    "l": ("spring_length", True),
    "L": ("spring_length", False),
    "k": ("spring_force", True),
    "K": ("spring_force", False),
    "s": ("spring_scale", True),
    "S": ("spring_scale", False),
    "e": ("electric_force", True),
    "E": ("electric_force", False),
}
