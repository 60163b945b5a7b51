from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Any, Literal

RGB = tuple[int, int, int]
HSL = tuple[float, float, float]
LAB = tuple[float, float, float]

PaintRole = Literal["primary", "neutral"]


@dataclass(frozen=True)
class PaletteColor:
    name: str
    hex: str
    role: PaintRole

    def to_dict(self) -> dict[str, Any]:
        return {"name": self.name, "hex": self.hex, "role": self.role}


@dataclass(frozen=True)
class MixtureComponent:
    name: str
    percentage: float
    hex: str

    def to_dict(self) -> dict[str, Any]:
        return {
            "name": self.name,
            "percentage": self.percentage,
            "hex": self.hex,
        }


@dataclass
class SearchResult:
    """Best mixture seen so far during one search."""

    components: list[MixtureComponent] = field(default_factory=list)
    mixed_color: str = ""
    distance: float = math.inf
    history: list[float] = field(default_factory=list)

    def offer(
        self, components: list[MixtureComponent], mixed_color: str, distance: float
    ) -> bool:
        if not distance < self.distance:
            return False
        self.components = list(components)
        self.mixed_color = mixed_color
        self.distance = float(distance)
        return True

    def percentages_by_name(self) -> dict[str, float]:
        return {component.name: component.percentage for component in self.components}


@dataclass(frozen=True)
class MixResult:
    target_color: str
    color_mix: list[MixtureComponent]
    mixed_color: str | None
    distance: float
    passes_run: int = 0
    pass_distances: tuple[float, ...] = ()

    @property
    def found(self) -> bool:
        return bool(self.color_mix) and self.mixed_color is not None

    def to_dict(self) -> dict[str, Any]:
        return {
            "target_color": self.target_color,
            "color_mix": [component.to_dict() for component in self.color_mix],
            "mixed_color": self.mixed_color,
            "distance": None if math.isinf(self.distance) else float(self.distance),
            "passes_run": int(self.passes_run),
            "pass_distances": [
                None if math.isinf(value) else float(value)
                for value in self.pass_distances
            ],
            "found": self.found,
        }
