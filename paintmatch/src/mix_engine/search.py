from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from typing import Iterator, Sequence

import numpy as np

from .conversions import hex_to_rgb, rgb_to_hex
from .distance import distances_to
from .mixing import mix_colors, mix_lattice
from .models import RGB, MixResult, MixtureComponent, SearchResult
from .palette import PAINT_COLORS, palette_rgb
from .validation import validate_mix

log = logging.getLogger(__name__)

TOTAL_PERCENT = 100

LatticePoint = tuple[int, int, int, int, int]


@dataclass(frozen=True)
class SearchPass:
    step: int
    window: int | None = None
    gate: float | None = None

    def should_run(self, best_distance: float) -> bool:
        return self.gate is None or best_distance > self.gate


DEFAULT_PASSES: tuple[SearchPass, ...] = (
    SearchPass(step=5),
    SearchPass(step=2, window=10, gate=15.0),
    SearchPass(step=1, window=5, gate=10.0),
)


def iter_lattice(
    step: int,
    center: Sequence[int] | None = None,
    window: int | None = None,
) -> Iterator[LatticePoint]:
    """Walk (c, m, y, w, k) percentage tuples that sum to 100.

    Each channel is bounded by the mass left after the channels before it and,
    when ``center`` is given, by ``center[i] +/- window``. Black is never
    stepped: it takes whatever mass is left.
    """
    if step < 1:
        raise ValueError("step must be a positive integer")
    if center is not None and window is None:
        raise ValueError("window is required when a center is given")

    def span(index: int, remaining: int) -> range:
        if center is None:
            return range(0, remaining + 1, step)
        base = int(center[index])
        return range(max(0, base - window), min(remaining, base + window) + 1, step)

    for c in span(0, TOTAL_PERCENT):
        for m in span(1, TOTAL_PERCENT - c):
            for y in span(2, TOTAL_PERCENT - c - m):
                rest = TOTAL_PERCENT - c - m - y
                for w in span(3, rest):
                    yield c, m, y, w, rest - w


class MixSearchEngine:
    def __init__(self, passes: Sequence[SearchPass] = DEFAULT_PASSES) -> None:
        if not passes:
            raise ValueError("at least one search pass is required")
        self.passes = tuple(passes)
        self._paint_rgb = palette_rgb()

    def run(self, target_hex: str) -> MixResult:
        target_rgb = hex_to_rgb(target_hex)
        target_color = rgb_to_hex(*target_rgb)
        best = SearchResult()
        passes_run = 0

        for number, search_pass in enumerate(self.passes, start=1):
            if not search_pass.should_run(best.distance):
                log.debug(
                    "skipping pass %d for %s: best distance %.3f <= %.1f",
                    number,
                    target_color,
                    best.distance,
                    search_pass.gate,
                )
                continue

            center = None
            if search_pass.window is not None:
                center = self._center_of(best)
            evaluated = self._run_pass(target_rgb, search_pass, center, best)
            passes_run += 1
            best.history.append(best.distance)
            log.debug(
                "pass %d for %s: step=%d candidates=%d best_distance=%.3f",
                number,
                target_color,
                search_pass.step,
                evaluated,
                best.distance,
            )

        return self._finalize(target_color, best, passes_run)

    def _run_pass(
        self,
        target_rgb: RGB,
        search_pass: SearchPass,
        center: LatticePoint | None,
        best: SearchResult,
    ) -> int:
        points = list(iter_lattice(search_pass.step, center, search_pass.window))
        if not points:
            return 0

        lattice = np.asarray(points, dtype=np.int64)
        mixed_rgb = mix_lattice(lattice, self._paint_rgb)
        distances = distances_to(target_rgb, mixed_rgb)

        # Ascending distance with ties in walk order: the first practical
        # candidate here is the one a sequential scan would have kept.
        for idx in np.argsort(distances, kind="stable"):
            distance = float(distances[idx])
            if not distance < best.distance:
                break
            components = self._components(lattice[idx])
            if validate_mix(components):
                best.offer(components, mix_colors(components), distance)
                break

        return len(points)

    @staticmethod
    def _components(point: np.ndarray) -> list[MixtureComponent]:
        return [
            MixtureComponent(name=paint.name, percentage=int(amount), hex=paint.hex)
            for paint, amount in zip(PAINT_COLORS, point)
            if amount > 0
        ]

    @staticmethod
    def _center_of(best: SearchResult) -> LatticePoint:
        by_name = best.percentages_by_name()
        c, m, y, w, k = (int(round(by_name.get(paint.name, 0))) for paint in PAINT_COLORS)
        return c, m, y, w, k

    @staticmethod
    def _finalize(target_color: str, best: SearchResult, passes_run: int) -> MixResult:
        if not best.components:
            log.warning("no practical mixture found for %s", target_color)
            return MixResult(
                target_color=target_color,
                color_mix=[],
                mixed_color=None,
                distance=math.inf,
                passes_run=passes_run,
                pass_distances=tuple(best.history),
            )

        color_mix = [
            MixtureComponent(
                name=component.name,
                percentage=int(round(component.percentage)),
                hex=component.hex,
            )
            for component in best.components
        ]
        return MixResult(
            target_color=target_color,
            color_mix=color_mix,
            mixed_color=best.mixed_color,
            distance=best.distance,
            passes_run=passes_run,
            pass_distances=tuple(best.history),
        )


def find_best_color_mix(target_hex: str) -> MixResult:
    """Best practical mix of the base paints for ``target_hex`` (6-digit hex)."""
    return MixSearchEngine().run(target_hex)
