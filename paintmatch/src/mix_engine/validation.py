from __future__ import annotations

from typing import Sequence

from .models import MixtureComponent
from .palette import BLACK, CYAN, MAGENTA, PRIMARY_NAMES, WHITE, YELLOW

MIN_COMPONENT_PERCENT = 1
MAX_COMPONENTS = 3
MAX_WHITE_PERCENT = 50
MAX_BLACK_PERCENT = 20
MAX_NEUTRAL_PERCENT = 60

ADJACENT_PRIMARY_PAIRS = frozenset(
    {
        frozenset({CYAN.name, MAGENTA.name}),
        frozenset({MAGENTA.name, YELLOW.name}),
        frozenset({YELLOW.name, CYAN.name}),
    }
)


def validate_mix(components: Sequence[MixtureComponent]) -> bool:
    """Return True when a painter would actually mix this recipe."""
    return not mix_violations(components)


def mix_violations(components: Sequence[MixtureComponent]) -> list[str]:
    violations: list[str] = []

    if any(component.percentage < MIN_COMPONENT_PERCENT for component in components):
        violations.append("impractical_percentage")
    if len(components) > MAX_COMPONENTS:
        violations.append("too_many_colors")

    names = [component.name for component in components]
    if WHITE.name in names and BLACK.name in names:
        violations.append("white_and_black")

    primaries = [name for name in names if name in PRIMARY_NAMES]
    if not primaries:
        violations.append("no_primary")
    # Any two of the three primaries form an adjacent pair, so this never
    # fires. Mixes with all three primaries are accepted.
    if len(primaries) == 2 and frozenset(primaries) not in ADJACENT_PRIMARY_PAIRS:
        violations.append("non_adjacent_primaries")

    white = _percentage_of(components, WHITE.name)
    black = _percentage_of(components, BLACK.name)
    if white >= MAX_WHITE_PERCENT:
        violations.append("too_much_white")
    if black >= MAX_BLACK_PERCENT:
        violations.append("too_much_black")
    if white + black >= MAX_NEUTRAL_PERCENT:
        violations.append("too_much_neutral")

    return violations


def _percentage_of(components: Sequence[MixtureComponent], name: str) -> float:
    for component in components:
        if component.name == name:
            return component.percentage
    return 0
